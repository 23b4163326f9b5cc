"""Rendering tests for the terminal frontends."""

from __future__ import annotations

from rich.console import Console

from backend.engine.puzzlesolver import Solver
from backend.models.board import Board
from frontend.cli.rich import app as rich_app
from frontend.cli.vanilla import app as vanilla_app


def _solved(tiles: list[str]) -> Board:
    board = Board.from_strings(2, 2, tiles)
    assert Solver(board).solve()
    return board


def test_vanilla_render(unique_2x2: list[str]) -> None:
    board = _solved(unique_2x2)
    assert vanilla_app.render(board) == "(1: 0)\t(2: 0)\t\n(3: 0)\t(4: 0)\t\n"


def test_vanilla_run_prints_nothing_on_failure(
    capsys, incompatible_2x1: list[str]
) -> None:
    board = Board.from_strings(2, 1, incompatible_2x1)
    result = Solver(board).solve()
    vanilla_app.run(board, result)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No solution" in captured.err


def test_rich_table_shape(unique_2x2: list[str]) -> None:
    board = _solved(unique_2x2)
    table = rich_app.render_board(board)
    assert len(table.columns) == 2
    assert table.row_count == 2

    console = Console(width=80, record=True, color_system=None)
    console.print(table)
    text = console.export_text()
    for n in range(1, 5):
        assert f"{n}:0" in text
