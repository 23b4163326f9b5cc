"""Plain text frontend — no third-party dependencies.

Prints one line per row, cells separated by a tab, each cell as
``(tile number: rotation)`` with tile numbers counted from 1.
"""

from __future__ import annotations

import sys

from backend import config
from backend.engine.puzzlesolver import SolveResult
from backend.models.board import Board


def render(board: Board) -> str:
    """Return the text rendering of a fully placed board."""
    lines: list[str] = []
    for y in range(board.height):
        cells = [str(board.tile_at(x, y)) for x in range(board.width)]
        lines.append(config.CELL_SEPARATOR.join(cells) + config.CELL_SEPARATOR)
    return "\n".join(lines) + "\n"


def run(board: Board, result: SolveResult) -> None:
    if not result:
        print(f"No solution ({result.outcome.value}).", file=sys.stderr)
        return
    sys.stdout.write(render(board))
    sys.stdout.flush()
