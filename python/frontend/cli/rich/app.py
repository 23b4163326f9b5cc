"""Rich terminal frontend — the solved grid as a styled table."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.puzzlesolver import SolveResult
from backend.models.board import Board
from backend.models.tile import Color, Side

console = Console()

_STYLES = {
    Color.R: "bold red",
    Color.G: "bold green",
    Color.B: "bold blue",
    Color.Y: "bold yellow",
}


# -- board rendering ----------------------------------------------------------


def _edge(colors: tuple[Color, ...]) -> Text:
    text = Text()
    for c in colors:
        text.append(c.value, style=_STYLES[c])
    return text


def _cell(board: Board, x: int, y: int) -> Text:
    """Tile number and rotation, framed by its top/left/right/bottom edges."""
    tile = board.tile_at(x, y)
    text = Text(justify="center")
    text.append(" ")
    text.append_text(_edge(tile.side(Side.TOP)))
    text.append(" \n")
    # Left and bottom edges read counter-clockwise on screen.
    text.append_text(_edge(tile.side(Side.LEFT)[::-1]))
    text.append(f" {tile.id + 1:>2}:{tile.rotation} ", style="bold white")
    text.append_text(_edge(tile.side(Side.RIGHT)))
    text.append("\n ")
    text.append_text(_edge(tile.side(Side.BOTTOM)[::-1]))
    text.append(" ")
    return text


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the solved grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(justify="center")

    for y in range(board.height):
        table.add_row(*(_cell(board, x, y) for x in range(board.width)))

    return table


# -- entry point --------------------------------------------------------------


def run(board: Board, result: SolveResult) -> None:
    stats = Text()
    stats.append("  Steps: ", style="dim")
    stats.append(f"{result.steps:,}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.elapsed:.3f}s", style="bold yellow")

    if not result:
        panel = Panel(
            Group(Text(f"No solution ({result.outcome.value}).", style="red"),
                  stats),
            title="[bold red]Edge Puzzle[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        console.print(Align.center(panel))
        return

    panel = Panel(
        Group(Align.center(render_board(board)), Text(""), Align.center(stats)),
        title=(
            f"[bold cyan]Edge Puzzle  {board.width}×{board.height}"
            "[/bold cyan]"
        ),
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
