#!/usr/bin/env python3
"""Edge-Matching Puzzle Solver.

Usage::

    python main.py                          # built-in 5×5 puzzle
    python main.py -f rich --seed 7         # shuffled, Rich table output
    python main.py -p puzzle.json           # puzzle from a JSON file
    python main.py --generate -w 4 -H 3     # random 4×3 puzzle
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend import config  # noqa: E402
from backend.engine.puzzlegenerator import PuzzleGenerator  # noqa: E402
from backend.engine.puzzlesolver import Solver  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from backend.logging_utils import set_level  # noqa: E402
from backend.models.puzzlefile import (  # noqa: E402
    PuzzleSpec,
    load_puzzle,
    save_puzzle,
)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _load(
    puzzle: Optional[Path], generate: bool, width: int, height: int,
    seed: Optional[int],
) -> PuzzleSpec:
    if generate:
        return PuzzleGenerator.generate(width, height, seed)
    spec = load_puzzle(puzzle) if puzzle is not None else PuzzleGenerator.default()
    if seed is not None:
        spec = PuzzleGenerator.shuffle(spec, seed)
    return spec


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solved grid.",
    ),
    puzzle: Optional[Path] = typer.Option(
        None, "-p", "--puzzle",
        exists=True, dir_okay=False,
        help="JSON puzzle file. Omit for the built-in 5×5 puzzle.",
    ),
    generate: bool = typer.Option(
        False, "--generate",
        help="Solve a random puzzle of --width × --height.",
    ),
    width: int = typer.Option(
        config.DEFAULT_WIDTH, "-w", "--width", min=1,
        help="Width of a generated puzzle.",
    ),
    height: int = typer.Option(
        config.DEFAULT_HEIGHT, "-H", "--height", min=1,
        help="Height of a generated puzzle.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --generate, or shuffle the tiles with this seed.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0,
        help="Give up after this many seconds.",
    ),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps", min=1,
        help="Give up after this many search steps.",
    ),
    save: Optional[Path] = typer.Option(
        None, "--save", dir_okay=False,
        help="Write the puzzle to this JSON file before solving.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Edge-Matching Puzzle Solver."""
    set_level(logging.DEBUG if verbose else logging.WARNING)

    try:
        spec = _load(puzzle, generate, width, height, seed)
        if save is not None:
            save_puzzle(save, spec)
        board = spec.build()
    except PuzzleError as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)

    result = Solver(board, timeout=timeout, max_steps=max_steps).solve()

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, result)

    if not result:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
