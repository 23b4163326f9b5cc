"""Puzzle file persistence (JSON)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from backend.errors import ConfigurationError
from backend.models.board import Board


@dataclass
class PuzzleSpec:
    """Dimensions plus tile strings, in the order ids are assigned."""

    width: int
    height: int
    tiles: list[str] = field(default_factory=list)

    def build(self) -> Board:
        return Board.from_strings(self.width, self.height, self.tiles)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "tiles": self.tiles}

    @classmethod
    def from_dict(cls, data: dict) -> PuzzleSpec:
        try:
            width = data["width"]
            height = data["height"]
            tiles = data["tiles"]
        except (KeyError, TypeError) as exc:
            raise ConfigurationError(f"Puzzle data is missing {exc}.") from None
        if not isinstance(width, int) or not isinstance(height, int):
            raise ConfigurationError("Puzzle width and height must be integers.")
        if not isinstance(tiles, list) or not all(isinstance(t, str) for t in tiles):
            raise ConfigurationError("Puzzle tiles must be a list of strings.")
        return cls(width=width, height=height, tiles=list(tiles))


def load_puzzle(filepath: Path) -> PuzzleSpec:
    """Read a puzzle from *filepath*.

    The file looks like::

        {"width": 2, "height": 1, "tiles": ["RGBYRGBY", "YBGRYBGR"]}
    """
    try:
        data = json.loads(filepath.read_text())
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {filepath}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{filepath} is not valid JSON: {exc}") from exc
    return PuzzleSpec.from_dict(data)


def save_puzzle(filepath: Path, puzzle: PuzzleSpec) -> None:
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(json.dumps(puzzle.to_dict(), indent=2) + "\n")
    except OSError as exc:
        raise ConfigurationError(f"Cannot write {filepath}: {exc}") from exc
