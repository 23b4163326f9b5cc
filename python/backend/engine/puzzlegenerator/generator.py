"""Built-in and randomly generated edge-matching puzzles."""

from __future__ import annotations

import random

from backend import config
from backend.logging_utils import get_logger
from backend.models.puzzlefile import PuzzleSpec
from backend.models.tile import Color, Side

log = get_logger("generator")

# 25 interlocking tiles for the 5×5 board.
DEFAULT_TILES: tuple[str, ...] = (
    "GBRYGRYB", "RBYGRYGB", "RGYGBRYB", "RBGYRGYB", "YRGRBYGB",
    "GRBRYGBY", "GRYRBGYB", "BRGRYBGY", "BRGYBGYR", "BRYRGBYG",
    "RGBGYRBY", "BGYGRBYR", "GRYBGBRY", "BGRGYBRY", "YGBGRYBR",
    "YGRGBYRB", "GBYRGYRB", "YBRGYRGB", "YBGRYGRB", "RYBYGRBG",
    "RYGYBRGB", "BYRYGBRG", "GYBYRGBR", "BYGYRBGR", "GYRYBGRB",
)


class PuzzleGenerator:
    """Creates puzzles: the built-in set, or random solvable ones."""

    @staticmethod
    def default() -> PuzzleSpec:
        """Return the built-in 5×5 puzzle in its shipped order."""
        return PuzzleSpec(width=5, height=5, tiles=list(DEFAULT_TILES))

    @staticmethod
    def shuffle(puzzle: PuzzleSpec, seed: int | None = None) -> PuzzleSpec:
        """Return a copy of *puzzle* with its tiles in a random order."""
        rng = random.Random(seed)
        tiles = puzzle.tiles[:]
        rng.shuffle(tiles)
        log.debug("Shuffled %d tiles with seed %s", len(tiles), seed)
        return PuzzleSpec(width=puzzle.width, height=puzzle.height, tiles=tiles)

    @staticmethod
    def generate(width: int, height: int, seed: int | None = None) -> PuzzleSpec:
        """Return a random puzzle that has at least one solution.

        Edges are drawn for a solved grid first; the tiles are then turned
        by a random number of quarter turns and shuffled.
        """
        rng = random.Random(seed)
        log.debug("Generating %d×%d puzzle with seed %s", width, height, seed)

        grid = PuzzleGenerator.solved(width, height, rng)
        tiles = [PuzzleGenerator._turn(sides, rng.randrange(config.SIDES))
                 for sides in grid]
        rng.shuffle(tiles)
        return PuzzleSpec(width=width, height=height, tiles=tiles)

    @staticmethod
    def solved(
        width: int, height: int, rng: random.Random
    ) -> list[list[tuple[Color, Color]]]:
        """Return the four sides of every tile of a solved grid, row-major."""
        grid = [[PuzzleGenerator._edge(rng) for _ in range(config.SIDES)]
                for _ in range(width * height)]

        # Neighbours read a shared edge in opposite directions.
        for y in range(height):
            for x in range(width):
                i = y * width + x
                if x + 1 < width:
                    grid[i + 1][Side.LEFT] = grid[i][Side.RIGHT][::-1]
                if y + 1 < height:
                    grid[i + width][Side.TOP] = grid[i][Side.BOTTOM][::-1]
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _edge(rng: random.Random) -> tuple[Color, Color]:
        colors = list(Color)
        return rng.choice(colors), rng.choice(colors)

    @staticmethod
    def _turn(sides: list[tuple[Color, Color]], turns: int) -> str:
        turned = sides[turns:] + sides[:turns]
        return "".join(c for side in turned for c in side)
