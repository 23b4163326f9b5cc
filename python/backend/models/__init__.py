from backend.models.board import Board, Placement
from backend.models.puzzlefile import PuzzleSpec, load_puzzle, save_puzzle
from backend.models.tile import Color, Side, Tile

__all__ = [
    "Board",
    "Color",
    "Placement",
    "PuzzleSpec",
    "Side",
    "Tile",
    "load_puzzle",
    "save_puzzle",
]
