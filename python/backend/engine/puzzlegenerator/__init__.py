from backend.engine.puzzlegenerator.generator import DEFAULT_TILES, PuzzleGenerator

__all__ = ["DEFAULT_TILES", "PuzzleGenerator"]
