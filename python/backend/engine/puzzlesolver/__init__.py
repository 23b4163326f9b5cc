from backend.engine.puzzlesolver.solver import (
    CellStatus,
    Frame,
    Outcome,
    SolveResult,
    Solver,
)

__all__ = ["CellStatus", "Frame", "Outcome", "SolveResult", "Solver"]
