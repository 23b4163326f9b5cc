"""Edge-matching puzzle solver.

Depth-first backtracking over cells in index order, kept iterative: the
search depth is the ``index_at`` cursor and every cell has its own frame
of untried candidates, so grid size is not limited by the call stack.

  - Generate: a cell's frame is filled from ``Board.candidates`` the first
    time the cursor reaches it.
  - Try: the next candidate is placed and the cursor moves forward.
  - Exhausted: the cell is emptied, its frame reset, and the cursor moves
    back; the previous cell resumes its own partially consumed frame.

A cell only depends on cells with smaller indices, so its frame stays
valid for as long as it is the frontier.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum

from backend import config
from backend.logging_utils import get_logger
from backend.models.board import Board, Placement

log = get_logger("solver")


class CellStatus(StrEnum):
    PENDING = "pending"
    OPEN = "open"
    EXHAUSTED = "exhausted"


class Outcome(StrEnum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    CANCELLED = "cancelled"


@dataclass
class Frame:
    """Untried candidates for one cell, in the order they will be tried."""

    _stack: list[Placement] | None = None

    @property
    def status(self) -> CellStatus:
        if self._stack is None:
            return CellStatus.PENDING
        if self._stack:
            return CellStatus.OPEN
        return CellStatus.EXHAUSTED

    def fill(self, candidates: list[Placement]) -> None:
        # Reversed so pop() hands them out in enumeration order.
        self._stack = candidates[::-1]

    def pop(self) -> Placement:
        assert self._stack, "pop() on a frame with no candidates"
        return self._stack.pop()

    def reset(self) -> None:
        self._stack = None

    def __len__(self) -> int:
        return len(self._stack) if self._stack else 0


@dataclass
class SolveResult:
    outcome: Outcome
    steps: int = 0
    elapsed: float = 0.0
    placements: list[Placement] | None = field(default=None)

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    def __bool__(self) -> bool:
        return self.solved


class Solver:
    """Finds the first arrangement of *board*'s tiles in which all edges match.

    ``timeout`` (seconds) and ``max_steps`` bound a single :meth:`solve`
    call. A cancelled search keeps its state; calling :meth:`solve` again
    continues where it stopped.
    """

    def __init__(
        self,
        board: Board,
        timeout: float | None = None,
        max_steps: int | None = None,
    ) -> None:
        self.board = board
        self.timeout = timeout
        self.max_steps = max_steps
        self.index_at = 0
        self.frames: list[Frame] = [Frame() for _ in range(board.size)]

    def solve(self) -> SolveResult:
        """Run the search until solved, exhausted or cancelled."""
        board = self.board
        n = board.size
        start = time.monotonic()
        deadline = None if self.timeout is None else start + self.timeout
        steps = 0

        log.debug(
            "Solving %d×%d board from cell %d", board.width, board.height,
            self.index_at,
        )

        while True:
            if self.index_at == n:
                outcome = Outcome.SOLVED
                break

            frame = self.frames[self.index_at]
            status = frame.status

            if status is CellStatus.EXHAUSTED:
                if self.index_at == 0:
                    outcome = Outcome.NO_SOLUTION
                    break
                board.unplace(self.index_at)
                frame.reset()
                self.index_at -= 1
                continue

            if self.max_steps is not None and steps >= self.max_steps:
                outcome = Outcome.CANCELLED
                break
            if deadline is not None and time.monotonic() >= deadline:
                outcome = Outcome.CANCELLED
                break

            steps += 1
            if steps % config.PROGRESS_INTERVAL == 0:
                log.debug("Step %d, depth %d/%d", steps, self.index_at, n)

            if status is CellStatus.PENDING:
                frame.fill(board.candidates(self.index_at))
            else:
                tile_id, rotation = frame.pop()
                board.place(self.index_at, tile_id, rotation)
                self.index_at += 1

        elapsed = time.monotonic() - start
        result = SolveResult(outcome=outcome, steps=steps, elapsed=elapsed)
        if outcome is Outcome.SOLVED:
            result.placements = board.placements()
        elif outcome is Outcome.NO_SOLUTION:
            board.clear()
            self.frames[0].reset()

        level = logging.DEBUG if outcome is Outcome.CANCELLED else logging.INFO
        log.log(
            level, "Search %s after %d steps in %.3fs", outcome.value, steps,
            elapsed,
        )
        return result
