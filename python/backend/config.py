"""Defaults shared across the solver, generator and frontends.

Command-line options override these per run.
"""

from __future__ import annotations

import logging

# -- grid ---------------------------------------------------------------------

DEFAULT_WIDTH: int = 5
DEFAULT_HEIGHT: int = 5

# Number of colors on each tile (4 sides x 2 colors).
TILE_LENGTH: int = 8
SIDES: int = 4

# -- rendering ----------------------------------------------------------------

CELL_SEPARATOR: str = "\t"

# -- logging ------------------------------------------------------------------

LOGGER_NAME: str = "edgepuzzle"
LOG_LEVEL: int = logging.INFO
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# Emit a DEBUG progress line every this many search steps.
PROGRESS_INTERVAL: int = 100_000

