"""Shared puzzles for the test suite."""

from __future__ import annotations

import pytest

# Four tiles that only fit together one way, up to turning the whole grid.
# Every outer edge is B, Y, which nothing matches.
UNIQUE_2X2: list[str] = [
    "BYRGRBBY",
    "BYBYRYGR",
    "BRGBBYBY",
    "YRBYBYBG",
]

# No side of one can face any side of the other.
INCOMPATIBLE_2X1: list[str] = ["RRRRRRRR", "GGGGGGGG"]


@pytest.fixture
def unique_2x2() -> list[str]:
    return UNIQUE_2X2[:]


@pytest.fixture
def incompatible_2x1() -> list[str]:
    return INCOMPATIBLE_2X1[:]
