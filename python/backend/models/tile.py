"""Tile model for the edge-matching puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.config import SIDES, TILE_LENGTH
from backend.errors import ConfigurationError


class Color(StrEnum):
    R = "R"
    G = "G"
    B = "B"
    Y = "Y"


class Side:
    """Logical side indices, clockwise from the top."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


Edge = tuple[Color, Color]


@dataclass(eq=False)
class Tile:
    """A square tile with a two-color pattern on each of its four sides.

    ``shape`` lists the 8 colors clockwise starting at the top-left corner,
    two per side: top, right, bottom, left. ``rotation`` counts clockwise
    quarter turns from that canonical orientation, so under rotation ``r``
    the logical side ``n`` shows canonical side ``(n - r) % 4``.
    """

    shape: tuple[Color, ...]
    id: int = 0
    rotation: int = 0

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_string(cls, text: str, tile_id: int = 0) -> Tile:
        """Create a tile from an 8-symbol color string.

        Example::

            Tile.from_string("GBRYGRYB")
        """
        if len(text) != TILE_LENGTH:
            raise ConfigurationError(
                f"Tile should be {TILE_LENGTH} colors long, got {len(text)} "
                f"({text!r})."
            )
        try:
            shape = tuple(Color(c) for c in text)
        except ValueError:
            bad = next(c for c in text if c not in Color.__members__)
            raise ConfigurationError(
                f"Unknown color {bad!r} in tile {text!r}; "
                f"expected one of {''.join(Color)}."
            ) from None
        return cls(shape=shape, id=tile_id)

    def to_string(self) -> str:
        return "".join(self.shape)

    # -- geometry -------------------------------------------------------------

    def side(self, n: int, rotation: int | None = None) -> Edge:
        """Return the two colors on logical side *n*.

        Uses the committed rotation unless *rotation* is given.
        """
        if rotation is None:
            rotation = self.rotation
        k = (n - rotation) % SIDES
        return self.shape[2 * k], self.shape[2 * k + 1]

    def set_rotation(self, rotation: int) -> None:
        self.rotation = rotation

    # -- matching -------------------------------------------------------------

    def matches_placed(self, other: Tile, side: int) -> bool:
        """Check side *side* of this tile against the facing side of *other*.

        Both tiles are taken at their committed rotations. The facing side
        is read in the opposite direction, hence the reversal.
        """
        return self.side(side) == other.side(side + 2)[::-1]

    def matches_hypothetical(self, other: Tile, side: int, rotation: int) -> bool:
        """Like :meth:`matches_placed`, with *other* turned to *rotation*.

        *other* is not modified.
        """
        return self.side(side) == other.side(side + 2, rotation)[::-1]

    def __str__(self) -> str:
        return f"({self.id + 1}: {self.rotation})"
