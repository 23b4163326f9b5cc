"""Board model for the edge-matching puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from backend.config import SIDES
from backend.errors import ConfigurationError, DimensionMismatchError
from backend.models.tile import Edge, Side, Tile

Placement = tuple[int, int]  # (tile id, rotation)


class Board:
    """Owns the tile pool and the grid of cell assignments.

    Cells are addressed row-major: index ``i`` is ``(i % width, i // width)``.
    Each cell holds ``None`` or the id of the tile placed there. Tile ids
    are their positions in the pool, so ``tiles[tile_id]`` is the tile.
    """

    def __init__(self, width: int, height: int, tiles: Sequence[Tile]) -> None:
        if width < 1 or height < 1:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {width}×{height}."
            )
        if len(tiles) != width * height:
            raise DimensionMismatchError(width, height, len(tiles))

        self.width = width
        self.height = height
        self.tiles: list[Tile] = [
            Tile(shape=tile.shape, id=i) for i, tile in enumerate(tiles)
        ]
        self.cells: list[int | None] = [None] * (width * height)
        self._used: list[bool] = [False] * len(self.tiles)

        # Every side of every tile under every rotation, and the placements
        # grouped by the edge they show on the left and on top.
        self._edges: list[list[tuple[Edge, ...]]] = [
            [tuple(tile.side(n, rot) for n in range(SIDES))
             for rot in range(SIDES)]
            for tile in self.tiles
        ]
        self._by_left: dict[Edge, list[Placement]] = {}
        self._by_top: dict[Edge, list[Placement]] = {}
        for tile_id, rotations in enumerate(self._edges):
            for rot, edges in enumerate(rotations):
                placement = (tile_id, rot)
                self._by_left.setdefault(edges[Side.LEFT], []).append(placement)
                self._by_top.setdefault(edges[Side.TOP], []).append(placement)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_strings(cls, width: int, height: int, tiles: Iterable[str]) -> Board:
        """Create a board from 8-symbol tile strings, ids in list order.

        Example::

            Board.from_strings(1, 2, ["RGBYRGBY", "YBGRYBGR"])
        """
        return cls(width, height, [Tile.from_string(t) for t in tiles])

    # -- geometry -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    def pos(self, index: int) -> tuple[int, int]:
        return index % self.width, index // self.width

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    # -- queries --------------------------------------------------------------

    def tile_at(self, x: int, y: int) -> Tile | None:
        tile_id = self.cells[self.index(x, y)]
        if tile_id is None:
            return None
        return self.tiles[tile_id]

    def is_used(self, tile_id: int) -> bool:
        return self._used[tile_id]

    def placements(self) -> list[Placement | None]:
        """Return ``(tile id, rotation)`` per cell, ``None`` for empty cells."""
        return [
            None if tile_id is None else (tile_id, self.tiles[tile_id].rotation)
            for tile_id in self.cells
        ]

    def candidates(self, index: int) -> list[Placement]:
        """Return every placement that fits cell *index*.

        Only the left and top neighbours are checked; the search fills cells
        in index order so those are the only ones already decided. A
        candidate fits when the edge it shows towards a neighbour is that
        neighbour's facing edge reversed. Results are ordered by tile id,
        then rotation.
        """
        x, y = self.pos(index)
        left_id = self.cells[index - 1] if x > 0 else None
        top_id = self.cells[index - self.width] if y > 0 else None
        used = self._used

        if left_id is None and top_id is None:
            return [
                (tile_id, rot)
                for tile_id in range(len(self.tiles))
                if not used[tile_id]
                for rot in range(SIDES)
            ]

        if left_id is None:
            want_top = self._facing(top_id, Side.BOTTOM)
            return [p for p in self._by_top.get(want_top, ()) if not used[p[0]]]

        want_left = self._facing(left_id, Side.RIGHT)
        options = [p for p in self._by_left.get(want_left, ()) if not used[p[0]]]
        if top_id is None:
            return options

        want_top = self._facing(top_id, Side.BOTTOM)
        edges = self._edges
        return [p for p in options if edges[p[0]][p[1]][Side.TOP] == want_top]

    def _facing(self, tile_id: int, side: int) -> Edge:
        """The edge a neighbour must show to match *side* of a placed tile."""
        rotation = self.tiles[tile_id].rotation % SIDES
        return self._edges[tile_id][rotation][side][::-1]

    def is_solved(self) -> bool:
        """Check every cell is filled, once per tile, and all edges match."""
        if any(tile_id is None for tile_id in self.cells):
            return False
        if len(set(self.cells)) != len(self.cells):
            return False
        for y in range(self.height):
            for x in range(self.width):
                tile = self.tile_at(x, y)
                if x + 1 < self.width and not tile.matches_placed(
                    self.tile_at(x + 1, y), Side.RIGHT
                ):
                    return False
                if y + 1 < self.height and not tile.matches_placed(
                    self.tile_at(x, y + 1), Side.BOTTOM
                ):
                    return False
        return True

    # -- mutation -------------------------------------------------------------

    def place(self, index: int, tile_id: int, rotation: int) -> None:
        """Put tile *tile_id* in cell *index*, turned to *rotation*.

        A tile already in the cell is released first.
        """
        self.unplace(index)
        self.tiles[tile_id].set_rotation(rotation)
        self.cells[index] = tile_id
        self._used[tile_id] = True

    def unplace(self, index: int) -> None:
        """Empty cell *index*. The released tile keeps its rotation."""
        tile_id = self.cells[index]
        if tile_id is not None:
            self._used[tile_id] = False
            self.cells[index] = None

    def clear(self) -> None:
        for i in range(self.size):
            self.unplace(i)
