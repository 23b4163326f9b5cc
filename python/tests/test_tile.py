"""Tile geometry and edge-matching tests."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.puzzlegenerator import DEFAULT_TILES
from backend.errors import ConfigurationError
from backend.models.tile import Color, Side, Tile

R, G, B, Y = Color.R, Color.G, Color.B, Color.Y


# -- construction -------------------------------------------------------------


def test_from_string_reads_colors_in_order() -> None:
    tile = Tile.from_string("RGBYRGBY", tile_id=3)
    assert tile.shape == (R, G, B, Y, R, G, B, Y)
    assert tile.id == 3
    assert tile.rotation == 0
    assert tile.to_string() == "RGBYRGBY"


@pytest.mark.parametrize("text", ["", "RGBYRGB", "RGBYRGBYR"],
                         ids=["empty", "short", "long"])
def test_from_string_rejects_wrong_length(text: str) -> None:
    with pytest.raises(ConfigurationError, match="8 colors long"):
        Tile.from_string(text)


@pytest.mark.parametrize("text", ["RGBYRGBX", "rgbyrgby", "RGBY RGB"])
def test_from_string_rejects_unknown_color(text: str) -> None:
    with pytest.raises(ConfigurationError, match="Unknown color"):
        Tile.from_string(text)


# -- sides --------------------------------------------------------------------


def test_sides_at_canonical_rotation() -> None:
    tile = Tile.from_string("RGBYGRYB")
    assert tile.side(Side.TOP) == (R, G)
    assert tile.side(Side.RIGHT) == (B, Y)
    assert tile.side(Side.BOTTOM) == (G, R)
    assert tile.side(Side.LEFT) == (Y, B)


def test_clockwise_turn_moves_top_to_right() -> None:
    tile = Tile.from_string("RGBYGRYB")
    tile.set_rotation(1)
    assert tile.side(Side.RIGHT) == (R, G)
    assert tile.side(Side.BOTTOM) == (B, Y)
    assert tile.side(Side.LEFT) == (G, R)
    assert tile.side(Side.TOP) == (Y, B)


def test_side_index_wraps_modulo_four() -> None:
    tile = Tile.from_string("RGBYGRYB")
    for n in range(4):
        assert tile.side(n + 4) == tile.side(n)
        assert tile.side(n, 4) == tile.side(n, 0)
        assert tile.side(n, 5) == tile.side(n, 1)


def test_hypothetical_side_leaves_rotation_alone() -> None:
    tile = Tile.from_string("RGBYGRYB")
    tile.set_rotation(2)
    assert tile.side(Side.TOP, 0) == (R, G)
    assert tile.rotation == 2


# -- matching -----------------------------------------------------------------


def test_matching_reverses_the_facing_side() -> None:
    left = Tile.from_string("YYRGYYYY")   # right side reads R, G downwards
    right = Tile.from_string("YYYYYYGR")  # left side reads G, R upwards
    assert left.matches_placed(right, Side.RIGHT)
    assert right.matches_placed(left, Side.LEFT)

    same = Tile.from_string("YYYYYYRG")
    assert not left.matches_placed(same, Side.RIGHT)


def test_matching_is_symmetric() -> None:
    a = Tile.from_string(DEFAULT_TILES[0])
    b = Tile.from_string(DEFAULT_TILES[1])
    for ra, rb, side in itertools.product(range(4), range(4), range(4)):
        a.set_rotation(ra)
        b.set_rotation(rb)
        assert a.matches_placed(b, side) == b.matches_placed(a, side + 2)


@pytest.mark.parametrize("pair", [(0, 1), (3, 12), (7, 7), (20, 24)], ids=str)
def test_hypothetical_agrees_with_committed(pair: tuple[int, int]) -> None:
    a = Tile.from_string(DEFAULT_TILES[pair[0]])
    b = Tile.from_string(DEFAULT_TILES[pair[1]])
    for ra, side, rot in itertools.product(range(4), range(4), range(4)):
        a.set_rotation(ra)
        b.set_rotation(0)
        expected = a.matches_hypothetical(b, side, rot)
        assert b.rotation == 0
        b.set_rotation(rot)
        assert a.matches_placed(b, side) == expected


def test_str_shows_one_based_id_and_rotation() -> None:
    tile = Tile.from_string("RGBYRGBY", tile_id=4)
    tile.set_rotation(3)
    assert str(tile) == "(5: 3)"
