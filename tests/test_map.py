import pytest

from retro_dungeon.dungeon import TILES, Map, TileType
from tests.dungeon_test_utils import snapshot

CANONICAL = {
    TileType.FLOOR: (".", True),
    TileType.WALL: ("#", False),
    TileType.DOOR: ("+", True),
    TileType.STAIRS_UP: ("<", True),
    TileType.STAIRS_DOWN: (">", True),
    TileType.TRAP: ("^", True),
}


def test_new_map_is_all_wall():
    m = Map(6, 4)
    assert all(m.get_tile(x, y).type is TileType.WALL for x in range(6) for y in range(4))
    assert m.stairs_down is None
    assert m.entrance is None


@pytest.mark.parametrize("tile_type", list(TileType))
@pytest.mark.parametrize("pos", [(0, 0), (9, 6), (4, 3), (0, 6), (9, 0)])
def test_set_then_get_matches_canonical_table(tile_type, pos):
    m = Map(10, 7)
    m.set_tile(*pos, tile_type)
    tile = m.get_tile(*pos)
    symbol, walkable = CANONICAL[tile_type]
    assert tile.type is tile_type
    assert tile.symbol == symbol
    assert tile.walkable is walkable
    assert m.is_walkable(*pos) is walkable


def test_canonical_table_covers_every_type():
    assert set(TILES) == set(TileType)


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (10, 0), (0, 7), (10, 7), (-5, -5), (100, 3)])
def test_out_of_bounds_degrades_silently(pos):
    m = Map(10, 7)
    m.set_tile(2, 2, TileType.FLOOR)
    before = snapshot(m)
    assert m.is_valid_position(*pos) is False
    assert m.is_walkable(*pos) is False
    assert m.get_tile(*pos) is None
    m.set_tile(*pos, TileType.FLOOR)
    assert snapshot(m) == before


def test_clear_resets_cells_and_markers():
    m = Map(5, 5)
    m.set_tile(1, 1, TileType.FLOOR)
    m.set_tile(2, 2, TileType.STAIRS_DOWN)
    m.stairs_down = (2, 2)
    m.entrance = (1, 1)
    m.clear()
    assert all(not m.is_walkable(x, y) for x in range(5) for y in range(5))
    assert m.stairs_down is None
    assert m.entrance is None
    assert (m.width, m.height) == (5, 5)


def test_cells_of_and_rows():
    m = Map(4, 3)
    m.set_tile(1, 1, TileType.FLOOR)
    m.set_tile(2, 1, TileType.STAIRS_DOWN)
    assert list(m.cells_of(TileType.FLOOR)) == [(1, 1)]
    assert list(m.rows()) == ["####", "#.>#", "####"]
