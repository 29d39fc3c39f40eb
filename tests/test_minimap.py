from cubcaster.minimap import Minimap, build_minimap, draw_minimap, minimap_offset
from cubcaster.settings import (
    MMAP_COLOR_FLOOR,
    MMAP_COLOR_PLAYER,
    MMAP_COLOR_SPACE,
    MMAP_COLOR_WALL,
    MMAP_PIXEL_SIZE,
    MMAP_VIEW_DIST,
)
from cubcaster.state import GameData


def _data(rows, pos):
    data = GameData()
    data.map = list(rows)
    data.mapinfo.height = len(rows)
    data.mapinfo.width = max(len(row) for row in rows) + 1
    data.player.pos_x, data.player.pos_y = pos
    return data


def _big_room(n):
    wall = "1" * n
    inner = "1" + "0" * (n - 2) + "1"
    return [wall] + [inner] * (n - 2) + [wall]


SMALL = ["1111", "1001", "1001", "1111"]


def test_offset_is_zero_near_start():
    assert minimap_offset(4, 9, 20, 3) == 0
    assert minimap_offset(4, 9, 20, 4) == 0


def test_offset_keeps_player_centred():
    for pos in range(5, 15):
        assert minimap_offset(4, 9, 20, pos) + 4 == pos


def test_offset_clamps_at_map_end():
    for pos in (15, 16, 19):
        assert minimap_offset(4, 9, 20, pos) + 9 == 20


def test_default_geometry_fills_image():
    minimap = Minimap()
    assert minimap.size == 2 * MMAP_VIEW_DIST + 1
    assert minimap.size * minimap.tile_size == minimap.image_size
    assert minimap.image_size == MMAP_PIXEL_SIZE + minimap.tile_size


def test_screen_origin_leaves_margin():
    minimap = Minimap()
    left, top = minimap.screen_origin(480)
    assert left == minimap.tile_size
    assert top + minimap.image_size + minimap.tile_size == 480


def test_build_small_map_marks_player():
    minimap = build_minimap(_data(SMALL, (1.5, 1.5)))
    assert minimap.offset_x == 0 and minimap.offset_y == 0
    assert minimap.rows == ["1111", "1P01", "1001", "1111"]


def test_build_large_map_scrolls_with_player():
    data = _data(_big_room(20), (10.5, 10.5))
    minimap = build_minimap(data)
    assert minimap.offset_x + minimap.view_dist == 10
    assert minimap.offset_y + minimap.view_dist == 10
    assert len(minimap.rows) == minimap.size
    assert all(len(row) == minimap.size for row in minimap.rows)
    assert minimap.rows[4][4] == "P"
    assert sum(row.count("P") for row in minimap.rows) == 1


def test_draw_colours_tiles_and_border():
    minimap = build_minimap(_data(SMALL, (1.5, 1.5)))
    pixels = draw_minimap(minimap)
    n = minimap.image_size
    ts = minimap.tile_size
    half = ts // 2
    assert len(pixels) == n and all(len(row) == n for row in pixels)
    assert pixels[ts + half][ts + half] == MMAP_COLOR_PLAYER
    assert pixels[half][ts + half] == MMAP_COLOR_WALL
    assert pixels[ts + half][2 * ts + half] == MMAP_COLOR_FLOOR
    assert pixels[6 * ts + half][ts + half] == 0
    assert pixels[0][0] == MMAP_COLOR_SPACE
    assert pixels[n - 1][n - 1] == MMAP_COLOR_SPACE


def test_draw_skips_unknown_tiles():
    minimap = Minimap(rows=["1X"])
    pixels = draw_minimap(minimap)
    ts = minimap.tile_size
    half = ts // 2
    assert pixels[half][half] == MMAP_COLOR_WALL
    assert pixels[half][ts + half] == 0