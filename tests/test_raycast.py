import pytest

from cubcaster.raycast import cast_ray, draw_column, raycast
from cubcaster.settings import TextureIndex
from cubcaster.state import GameData

SIZE = 64


def make_data(direction="E", colour=0x00AA10):
    data = GameData()
    data.map = ["11111", "10001", "10001", "10001", "11111"]
    data.mapinfo.height = 5
    data.mapinfo.width = 6
    data.player.pos_x = 2.5
    data.player.pos_y = 2.5
    data.player.set_direction(direction)
    data.textures = [[colour] * (SIZE * SIZE) for _ in range(4)]
    return data


def blank(data):
    return [[0] * data.win_width for _ in range(data.win_height)]


def test_center_ray_hits_facing_wall():
    data = make_data()
    ray = cast_ray(data, data.win_width // 2)
    assert ray.side == 0
    assert ray.wall_dist == pytest.approx(1.5)
    assert ray.wall_x == pytest.approx(0.5)
    assert ray.draw_start + ray.draw_end == data.win_height


def test_slice_stays_on_screen():
    data = make_data()
    for x in range(0, data.win_width, 37):
        ray = cast_ray(data, x)
        assert 0 <= ray.draw_start <= ray.draw_end < data.win_height
        assert 0.0 <= ray.wall_x < 1.0


def test_symmetric_room_gives_symmetric_distances():
    data = make_data()
    left = cast_ray(data, 1)
    right = cast_ray(data, data.win_width - 1)
    assert left.wall_dist == pytest.approx(right.wall_dist)


def test_axis_aligned_ray_without_division_error():
    east = cast_ray(make_data("E"), 320)
    north = cast_ray(make_data("N"), 320)
    assert north.side == 1
    assert north.wall_dist == pytest.approx(east.wall_dist)


def test_closer_wall_is_taller():
    far = make_data()
    near = make_data()
    near.player.pos_x = 3.5
    x = far.win_width // 2
    assert cast_ray(near, x).line_height > cast_ray(far, x).line_height


def test_west_wall_is_drawn_unshaded():
    data = make_data("W", colour=0x123456)
    x = data.win_width // 2
    ray = cast_ray(data, x)
    pixels = blank(data)
    draw_column(data, ray, x, pixels)
    assert data.texinfo.index == TextureIndex.WEST
    assert pixels[ray.draw_start][x] == 0x123456
    assert pixels[ray.draw_end - 1][x] == 0x123456
    assert pixels[ray.draw_end][x] == 0
    assert pixels[ray.draw_start - 1][x] == 0


def test_east_wall_is_shaded():
    colour = 0x123456
    data = make_data("E", colour=colour)
    x = data.win_width // 2
    ray = cast_ray(data, x)
    pixels = blank(data)
    draw_column(data, ray, x, pixels)
    assert data.texinfo.index == TextureIndex.EAST
    assert pixels[ray.draw_start][x] == (colour >> 1) & 8355711


def test_black_texture_leaves_pixels_empty():
    data = make_data("W", colour=0)
    x = data.win_width // 2
    pixels = blank(data)
    draw_column(data, cast_ray(data, x), x, pixels)
    assert all(row[x] == 0 for row in pixels)


def test_draw_without_textures_raises():
    data = make_data()
    data.textures = None
    with pytest.raises(ValueError):
        draw_column(data, cast_ray(data, 0), 0, blank(data))


def test_raycast_fills_grid():
    data = make_data("W", colour=0x0000FF)
    data.win_width = 8
    data.win_height = 6
    pixels = raycast(data)
    assert data.texture_pixels is pixels
    assert len(pixels) == data.win_height
    assert all(len(row) == data.win_width for row in pixels)
    center = data.win_width // 2
    assert any(row[center] == 0x0000FF for row in pixels)