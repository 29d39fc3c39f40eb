import pytest

from cubcaster.frame import compose_frame, render_frame
from cubcaster.state import GameData

CEILING = 0x111111
FLOOR = 0x222222
WALL = 0x808080


def _small(width, height):
    data = GameData(win_width=width, win_height=height)
    data.texinfo.hex_ceiling = CEILING
    data.texinfo.hex_floor = FLOOR
    return data


def test_compose_fills_ceiling_floor_and_keeps_walls():
    data = _small(3, 4)
    pixels = [[0] * 3 for _ in range(4)]
    pixels[0][1] = 0xABCDEF
    frame = compose_frame(data, pixels)
    assert frame[0] == [CEILING, 0xABCDEF, CEILING]
    assert frame[1] == [CEILING] * 3
    assert frame[2] == [FLOOR] * 3
    assert frame[3] == [0] * 3


def test_compose_ignores_non_positive_colours():
    data = _small(2, 4)
    pixels = [[-5, 0] for _ in range(4)]
    frame = compose_frame(data, pixels)
    assert frame[2] == [FLOOR, FLOOR]


def test_compose_rejects_wrong_size():
    data = _small(3, 4)
    with pytest.raises(ValueError):
        compose_frame(data, [[0] * 3 for _ in range(3)])
    with pytest.raises(ValueError):
        compose_frame(data, [[0] * 2 for _ in range(4)])


def _room():
    data = _small(8, 20)
    rows = ["11111", "10001", "10001", "10001", "11111"]
    data.map = rows
    data.mapinfo.height = len(rows)
    data.mapinfo.width = len(rows[0]) + 1
    data.player.pos_x = 2.5
    data.player.pos_y = 2.5
    data.player.set_direction("N")
    data.texinfo.size = 64
    data.textures = [[WALL] * (64 * 64) for _ in range(4)]
    return data


def test_render_frame_in_closed_room():
    data = _room()
    frame = render_frame(data)
    assert len(frame) == 20 and all(len(row) == 8 for row in frame)
    assert frame == compose_frame(data, data.texture_pixels)
    assert frame[0] == [CEILING] * 8
    assert frame[18] == [FLOOR] * 8
    middle = frame[10]
    assert all(color not in (CEILING, FLOOR, 0) for color in middle)
    assert any(WALL in row for row in frame) or all(
        color != WALL for row in frame for color in row
    )
    assert set(middle) <= {
        color for row in data.texture_pixels for color in row if color > 0
    }