import pytest

from cubcaster.settings import TEX_SIZE, WIN_HEIGHT, WIN_WIDTH
from cubcaster.state import GameData, MapInfo, Player, TextureInfo


def test_player_starts_at_rest():
    player = Player()
    assert (player.pos_x, player.pos_y) == (0.0, 0.0)
    assert (player.move_x, player.move_y, player.rotate) == (0, 0, 0)
    assert player.direction == ""


@pytest.mark.parametrize(
    "letter, direction, plane",
    [
        ("N", (0.0, -1.0), (0.66, 0.0)),
        ("S", (0.0, 1.0), (-0.66, 0.0)),
        ("E", (1.0, 0.0), (0.0, 0.66)),
        ("W", (-1.0, 0.0), (0.0, -0.66)),
    ],
)
def test_set_direction_vectors(letter, direction, plane):
    player = Player()
    player.set_direction(letter)
    assert player.direction == letter
    assert (player.dir_x, player.dir_y) == direction
    assert (player.plane_x, player.plane_y) == plane


@pytest.mark.parametrize("letter", ["N", "S", "E", "W"])
def test_camera_plane_is_perpendicular(letter):
    player = Player()
    player.set_direction(letter)
    dot = player.dir_x * player.plane_x + player.dir_y * player.plane_y
    assert dot == 0.0
    assert abs(player.dir_x) + abs(player.dir_y) == 1.0


def test_unknown_direction_keeps_vectors():
    player = Player()
    player.set_direction("E")
    player.set_direction("X")
    assert player.direction == "X"
    assert (player.dir_x, player.dir_y) == (1.0, 0.0)
    assert (player.plane_x, player.plane_y) == (0.0, 0.66)


def test_game_data_defaults():
    data = GameData()
    assert (data.win_width, data.win_height) == (WIN_WIDTH, WIN_HEIGHT)
    assert data.map is None
    assert data.textures is None
    assert data.texinfo.size == TEX_SIZE
    assert data.texinfo.north is None
    assert data.texinfo.floor is None
    assert data.mapinfo.file == []


def test_default_parts_are_not_shared():
    first, second = GameData(), GameData()
    first.mapinfo.file.append("111\n")
    first.player.pos_x = 3.5
    assert second.mapinfo.file == []
    assert second.player.pos_x == 0.0
    assert first.texinfo is not second.texinfo


def test_texture_info_and_map_info_fields():
    tex = TextureInfo(north="n.xpm", floor=(1, 2, 3))
    info = MapInfo(path="maps/a.cub", height=4)
    assert tex.north == "n.xpm"
    assert tex.floor == (1, 2, 3)
    assert info.path == "maps/a.cub"
    assert info.height == 4