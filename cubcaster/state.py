"""Mutable game state: player, textures, map description and the whole game."""

from __future__ import annotations

from dataclasses import dataclass, field

from .settings import TEX_SIZE, WIN_HEIGHT, WIN_WIDTH, TextureIndex

# Direction vector and camera plane for each starting orientation.
_ORIENTATIONS: dict[str, tuple[tuple[float, float], tuple[float, float]]] = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
}


@dataclass
class Player:
    """Position, view direction, camera plane and pending input of the player."""

    direction: str = ""
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    has_moved: int = 0
    move_x: int = 0
    move_y: int = 0
    rotate: int = 0

    def set_direction(self, direction: str) -> None:
        """Face the player N, S, E or W; other letters leave the vectors alone."""
        self.direction = direction
        vectors = _ORIENTATIONS.get(direction)
        if vectors is None:
            return
        (self.dir_x, self.dir_y), (self.plane_x, self.plane_y) = vectors


@dataclass
class TextureInfo:
    """Wall texture paths, floor and ceiling colours, and texture sampling state."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    hex_floor: int = 0
    hex_ceiling: int = 0
    size: int = TEX_SIZE
    index: TextureIndex = TextureIndex.NORTH
    step: float = 0.0
    pos: float = 0.0
    x: int = 0
    y: int = 0


@dataclass
class MapInfo:
    """The raw lines of a .cub file and the extent of the map inside it."""

    path: str = ""
    file: list[str] = field(default_factory=list)
    line_count: int = 0
    height: int = 0
    width: int = 0
    index_end_of_map: int = 0


@dataclass
class GameData:
    """Everything the game needs: window size, map, player and textures."""

    win_width: int = WIN_WIDTH
    win_height: int = WIN_HEIGHT
    mapinfo: MapInfo = field(default_factory=MapInfo)
    map: list[str] | None = None
    player: Player = field(default_factory=Player)
    texinfo: TextureInfo = field(default_factory=TextureInfo)
    textures: list[list[int]] | None = None
    texture_pixels: list[list[int]] | None = None