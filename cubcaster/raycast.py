"""Casting one ray per screen column and drawing textured wall slices."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .settings import TextureIndex
from .state import GameData

_INT_MAX = 2**31 - 1


@dataclass
class Ray:
    """One ray cast from the player, and the wall slice it produced."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    deltadist_x: float = 0.0
    deltadist_y: float = 0.0
    wall_dist: float = 0.0
    wall_x: float = 0.0
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


def _delta(direction: float) -> float:
    return math.inf if direction == 0 else abs(1 / direction)


def _tile(data: GameData, x: int, y: int) -> str:
    grid = data.map or []
    if not 0 <= y < len(grid):
        return ""
    row = grid[y]
    return row[x] if 0 <= x < len(row) else ""


def _set_dda(ray: Ray, pos_x: float, pos_y: float) -> None:
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.sidedist_x = (pos_x - ray.map_x) * ray.deltadist_x
    else:
        ray.step_x = 1
        ray.sidedist_x = (ray.map_x + 1.0 - pos_x) * ray.deltadist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.sidedist_y = (pos_y - ray.map_y) * ray.deltadist_y
    else:
        ray.step_y = 1
        ray.sidedist_y = (ray.map_y + 1.0 - pos_y) * ray.deltadist_y


def _perform_dda(data: GameData, ray: Ray) -> None:
    height, width = data.mapinfo.height, data.mapinfo.width
    while True:
        if ray.sidedist_x < ray.sidedist_y:
            ray.sidedist_x += ray.deltadist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.sidedist_y += ray.deltadist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if (
            ray.map_y < 0.25
            or ray.map_x < 0.25
            or ray.map_y > height - 0.25
            or ray.map_x > width - 1.25
        ):
            return
        if _tile(data, ray.map_x, ray.map_y) > "0":
            return


def _line_height(data: GameData, ray: Ray) -> None:
    player = data.player
    height = data.win_height
    if ray.side == 0:
        ray.wall_dist = ray.sidedist_x - ray.deltadist_x
    else:
        ray.wall_dist = ray.sidedist_y - ray.deltadist_y
    if ray.wall_dist > 0 and math.isfinite(height / ray.wall_dist):
        ray.line_height = int(height / ray.wall_dist)
    else:
        ray.line_height = _INT_MAX
    ray.draw_start = max(-(ray.line_height // 2) + height // 2, 0)
    ray.draw_end = min(ray.line_height // 2 + height // 2, height - 1)
    if ray.side == 0:
        ray.wall_x = player.pos_y + ray.wall_dist * ray.dir_y
    else:
        ray.wall_x = player.pos_x + ray.wall_dist * ray.dir_x
    if math.isfinite(ray.wall_x):
        ray.wall_x -= math.floor(ray.wall_x)


def cast_ray(data: GameData, x: int) -> Ray:
    """Cast the ray for screen column x and return where it hit."""
    player = data.player
    ray = Ray()
    ray.camera_x = 2 * x / data.win_width - 1
    ray.dir_x = player.dir_x + player.plane_x * ray.camera_x
    ray.dir_y = player.dir_y + player.plane_y * ray.camera_x
    ray.map_x = int(player.pos_x)
    ray.map_y = int(player.pos_y)
    ray.deltadist_x = _delta(ray.dir_x)
    ray.deltadist_y = _delta(ray.dir_y)
    _set_dda(ray, player.pos_x, player.pos_y)
    _perform_dda(data, ray)
    _line_height(data, ray)
    return ray


def _texture_index(ray: Ray) -> TextureIndex:
    if ray.side == 0:
        return TextureIndex.WEST if ray.dir_x < 0 else TextureIndex.EAST
    return TextureIndex.SOUTH if ray.dir_y > 0 else TextureIndex.NORTH


def draw_column(data: GameData, ray: Ray, x: int, pixels: list[list[int]]) -> None:
    """Write the textured wall slice of ray into column x of pixels."""
    if data.textures is None:
        raise ValueError("textures are not loaded")
    tex = data.texinfo
    tex.index = _texture_index(ray)
    texture = data.textures[tex.index]
    tex.x = int(ray.wall_x * tex.size) if math.isfinite(ray.wall_x) else 0
    if (ray.side == 0 and ray.dir_x < 0) or (ray.side == 1 and ray.dir_y > 0):
        tex.x = tex.size - tex.x - 1
    tex.step = 1.0 * tex.size / ray.line_height if ray.line_height else 0.0
    tex.pos = (ray.draw_start - data.win_height // 2 + ray.line_height // 2) * tex.step
    shaded = tex.index in (TextureIndex.NORTH, TextureIndex.EAST)
    for y in range(ray.draw_start, ray.draw_end):
        tex.y = int(tex.pos) & (tex.size - 1)
        tex.pos += tex.step
        color = texture[tex.size * tex.y + tex.x]
        if shaded:
            color = (color >> 1) & 8355711
        if color > 0:
            pixels[y][x] = color


def raycast(data: GameData) -> list[list[int]]:
    """Cast every column of the view and return the wall pixel grid.

    The grid is also stored as data.texture_pixels; 0 means no wall there.
    """
    pixels = [[0] * data.win_width for _ in range(data.win_height)]
    for x in range(data.win_width):
        draw_column(data, cast_ray(data, x), x, pixels)
    data.texture_pixels = pixels
    return pixels