"""Player movement, rotation and the handling of keyboard and mouse input."""

from __future__ import annotations

import math
from enum import Enum

from . import settings
from .settings import DIST_EDGE_MOUSE_WRAP, MOVESPEED, ROTSPEED, WIN_WIDTH
from .state import GameData


class Key(Enum):
    """The keys the game reacts to."""

    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    A = "a"
    S = "s"
    D = "d"


def _is_floor(data: GameData, x: float, y: float) -> bool:
    grid = data.map or []
    row_index, column = int(y), int(x)
    if not 0 <= row_index < len(grid):
        return False
    row = grid[row_index]
    return 0 <= column < len(row) and row[column] == "0"


def _is_inside_map(data: GameData, x: float, y: float) -> bool:
    if x < 0.25 or x >= data.mapinfo.width - 1.25:
        return False
    if y < 0.25 or y >= data.mapinfo.height - 0.25:
        return False
    return True


def _is_valid_pos(data: GameData, x: float, y: float) -> bool:
    if settings.BONUS:
        return _is_floor(data, x, y)
    return _is_inside_map(data, x, y)


def validate_move(data: GameData, new_x: float, new_y: float) -> int:
    """Move the player along each axis where the target is free; return 1 if moved."""
    player = data.player
    moved = 0
    if _is_valid_pos(data, new_x, player.pos_y):
        player.pos_x = new_x
        moved = 1
    if _is_valid_pos(data, player.pos_x, new_y):
        player.pos_y = new_y
        moved = 1
    return moved


def rotate_player(data: GameData, rotdir: float) -> int:
    """Rotate view direction and camera plane by rotdir steps; return 1."""
    player = data.player
    angle = ROTSPEED * rotdir
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )
    return 1


def move_player(data: GameData) -> int:
    """Apply the pending movement and rotation; return how many of them took effect."""
    player = data.player
    dx, dy = player.dir_x * MOVESPEED, player.dir_y * MOVESPEED
    moved = 0
    if player.move_y == 1:
        moved += validate_move(data, player.pos_x + dx, player.pos_y + dy)
    if player.move_y == -1:
        moved += validate_move(data, player.pos_x - dx, player.pos_y - dy)
    if player.move_x == -1:
        moved += validate_move(data, player.pos_x + dy, player.pos_y - dx)
    if player.move_x == 1:
        moved += validate_move(data, player.pos_x - dy, player.pos_y + dx)
    if player.rotate != 0:
        moved += rotate_player(data, player.rotate)
    return moved


def key_press(data: GameData, key: Key) -> bool:
    """Record a key press; return True when the key asks the game to quit."""
    player = data.player
    if key is Key.ESCAPE:
        return True
    if key is Key.LEFT:
        player.rotate -= 1
    elif key is Key.RIGHT:
        player.rotate += 1
    elif key is Key.W:
        player.move_y = 1
    elif key is Key.A:
        player.move_x = -1
    elif key is Key.S:
        player.move_y = -1
    elif key is Key.D:
        player.move_x = 1
    return False


def key_release(data: GameData, key: Key) -> bool:
    """Record a key release; return True when the key asks the game to quit."""
    player = data.player
    if key is Key.ESCAPE:
        return True
    if key is Key.W and player.move_y == 1:
        player.move_y = 0
    elif key is Key.S and player.move_y == -1:
        player.move_y = 0
    elif key is Key.A and player.move_x == -1:
        player.move_x += 1
    elif key is Key.D and player.move_x == 1:
        player.move_x -= 1
    elif key is Key.LEFT and player.rotate <= 1:
        player.rotate = 0
    elif key is Key.RIGHT and player.rotate >= -1:
        player.rotate = 0
    return False


class MouseTracker:
    """Turns horizontal mouse motion into player rotation."""

    def __init__(self, start_x: int = WIN_WIDTH // 2):
        self.old_x = start_x

    def on_motion(self, data: GameData, x: int) -> int | None:
        """Rotate the player by the direction of motion.

        Returns the x coordinate the pointer should be warped to when it
        comes near a window edge, otherwise None.
        """
        warp: int | None = None
        if x > data.win_width - DIST_EDGE_MOUSE_WRAP:
            warp = DIST_EDGE_MOUSE_WRAP
        elif x < DIST_EDGE_MOUSE_WRAP:
            warp = data.win_width - DIST_EDGE_MOUSE_WRAP
        if x == self.old_x:
            return warp
        direction = -1 if x < self.old_x else 1
        data.player.has_moved += rotate_player(data, direction)
        self.old_x = x
        return warp