"""Composing the full view: walls over ceiling and floor colours."""

from __future__ import annotations

from collections.abc import Sequence

from .raycast import raycast
from .state import GameData


def compose_frame(data: GameData, pixels: Sequence[Sequence[int]]) -> list[list[int]]:
    """Fill every pixel without a wall with the ceiling or floor colour.

    The upper half is ceiling, the rest floor, except the last row which stays 0.
    """
    height, width = data.win_height, data.win_width
    if len(pixels) != height or any(len(row) != width for row in pixels):
        raise ValueError(f"wall pixels must be {width}x{height}")
    ceiling, floor = data.texinfo.hex_ceiling, data.texinfo.hex_floor
    frame: list[list[int]] = []
    for y, row in enumerate(pixels):
        if y < height // 2:
            background = ceiling
        elif y < height - 1:
            background = floor
        else:
            background = 0
        frame.append([color if color > 0 else background for color in row])
    return frame


def render_frame(data: GameData) -> list[list[int]]:
    """Cast the view from the player and return the finished frame."""
    return compose_frame(data, raycast(data))