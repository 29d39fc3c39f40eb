"""The minimap: a small grid of the tiles around the player and its image."""

from __future__ import annotations

from dataclasses import dataclass, field

from .settings import (
    MMAP_COLOR_FLOOR,
    MMAP_COLOR_PLAYER,
    MMAP_COLOR_SPACE,
    MMAP_COLOR_WALL,
    MMAP_PIXEL_SIZE,
    MMAP_VIEW_DIST,
)
from .state import GameData

_TILE_COLORS = {
    "P": MMAP_COLOR_PLAYER,
    "1": MMAP_COLOR_WALL,
    "0": MMAP_COLOR_FLOOR,
    " ": MMAP_COLOR_SPACE,
}

_BORDER = 5


@dataclass
class Minimap:
    """The tiles shown on the minimap and where they sit in the map."""

    rows: list[str] = field(default_factory=list)
    view_dist: int = MMAP_VIEW_DIST
    size: int = 2 * MMAP_VIEW_DIST + 1
    tile_size: int = MMAP_PIXEL_SIZE // (2 * MMAP_VIEW_DIST)
    offset_x: int = 0
    offset_y: int = 0

    @property
    def image_size(self) -> int:
        """Width and height of the minimap image in pixels."""
        return MMAP_PIXEL_SIZE + self.tile_size

    def screen_origin(self, win_height: int) -> tuple[int, int]:
        """Top-left corner at which the minimap is drawn in a window."""
        return (self.tile_size, win_height - (MMAP_PIXEL_SIZE + self.tile_size * 2))


def minimap_offset(view_dist: int, size: int, mapsize: int, pos: int) -> int:
    """Return the first map coordinate shown so that pos stays in view."""
    if pos > view_dist and mapsize - pos > view_dist + 1:
        return pos - view_dist
    if pos > view_dist:
        return mapsize - size
    return 0


def _cell(data: GameData, mx: int, my: int) -> str:
    info = data.mapinfo
    if not (0 <= my < info.height and 0 <= mx < info.width):
        return ""
    if int(data.player.pos_x) == mx and int(data.player.pos_y) == my:
        return "P"
    grid = data.map or []
    row = grid[my] if my < len(grid) else ""
    ch = row[mx] if mx < len(row) else ""
    return ch if ch in ("1", "0") else ""


def _line(data: GameData, minimap: Minimap, y: int) -> str:
    chars: list[str] = []
    for x in range(min(minimap.size, data.mapinfo.width)):
        ch = _cell(data, x + minimap.offset_x, y + minimap.offset_y)
        if not ch:
            break
        chars.append(ch)
    return "".join(chars)


def build_minimap(data: GameData) -> Minimap:
    """Return the minimap of the tiles around the player."""
    minimap = Minimap()
    minimap.offset_x = minimap_offset(
        minimap.view_dist, minimap.size, data.mapinfo.width, int(data.player.pos_x)
    )
    minimap.offset_y = minimap_offset(
        minimap.view_dist, minimap.size, data.mapinfo.height, int(data.player.pos_y)
    )
    minimap.rows = [
        _line(data, minimap, y) for y in range(min(minimap.size, data.mapinfo.height))
    ]
    return minimap


def draw_minimap(minimap: Minimap) -> list[list[int]]:
    """Return the minimap image as rows of 0xRRGGBB pixels, framed by a border."""
    n = minimap.image_size
    ts = minimap.tile_size
    pixels = [[0] * n for _ in range(n)]
    for y, row in enumerate(minimap.rows[: minimap.size]):
        for x, ch in enumerate(row[: minimap.size]):
            color = _TILE_COLORS.get(ch)
            if color is None:
                continue
            left, right = x * ts, min((x + 1) * ts, n)
            if left >= right:
                continue
            for py in range(y * ts, min((y + 1) * ts, n)):
                pixels[py][left:right] = [color] * (right - left)
    for y, line in enumerate(pixels):
        for x in range(n):
            if x < _BORDER or x > n - _BORDER or y < _BORDER or y > n - _BORDER:
                line[x] = MMAP_COLOR_SPACE
    return pixels