"""Building the map grid from file lines and validating map and textures."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import CubError
from .paths import check_file
from .settings import (
    ERR_COLOR_MISSING,
    ERR_INV_LETTER,
    ERR_MAP_LAST,
    ERR_MAP_MISSING,
    ERR_MAP_NO_WALLS,
    ERR_MAP_TOO_SMALL,
    ERR_NUM_PLAYER,
    ERR_PLAYER_DIR,
    ERR_PLAYER_POS,
    ERR_TEX_MISSING,
    ERR_TEX_RGB_VAL,
)
from .state import GameData, MapInfo

# Blanks skipped at the start of map rows (newline is not among them).
_BLANKS = " \t\r\v\f"
_WHITESPACE = " \t\r\n\v\f"
_TILES = "10NSEW"
_PLAYERS = "NSEW"


def _map_end(lines: Sequence[str], start: int) -> int:
    """Return the index of the first line after start that is not a map row."""
    end = start
    for line in lines[start:]:
        if line.lstrip(_BLANKS)[:1] != "1":
            break
        end += 1
    return end


def _fill_spaces(row: str) -> str:
    """Turn spaces after the first non-blank character into walls."""
    first = len(row) - len(row.lstrip(_BLANKS))
    if first >= len(row):
        return row
    # A space whose column equals the last character's code point is kept.
    kept_column = ord(row[-1])
    chars = list(row)
    for j in range(first + 1, len(chars)):
        if chars[j] == " " and j != kept_column:
            chars[j] = "1"
    return "".join(chars)


def build_map(data: GameData, lines: Sequence[str], start: int) -> list[str]:
    """Read the map rows that begin at start into data.map and return them."""
    info = data.mapinfo
    end = _map_end(lines, start)
    info.index_end_of_map = end
    info.height = end - start
    info.width = max((len(line) for line in lines[start:]), default=0)
    data.map = [_fill_spaces(line.split("\n", 1)[0]) for line in lines[start:end]]
    return data.map


def _is_solid_edge(grid: Sequence[str], i: int) -> bool:
    if i >= len(grid) or not grid[i]:
        return False
    return all(ch == "1" for ch in grid[i].lstrip(_BLANKS))


def check_map_sides(height: int, grid: Sequence[str]) -> bool:
    """Return whether the top and bottom rows are walls and every row ends in one."""
    if not _is_solid_edge(grid, 0):
        return False
    last = max(height - 1, 1)
    for row in grid[1:last]:
        if not row or row[-1] != "1":
            return False
    return _is_solid_edge(grid, last)


def _find_player(grid: Sequence[str], path: str) -> str:
    found: str | None = None
    for row in grid:
        for ch in row:
            if ch in _BLANKS:
                continue
            if ch not in _TILES:
                raise CubError(ERR_INV_LETTER, detail=path)
            if ch in _PLAYERS:
                if found is not None:
                    raise CubError(ERR_NUM_PLAYER, detail=path)
                found = ch
    if found is None:
        raise CubError(ERR_PLAYER_DIR, detail=path)
    return found


def _cell(row: str, column: int) -> str:
    return row[column] if 0 <= column < len(row) else ""


def _is_space(ch: str) -> bool:
    return ch != "" and ch in _WHITESPACE


def _position_is_valid(grid: Sequence[str], i: int, j: int) -> bool:
    if i < 1 or i + 1 >= len(grid) or j < 1:
        return False
    above, row, below = grid[i - 1], grid[i], grid[i + 1]
    if len(above) < j or len(below) < j:
        return False
    neighbours = ((row, j - 1), (row, j + 1), (above, j), (below, j))
    return not any(_is_space(_cell(r, c)) for r, c in neighbours)


def _place_player(data: GameData) -> None:
    grid = data.map
    assert grid is not None
    for i, row in enumerate(grid):
        for j, ch in enumerate(row):
            if ch in _PLAYERS:
                data.player.pos_x = j + 0.5
                data.player.pos_y = i + 0.5
                grid[i] = row[:j] + "0" + row[j + 1:]
    if not _position_is_valid(grid, int(data.player.pos_y), int(data.player.pos_x)):
        raise CubError(ERR_PLAYER_POS, detail=data.mapinfo.path)


def _map_is_last(info: MapInfo) -> bool:
    return all(not line.strip(_WHITESPACE) for line in info.file[info.index_end_of_map:])


def check_map(data: GameData) -> None:
    """Validate the map, record the player's start and clear it from the grid."""
    path = data.mapinfo.path
    if data.map is None:
        raise CubError(ERR_MAP_MISSING, detail=path)
    if not check_map_sides(data.mapinfo.height, data.map):
        raise CubError(ERR_MAP_NO_WALLS, detail=path)
    if data.mapinfo.height < 3:
        raise CubError(ERR_MAP_TOO_SMALL, detail=path)
    data.player.direction = _find_player(data.map, path)
    _place_player(data)
    if not _map_is_last(data.mapinfo):
        raise CubError(ERR_MAP_LAST, detail=path)


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack an (r, g, b) triple into a 0xRRGGBB integer."""
    r, g, b = rgb
    return ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)


def check_textures(data: GameData) -> None:
    """Check that all textures and colours are given and valid, then pack colours."""
    tex = data.texinfo
    path = data.mapinfo.path
    walls = (tex.north, tex.south, tex.west, tex.east)
    if any(wall is None for wall in walls):
        raise CubError(ERR_TEX_MISSING, detail=path)
    if tex.floor is None or tex.ceiling is None:
        raise CubError(ERR_COLOR_MISSING, detail=path)
    for wall in walls:
        check_file(wall, False)
    for rgb in (tex.floor, tex.ceiling):
        for value in rgb:
            if not 0 <= value <= 255:
                raise CubError(ERR_TEX_RGB_VAL, detail=str(value))
    tex.hex_floor = rgb_to_hex(tex.floor)
    tex.hex_ceiling = rgb_to_hex(tex.ceiling)