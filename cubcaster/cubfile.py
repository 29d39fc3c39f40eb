"""Reading a .cub scene file: header lines, colours, texture paths and map."""

from __future__ import annotations

import os

from .errors import CubError
from .mapcheck import build_map, check_map, check_textures
from .paths import check_file
from .settings import (
    ERR_COLOR_CEILING,
    ERR_COLOR_FLOOR,
    ERR_FLOOR_CEILING,
    ERR_TEX_INVALID,
)
from .state import GameData, TextureInfo
from .textutil import parse_int, read_lines, split_nonempty

_PATH_BLANKS = " \t"
_PATH_STOPS = " \t\n"

_WALL_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}


def _is_visible(ch: str) -> bool:
    """Whether ch is a printable, non-space ASCII character."""
    return ch != "" and 33 <= ord(ch) <= 126


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _char_at(line: str, index: int) -> str:
    return line[index] if index < len(line) else ""


def _first_visible(line: str) -> int | None:
    return next((k for k, ch in enumerate(line) if _is_visible(ch)), None)


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse "R,G,B" into a triple; raise ValueError if it is malformed.

    Values are not range-checked here.
    """
    fields = split_nonempty(text, ",")
    if len(fields) != 3:
        raise ValueError(f"expected 3 colour components, got {len(fields)}")
    values = []
    for part in fields:
        value = parse_int(part)
        if value == -1 or not any(_is_digit(ch) for ch in part):
            raise ValueError(f"invalid colour component: {part!r}")
        values.append(value)
    r, g, b = values
    return r, g, b


def parse_texture_path(line: str, start: int) -> str | None:
    """Return the single path that follows start in line.

    Returns None if anything other than blanks and a newline follows the path.
    """
    rest = line[start:].lstrip(_PATH_BLANKS)
    end = next((k for k, ch in enumerate(rest) if ch in _PATH_STOPS), len(rest))
    tail = rest[end:].lstrip(_PATH_BLANKS)
    if tail and tail[0] != "\n":
        return None
    return rest[:end]


def _fill_wall_texture(data: GameData, line: str, j: int) -> None:
    tex: TextureInfo = data.texinfo
    if _is_visible(_char_at(line, j + 2)):
        raise CubError(ERR_TEX_INVALID, detail=data.mapinfo.path)
    attr = _WALL_KEYS.get(line[j:j + 2])
    if attr is None or getattr(tex, attr) is not None:
        raise CubError(ERR_TEX_INVALID, detail=data.mapinfo.path)
    setattr(tex, attr, parse_texture_path(line, j + 2))


def _fill_colour(data: GameData, line: str, j: int) -> None:
    tex = data.texinfo
    path = data.mapinfo.path
    key = line[j]
    if tex.ceiling is None and key == "C":
        try:
            tex.ceiling = parse_rgb(line[j + 1:])
        except ValueError as exc:
            raise CubError(ERR_COLOR_CEILING, detail=path) from exc
    elif tex.floor is None and key == "F":
        try:
            tex.floor = parse_rgb(line[j + 1:])
        except ValueError as exc:
            raise CubError(ERR_COLOR_FLOOR, detail=path) from exc
    else:
        raise CubError(ERR_FLOOR_CEILING, detail=path)


def parse_header(data: GameData, lines: list[str]) -> GameData:
    """Read texture and colour lines into data until the map starts, then build it."""
    for i, line in enumerate(lines):
        j = _first_visible(line)
        if j is None:
            continue
        if _is_digit(line[j]):
            build_map(data, lines, i)
            return data
        if _is_visible(_char_at(line, j + 1)):
            _fill_wall_texture(data, line, j)
        else:
            _fill_colour(data, line, j)
    return data


def load_cub(path: str | os.PathLike[str]) -> GameData:
    """Load and validate a .cub file, returning the ready game state."""
    path = os.fspath(path)
    check_file(path, True)
    data = GameData()
    data.mapinfo.path = path
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), detail=path) from exc
    data.mapinfo.file = lines
    data.mapinfo.line_count = len(lines)
    parse_header(data, lines)
    check_map(data)
    check_textures(data)
    data.player.set_direction(data.player.direction)
    return data