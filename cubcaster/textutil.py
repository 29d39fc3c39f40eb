"""Small text helpers used by the map parser."""

from __future__ import annotations

import os
from pathlib import Path

_LEADING_SPACE = " \t\n\r\v\f"


def split_nonempty(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def parse_int(text: str) -> int:
    """Read a leading decimal integer the lenient way: junk after it is ignored,
    and a string with no digits reads as 0."""
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    text = Path(path).read_bytes().decode("utf-8", errors="surrogateescape")
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines