"""Loading wall texture images into flat 0xRRGGBB pixel lists."""

from __future__ import annotations

import os

from PIL import Image

from .errors import CubError
from .settings import ERR_MLX_IMG, ERR_TEX_MISSING
from .state import GameData


def _open_rgba(path: str | os.PathLike[str]) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise CubError(ERR_MLX_IMG, detail=os.fspath(path)) from exc


def _to_pixels(img: Image.Image, size: int) -> list[int]:
    width, height = img.size
    access = img.load()
    pixels: list[int] = []
    for y in range(size):
        for x in range(size):
            if x >= width or y >= height:
                pixels.append(0)
                continue
            r, g, b, a = access[x, y]
            # Fully transparent texels are left out of the wall, like black ones.
            pixels.append(0 if a == 0 else (r << 16) | (g << 8) | b)
    return pixels


def load_texture(path: str | os.PathLike[str], size: int | None) -> list[int]:
    """Read an image and return size * size pixels as 0xRRGGBB integers, row by row.

    With size None the image's height is used. Texels outside the image read as 0.
    Raises CubError when the image cannot be read.
    """
    img = _open_rgba(path)
    if size is None:
        size = img.height
    if size < 0:
        raise ValueError(f"texture size must not be negative: {size}")
    return _to_pixels(img, size)


def load_textures(data: GameData) -> list[list[int]]:
    """Load the north, south, east and west textures into data.textures.

    The texture size is taken from each image's height, as it is read.
    """
    tex = data.texinfo
    paths = (tex.north, tex.south, tex.east, tex.west)
    if any(path is None for path in paths):
        raise CubError(ERR_TEX_MISSING, detail=data.mapinfo.path)
    textures: list[list[int]] = []
    for path in paths:
        img = _open_rgba(path)
        tex.size = img.height
        textures.append(_to_pixels(img, tex.size))
    data.textures = textures
    return textures