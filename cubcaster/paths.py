"""Checks on the files named by the command line and the map."""

from __future__ import annotations

import os

from .errors import CubError
from .settings import ERR_FILE_IS_DIR, ERR_FILE_NOT_CUB, ERR_FILE_NOT_XPM


def check_file(path: str, cub: bool) -> str:
    """Check that path is a readable file with a .cub (or .xpm) extension.

    Returns the path unchanged; raises CubError otherwise.
    """
    if os.path.isdir(path):
        raise CubError(ERR_FILE_IS_DIR, detail=path)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), detail=path) from exc
    if cub and not path.endswith(".cub"):
        raise CubError(ERR_FILE_NOT_CUB, detail=path)
    if not cub and not path.endswith(".xpm"):
        raise CubError(ERR_FILE_NOT_XPM, detail=path)
    return path