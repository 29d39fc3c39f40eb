"""The game's error type and the formatting of error messages."""

from __future__ import annotations

from .settings import RED, RESET

_PREFIX = "cub3D: Error"


def format_error(detail: str | None, message: str | None) -> str:
    """Return the coloured error line for an optional detail and message."""
    parts = [_PREFIX]
    parts.extend(part for part in (detail, message) if part)
    return f"{RED}{': '.join(parts)}\n{RESET}"


def format_error_value(value: int, message: str) -> str:
    """Return the coloured error line for a numeric value and a message."""
    return f"{RED}{_PREFIX}: {value}: {message}\n{RESET}"


class CubError(Exception):
    """An error found while loading or running a map."""

    def __init__(self, message: str, detail: str | None = None, code: int = 1):
        self.message = message
        self.detail = detail
        self.code = code
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.detail}: {self.message}"
        return self.message

    def formatted(self) -> str:
        """Return the error as the coloured line written to stderr."""
        return format_error(self.detail, self.message)