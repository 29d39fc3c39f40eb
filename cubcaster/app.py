"""The game window, its event loop, and the command-line entry point."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence

import pygame

from . import settings
from .cubfile import load_cub
from .errors import CubError, format_error
from .frame import render_frame
from .minimap import Minimap, build_minimap, draw_minimap
from .movement import Key, MouseTracker, key_press, key_release, move_player
from .settings import CYAN, ERR_MLX_START, ERR_USAGE, RESET, YELLOW
from .state import GameData
from .textures import load_textures

_FPS = 60

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}

_BANNER = (
    "░█▀▀░█░█░█▀▄░▀▀█░█▀▄░░░█▀▀░█▀█░█▀█░▀█▀░█▀▄░█▀█░█░░░█▀▀",
    "░█░░░█░█░█▀▄░░▀▄░█░█░░░█░░░█░█░█░█░░█░░█▀▄░█░█░█░░░▀▀█",
    "░▀▀▀░▀▀▀░▀▀░░▀▀░░▀▀░░░░▀▀▀░▀▀▀░▀░▀░░▀░░▀░▀░▀▀▀░▀▀▀░▀▀▀",
)


def controls_text() -> str:
    """Return the banner and key bindings shown when the game starts."""
    lines = [CYAN, *_BANNER, RESET]
    lines.append(
        f"{CYAN}\tW{RESET}: move forward\t{CYAN}\tS{RESET}: move backward"
    )
    lines.append(
        f"{CYAN}\tA{RESET}: strafe left\t{CYAN}\tD{RESET}: strafe right"
    )
    lines.append(
        f"{CYAN}\t<{RESET}: rotate left\t{CYAN}\t>{RESET}: rotate right"
    )
    if settings.BONUS:
        lines.append(f"{CYAN}\tMouse{RESET}: rotate view")
    lines.append("")
    return "\n".join(lines)


def _rows_text(rows: Sequence[str]) -> list[str]:
    return ["", *rows, ""]


def debug_report(data: GameData) -> str:
    """Return a readable dump of the map, textures, colours and player."""
    tex = data.texinfo
    player = data.player
    lines = [f"{YELLOW}\n---- MAP{RESET}"]
    lines.append(f"Map height: {data.mapinfo.height}")
    lines.append(f"Map width: {data.mapinfo.width}")
    lines.extend(_rows_text(data.map or []))
    lines.append(f"{YELLOW}\n---- TEXTURES & COLORS{RESET}")
    lines.append(f"Color ceiling: #{tex.hex_ceiling:x}")
    lines.append(f"Color floor: #{tex.hex_floor:x}")
    lines.append(f"Texture north: {tex.north}")
    lines.append(f"Texture south: {tex.south}")
    lines.append(f"Texture east: {tex.east}")
    lines.append(f"Texture west: {tex.west}")
    lines.append(f"{YELLOW}\n---- PLAYER{RESET}")
    lines.append(f"Player pos: x = {player.pos_x:f}, y = {player.pos_y:f}")
    lines.append(
        f"Player direction: {player.direction} "
        f"(x = {player.dir_x:f}, y = {player.dir_y:f})"
    )
    lines.append("")
    return "\n".join(lines)


def _minimap_report(minimap: Minimap) -> str:
    lines = [f"{YELLOW}\n---- MINIMAP{RESET}"]
    lines.append(f"Minimap view distance: {minimap.view_dist}")
    lines.append(f"Minimap size: {minimap.size} * {minimap.size}")
    lines.extend(_rows_text(minimap.rows))
    return "\n".join(lines)


def _to_surface(pixels: Sequence[Sequence[int]]) -> pygame.Surface:
    """Turn rows of 0xRRGGBB integers into an opaque surface."""
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    flat = array("I", (0xFF000000 | (c & 0xFFFFFF) for row in pixels for c in row))
    fmt = "BGRA" if sys.byteorder == "little" else "ARGB"
    surface = pygame.image.frombuffer(flat.tobytes(), (width, height), fmt)
    return surface.copy()


class Game:
    """A running game: the window, input state and the per-frame loop."""

    def __init__(self, data: GameData):
        self.data = data
        self.mouse = MouseTracker(data.win_width // 2)
        self.running = False
        self._screen: pygame.Surface | None = None

    def _render(self) -> None:
        screen = self._screen
        assert screen is not None
        screen.blit(_to_surface(render_frame(self.data)), (0, 0))
        if settings.BONUS:
            minimap = build_minimap(self.data)
            if settings.MMAP_DEBUG_MSG:
                print(_minimap_report(minimap))
            image = _to_surface(draw_minimap(minimap))
            screen.blit(image, minimap.screen_origin(self.data.win_height))
        pygame.display.flip()

    def _handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYS.get(event.key)
            if key is None:
                return
            handler = key_press if event.type == pygame.KEYDOWN else key_release
            if handler(self.data, key):
                self.running = False
        elif event.type == pygame.MOUSEMOTION and settings.BONUS:
            x, y = event.pos
            warp = self.mouse.on_motion(self.data, x)
            if warp is not None:
                pygame.mouse.set_pos((warp, y))

    def run(self) -> int:
        """Open the window and play until the player quits; return the exit code."""
        pygame.init()
        try:
            try:
                self._screen = pygame.display.set_mode(
                    (self.data.win_width, self.data.win_height)
                )
            except pygame.error as exc:
                raise CubError(ERR_MLX_START, detail="display") from exc
            pygame.display.set_caption("Cub3D")
            if settings.BONUS:
                pygame.mouse.set_pos(
                    (self.data.win_width // 2, self.data.win_height // 2)
                )
            clock = pygame.time.Clock()
            self._render()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self._handle(event)
                    if not self.running:
                        break
                if not self.running:
                    break
                self.data.player.has_moved += move_player(self.data)
                if self.data.player.has_moved:
                    self._render()
                clock.tick(_FPS)
        finally:
            self._screen = None
            pygame.quit()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(format_error("Usage", ERR_USAGE))
        return 1
    try:
        data = load_cub(args[0])
        if settings.DEBUG_MSG:
            print(debug_report(data))
        load_textures(data)
        print(controls_text())
        return Game(data).run()
    except CubError as exc:
        sys.stderr.write(exc.formatted())
        return exc.code


if __name__ == "__main__":
    sys.exit(main())