"""Game-wide constants: window size, speeds, minimap look and messages."""

from enum import IntEnum

DEBUG_MSG = False
MMAP_DEBUG_MSG = False
BONUS = True

WIN_WIDTH = 640
WIN_HEIGHT = 480

TEX_SIZE = 64

MOVESPEED = 0.0125
ROTSPEED = 0.015

DIST_EDGE_MOUSE_WRAP = 20

MMAP_PIXEL_SIZE = 128
MMAP_VIEW_DIST = 4
MMAP_COLOR_PLAYER = 0x00FF00
MMAP_COLOR_WALL = 0x808080
MMAP_COLOR_FLOOR = 0xE6E6E6
MMAP_COLOR_SPACE = 0x404040

ERR_USAGE = "usage: ./cub3d <path/to/map.cub>"

ERR_FILE_NOT_CUB = "Not a .cub file"
ERR_FILE_NOT_XPM = "Not an .xpm file"
ERR_FILE_IS_DIR = "Is a directory"
ERR_FLOOR_CEILING = "Invalid floor/ceiling RGB color(s)"
ERR_COLOR_FLOOR = "Invalid floor RGB color"
ERR_COLOR_CEILING = "Invalid ceiling RGB color"
ERR_INVALID_MAP = "Map description is either wrong or incomplete"
ERR_INV_LETTER = "Invalid character in map"
ERR_NUM_PLAYER = "Map has more than one player"
ERR_TEX_RGB_VAL = "Invalid RGB value (min: 0, max: 255)"
ERR_TEX_MISSING = "Missing texture(s)"
ERR_TEX_INVALID = "Invalid texture(s)"
ERR_COLOR_MISSING = "Missing color(s)"
ERR_MAP_MISSING = "Missing map"
ERR_MAP_TOO_SMALL = "Map is not at least 3 lines high"
ERR_MAP_NO_WALLS = "Map is not surrounded by walls"
ERR_MAP_LAST = "Map is not the last element in file"
ERR_PLAYER_POS = "Invalid player position"
ERR_PLAYER_DIR = "Map has no player position (expected N, S, E or W)"
ERR_MALLOC = "Could not allocate memory"
ERR_MLX_START = "Could not start display"
ERR_MLX_WIN = "Could not create window"
ERR_MLX_IMG = "Could not create image"

# Terminal escape sequences.
RESET = "\033[0m"

BOLD = "\033[1m"
DIM = "\033[2m"
ITAL = "\033[3m"
ULINE = "\033[4m"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BRIGHT_BLACK = "\033[90m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_PURPLE = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"

BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_PURPLE = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

BG_BRIGHT_BLACK = "\033[100m"
BG_BRIGHT_RED = "\033[101m"
BG_BRIGHT_GREEN = "\033[102m"
BG_BRIGHT_YELLOW = "\033[103m"
BG_BRIGHT_BLUE = "\033[104m"
BG_BRIGHT_PURPLE = "\033[105m"
BG_BRIGHT_CYAN = "\033[106m"
BG_BRIGHT_WHITE = "\033[107m"


class TextureIndex(IntEnum):
    """Index of each wall texture, by the side of the wall it covers."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3