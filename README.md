# cubcaster

A small first-person maze explorer rendered by raycasting. A scene is
described in a `.cub` file: four wall textures, a floor colour, a ceiling
colour and a grid map with a single player start.

## Installing

```
pip install .
```

This installs `pygame` (window, input) and `pillow` (texture images).

## Running

```
cubcaster path/to/scene.cub
```

The same entry point can be started with `python -m cubcaster.app
path/to/scene.cub`.

The program loads and checks the scene file, loads the four textures,
prints the controls and opens a 640×480 window showing the 3D view and a
minimap in the lower-left corner. Closing the window or pressing Esc ends
the game.

### Controls

| Key        | Action                  |
|------------|-------------------------|
| W / S      | move forward / backward |
| A / D      | strafe left / right     |
| ← / →      | rotate left / right     |
| Mouse      | rotate view             |
| Esc        | quit                    |

When the pointer comes within 20 pixels of the left or right edge of the
window it is moved to the opposite side, so the view can keep turning.
The player can only walk on open floor (`0`) tiles.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA` name the wall textures, one path each with nothing
  after it. Each must be an existing file ending in `.xpm`, and Pillow must
  be able to read it. The texture size is taken from the image height.
- `F` and `C` give the floor and ceiling colours as `R,G,B`; each value must
  be from 0 to 255. Each key may appear only once.
- The map starts at the first line whose first non-blank character is a
  digit, and runs over the following lines that begin (after blanks) with
  `1`. It uses `1` for walls, `0` for open floor and exactly one of `N`,
  `S`, `E`, `W` for the player start and facing. Spaces inside a row are
  treated as walls.
- The map must be at least three lines high, its top and bottom rows must
  be all walls and every other row must end in a wall. The player must not
  stand next to blank space.
- Nothing but blank lines may follow the map.

Any problem with the arguments or the file is reported on standard error
as `cub3D: Error: <file>: <reason>` and the program exits with status 1.

## Using it from Python

```python
from cubcaster.cubfile import load_cub
from cubcaster.textures import load_textures
from cubcaster.frame import render_frame
from cubcaster.minimap import build_minimap, draw_minimap

data = load_cub("scene.cub")      # raises cubcaster.errors.CubError
load_textures(data)
frame = render_frame(data)        # rows of 0xRRGGBB integers
minimap = draw_minimap(build_minimap(data))
```

`cubcaster.movement` holds the input handling (`key_press`, `key_release`,
`MouseTracker`) and `move_player`, which applies pending movement to the
`GameData` state; `cubcaster.app.Game(data).run()` opens the window and runs
the loop.

## What it does not do

There are no enemies, weapons, doors or sprites: the game is a walk through
a textured maze. Scenes are only read from `.cub` files; nothing is saved.