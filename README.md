# raycub

A first-person maze explorer drawn with a raycaster. It reads a scene
description from a `.cub` file, checks it, and opens a 640×480 window with
pygame in which you walk through the map.

## Installing

    pip install .

## Running

    raycub path/to/scene.cub

The same entry point can be started with `python -m raycub.game scene.cub`.

The program takes exactly one argument, and the file name must end in `.cub`.
If anything is wrong with the arguments or the file, a message is written to
standard error (for scene problems it starts with `Error`) and the program
exits with status 1.

## Controls

| Key / action            | Effect                         |
|-------------------------|--------------------------------|
| `W` / `S`               | move forward / backward        |
| `A` / `D`               | step left / right              |
| Left / Right arrow      | turn left / right              |
| Mouse near a side edge  | keep turning towards that side |
| `Esc` or closing window | quit                           |

The player keeps a small distance from walls and cannot walk through them.
When the mouse leaves the window, it stops turning the view.

## The `.cub` format

The file begins with six settings, in any order, and ends with the map:

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

    111111
    100101
    1000N1
    111111

- `NO`, `SO`, `WE`, `EA` give the wall texture for each side. Paths must end in
  `.xpm`, and the files must be images that pygame can load.
- `F` and `C` give the floor and ceiling colour as three comma-separated
  whole numbers from 0 to 255.
- The map uses `1` for walls, `0` for open floor, spaces for empty space, and
  exactly one of `N`, `S`, `E` or `W` for the player's starting spot and
  facing direction.
- The map must be closed by walls, and it may not contain empty lines.
  Spaces inside the map are turned into walls once the map has been checked.

## Using it as a library

The parsing, movement and rendering pieces work without opening a window:

```python
from raycub.state import new_state
from raycub.validfile import validate_file_extension
from raycub.parser import parse_input
from raycub.movement import move_forward, rotate_left

state = new_state()
parse_input(validate_file_extension("scene.cub"), state)
move_forward(state)
rotate_left(state)
print(state.player_pos)
```

- `raycub.state` holds `GameState` and its parts (`Rgb`, `Vec2`, `KeyState`,
  `TexturePaths`).
- `raycub.mapfile` and `raycub.info` check the map and the settings lines;
  `raycub.parser.parse_input` runs the whole check on a file.
- `raycub.movement` moves and turns the player with wall collision.
- `raycub.raycaster` casts rays (`cast_ray`) and draws a frame (`draw_ray`)
  into a `frame[y][x]` grid of `0xRRGGBB` integers from `Texture` objects.
- `raycub.game.Game` keeps the input state; `Game.step()` applies held keys
  and mouse position once, and `Game.run()` opens the pygame window.

Errors in a scene raise `raycub.state.CubError`, whose message is the same
text the command prints.

## What it does not do

There are no sprites, doors, minimap, sound or saved games: the program shows
textured walls with a flat floor and ceiling colour, and nothing else.

## Running the tests

    pip install .[test]
    pytest