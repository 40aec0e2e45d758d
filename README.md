# cubescape

cubescape is a small first-person maze explorer. It reads a scene
description from a `.cub` file and checks that the maze is closed. You can
then walk through the maze in a textured, raycast 3D view. A minimap sits in
the top-left corner.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
cubescape path/to/level.cub
```

The command takes exactly one argument, and that name must end in `.cub`.
The window is 1920×1080 and has the title "Hell!".

The command stops at the first problem. This may be a wrong number of
arguments, a wrong extension, or a file that cannot be opened or read. It may
also be an invalid scene or a wall image that cannot be loaded. The problem is
written to standard error as `Error` on one line and a short description on
the next. The command then exits with status 1.

## Controls

| Key          | Action                |
|--------------|-----------------------|
| W / S        | move forward / back   |
| A / D        | strafe left / right   |
| Left / Right | turn left / right     |
| Q            | toggle mouse look     |
| Esc          | quit                  |

Closing the window also quits.

Turning on mouse look hides the cursor. While mouse look is on, the view keeps
turning whenever the pointer is more than 1000 pixels left or right of the
window's horizontal centre.

Movement stops at walls. Before each step the game checks a point a little
ahead of the player: 0.9 of the direction vector forward or back, and half
of the camera plane sideways.

## The `.cub` format

A scene file holds six settings in any order, followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE` and `EA` each name the image for one wall face. Any image
  that Pillow can open will do. Every image is resampled to 128×128.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each part is a
  decimal number from 0 to 255.
  - A colour of `0,0,0` counts as not set. A scene with a pure black floor or
    ceiling is therefore rejected.
- Each setting may appear only once. Blank lines are allowed between
  settings, and leading and trailing spaces on setting lines are ignored.
- The map comes after all six settings. Its lines may contain only these
  characters:
  - `1` for a wall
  - `0` for floor
  - a space for nothing
  - exactly one of `N`, `S`, `E` or `W`, which marks the player's start and
    the way the player faces
- Trailing spaces on map lines are dropped. Rows shorter than the widest row
  are padded with nothing.
- The map must be one unbroken block. A blank line inside it, or a map line
  after it, makes the file invalid.
- Every floor cell must be enclosed by walls. A floor cell that is next to
  nothing, or that lies on the edge of the map, makes the file invalid.

## Using it as a library

- `cubescape.mapfile`
  - `load_cub(path)` and `parse_cub(text)` return a `CubMap`. It has the four
    texture paths, the `floor` and `ceiling` colours (packed `0xRRGGBB`), a
    `grid` of `Cell` values, and the start position and direction.
  - Invalid input raises `MapError`.
  - `parse_color`, `is_map_line` and `validate_closed` are also available.
- `cubescape.player`
  - `Player.from_map(cubmap)` places the camera 0.02 into the start square.
  - `move_forward`, `move_backward`, `move_left` and `move_right` take the
    map.
  - `rotate(angle)`, `rotate_left()` and `rotate_right()` turn the view.
- `cubescape.raycast`
  - `cast_ray` and `cast_all` trace a grid ray for each screen column.
  - The result is a `RayHit`: the distance, the vertical span to draw, the
    texture column, and the `WallFace` that was hit.
- `cubescape.textures`
  - `load_texture` and `load_wall_textures` return `Texture` objects.
  - `resample` scales a packed pixel list to a square.
- `cubescape.render`
  - `render_scene(cubmap, player, textures, width, height)` returns a
    `Frame`.
    - The ceiling and floor fill the upper and lower halves.
    - Textured walls are drawn over them. North and south faces are darkened
      with `shade`.
    - A 21×21-square minimap goes on top, with the player shown in red.
  - `Frame.to_rgb()` gives a `height × width × 3` byte array.
- `cubescape.controls`
  - `InputState` records the held `Action`s, the pointer and mouse look.
  - `apply(player, cubmap, screen_width)` moves and turns the player for one
    frame.
- `cubescape.app`
  - `run(cubmap, width, height)` opens the game window.
  - `main(argv)` is the command-line entry point.

## Limitations

There are no sprites, doors, enemies, weapons or sound. The game shows only
walls, floor, ceiling and the minimap.

The Down arrow key is bound to an action, but that action does nothing.

The window size used by the `cubescape` command is fixed. To use a different
size, call `run` directly.