# tilequest

A small tile-based puzzle game. You walk a player around a walled map,
pick up every collectible and then reach the exit. Textures are plain
XPM images, read by a built-in XPM loader; the game window is drawn
with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing

```
tilequest path/to/level.ber
tilequest path/to/level.ber --textures path/to/textures
```

The map file must end in `.ber`. Textures are read from the directory
given by `--textures` (by default `textures` under the current working
directory), which must hold `wall.xpm`, `floor.xpm`, `player.xpm`,
`collectible.xpm` and `exit.xpm`. Every tile is drawn 32 pixels apart.

Controls:

- `W` / `A` / `S` / `D`: move up, left, down and right
- `Esc` or closing the window: quit

Each key press and each move is printed, with the running move count.
The exit stays shut until every collectible has been picked up; stepping
onto it then ends the game.

If the map or a texture cannot be loaded, or the window cannot be
opened, the command prints `Error` and the reason to standard error and
exits with status 1.

## Map format

A map is a rectangle of characters, one row per line, with no empty
lines:

- `1`: wall
- `0`: floor
- `P`: the player (exactly one)
- `E`: the exit (exactly one)
- `C`: a collectible (at least one)

The outer border must be walls all the way round. For example:

```
1111111
1P0C0E1
1111111
```

A map that breaks any of these rules is rejected with a `MapError`.

## Using it as a library

- `tilequest.gamemap.load_map(path)` reads a map file into a `GameMap`,
  checking only that it is non-empty and rectangular.
  `GameMap.check_walls()`, `GameMap.check_elements()` and
  `GameMap.validate()` apply the rules above; cells are read and written
  as `game_map[x, y]`. `check_extension(path)` checks the `.ber` suffix.
- `tilequest.game.Game(game_map)` validates the map and holds the game
  state. `Game.try_move(new_x, new_y)` returns a `MoveOutcome`;
  `Game.handle_key(keycode)` takes macOS or X11 key codes (see
  `key_action`, which maps them to an `Action`); `Game.render()` lists
  the `Tile`s to draw with their pixel positions.
- `tilequest.xpm.xpm_file_to_image(path)` and
  `tilequest.xpm.xpm_to_image(xpm_data)` turn XPM data into an
  `tilequest.image.Image` of 32-bit 0xAARRGGBB pixels, where the alpha
  byte means transparency; bad input raises `XpmError`.
- `tilequest.colors.lookup_color(name)` resolves X11 colour names
  (case-insensitive, `KeyError` if unknown); `color_from_text` reads the
  colour text of an XPM colour line.
- `tilequest.app.load_textures(directory)`, `image_to_surface(image)`
  and `run(game, textures)` load the tile images and play a game in a
  pygame window.

## What it does not do

- Map validation does not check that the player can actually reach
  every collectible and the exit; an unwinnable map is accepted.
- There is no text drawing in the window: messages go to standard
  output only.
- The XPM loader reads the `c` (colour) entries only and does not read
  PNG or other image formats.