# skyrunner

A side-scrolling runner game drawn with pygame. The level is a plain text
file in which each character is a tile; the runner moves right on its own
while you jump, attack and dodge to reach the end block.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Playing

    skyrunner path/to/level.txt

The command takes exactly one argument. It exits with status 84 when it is
given no argument, more than one, a directory, or a path that cannot be
opened; the reason is printed on standard error.

An argument beginning with `-h` prints the file `help/h` from the current
directory line by line, followed by a blank line, and exits with status 84
without starting the game. If `help/h` does not exist, nothing is printed.

The game opens a 1920x1080 window on the main menu. Click **Play** to start
or **Quit** to leave; closing the window also quits. While playing:

- **Space** jumps.
- **Left mouse button** attacks, but only while running.
- **Right mouse button** dodges, interrupting whatever the runner is doing.
- **Escape** opens the pause menu, from which you can resume, go back to the
  main menu or quit.

Landing on ground too low, or running into a rock, ends the run and returns
to the main menu. Reaching an end tile shows a "You Win!!" screen; any key or
mouse click returns to the main menu.

The score is shown as odometer-style digits in the top right corner; higher
digits appear as the score grows.

## Map format

Each line of the map file is one row of tiles, top to bottom. Shorter rows
are padded with empty cells (`.`) on the right. The runner stands on column
8 at the start and moves one column to the right as the map scrolls.

| Character | Tile |
|-----------|------|
| `.` or space | empty air |
| `X` | dirt; becomes grass (`~`) when the cell above it is empty, a rock or an end tile |
| `~` | grass, the ground the runner walks on |
| `R` | rock; an empty cell right after it becomes its second half (`O`); a rock followed by another rock or by dirt becomes a low rock (`r`) the runner can stand on |
| `E` | the end of the level; empty cells below it are filled with `E` |

Example:

    ..............................E
    ..............................E
    .........R....................E
    XXXXXXXXXXXXXXXX...XXXXXXXXXXXX
    XXXXXXXXXXXXXXXX...XXXXXXXXXXXX

## Assets

The package does not include any images, fonts, sounds or help text; they
must be supplied. The `skyrunner` command loads them from the current
directory:

- `sprite/background/` — `background.jpg`, `background1.png`,
  `background2.png`, `platform.png`
- `sprite/texture/` — `block_grasse.png`, `block_dirt.png`,
  `block_rock1.png`, `block_rock2.png`, `block_rock3.png`, `block_end.png`
- `sprite/character/` — `character.png`, `characterjump2.png`,
  `characterattack.png`, `characterdodge.png`
- `sprite/score/score.png`, `sprite/menu/menu.png`,
  `sprite/menu/menupause.png`, `sprite/font/font.ttf`
- `music/` — `music.wav`, `sao.wav`, `jump.wav`, `attack.wav`
- `help/h` — the help text

When no audio device is available the game runs without sound.

## Using it as a library

The game logic can be used without a window:

- `skyrunner.tilemap.load_map(path)` and `skyrunner.tilemap.parse_map(text)`
  build a `TileMap`; `pad_rows` and `resolve_textures` perform the row
  padding and tile normalisation described above. `TileMap.tile(row, col)`
  reads a cell and `TileMap.visible_tiles()` yields each drawable tile with
  its screen position.
- `skyrunner.character.Character` holds the runner's state, with `jump`,
  `attack`, `dodge`, `apply_gravity`, `animate`, `settle` and `reset`.
- `skyrunner.collision.detect_collision(tilemap, character)` returns the
  `Outcome` of a frame: `DEAD`, `CONTINUE` or `WIN`.
- `skyrunner.score.ScoreCounter` holds the score, with `tick`, `reset` and
  `visible_digits`.
- `skyrunner.background.default_layers()` gives the scrolling
  `ScrollingLayer`s.
- `skyrunner.menu` maps pointer positions to `MenuChoice`, `PauseChoice` and
  highlight offsets with `main_menu_click`, `main_menu_hover`,
  `pause_menu_click` and `pause_menu_hover`.
- `skyrunner.game.GameState` advances the whole game one frame at a time with
  `step(seconds, elapsed)` and rewinds it with `restart()`.
- `skyrunner.game.run(map_path, asset_dir=".")` opens the window and plays a
  map, loading assets from `asset_dir`; `skyrunner.game.Game` does the same
  for an already loaded `TileMap`.
- `skyrunner.cli.check_arguments(argv)` validates command-line arguments,
  raising `UsageError`, and `skyrunner.cli.show_help(path)` prints a help
  file.

## What it does not do

There is no level editor, no saved high scores and no settings screen; the
window size and controls are fixed.