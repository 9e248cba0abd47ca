# dashrunner

A side-scrolling endless runner built on pygame. The level scrolls towards
the player in ten-column tile-map chunks; jump over gaps, land on
platforms, and avoid spikes and the bullets fired by turrets. The score
goes up by one every second you survive, and at the end of a run you can
save it under a short name to a local leaderboard.

The package also contains a tile-map editor for building the level chunks.

## Installing

```
pip install .
```

This pulls in `pygame`. For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
dashrunner
```

The command takes no options besides `--help`. Run it from a directory
that holds the game's data; all paths are relative to the working
directory:

| Path | Contents |
| --- | --- |
| `Config/graphics.ini` | window settings (optional) |
| `Config/supported_keys.ini` | key names and their key codes |
| `Config/gamestate_keybinds.ini` | in-game actions (`JUMP`, `CLOSE`) |
| `Config/editorstate_keybinds.ini` | editor actions (`CLOSE`, `COLLISION`, `TYPE`, `TILELOCK`) |
| `Config/mainmenustate_keybinds.ini` | main menu actions |
| `Fonts/NewRocker-Regular.ttf` | the interface font (required) |
| `Resources/GFX/MainMenu/BG.png` | menu and leaderboard background |
| `Resources/GFX/Player/PlayerSheet.png` | player sprite sheet |
| `Resources/GFX/Tiles/TileSheet.png` | tile sheet |
| `Resources/GFX/Spikes/SpikesSheet.png` | spike sprite sheet |
| `Resources/GFX/Turret/TurretSheet.png`, `BulletSheet.png` | turret and bullet sprite sheets |
| `Resources/TileMaps/` | level chunks `TileMap<N>.map` and `EditorStateSettings.ini` |
| `Resources/Scores/Scores.txt` | the leaderboard |

A missing font, background or sprite sheet raises `FileNotFoundError`
when the screen that needs it is opened.

### `graphics.ini`

The window title on its own line, then, separated by whitespace: width,
height, full-screen flag (`0`/`1`), frame-rate limit (`0` for none),
vertical-sync flag (`0`/`1`) and antialiasing level. Values are read in
order and reading stops at the first malformed one. A missing file keeps
the defaults of `GraphicsSettings`: title "Endless Runner", 1920×1080, no
frame-rate limit, no vertical sync.

### Keybind files

Whitespace-separated pairs. In `supported_keys.ini` each pair is a key
name and its pygame key code (reading stops at the first code that is not
a number). In the per-screen files each pair is an action and a key name
from `supported_keys.ini`; an unknown key name raises `KeyError`.

## Playing

* **Main menu** – *Play* starts a run, *LeaderBoard* shows the top ten
  scores, *Quit* leaves the game. Clicking the text field in the corner
  switches typing on or off; it holds at most five characters, Backspace
  deletes, Enter stops typing and Escape resets it to `Input`.
* **In a run** – hold the jump key to jump; a longer hold jumps higher, up
  to 0.45 seconds, and you can jump again once you are back on the ground.
  Being pushed off the left edge of the screen, or hit by a spike or a
  bullet, ends the run. The close key pauses, with *Resume*, *LeaderBoard*
  and *Quit*.
* **Finished** – click the name field, delete the placeholder, type a name
  of one to five letters, press Enter, then *Save*. A name that is not plain
  letters is refused; note that the score file is rewritten before the
  name is checked, so a refused save leaves it empty.

While the window has no focus, the current screen is not updated. When the
last screen is closed the game exits.

## Leaderboard file

`Resources/Scores/Scores.txt` holds one `NAME SCORE` line per entry,
where `NAME` is one to five ASCII letters and `SCORE` a non-negative
integer, highest score first. A file holding any other line is treated as
damaged and deleted.

## Tile-map format

A `.map` file starts with a header:

```
<index>
<columns> <rows>
<grid size in pixels>
<layer count>
<path of the tile sheet>
```

followed by one line per tile:

```
<x> <y> <z> <texture left> <texture top> <collision 0/1> <type>
```

Tile types (`dashrunner.tile.TileType`) are `0` for an ordinary tile, `1`
for a tile drawn in front of the player, `2` for a spike and `3` for a
turret. In a run, spike and turret tiles spawn live enemies. A header that
cannot be read raises `ValueError`; a missing file gives an empty map.

A run starts with chunks 0 and 1 and then appends random chunks numbered
2 to 15. The scrolling is tracked through the tile in the top-left cell of
each chunk, so every chunk used in a run needs a tile at column 0, row 0.

## Editor

The *Editor* button on the main menu appears only while the text field
holds the unlock code (`EDITOR_UNLOCK_CODE` in
`dashrunner.main_menu_state`). Left click places a tile with the current
texture, right click removes the top tile of a cell. The keys bound to
`COLLISION`, `TYPE` and `TILELOCK` toggle collision, cycle the tile type
and stop tiles from being stacked on occupied cells. The *TS* button shows
the tile sheet to pick a texture from. The sidebar adds (*Add*) and
removes (*X*) chunks, up to twenty, and switches between them, saving the
current one first; the pause menu's *Save* writes the current chunk and
the chunk count.

## Library use

The pieces work on their own, for example reading the leaderboard:

```python
from dashrunner.leaderboard_state import read_scores

for name, score in read_scores("Resources/Scores/Scores.txt"):
    print(name, score)
```

or driving the score timer:

```python
from dashrunner.score_timer import ScoreTimer

timer = ScoreTimer("Resources/Scores")
timer.start()
timer.update(0.016)
print(timer.score)
```

## What it does not do

* There is no settings screen. `GraphicsSettings.save_to_file` exists but
  nothing in the game calls it; edit `graphics.ini` by hand.
* The full-screen flag is read from `graphics.ini` but the game always
  opens a normal window.
* `dashrunner.dropdown.DropDown` is a working widget that no screen uses.