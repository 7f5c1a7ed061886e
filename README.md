# orbitguard

A full-screen arcade game built on pygame. Your ship circles a planet while
meteors close in along 24 fixed bearings, 15 degrees apart. Shoot them down
before they reach the planet, pick up hearts to restore lives, and grab
orbital probes that circle the planet, take hits for you and drop mines.

Reach 200 kills to win. You lose when the ship or the planet runs out of
lives, or when the window is closed during a level.

## Installing

```
pip install .
```

The game loads its images from `res/pics/` and its font from
`res/starship_font.ttf`, relative to the directory it is started from, so run
it from a directory that holds `res/`. These files are not part of the
package; without them the game stops at start-up with
"Failed to init!" (font) or "Failed to load textures!" (images).

## Playing

```
orbitguard
```

or `python -m orbitguard.main`. The command takes no options besides
`--help`. It opens a 1920x1080 full-screen window at the main menu.

In the menus, press any key to highlight the first button, use W/S or the
arrow keys to move between buttons and Enter to press one. From the main menu
you can choose a level (`PLAY`), read the controls (`HELP`) or quit.

In a level:

| Key   | Action                                          |
|-------|-------------------------------------------------|
| W / S | move the ship outward / inward along its bearing |
| A / D | turn the ship around the planet                 |
| E     | turn 180 degrees                                |
| Space | shoot along the ship's bearing                  |
| M     | hold to speed up the orbital probe              |

Releasing A or D snaps the ship to the nearest bearing.

- The ship carries six shots and reloads after 1.5 seconds once they are
  spent.
- Eight kills in a row switch it to a triple shot, covering its own bearing
  and the two next to it, for one clip of four.
- Hearts appear now and then; flying into one gives a life to the planet, or
  to the ship if the planet is full.
- After 150 kills, while lives are missing, a drone flies out to a live heart
  and brings it back to the planet.
- Shortly after every fiftieth kill, a probe pickup appears when no probe is
  flying. A probe circles the planet, absorbs four meteor hits and drops up
  to eight mines.

After a win the game shows a congratulation page; after a loss it offers to
retry the same level or return to the menu.

## What it does not do

- There is no pause or in-game menu: the help page mentions Esc, but Esc does
  nothing during a level. Leaving a level means closing the window, which
  counts as a loss.
- Scores and progress are not saved, and there are no settings; the window
  size, difficulty and the 200-kill goal are fixed in `orbitguard.constants`.

## Running the tests

```
pip install .[test]
pytest
```