# hoardsurvivor

A small top-down survival arcade game built on `pygame`. An invisible
spawner just beyond the top-right corner of the screen sends out an enemy
on the first frame and every 180 frames after that. Each enemy walks
straight towards you. Strike them down, pick up the items they drop, and
decide what to carry. Your pack holds at most 20 units of weight.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for its window, input and drawing.

## Playing

```
hoardsurvivor
```

Options:

- `--fps N`: frames per second (default 60; must be positive).
- `--seed N`: random seed for which item a defeated enemy drops.

The window is 800 × 600. Close it to quit.

Controls while playing:

- **W / A / S / D**: move. Speed rises and falls gradually towards a top
  speed of 5 pixels per frame, and you face the way you last pressed.
- **Left mouse button**: strike 32 pixels in front of you. An enemy caught
  in the strike loses 1 hit point. Enemies start with 3 and are defeated
  once they drop below zero, so each takes four hits.
- **Right mouse button**: pick up an item you are touching, as long as it
  fits within the weight limit.
- **E**: pause and open the inventory menu.

In the inventory menu, entries you carry none of are greyed out and do nothing:

- **Left click** on an entry uses one item of that kind:
  - *HP Recovery* (weight 1): restores 1 HP, up to your maximum. At full
    health nothing happens and the item is kept.
  - *Max HP Up* (weight 2): raises your maximum HP by 1.
- **Right click** on an entry drops one item of that kind back onto the
  field where you stand.
- **Space**: close the menu and resume.

The menu shows your carried weight out of 20 and your HP as
`HP <maximum> / <current>`.

A defeated enemy drops one item, chosen at random between the two kinds.

## Using it from code

The game can be driven without a window, one frame at a time:

```python
import random
from hoardsurvivor.game import Game
from hoardsurvivor.objects import Controls, RIGHT

game = Game((800, 600), rng=random.Random(1))
game.update(Controls(held=frozenset({RIGHT})))
print(game.player.position, len(game.world))
```

- `hoardsurvivor.game.Game` owns the `World` and the `Player`; `update(controls)`
  advances one frame, `draw(surface)` paints onto a pygame surface,
  `pause()` / `resume()` switch the menu, and `handle_menu(controls)` applies
  a menu click.
- `hoardsurvivor.objects.Controls` is one frame of input: held and released
  directions (`UP`, `LEFT`, `DOWN`, `RIGHT`), click flags, pause and resume
  flags and the mouse position.
- `hoardsurvivor.world.World` holds the objects, with `accept`, `update`,
  `draw`, `clean_up`, `find_by_tag`, `overlapping_enemy` and `overlapping_item`.
- `Player`, `Enemy`, `EnemySpawner`, `Attack` and `Item` are the game objects;
  `Inventory` holds carried items; `CollisionCircle` is the circle shape used
  for hits and pick-ups.

## What it does not do

Enemies never hurt you: nothing takes away your HP, so there is no game-over
screen. There is no score, no sound, no image assets (everything is drawn as
coloured circles) and nothing is saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```