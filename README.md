# spaceshoot

A small vertical space shooter. You fly a ship near the bottom of a
640×480 starfield. Your ship fires on its own. Enemy ships appear near
the top and fire back at you.

## Installing

```
pip install .
```

## Playing

```
spaceshoot
```

`spaceshoot --help` prints the usage line. The command takes no other
options.

Run the game from a directory that holds a `resources/` folder:

- `resources/textures/M484VerticalShmupSet1.png` is the sprite sheet.
  If it is missing, the text still shows but no sprites are drawn.
- `resources/sounds/Battle in the Stars.ogg` is the background music.
  If it cannot be loaded, the game closes at once with an error status.
- `resources/sounds/Hit 1.mp3` is played when an enemy is shot down.
  If it is missing, the game plays without it.
- `resources/fonts/VeniteAdoremus-rgRBA.ttf` is the on-screen font.
  If it is missing, pygame's default font is used instead.

### Controls

| Key      | Action                                              |
|----------|-----------------------------------------------------|
| `Space`  | start from the title screen, or restart after losing |
| `W`      | move up                                             |
| `A`      | move left                                           |
| `S`      | move down                                           |
| `D`      | move right                                          |

A held movement key repeats. The ship moves 15 pixels per step and stays
away from the window edges.

### Rules

- Your ship fires a bullet every half second.
- A new enemy appears every two seconds. At most five enemies are on the field at once.
- Each enemy fires a bullet every two seconds.
- Shooting an enemy down gives 50 points.
- Each enemy bullet that hits you takes 20 health. You start with 60.
- When your health reaches zero the game is over. Your score is shown, and `Space` starts a new game.

Enemies stay where they appear. There is no pause key, and scores are not
saved between runs.

## Using the pieces

The game logic does not need a window, so you can drive it directly:

```python
from spaceshoot.entities import Player, Clock
from spaceshoot.scene import Scene, Key

player = Player(40.0, 40.0)
scene = Scene(player)
scene.handle_player(Key.W)
scene.update_scene(Clock(), Clock())
print(player.points, player.health)
```

- `spaceshoot.entities` holds `Player`, `Enemy`, `Bullet`, `Star`,
  `DestroyEffect` and `Clock`, a stopwatch with `elapsed_ms()` and
  `restart()`. A `Clock` takes an optional time source, so tests can
  control time.
- `spaceshoot.scene.Scene` holds the stars, bullets, enemies and effects.
  It accepts an optional `rng` (a `random.Random`), a `clock_factory` used
  for the clocks of new enemies and effects, and an `on_destroy` callback
  that is called whenever an enemy is shot down.
- `spaceshoot.game.GameState` holds the title, playing and game-over
  phases (`Phase.MENU`, `Phase.PLAYING`, `Phase.GAME_OVER`). Feed it keys
  with `handle_key` and advance it one frame with `update`. Its
  `points_text` and `health_text` give the on-screen score and health lines.

## Running the tests

```
pip install .[test]
pytest
```