# battleship

A naval battle board game built on pygame. Pick a cell on the grid, watch
a missile fly to it, and see it land with an explosion or a splash.

## Installing

```
pip install .
```

## Assets

The game loads a font and a set of PNG frames at start-up. By default it
looks in `res/` under the directory you start it from; another directory
can be given with `--resources`. The directory must hold:

- `Basketball.otf`
- `set_target.png`, `tile_hit.png`, `tile_miss.png`, `tile_unknow.png`
- `missile_on_fire/missile_0001.png` … `missile_0003.png`
- `get_target/get_target_0001.png` … `get_target_0005.png`
- `explosion/explosion_0001.png` … `explosion_0016.png`
- `explosion_big/explosion_big_0001.png` … `explosion_big_0012.png`
- `miss_target/missed_0001.png` … `missed_0010.png`

If any of them cannot be loaded, the command prints the error and exits
with status 1.

## Playing

```
battleship
battleship --resources path/to/assets --fps 30
```

| Option        | Default | Meaning                          |
|---------------|---------|----------------------------------|
| `--resources` | `res`   | directory holding the game assets |
| `--fps`       | `60`    | frame rate cap                   |

The window opens on a menu with a **Classic PVE** button. Clicking it
switches to a 10 × 10 board. Move the mouse over the board to aim; the
target marker follows the cursor. A left click on a cell that has not
been settled yet does three things in order:

1. It plays the target-selection effect on the cell.
2. It launches a missile from the top-left corner of the window at the
   centre of the cell.
3. When the missile arrives, it plays an explosion if a ship is on the
   cell or a water splash if not.

When that last effect ends, the cell is marked as hit or missed. Clicks
are ignored until then. Closing the window ends the game.

## What the game does not do

- Nothing places ships on the board, so every shot ends in a splash.
- There is no opponent, no turn order, no score and no end of game.
- Only the menu and the classic board are reachable. A
  `battleship.scenes.SettingScene` class exists but shows nothing and is
  not offered by the menu; the other `SceneType` members have no scene
  behind them.
- No sounds or music are loaded.

## Using the pieces

The building blocks can be used on their own:

- `battleship.timer.Timer`: a repeating countdown that calls
  `on_timeout` each time `wait_time` seconds have passed.
- `battleship.atlas.Atlas`: an ordered set of frames, looked up with
  wrap-around by `get_texture(index)`.
- `battleship.animation.Animation`: steps through an atlas at a fixed
  interval, looping or stopping on the last frame and calling
  `on_finished`.
- `battleship.effect.Effect`: an animation played once at a point
  (`play_at`) or scaled into a rectangle (`play_in`).
- `battleship.bullet.Bullet`: a projectile that flies in a straight line
  toward a target point and becomes invalid once it gets there.
- `battleship.tile.Tile` and `battleship.tile.TileStatus`: the state of
  one board cell.
- `battleship.board.Board`: the playing grid and its click handling.
- `battleship.button.Button`: a clickable button drawn with colours or
  textures.
- `battleship.resources`, `battleship.atlas_manager`,
  `battleship.effect_manager`, `battleship.text_textures`: asset loading,
  atlas assembly, effect playback and a cache of rendered text.
- `battleship.scene_manager`, `battleship.scenes`,
  `battleship.scene_pool`: scenes and switching between them.
- `battleship.game.GameManager`: the window and main loop;
  `battleship.game.main` is the command's entry point.

## Tests

```
pip install .[test]
pytest
```