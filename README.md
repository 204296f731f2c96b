# astroengine

A small, dependency-free engine for 2D arcade games in the style of Asteroids.
It keeps the objects of a game world, tests them for collisions, removes
flagged objects after each update, wraps positions around the world's edges,
counts score and lives, schedules timers on a simulated clock and routes
keyboard, mouse and window events to listeners.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `astroengine.world`
  - `GameWorld(width=200, height=200)`: holds game objects (`objects`),
    `update(t)` updates every object, finds collisions, calls
    `on_collision(objects)` on each object that hit something, removes the
    objects passed to `flag_for_removal` and then calls `on_world_updated`
    on every listener. `add_object` / `remove_object` set the object's
    `world` attribute and notify listeners. `get_collisions(obj)` returns the
    objects `obj` hit in the last update. `wrap_xy(x, y)` returns the
    position wrapped back inside the world.
  - `GameWorldListener`: abstract base with `on_world_updated`,
    `on_object_added` and `on_object_removed`.
- `astroengine.bounding`: `BoundingShape` (never collides) and
  `BoundingSphere(game_object, radius)`, which collides with another sphere
  when the distance between the objects' `position`s is at most the sum of
  the radii. The shape holds only a weak reference to its object.
- `astroengine.scoring`
  - `Player`: starts with 3 `lives`, loses one when an object whose `type`
    is `"Spaceship"` is removed from the world and calls
    `on_player_killed(lives_left)` on its listeners; `add_lives(count)`.
  - `ScoreKeeper`: adds 10 to `score` when an object of type `"Asteroid"`
    is removed and calls `on_score_changed(score)` on its listeners.
- `astroengine.movement.MovementController(obj)`: `accelerate(a)` sets the
  object's `acceleration` along its `angle` (degrees); `rotate(r)` sets its
  `rotation` and re-applies the last acceleration.
- `astroengine.session.Session`: `set_timer(msecs, listener, value=0)`
  returns a timer key; `advance(msecs)` moves the clock (`now`) forward and
  calls `listener.on_timer(value)` for every timer that falls due, in order;
  `on_timer(key)` fires one stored timer; `stop()` exits the program.
- `astroengine.window`
  - `Window(width, height, x=-1, y=-1, title="", session=None)`: passes key,
    special key, mouse and window events to `KeyboardListener`,
    `MouseListener` and `WindowListener` objects registered with the
    `add_*_listener` / `remove_*_listener` methods. Escape (27) stops the
    session, or exits when there is none; F1 (1) toggles `set_fullscreen`,
    which restores the saved size and position when leaving fullscreen.
    `set_timer(msecs, value)` schedules `on_timer` through the session.
  - `GameWindow`: has `world` and `display` properties. `on_idle(elapsed)`
    updates both by the time since the previous call; the world is sized to
    the window divided by `ZOOM_LEVEL` (3), the display (any object with
    `update(t)` and `reshape(w, h)`) to the full window.
- `astroengine.shape`: `parse_shape(text)` and `load_shape(path)` read a
  `Shape(loop, colour, points)` from whitespace separated text: `loop` (any
  other word means an open strip), three colour components, then x y pairs.
- `astroengine.sprite.Sprite(width, height, frames, loop=True)`:
  `update(t)` advances at most one frame every 83 ms; a non-looping sprite
  returns to frame 0 and stops `animating` after its last frame.
- `astroengine.image.Image(width, height, pixels=None)`: RGBA bytes row by
  row, with `pixel(x, y)`, `crop(x, y, width, height)` and
  `set_transparent_colour(r, g, b)`.
- `astroengine.image_manager.ImageManager`: `create_image`,
  `create_image_from_image` and `get_image` by name; a name keeps the first
  image registered under it.
- `astroengine.quaternion.Quaternion(w, v)`: addition, subtraction,
  products (`*` / `cross`), `dot`, `conjugate`, `inverse`, `norm`, `unit`,
  `from_axis_angle(axis, angle)` and `rotate_vector(vector)`.

## Example

Game objects are duck typed: they need a `world` attribute and `update`,
`collision_test` and `on_collision` methods.

```python
from astroengine.bounding import BoundingSphere
from astroengine.scoring import ScoreKeeper
from astroengine.world import GameWorld


class Rock:
    def __init__(self, position, radius):
        self.type = "Asteroid"
        self.position = position
        self.world = None
        self.bounds = BoundingSphere(self, radius)

    def update(self, t):
        pass

    def collision_test(self, other):
        return self.bounds.collision_test(other.bounds)

    def on_collision(self, objects):
        self.world.flag_for_removal(self)


world = GameWorld()
score = ScoreKeeper()
world.add_listener(score)
world.add_object(Rock((0.0, 0.0, 0.0), 2.0))
world.add_object(Rock((3.0, 0.0, 0.0), 2.0))

world.update(16)
print(score.score)                    # 20: both rocks hit and were removed
print(world.wrap_xy(130.0, -120.0))   # (-70.0, 80.0)
```

## What it does not do

There is no drawing: shapes, sprites and images carry data and timing but
are not rendered, and `on_display` only clears the pending redisplay flag.
Images are not read from or written to files. There is no real event loop
or wall clock: events and idle ticks are delivered by calling the window's
methods, and timers fire only when `Session.advance` is called. There is no
command to start a game, and no spaceship, asteroid or bullet classes.