# archery

A small 2D archery game on an 800×600 field. A bow stands at the lower left
and a round target sits at the right. A grey barrier between them bobs up
and down. You aim, hold the space bar to draw the bow and release it to
loose an arrow. Arrows fly in a ballistic arc under gravity. While you draw,
a red dotted line shows the path the arrow will take, and a bar under the
bow shows the power.

## Installing

```
pip install .
```

This installs `pygame` as well.

## Playing

```
archery
```

The game also starts with `python -m archery.game`.

| Key          | Action                                                     |
|--------------|------------------------------------------------------------|
| `space`      | press to start drawing (power resets to 0), release to shoot |
| `w` / `s`    | raise / lower the aim in 2° steps (starts at 45°, stops at 81° and 9°) |
| `d` / `a`    | add / remove 20 power (0 to 1100)                          |
| `r`          | remove every arrow                                         |
| `m` / `n`    | start / stop the barrier moving                            |

An arrow that reaches the target sticks in it. An arrow that touches the
barrier disappears. An arrow that falls below the ground is removed. Each
shot prints `Arrow fired: power=...`, and each arrow the barrier stops
prints `Arrow hit barrier!`.

## Using the pieces

The game objects work without a display, so you can drive them from code:

```python
from archery.bow import Bow
from archery.target import Target

bow = Bow(120, 120)
target = Target(650, 250, 50)

bow.start_charge()
for _ in range(30):
    bow.increase_power()
arrow = bow.release_charge()

for _ in range(200):
    bow.update(1 / 60)
    for flying in bow.arrows:
        flying.check_collision(target)
```

- `archery.target.Target` – a circular target. `check_hit(x, y)` scores a
  point: 10 within a fifth of the radius, 7 within half, 5 for the rest and 0
  outside. `update(dt)` moves a moving target back and forth.
- `archery.barrier.Barrier` – a box that blocks arrows. `check_collision(x, y)`
  tests a point; `set_moving(move, speed)` and `deactivate()` control it.
- `archery.arrow.Arrow` – one arrow. `shoot(angle_deg, power)`, `update(dt)`,
  `check_collision(target)` and the `active` property.
- `archery.bow.Bow` – aiming, charging and the list of fired `arrows`.
  `nock_position()` gives where the drawn arrow sits. `trajectory()` returns
  the preview path as a list of points.
- `archery.render` – `draw_bow`, `draw_arrow`, `draw_target` and
  `draw_barrier` paint onto a pygame surface. `to_screen` maps world
  coordinates (y up) to surface coordinates (y down).
- `archery.game.Game` – the whole scene. `update(dt)`, `key_down(key)`,
  `key_up(key)`, `check_collisions()` and `draw(surface)`.

## What it does not do

The game keeps no score. `Target.check_hit` can score a point, but nothing in
the game calls it. Nothing is shown on screen when an arrow hits, and there
are no levels, sound or saved state.

## Running the tests

```
pip install .[test]
pytest
```