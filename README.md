# spanda

A small, dependency-free animation toolkit: tweens with delays, time scaling,
looping, callbacks and value modifiers; timelines that play several
animations at offsets; sequences that chain animations end to end; staggered
groups; and tweens for SVG line-drawing effects.

Everything is driven by time steps you supply. Each animation has an
`update(dt)` method that advances it by `dt` seconds and returns `True` while
it is still running and `False` once it has finished, so a game loop, a UI
timer or a test can drive it the same way.

## Installation

```
pip install spanda
```

To run the test suite from a checkout:

```
pip install -e ".[test]"
pytest
```

## Modules

| Module | What it holds |
|---|---|
| `spanda.traits` | `Update`, the abstract base every animation follows, and `lerp` |
| `spanda.tween` | `Tween`, `TweenState`, `Loop`, `Times` and the `linear` easing |
| `spanda.modifiers` | `snap_to` and `round_to`, value modifiers for tweens |
| `spanda.svg_draw` | `draw_on` and `draw_on_reverse`, tweens for `stroke-dashoffset` drawing effects |
| `spanda.timeline` | `Timeline`, `TimelineEntry`, `TimelineState` and the placements `AtStart`, `AtEnd`, `AtLabel`, `AtOffset` |
| `spanda.sequence` | `Sequence`, which chains animations end to end |
| `spanda.stagger` | `stagger`, which starts a list of animations at even intervals |

## Interpolation

`lerp(start, end, t)` returns the value `t` of the way from `start` to `end`.
Two integers give an integer rounded to the nearest (ties away from zero);
other numbers interpolate directly; lists and tuples of equal length
interpolate component by component and keep their type; any other object is
asked for `start.lerp(end, t)`. Booleans, and values that fit none of these,
raise `TypeError`.

## Tweens

A tween moves a value from a start to an end over a duration, through an
easing curve. The easing is any callable that maps a float in `[0, 1]` to a
float; the default is `linear`.

```python
from spanda.tween import Tween

tween = Tween(0.0, 100.0, duration=1.0)
tween.update(0.5)
print(tween.value())        # 50.0
tween.update(0.5)
print(tween.is_complete())  # True
```

Keyword options: `duration` (default 1.0, negative values become 0),
`easing`, `delay` (seconds to wait before running), `time_scale` (multiplies
every `dt`; 0 holds the tween still) and `looping`:

- `Loop.ONCE` — play once and complete (the default);
- `Loop.FOREVER` — restart each time the end is reached;
- `Loop.PING_PONG` — swap start and end each time the end is reached;
- `Times(n)` — play `n` times, then complete.

`state` reports a `TweenState` (`WAITING`, `RUNNING`, `COMPLETED`, `PAUSED`),
and `progress()` the raw progress before easing. `pause`, `resume`,
`seek(t)`, `reset` and `reverse` control playback. `on_start` fires when each
iteration starts running, `on_update` receives the value after each update
while running, and `on_complete` fires when the tween completes.

A modifier post-processes every value that `value()` returns:

```python
from spanda.modifiers import round_to, snap_to

tween.set_modifier(snap_to(25.0))   # nearest multiple of 25
tween.set_modifier(round_to(1))     # one decimal place
```

`snap_to` with a grid of zero or less leaves values unchanged; `round_to`
with a negative number of decimals raises `ValueError`.

## SVG line drawing

```python
from spanda.svg_draw import draw_on

tween = draw_on(320.0, duration=1.5)
```

Set the element's `stroke-dasharray` to the path length and apply the
tween's value as its `stroke-dashoffset` each frame: `draw_on` runs from the
length down to zero, `draw_on_reverse` from zero up to the length. Extra
keyword arguments go to `Tween`.

## Timelines

```python
from spanda.timeline import AtLabel, Timeline
from spanda.tween import Tween

timeline = (
    Timeline()
    .add("fade", Tween(0.0, 1.0, duration=0.5), 0.2)
    .add("slide", Tween(100.0, 0.0, duration=0.8), 0.0)
)
timeline.add_at("scale", Tween(1.0, 2.0, duration=0.3), 0.3, AtLabel("fade"))

timeline.play()
while timeline.update(1 / 60):
    pass
```

`add(label, animation, start_at)` schedules an animation at a fixed time but
records no duration for it. `add_at(label, animation, duration, at)` records
the duration and places the animation relative to what is there:

- `AtStart()` — at time zero;
- `AtEnd()` — after the latest-ending entry;
- `AtLabel(label)` — at the start time of the first entry with that label, or at zero if there is none;
- `AtOffset(seconds)` — that many seconds after the last-added entry ends (negative values overlap).

Start times are never negative. Entries added with `add` count as zero
length for `AtEnd`, `AtOffset` and `duration()`.

A timeline does nothing until `play()`. Each entry receives time once the
timeline reaches its start; the timeline completes when every entry has
finished, then calls the callbacks registered with `on_finish`. `pause`,
`resume`, `seek`, `reset`, `duration`, `progress` and `time_scale` work as
for tweens. A timeline with no entries never completes.

## Sequences and stagger

```python
from spanda.sequence import Sequence
from spanda.stagger import stagger
from spanda.tween import Tween

timeline = (
    Sequence()
    .then(Tween(0.0, 100.0, duration=0.5), 0.5)
    .gap(0.1)
    .then(Tween(100.0, 0.0, duration=0.3), 0.3)
    .build()
)

grouped = stagger([(Tween(0.0, 1.0, duration=0.5), 0.5) for _ in range(3)], 0.2)
```

`Sequence.then` appends an animation with its duration, starting where the
previous one ended; `gap` inserts a pause; `build` returns a `Timeline`.
`stagger` returns a timeline in which the i-th animation starts at
`i * stagger_delay` seconds. Both timelines must still be started with
`play()`.

## What it does not do

The package has no physics-based animation (springs), no parser for SVG path
`d` strings and no scroll-linked driver: tweens and timelines advance only
by the time steps passed to `update`. There is no clock or frame loop of its
own and no rendering; applying the values to a screen or document is up to
the caller. A timeline records a loop mode but plays its entries only once.