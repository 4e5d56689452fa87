"""Single-value tweens from a start value to an end value over a duration."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from spanda.traits import Update, lerp


def linear(t: float) -> float:
    """The identity easing curve."""
    return t


class Loop(enum.Enum):
    """How an animation repeats once it reaches its end."""

    ONCE = "once"
    FOREVER = "forever"
    PING_PONG = "ping_pong"


@dataclass(frozen=True)
class Times:
    """Repeat an animation a fixed number of times."""

    count: int


LoopMode = Union[Loop, Times]


class TweenState(enum.Enum):
    """Lifecycle phase of a tween."""

    WAITING = "waiting"
    RUNNING = "running"
    COMPLETED = "completed"
    PAUSED = "paused"


class Tween(Update):
    """Animates a value from ``start`` to ``end`` over ``duration`` seconds."""

    def __init__(
        self,
        start: Any,
        end: Any,
        *,
        duration: float = 1.0,
        easing: Callable[[float], float] = linear,
        delay: float = 0.0,
        time_scale: float = 1.0,
        looping: LoopMode = Loop.ONCE,
    ) -> None:
        self.start = start
        self.end = end
        self.duration = max(duration, 0.0)
        self.easing = easing
        self.delay = max(delay, 0.0)
        self.time_scale = time_scale
        self.looping = looping
        self.loop_count = 0
        self._forward = True
        self._started = False
        self._elapsed = 0.0
        self._state = TweenState.WAITING if self.delay > 0.0 else TweenState.RUNNING
        self._on_start: Optional[Callable[[], None]] = None
        self._on_update: Optional[Callable[[Any], None]] = None
        self._on_complete: Optional[Callable[[], None]] = None
        self._modifier: Optional[Callable[[Any], Any]] = None

    def __repr__(self) -> str:
        return (
            f"Tween(start={self.start!r}, end={self.end!r}, duration={self.duration!r}, "
            f"delay={self.delay!r}, time_scale={self.time_scale!r}, looping={self.looping!r}, "
            f"state={self._state.name})"
        )

    @property
    def state(self) -> TweenState:
        """The current lifecycle phase."""
        return self._state

    def value(self) -> Any:
        """The current eased, interpolated value, passed through any modifier."""
        if self.duration <= 0.0:
            val = self.end
        else:
            raw = min(max(self._elapsed / self.duration, 0.0), 1.0)
            val = lerp(self.start, self.end, self.easing(raw))
        if self._modifier is not None:
            return self._modifier(val)
        return val

    def progress(self) -> float:
        """Raw progress in ``[0, 1]`` before easing."""
        if self.duration <= 0.0:
            return 1.0
        return min(max(self._elapsed / self.duration, 0.0), 1.0)

    def is_complete(self) -> bool:
        """Whether the tween has finished."""
        return self._state is TweenState.COMPLETED

    def reset(self) -> None:
        """Return to the beginning."""
        self._elapsed = 0.0
        self.loop_count = 0
        self._forward = True
        self._started = False
        self._state = TweenState.WAITING if self.delay > 0.0 else TweenState.RUNNING

    def seek(self, t: float) -> None:
        """Jump to progress ``t`` in ``[0, 1]``."""
        t = min(max(t, 0.0), 1.0)
        self._elapsed = t * self.duration
        self._state = TweenState.COMPLETED if t >= 1.0 else TweenState.RUNNING

    def reverse(self) -> None:
        """Swap start and end, then reset."""
        self.start, self.end = self.end, self.start
        self.reset()

    def pause(self) -> None:
        """Freeze the tween."""
        if self._state in (TweenState.RUNNING, TweenState.WAITING):
            self._state = TweenState.PAUSED

    def resume(self) -> None:
        """Continue a paused tween."""
        if self._state is TweenState.PAUSED:
            if self._elapsed > 0.0 or self.delay <= 0.0:
                self._state = TweenState.RUNNING
            else:
                self._state = TweenState.WAITING

    def on_start(self, callback: Callable[[], None]) -> "Tween":
        """Call ``callback`` when each iteration starts running."""
        self._on_start = callback
        return self

    def on_update(self, callback: Callable[[Any], None]) -> "Tween":
        """Call ``callback`` with the current value on each running update."""
        self._on_update = callback
        return self

    def on_complete(self, callback: Callable[[], None]) -> "Tween":
        """Call ``callback`` once when the tween completes."""
        self._on_complete = callback
        return self

    def set_modifier(self, modifier: Callable[[Any], Any]) -> "Tween":
        """Transform every value returned by :meth:`value`."""
        self._modifier = modifier
        return self

    def _finish_iteration(self) -> None:
        looping = self.looping
        if looping is Loop.ONCE:
            self._elapsed = self.duration
            self._state = TweenState.COMPLETED
        elif isinstance(looping, Times):
            self.loop_count += 1
            if self.loop_count >= looping.count:
                self._elapsed = self.duration
                self._state = TweenState.COMPLETED
            else:
                self._elapsed -= self.duration
                self._started = False
        elif looping is Loop.FOREVER:
            self._elapsed -= self.duration
            self.loop_count += 1
            self._started = False
        elif looping is Loop.PING_PONG:
            self._elapsed -= self.duration
            self.loop_count += 1
            self._forward = not self._forward
            self.start, self.end = self.end, self.start
            self._started = False

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return ``True`` while still running."""
        dt = max(dt * self.time_scale, 0.0)

        if self._state in (TweenState.COMPLETED, TweenState.PAUSED):
            return not self.is_complete()
        if self._state is TweenState.WAITING:
            self.delay -= dt
            if self.delay > 0.0:
                return True
            leftover = -self.delay
            self.delay = 0.0
            self._state = TweenState.RUNNING
            self._started = False
            self._elapsed += leftover
        else:
            self._elapsed += dt

        if not self._started:
            self._started = True
            if self._on_start is not None:
                self._on_start()

        if self._elapsed >= self.duration:
            self._finish_iteration()

        if self._state is TweenState.RUNNING and self._on_update is not None:
            self._on_update(self.value())

        if self._state is TweenState.COMPLETED and self._on_complete is not None:
            self._on_complete()

        return not self.is_complete()