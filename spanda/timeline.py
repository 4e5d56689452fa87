"""Timelines that play several animations concurrently or at offsets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, List, Union

from spanda.traits import Update
from spanda.tween import Loop, LoopMode


class TimelineState(enum.Enum):
    """Playback state of a timeline."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class AtStart:
    """Place an entry at the very start of the timeline."""


@dataclass(frozen=True)
class AtEnd:
    """Place an entry after the latest-ending entry."""


@dataclass(frozen=True)
class AtLabel:
    """Place an entry at the start time of the entry with ``label``."""

    label: str


@dataclass(frozen=True)
class AtOffset:
    """Place an entry ``offset`` seconds after the last-added entry ends.

    A negative offset overlaps the previous entry.
    """

    offset: float


At = Union[AtStart, AtEnd, AtLabel, AtOffset]


@dataclass
class TimelineEntry:
    """One scheduled animation inside a timeline."""

    label: str
    animation: Update
    start_at: float
    duration: float = 0.0
    started: bool = False
    completed: bool = False

    @property
    def end_at(self) -> float:
        """When this entry is scheduled to finish."""
        return self.start_at + self.duration


class Timeline(Update):
    """A collection of animations that play concurrently with per-entry offsets."""

    def __init__(self, looping: LoopMode = Loop.ONCE) -> None:
        self.entries: List[TimelineEntry] = []
        self.looping = looping
        self.time_scale = 1.0
        self._elapsed = 0.0
        self._state = TimelineState.IDLE
        self._on_finish: List[Callable[[], None]] = []

    def __repr__(self) -> str:
        return (
            f"Timeline(entries={self.entries!r}, elapsed={self._elapsed!r}, "
            f"state={self._state.name}, looping={self.looping!r}, "
            f"time_scale={self.time_scale!r})"
        )

    @property
    def state(self) -> TimelineState:
        """Current playback state."""
        return self._state

    @property
    def elapsed(self) -> float:
        """Seconds of timeline time that have passed."""
        return self._elapsed

    def add(self, label: str, animation: Update, start_at: float) -> "Timeline":
        """Schedule ``animation`` at ``start_at`` seconds, with no known duration."""
        self.entries.append(TimelineEntry(label, animation, start_at))
        return self

    def add_at(self, label: str, animation: Update, duration: float, at: At) -> None:
        """Schedule ``animation`` relative to existing entries.

        ``duration`` is the animation's length in seconds; ``at`` chooses the
        placement. The resulting start time is never negative.
        """
        if isinstance(at, AtStart):
            start_at = 0.0
        elif isinstance(at, AtEnd):
            start_at = max((e.end_at for e in self.entries), default=0.0)
            start_at = max(start_at, 0.0)
        elif isinstance(at, AtLabel):
            start_at = next(
                (e.start_at for e in self.entries if e.label == at.label), 0.0
            )
        elif isinstance(at, AtOffset):
            if self.entries:
                start_at = self.entries[-1].end_at + at.offset
            else:
                start_at = max(at.offset, 0.0)
        else:
            raise TypeError(f"unknown placement {at!r}")
        self.entries.append(
            TimelineEntry(label, animation, max(start_at, 0.0), duration)
        )

    def play(self) -> None:
        """Start playing."""
        self._state = TimelineState.PLAYING

    def pause(self) -> None:
        """Pause if playing."""
        if self._state is TimelineState.PLAYING:
            self._state = TimelineState.PAUSED

    def resume(self) -> None:
        """Resume if paused."""
        if self._state is TimelineState.PAUSED:
            self._state = TimelineState.PLAYING

    def _clear_entry_flags(self) -> None:
        for entry in self.entries:
            entry.started = False
            entry.completed = False

    def seek(self, t: float) -> None:
        """Jump to time ``t`` (clamped at zero) and mark every entry unstarted."""
        self._elapsed = max(t, 0.0)
        self._clear_entry_flags()

    def reset(self) -> None:
        """Go back to the beginning and to the idle state."""
        self._elapsed = 0.0
        self._state = TimelineState.IDLE
        self._clear_entry_flags()

    def duration(self) -> float:
        """Time at which the latest entry ends."""
        return max(0.0, max((e.end_at for e in self.entries), default=0.0))

    def progress(self) -> float:
        """Progress in ``[0, 1]``; 1.0 when the duration is not positive."""
        total = self.duration()
        if total <= 0.0:
            return 1.0
        return min(max(self._elapsed / total, 0.0), 1.0)

    def on_finish(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` when the timeline completes."""
        self._on_finish.append(callback)

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return ``True`` until the timeline completes."""
        if self._state is not TimelineState.PLAYING:
            return self._state is not TimelineState.COMPLETED

        dt = max(dt * self.time_scale, 0.0)
        self._elapsed += dt
        all_done = True

        for entry in self.entries:
            if entry.completed:
                continue
            if self._elapsed < entry.start_at:
                all_done = False
                continue
            if entry.started:
                entry_dt = dt
            else:
                entry.started = True
                entry_dt = min(self._elapsed - entry.start_at, dt)
            if entry.animation.update(entry_dt):
                all_done = False
            else:
                entry.completed = True

        if all_done and self.entries:
            self._state = TimelineState.COMPLETED
            for callback in self._on_finish:
                callback()
            return False
        return True