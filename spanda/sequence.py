"""Build timelines whose animations play one after another."""

from __future__ import annotations

from typing import List

from spanda.timeline import Timeline, TimelineEntry
from spanda.traits import Update
from spanda.tween import Loop, LoopMode


class Sequence:
    """Chains animations end to end, with optional gaps between them.

    Each animation starts when the previous one ends. :meth:`build` turns the
    chain into a :class:`~spanda.timeline.Timeline`.
    """

    def __init__(self, looping: LoopMode = Loop.ONCE) -> None:
        self._entries: List[TimelineEntry] = []
        self._cursor = 0.0
        self._looping: LoopMode = looping

    def __repr__(self) -> str:
        return f"Sequence(cursor={self._cursor!r}, entries_count={len(self._entries)})"

    @property
    def cursor(self) -> float:
        """Time at which the next appended animation will start."""
        return self._cursor

    def then(self, animation: Update, duration: float) -> "Sequence":
        """Append ``animation``, which lasts ``duration`` seconds."""
        label = f"seq_{len(self._entries)}"
        self._entries.append(TimelineEntry(label, animation, self._cursor, duration))
        self._cursor += duration
        return self

    def gap(self, seconds: float) -> "Sequence":
        """Insert a pause of ``seconds`` before the next animation."""
        self._cursor += seconds
        return self

    def looping(self, mode: LoopMode) -> "Sequence":
        """Set the loop mode of the timeline that :meth:`build` produces."""
        self._looping = mode
        return self

    def build(self) -> Timeline:
        """Produce a timeline holding the chained animations."""
        timeline = Timeline(looping=self._looping)
        timeline.entries.extend(
            TimelineEntry(e.label, e.animation, e.start_at, e.duration)
            for e in self._entries
        )
        return timeline