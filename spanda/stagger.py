"""Timelines whose animations start at evenly spaced offsets."""

from __future__ import annotations

from typing import Iterable, Tuple

from spanda.timeline import Timeline, TimelineEntry
from spanda.traits import Update


def stagger(animations: Iterable[Tuple[Update, float]], stagger_delay: float) -> Timeline:
    """Build a timeline where each animation starts ``stagger_delay`` after the last.

    ``animations`` yields ``(animation, duration)`` pairs; the i-th animation
    starts at ``i * stagger_delay`` seconds.
    """
    timeline = Timeline()
    for index, (animation, duration) in enumerate(animations):
        timeline.entries.append(
            TimelineEntry(f"stagger_{index}", animation, index * stagger_delay, duration)
        )
    return timeline