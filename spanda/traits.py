"""Interpolation of animatable values and the protocol every animation follows."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any


class Update(ABC):
    """An animation that can be advanced by a time step."""

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return ``True`` while still running."""


def _round_half_away(x: float) -> int:
    if x >= 0:
        return int(math.floor(x + 0.5))
    return -int(math.floor(-x + 0.5))


def lerp(start: Any, end: Any, t: float) -> Any:
    """Return the value ``t`` of the way from ``start`` to ``end``.

    Integers are rounded to the nearest integer, floats interpolate directly,
    lists and tuples interpolate component-wise, and any other object is
    asked to interpolate itself through its own ``lerp(other, t)`` method.
    """
    if isinstance(start, bool) or isinstance(end, bool):
        raise TypeError("booleans cannot be interpolated")
    if isinstance(start, int) and isinstance(end, int):
        return _round_half_away(start + (end - start) * t)
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        return start + (end - start) * t
    if isinstance(start, (list, tuple)) and isinstance(end, (list, tuple)):
        values = [lerp(a, b, t) for a, b in zip(start, end, strict=True)]
        return values if isinstance(start, list) else tuple(values)
    method = getattr(start, "lerp", None)
    if callable(method):
        return method(end, t)
    raise TypeError(f"cannot interpolate {type(start).__name__} values")