"""Value modifiers that post-process interpolated tween values."""

from __future__ import annotations

import math
from typing import Callable


def _round_half_away(x: float) -> float:
    """Round to the nearest whole number, ties away from zero."""
    if x >= 0:
        return float(math.floor(x + 0.5))
    return -float(math.floor(-x + 0.5))


def snap_to(grid: float) -> Callable[[float], float]:
    """Return a modifier that snaps values to the nearest multiple of ``grid``.

    A non-positive ``grid`` yields a modifier that returns values unchanged.
    """

    def snap(value: float) -> float:
        if grid <= 0.0:
            return value
        return _round_half_away(value / grid) * grid

    return snap


def round_to(decimals: int) -> Callable[[float], float]:
    """Return a modifier that rounds values to ``decimals`` decimal places."""
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    factor = 10.0 ** decimals

    def rounder(value: float) -> float:
        return _round_half_away(value * factor) / factor

    return rounder