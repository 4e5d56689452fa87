"""Tweens for SVG stroke drawing effects driven by ``stroke-dashoffset``."""

from __future__ import annotations

from typing import Any

from spanda.tween import Tween


def draw_on(path_length: float, **kwargs: Any) -> Tween:
    """Tween the dash offset from ``path_length`` down to zero (draw-on effect).

    Set ``stroke-dasharray`` to ``path_length`` and apply the tween's value as
    ``stroke-dashoffset`` each frame. Extra keyword arguments go to :class:`Tween`.
    """
    return Tween(path_length, 0.0, **kwargs)


def draw_on_reverse(path_length: float, **kwargs: Any) -> Tween:
    """Tween the dash offset from zero up to ``path_length`` (erase effect)."""
    return Tween(0.0, path_length, **kwargs)