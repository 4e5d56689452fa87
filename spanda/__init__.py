"""Tweens, value modifiers, SVG drawing tweens, timelines, sequences and stagger."""

__version__ = "0.8.0"

__all__ = [
    "traits",
    "tween",
    "modifiers",
    "svg_draw",
    "timeline",
    "sequence",
    "stagger",
]