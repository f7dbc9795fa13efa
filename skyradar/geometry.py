"""Plane-vector helpers for the radar area."""

from __future__ import annotations

import math

Vector = tuple[float, float]

WIDTH = 1920
HEIGHT = 1080


def scale(vector: Vector, mx: float, my: float) -> Vector:
    """Multiply each component by its own factor."""
    return (vector[0] * mx, vector[1] * my)


def distance(start: Vector, end: Vector) -> float:
    """Euclidean distance between two points."""
    return math.hypot(end[0] - start[0], end[1] - start[1])


def direction(start: Vector, end: Vector, speed: float) -> Vector:
    """Vector of length ``speed`` pointing from ``start`` to ``end``.

    Identical points have no direction and give NaN components.
    """
    norm = distance(start, end)
    if norm == 0:
        return (math.nan, math.nan)
    return ((end[0] - start[0]) / norm * speed, (end[1] - start[1]) / norm * speed)


def wrapped_distance(start: Vector, end: Vector) -> float:
    """Distance used for landing checks; always the straight distance."""
    return distance(start, end)


def wrap(value: float, limit: float) -> float:
    """Bring ``value`` back into the screen span ``[0, limit)``.

    A negative value is shifted by a single ``limit``; a zero limit gives NaN.
    """
    if value < 0:
        return limit + value
    if limit == 0:
        return math.nan
    return math.fmod(value, abs(limit))