"""Plain 2D vector helpers shared by the tangent solver and the search.

Points are accepted either as ``(x, y)`` sequences or as objects exposing
``x``/``y`` attributes (``Circle`` and ``Node`` both qualify).  Every helper
returns plain float tuples so results can be fed straight back in.
"""

from __future__ import annotations

import math
from typing import Any, Tuple

Point = Tuple[float, float]
Vector = Tuple[float, float]

_TWO_PI = 2.0 * math.pi


def as_point(pt: Any) -> Point:
    if hasattr(pt, "x") and hasattr(pt, "y"):
        return (float(pt.x), float(pt.y))
    return (float(pt[0]), float(pt[1]))


def vec_add(a: Any, b: Any) -> Point:
    ax, ay = as_point(a)
    bx, by = as_point(b)
    return (ax + bx, ay + by)


def vec_sub(a: Any, b: Any) -> Vector:
    ax, ay = as_point(a)
    bx, by = as_point(b)
    return (ax - bx, ay - by)


def vec_interpolate(a: Any, b: Any, t: float) -> Point:
    """Return the point at parameter ``t`` along ``a -> b``."""

    ax, ay = as_point(a)
    bx, by = as_point(b)
    return (ax + (bx - ax) * t, ay + (by - ay) * t)


def vec_distance(a: Any, b: Any) -> float:
    dx, dy = vec_sub(b, a)
    return math.hypot(dx, dy)


def vec_polar(distance: float, angle: float) -> Vector:
    return (distance * math.cos(angle), distance * math.sin(angle))


def direction_step(origin: Any, distance: float, angle: float) -> Point:
    """Return the point ``distance`` away from ``origin`` along ``angle``."""

    return vec_add(origin, vec_polar(distance, angle))


def vec_facing(a: Any, b: Any) -> float:
    """Bearing of ``b`` as seen from ``a`` in radians, in (-pi, pi]."""

    dx, dy = vec_sub(b, a)
    return math.atan2(dy, dx)


def angle_difference(a: float, b: float) -> float:
    """Shorter angular separation between two bearings, in [0, pi]."""

    delta = math.fmod(abs(a - b), _TWO_PI)
    if delta > math.pi:
        delta = _TWO_PI - delta
    return delta


def is_finite_point(pt: Any) -> bool:
    x, y = as_point(pt)
    return math.isfinite(x) and math.isfinite(y)


__all__ = [
    "Point",
    "Vector",
    "as_point",
    "vec_add",
    "vec_sub",
    "vec_interpolate",
    "vec_distance",
    "vec_polar",
    "direction_step",
    "vec_facing",
    "angle_difference",
    "is_finite_point",
]
