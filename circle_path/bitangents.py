"""Bitangent construction between pairs of circles.

Both families share the same layout: ``c``/``d`` lie on circle ``A`` and
``e``/``f`` on circle ``B``.  The *outer* candidate segment is ``c-f`` and the
*inner* one ``d-e``; each is a genuine tangent line touching both circles.

Internal bitangents cross between the circles::

    theta = acos((rA + rB) / |AB|)
    c, d = A + rA * polar(AB -/+ theta)
    e, f = B + rB * polar(BA +/- theta)

External bitangents stay on one side, and both tangent points are referenced
from the bearing of ``B`` seen from ``A``::

    theta = acos((rA - rB) / |AB|)
    c, d = A + rA * polar(AB -/+ theta)
    e, f = B + rB * polar(AB +/- theta)

When the ``acos`` argument leaves [-1, 1] (overlapping circles for the
internal family, one circle swallowing the other for the external one) the
constructors return ``None`` instead of propagating NaN.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .types import Circle, Point
from .vectors import direction_step, vec_distance, vec_facing, vec_interpolate, vec_sub

logger = logging.getLogger(__name__)

_EPS = 1e-12

Segment = Tuple[Point, Point]


@dataclass(frozen=True)
class Bitangents:
    """Tangent points of one bitangent family for the circle pair ``(a, b)``."""

    kind: str
    a: Circle
    b: Circle
    theta: float
    c: Point
    d: Point
    e: Point
    f: Point

    @property
    def points(self) -> Tuple[Point, Point, Point, Point]:
        return (self.c, self.d, self.e, self.f)

    @property
    def outer(self) -> Segment:
        return (self.c, self.f)

    @property
    def inner(self) -> Segment:
        return (self.d, self.e)


def _half_angle(a: Circle, b: Circle, radius_term: float) -> Optional[float]:
    distance = vec_distance(a, b)
    if distance <= _EPS:
        return None
    cos_angle = radius_term / distance
    if not -1.0 <= cos_angle <= 1.0:
        return None
    return math.acos(cos_angle)


def internal_bitangents(a: Circle, b: Circle) -> Optional[Bitangents]:
    theta = _half_angle(a, b, a.r + b.r)
    if theta is None:
        logger.debug("No internal bitangents between circles %d and %d", a.id, b.id)
        return None
    ab_angle = vec_facing(a, b)
    ba_angle = vec_facing(b, a)
    return Bitangents(
        kind="internal",
        a=a,
        b=b,
        theta=theta,
        c=direction_step(a, a.r, ab_angle - theta),
        d=direction_step(a, a.r, ab_angle + theta),
        e=direction_step(b, b.r, ba_angle + theta),
        f=direction_step(b, b.r, ba_angle - theta),
    )


def external_bitangents(a: Circle, b: Circle) -> Optional[Bitangents]:
    theta = _half_angle(a, b, a.r - b.r)
    if theta is None:
        logger.debug("No external bitangents between circles %d and %d", a.id, b.id)
        return None
    ab_angle = vec_facing(a, b)
    return Bitangents(
        kind="external",
        a=a,
        b=b,
        theta=theta,
        c=direction_step(a, a.r, ab_angle - theta),
        d=direction_step(a, a.r, ab_angle + theta),
        e=direction_step(b, b.r, ab_angle + theta),
        f=direction_step(b, b.r, ab_angle - theta),
    )


@dataclass(frozen=True)
class SegmentCircleIntersection:
    u: float
    closest: Point
    distance: float
    intersects: bool


def segment_circle_intersection(p: Point, q: Point, circle: Circle) -> SegmentCircleIntersection:
    """Closest approach of segment ``pq`` to the center of ``circle``.

    The projection parameter is clamped to the segment, so a circle beyond an
    endpoint is measured against that endpoint.
    """

    cp = vec_sub(circle.center, p)
    qp = vec_sub(q, p)
    denom = qp[0] * qp[0] + qp[1] * qp[1]
    if denom <= _EPS:
        u = 0.0
    else:
        u = (cp[0] * qp[0] + cp[1] * qp[1]) / denom
        u = min(max(u, 0.0), 1.0)
    closest = vec_interpolate(p, q, u)
    distance = vec_distance(circle, closest)
    return SegmentCircleIntersection(u=u, closest=closest, distance=distance, intersects=distance <= circle.r)


__all__ = [
    "Bitangents",
    "Segment",
    "SegmentCircleIntersection",
    "internal_bitangents",
    "external_bitangents",
    "segment_circle_intersection",
]
