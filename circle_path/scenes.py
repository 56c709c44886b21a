"""Sample obstacle layouts."""

from __future__ import annotations

from typing import Dict, List

# Six disks between a start at the upper left and a goal at the lower right.
DEMO_CIRCLES: List[Dict[str, float]] = [
    {"x": 113, "y": 99, "r": 55},
    {"x": 497, "y": 243, "r": 40},
    {"x": 379, "y": 237, "r": 40},
    {"x": 330, "y": 113, "r": 35},
    {"x": 179, "y": 190, "r": 30},
    {"x": 278, "y": 233, "r": 30},
    {"x": 30, "y": 74, "r": 0},
    {"x": 570, "y": 280, "r": 0},
]


def demo_circles() -> List[Dict[str, float]]:
    return [dict(circle) for circle in DEMO_CIRCLES]


__all__ = ["DEMO_CIRCLES", "demo_circles"]
