from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple
from typing import Literal

Point = Tuple[float, float]
CircleId = int
EdgeKind = Literal["surfing", "hugging"]


class ConfigurationError(RuntimeError):
    """Raised when the obstacle layout cannot produce a well-formed graph."""


@dataclass(frozen=True)
class Circle:
    """Disk obstacle; ``r == 0`` marks a start or goal point."""

    id: CircleId
    x: float
    y: float
    r: float

    @property
    def center(self) -> Point:
        return (self.x, self.y)

    @property
    def is_point(self) -> bool:
        return self.r == 0


@dataclass(frozen=True)
class Node:
    """Rounded point on the boundary of its owning circle."""

    circle: Circle
    x: float
    y: float

    @property
    def circle_id(self) -> CircleId:
        return self.circle.id

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "circle_id": self.circle.id}


@dataclass(frozen=True)
class Edge:
    """Bidirectional graph edge, stored once."""

    a: Node
    b: Node

    @property
    def kind(self) -> EdgeKind:
        return "hugging" if self.a.circle_id == self.b.circle_id else "surfing"


@dataclass
class PathResult:
    nodes: List[Node] = field(default_factory=list)
    cost: float = float("inf")
    found: bool = False
    expanded: int = 0

    def __len__(self) -> int:
        return len(self.nodes)


__all__ = [
    "Point",
    "CircleId",
    "EdgeKind",
    "ConfigurationError",
    "Circle",
    "Node",
    "Edge",
    "PathResult",
]
