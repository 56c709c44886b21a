"""Visibility graph over circular obstacles.

The graph has two edge families.  *Surfing* edges are bitangent segments
between two circles that no third circle blocks; *hugging* edges connect every
pair of nodes lying on the same circle and stand for travel along its arc.
Nodes are tangent points rounded to a fixed precision and deduplicated per
owning circle, which is what lets tangent constructions from different circle
pairs meet at shared vertices.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .bitangents import Segment, external_bitangents, internal_bitangents
from .config import PathOptions, resolve_options
from .types import Circle, CircleId, Edge, Node, Point
from .vectors import as_point, is_finite_point

logger = logging.getLogger(__name__)

_DENOM_EPS = 1e-12

NodeKey = Tuple[CircleId, float, float]


class NodeRegistry:
    """Lookup of nodes keyed by ``(circle id, rounded x, rounded y)``."""

    def __init__(self, precision: int = 2):
        self.precision = precision
        self._scale = 10 ** precision
        self._nodes: Dict[NodeKey, Node] = {}

    def quantize(self, value: float) -> float:
        # round half up, not Python's round-half-even
        return math.floor(value * self._scale + 0.5) / self._scale

    def make_node(self, circle: Circle, point: Point) -> Node:
        """Return the node for ``point`` on ``circle``, creating it on first use."""

        x, y = as_point(point)
        key = (circle.id, self.quantize(x), self.quantize(y))
        node = self._nodes.get(key)
        if node is None:
            node = Node(circle=circle, x=key[1], y=key[2])
            self._nodes[key] = node
        return node

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())


class ObstacleField:
    """Circle centers and radii packed into arrays for batched visibility tests."""

    def __init__(self, circles: Sequence[Circle]):
        self.circles = list(circles)
        self.centers = np.array([[c.x, c.y] for c in self.circles], dtype=float).reshape(-1, 2)
        self.radii = np.array([c.r for c in self.circles], dtype=float)

    def blocked_mask(self, p: Point, q: Point) -> np.ndarray:
        """Boolean mask of circles whose closest approach to ``pq`` is within radius."""

        start = np.asarray(as_point(p), dtype=float)
        direction = np.asarray(as_point(q), dtype=float) - start
        denom = float(np.dot(direction, direction))
        if denom <= _DENOM_EPS:
            u = np.zeros(len(self.circles), dtype=float)
        else:
            u = np.clip((self.centers - start) @ direction / denom, 0.0, 1.0)
        closest = start + u[:, None] * direction
        distances = np.hypot(*(self.centers - closest).T)
        return distances <= self.radii

    def line_of_sight(self, i: int, p: Point, j: int, q: Point) -> bool:
        """Return True if no circle other than ``i`` and ``j`` blocks ``pq``."""

        mask = self.blocked_mask(p, q)
        mask[[i, j]] = False
        return not bool(mask.any())


def line_of_sight(circles: Sequence[Circle], i: int, p: Point, j: int, q: Point) -> bool:
    return ObstacleField(circles).line_of_sight(i, p, j, q)


@dataclass
class BuildStats:
    attempted: int = 0
    missing: int = 0
    blocked: int = 0
    accepted: int = 0


def _candidate_segments(a: Circle, b: Circle) -> Iterator[Tuple[str, Optional[Segment]]]:
    # point obstacles yield fewer meaningful bitangents
    both_sized = not (a.is_point or b.is_point)
    any_sized = not (a.is_point and b.is_point)
    internal = internal_bitangents(a, b)
    yield "internal-outer", internal.outer if internal else None
    if both_sized:
        yield "internal-inner", internal.inner if internal else None
    if any_sized:
        external = external_bitangents(a, b)
        yield "external-outer", external.outer if external else None
        if both_sized:
            yield "external-inner", external.inner if external else None


def generate_nodes_and_surfing_edges(
    circles: Sequence[Circle],
    options: Optional[PathOptions] = None,
) -> Tuple[List[Node], List[Edge], BuildStats]:
    """Create tangent-point nodes and the unblocked surfing edges between them.

    ``circles`` must be indexed by id (``circles[k].id == k``).  Each edge is
    listed once even though it is traversable in both directions.
    """

    opts = resolve_options(options)
    registry = NodeRegistry(opts.node_precision)
    obstacles = ObstacleField(circles)
    stats = BuildStats()
    edges: List[Edge] = []

    for i, ci in enumerate(circles):
        for j in range(i):
            cj = circles[j]
            for label, segment in _candidate_segments(ci, cj):
                stats.attempted += 1
                if segment is None or not (is_finite_point(segment[0]) and is_finite_point(segment[1])):
                    stats.missing += 1
                    continue
                p, q = segment
                if not obstacles.line_of_sight(i, p, j, q):
                    stats.blocked += 1
                    logger.debug("Blocked %s bitangent between circles %d and %d", label, ci.id, cj.id)
                    continue
                stats.accepted += 1
                edges.append(Edge(registry.make_node(ci, p), registry.make_node(cj, q)))

    logger.debug(
        "Surfing edges: attempted=%d missing=%d blocked=%d accepted=%d nodes=%d",
        stats.attempted,
        stats.missing,
        stats.blocked,
        stats.accepted,
        len(registry),
    )
    return registry.nodes, edges, stats


def generate_hugging_edges(nodes: Sequence[Node]) -> List[Edge]:
    """Connect every pair of distinct nodes that share an owning circle."""

    buckets: Dict[CircleId, List[Node]] = defaultdict(list)
    for node in nodes:
        buckets[node.circle_id].append(node)

    edges: List[Edge] = []
    for bucket in buckets.values():
        for a, b in combinations(bucket, 2):
            edges.append(Edge(a, b))
    logger.debug("Hugging edges: %d across %d circle(s)", len(edges), len(buckets))
    return edges


@dataclass
class VisibilityGraph:
    circles: List[Circle]
    nodes: List[Node]
    surfing_edges: List[Edge]
    hugging_edges: List[Edge]
    stats: BuildStats = field(default_factory=BuildStats)
    _adjacency: Optional[Dict[Node, List[Node]]] = field(default=None, init=False, repr=False)

    @property
    def edges(self) -> List[Edge]:
        return self.surfing_edges + self.hugging_edges

    def _build_adjacency(self) -> Dict[Node, List[Node]]:
        adjacency: Dict[Node, List[Node]] = {node: [] for node in self.nodes}
        for edge in self.edges:
            adjacency[edge.a].append(edge.b)
            adjacency[edge.b].append(edge.a)
        return adjacency

    def neighbors(self, node: Node) -> List[Node]:
        if self._adjacency is None:
            self._adjacency = self._build_adjacency()
        return self._adjacency.get(node, [])

    def nodes_on_circle(self, circle_id: CircleId) -> List[Node]:
        return [node for node in self.nodes if node.circle_id == circle_id]


def build_visibility_graph(
    circles: Sequence[Circle],
    options: Optional[PathOptions] = None,
) -> VisibilityGraph:
    nodes, surfing, stats = generate_nodes_and_surfing_edges(circles, options)
    hugging = generate_hugging_edges(nodes)
    logger.debug(
        "Visibility graph: %d node(s), %d surfing + %d hugging edge(s)",
        len(nodes),
        len(surfing),
        len(hugging),
    )
    return VisibilityGraph(
        circles=list(circles),
        nodes=nodes,
        surfing_edges=surfing,
        hugging_edges=hugging,
        stats=stats,
    )


__all__ = [
    "NodeRegistry",
    "ObstacleField",
    "BuildStats",
    "VisibilityGraph",
    "line_of_sight",
    "generate_nodes_and_surfing_edges",
    "generate_hugging_edges",
    "build_visibility_graph",
]
