"""Weighted shortest-path search over the visibility graph."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Dict, List, Optional, Sequence

from .config import PathOptions, resolve_options
from .graph import VisibilityGraph
from .logging_utils import apply_debug_logging
from .types import Circle, ConfigurationError, Node, PathResult
from .vectors import angle_difference, vec_distance, vec_facing

logger = logging.getLogger(__name__)

Heuristic = Callable[[Node, Node], float]


def edge_cost(a: Node, b: Node, penalty: float = 1.0) -> float:
    """Cost of moving between two adjacent nodes, identical in both directions.

    Nodes on the same circle are joined by the shorter arc; nodes on different
    circles by a straight segment.  ``penalty`` is charged once per edge.
    """

    if a.circle_id == b.circle_id:
        center = a.circle
        delta = angle_difference(vec_facing(center, a), vec_facing(center, b))
        return penalty + delta * center.r
    return penalty + vec_distance(a, b)


def path_cost(nodes: Sequence[Node], penalty: float = 1.0) -> float:
    return sum(edge_cost(a, b, penalty) for a, b in zip(nodes, nodes[1:]))


def _zero_heuristic(node: Node, goal: Node) -> float:
    return 0.0


def _euclidean_heuristic(node: Node, goal: Node) -> float:
    return vec_distance(node, goal)


_HEURISTICS: Dict[str, Heuristic] = {
    "none": _zero_heuristic,
    "euclidean": _euclidean_heuristic,
}


def circle_to_node(circle: Circle, graph: VisibilityGraph) -> Node:
    """Return the single node owned by a point circle."""

    nodes = graph.nodes_on_circle(circle.id)
    if len(nodes) != 1:
        raise ConfigurationError(
            f"start/goal circle {circle.id} at ({circle.x}, {circle.y}) resolves to "
            f"{len(nodes)} node(s); expected exactly one"
        )
    return nodes[0]


def reconstruct_path(
    came_from: Dict[Node, Optional[Node]],
    start: Node,
    goal: Node,
) -> Optional[List[Node]]:
    """Walk predecessors back from ``goal``; ``None`` if the chain never reaches ``start``."""

    if goal not in came_from:
        return None
    current = goal
    path = [current]
    while current != start:
        current = came_from.get(current)
        if current is None:
            return None
        path.append(current)
    path.reverse()
    return path


def find_path(
    start_circle: Circle,
    goal_circle: Circle,
    graph: VisibilityGraph,
    options: Optional[PathOptions] = None,
) -> PathResult:
    opts = resolve_options(options)
    heuristic = _HEURISTICS[opts.heuristic]
    start = circle_to_node(start_circle, graph)
    goal = circle_to_node(goal_circle, graph)

    counter = itertools.count()
    frontier = [(heuristic(start, goal), next(counter), start)]
    came_from: Dict[Node, Optional[Node]] = {start: None}
    cost_so_far: Dict[Node, float] = {start: 0.0}
    closed = set()

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        closed.add(current)
        if current == goal:
            break
        for nxt in graph.neighbors(current):
            if nxt in closed:
                continue
            new_cost = cost_so_far[current] + edge_cost(current, nxt, opts.edge_penalty)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                came_from[nxt] = current
                heapq.heappush(frontier, (new_cost + heuristic(nxt, goal), next(counter), nxt))

    nodes = reconstruct_path(came_from, start, goal) if goal in closed else None
    if nodes is None:
        logger.info("No path from circle %d to circle %d", start_circle.id, goal_circle.id)
        return PathResult(nodes=[], found=False, expanded=len(closed))

    logger.debug(
        "Path found: %d node(s), cost %.4f, %d node(s) expanded",
        len(nodes),
        cost_so_far[goal],
        len(closed),
    )
    return PathResult(nodes=nodes, cost=cost_so_far[goal], found=True, expanded=len(closed))


__all__ = [
    "Heuristic",
    "edge_cost",
    "path_cost",
    "circle_to_node",
    "reconstruct_path",
    "find_path",
]


apply_debug_logging(globals(), logger=logger, skip={"edge_cost", "path_cost", "_zero_heuristic", "_euclidean_heuristic"})
