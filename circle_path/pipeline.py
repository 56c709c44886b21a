"""End-to-end path query: obstacle list in, ordered node sequence out."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .config import PathOptions, resolve_options
from .graph import NodeRegistry, VisibilityGraph, build_visibility_graph
from .logging_utils import apply_debug_logging
from .search import find_path
from .types import Circle, ConfigurationError, Node, PathResult
from .validate import validate_circles

logger = logging.getLogger(__name__)


def prepare_circles(raw_circles: Sequence[Any]) -> List[Circle]:
    """Validate, sort by descending radius and assign ids.

    The sort is stable, so the two point circles keep their input order and
    end up last: the second-to-last entry is the start, the last the goal.
    """

    triples = validate_circles(raw_circles)
    ordered = sorted(triples, key=lambda t: -t[2])
    return [Circle(id=idx, x=x, y=y, r=r) for idx, (x, y, r) in enumerate(ordered)]


def _check_endpoint_isolation(graph: VisibilityGraph, endpoints: Tuple[Circle, ...]) -> None:
    # nodes are never merged across circles; a shared position is a layout error
    for circle in endpoints:
        for endpoint in graph.nodes_on_circle(circle.id):
            for node in graph.nodes:
                if node.circle_id != circle.id and (node.x, node.y) == (endpoint.x, endpoint.y):
                    raise ConfigurationError(
                        f"point circle {circle.id} coincides with a node of circle "
                        f"{node.circle_id} at ({node.x}, {node.y})"
                    )


def solve_circles(raw_circles: Sequence[Any], options: Optional[PathOptions] = None) -> PathResult:
    opts = resolve_options(options)
    circles = prepare_circles(raw_circles)
    start_circle, goal_circle = circles[-2], circles[-1]
    logger.info(
        "Finding path from (%g, %g) to (%g, %g) around %d obstacle(s)",
        start_circle.x,
        start_circle.y,
        goal_circle.x,
        goal_circle.y,
        len(circles) - 2,
    )

    registry = NodeRegistry(opts.node_precision)
    start_node = registry.make_node(start_circle, start_circle.center)
    goal_node = registry.make_node(goal_circle, goal_circle.center)
    if (start_node.x, start_node.y) == (goal_node.x, goal_node.y):
        logger.info("Start coincides with goal; returning single-node path")
        return PathResult(nodes=[start_node], cost=0.0, found=True)

    graph = build_visibility_graph(circles, opts)
    _check_endpoint_isolation(graph, (start_circle, goal_circle))
    result = find_path(start_circle, goal_circle, graph, opts)
    if result.found:
        logger.info("Path with %d node(s), cost %.4f", len(result.nodes), result.cost)
    return result


def get_path(raw_circles: Sequence[Any], options: Optional[PathOptions] = None) -> List[Node]:
    """Return the path as a list of nodes, or an empty list when none exists."""

    return solve_circles(raw_circles, options).nodes


__all__ = ["prepare_circles", "solve_circles", "get_path"]


apply_debug_logging(globals(), logger=logger)
