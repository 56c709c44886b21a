"""Example pipeline: build the visibility graph for the demo scene and search it."""

import logging

from circle_path import PathOptions, build_visibility_graph, demo_circles, find_path, prepare_circles

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    circles = prepare_circles(demo_circles())
    for circle in circles:
        print(f"circle {circle.id}: ({circle.x:g}, {circle.y:g}) r={circle.r:g}")

    graph = build_visibility_graph(circles)
    print(f"\nNodes: {len(graph.nodes)}")
    print(f"Surfing edges: {len(graph.surfing_edges)}")
    print(f"Hugging edges: {len(graph.hugging_edges)}")
    print(f"Rejected candidates: {graph.stats.missing} out of domain, {graph.stats.blocked} blocked")

    for heuristic in ("none", "euclidean"):
        result = find_path(circles[-2], circles[-1], graph, PathOptions(heuristic=heuristic))
        print(f"\nHeuristic {heuristic}: cost {result.cost:.3f}, {result.expanded} node(s) expanded")
        for node in result.nodes:
            print(f"  ({node.x:.2f}, {node.y:.2f}) on circle {node.circle_id}")


if __name__ == "__main__":
    main()
