import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from circle_path import (
    ConfigurationError,
    PathOptions,
    demo_circles,
    solve_circles,
)
from circle_path.config import HEURISTICS

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_circles(path: str) -> List[dict]:
    with open(path) as fin:
        data = json.load(fin)
    if isinstance(data, dict):
        data = data.get("circles", [])
    return data


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Shortest path around circular obstacles")
    parser.add_argument("path", nargs="?", help="JSON file with a list of {x, y, r} circles")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the built-in six-obstacle demo scene",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--heuristic",
        choices=HEURISTICS,
        default="none",
        help="Search heuristic (default: none, i.e. Dijkstra)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=2,
        help="Decimals used when deduplicating tangent points (default: 2)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the path as JSON instead of one node per line",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.demo:
        circles = demo_circles()
    elif args.path:
        logger.info("Loading circles from %s", args.path)
        circles = _load_circles(args.path)
    else:
        parser.error("either a path or --demo is required")

    try:
        options = PathOptions(node_precision=args.precision, heuristic=args.heuristic)
        result = solve_circles(circles, options)
    except (ValueError, ConfigurationError) as exc:
        logger.error("%s", exc)
        return 2

    if not result.found:
        logger.error("No path found")
        if args.json:
            print(json.dumps({"found": False, "path": []}))
        return 1

    if args.json:
        payload = {
            "found": True,
            "cost": result.cost,
            "path": [node.as_dict() for node in result.nodes],
        }
        print(json.dumps(payload))
    else:
        for node in result.nodes:
            print(f"{node.x:.2f} {node.y:.2f} circle={node.circle_id}")
        print(f"cost={result.cost:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
