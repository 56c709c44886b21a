"""Default options for graph construction and search."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

HEURISTICS = ("none", "euclidean")


@dataclass
class PathOptions:
    """Pathfinding options.

    ``node_precision`` is the number of decimals tangent points are rounded to
    before deduplication; ``edge_penalty`` is added to every edge cost so that
    paths with fewer nodes win when distances are comparable; ``heuristic``
    selects plain Dijkstra (``"none"``) or A* guided by straight-line distance
    to the goal (``"euclidean"``).
    """

    node_precision: int = 2
    edge_penalty: float = 1.0
    heuristic: str = "none"

    def __post_init__(self) -> None:
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"unknown heuristic {self.heuristic!r}; expected one of {HEURISTICS}")
        if self.node_precision < 0:
            raise ValueError("node_precision must be non-negative")
        if self.edge_penalty < 0:
            raise ValueError("edge_penalty must be non-negative")


_PATH_OPTIONS = PathOptions()


def get_path_options() -> PathOptions:
    return copy.deepcopy(_PATH_OPTIONS)


def set_path_options(options: PathOptions) -> None:
    global _PATH_OPTIONS
    _PATH_OPTIONS = copy.deepcopy(options)


def resolve_options(options: Optional[PathOptions]) -> PathOptions:
    return options if options is not None else get_path_options()


__all__ = [
    "HEURISTICS",
    "PathOptions",
    "get_path_options",
    "set_path_options",
    "resolve_options",
]
