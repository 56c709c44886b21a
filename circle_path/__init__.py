from .types import Circle, Node, Edge, PathResult, ConfigurationError
from .config import PathOptions, get_path_options, set_path_options
from .validate import ValidationError, validate_circles
from .vectors import angle_difference, direction_step, vec_distance, vec_facing
from .bitangents import Bitangents, internal_bitangents, external_bitangents, segment_circle_intersection
from .graph import (
    NodeRegistry,
    VisibilityGraph,
    build_visibility_graph,
    generate_hugging_edges,
    generate_nodes_and_surfing_edges,
    line_of_sight,
)
from .search import circle_to_node, edge_cost, find_path, path_cost, reconstruct_path
from .pipeline import get_path, prepare_circles, solve_circles
from .scenes import DEMO_CIRCLES, demo_circles

__all__ = [
    'Circle',
    'Node',
    'Edge',
    'PathResult',
    'ConfigurationError',
    'PathOptions',
    'get_path_options',
    'set_path_options',
    'ValidationError',
    'validate_circles',
    'angle_difference',
    'direction_step',
    'vec_distance',
    'vec_facing',
    'Bitangents',
    'internal_bitangents',
    'external_bitangents',
    'segment_circle_intersection',
    'NodeRegistry',
    'VisibilityGraph',
    'build_visibility_graph',
    'generate_hugging_edges',
    'generate_nodes_and_surfing_edges',
    'line_of_sight',
    'circle_to_node',
    'edge_cost',
    'find_path',
    'path_cost',
    'reconstruct_path',
    'get_path',
    'prepare_circles',
    'solve_circles',
    'DEMO_CIRCLES',
    'demo_circles',
]
