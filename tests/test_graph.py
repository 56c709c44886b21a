import math

from circle_path.bitangents import segment_circle_intersection
from circle_path.graph import (
    NodeRegistry,
    ObstacleField,
    build_visibility_graph,
    generate_hugging_edges,
    generate_nodes_and_surfing_edges,
    line_of_sight,
)
from circle_path.pipeline import prepare_circles
from circle_path.search import find_path
from circle_path.types import Circle


def test_registry_returns_the_same_node_for_the_same_rounded_point():
    registry = NodeRegistry(precision=2)
    circle = Circle(id=3, x=0.0, y=0.0, r=2.0)

    first = registry.make_node(circle, (1.004, 2.001))
    second = registry.make_node(circle, (0.996, 1.999))

    assert first is second
    assert (first.x, first.y) == (1.0, 2.0)
    assert len(registry) == 1


def test_registry_keeps_nodes_of_different_circles_apart():
    registry = NodeRegistry(precision=2)
    a = registry.make_node(Circle(id=0, x=0.0, y=0.0, r=1.0), (1.0, 0.0))
    b = registry.make_node(Circle(id=1, x=2.0, y=0.0, r=1.0), (1.0, 0.0))
    assert a is not b
    assert len(registry) == 2


def test_quantize_rounds_half_up():
    registry = NodeRegistry(precision=2)
    assert registry.quantize(0.125) == 0.13
    assert registry.quantize(-0.125) == -0.12
    assert registry.quantize(2.0) == 2.0


def test_two_points_give_one_surfing_edge():
    circles = prepare_circles([{'x': 0, 'y': 0, 'r': 0}, {'x': 10, 'y': 0, 'r': 0}])
    graph = build_visibility_graph(circles)

    assert len(graph.nodes) == 2
    assert len(graph.surfing_edges) == 1
    assert graph.hugging_edges == []
    assert graph.stats.attempted == 1
    assert graph.surfing_edges[0].kind == 'surfing'


def test_two_disks_produce_eight_nodes_and_all_hugging_pairs():
    circles = [Circle(id=0, x=20.0, y=0.0, r=3.0), Circle(id=1, x=0.0, y=0.0, r=2.0)]
    nodes, edges, stats = generate_nodes_and_surfing_edges(circles)

    assert stats.attempted == 4
    assert stats.accepted == 4
    assert len(edges) == 4
    assert len(nodes) == 8

    hugging = generate_hugging_edges(nodes)
    assert len(hugging) == 2 * 6
    assert all(edge.kind == 'hugging' for edge in hugging)


def test_obstacle_between_points_blocks_the_direct_edge():
    circles = prepare_circles(
        [{'x': 0, 'y': 0, 'r': 0}, {'x': 5, 'y': 0, 'r': 3}, {'x': 10, 'y': 0, 'r': 0}]
    )
    disk, start, goal = circles
    graph = build_visibility_graph(circles)

    assert graph.stats.blocked >= 1
    for edge in graph.surfing_edges:
        assert {edge.a.circle_id, edge.b.circle_id} != {start.id, goal.id}
    assert len(graph.nodes_on_circle(start.id)) == 1
    assert len(graph.nodes_on_circle(goal.id)) == 1
    assert len(graph.nodes_on_circle(disk.id)) == 4
    assert len(graph.hugging_edges) == 6


def test_overlapping_disks_skip_internal_bitangents_but_stay_passable():
    circles = prepare_circles(
        [
            {'x': 0, 'y': 0, 'r': 0},
            {'x': 10, 'y': 0, 'r': 4},
            {'x': 16, 'y': 0, 'r': 4},
            {'x': 26, 'y': 0, 'r': 0},
        ]
    )
    graph = build_visibility_graph(circles)

    # the two disks overlap, so both of their internal candidates are out of domain
    assert graph.stats.missing >= 2
    assert graph.stats.accepted > 0

    result = find_path(circles[-2], circles[-1], graph)
    assert result.found
    assert result.nodes[0].circle_id == circles[-2].id
    assert result.nodes[-1].circle_id == circles[-1].id


def test_neighbors_are_symmetric():
    circles = prepare_circles(
        [{'x': 0, 'y': 0, 'r': 0}, {'x': 5, 'y': 0, 'r': 3}, {'x': 10, 'y': 0, 'r': 0}]
    )
    graph = build_visibility_graph(circles)
    for edge in graph.edges:
        assert edge.b in graph.neighbors(edge.a)
        assert edge.a in graph.neighbors(edge.b)


def test_line_of_sight_ignores_the_endpoint_circles():
    circles = [
        Circle(id=0, x=0.0, y=0.0, r=1.0),
        Circle(id=1, x=10.0, y=0.0, r=1.0),
        Circle(id=2, x=5.0, y=5.0, r=1.0),
    ]
    # segment crosses both endpoint circles but misses the third one
    assert line_of_sight(circles, 0, (0.0, 0.0), 1, (10.0, 0.0))
    assert not line_of_sight(circles, 0, (0.0, 5.0), 1, (10.0, 5.0))


def test_batched_visibility_matches_scalar_projection():
    circles = [
        Circle(id=0, x=5.0, y=2.0, r=2.0),
        Circle(id=1, x=15.0, y=0.0, r=1.0),
        Circle(id=2, x=-3.0, y=0.5, r=3.2),
        Circle(id=3, x=7.0, y=-1.0, r=0.0),
    ]
    p, q = (0.0, 0.0), (10.0, 0.0)
    mask = ObstacleField(circles).blocked_mask(p, q)
    expected = [segment_circle_intersection(p, q, circle).intersects for circle in circles]
    assert mask.tolist() == expected


def test_point_obstacle_blocks_only_when_on_the_segment():
    circles = [
        Circle(id=0, x=0.0, y=0.0, r=0.0),
        Circle(id=1, x=10.0, y=0.0, r=0.0),
        Circle(id=2, x=5.0, y=0.0, r=0.0),
        Circle(id=3, x=5.0, y=0.5, r=0.0),
    ]
    field = ObstacleField(circles)
    mask = field.blocked_mask((0.0, 0.0), (10.0, 0.0))
    assert mask.tolist() == [True, True, True, False]
    assert not field.line_of_sight(0, (0.0, 0.0), 1, (10.0, 0.0))
    assert math.isclose(segment_circle_intersection((0.0, 0.0), (10.0, 0.0), circles[3]).distance, 0.5)
