import math

import pytest

from algokit.graphs import (
    dijkstra,
    kruskal_mst_weight,
    nearest_neighbour_tour,
    prim_mst,
    transpose,
)

MATRIX = [
    [0, 4, 1, None],
    [4, 0, 2, 5],
    [1, 2, 0, 8],
    [None, 5, 8, 0],
]

EDGES = [
    (u, v, MATRIX[u][v])
    for u in range(4)
    for v in range(u + 1, 4)
    if MATRIX[u][v]
]

TOUR_MATRIX = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


def test_dijkstra_path_goes_through_cheaper_route():
    paths = dijkstra(MATRIX, 0)
    assert paths.path_to(3) == [0, 2, 1, 3]


def test_dijkstra_distances_match_path_costs():
    paths = dijkstra(MATRIX, 0)
    for target in range(4):
        path = paths.path_to(target)
        assert path[0] == 0 and path[-1] == target
        assert sum(MATRIX[a][b] for a, b in zip(path, path[1:])) == paths.distances[target]


def test_dijkstra_no_edge_can_shorten_a_distance():
    paths = dijkstra(MATRIX, 1)
    for u in range(4):
        for v in range(4):
            if MATRIX[u][v]:
                assert paths.distances[v] <= paths.distances[u] + MATRIX[u][v]


def test_dijkstra_source_distance_is_zero():
    paths = dijkstra(MATRIX, 2)
    assert paths.distances[2] == 0
    assert paths.path_to(2) == [2]


def test_dijkstra_unreachable_vertex():
    paths = dijkstra([[0, 0], [0, 0]], 0)
    assert paths.distances[1] == math.inf
    with pytest.raises(ValueError):
        paths.path_to(1)


def test_dijkstra_rejects_bad_input():
    with pytest.raises(ValueError):
        dijkstra(MATRIX, 4)
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_prim_tree_spans_all_vertices():
    tree = prim_mst(MATRIX)
    assert len(tree.edges) == 3
    touched = {vertex for edge in tree.edges for vertex in edge}
    assert touched == {0, 1, 2, 3}
    assert tree.cost == sum(MATRIX[u][p] for u, p in tree.edges)


def test_prim_and_kruskal_agree():
    assert prim_mst(MATRIX).cost == kruskal_mst_weight(3, EDGES)


def test_prim_disconnected_graph_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, None], [None, 0]])


def test_prim_empty_matrix():
    tree = prim_mst([])
    assert tree.edges == [] and tree.cost == 0


def test_kruskal_ignores_cycle_edges():
    base = kruskal_mst_weight(3, EDGES)
    heavier = EDGES + [(0, 3, 100)]
    assert kruskal_mst_weight(3, heavier) == base


def test_kruskal_rejects_bad_edges():
    with pytest.raises(ValueError):
        kruskal_mst_weight(2, [(0, 5, 1)])
    with pytest.raises(ValueError):
        kruskal_mst_weight(2, [(0, 1, -1)])


@pytest.mark.parametrize("source", [0, 1, 2, 3])
def test_tour_visits_every_city_once(source):
    tour, cost = nearest_neighbour_tour(TOUR_MATRIX, source)
    assert tour[0] == source
    assert tour[-1] == 0
    assert sorted(tour[:-1]) == [0, 1, 2, 3]
    assert cost == sum(TOUR_MATRIX[a][b] for a, b in zip(tour, tour[1:]))


def test_tour_rejects_bad_source():
    with pytest.raises(ValueError):
        nearest_neighbour_tour(TOUR_MATRIX, -1)


def test_transpose_of_example_graph():
    graph = [[1, 4, 3], [], [0], [2], [1, 3]]
    assert transpose(graph) == [[2], [0, 4], [3], [0, 4], [0]]


def test_transpose_twice_restores_edges():
    graph = [[1, 2], [2], [0], []]
    twice = transpose(transpose(graph))
    assert [sorted(targets) for targets in twice] == [sorted(t) for t in graph]


def test_transpose_out_of_range():
    with pytest.raises(ValueError):
        transpose([[3], []])