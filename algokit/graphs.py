"""Weighted graph algorithms on adjacency matrices and adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

Matrix = Sequence[Sequence[Optional[float]]]


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"vertex {vertex} is out of range")


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors of single-source shortest paths."""

    source: int
    distances: list[float]
    predecessors: list[int]

    def path_to(self, target: int) -> list[int]:
        """Return the vertices from the source to ``target``.

        Raises ValueError if ``target`` is out of range or unreachable.
        """
        _check_vertex(target, len(self.distances))
        if math.isinf(self.distances[target]):
            raise ValueError(f"vertex {target} is not reachable from {self.source}")
        path = [target]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        return path[::-1]


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a minimum spanning tree as ``(vertex, parent)`` pairs, with its cost."""

    edges: list[tuple[int, int]]
    cost: float


def dijkstra(matrix: Matrix, source: int) -> ShortestPaths:
    """Shortest paths from ``source`` over a cost matrix.

    An entry of zero or None means there is no edge.
    Raises ValueError for a non-square matrix or a source out of range.
    """
    size = _check_square(matrix)
    _check_vertex(source, size)

    def weight(u: int, v: int) -> float:
        cost = matrix[u][v]
        return math.inf if not cost else cost

    distances = [weight(source, v) for v in range(size)]
    distances[source] = 0
    predecessors = [source] * size
    visited = [False] * size
    visited[source] = True
    for _ in range(size - 1):
        open_vertices = [v for v in range(size) if not visited[v] and distances[v] < math.inf]
        if not open_vertices:
            break
        nearest = min(open_vertices, key=distances.__getitem__)
        visited[nearest] = True
        for v in range(size):
            if not visited[v]:
                candidate = distances[nearest] + weight(nearest, v)
                if candidate < distances[v]:
                    distances[v] = candidate
                    predecessors[v] = nearest
    return ShortestPaths(source, distances, predecessors)


def prim_mst(matrix: Matrix) -> SpanningTree:
    """Minimum spanning tree by Prim's algorithm.

    Off-diagonal entries that are None or infinite mean there is no edge.
    The tree grows from a vertex on a cheapest edge. Raises ValueError if the
    matrix is not square or the graph is not connected.
    """
    size = _check_square(matrix)
    if size == 0:
        return SpanningTree([], 0)

    def weight(u: int, v: int) -> float:
        cost = matrix[u][v]
        return math.inf if cost is None else cost

    start = 0
    cheapest = math.inf
    for i in range(size):
        for j in range(size):
            if i != j and weight(i, j) <= cheapest:
                cheapest = weight(i, j)
                start = i

    distances = [weight(start, v) for v in range(size)]
    parents = [start] * size
    in_tree = [False] * size
    in_tree[start] = True
    edges: list[tuple[int, int]] = []
    cost: float = 0
    for _ in range(size - 1):
        chosen = -1
        best = math.inf
        for v in range(size):
            if not in_tree[v] and distances[v] <= best:
                best = distances[v]
                chosen = v
        edge_cost = weight(chosen, parents[chosen])
        if math.isinf(best) or math.isinf(edge_cost):
            raise ValueError("spanning tree does not exist")
        edges.append((chosen, parents[chosen]))
        cost += edge_cost
        in_tree[chosen] = True
        for v in range(size):
            if not in_tree[v] and weight(chosen, v) < distances[v]:
                distances[v] = weight(chosen, v)
                parents[v] = chosen
    return SpanningTree(edges, cost)


def nearest_neighbour_tour(matrix: Matrix, source: int) -> tuple[list[int], float]:
    """Greedy travelling-salesman tour starting at ``source``.

    From each city the cheapest edge to an unvisited city is taken (zero or
    None means no edge); the tour then closes at city 0. Returns the cities
    visited in order and the total cost.
    Raises ValueError for a non-square matrix or a source out of range.
    """
    size = _check_square(matrix)
    _check_vertex(source, size)
    visited = {source}
    tour = [source]
    cost: float = 0
    city = source
    while True:
        nearest: int | None = None
        for candidate in range(size):
            edge = matrix[city][candidate]
            if not edge or candidate in visited:
                continue
            if nearest is None or edge <= matrix[city][nearest]:
                nearest = candidate
        if nearest is None:
            break
        cost += matrix[city][nearest]
        visited.add(nearest)
        tour.append(nearest)
        city = nearest
    tour.append(0)
    cost += matrix[city][0] or 0
    return tour, cost


def kruskal_mst_weight(node_count: int, edges: Iterable[tuple[int, int, float]]) -> float:
    """Total weight of a minimum spanning forest by Kruskal's algorithm.

    Vertices are numbered 0 to ``node_count``; edges are ``(u, v, weight)``.
    Raises ValueError for a vertex out of range or a negative weight.
    """
    edge_list = list(edges)
    for u, v, weight in edge_list:
        if not (0 <= u <= node_count and 0 <= v <= node_count):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
        if weight < 0:
            raise ValueError("edge weights must not be negative")
    parent = list(range(node_count + 1))
    size = [1] * (node_count + 1)

    def find(vertex: int) -> int:
        while vertex != parent[vertex]:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    total: float = 0
    for u, v, weight in sorted(edge_list, key=lambda edge: edge[2]):
        root_u, root_v = find(u), find(v)
        if root_u == root_v:
            continue
        if size[root_u] < size[root_v]:
            root_u, root_v = root_v, root_u
        parent[root_v] = root_u
        size[root_u] += size[root_v]
        total += weight
    return total


def transpose(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the adjacency lists of the graph with every edge reversed.

    Raises ValueError for an edge to a vertex out of range.
    """
    count = len(adjacency)
    reversed_lists: list[list[int]] = [[] for _ in range(count)]
    for source, targets in enumerate(adjacency):
        for target in targets:
            _check_vertex(target, count)
            reversed_lists[target].append(source)
    return reversed_lists