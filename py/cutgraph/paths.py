"""Weighted shortest paths and component diameters."""
from typing import Iterable, List

from .types import Distance, Graph


def dijkstra(graph: Graph, origin: int) -> List[Distance]:
    """Dijkstra's algorithm with linear closest-vertex selection.

    Runs in O(V^2) without a priority queue. Selection stops as soon as no
    unvisited vertex has a finite distance.
    """
    n = graph.n_vertices
    dist: List[Distance] = [None] * n
    visited = [False] * n
    dist[origin] = 0

    for _ in range(n):
        best = None
        for v in range(n):
            if visited[v] or dist[v] is None:
                continue
            if best is None or dist[v] < dist[best]:
                best = v
        if best is None:
            # The rest is unreachable
            break

        visited[best] = True
        for a in graph.vertices[best].neighbors:
            if visited[a.dest]:
                continue
            new_dist = dist[best] + a.weight
            if dist[a.dest] is None or new_dist < dist[a.dest]:
                dist[a.dest] = new_dist

    return dist


def component_diameter(graph: Graph, vertices: Iterable[int]) -> int:
    """Largest finite shortest-path distance from any vertex in `vertices`.

    `vertices` is expected to be the vertex set of one connected component.
    A single vertex has diameter 0.
    """
    diameter = 0
    for origin in vertices:
        for d in dijkstra(graph, origin):
            if d is not None and d > diameter:
                diameter = d
    return diameter
