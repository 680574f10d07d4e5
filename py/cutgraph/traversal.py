"""Breadth-first traversals: hop distances and component labeling."""
from collections import deque
from typing import List, Optional, Tuple

from .types import Distance, Graph, Ignore, IgnoreEdge, IgnoreVertex


def bfs_distances(graph: Graph, origin: int) -> List[Distance]:
    """Unweighted hop counts from `origin`; None for unreached vertices."""
    dist: List[Distance] = [None] * graph.n_vertices
    dist[origin] = 0

    queue = deque([origin])
    while queue:
        u = queue.popleft()
        for a in graph.vertices[u].neighbors:
            if dist[a.dest] is None:
                dist[a.dest] = dist[u] + 1
                queue.append(a.dest)

    return dist


def label_components(graph: Graph,
                     ignore: Ignore = None) -> Tuple[int, List[Optional[int]]]:
    """Label every vertex with the id of its connected component.

    BFS starts from each unvisited vertex in index order, so component ids
    follow the order in which components are discovered. An ignored vertex
    is never visited, forms no component and keeps a None label; an ignored
    edge is skipped in both directions.
    """
    skip_vertex = ignore.vertex if isinstance(ignore, IgnoreVertex) else None
    skip_edge = ignore if isinstance(ignore, IgnoreEdge) else None

    labels: List[Optional[int]] = [None] * graph.n_vertices
    count = 0

    for start in range(graph.n_vertices):
        if start == skip_vertex or labels[start] is not None:
            continue

        labels[start] = count
        queue = deque([start])

        while queue:
            u = queue.popleft()
            for a in graph.vertices[u].neighbors:
                v = a.dest
                if v == skip_vertex:
                    continue
                if skip_edge is not None and skip_edge.matches(u, v):
                    continue
                if labels[v] is None:
                    labels[v] = count
                    queue.append(v)

        count += 1

    return count, labels


def count_components(graph: Graph, ignore: Ignore = None) -> int:
    """Number of connected components, honoring `ignore`."""
    count, _ = label_components(graph, ignore)
    return count
