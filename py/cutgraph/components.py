"""Connected components, bipartiteness, diameters, cut vertices and bridges."""
import logging
from collections import deque
from typing import List, Optional

from .paths import component_diameter
from .traversal import count_components, label_components
from .types import Graph, IgnoreEdge, IgnoreVertex

logger = logging.getLogger(__name__)


def n_components(graph: Optional[Graph]) -> int:
    """Number of connected components."""
    if graph is None:
        return 0
    return count_components(graph)


def components(graph: Optional[Graph]) -> List[List[str]]:
    """Vertex names of each component, in component id order."""
    if graph is None:
        return []

    count, labels = label_components(graph)
    groups: List[List[str]] = [[] for _ in range(count)]
    for vertex, label in zip(graph.vertices, labels):
        groups[label].append(vertex.name)

    return [sorted(group) for group in groups]


def is_bipartite(graph: Optional[Graph]) -> bool:
    """Check whether the graph can be 2-colored."""
    if graph is None:
        return False

    color: List[Optional[int]] = [None] * graph.n_vertices

    for start in range(graph.n_vertices):
        if color[start] is not None:
            continue

        color[start] = 0
        queue = deque([start])

        while queue:
            u = queue.popleft()
            for a in graph.vertices[u].neighbors:
                v = a.dest
                if color[v] is None:
                    color[v] = 1 - color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    logger.debug("Odd cycle through %r -- %r",
                                 graph.vertices[u].name, graph.vertices[v].name)
                    return False

    return True


def diameters(graph: Optional[Graph]) -> Optional[str]:
    """Diameter of every component, non-decreasing, space-separated."""
    if graph is None:
        return None
    if graph.n_vertices == 0:
        return ""

    count, labels = label_components(graph)
    members: List[List[int]] = [[] for _ in range(count)]
    for v, label in enumerate(labels):
        members[label].append(v)

    values = sorted(component_diameter(graph, group) for group in members)
    return " ".join(str(d) for d in values)


def articulation_vertices(graph: Optional[Graph]) -> Optional[str]:
    """Names of the cut vertices, sorted and space-separated.

    A vertex is a cut vertex when leaving it out increases the number of
    components. Costs one connectivity pass per vertex.
    """
    if graph is None:
        return None
    if graph.n_vertices == 0:
        return ""

    baseline = count_components(graph)
    found = []

    for v in range(graph.n_vertices):
        if count_components(graph, IgnoreVertex(v)) > baseline:
            found.append(graph.vertices[v].name)

    logger.debug("Found %d cut vertices out of %d", len(found), graph.n_vertices)
    return " ".join(sorted(found))


def bridges(graph: Optional[Graph]) -> Optional[str]:
    """Bridge edges as "a b" name pairs, sorted and space-separated.

    An edge is a bridge when leaving it out increases the number of
    components. Costs one connectivity pass per edge.
    """
    if graph is None:
        return None
    if graph.n_vertices == 0:
        return ""

    baseline = count_components(graph)
    found = []

    for u, vertex in enumerate(graph.vertices):
        for a in vertex.neighbors:
            v = a.dest
            # Each undirected edge once
            if u >= v:
                continue
            if count_components(graph, IgnoreEdge(u, v)) > baseline:
                first, second = sorted((vertex.name, graph.vertices[v].name))
                found.append(f"{first} {second}")

    logger.debug("Found %d bridges out of %d edges", len(found), graph.n_edges)
    return " ".join(sorted(found))
