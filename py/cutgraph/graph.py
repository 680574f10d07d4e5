"""Graph creation and construction primitives."""
import logging
from typing import List, Optional, Tuple

from .types import Graph, Neighbor, OutOfMemoryError, Vertex

logger = logging.getLogger(__name__)


def create_graph(name: Optional[str] = None) -> Graph:
    """Create a new, empty graph."""
    return Graph(name=name)


def find_vertex(graph: Optional[Graph], name: str) -> Optional[int]:
    """Return the index of the vertex called `name`, or None."""
    if graph is None:
        return None
    return graph.index.get(name)


def ensure_vertex(graph: Graph, name: str) -> int:
    """Return the index of `name`, creating the vertex if needed."""
    idx = graph.index.get(name)
    if idx is not None:
        return idx

    try:
        graph.vertices.append(Vertex(name=name))
    except MemoryError as exc:
        raise OutOfMemoryError(f"cannot allocate vertex {name!r}") from exc

    idx = len(graph.vertices) - 1
    graph.index[name] = idx
    return idx


def connect(graph: Graph, u: int, v: int, weight: int = 1) -> bool:
    """Add the undirected edge (u, v).

    Self-loops and parallel edges are silently discarded; the weight of the
    first insertion between a pair wins. Returns True when an edge was added.
    """
    n = len(graph.vertices)
    if not (0 <= u < n and 0 <= v < n):
        raise IndexError(f"vertex index out of range: ({u}, {v})")
    if weight < 1:
        raise ValueError(f"edge weight must be >= 1, got {weight}")

    if u == v:
        logger.debug("Discarding self-loop on %r", graph.vertices[u].name)
        return False

    # Insertion is always symmetric, so checking one side is enough
    if any(a.dest == v for a in graph.vertices[u].neighbors):
        logger.debug("Discarding duplicate edge %r -- %r",
                     graph.vertices[u].name, graph.vertices[v].name)
        return False

    forward = graph.vertices[u].neighbors
    try:
        forward.appendleft(Neighbor(dest=v, weight=weight))
    except MemoryError as exc:
        raise OutOfMemoryError(f"cannot allocate edge ({u}, {v})") from exc

    try:
        graph.vertices[v].neighbors.appendleft(Neighbor(dest=u, weight=weight))
    except MemoryError as exc:
        # Both halves or neither
        forward.popleft()
        raise OutOfMemoryError(f"cannot allocate edge ({u}, {v})") from exc

    graph.n_edges += 1
    return True


def graph_name(graph: Optional[Graph]) -> Optional[str]:
    return graph.name if graph is not None else None


def n_vertices(graph: Optional[Graph]) -> int:
    return graph.n_vertices if graph is not None else 0


def n_edges(graph: Optional[Graph]) -> int:
    return graph.n_edges if graph is not None else 0


def neighbors(graph: Optional[Graph], v: int) -> List[Tuple[int, int]]:
    """Get (destination, weight) pairs of vertex `v`."""
    if graph is None or not 0 <= v < graph.n_vertices:
        return []
    return [(a.dest, a.weight) for a in graph.vertices[v].neighbors]


def edges(graph: Optional[Graph]) -> List[Tuple[int, int, int]]:
    """Get every undirected edge once, as (u, v, weight) with u < v."""
    if graph is None:
        return []

    result = []
    for u, vertex in enumerate(graph.vertices):
        for a in vertex.neighbors:
            if u < a.dest:
                result.append((u, a.dest, a.weight))
    return sorted(result)


def destroy_graph(graph: Optional[Graph]) -> bool:
    """Release every vertex, neighbor list and the graph name."""
    if graph is None:
        return False

    for vertex in graph.vertices:
        vertex.neighbors.clear()
    graph.vertices.clear()
    graph.index.clear()
    graph.name = None
    graph.n_edges = 0
    return True
