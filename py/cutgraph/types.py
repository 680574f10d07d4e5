"""Type definitions for the graph engine."""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, TypedDict, Union


@dataclass
class Neighbor:
    """One directed half of an undirected edge."""
    dest: int
    weight: int = 1


@dataclass
class Vertex:
    """A named vertex owning its neighbor list."""
    name: str
    # Most recently inserted neighbor first
    neighbors: Deque[Neighbor] = field(default_factory=deque)


@dataclass
class ReadStats:
    """Counters collected while reading a graph description."""
    comment_lines: int = 0
    skipped_lines: int = 0
    rejected_edges: int = 0


@dataclass
class Graph:
    """Undirected graph with vertices indexed by insertion order."""
    name: Optional[str] = None
    vertices: List[Vertex] = field(default_factory=list)
    n_edges: int = 0
    # name -> index
    index: Dict[str, int] = field(default_factory=dict)
    stats: ReadStats = field(default_factory=ReadStats)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class IgnoreVertex:
    """Leave a single vertex out of a traversal."""
    vertex: int


@dataclass(frozen=True)
class IgnoreEdge:
    """Leave a single undirected edge out of a traversal."""
    u: int
    w: int

    def matches(self, a: int, b: int) -> bool:
        return (a == self.u and b == self.w) or (a == self.w and b == self.u)


Ignore = Union[None, IgnoreVertex, IgnoreEdge]

# None marks an unreached vertex
Distance = Optional[int]


class GraphInfo(TypedDict):
    """Summary returned by the info command."""
    name: Optional[str]
    n_vertices: int
    n_edges: int
    n_components: int
    bipartite: bool


# Errors
class GraphError(Exception):
    """Base error for graph operations."""
    pass


class OutOfMemoryError(GraphError):
    """Allocation failed while growing the graph."""
    pass


class ParseError(GraphError):
    """Error reading a graph description."""
    pass
