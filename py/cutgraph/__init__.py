"""Undirected graph engine - public API."""
from .graph import (
    create_graph, ensure_vertex, find_vertex, connect, graph_name,
    n_vertices, n_edges, neighbors, edges, destroy_graph
)
from .traversal import bfs_distances, label_components, count_components
from .paths import dijkstra, component_diameter
from .components import (
    n_components, components, is_bipartite, diameters,
    articulation_vertices, bridges
)
from .reader import parse_edge, read_graph, read_graph_file
from .types import (
    Graph, Vertex, Neighbor, ReadStats, IgnoreVertex, IgnoreEdge,
    GraphError, OutOfMemoryError, ParseError
)

__all__ = [
    'create_graph', 'ensure_vertex', 'find_vertex', 'connect', 'graph_name',
    'n_vertices', 'n_edges', 'neighbors', 'edges', 'destroy_graph',
    'bfs_distances', 'label_components', 'count_components',
    'dijkstra', 'component_diameter',
    'n_components', 'components', 'is_bipartite', 'diameters',
    'articulation_vertices', 'bridges',
    'parse_edge', 'read_graph', 'read_graph_file',
    'Graph', 'Vertex', 'Neighbor', 'ReadStats', 'IgnoreVertex', 'IgnoreEdge',
    'GraphError', 'OutOfMemoryError', 'ParseError'
]
