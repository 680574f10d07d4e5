"""Read a graph from its text description.

Format, one item per line:

    // comments and blank lines are ignored
    graph name                  (first remaining line)
    vertex                      (a line without "--")
    vertex -- vertex [weight]   (an edge, weight defaults to 1)
"""
import logging
import re
from typing import Iterable, Optional, Tuple, Union

from .graph import connect, create_graph, ensure_vertex
from .types import Graph, ParseError

logger = logging.getLogger(__name__)

EDGE_MARKER = "--"
COMMENT_PREFIX = "//"

# <name> -- <name> [weight]; trailing text after the weight is ignored
_EDGE_RE = re.compile(r"^(\S+)\s+--\s*(\S+)(?:\s+([+-]?\d+))?")


def parse_edge(line: str) -> Optional[Tuple[str, str, int]]:
    """Split an edge line into (name1, name2, weight), or None if malformed."""
    match = _EDGE_RE.match(line.strip())
    if match is None:
        return None

    first, second, weight = match.groups()
    weight = int(weight) if weight is not None else 1
    # Non-positive weights count as unit weights
    return first, second, max(weight, 1)


def read_graph(source: Union[str, Iterable[str]]) -> Graph:
    """Build a graph from a string or an iterable of lines."""
    if isinstance(source, str):
        source = source.splitlines()

    graph = create_graph()
    stats = graph.stats
    named = False

    for lineno, raw in enumerate(source, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(COMMENT_PREFIX):
            stats.comment_lines += 1
            continue

        if not named:
            graph.name = line
            named = True
            continue

        if EDGE_MARKER not in line:
            ensure_vertex(graph, line)
            continue

        parsed = parse_edge(line)
        if parsed is None:
            logger.debug("Skipping malformed edge on line %d: %r", lineno, line)
            stats.skipped_lines += 1
            continue

        first, second, weight = parsed
        u = ensure_vertex(graph, first)
        v = ensure_vertex(graph, second)
        if not connect(graph, u, v, weight):
            stats.rejected_edges += 1

    logger.debug("Read graph %r: %d vertices, %d edges, %d lines skipped",
                 graph.name, graph.n_vertices, graph.n_edges, stats.skipped_lines)
    return graph


def read_graph_file(path: str, encoding: str = "utf-8") -> Graph:
    """Read a graph description from a file."""
    try:
        with open(path, "r", encoding=encoding) as f:
            return read_graph(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"cannot read {path}: {exc}") from exc
