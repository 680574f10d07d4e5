"""Command-line interface for the graph engine."""
import argparse
import json
import os
import sys
from typing import Any, Dict

from .components import (
    articulation_vertices, bridges, components, diameters, is_bipartite,
    n_components
)
from .graph import graph_name, n_edges, n_vertices
from .logging_utils import setup_logging
from .reader import read_graph, read_graph_file
from .types import Graph, GraphInfo, ParseError


def graph_info(g: Graph) -> GraphInfo:
    return {
        "name": graph_name(g),
        "n_vertices": n_vertices(g),
        "n_edges": n_edges(g),
        "n_components": n_components(g),
        "bipartite": is_bipartite(g),
    }


def full_report(g: Graph) -> Dict[str, Any]:
    report: Dict[str, Any] = dict(graph_info(g))
    report["components"] = components(g)
    report["diameters"] = diameters(g)
    report["cut_vertices"] = articulation_vertices(g)
    report["bridges"] = bridges(g)
    return report


COMMANDS = {
    'info': graph_info,
    'components': lambda g: {"count": n_components(g), "components": components(g)},
    'bipartite': lambda g: {"bipartite": is_bipartite(g)},
    'diameters': lambda g: {"diameters": diameters(g)},
    'cut-vertices': lambda g: {"cut_vertices": articulation_vertices(g)},
    'bridges': lambda g: {"bridges": bridges(g)},
    'report': full_report,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cutgraph',
        description='Structural queries over an undirected graph description')
    parser.add_argument('command', choices=sorted(COMMANDS),
                        help='Query to run')
    parser.add_argument('input', nargs='?', default='-',
                        help='Graph description file (default: standard input)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: from CUTGRAPH_LOG_LEVEL env or WARNING)')
    parser.add_argument('--encoding', type=str, default=None,
                        help='Input encoding (default: from CUTGRAPH_ENCODING env or utf-8)')
    return parser


def load(path: str, encoding: str) -> Graph:
    if path == '-':
        sys.stdin.reconfigure(encoding=encoding)
        try:
            return read_graph(sys.stdin)
        except UnicodeDecodeError as exc:
            raise ParseError(f"cannot read standard input: {exc}") from exc
    return read_graph_file(path, encoding=encoding)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    log_level = args.log_level or os.environ.get('CUTGRAPH_LOG_LEVEL') or 'WARNING'
    encoding = args.encoding or os.environ.get('CUTGRAPH_ENCODING') or 'utf-8'

    try:
        setup_logging(log_level)
    except ValueError as exc:
        print(json.dumps({"error": f"invalid log level: {exc}"}))
        return 1

    try:
        g = load(args.input, encoding)
    except (ParseError, LookupError) as exc:
        print(json.dumps({"error": str(exc)}))
        return 1

    result = COMMANDS[args.command](g)
    print(json.dumps(result))
    return 0
