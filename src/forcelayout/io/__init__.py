"""
Graph input/output in the minimal adjacency-list format.

- parse_graph / read_graph / load_graph: text, stream or file -> Graph
- format_graph / save_graph: Graph -> text or file
"""

from forcelayout.io.loader import (
    parse_graph,
    read_graph,
    load_graph,
    format_graph,
    save_graph,
)

__all__ = [
    "parse_graph",
    "read_graph",
    "load_graph",
    "format_graph",
    "save_graph",
]
