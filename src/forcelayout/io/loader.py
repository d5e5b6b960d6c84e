"""
Adjacency-list loader and writer.

Text format (whitespace-delimited):

    <nodeCount>
    <x1> <y1>
    ...
    <xN> <yN>
    <linkFirstIndex> <linkSecondIndex>   (repeated until end of input)

Link indices are 1-based in declaration order. The link section has no
count; it ends at end of input. A trailing incomplete pair is rejected
rather than turned into a link.

Parsing is all-or-nothing: the whole input is validated before any node
or link is created, so a failed load never leaves a partial graph behind.
"""

from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Iterator, TextIO

from forcelayout.core.graph import Graph, LayoutConfig
from forcelayout.core.link import Link
from forcelayout.core.node import Node
from forcelayout.errors import InvalidReferenceError, MalformedInputError, SelfLoopError

logger = logging.getLogger(__name__)


def _tokenize(text: str) -> list[tuple[str, int]]:
    """Split input into (token, line_number) pairs."""
    tokens = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            tokens.append((token, line_no))
    return tokens


def _parse_int(token: str, line: int, what: str) -> int:
    # int() and float() accept digit separators; the format does not
    if "_" in token:
        raise MalformedInputError(f"expected integer {what}, got {token!r}", line=line)
    try:
        return int(token)
    except ValueError:
        raise MalformedInputError(f"expected integer {what}, got {token!r}", line=line) from None


def _parse_float(token: str, line: int, what: str) -> float:
    if "_" in token:
        raise MalformedInputError(f"expected number for {what}, got {token!r}", line=line)
    try:
        value = float(token)
    except ValueError:
        raise MalformedInputError(f"expected number for {what}, got {token!r}", line=line) from None
    if not math.isfinite(value):
        raise MalformedInputError(f"{what} must be finite, got {token!r}", line=line)
    return value


def _resolve(index: int, node_count: int, line: int) -> int:
    """Translate a 1-based input index to a 0-based one, checking range."""
    if not 1 <= index <= node_count:
        raise InvalidReferenceError(index, node_count, line=line)
    return index - 1


def parse_graph(
    text: str,
    config: LayoutConfig | None = None,
    max_speed: float | None = None,
) -> Graph:
    """
    Build a Graph from adjacency-list text.

    Args:
        text: Input in the adjacency-list format
        config: Force model for the new graph (defaults if None)
        max_speed: Speed cap for every node (config.max_speed if None)

    Returns:
        A populated Graph

    Raises:
        MalformedInputError: Missing or non-numeric tokens, negative count,
            or a trailing incomplete link pair
        InvalidReferenceError: A link index outside [1, nodeCount]
        SelfLoopError: A link from a node to itself
    """
    tokens = _tokenize(text)
    if not tokens:
        raise MalformedInputError("empty input, expected node count")

    count_token, count_line = tokens[0]
    node_count = _parse_int(count_token, count_line, "node count")
    if node_count < 0:
        raise MalformedInputError(f"node count must be non-negative, got {node_count}", line=count_line)

    coord_tokens = tokens[1:1 + 2 * node_count]
    if len(coord_tokens) < 2 * node_count:
        declared = len(coord_tokens) // 2
        raise MalformedInputError(
            f"expected {node_count} coordinate pairs, found {declared}",
            line=coord_tokens[-1][1] if coord_tokens else count_line,
        )

    positions = []
    for i in range(node_count):
        (xt, xl), (yt, yl) = coord_tokens[2 * i], coord_tokens[2 * i + 1]
        positions.append((
            _parse_float(xt, xl, f"x of node {i + 1}"),
            _parse_float(yt, yl, f"y of node {i + 1}"),
        ))

    link_tokens = tokens[1 + 2 * node_count:]
    if len(link_tokens) % 2 != 0:
        token, line = link_tokens[-1]
        raise MalformedInputError(f"incomplete link pair at end of input: {token!r}", line=line)

    index_pairs = []
    for i in range(0, len(link_tokens), 2):
        (ft, fl), (st, sl) = link_tokens[i], link_tokens[i + 1]
        first = _resolve(_parse_int(ft, fl, "link index"), node_count, fl)
        second = _resolve(_parse_int(st, sl, "link index"), node_count, sl)
        if first == second:
            raise SelfLoopError(f"link {first + 1} {second + 1} connects a node to itself", line=fl)
        index_pairs.append((first, second))

    graph = Graph(config)
    speed = graph.config.max_speed if max_speed is None else max_speed
    nodes = [Node(pos, speed) for pos in positions]
    graph.add_nodes(nodes)
    graph.add_links(Link(nodes[a], nodes[b]) for a, b in index_pairs)

    logger.debug("Parsed graph: %d nodes, %d links", len(nodes), len(index_pairs))
    return graph


def read_graph(stream: TextIO, config: LayoutConfig | None = None, max_speed: float | None = None) -> Graph:
    """Build a Graph from an open text stream."""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError("input is not valid UTF-8") from e
    return parse_graph(text, config=config, max_speed=max_speed)


def load_graph(path: str | Path, config: LayoutConfig | None = None, max_speed: float | None = None) -> Graph:
    """Build a Graph from a file in adjacency-list format."""
    path = Path(path)
    logger.info("Loading graph from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError("input is not valid UTF-8") from e
    return parse_graph(text, config=config, max_speed=max_speed)


def iter_lines(graph: Graph) -> Iterator[str]:
    """Yield the adjacency-list lines for a graph's current state."""
    nodes = graph.get_nodes()
    index = {node: i for i, node in enumerate(nodes, start=1)}
    yield str(len(nodes))
    for node in nodes:
        x, y = node.position
        yield f"{x!r} {y!r}"
    for link in graph.get_links():
        yield f"{index[link.first]} {index[link.second]}"


def format_graph(graph: Graph) -> str:
    """Serialize a graph (current positions, links) to adjacency-list text."""
    return "\n".join(iter_lines(graph)) + "\n"


def save_graph(graph: Graph, path: str | Path) -> None:
    """Write a graph to a file in adjacency-list format."""
    Path(path).write_text(format_graph(graph))
