"""Loading undirected graphs from whitespace-separated edge lists."""

from __future__ import annotations

import os
import re
from collections import defaultdict
from collections.abc import Iterable, Iterator

Graph = dict[int, set[int]]

_EDGE = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")


def parse_edges(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield ``(u, v)`` pairs from edge-list lines.

    Empty lines and lines starting with ``#`` are skipped, as are lines
    that do not begin with two integers. Anything after the second
    integer is ignored.
    """
    for line in lines:
        line = line.rstrip("\n")
        if not line or line.startswith("#"):
            continue
        match = _EDGE.match(line)
        if match:
            yield int(match[1]), int(match[2])


def build_graph(edges: Iterable[tuple[int, int]]) -> Graph:
    """Build a symmetric adjacency mapping from an iterable of edges."""
    graph: defaultdict[int, set[int]] = defaultdict(set)
    for u, v in edges:
        graph[u].add(v)
        graph[v].add(u)
    return dict(graph)


def load_graph(path: str | os.PathLike[str]) -> Graph:
    """Read an edge-list file into an adjacency mapping."""
    with open(path, encoding="utf-8") as handle:
        return build_graph(parse_edges(handle))