"""Maximal clique enumeration by exhaustive clique extension over a degree ordering."""

from __future__ import annotations

import sys

from cliquefind.els import _run_search
from cliquefind.graph import Graph
from cliquefind.report import CliqueReport, TimeFormat


def find_cliques(graph: Graph) -> set[frozenset[int]]:
    """Return all maximal cliques with at least two vertices."""
    order = sorted(graph, key=lambda v: len(graph[v]), reverse=True)
    count = len(order)
    found: set[frozenset[int]] = set()

    stack: list[tuple[int, frozenset[int]]] = [(0, frozenset())]
    while stack:
        index, clique = stack.pop()
        if index == count:
            if len(clique) < 2:
                continue
            if any(v not in clique and clique <= graph[v] for v in graph):
                continue
            found.add(clique)
            continue
        vertex = order[index]
        stack.append((index + 1, clique))
        if all(vertex in graph[u] for u in clique):
            stack.append((index + 1, clique | {vertex}))
    return found


def main(argv: list[str] | None = None) -> int:
    """Enumerate maximal cliques of an edge-list file and print a summary."""
    return _run_search(
        argv,
        prog="cliquefind-chiba",
        description="Exhaustive maximal clique search.",
        search=find_cliques,
        summarize=lambda cliques, elapsed: CliqueReport.from_cliques(cliques, elapsed, 2),
        time_format=TimeFormat.SCIENTIFIC,
        require_file=True,
    )


if __name__ == "__main__":
    sys.exit(main())