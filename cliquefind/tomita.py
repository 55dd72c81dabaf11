"""Maximal clique enumeration by pivoted candidate expansion."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from cliquefind.els import _run_search
from cliquefind.graph import Graph
from cliquefind.report import CliqueReport, TimeFormat


def expand(
    graph: Graph, q: Iterable[int], cand: Iterable[int]
) -> Iterator[frozenset[int]]:
    """Yield maximal cliques extending ``q`` by vertices of ``cand``.

    The same clique may be yielded more than once.
    """
    q = frozenset(q)
    cand = set(cand)
    if not cand:
        yield q
        return

    pivot = max(cand, key=lambda u: len(graph[u]))
    for v in cand - graph[pivot]:
        yield from expand(graph, q | {v}, cand & graph[v])


def tomita_cliques(graph: Graph) -> set[frozenset[int]]:
    """Return the distinct maximal cliques of ``graph``."""
    candidates = {v for v, neighbours in graph.items() if neighbours}
    return set(expand(graph, frozenset(), candidates))


def main(argv: list[str] | None = None) -> int:
    """Enumerate maximal cliques of an edge-list file and print a summary."""
    return _run_search(
        argv,
        prog="cliquefind-tomita",
        description="Pivoted maximal clique search.",
        search=tomita_cliques,
        summarize=CliqueReport.from_cliques,
        time_format=TimeFormat.GENERAL,
    )


if __name__ == "__main__":
    sys.exit(main())