"""Maximal clique enumeration by Bron-Kerbosch with pivoting, vertex by vertex."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Collection, Iterable, Iterator
from dataclasses import replace

from cliquefind.graph import Graph, load_graph
from cliquefind.report import CliqueReport, TimeFormat


def bron_kerbosch_pivot(
    graph: Graph, p: Iterable[int], r: Iterable[int], x: Iterable[int]
) -> Iterator[frozenset[int]]:
    """Yield every maximal clique extending ``r`` with vertices of ``p``, excluding ``x``."""
    p = set(p)
    x = set(x)
    r = frozenset(r)
    if not p and not x:
        yield r
        return

    pivot = max(sorted(p | x), key=lambda u: len(graph[u] & p))
    for v in sorted(p - graph[pivot]):
        neighbours = graph[v]
        yield from bron_kerbosch_pivot(graph, p & neighbours, r | {v}, x & neighbours)
        p.discard(v)
        x.add(v)


def bron_kerbosch_degeneracy(graph: Graph) -> list[frozenset[int]]:
    """Return all maximal cliques, starting from vertices of low degree."""
    cliques: list[frozenset[int]] = []
    for vertex in sorted(graph, key=lambda v: len(graph[v])):
        neighbours = graph[vertex]
        later = {u for u in neighbours if u > vertex}
        cliques.extend(
            bron_kerbosch_pivot(graph, later, {vertex}, neighbours - later)
        )
    return cliques


def _run_search(
    argv: list[str] | None,
    *,
    prog: str,
    description: str,
    search: Callable[[Graph], Collection[frozenset[int]]],
    summarize: Callable[[Collection[frozenset[int]], float], CliqueReport],
    time_format: TimeFormat,
    require_file: bool = False,
) -> int:
    """Load an edge-list file, run ``search`` on it and print the summary."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("filename", nargs="?", default="test6.txt")
    args = parser.parse_args(argv)

    try:
        graph = load_graph(args.filename)
    except OSError:
        if require_file:
            print(f"Error: Unable to open file {args.filename}", file=sys.stderr)
            return 1
        graph = {}

    start = time.perf_counter()
    cliques = search(graph)
    elapsed = time.perf_counter() - start

    sys.stdout.write(summarize(cliques, elapsed).format(time_format))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Enumerate maximal cliques of an edge-list file and print a summary."""
    return _run_search(
        argv,
        prog="cliquefind-els",
        description="Bron-Kerbosch maximal clique search.",
        search=bron_kerbosch_degeneracy,
        summarize=lambda cliques, elapsed: replace(
            CliqueReport.from_cliques(cliques, elapsed), time_first=False
        ),
        time_format=TimeFormat.FIXED,
    )


if __name__ == "__main__":
    sys.exit(main())