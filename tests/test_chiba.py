import itertools
import random
import re

import pytest

from cliquefind.chiba import find_cliques, main
from cliquefind.els import bron_kerbosch_degeneracy
from cliquefind.graph import build_graph


@pytest.mark.parametrize("seed", range(5))
def test_matches_bron_kerbosch_on_random_graphs(seed):
    rng = random.Random(seed)
    pairs = itertools.combinations(range(9), 2)
    graph = build_graph(pair for pair in pairs if rng.random() < 0.45)
    cliques = find_cliques(graph)
    assert all(len(c) >= 2 for c in cliques)
    assert cliques == set(bron_kerbosch_degeneracy(graph))


@pytest.mark.parametrize(
    ("edges", "expected"),
    [
        ([(1, 2)], {frozenset({1, 2})}),
        ([(1, 2), (2, 3), (1, 3), (3, 4)], {frozenset({1, 2, 3}), frozenset({3, 4})}),
        ([(1, 2), (2, 3), (3, 4)], {frozenset({1, 2}), frozenset({2, 3}), frozenset({3, 4})}),
        ([], set()),
    ],
)
def test_known_cliques(edges, expected):
    assert find_cliques(build_graph(edges)) == expected


def test_main_prints_scientific_time_first(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("1 2\n2 3\n1 3\n3 4\n", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert re.fullmatch(r"Execution Time: \d\.\d{6}e[+-]\d{2} seconds", lines[0])
    assert lines[1] == "Largest Clique Size: 3"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert f"Error: Unable to open file {missing}" in err