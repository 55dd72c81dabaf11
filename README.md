# cliquefind

Find every maximal clique of an undirected graph read from an edge-list file,
and report the largest clique size, the number of maximal cliques, how long
the search took and how the clique sizes are distributed.

Three algorithms are provided, each with its own command:

| Command             | Algorithm                                                          |
|---------------------|--------------------------------------------------------------------|
| `cliquefind-els`    | Bron–Kerbosch with pivoting, started from each vertex in order of increasing degree |
| `cliquefind-tomita` | Pivoted candidate expansion (Tomita style)                         |
| `cliquefind-chiba`  | Exhaustive inclusion/exclusion search over a decreasing-degree vertex order |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Input format

A plain text file with one edge per line, given as two integer vertex ids
separated by whitespace. Empty lines and lines starting with `#` are skipped,
as are lines that do not begin with two integers; anything after the second
integer on a line is ignored. Edges are undirected.

```
# a triangle with a tail
1 2
2 3
1 3
3 4
```

## Command line

Each command takes the path of the edge-list file as its only argument;
without one it reads `test6.txt` from the current directory.

```
cliquefind-els graph.txt
cliquefind-tomita graph.txt
cliquefind-chiba graph.txt
```

For the triangle-with-a-tail graph above, `cliquefind-els` prints:

```
Largest Clique Size: 3
Total Number of Maximal Cliques: 2
Execution Time: 0.000021 seconds
Distribution of Maximal Clique Sizes:
Size 2: 1 cliques
Size 3: 1 cliques
```

The commands differ slightly in their output:

- `cliquefind-els` prints the execution time after the clique counts, in
  fixed notation with six decimals.
- `cliquefind-tomita` prints the execution time first, in short general
  notation (for example `2.1e-05`).
- `cliquefind-chiba` prints the execution time first, in scientific notation
  with six decimals (for example `2.100000e-05`), and counts only cliques of
  two or more vertices.

If the file cannot be opened, `cliquefind-chiba` prints
`Error: Unable to open file <name>` to standard error and exits with status 1,
while `cliquefind-els` and `cliquefind-tomita` treat it as an empty graph and
report zero cliques.

The exhaustive search in `cliquefind-chiba` tries every subset of the
vertices, so it is only practical on small graphs; use `cliquefind-els` or
`cliquefind-tomita` for anything larger.

## Library use

```python
from cliquefind.graph import load_graph
from cliquefind.els import bron_kerbosch_degeneracy
from cliquefind.report import CliqueReport, TimeFormat

graph = load_graph("graph.txt")
cliques = bron_kerbosch_degeneracy(graph)
report = CliqueReport.from_cliques(cliques, elapsed=0.0)
print(report.format(TimeFormat.FIXED), end="")
```

A graph is a plain `dict[int, set[int]]` mapping each vertex to its
neighbours; cliques are returned as `frozenset`s of vertex ids.

- `cliquefind.graph`: `parse_edges(lines)` yields `(u, v)` pairs from any
  iterable of lines, `build_graph(edges)` turns edges into a symmetric
  adjacency mapping, and `load_graph(path)` does both for a file.
- `cliquefind.els`: `bron_kerbosch_pivot(graph, p, r, x)` is a generator
  yielding every maximal clique that extends `r` with vertices of `p` while
  excluding `x`; `bron_kerbosch_degeneracy(graph)` returns a list of all
  maximal cliques.
- `cliquefind.tomita`: `expand(graph, q, cand)` yields maximal cliques that
  extend `q` with vertices of `cand` (a clique may be yielded more than once);
  `tomita_cliques(graph)` returns the set of distinct maximal cliques.
- `cliquefind.chiba`: `find_cliques(graph)` returns the set of maximal
  cliques with at least two vertices.
- `cliquefind.report`: `CliqueReport` holds `largest`, `total`,
  `distribution`, `elapsed` and `time_first`.
  `CliqueReport.from_cliques(cliques, elapsed, min_size=0)` builds one,
  counting in the distribution only sizes of at least `min_size`, and
  `CliqueReport.format(time_format)` renders it as text. `time_format` is a
  `TimeFormat` (`FIXED`, `SCIENTIFIC` or `GENERAL`, the default) or its string
  value.