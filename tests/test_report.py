import re
from dataclasses import replace

import pytest

from cliquefind.report import CliqueReport, TimeFormat


def test_from_cliques_counts_sizes():
    cliques = [{1, 2, 3}, {3, 4}, {5, 6}]
    report = CliqueReport.from_cliques(cliques, 0.5)
    assert report.total == len(cliques)
    assert report.largest == 3
    assert report.distribution == {2: 2, 3: 1}
    assert sum(report.distribution.values()) == report.total


def test_min_size_filters_distribution_only():
    cliques = [{1}, {1, 2}, {3, 4}]
    report = CliqueReport.from_cliques(cliques, 0.0, 2)
    assert report.total == len(cliques)
    assert min(report.distribution) >= 2
    assert sum(report.distribution.values()) < report.total


def test_empty_cliques():
    report = CliqueReport.from_cliques([], 1.0)
    assert report.largest == 0
    assert report.distribution == {}


def test_fixed_time_format():
    report = CliqueReport.from_cliques([{1, 2}], 0.5)
    assert "Execution Time: 0.500000 seconds" in report.format(TimeFormat.FIXED)


def test_scientific_time_format():
    report = CliqueReport.from_cliques([{1, 2}], 0.5)
    assert "Execution Time: 5.000000e-01 seconds" in report.format("scientific")


def test_general_time_format():
    report = CliqueReport.from_cliques([{1, 2}], 0.5)
    assert "Execution Time: 0.5 seconds" in report.format(TimeFormat.GENERAL)


def test_time_line_placement():
    report = CliqueReport.from_cliques([{1, 2}], 0.25)
    first = report.format().splitlines()
    assert first[0].startswith("Execution Time:")
    trailing = replace(report, time_first=False).format().splitlines()
    assert trailing[0].startswith("Largest Clique Size:")
    assert trailing[2].startswith("Execution Time:")


def test_distribution_lines_sorted():
    report = CliqueReport(largest=3, total=3, distribution={3: 1, 2: 2}, elapsed=0.0)
    text = report.format()
    assert text.endswith("\n")
    assert text.index("Size 2: 2 cliques") < text.index("Size 3: 1 cliques")
    assert re.search(r"Distribution of Maximal Clique Sizes:\nSize 2", text)


def test_unknown_time_format():
    report = CliqueReport.from_cliques([], 0.0)
    with pytest.raises(ValueError):
        report.format("hexadecimal")