"""Summaries of clique enumeration results."""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from enum import Enum


class TimeFormat(str, Enum):
    """How the execution time is rendered."""

    FIXED = "fixed"
    SCIENTIFIC = "scientific"
    GENERAL = "general"


def _format_seconds(seconds: float, time_format: TimeFormat) -> str:
    if time_format is TimeFormat.FIXED:
        return f"{seconds:.6f}"
    if time_format is TimeFormat.SCIENTIFIC:
        return f"{seconds:.6e}"
    return f"{seconds:g}"


@dataclass(frozen=True)
class CliqueReport:
    """Largest clique size, clique count and size distribution."""

    largest: int
    total: int
    distribution: dict[int, int] = field(default_factory=dict)
    elapsed: float = 0.0
    time_first: bool = True

    @classmethod
    def from_cliques(
        cls,
        cliques: Iterable[Collection[int]],
        elapsed: float,
        min_size: int = 0,
    ) -> CliqueReport:
        """Summarise cliques; only sizes of at least ``min_size`` are distributed."""
        sizes = [len(clique) for clique in cliques]
        counts = Counter(size for size in sizes if size >= min_size)
        return cls(
            largest=max(sizes, default=0),
            total=len(sizes),
            distribution=dict(sorted(counts.items())),
            elapsed=elapsed,
        )

    def format(self, time_format: TimeFormat | str = TimeFormat.GENERAL) -> str:
        """Render the report as text lines ending in a newline."""
        fmt = TimeFormat(time_format)
        timing = f"Execution Time: {_format_seconds(self.elapsed, fmt)} seconds"
        lines = [
            f"Largest Clique Size: {self.largest}",
            f"Total Number of Maximal Cliques: {self.total}",
        ]
        lines.insert(0 if self.time_first else len(lines), timing)
        lines.append("Distribution of Maximal Clique Sizes:")
        lines.extend(
            f"Size {size}: {count} cliques"
            for size, count in sorted(self.distribution.items())
        )
        return "\n".join(lines) + "\n"