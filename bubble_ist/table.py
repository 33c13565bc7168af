"""Parent tables: rows, chunking of the vertex range and CSV output."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import factorial
from os import PathLike

from .parents import parent_ids
from .permutations import Perm, perm_to_str, unrank


@dataclass(frozen=True)
class Row:
    """One vertex with its parent in every spanning tree."""

    vertex_id: int
    perm: Perm
    parents: tuple[int, ...]

    def to_csv(self) -> str:
        """Render the row as one CSV line without a line ending."""
        fields = [str(self.vertex_id), perm_to_str(self.perm)]
        fields.extend(str(parent) for parent in self.parents)
        return ",".join(fields)


def partition(total: int, parts: int, index: int) -> tuple[int, int]:
    """Return (start, count) of chunk `index` when `total` items are split into `parts`."""
    if parts < 1:
        raise ValueError(f"parts must be at least 1, got {parts}")
    if not 0 <= index < parts:
        raise ValueError(f"index must be in 0..{parts - 1}, got {index}")
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    base, remainder = divmod(total, parts)
    start = index * base + min(index, remainder)
    count = base + (1 if index < remainder else 0)
    return start, count


def header(n: int) -> str:
    """CSV header line for permutations of n symbols."""
    return ",".join(["vertex_id", "perm", *(f"T{t}" for t in range(1, n))])


def parent_rows(n: int, start: int = 0, count: int | None = None) -> Iterator[Row]:
    """Yield the rows for vertices start .. start+count-1 (all vertices by default)."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    total = factorial(n)
    if count is None:
        count = total - start
    if start < 0 or count < 0 or start + count > total:
        raise ValueError(f"range {start}..{start + count} outside 0..{total}")
    for vertex_id in range(start, start + count):
        perm = unrank(vertex_id, n)
        yield Row(vertex_id, perm, tuple(parent_ids(perm)))


def write_csv(path: str | PathLike[str], n: int, rows: Iterable[Row]) -> int:
    """Write the header and rows to path; return the number of rows written."""
    written = 0
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(header(n) + "\n")
        for row in rows:
            handle.write(row.to_csv() + "\n")
            written += 1
    return written