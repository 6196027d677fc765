"""Pascal's triangle as an immutable table of binomial coefficients."""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from pascal.combinatorics import FactorialTable, binomial_row, nchoosek

logger = logging.getLogger(__name__)

Row = Tuple[int, ...]


@dataclass(frozen=True)
class Triangle:
    """Pascal's triangle down to row ``depth``, or just that row when ``only`` is set."""

    depth: int
    only: bool
    rows: Tuple[Row, ...]

    def max(self) -> int:
        """Biggest value of row ``depth``: nchoosek(depth, depth // 2)."""
        return nchoosek(self.depth, self.depth // 2)

    def __iter__(self) -> Iterator[Tuple[int, Row]]:
        return iter(enumerate(self.rows))

    def __len__(self) -> int:
        return len(self.rows)


def build(depth: int, only: bool = False) -> Triangle:
    """
    Build the triangle for ``depth``.

    Full mode holds rows 0..depth, row i being nchoosek(i, 0..i). Only mode
    holds a single row equal to row ``depth``. One factorial table serves the
    whole build.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    table = FactorialTable(depth)
    if only:
        rows: Tuple[Row, ...] = (binomial_row(depth, table),)
    else:
        rows = tuple(binomial_row(i, table) for i in range(depth + 1))
    logger.info("built triangle depth=%d only=%s rows=%d", depth, only, len(rows))
    return Triangle(depth=depth, only=only, rows=rows)


__all__ = ["Triangle", "Row", "build"]
