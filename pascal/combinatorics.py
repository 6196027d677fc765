"""
Arbitrary-precision factorials and binomial coefficients.

Python integers are unbounded, so every value here is exact no matter how
deep the triangle grows. Nothing is cached between calls except inside an
explicit ``FactorialTable`` owned by the caller.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@contextmanager
def unbounded_decimal() -> Iterator[None]:
    """
    Lift CPython's int -> str digit limit for the duration of the block.

    Python 3.11 added a 4300-digit cap on decimal conversion (older
    interpreters have no cap and no ``set_int_max_str_digits``). The
    previous limit is restored on exit.
    """
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def to_decimal(value: int) -> str:
    """Decimal string of ``value`` regardless of its digit count."""
    with unbounded_decimal():
        return str(value)


def _check_non_negative(name: str, value: int) -> None:
    """Reject negative arguments."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def factorial(n: int) -> int:
    """
    Return n! as a descending product n * (n-1) * ... * 1.

    Args:
        n: Non-negative integer

    Returns:
        n!, with factorial(0) == factorial(1) == 1
    """
    _check_non_negative("n", n)
    result = 1
    while n > 1:
        result *= n
        n -= 1
    return result


def nchoosek(n: int, k: int) -> int:
    """
    Binomial coefficient n! / (k! * (n-k)!).

    Any k >= n yields 1, including k > n where the textbook value is 0.
    Existing output of the --choosek and --biggest modes depends on this.
    """
    _check_non_negative("n", n)
    _check_non_negative("k", k)
    if k >= n:
        return 1
    return factorial(n) // (factorial(k) * factorial(n - k))


def biggest(n: int) -> int:
    """Largest entry of row n: nchoosek(n, n // 2)."""
    return nchoosek(n, n // 2)


class FactorialTable:
    """Factorials 0! .. limit! computed in a single ascending pass.

    A table belongs to one computation (one triangle build) and is dropped
    with it.
    """

    def __init__(self, limit: int):
        _check_non_negative("limit", limit)
        values: List[int] = [1]
        for i in range(1, limit + 1):
            values.append(values[-1] * i)
        self._values = tuple(values)
        logger.debug("factorial table ready up to %d!", limit)

    @property
    def limit(self) -> int:
        return len(self._values) - 1

    def factorial(self, n: int) -> int:
        _check_non_negative("n", n)
        if n > self.limit:
            raise ValueError(f"{n}! is beyond the table limit {self.limit}")
        return self._values[n]

    def nchoosek(self, n: int, k: int) -> int:
        """Same contract as the module-level nchoosek, read from the table."""
        _check_non_negative("n", n)
        _check_non_negative("k", k)
        if k >= n:
            return 1
        return self.factorial(n) // (self.factorial(k) * self.factorial(n - k))


def binomial_row(n: int, table: Optional[FactorialTable] = None) -> Tuple[int, ...]:
    """Row n of Pascal's triangle: nchoosek(n, 0..n)."""
    if table is None or table.limit < n:
        table = FactorialTable(n)
    return tuple(table.nchoosek(n, k) for k in range(n + 1))


__all__ = [
    "factorial",
    "nchoosek",
    "biggest",
    "FactorialTable",
    "binomial_row",
    "to_decimal",
    "unbounded_decimal",
]
