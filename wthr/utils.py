"""Small helpers shared across the package."""

from __future__ import annotations

import calendar
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")


def tokenise(line: str, separator: str) -> list[str]:
    """Split ``line`` on ``separator``; an empty line yields no tokens."""
    if not line:
        return []
    return line.split(separator)


def average(numbers: Iterable[float]) -> float:
    """Arithmetic mean of ``numbers``."""
    values = list(numbers)
    if not values:
        raise ValueError("cannot average an empty sequence")
    return sum(values) / len(values)


def minimum(numbers: Iterable[float]) -> float:
    """Smallest of ``numbers``."""
    values = list(numbers)
    if not values:
        raise ValueError("cannot take the minimum of an empty sequence")
    return min(values)


def maximum(numbers: Iterable[float]) -> float:
    """Largest of ``numbers``."""
    values = list(numbers)
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    return max(values)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month of the given year."""
    return calendar.monthrange(year, month)[1]


def get_range(start_key: K, end_key: K, mapping: Mapping[K, V]) -> list[V]:
    """Values whose keys lie in ``[start_key, end_key]``, in key order."""
    keys = sorted(mapping)
    low = bisect_left(keys, start_key)
    high = bisect_right(keys, end_key)
    return [mapping[key] for key in keys[low:high]]


def slice_range(start: int, end: int, values: Sequence[V]) -> list[V]:
    """Elements from ``start`` up to ``end``, clamped to the sequence bounds."""
    start = max(start, 0)
    end = min(end, len(values))
    return list(values[start:end])