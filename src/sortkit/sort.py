"""
Classic comparison sorts over sequences of totally ordered values.

Both sorts are pure: the input is never mutated and a new list is
returned. Equal elements keep their input order.
"""

from __future__ import annotations
from typing import Any, Protocol, Sequence, TypeVar
from itertools import islice
import logging

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    """Values with a total order under ``<`` and ``<=``."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


def bubblesort(values: Sequence[T]) -> list[T]:
    """
    Sort by repeated passes of adjacent compare-and-swap.

    A pass swaps a pair only when the right element is strictly less than
    the left one, so equal elements never move past each other. Sorting
    stops after the first pass that makes no swap.

    Each pass settles the largest remaining element at the end of the
    unsorted range, so the next pass scans one pair fewer.

    Example:
        >>> bubblesort([5, 3, 4, 1, 2])
        [1, 2, 3, 4, 5]
    """
    if len(values) <= 1:
        return list(values)

    result = list(values)
    bound = len(result) - 1
    passes = 0
    swaps = 0
    clean = False

    while not clean:
        clean = True
        passes += 1
        for i in range(bound):
            current = result[i]
            following = result[i + 1]
            if following < current:
                result[i] = following
                result[i + 1] = current
                swaps += 1
                clean = False
        bound -= 1

    logger.debug("bubblesort: n=%d passes=%d swaps=%d", len(result), passes, swaps)
    return result


def mergesort(values: Sequence[T]) -> list[T]:
    """
    Sort by splitting at the midpoint, sorting each half, then merging.

    The left half takes ``ceil(n / 2)`` elements. Runs in O(n log n) time
    with O(log n) recursion depth.

    Example:
        >>> mergesort(["b", "a", "c"])
        ['a', 'b', 'c']
    """
    if len(values) <= 1:
        return list(values)

    logger.debug("mergesort: n=%d", len(values))
    return _mergesort(list(values))


def _mergesort(values: list[T]) -> list[T]:
    if len(values) <= 1:
        return list(values)

    middle = (len(values) + 1) // 2
    left = _mergesort(values[:middle])
    right = _mergesort(values[middle:])
    return merge(left, right)


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """
    Merge two sorted sequences into one sorted list.

    Ties take the element from ``left`` first, which keeps merge sort stable.
    """
    result: list[T] = []
    i = j = 0

    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    # At most one side has anything left
    result.extend(islice(left, i, None))
    result.extend(islice(right, j, None))
    return result
