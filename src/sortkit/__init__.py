"""
Sortkit: classic comparison sorts for teaching.

Provides bubble sort and merge sort over sequences of totally ordered
values. Both return a new list and leave the input untouched.

Usage:
    from sortkit import bubblesort, mergesort

    bubblesort([5, 3, 4, 1, 2])   # [1, 2, 3, 4, 5]
    mergesort(["b", "a", "c"])    # ['a', 'b', 'c']
"""

from .sort import bubblesort, mergesort, merge, Comparable

__version__ = "0.1.0"
__all__ = [
    # Sorting
    "bubblesort",
    "mergesort",
    # Building blocks
    "merge",
    "Comparable",
]
