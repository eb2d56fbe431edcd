"""Enumeration of k-element subsets of a card set."""

from itertools import combinations
from math import comb
from typing import List, Sequence, TypeVar

from poker_equity.errors import InvalidArgumentError

T = TypeVar("T")


def all_combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """Every k-element subset of items, each exactly once.

    Subsets come out in lexicographic order of their index tuples, so the
    result is fully determined by the input order. k == 0 yields a single
    empty subset and k == len(items) a single full one.

    Args:
        items: The ordered set to choose from.
        k: Size of each subset.

    Returns:
        List of subsets, each a list preserving the input order.
    """
    if k < 0 or k > len(items):
        raise InvalidArgumentError(f"Cannot choose {k} items from {len(items)}")
    return [list(c) for c in combinations(items, k)]


def count_combinations(n: int, k: int) -> int:
    """Number of subsets all_combinations would produce for n items."""
    return comb(n, k)
