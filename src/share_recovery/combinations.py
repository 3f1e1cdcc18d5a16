"""Lazy enumeration of the ``k``-element subsets of a share sequence."""
from __future__ import annotations

import math
from itertools import islice
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def count_combinations(n: int, k: int) -> int:
    """Number of subsets :func:`iter_combinations` yields for ``n`` items."""
    if k <= 0 or k > n:
        return 0
    return math.comb(n, k)


def _choose(pool: tuple[T, ...], k: int, start: int, picked: tuple[T, ...]) -> Iterator[tuple[T, ...]]:
    if len(picked) == k:
        yield picked
        return
    # stop early enough that the remaining slots can still be filled
    last = len(pool) - (k - len(picked))
    for index in range(start, last + 1):
        yield from _choose(pool, k, index + 1, picked + (pool[index],))


def iter_combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Yield every ``k``-subset of *items* once, in lexicographic index order.

    Each subset is a fresh tuple keeping the relative order of *items*.
    ``k > len(items)`` yields nothing; ``k < 1`` raises ``ValueError``.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    pool = tuple(items)
    if k > len(pool):
        return
    yield from _choose(pool, k, 0, ())


def iter_ranked_combinations(
    items: Sequence[T],
    k: int,
    *,
    shard: int = 0,
    shards: int = 1,
) -> Iterator[tuple[int, tuple[T, ...]]]:
    """Yield ``(rank, subset)`` for the subsets whose rank falls in *shard*.

    Ranks are positions in :func:`iter_combinations` order; a subset belongs
    to shard ``rank % shards``.
    """
    if shards < 1 or not 0 <= shard < shards:
        raise ValueError(f"invalid shard {shard} of {shards}")
    yield from islice(enumerate(iter_combinations(items, k)), shard, None, shards)


__all__ = ["count_combinations", "iter_combinations", "iter_ranked_combinations"]
