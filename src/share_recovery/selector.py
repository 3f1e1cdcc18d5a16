"""Majority-vote selection of the secret across all share combinations."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field

from .combinations import count_combinations, iter_combinations, iter_ranked_combinations
from .lagrange import candidate_secret
from .policy import policy

_logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass
class VoteTally:
    """Occurrence counts per candidate plus the running leader.

    The leader only changes when a candidate's count becomes strictly greater
    than the current best, so on ties the candidate that reached the count
    first keeps the lead.
    """

    counts: dict[int, int] = field(default_factory=dict)
    best_value: int | None = None
    best_count: int = 0

    def record(self, candidate: int) -> None:
        count = self.counts.get(candidate, 0) + 1
        self.counts[candidate] = count
        if count > self.best_count:
            self.best_value = candidate
            self.best_count = count

    def __len__(self) -> int:
        return len(self.counts)

    @property
    def winner(self) -> int | None:
        return self.best_value


def select_winner(candidates: Iterable[int]) -> VoteTally:
    """Tally *candidates* in the order given."""
    tally = VoteTally()
    for candidate in candidates:
        tally.record(candidate)
    return tally


def tally_candidates(
    shares: Sequence[tuple[int, int]],
    k: int,
    *,
    progress: ProgressCallback | None = None,
) -> VoteTally:
    """Interpolate every ``k``-combination of *shares* and tally the valid secrets."""
    tally = VoteTally()
    for combination in iter_combinations(shares, k):
        candidate = candidate_secret(combination)
        if candidate is not None:
            tally.record(candidate)
        if progress:
            progress(1)
    return tally


def _tally_shard(shares: tuple[tuple[int, int], ...], k: int, shard: int, shards: int) -> list[tuple[int, int]]:
    found: list[tuple[int, int]] = []
    for rank, combination in iter_ranked_combinations(shares, k, shard=shard, shards=shards):
        candidate = candidate_secret(combination)
        if candidate is not None:
            found.append((rank, candidate))
    return found


def tally_candidates_parallel(
    shares: Sequence[tuple[int, int]],
    k: int,
    workers: int,
    *,
    progress: ProgressCallback | None = None,
) -> VoteTally:
    """Same result as :func:`tally_candidates`, computed in worker processes.

    Candidates come back tagged with their combination rank and are replayed
    in rank order, so ties resolve exactly as in the synchronous path.
    """
    points = tuple((x, y) for x, y in shares)
    total = count_combinations(len(points), k)
    ranked: list[tuple[int, int]] = []
    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_tally_shard, points, k, shard, workers) for shard in range(workers)]
        for shard, future in enumerate(futures):
            ranked.extend(future.result())
            if progress:
                progress(len(range(shard, total, workers)))
    ranked.sort()
    _logger.info("Merged %d candidates from %d shards", len(ranked), workers)
    return select_winner(candidate for _, candidate in ranked)


def recover_secret(
    shares: Sequence[tuple[int, int]],
    k: int,
    *,
    workers: int | None = None,
    progress: ProgressCallback | None = None,
) -> int | None:
    """Return the most frequent positive secret over all ``k``-combinations.

    Returns ``None`` when ``k`` is outside ``1..len(shares)`` or no
    combination interpolates to a positive integer.
    """
    n = len(shares)
    if k <= 0 or k > n:
        _logger.warning("No combinations possible for k=%s with %d shares", k, n)
        return None

    total = count_combinations(n, k)
    workers = policy.workers if workers is None else workers
    if workers > 1 and total >= policy.parallel_min_combinations:
        _logger.info("Evaluating %d combinations across %d workers", total, workers)
        tally = tally_candidates_parallel(shares, k, workers, progress=progress)
    else:
        _logger.info("Evaluating %d combinations", total)
        tally = tally_candidates(shares, k, progress=progress)

    _logger.debug("Tally holds %d distinct candidates", len(tally))
    if tally.winner is None:
        _logger.info("No valid positive integer secret among %d combinations", total)
        return None
    _logger.info("Recovered secret with %d of %d votes", tally.best_count, total)
    return tally.winner


__all__ = [
    "VoteTally",
    "recover_secret",
    "select_winner",
    "tally_candidates",
    "tally_candidates_parallel",
]
