import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import share_recovery.selector as selector_module
from share_recovery.dealer import add_decoys, poly_eval, split_secret
from share_recovery.policy import RecoveryPolicy
from share_recovery.selector import (
    VoteTally,
    recover_secret,
    select_winner,
    tally_candidates,
    tally_candidates_parallel,
)

QUADRATIC_WITH_DECOY = [(1, 12), (2, 21), (3, 34), (4, 999)]


def test_quadratic_with_decoy():
    assert recover_secret(QUADRATIC_WITH_DECOY, 3) == 7


def test_quadratic_tally_breaks_tie_by_enumeration_order():
    tally = tally_candidates(QUADRATIC_WITH_DECOY, 3)
    # every combination is integral here; the genuine one comes first
    assert tally.counts == {7: 1, 323: 1, 955: 1, 2851: 1}
    assert tally.winner == 7


def test_vote_tally_keeps_first_leader_on_tie():
    tally = select_winner([5, 9, 9, 5])
    assert tally.counts == {5: 2, 9: 2}
    assert tally.winner == 9
    assert tally.best_count == 2

    tally = select_winner([5, 9, 5, 9])
    assert tally.winner == 5


def test_empty_tally():
    tally = VoteTally()
    assert tally.winner is None
    assert len(tally) == 0


def test_single_share_threshold():
    assert recover_secret([(1, 5), (2, 9), (3, 7)], 1) == 5
    assert recover_secret([(1, 5), (2, 9), (3, 9)], 1) == 9
    tally = tally_candidates([(1, 5), (2, 9), (3, 7)], 1)
    assert len(tally) == 3


def test_zero_values_never_win():
    assert recover_secret([(1, 0), (2, 4)], 1) == 4
    assert recover_secret([(1, 0), (2, 0)], 1) is None


def test_threshold_equal_to_share_count():
    assert recover_secret([(1, 12), (2, 21), (3, 34)], 3) == 7
    assert recover_secret([(1, 1), (3, 2)], 2) is None


@pytest.mark.parametrize("k", [0, -1, 5])
def test_invalid_threshold_returns_none(k):
    assert recover_secret(QUADRATIC_WITH_DECOY, k) is None


def test_no_shares():
    assert recover_secret([], 1) is None


def test_genuine_majority_beats_decoys():
    coeffs, shares = split_secret(987654321, n=6, k=3, seed=11)
    mixed = add_decoys(coeffs, shares, 3, seed=12)
    assert recover_secret(mixed, 3) == 987654321


def test_progress_callback_sees_every_combination():
    seen = []
    recover_secret(QUADRATIC_WITH_DECOY, 2, progress=seen.append)
    assert sum(seen) == math.comb(4, 2)


def test_parallel_matches_synchronous(monkeypatch):
    shares = [(1, 5), (2, 9), (3, 7), (4, 9), (5, 5), (6, 11)]
    expected = tally_candidates(shares, 1)
    parallel = tally_candidates_parallel(shares, 1, 3)
    assert parallel.counts == expected.counts
    assert parallel.winner == expected.winner == 9

    monkeypatch.setattr(selector_module, "policy", RecoveryPolicy(parallel_min_combinations=0))
    progress = []
    assert recover_secret(QUADRATIC_WITH_DECOY, 3, workers=2, progress=progress.append) == 7
    assert sum(progress) == 4


@settings(max_examples=25, deadline=None)
@given(
    secret=st.integers(min_value=1, max_value=10**30),
    rest=st.lists(st.integers(min_value=0, max_value=10**12), min_size=1, max_size=3),
    extra=st.integers(min_value=0, max_value=3),
)
def test_unanimity_without_decoys(secret, rest, extra):
    coeffs = [secret] + rest
    k = len(coeffs)
    points = [(x, poly_eval(coeffs, x)) for x in range(1, k + extra + 1)]
    tally = tally_candidates(points, k)
    assert tally.counts == {secret: math.comb(len(points), k)}
    assert recover_secret(points, k) == secret
