# src/share_recovery/dealer.py
"""Non-cryptographic share dealer for fixtures and demos.

This module provides two helper functions:

``split_secret``
    Split a positive integer secret into ``n`` points on an integer
    polynomial of degree ``k - 1``.

``add_decoys``
    Mix extra points that do not lie on the polynomial into a share list.

Coefficients are plain integers and no modulus is applied, so the points can
be recovered with exact interpolation. Do not use this to protect real
secrets.
"""

from __future__ import annotations

import random
import secrets

_COEFF_BOUND = 2**64


def _rng(seed: int | None) -> random.Random:
    return secrets.SystemRandom() if seed is None else random.Random(seed)


def poly_eval(coeffs: list[int], x: int) -> int:
    y = 0
    power = 1
    for c in coeffs:
        y += c * power
        power *= x
    return y


def split_secret(
    secret: int,
    *,
    n: int,
    k: int,
    seed: int | None = None,
    coeff_bound: int = _COEFF_BOUND,
) -> tuple[list[int], list[tuple[int, int]]]:
    """Split ``secret`` into ``n`` shares with threshold ``k``.

    Returns the polynomial coefficients (constant term first) and the points
    at ``x = 1..n``.
    """
    if not 0 < k <= n:
        raise ValueError("Invalid n or k")
    if secret <= 0:
        raise ValueError("Secret must be a positive integer")
    if coeff_bound < 1:
        raise ValueError("coeff_bound must be positive")

    rng = _rng(seed)
    coeffs = [secret] + [1 + rng.randrange(coeff_bound) for _ in range(k - 1)]
    shares = [(x, poly_eval(coeffs, x)) for x in range(1, n + 1)]
    return coeffs, shares


def add_decoys(
    coeffs: list[int],
    shares: list[tuple[int, int]],
    count: int,
    *,
    seed: int | None = None,
) -> list[tuple[int, int]]:
    """Return *shares* plus *count* decoy points off the polynomial.

    Decoys take fresh ``x`` values above the existing ones and a random ``y``
    in the range of the genuine values.
    """
    if count < 0:
        raise ValueError("Decoy count must be non-negative")
    rng = _rng(seed)
    start = max((x for x, _ in shares), default=0) + 1
    upper = max((y for _, y in shares), default=1) * 2 + 1
    mixed = list(shares)
    for x in range(start, start + count):
        y = rng.randrange(upper)
        while y == poly_eval(coeffs, x):
            y = rng.randrange(upper)
        mixed.append((x, y))
    return mixed


__all__ = ["add_decoys", "poly_eval", "split_secret"]
