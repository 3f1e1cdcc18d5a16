"""Exact Lagrange interpolation of share points at ``x = 0``."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from .rational import ZERO, add, reduce, to_exact_integer

_logger = logging.getLogger(__name__)


def interpolate_at_zero(points: Sequence[tuple[int, int]]) -> int | None:
    """Return the constant term of the polynomial through *points*.

    Works in exact rationals and returns ``None`` when the constant term is
    not an integer. A single point interpolates to its own ``y``.
    """
    total = ZERO
    for j, (xj, yj) in enumerate(points):
        basis_num = 1
        basis_den = 1
        for i, (xi, _) in enumerate(points):
            if i == j:
                continue
            basis_num *= -xi
            basis_den *= xj - xi
        total = add(total, reduce(yj * basis_num, basis_den))
    return to_exact_integer(total)


def candidate_secret(points: Sequence[tuple[int, int]]) -> int | None:
    """Interpolate *points* and keep the result only if it is a positive integer."""
    value = interpolate_at_zero(points)
    if value is not None and value > 0:
        return value
    if _logger.isEnabledFor(logging.DEBUG):
        xs = [x for x, _ in points]
        if value is None:
            _logger.debug("Discarding x=%s: constant term is not an integer", xs)
        else:
            _logger.debug("Discarding x=%s: non-positive constant term %s", xs, value)
    return None


__all__ = ["candidate_secret", "interpolate_at_zero"]
