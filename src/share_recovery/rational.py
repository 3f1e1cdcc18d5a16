"""Exact rational numbers over Python integers.

Every :class:`Rational` is kept in lowest terms with a positive denominator,
so two equal values always have identical fields and ``0`` is stored as
``0/1``. The helpers mirror the operations the interpolator needs:

``add`` / ``multiply`` / ``negate``
    Closed arithmetic returning new reduced values.

``reduce``
    Build a reduced value from a raw numerator/denominator pair.

``to_exact_integer``
    Return the integer a value represents, or ``None`` when it has a
    fractional part.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def normalize_sign(numerator: int, denominator: int) -> tuple[int, int]:
    """Move a negative sign from the denominator to the numerator."""
    if denominator < 0:
        return -numerator, -denominator
    return numerator, denominator


@dataclass(frozen=True)
class Rational:
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("Rational denominator must be non-zero")
        numerator, denominator = normalize_sign(self.numerator, self.denominator)
        # gcd(0, d) == d, so zero collapses to 0/1
        divisor = math.gcd(numerator, denominator)
        object.__setattr__(self, "numerator", numerator // divisor)
        object.__setattr__(self, "denominator", denominator // divisor)

    def __add__(self, other: Rational) -> Rational:
        return add(self, other)

    def __mul__(self, other: Rational) -> Rational:
        return multiply(self, other)

    def __neg__(self) -> Rational:
        return negate(self)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


ZERO = Rational(0)
ONE = Rational(1)


def reduce(numerator: int, denominator: int) -> Rational:
    """Return ``numerator / denominator`` in lowest terms."""
    return Rational(numerator, denominator)


def add(a: Rational, b: Rational) -> Rational:
    return reduce(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def multiply(a: Rational, b: Rational) -> Rational:
    return reduce(a.numerator * b.numerator, a.denominator * b.denominator)


def negate(a: Rational) -> Rational:
    return Rational(-a.numerator, a.denominator)


def to_exact_integer(a: Rational) -> int | None:
    """Return ``a`` as an ``int`` if its denominator is 1, else ``None``."""
    if a.denominator != 1:
        return None
    return a.numerator


__all__ = [
    "ONE",
    "Rational",
    "ZERO",
    "add",
    "multiply",
    "negate",
    "normalize_sign",
    "reduce",
    "to_exact_integer",
]
