"""Share points and the validated, ordered collection the engine consumes."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, overload


class ShareSetError(ValueError):
    """Raised when share points violate the input invariants."""


class Share(NamedTuple):
    x: int
    y: int


class ShareSet(Sequence[Share]):
    """Immutable shares sorted ascending by ``x``.

    Construction rejects duplicate or non-positive ``x`` values and negative
    ``y`` values with :class:`ShareSetError`.
    """

    __slots__ = ("_shares",)

    def __init__(self, points: Iterable[tuple[int, int]] = ()) -> None:
        shares = sorted((Share(int(x), int(y)) for x, y in points), key=lambda s: s.x)
        seen: set[int] = set()
        for share in shares:
            if share.x <= 0:
                raise ShareSetError(f"share x must be positive, got {share.x}")
            if share.x in seen:
                raise ShareSetError(f"duplicate share x={share.x}")
            if share.y < 0:
                raise ShareSetError(f"share y must be non-negative (x={share.x})")
            seen.add(share.x)
        self._shares = tuple(shares)

    @overload
    def __getitem__(self, index: int) -> Share: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Share, ...]: ...

    def __getitem__(self, index):
        return self._shares[index]

    def __len__(self) -> int:
        return len(self._shares)

    def __iter__(self) -> Iterator[Share]:
        return iter(self._shares)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShareSet):
            return self._shares == other._shares
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._shares)

    def __repr__(self) -> str:
        return f"ShareSet({list(self._shares)!r})"

    def __reduce__(self):
        return (ShareSet, (self._shares,))

    @property
    def xs(self) -> tuple[int, ...]:
        return tuple(share.x for share in self._shares)


__all__ = ["Share", "ShareSet", "ShareSetError"]
