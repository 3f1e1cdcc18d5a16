"""Decode share documents into a :class:`ShareSet` and threshold.

A document is a JSON object holding the threshold under ``keys.k`` (or a
top-level ``k``) and one entry per share keyed by its decimal ``x``::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "12"},
        "2": {"base": "2", "value": "10101"}
    }

Decoding never raises for malformed content; it returns :class:`ParseError`
with a reason instead.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from .policy import policy
from .shares import ShareSet, ShareSetError

_logger = logging.getLogger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_SHARE_KEY = re.compile(r"^[0-9]+$")
_VALUE = re.compile(r"^[0-9A-Za-z]+$")
# stays under the interpreter limit on int/str conversion length
_CHUNK = 4000


@dataclass(frozen=True)
class Decoded:
    shares: ShareSet
    k: int
    n: int | None = None


@dataclass(frozen=True)
class ParseError:
    reason: str


DecodeResult = Union[Decoded, ParseError]


def _as_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdecimal():
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def decode_value(value: str, base: int) -> int:
    """Decode *value* written in radix *base*; raises ``ValueError`` if invalid."""
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    if not _VALUE.match(value):
        raise ValueError(f"invalid digits {value!r}")
    result = 0
    for start in range(0, len(value), _CHUNK):
        chunk = value[start : start + _CHUNK]
        result = result * base ** len(chunk) + int(chunk, base)
    return result


def encode_value(value: int, base: int) -> str:
    """Write non-negative *value* in radix *base* using lowercase digits."""
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def _read_threshold(document: dict[str, Any]) -> int | None:
    keys = document.get("keys")
    if isinstance(keys, dict) and "k" in keys:
        return _as_int(keys["k"])
    if "k" in document:
        return _as_int(document["k"])
    return None


def decode_document(text: str, *, max_base: int | None = None) -> DecodeResult:
    """Parse a share document from *text*."""
    limit = policy.max_base if max_base is None else max_base
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        return ParseError(f"invalid JSON: {exc.msg} (line {exc.lineno})")
    if not isinstance(document, dict):
        return ParseError("document must be a JSON object")

    k = _read_threshold(document)
    if k is None:
        return ParseError("missing or non-integer threshold 'k'")

    keys = document.get("keys")
    n = _as_int(keys.get("n")) if isinstance(keys, dict) and "n" in keys else None

    points: list[tuple[int, int]] = []
    for key, entry in document.items():
        if not _SHARE_KEY.match(key) or not isinstance(entry, dict):
            continue
        if "base" not in entry or "value" not in entry:
            _logger.debug("Skipping share %s without base/value", key)
            continue
        base = _as_int(entry["base"])
        if base is None or not 2 <= base <= limit:
            return ParseError(f"share {key}: unsupported base {entry['base']!r}")
        raw_value = entry["value"]
        if not isinstance(raw_value, str):
            return ParseError(f"share {key}: value must be a string")
        try:
            y = decode_value(raw_value, base)
        except ValueError:
            return ParseError(f"share {key}: {raw_value!r} is not a base-{base} number")
        points.append((decode_value(key, 10), y))

    try:
        shares = ShareSet(points)
    except ShareSetError as exc:
        return ParseError(str(exc))

    if n is not None and n != len(shares):
        _logger.warning("Document declares n=%d but holds %d shares", n, len(shares))
    return Decoded(shares=shares, k=k, n=n)


def decode_file(path: str | Path, *, max_base: int | None = None) -> DecodeResult:
    """Read and decode *path*; ``OSError`` from reading propagates."""
    text = Path(path).read_text(encoding="utf-8")
    return decode_document(text, max_base=max_base)


__all__ = [
    "DecodeResult",
    "Decoded",
    "ParseError",
    "decode_document",
    "decode_file",
    "decode_value",
    "encode_value",
]
