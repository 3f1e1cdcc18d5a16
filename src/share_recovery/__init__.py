# SPDX-FileCopyrightText: 2026 Share Recovery contributors
# SPDX-License-Identifier: MIT

# src/share_recovery/__init__.py

"""Recover a threshold secret from polynomial shares mixed with decoys."""

from .decoding import Decoded, ParseError, decode_document, decode_file
from .lagrange import candidate_secret, interpolate_at_zero
from .rational import Rational
from .selector import VoteTally, recover_secret
from .shares import Share, ShareSet, ShareSetError

__all__ = [
    "Decoded",
    "ParseError",
    "Rational",
    "Share",
    "ShareSet",
    "ShareSetError",
    "VoteTally",
    "candidate_secret",
    "decode_document",
    "decode_file",
    "interpolate_at_zero",
    "recover_secret",
]
