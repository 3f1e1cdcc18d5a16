"""Runtime tunables for secret recovery.

Values can be overridden by environment variables so batch deployments can
change parallelism or decoding limits without code changes. Malformed values
fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip()


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime tunables for recovery and decoding."""

    workers: int = 1
    parallel_min_combinations: int = 2000
    max_base: int = 36
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        workers=_load_int("SHARE_RECOVERY_WORKERS", 1),
        parallel_min_combinations=_load_int("SHARE_RECOVERY_PARALLEL_MIN", 2000),
        max_base=min(_load_int("SHARE_RECOVERY_MAX_BASE", 36), 36),
        log_level=_load_str("SHARE_RECOVERY_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
