# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Runtime configuration for secret recovery.

Values come from environment variables so the command line tool and library
callers share one source of defaults. Explicit arguments always win over the
policy.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

RATIONAL = "rational"
INTEGER = "integer"
STRATEGIES = (RATIONAL, INTEGER)


def _load_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value not in choices:
        return default
    return value


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        return default
    return value


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds the tunables for reconstruction and reporting."""

    strategy: str = RATIONAL
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        strategy=_load_choice("SECRET_RECOVER_STRATEGY", RATIONAL, STRATEGIES),
        log_level=_load_level("SECRET_RECOVER_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy", "RATIONAL", "INTEGER", "STRATEGIES"]
