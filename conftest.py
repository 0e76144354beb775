# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the package imports without an install
#   • environment overrides for the recovery policy cleared before each test

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # import the package without installing it


@pytest.fixture(autouse=True)
def _clean_policy_env(monkeypatch):
    """Tests start from the default policy regardless of the caller's shell."""
    monkeypatch.delenv("SECRET_RECOVER_STRATEGY", raising=False)
    monkeypatch.delenv("SECRET_RECOVER_LOG_LEVEL", raising=False)
    yield
