# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Text conversion for integers of any size.

CPython 3.11+ refuses int/str conversions of more than 4300 decimal digits by
default. Share values and secrets routinely exceed that, so conversions go
through :func:`unlimited_int_digits`.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the interpreter's int/str digit limit for the duration of the block."""

    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def int_to_str(value: int) -> str:
    with unlimited_int_digits():
        return str(value)


def str_to_int(text: str, base: int = 10) -> int:
    with unlimited_int_digits():
        return int(text, base)


__all__ = ["unlimited_int_digits", "int_to_str", "str_to_int"]
