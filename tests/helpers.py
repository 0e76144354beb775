"""Polynomial helpers for building share sets in tests."""
from __future__ import annotations


def evaluate(coeffs: list[int], x: int) -> int:
    """Evaluate ``coeffs[0] + coeffs[1]*x + ...`` with Horner's method."""
    y = 0
    for c in reversed(coeffs):
        y = y * x + c
    return y


def make_shares(coeffs: list[int], xs) -> list[tuple[int, int]]:
    return [(x, evaluate(coeffs, x)) for x in xs]
