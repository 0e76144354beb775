# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation at x = 0.

The secret is ``P(0) = sum_j y_j * L_j`` with
``L_j = prod_{m != j} (-x_m) / (x_j - x_m)``.

Two ways of carrying the division are offered:

``rational``
    Every term is an exact :class:`fractions.Fraction`; only the final sum has
    to be an integer. Works for every consistent share set.

``integer``
    Every basis term is reduced with integer division on the spot and must
    leave no remainder. Cheaper, but rejects share sets whose individual
    basis terms are fractional (for example x = 2, 4, 5) even when the sum
    would be exact.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from fractions import Fraction
from typing import Optional

from .errors import InexactDivisionError, InsufficientPointsError
from .points import Point, PointLike, as_point, check_distinct, select_points
from .policy import INTEGER, RATIONAL, STRATEGIES, policy

_logger = logging.getLogger(__name__)


def _resolve_strategy(strategy: Optional[str]) -> str:
    chosen = strategy or policy.strategy
    if chosen not in STRATEGIES:
        raise ValueError(f"unknown interpolation strategy {chosen!r}, expected one of {STRATEGIES}")
    return chosen


def _basis_parts(xs: Sequence[int], j: int) -> tuple[int, int]:
    """Return the unreduced numerator and denominator of ``L_j(0)``."""
    xj = xs[j]
    numerator = 1
    denominator = 1
    for m, xm in enumerate(xs):
        if m == j:
            continue
        numerator *= -xm
        denominator *= xj - xm
    return numerator, denominator


def lagrange_basis_at_zero(xs: Sequence[int]) -> list[Fraction]:
    """Exact Lagrange basis terms ``L_j(0)`` for distinct x-coordinates."""
    check_distinct(Point(x, 0) for x in xs)
    return [Fraction(*_basis_parts(xs, j)) for j in range(len(xs))]


def _sum_rational(points: Sequence[Point]) -> int:
    xs = [point.x for point in points]
    total = Fraction(0)
    for j, (_, yj) in enumerate(points):
        numerator, denominator = _basis_parts(xs, j)
        total += Fraction(yj * numerator, denominator)
    if total.denominator != 1:
        raise InexactDivisionError(total.numerator, total.denominator)
    return total.numerator


def _sum_integer(points: Sequence[Point]) -> int:
    xs = [point.x for point in points]
    total = 0
    for j, (xj, yj) in enumerate(points):
        numerator, denominator = _basis_parts(xs, j)
        basis, remainder = divmod(numerator, denominator)
        if remainder:
            raise InexactDivisionError(numerator, denominator, x=xj)
        _logger.debug("Basis term for x=%d is %d", xj, basis)
        total += yj * basis
    return total


def interpolate_at_zero(points: Iterable[PointLike], *, strategy: Optional[str] = None) -> int:
    """Evaluate the polynomial through all of *points* at zero.

    No selection is made: ``n`` points define a polynomial of degree ``n - 1``.
    """

    chosen = _resolve_strategy(strategy)
    pts = [as_point(item) for item in points]
    if not pts:
        raise InsufficientPointsError(required=1, available=0)
    check_distinct(pts)
    if chosen == INTEGER:
        return _sum_integer(pts)
    return _sum_rational(pts)


def reconstruct_secret(
    points: Iterable[PointLike],
    k: int,
    *,
    strategy: Optional[str] = None,
) -> int:
    """Recover the secret from *points* with reconstruction threshold *k*.

    The ``k`` points with the smallest x-coordinates are used. Raises
    :class:`~secret_recover.errors.InsufficientPointsError` when fewer than
    ``k`` points are given, :class:`~secret_recover.errors.DuplicateXCoordinateError`
    for repeated x values and :class:`~secret_recover.errors.InexactDivisionError`
    when the shares do not interpolate to an integer.
    """

    chosen = _resolve_strategy(strategy)
    selected = select_points(points, k)
    _logger.debug("Interpolating %d points with the %s strategy", len(selected), chosen)
    if chosen == INTEGER:
        return _sum_integer(selected)
    return _sum_rational(selected)


__all__ = [
    "RATIONAL",
    "INTEGER",
    "lagrange_basis_at_zero",
    "interpolate_at_zero",
    "reconstruct_secret",
]
