# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Share points: decoding from their textual form and threshold selection."""
from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .digits import int_to_str, str_to_int
from .errors import (
    DuplicateXCoordinateError,
    InsufficientPointsError,
    InvalidThresholdError,
    ShareDecodeError,
)

_logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36


@dataclass(frozen=True)
class Point:
    """A share ``(x, y)`` with arbitrary-precision integer coordinates."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"Point({int_to_str(self.x)}, {int_to_str(self.y)})"


PointLike = Union[Point, Tuple[int, int]]


def as_point(item: PointLike) -> Point:
    """Coerce an ``(x, y)`` pair into a :class:`Point`, rejecting non-integers."""

    if isinstance(item, Point):
        return item
    x, y = item
    try:
        return Point(operator.index(x), operator.index(y))
    except TypeError as exc:
        raise TypeError(f"point coordinates must be integers, got {item!r}") from exc


def parse_in_base(value: str, base: int | str) -> int:
    """Convert *value* written in *base* (2..36) into an ``int``.

    ``ValueError`` is raised for an invalid base or digits; callers that know
    which share they are decoding wrap it into :class:`ShareDecodeError`.
    """

    if isinstance(base, bool):
        raise ValueError(f"invalid base {base!r}")
    if isinstance(base, str):
        try:
            base = int(base.strip(), 10)
        except ValueError:
            raise ValueError(f"invalid base {base!r}") from None
    if not isinstance(base, int):
        raise ValueError(f"invalid base {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    if not isinstance(value, str):
        raise ValueError(f"value must be a string, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise ValueError("value is empty")
    try:
        return str_to_int(text, base)
    except ValueError:
        raise ValueError(f"{value!r} is not a valid base-{base} number") from None


def decode_share(label: str, entry: Mapping[str, Any]) -> Point:
    """Decode one share entry keyed by its x label into a :class:`Point`."""

    try:
        x = str_to_int(str(label).strip(), 10)
    except ValueError:
        raise ShareDecodeError(label, "x label is not a decimal integer") from None
    if not isinstance(entry, Mapping):
        raise ShareDecodeError(label, "entry must be an object with 'base' and 'value'")
    missing = [field for field in ("base", "value") if field not in entry]
    if missing:
        raise ShareDecodeError(label, f"missing field(s): {', '.join(missing)}")
    try:
        y = parse_in_base(entry["value"], entry["base"])
    except ValueError as exc:
        raise ShareDecodeError(label, str(exc)) from exc
    return Point(x, y)


def check_threshold(k: int) -> int:
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThresholdError(f"threshold must be an integer, got {k!r}")
    if k < 1:
        raise InvalidThresholdError(f"threshold must be at least 1, got {k}")
    return k


def check_distinct(points: Iterable[Point]) -> None:
    seen: set[int] = set()
    for point in points:
        if point.x in seen:
            raise DuplicateXCoordinateError(point.x)
        seen.add(point.x)


def select_points(points: Iterable[PointLike], k: int) -> tuple[Point, ...]:
    """Return the *k* points with the smallest x-coordinates, in ascending order.

    Any k points of a degree ``k - 1`` polynomial interpolate to the same
    value, so the choice only needs to be deterministic.
    """

    check_threshold(k)
    candidates = [as_point(item) for item in points]
    check_distinct(candidates)
    if len(candidates) < k:
        raise InsufficientPointsError(required=k, available=len(candidates))
    selected = tuple(sorted(candidates, key=lambda point: point.x)[:k])
    _logger.debug(
        "Selected %d of %d points: x=%s",
        k,
        len(candidates),
        [point.x for point in selected],
    )
    return selected


__all__ = [
    "Point",
    "PointLike",
    "as_point",
    "parse_in_base",
    "decode_share",
    "check_threshold",
    "check_distinct",
    "select_points",
    "MIN_BASE",
    "MAX_BASE",
]
