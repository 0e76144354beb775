# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Loading share documents.

A share document is a JSON object::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

``keys.k`` is the reconstruction threshold. Every other top-level entry is a
share keyed by its decimal x-coordinate.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .errors import DocumentError
from .points import Point, decode_share

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


@dataclass(frozen=True)
class ShareDocument:
    k: int
    points: tuple[Point, ...]
    n: Optional[int] = None


def _read_count(keys: Mapping[str, Any], name: str, *, required: bool) -> Optional[int]:
    if name not in keys:
        if required:
            raise DocumentError(f"'{KEYS_FIELD}.{name}' is missing")
        return None
    raw = keys[name]
    if isinstance(raw, bool):
        raise DocumentError(f"'{KEYS_FIELD}.{name}' must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            pass
    raise DocumentError(f"'{KEYS_FIELD}.{name}' must be an integer, got {raw!r}")


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DocumentError(f"duplicate key {key!r} in share document")
        result[key] = value
    return result


def parse_document(data: Any) -> ShareDocument:
    """Build a :class:`ShareDocument` from an already decoded JSON value."""

    if not isinstance(data, Mapping):
        raise DocumentError("share document must be a JSON object")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise DocumentError(f"'{KEYS_FIELD}' object is missing")
    k = _read_count(keys, "k", required=True)
    n = _read_count(keys, "n", required=False)

    points = tuple(
        decode_share(label, entry) for label, entry in data.items() if label != KEYS_FIELD
    )
    if n is not None and n != len(points):
        _logger.warning("Document declares n=%d but contains %d shares", n, len(points))
    _logger.debug("Decoded %d shares, threshold k=%d", len(points), k)
    return ShareDocument(k=k, points=points, n=n)


def load_document(path: str | Path) -> ShareDocument:
    """Read and parse the share document stored at *path*."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Error reading file '{path}': {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Error reading file '{path}': not valid UTF-8") from exc
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Error parsing JSON in '{path}': {exc}") from exc
    return parse_document(data)


__all__ = ["ShareDocument", "parse_document", "load_document", "KEYS_FIELD"]
