# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Recover a Shamir-style secret from threshold shares with exact arithmetic.

``reconstruct_secret``
    Select the ``k`` shares with the smallest x-coordinates and evaluate the
    interpolating polynomial at zero.

``load_document``
    Read a JSON share document into a threshold and a list of points.
"""

from __future__ import annotations

from .document import ShareDocument, load_document, parse_document
from .errors import (
    DocumentError,
    DuplicateXCoordinateError,
    InexactDivisionError,
    InputError,
    InsufficientPointsError,
    InvalidThresholdError,
    ReconstructionError,
    RecoveryError,
    ShareDecodeError,
)
from .interpolation import interpolate_at_zero, lagrange_basis_at_zero, reconstruct_secret
from .points import Point, decode_share, parse_in_base, select_points

__all__ = [
    "Point",
    "ShareDocument",
    "decode_share",
    "parse_in_base",
    "select_points",
    "lagrange_basis_at_zero",
    "interpolate_at_zero",
    "reconstruct_secret",
    "load_document",
    "parse_document",
    "RecoveryError",
    "InputError",
    "DocumentError",
    "ShareDecodeError",
    "ReconstructionError",
    "InvalidThresholdError",
    "InsufficientPointsError",
    "DuplicateXCoordinateError",
    "InexactDivisionError",
]
