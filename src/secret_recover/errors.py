# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the loader, the decoder and the core."""
from __future__ import annotations

from .digits import int_to_str


class RecoveryError(RuntimeError):
    """Base class for every failure raised by :mod:`secret_recover`."""


class InputError(RecoveryError):
    """Raised when the share input cannot be turned into points."""


class DocumentError(InputError):
    """Raised when the share document is unreadable or malformed."""


class ShareDecodeError(InputError):
    """Raised when a single share entry cannot be decoded."""

    def __init__(self, label: str, message: str) -> None:
        super().__init__(f"Share {label!r}: {message}")
        self.label = label


class ReconstructionError(RecoveryError):
    """Raised when the secret cannot be computed from the given points."""


class InvalidThresholdError(ReconstructionError):
    pass


class InsufficientPointsError(ReconstructionError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Need at least {required} points to reconstruct the secret, got {available}"
        )
        self.required = required
        self.available = available


class DuplicateXCoordinateError(ReconstructionError):
    def __init__(self, x: int) -> None:
        super().__init__(f"x-coordinate {int_to_str(x)} appears more than once")
        self.x = x


class InexactDivisionError(ReconstructionError):
    """Raised when interpolation does not reduce to an integer.

    The shares are inconsistent: they do not lie on a single polynomial with
    an integer value at zero. ``x`` is ``None`` when the failure is detected
    on the final sum rather than on one basis term.
    """

    def __init__(self, numerator: int, denominator: int, *, x: int | None = None) -> None:
        where = f"basis term for x={int_to_str(x)}" if x is not None else "interpolated sum"
        super().__init__(f"{where} is not an integer: {int_to_str(numerator)}/{int_to_str(denominator)}")
        self.x = x
        self.numerator = numerator
        self.denominator = denominator


__all__ = [
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
