"""Error taxonomy for curve fitting.

All errors derive from :class:`ValueError` so callers that already guard
numeric entry points with ``except ValueError`` keep working. None of them is
fatal: the caller decides whether to abort or ask for corrected input.
"""

from __future__ import annotations


class FourierFitError(ValueError):
    """Base class for all fitting and export errors."""


class InvalidInput(FourierFitError):
    """Sample sequences of unequal length, fewer than 2 points, or non-finite values."""


class DegenerateGeometry(FourierFitError):
    """Total perimeter is zero (all samples coincide); time cannot be normalised."""


class TermCountOutOfRange(FourierFitError):
    """A truncation request asks for more harmonics than were computed."""


__all__ = [
    "FourierFitError",
    "InvalidInput",
    "DegenerateGeometry",
    "TermCountOutOfRange",
]
