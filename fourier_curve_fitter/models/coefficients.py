r"""Coefficient containers for a fitted closed curve.

A curve carries one :class:`AxisCoefficients` per coordinate axis. Each holds
the constant (DC) term and the cosine/sine coefficients for harmonics
``1..n``:

.. math::

   x(t) = c + \sum_{k=1}^{n} a_k\cos(kt) + b_k\sin(kt)

Truncation to fewer terms returns numpy views of the stored arrays; the stored
coefficients are read-only and never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from fourier_curve_fitter.errors import TermCountOutOfRange


def resolve_terms(terms: int, n_harmonics: int) -> int:
    """Map a requested term count onto ``[0, n_harmonics]``.

    ``-1`` selects ``n_harmonics``. Anything above ``n_harmonics`` or below
    ``-1`` raises :class:`TermCountOutOfRange`; missing terms are never
    fabricated.
    """
    terms = int(terms)
    if terms == -1:
        return int(n_harmonics)
    if terms < -1 or terms > n_harmonics:
        raise TermCountOutOfRange(
            f"terms must be -1 or in [0, {n_harmonics}], got {terms}"
        )
    return terms


def _frozen(a: np.ndarray) -> np.ndarray:
    a = np.asarray(a, dtype=np.float64)
    if a.flags.writeable:
        a = a.copy()
        a.setflags(write=False)
    return a


@dataclass(frozen=True)
class AxisCoefficients:
    """Fourier coefficients of one coordinate function.

    Attributes
    ----------
    const:
        Constant (mean) term.
    cos:
        Cosine coefficients ``a_1..a_n``, shape ``(n,)``.
    sin:
        Sine coefficients ``b_1..b_n``, shape ``(n,)``.
    """

    const: float
    cos: np.ndarray
    sin: np.ndarray

    def __post_init__(self) -> None:
        cos = _frozen(self.cos)
        sin = _frozen(self.sin)
        if cos.ndim != 1 or cos.shape != sin.shape:
            raise ValueError(f"cos and sin must be 1D of equal length, got {cos.shape} and {sin.shape}")
        # frozen dataclass: bypass __setattr__ for normalisation
        object.__setattr__(self, "const", float(self.const))
        object.__setattr__(self, "cos", cos)
        object.__setattr__(self, "sin", sin)

    @property
    def n_terms(self) -> int:
        return int(self.cos.size)

    @property
    def orders(self) -> np.ndarray:
        """Harmonic order vector ``[1, ..., n]``."""
        return np.arange(1, self.n_terms + 1, dtype=int)

    def truncate(self, terms: int = -1) -> AxisCoefficients:
        k = resolve_terms(terms, self.n_terms)
        return AxisCoefficients(const=self.const, cos=self.cos[:k], sin=self.sin[:k])

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (arrays become lists)."""
        return {"const": self.const, "cos": self.cos.tolist(), "sin": self.sin.tolist()}


@dataclass(frozen=True)
class CurveCoefficients:
    """Coefficient sets of both axes, computed on the same time axis."""

    x: AxisCoefficients
    y: AxisCoefficients

    def __post_init__(self) -> None:
        if self.x.n_terms != self.y.n_terms:
            raise ValueError(
                f"x and y must carry the same number of terms, got {self.x.n_terms} and {self.y.n_terms}"
            )

    @property
    def n_terms(self) -> int:
        return self.x.n_terms

    def truncate(self, terms: int = -1) -> CurveCoefficients:
        return CurveCoefficients(x=self.x.truncate(terms), y=self.y.truncate(terms))

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x.to_dict(), "y": self.y.to_dict()}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> CurveCoefficients:
        """Reconstruct from :meth:`to_dict` output (e.g. loaded from JSON)."""
        return cls(
            x=AxisCoefficients(const=d["x"]["const"], cos=d["x"]["cos"], sin=d["x"]["sin"]),
            y=AxisCoefficients(const=d["y"]["const"], cos=d["y"]["cos"], sin=d["y"]["sin"]),
        )
