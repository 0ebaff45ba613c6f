"""Amplitude/phase form of Fourier coefficients for export.

Each pair ``(a_k, b_k)`` is rewritten as a single shifted cosine:

    a_k cos(kt) + b_k sin(kt) = A_k cos(kt + phi_k)

with ``A_k = sqrt(a_k**2 + b_k**2)`` and ``phi_k = -atan2(b_k, a_k)``.

Rounding happens here and only here; stored coefficients keep full precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import numpy as np

from fourier_curve_fitter.models.coefficients import AxisCoefficients
from fourier_curve_fitter.models.profile import DEFAULT_DECIMALS


def round_half_up(x: Union[float, np.ndarray], decimals: int = DEFAULT_DECIMALS) -> Union[float, np.ndarray]:
    """Round to ``decimals`` fractional digits, ties towards +inf.

    ``numpy.round`` rounds ties to even; exported values round ties up so a
    value and its serialized form agree regardless of parity.
    """
    scale = 10.0 ** int(decimals)
    out = np.floor(np.asarray(x, dtype=np.float64) * scale + 0.5) / scale
    # Normalise -0.0 so it never prints as "-0".
    out = out + 0.0
    if np.ndim(out) == 0:
        return float(out)
    return out


def format_number(v: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Fixed-point text for a rounded value: no exponent, no trailing zeros, no ``-0``."""
    s = f"{float(v):.{int(decimals)}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("", "-0"):
        return "0"
    return s


@dataclass(frozen=True)
class PolarTerms:
    """Rounded export values of one axis.

    Attributes
    ----------
    const:
        Rounded constant term.
    amplitude:
        Rounded ``A_1..A_n``, shape ``(n,)``.
    phase:
        Rounded ``phi_1..phi_n`` in radians, shape ``(n,)``.
    """

    const: float
    amplitude: np.ndarray
    phase: np.ndarray

    @property
    def n_terms(self) -> int:
        return int(self.amplitude.size)

    def to_flat(self) -> List[float]:
        """``[const, A_1..A_n, phi_1..phi_n]``."""
        return [float(self.const), *self.amplitude.tolist(), *self.phase.tolist()]

    @classmethod
    def from_flat(cls, values: List[float]) -> PolarTerms:
        values = [float(v) for v in values]
        if len(values) % 2 != 1:
            raise ValueError(f"Flat axis list must have odd length 2n+1, got {len(values)}")
        n = (len(values) - 1) // 2
        return cls(
            const=values[0],
            amplitude=np.asarray(values[1 : n + 1]),
            phase=np.asarray(values[n + 1 :]),
        )


def to_polar(coeffs: AxisCoefficients, terms: int = -1, *, decimals: int = DEFAULT_DECIMALS) -> PolarTerms:
    """Convert the first ``terms`` harmonics of ``coeffs`` to rounded amplitude/phase."""
    c = coeffs.truncate(terms)
    amplitude = np.hypot(c.cos, c.sin)
    # Round before negating, so the exported phase is exactly -round(atan2).
    phase = -np.asarray(round_half_up(np.arctan2(c.sin, c.cos), decimals)) + 0.0
    return PolarTerms(
        const=round_half_up(c.const, decimals),
        amplitude=np.asarray(round_half_up(amplitude, decimals)),
        phase=phase,
    )
