from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple, Union

import numpy as np

from fourier_curve_fitter.models.coefficients import AxisCoefficients, CurveCoefficients, resolve_terms

ArrayLike = Union[float, np.ndarray]


def series_function(coeffs: AxisCoefficients, terms: int = -1) -> Callable[[ArrayLike], ArrayLike]:
    """Return ``t -> const + sum_k a_k cos(kt) + b_k sin(kt)`` for the first ``terms`` harmonics.

    The returned function accepts a scalar (returns ``float``) or an array of
    any shape (returns an array of the same shape). It is periodic in ``2*pi``.
    """
    trunc = coeffs.truncate(terms)
    k = trunc.orders.astype(np.float64)
    a = trunc.cos
    b = trunc.sin
    c = trunc.const

    def f(t: ArrayLike) -> ArrayLike:
        kt = np.multiply.outer(np.asarray(t, dtype=np.float64), k)
        val = c + np.cos(kt) @ a + np.sin(kt) @ b
        if np.ndim(val) == 0:
            return float(val)
        return val

    return f


@dataclass(frozen=True)
class CurveFunction:
    """Pair of coordinate functions ``x(t)``, ``y(t)`` reconstructing the curve."""

    x: Callable[[ArrayLike], ArrayLike]
    y: Callable[[ArrayLike], ArrayLike]

    def __call__(self, t: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
        return self.x(t), self.y(t)


def curve_function(coeffs: CurveCoefficients, terms: int = -1) -> CurveFunction:
    resolve_terms(terms, coeffs.n_terms)
    return CurveFunction(x=series_function(coeffs.x, terms), y=series_function(coeffs.y, terms))


def sample_curve(
    coeffs: CurveCoefficients,
    terms: int = -1,
    *,
    n_points: int = 126,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate the reconstructed curve on a uniform grid over one period.

    The grid excludes ``2*pi`` (it equals ``t = 0``); close the polyline by
    joining the last point back to the first.

    Returns
    -------
    (t, x, y)
        Arrays of shape ``(n_points,)``.
    """
    n_points = int(n_points)
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    fn = curve_function(coeffs, terms)
    t = np.linspace(0.0, 2.0 * np.pi, n_points, endpoint=False)
    x, y = fn(t)
    return t, x, y
