r"""Periodic integration and Fourier coefficient extraction.

Coefficients are the continuous Fourier formulas evaluated by trapezoidal
integration over the arc-length time axis:

.. math::

   c = \frac{1}{2\pi}\int_0^{2\pi} x(t)\,dt,\qquad
   a_k = \frac{1}{\pi}\int_0^{2\pi} x(t)\cos(kt)\,dt,\qquad
   b_k = \frac{1}{\pi}\int_0^{2\pi} x(t)\sin(kt)\,dt

Functions
---------
periodic_integral
    Trapezoidal integral of a 2*pi-periodic function given (time, value) samples.
axis_coefficients
    Constant, cosine and sine coefficients of one coordinate sequence.
"""

from __future__ import annotations

import numpy as np

from fourier_curve_fitter.models.coefficients import AxisCoefficients

from .parametrize import TWO_PI


def periodic_integral(t: np.ndarray, f: np.ndarray, *, period: float = TWO_PI) -> np.ndarray:
    """Approximate the integral of a periodic function over one period.

    Parameters
    ----------
    t:
        Sample times, shape ``(N,)``, in path order.
    f:
        Function values, shape ``(..., N)``. Leading axes are integrated
        independently.
    period:
        Period of the function.

    Returns
    -------
    ndarray or float
        Integral per leading index.

    Notes
    -----
    Trapezoids are taken between consecutive samples plus the closing one
    from the last sample back to the first. Every time step is reduced
    ``mod period`` so the closing step ``t[0] - t[-1]`` (negative) becomes the
    positive remainder of the loop.
    """
    t = np.asarray(t, dtype=np.float64)
    f = np.asarray(f, dtype=np.float64)
    if t.ndim != 1:
        raise ValueError(f"t must be 1D, got shape {t.shape}")
    if f.shape[-1:] != t.shape:
        raise ValueError(f"f must end with an axis of length {t.size}, got shape {f.shape}")

    dt = np.mod(np.roll(t, -1) - t, period)
    f_mid = 0.5 * (f + np.roll(f, -1, axis=-1))
    return np.sum(f_mid * dt, axis=-1)


def axis_coefficients(t: np.ndarray, values: np.ndarray, n_harmonics: int) -> AxisCoefficients:
    """Fourier coefficients of one coordinate sampled on time axis ``t``.

    Parameters
    ----------
    t:
        Time axis, shape ``(N,)``, spanning one ``2*pi`` period.
    values:
        Coordinate values, shape ``(N,)``.
    n_harmonics:
        Number of harmonics ``n``; orders ``1..n`` are computed.
    """
    t = np.asarray(t, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if values.shape != t.shape:
        raise ValueError(f"values must match t shape {t.shape}, got {values.shape}")

    n = int(n_harmonics)
    if n < 0:
        raise ValueError(f"n_harmonics must be >= 0, got {n}")

    const = float(periodic_integral(t, values)) / TWO_PI

    kt = np.arange(1, n + 1, dtype=np.float64)[:, None] * t  # (n, N)
    cos = periodic_integral(t, values * np.cos(kt)) / np.pi
    sin = periodic_integral(t, values * np.sin(kt)) / np.pi

    return AxisCoefficients(const=const, cos=cos, sin=sin)
