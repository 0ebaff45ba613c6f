"""Fourier-series fit of a closed 2D curve.

:class:`FourierSeries` is an immutable value: the arc-length time axis and
both coefficient sets are computed once, when the series is built, and are
read-only afterwards. Fitting new points means building a new series from the
full sample sequence.

Example
-------
>>> import numpy as np
>>> theta = np.linspace(0, 2 * np.pi, 64, endpoint=False)
>>> fs = FourierSeries.fit(np.cos(theta), np.sin(theta), n_harmonics=3)
>>> round(float(fs.get_coeffs().x.cos[0]), 6)
1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from fourier_curve_fitter.models.coefficients import CurveCoefficients, resolve_terms
from fourier_curve_fitter.models.profile import DEFAULT_N_HARMONICS, FitProfile
from fourier_curve_fitter.models.samples import CurveSamples

from .evaluate import ArrayLike, CurveFunction, curve_function, sample_curve
from .fourier import axis_coefficients
from .parametrize import TimeAxis, arc_length_time


@dataclass(frozen=True)
class FourierSeries:
    """Truncated Fourier series approximating a closed sample path.

    Attributes
    ----------
    samples:
        Validated input points.
    time:
        Arc-length time axis shared by both coordinates.
    coeffs:
        Coefficients for harmonics ``1..n_harmonics`` of x(t) and y(t).
    n_harmonics:
        Number of harmonics computed; the default for every ``terms=-1`` query.
    warnings:
        Non-fatal diagnostics collected while fitting.
    """

    samples: CurveSamples
    time: TimeAxis
    coeffs: CurveCoefficients
    n_harmonics: int
    warnings: Tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def fit(
        cls,
        x: Sequence[float],
        y: Sequence[float],
        n_harmonics: int = DEFAULT_N_HARMONICS,
    ) -> FourierSeries:
        """Fit ``n_harmonics`` harmonics to the closed path through ``(x[i], y[i])``."""
        return cls.from_samples(CurveSamples.from_xy(x, y), profile=FitProfile(n_harmonics=n_harmonics))

    @classmethod
    def from_samples(cls, samples: CurveSamples, *, profile: Optional[FitProfile] = None) -> FourierSeries:
        if profile is None:
            profile = FitProfile()
        n = int(profile.n_harmonics)

        time = arc_length_time(samples)
        coeffs = CurveCoefficients(
            x=axis_coefficients(time.t, samples.x, n),
            y=axis_coefficients(time.t, samples.y, n),
        )

        warnings = list(samples.warnings)
        if samples.n_points < 2 * n + 1:
            warnings.append(
                f"Only {samples.n_points} samples for {n} harmonics; "
                f"orders above {(samples.n_points - 1) // 2} alias lower ones."
            )

        return cls(
            samples=samples,
            time=time,
            coeffs=coeffs,
            n_harmonics=n,
            warnings=tuple(warnings),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def resolve_terms(self, terms: int = -1) -> int:
        return resolve_terms(terms, self.n_harmonics)

    def get_coeffs(self, terms: int = -1) -> CurveCoefficients:
        """Coefficients of the first ``terms`` harmonics per axis (``-1``: all)."""
        return self.coeffs.truncate(terms)

    def get_func(self, terms: int = -1) -> CurveFunction:
        """Coordinate functions ``x(t)``, ``y(t)`` using the first ``terms`` harmonics."""
        return curve_function(self.coeffs, terms)

    def evaluate(self, t: ArrayLike, terms: int = -1) -> Tuple[ArrayLike, ArrayLike]:
        return self.get_func(terms)(t)

    def sample_curve(self, terms: int = -1, *, n_points: int = 126) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return sample_curve(self.coeffs, terms, n_points=n_points)


def fit_fourier_series(
    x: Sequence[float],
    y: Sequence[float],
    *,
    n_harmonics: int = DEFAULT_N_HARMONICS,
) -> FourierSeries:
    """Functional alias for :meth:`FourierSeries.fit`."""
    return FourierSeries.fit(x, y, n_harmonics=n_harmonics)
