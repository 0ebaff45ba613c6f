"""Fourier Curve Fitter -- truncated Fourier series for closed 2D curves.

Given an ordered sequence of sample points approximating a closed loop, this
package computes trigonometric-series coefficients for the coordinate
functions x(t) and y(t), evaluates the reconstructed curve, and serializes the
coefficients for the Desmos graphing calculator.

This package provides tools for:
- Reading point files and generating synthetic closed curves
- Re-parametrising samples by arc length onto a 2*pi-periodic time axis
- Computing per-harmonic coefficients by periodic trapezoidal integration
- Evaluating truncated series as callable x(t), y(t)
- Exporting amplitude/phase terms as an expanded formula or a flat list

Key principles:
- Immutable results: a fit is computed once and never mutated
- Truncation is a view: fewer terms never trigger recomputation
- Rounding only at export time: stored coefficients keep full precision

Main subpackages:
- analysis: Time parametrization, integration, coefficient engine, evaluator
- export: Polar form, Desmos text formats, coefficient tables
- ingest: Point-file readers and synthetic curves
- models: Data models (CurveSamples, CurveCoefficients, FitProfile)
"""

from .errors import DegenerateGeometry, FourierFitError, InvalidInput, TermCountOutOfRange
from .analysis.series import FourierSeries, fit_fourier_series

__version__ = "0.1.0"

__all__ = [
    "DegenerateGeometry",
    "FourierFitError",
    "InvalidInput",
    "TermCountOutOfRange",
    "FourierSeries",
    "fit_fourier_series",
]
