"""Curve analysis package.

Design principle:
  - Ingest produces validated :class:`~fourier_curve_fitter.models.samples.CurveSamples`.
  - Analysis consumes CurveSamples and produces an immutable
    :class:`~fourier_curve_fitter.analysis.series.FourierSeries`.

Data flows one way: samples -> arc-length time -> coefficients -> (evaluator | export).
"""

from .parametrize import TWO_PI, TimeAxis, arc_length_time
from .fourier import axis_coefficients, periodic_integral
from .evaluate import CurveFunction, curve_function, sample_curve, series_function
from .series import FourierSeries, fit_fourier_series

__all__ = [
    "TWO_PI",
    "TimeAxis",
    "arc_length_time",
    "axis_coefficients",
    "periodic_integral",
    "CurveFunction",
    "curve_function",
    "sample_curve",
    "series_function",
    "FourierSeries",
    "fit_fourier_series",
]
