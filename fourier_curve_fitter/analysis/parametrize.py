from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fourier_curve_fitter.errors import DegenerateGeometry
from fourier_curve_fitter.models.samples import CurveSamples

TWO_PI = 2.0 * np.pi


@dataclass(frozen=True)
class TimeAxis:
    """Arc-length time parametrization of a closed sample path.

    Attributes
    ----------
    t:
        Time per sample, shape ``(N,)``. ``t[0] == 0`` and ``t`` is
        non-decreasing; the closing segment back to sample 0 ends at ``2*pi``.
    perimeter:
        Total Euclidean length of the closed path, closing segment included.
    segment_lengths:
        Length of segment ``i -> i+1``, shape ``(N,)``; the last entry is the
        closing segment ``N-1 -> 0``.

    Notes
    -----
    Time follows arc length, not sample index, so dense sampling slows the
    curve down instead of biasing the fit.
    """

    t: np.ndarray
    perimeter: float
    segment_lengths: np.ndarray

    @property
    def period(self) -> float:
        """Implied period: last time value plus the scaled closing segment."""
        return float(self.t[-1] + self.segment_lengths[-1] * TWO_PI / self.perimeter)


def arc_length_time(samples: CurveSamples) -> TimeAxis:
    """Build the periodic time axis for ``samples``.

    Each sample gets its cumulative distance along the path (before the
    closing segment), rescaled by ``2*pi / perimeter``.

    Raises
    ------
    DegenerateGeometry
        If the perimeter is zero (all samples coincide).
    """
    x = samples.x
    y = samples.y

    seg = np.hypot(np.roll(x, -1) - x, np.roll(y, -1) - y)
    # Perimeter and times share one running sum so t[-1] never passes 2*pi.
    cum = np.cumsum(seg)
    perimeter = float(cum[-1])
    if not perimeter > 0.0:
        raise DegenerateGeometry(
            f"Total perimeter is zero: all {samples.n_points} sample points coincide at "
            f"({x[0]}, {y[0]})"
        )
    if not np.isfinite(perimeter):
        raise DegenerateGeometry(f"Total perimeter overflowed to {perimeter}")

    t = np.concatenate([[0.0], cum[:-1]]) * (TWO_PI / perimeter)
    # A zero-length closing segment puts t[-1] at 2*pi; rounding may overshoot it.
    t = np.minimum(t, TWO_PI)

    t.setflags(write=False)
    seg.setflags(write=False)
    return TimeAxis(t=t, perimeter=perimeter, segment_lengths=seg)
