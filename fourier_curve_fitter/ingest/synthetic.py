"""Synthetic closed curves for demos and tests.

Functions
---------
circle_points
    Evenly spaced points on a circle.
polygon_points
    Points along the edges of a closed polygon.
demo_curve_points
    The bundled demo curve (a looped cardioid-like shape).
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from fourier_curve_fitter.models.samples import CurveSamples


def circle_points(
    n_points: int = 64,
    *,
    radius: float = 1.0,
    center: Tuple[float, float] = (0.0, 0.0),
) -> CurveSamples:
    """``n_points`` points at angles ``2*pi*i/n_points`` (counter-clockwise from +x)."""
    n_points = int(n_points)
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    theta = 2.0 * np.pi * np.arange(n_points) / n_points
    return CurveSamples.from_xy(
        center[0] + radius * np.cos(theta),
        center[1] + radius * np.sin(theta),
    )


def polygon_points(vertices: Sequence[Tuple[float, float]], points_per_edge: int = 1) -> CurveSamples:
    """Points along a closed polygon.

    Each edge ``v[i] -> v[i+1]`` (and the closing edge back to ``v[0]``) is
    split into ``points_per_edge`` equal steps; the end vertex of each edge
    starts the next one, so no point is repeated.
    """
    v = np.asarray(vertices, dtype=np.float64)
    if v.ndim != 2 or v.shape[1] != 2:
        raise ValueError(f"vertices must have shape (n, 2), got {v.shape}")
    m = int(points_per_edge)
    if m < 1:
        raise ValueError(f"points_per_edge must be >= 1, got {m}")

    frac = np.arange(m, dtype=np.float64) / m
    start = v
    end = np.roll(v, -1, axis=0)
    pts = start[:, None, :] + frac[None, :, None] * (end - start)[:, None, :]
    pts = pts.reshape(-1, 2)
    return CurveSamples.from_xy(pts[:, 0], pts[:, 1])


def demo_curve_points(step: float = 0.001) -> CurveSamples:
    """Sample ``x = 20 cos(s) cos^2(s/2) + 20 + sin(s)``, ``y = 20 sin(s) cos^2(s/2) + 20`` on ``[0, 2*pi)``."""
    step = float(step)
    if not step > 0:
        raise ValueError(f"step must be > 0, got {step}")
    s = np.arange(0.0, 2.0 * np.pi, step)
    c2 = np.cos(s / 2.0) ** 2
    return CurveSamples.from_xy(
        20.0 * np.cos(s) * c2 + 20.0 + np.sin(s),
        20.0 * np.sin(s) * c2 + 20.0,
    )
