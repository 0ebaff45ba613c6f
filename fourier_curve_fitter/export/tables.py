"""Tabular export of fitted coefficients.

The table has one row per harmonic order, order 0 carrying the constant terms
in the cosine columns. Values are stored at full precision; polar columns
(amplitude/phase) are NaN for order 0.

CSV files written by :func:`write_coefficients_csv` start with ``# key: value``
provenance lines, which :func:`read_coefficients_csv` skips.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import pandas as pd

from fourier_curve_fitter.models.coefficients import AxisCoefficients, CurveCoefficients

COLUMNS = (
    "order",
    "x_cos", "x_sin", "y_cos", "y_sin",
    "x_amplitude", "x_phase", "y_amplitude", "y_phase",
)


def _axis_columns(c: AxisCoefficients, prefix: str) -> Dict[str, np.ndarray]:
    amp = np.hypot(c.cos, c.sin)
    phase = -np.arctan2(c.sin, c.cos)
    return {
        f"{prefix}_cos": np.concatenate([[c.const], c.cos]),
        f"{prefix}_sin": np.concatenate([[0.0], c.sin]),
        f"{prefix}_amplitude": np.concatenate([[np.nan], amp]),
        f"{prefix}_phase": np.concatenate([[np.nan], phase]),
    }


def coefficient_table(source, terms: int = -1) -> pd.DataFrame:
    """Coefficients of ``source`` (FourierSeries or CurveCoefficients) as a DataFrame."""
    coeffs = source if isinstance(source, CurveCoefficients) else source.get_coeffs(-1)
    coeffs = coeffs.truncate(terms)

    cols: Dict[str, Any] = {"order": np.arange(coeffs.n_terms + 1, dtype=int)}
    cols.update(_axis_columns(coeffs.x, "x"))
    cols.update(_axis_columns(coeffs.y, "y"))
    return pd.DataFrame(cols, columns=list(COLUMNS))


def metadata_dict(series, terms: int = -1) -> Dict[str, Any]:
    """Provenance of a fitted series as a flat dictionary."""
    d: Dict[str, Any] = {
        "fit_timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "fit_n_harmonics": series.n_harmonics,
        "fit_terms": series.resolve_terms(terms),
        "fit_n_points": series.samples.n_points,
        "fit_perimeter": f"{series.time.perimeter:.17g}",
    }
    if series.samples.source_path is not None:
        d["fit_source_path"] = str(series.samples.source_path)
    return d


def write_coefficients_csv(
    series,
    path: Union[str, Path],
    terms: int = -1,
    *,
    extra: Optional[Dict[str, Any]] = None,
) -> Path:
    """Write the coefficient table with a ``# key: value`` provenance header."""
    p = Path(path).expanduser()
    meta = metadata_dict(series, terms)
    if extra:
        for k, v in extra.items():
            meta[f"fit_extra_{k}"] = v

    df = coefficient_table(series, terms)
    with p.open("w", encoding="utf-8", newline="") as f:
        for k, v in meta.items():
            f.write(f"# {k}: {v}\n")
        df.to_csv(f, index=False, float_format="%.17g")
    return p


def read_coefficients_csv(path: Union[str, Path]) -> CurveCoefficients:
    """Load coefficients written by :func:`write_coefficients_csv`."""
    p = Path(path).expanduser()
    if not p.is_file():
        raise FileNotFoundError(f"Coefficient file not found: {p}")
    df = pd.read_csv(p, comment="#", float_precision="round_trip")

    missing = [c for c in ("order", "x_cos", "x_sin", "y_cos", "y_sin") if c not in df.columns]
    if missing:
        raise KeyError(f"Missing required columns in {p.name}: {missing}")

    df = df.sort_values("order")
    orders = df["order"].to_numpy(dtype=int)
    if orders.size == 0 or not np.array_equal(orders, np.arange(orders.size)):
        raise ValueError(f"{p.name}: orders must run 0..n without gaps, got {orders[:20].tolist()}")

    def axis(prefix: str) -> AxisCoefficients:
        cos = df[f"{prefix}_cos"].to_numpy(dtype=np.float64)
        sin = df[f"{prefix}_sin"].to_numpy(dtype=np.float64)
        return AxisCoefficients(const=cos[0], cos=cos[1:], sin=sin[1:])

    return CurveCoefficients(x=axis("x"), y=axis("y"))
