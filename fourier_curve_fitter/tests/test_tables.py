"""Tests for the coefficient table and CSV export."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from fourier_curve_fitter import FourierSeries, TermCountOutOfRange
from fourier_curve_fitter.export.tables import (
    COLUMNS,
    coefficient_table,
    metadata_dict,
    read_coefficients_csv,
    write_coefficients_csv,
)
from fourier_curve_fitter.ingest.synthetic import demo_curve_points
from fourier_curve_fitter.models.profile import FitProfile


@pytest.fixture(scope="module")
def fs() -> FourierSeries:
    return FourierSeries.from_samples(demo_curve_points(step=0.02), profile=FitProfile(n_harmonics=8))


def test_table_layout(fs: FourierSeries) -> None:
    df = coefficient_table(fs)
    assert list(df.columns) == list(COLUMNS)
    assert len(df) == 9
    np.testing.assert_array_equal(df["order"].to_numpy(), np.arange(9))

    row0 = df.iloc[0]
    assert row0["x_cos"] == fs.coeffs.x.const
    assert row0["y_cos"] == fs.coeffs.y.const
    assert row0["x_sin"] == 0.0
    assert np.isnan(row0["x_amplitude"]) and np.isnan(row0["y_phase"])

    np.testing.assert_array_equal(df["x_cos"].to_numpy()[1:], fs.coeffs.x.cos)
    np.testing.assert_array_equal(df["y_sin"].to_numpy()[1:], fs.coeffs.y.sin)
    np.testing.assert_allclose(
        df["y_amplitude"].to_numpy()[1:], np.hypot(fs.coeffs.y.cos, fs.coeffs.y.sin)
    )


def test_table_truncation(fs: FourierSeries) -> None:
    assert len(coefficient_table(fs, 3)) == 4
    assert len(coefficient_table(fs.coeffs, 0)) == 1
    with pytest.raises(TermCountOutOfRange):
        coefficient_table(fs, 9)


def test_csv_round_trip(fs: FourierSeries, tmp_path: Path) -> None:
    path = write_coefficients_csv(fs, tmp_path / "coeffs.csv", extra={"note": "demo"})
    assert path.exists()

    header = [ln for ln in path.read_text(encoding="utf-8").splitlines() if ln.startswith("#")]
    assert "# fit_n_harmonics: 8" in header
    assert "# fit_terms: 8" in header
    assert "# fit_extra_note: demo" in header

    loaded = read_coefficients_csv(path)
    assert loaded.n_terms == 8
    np.testing.assert_array_equal(loaded.x.cos, fs.coeffs.x.cos)
    np.testing.assert_array_equal(loaded.y.sin, fs.coeffs.y.sin)
    assert loaded.x.const == fs.coeffs.x.const


def test_csv_truncated(fs: FourierSeries, tmp_path: Path) -> None:
    path = write_coefficients_csv(fs, tmp_path / "c3.csv", terms=3)
    loaded = read_coefficients_csv(path)
    assert loaded.n_terms == 3
    np.testing.assert_array_equal(loaded.x.sin, fs.get_coeffs(3).x.sin)


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_coefficients_csv(tmp_path / "nope.csv")


def test_read_rejects_gaps(tmp_path: Path) -> None:
    p = tmp_path / "gap.csv"
    pd.DataFrame(
        {"order": [0, 2], "x_cos": [0.0, 1.0], "x_sin": [0.0, 0.0], "y_cos": [0.0, 0.0], "y_sin": [0.0, 1.0]}
    ).to_csv(p, index=False)
    with pytest.raises(ValueError):
        read_coefficients_csv(p)


def test_metadata(fs: FourierSeries) -> None:
    d = metadata_dict(fs, 5)
    assert d["fit_terms"] == 5
    assert d["fit_n_points"] == fs.samples.n_points
    assert float(d["fit_perimeter"]) == fs.time.perimeter
    assert "fit_source_path" not in d
