"""Tests for point-file ingest and synthetic curves."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from fourier_curve_fitter.errors import InvalidInput
from fourier_curve_fitter.ingest.readers_points import PointsReader, PointsReaderConfig, read_points
from fourier_curve_fitter.ingest.synthetic import circle_points, demo_curve_points, polygon_points
from fourier_curve_fitter.models.samples import CurveSamples


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


# -----------------------------------------------------------------------
# PointsReader
# -----------------------------------------------------------------------


def test_read_csv_with_header(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.csv", "# square\nx,y\n0,0\n1,0\n1,1\n0,1\n")
    s = read_points(p)
    assert s.n_points == 4
    np.testing.assert_array_equal(s.x, [0, 1, 1, 0])
    np.testing.assert_array_equal(s.y, [0, 0, 1, 1])
    assert s.source_path == p.resolve()
    assert s.warnings == ()


def test_read_whitespace_without_header(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.txt", "0.5 1.5\n  2.0\t-1.0\n\n3 4\n")
    s = read_points(p)
    np.testing.assert_array_equal(s.x, [0.5, 2.0, 3.0])
    np.testing.assert_array_equal(s.y, [1.5, -1.0, 4.0])


def test_read_custom_columns(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.csv", "id,u,v\n1,0,5\n2,3,5\n3,3,9\n")
    s = PointsReader(PointsReaderConfig(x_col="u", y_col="v")).read(p)
    np.testing.assert_array_equal(s.x, [0, 3, 3])
    np.testing.assert_array_equal(s.y, [5, 5, 9])


def test_read_missing_columns(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.csv", "a,b\n0,0\n1,1\n")
    with pytest.raises(KeyError):
        read_points(p)


def test_read_non_numeric(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.csv", "x,y\n0,a\n1,2\n")
    with pytest.raises(InvalidInput):
        read_points(p)


def test_read_nonfinite_rejected_or_dropped(tmp_path: Path) -> None:
    p = _write(tmp_path, "pts.csv", "x,y\n0,0\nnan,1\n1,0\n1,1\n")
    with pytest.raises(InvalidInput):
        read_points(p)

    s = read_points(p, drop_nonfinite=True)
    assert s.n_points == 3
    assert any("dropped 1 row" in w for w in s.warnings)


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "missing.csv")


def test_read_too_few_points(tmp_path: Path) -> None:
    p = _write(tmp_path, "one.csv", "x,y\n1,2\n")
    with pytest.raises(InvalidInput):
        read_points(p)


@pytest.mark.parametrize("text", ["", "# only a comment\n\n"])
def test_read_empty_file(tmp_path: Path, text: str) -> None:
    p = _write(tmp_path, "empty.csv", text)
    with pytest.raises(InvalidInput, match="no point rows"):
        read_points(p)


def test_read_ragged_rows(tmp_path: Path) -> None:
    p = _write(tmp_path, "ragged.csv", "x,y\n0,0\n1,2,3,4\n2,2\n")
    with pytest.raises(InvalidInput, match="malformed"):
        read_points(p)


# -----------------------------------------------------------------------
# CurveSamples
# -----------------------------------------------------------------------


def test_samples_are_read_only_copies() -> None:
    x = np.array([0.0, 1.0, 1.0])
    s = CurveSamples.from_xy(x, [0.0, 0.0, 1.0])
    x[0] = 99.0
    assert s.x[0] == 0.0
    with pytest.raises(ValueError):
        s.x[1] = 5.0


def test_samples_closing_point_warning() -> None:
    s = CurveSamples.from_xy([0, 1, 1, 0], [0, 0, 1, 0])
    assert any("repeats the first point" in w for w in s.warnings)


# -----------------------------------------------------------------------
# Synthetic curves
# -----------------------------------------------------------------------


def test_circle_points() -> None:
    s = circle_points(8, radius=2.0, center=(1.0, 1.0))
    assert s.n_points == 8
    np.testing.assert_allclose(np.hypot(s.x - 1.0, s.y - 1.0), 2.0)
    assert s.x[0] == pytest.approx(3.0) and s.y[0] == pytest.approx(1.0)


def test_polygon_points() -> None:
    s = polygon_points([(0, 0), (2, 0), (2, 2)], points_per_edge=2)
    np.testing.assert_allclose(s.x, [0, 1, 2, 2, 2, 1])
    np.testing.assert_allclose(s.y, [0, 0, 0, 1, 2, 1])
    with pytest.raises(ValueError):
        polygon_points([(0, 0), (1, 1)], points_per_edge=0)


def test_demo_curve_points() -> None:
    s = demo_curve_points()
    assert s.n_points == int(np.ceil(2 * np.pi / 0.001))
    assert s.x[0] == pytest.approx(40.0)
    assert s.y[0] == pytest.approx(20.0)
    assert s.warnings == ()
