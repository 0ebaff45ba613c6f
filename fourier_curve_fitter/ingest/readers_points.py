from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from fourier_curve_fitter.errors import InvalidInput
from fourier_curve_fitter.models.samples import CurveSamples


@dataclass(frozen=True)
class PointsReaderConfig:
    """
    Options for :class:`PointsReader`.

    Attributes
    ----------
    x_col, y_col:
        Column names holding the coordinates. Ignored for headerless files,
        where the first two columns are used.
    header:
        True if the first line is a header. None auto-detects (a first line
        that does not parse as numbers is a header).
    drop_nonfinite:
        Drop rows with NaN/Inf (reported in warnings) instead of rejecting the file.
    """
    x_col: str = "x"
    y_col: str = "y"
    header: Optional[bool] = None
    drop_nonfinite: bool = False


class PointsReader:
    """
    Reader for point files: CSV or whitespace-separated text, one point per line.

    Contract:
      - Points are taken in file order; the path is closed implicitly.
      - Lines starting with '#' are comments.
      - Non-numeric values are an error, never silently coerced.
    """

    def __init__(self, config: Optional[PointsReaderConfig] = None) -> None:
        self.config = config or PointsReaderConfig()

    def read(self, file_path: Path) -> CurveSamples:
        fp = Path(file_path).expanduser().resolve()
        if not fp.is_file():
            raise FileNotFoundError(f"Points file not found: {fp}")

        cfg = self.config
        header = cfg.header
        if header is None:
            header = self._sniff_header(fp)

        sep = "," if self._is_csv(fp) else r"\s+"
        try:
            df = pd.read_csv(
                fp,
                sep=sep,
                comment="#",
                header=0 if header else None,
                skip_blank_lines=True,
                float_precision="round_trip",
            )
        except pd.errors.EmptyDataError as e:
            raise InvalidInput(f"{fp.name}: no point rows found") from e
        except pd.errors.ParserError as e:
            raise InvalidInput(f"{fp.name}: malformed points table: {e}") from e
        if df.shape[1] < 2:
            raise InvalidInput(f"{fp.name}: need at least 2 columns, got {df.shape[1]}")

        if header:
            missing = [c for c in (cfg.x_col, cfg.y_col) if c not in df.columns]
            if missing:
                raise KeyError(f"{fp.name}: missing coordinate columns {missing}; found {list(df.columns)}")
            xy = df[[cfg.x_col, cfg.y_col]]
        else:
            xy = df.iloc[:, :2]

        try:
            xy = xy.astype(np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"{fp.name}: non-numeric coordinate values: {e}") from e

        warnings = []
        if cfg.drop_nonfinite:
            xy, n_dropped = drop_nonfinite_points(xy)
            if n_dropped:
                warnings.append(f"{fp.name}: dropped {n_dropped} row(s) with NaN/Inf coordinates.")

        return CurveSamples.from_xy(
            xy.iloc[:, 0].to_numpy(),
            xy.iloc[:, 1].to_numpy(),
            source_path=fp,
            warnings=warnings,
        )

    @staticmethod
    def _is_csv(fp: Path) -> bool:
        return fp.suffix.lower() == ".csv"

    @staticmethod
    def _sniff_header(fp: Path) -> bool:
        with fp.open("r", encoding="utf-8") as f:
            for line in f:
                s = line.strip()
                if not s or s.startswith("#"):
                    continue
                tokens = [t for t in s.replace(",", " ").split() if t]
                try:
                    [float(t) for t in tokens]
                except ValueError:
                    return True
                return False
        return False


def drop_nonfinite_points(df: pd.DataFrame) -> tuple[pd.DataFrame, int]:
    """Drop rows where any coordinate is NaN/Inf. Returns (clean_df, n_dropped)."""
    arr = df.to_numpy(dtype=np.float64)
    ok = np.all(np.isfinite(arr), axis=1)
    n_dropped = int((~ok).sum())
    if n_dropped == 0:
        return df, 0
    return df.loc[ok].reset_index(drop=True), n_dropped


def read_points(path: Path, *, drop_nonfinite: bool = False, x_col: str = "x", y_col: str = "y") -> CurveSamples:
    """Convenience wrapper around :class:`PointsReader`."""
    return PointsReader(PointsReaderConfig(x_col=x_col, y_col=y_col, drop_nonfinite=drop_nonfinite)).read(path)
