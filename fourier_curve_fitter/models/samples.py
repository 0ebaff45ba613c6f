from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np

from fourier_curve_fitter.errors import InvalidInput


@dataclass(frozen=True)
class CurveSamples:
    """
    Ordered sample points of a closed polygonal path.

    Point i connects to point i+1 and the last point connects back to point 0.

    Notes
    - ``x`` and ``y`` are float64 and read-only.
    - The closing segment is implicit: do not repeat the first point at the end
      (if you do, it is accepted and reported in ``warnings``).
    """
    x: np.ndarray
    y: np.ndarray
    warnings: Tuple[str, ...] = ()
    source_path: Optional[Path] = None

    @classmethod
    def from_xy(
        cls,
        x: Sequence[float],
        y: Sequence[float],
        *,
        source_path: Optional[Path] = None,
        warnings: Sequence[str] = (),
    ) -> CurveSamples:
        """Validate and freeze two coordinate sequences.

        Raises
        ------
        InvalidInput
            If the sequences are not 1D, differ in length, hold fewer than 2
            points, or contain NaN/Inf.
        """
        try:
            xa = np.array(x, dtype=np.float64)
            ya = np.array(y, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Sample coordinates must be real numbers: {e}") from e

        if xa.ndim != 1 or ya.ndim != 1:
            raise InvalidInput(f"X and Y must be 1D, got shapes {xa.shape} and {ya.shape}")
        if xa.size != ya.size:
            raise InvalidInput(f"X and Y must have equal length, got {xa.size} and {ya.size}")
        if xa.size < 2:
            raise InvalidInput(f"Need at least 2 sample points, got {xa.size}")

        bad = ~(np.isfinite(xa) & np.isfinite(ya))
        if np.any(bad):
            idx = np.where(bad)[0]
            raise InvalidInput(f"Non-finite sample values at indices: {idx[:20].tolist()}")

        out = list(warnings)

        # Zero-length segments, including the closing one.
        same = (xa == np.roll(xa, -1)) & (ya == np.roll(ya, -1))
        if same[-1]:
            out.append("Last point repeats the first point; the closing segment has zero length.")
        dup = np.where(same[:-1])[0]
        if dup.size:
            out.append(
                f"{dup.size} consecutive duplicate point(s) (time is not strictly increasing) "
                f"at indices: {dup[:20].tolist()}"
            )

        xa.setflags(write=False)
        ya.setflags(write=False)
        return cls(x=xa, y=ya, warnings=tuple(out), source_path=source_path)

    @property
    def n_points(self) -> int:
        return int(self.x.size)
