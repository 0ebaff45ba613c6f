"""Fit profile -- bundles every parameter that affects fitting and export.

A FitProfile groups the harmonic count and the export settings into one
frozen dataclass.  It can be:

- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
- Loaded from a JSON file for the command-line front end
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Union

from fourier_curve_fitter.errors import InvalidInput

DEFAULT_N_HARMONICS = 30
DEFAULT_DECIMALS = 4

EXPORT_STYLES = ("plain", "latex")


@dataclass(frozen=True)
class FitProfile:
    """Frozen configuration for fitting and export.

    Fields
    ------
    n_harmonics : int
        Number of harmonics n computed per axis (>= 1).
    decimals : int
        Fractional digits kept when rounding exported values (>= 0).
    export_style : str
        ``"plain"`` for ``(…,…)`` / ``[…]`` text, ``"latex"`` for the
        Desmos-pasteable ``\\left(…\\right)`` form.
    drop_nonfinite : bool
        Ingest only: drop rows with NaN/Inf instead of rejecting the file.
    """

    n_harmonics: int = DEFAULT_N_HARMONICS
    decimals: int = DEFAULT_DECIMALS
    export_style: str = "plain"
    drop_nonfinite: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.n_harmonics, bool) or int(self.n_harmonics) != self.n_harmonics or self.n_harmonics < 1:
            raise InvalidInput(f"n_harmonics must be a positive integer, got {self.n_harmonics!r}")
        if int(self.decimals) != self.decimals or self.decimals < 0:
            raise InvalidInput(f"decimals must be a non-negative integer, got {self.decimals!r}")
        if self.export_style not in EXPORT_STYLES:
            raise InvalidInput(f"export_style must be one of {EXPORT_STYLES}, got {self.export_style!r}")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FitProfile:
        """Reconstruct from a dict (e.g. loaded from JSON). Unknown keys are rejected."""
        d = dict(d)  # shallow copy
        unknown = sorted(set(d) - set(cls.__dataclass_fields__))
        if unknown:
            raise InvalidInput(f"Unknown FitProfile keys: {unknown}")
        return cls(**d)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> FitProfile:
        p = Path(path).expanduser()
        if not p.is_file():
            raise FileNotFoundError(f"Profile file not found: {p}")
        with p.open("r", encoding="utf-8") as fh:
            return cls.from_dict(json.load(fh))
