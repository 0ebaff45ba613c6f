"""Fit a Fourier series to a closed curve and print its Desmos exports.

Examples
--------
Fit the bundled demo curve and print both exports (30 terms)::

    python -m fourier_curve_fitter.scripts.fit_curve --demo

Fit points from a CSV file with columns ``x,y`` and print the flat list only::

    python -m fourier_curve_fitter.scripts.fit_curve points.csv --terms 10 --format list
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
import textwrap
from pathlib import Path
from typing import Optional, Sequence

from fourier_curve_fitter.analysis.series import FourierSeries
from fourier_curve_fitter.errors import FourierFitError
from fourier_curve_fitter.export.desmos import DESMOS_LIST_EQUATION, desmos_expanded, desmos_list
from fourier_curve_fitter.export.tables import coefficient_table, write_coefficients_csv
from fourier_curve_fitter.ingest.readers_points import read_points
from fourier_curve_fitter.ingest.synthetic import demo_curve_points
from fourier_curve_fitter.models.profile import EXPORT_STYLES, FitProfile

FORMATS = ("both", "expanded", "list", "table")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m fourier_curve_fitter.scripts.fit_curve",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Fit a truncated Fourier series to a closed 2D curve.

            Input points are read in file order (CSV with x,y columns, or
            whitespace-separated text); the last point connects back to the first.
            """
        ),
    )
    p.add_argument("points", nargs="?", default=None, help="Points file (.csv or whitespace-separated text)")
    p.add_argument("--demo", action="store_true", help="Use the bundled demo curve instead of a points file")
    p.add_argument("--profile", default=None, help="JSON file with FitProfile fields")
    p.add_argument("--n-harmonics", type=int, default=None, help="Harmonics to compute (default 30)")
    p.add_argument("--terms", type=int, default=-1, help="Terms to export, -1 for all computed (default -1)")
    p.add_argument("--decimals", type=int, default=None, help="Fractional digits in exports (default 4)")
    p.add_argument("--style", choices=EXPORT_STYLES, default=None, help="Export text style")
    p.add_argument("--format", choices=FORMATS, default="both", help="What to print (default both)")
    p.add_argument("--drop-nonfinite", action="store_true", help="Drop NaN/Inf rows instead of failing")
    p.add_argument("--out-csv", default=None, help="Also write the coefficient table to this CSV file")
    p.add_argument("--show-list-equation", action="store_true", help="Print the Desmos formula that consumes the flat list")
    return p


def _profile_from_args(ns: argparse.Namespace) -> FitProfile:
    profile = FitProfile.from_json(ns.profile) if ns.profile else FitProfile()
    overrides = {}
    if ns.n_harmonics is not None:
        overrides["n_harmonics"] = ns.n_harmonics
    if ns.decimals is not None:
        overrides["decimals"] = ns.decimals
    if ns.style is not None:
        overrides["export_style"] = ns.style
    if ns.drop_nonfinite:
        overrides["drop_nonfinite"] = True
    return dataclasses.replace(profile, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    ns = p.parse_args(list(argv) if argv is not None else None)

    if ns.demo == (ns.points is not None):
        p.error("give exactly one of: a points file, or --demo")

    try:
        profile = _profile_from_args(ns)
        if ns.demo:
            samples = demo_curve_points()
        else:
            samples = read_points(Path(ns.points), drop_nonfinite=profile.drop_nonfinite)
        fs = FourierSeries.from_samples(samples, profile=profile)
        terms = fs.resolve_terms(ns.terms)
    except (FourierFitError, FileNotFoundError, KeyError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for w in fs.warnings:
        print(f"WARNING: {w}", file=sys.stderr)

    fmt = ns.format
    if fmt in ("both", "expanded"):
        print(desmos_expanded(fs, terms, decimals=profile.decimals, style=profile.export_style))
    if fmt in ("both", "list"):
        print(desmos_list(fs, terms, decimals=profile.decimals, style=profile.export_style))
    if fmt == "table":
        print(coefficient_table(fs, terms).to_string(index=False))
    if ns.show_list_equation:
        print(DESMOS_LIST_EQUATION)

    if ns.out_csv:
        out = write_coefficients_csv(fs, ns.out_csv, terms, extra={"profile_" + k: v for k, v in profile.to_dict().items()})
        print(f"Wrote coefficient table: {out}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
