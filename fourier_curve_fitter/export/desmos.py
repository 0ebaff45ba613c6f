r"""Text exports of a fitted curve for the Desmos graphing calculator.

Two formats are produced from the same truncated, rounded amplitude/phase
terms (x axis always before y):

Expanded formula
    ``(X-TERMS,Y-TERMS)`` where each axis reads
    ``c+A_1\cos(2π·1t+φ_1)+A_2\cos(2π·2t+φ_2)+...``.
    The expression is parametrised over ``t in [0, 1]``.

Flat list
    ``[c_x,A_x1..A_xn,φ_x1..φ_xn,c_y,A_y1..A_yn,φ_y1..φ_yn]``, i.e.
    ``2*(2n+1)`` numbers, reconstructed on the Desmos side by
    :data:`DESMOS_LIST_EQUATION`.

With ``style="latex"`` the same content is wrapped as Desmos LaTeX
(``\left(...\right)``, ``\cos\left(2\pi\cdot k t+φ\right)``,
``\left[...\right]``) so it can be pasted into an expression line directly.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Tuple, Union

from fourier_curve_fitter.models.coefficients import AxisCoefficients, CurveCoefficients
from fourier_curve_fitter.models.profile import DEFAULT_DECIMALS, EXPORT_STYLES

from .polar import PolarTerms, format_number, to_polar

# Paste into Desmos next to a list F_S produced by desmos_list(..., style="latex").
DESMOS_LIST_EQUATION = (
    r"D_{raw}\left(F_{S}\right)=\left(F_{S}\left[1\right]+\operatorname{total}\left(F_{S}\left[2...\frac{\operatorname{length}\left(F_{S}\right)+2}{4}\right]"
    r"\cos\left(\left[1...\frac{\operatorname{length}\left(F_{S}\right)-2}{4}\right]t+F_{S}\left[\frac{\operatorname{length}\left(F_{S}\right)-2}{4}+2...\frac{\operatorname{length}\left(F_{S}\right)}{2}\right]\right)\right),"
    r"F_{S}\left[\frac{\operatorname{length}\left(F_{S}\right)+2}{2}\right]+\operatorname{total}\left(F_{S}\left[\frac{\operatorname{length}\left(F_{S}\right)+4}{2}...\frac{3\operatorname{length}\left(F_{S}\right)+2}{4}\right]"
    r"\cos\left(\left[1...\frac{\operatorname{length}\left(F_{S}\right)-2}{4}\right]t+F_{S}\left[\frac{3\operatorname{length}\left(F_{S}\right)+6}{4}...\operatorname{length}\left(F_{S}\right)\right]\right)\right)\right)"
)

_NUM = r"-?\d+(?:\.\d+)?(?:e[-+]?\d+)?"

_STYLES = {
    "plain": {
        "pair": ("(", ")"),
        "list": ("[", "]"),
        "term": "{a}\\cos(2π·{k}t+{p})",
        "term_re": rf"\+({_NUM})\\cos\(2π·(\d+)t\+({_NUM})\)",
    },
    "latex": {
        "pair": ("\\left(", "\\right)"),
        "list": ("\\left[", "\\right]"),
        "term": "{a}\\cos\\left(2\\pi\\cdot{k}t+{p}\\right)",
        "term_re": rf"\+({_NUM})\\cos\\left\(2\\pi\\cdot(\d+)t\+({_NUM})\\right\)",
    },
}

if TYPE_CHECKING:
    from fourier_curve_fitter.analysis.series import FourierSeries

CoefficientSource = Union[CurveCoefficients, "FourierSeries"]


def _coefficients(source) -> CurveCoefficients:
    if isinstance(source, CurveCoefficients):
        return source
    coeffs = getattr(source, "coeffs", None)
    if not isinstance(coeffs, CurveCoefficients):
        raise TypeError(f"Expected FourierSeries or CurveCoefficients, got {type(source).__name__}")
    return coeffs


def _style(style: str) -> dict:
    if style not in EXPORT_STYLES:
        raise ValueError(f"style must be one of {EXPORT_STYLES}, got {style!r}")
    return _STYLES[style]


def _unwrap(text: str, opening: str, closing: str) -> str:
    s = text.strip()
    if not (s.startswith(opening) and s.endswith(closing)):
        raise ValueError(f"Expected text wrapped in {opening!r}...{closing!r}: {s[:60]!r}")
    return s[len(opening) : len(s) - len(closing)]


def _detect_style(text: str) -> str:
    return "latex" if text.lstrip().startswith("\\left") else "plain"


# ----------------------------------------------------------------------
# Expanded formula
# ----------------------------------------------------------------------

def expanded_axis(coeffs: AxisCoefficients, terms: int = -1, *, decimals: int = DEFAULT_DECIMALS, style: str = "plain") -> str:
    """One axis of the expanded formula: ``c+A_1\\cos(...)+...``."""
    fmt = _style(style)["term"]
    polar = to_polar(coeffs, terms, decimals=decimals)
    parts = [format_number(polar.const, decimals)]
    for k, (a, p) in enumerate(zip(polar.amplitude, polar.phase), start=1):
        parts.append(fmt.format(a=format_number(a, decimals), k=k, p=format_number(p, decimals)))
    return "+".join(parts)


def desmos_expanded(source: CoefficientSource, terms: int = -1, *, decimals: int = DEFAULT_DECIMALS, style: str = "plain") -> str:
    """Expanded parametric formula ``(x-terms,y-terms)`` for the first ``terms`` harmonics."""
    coeffs = _coefficients(source)
    opening, closing = _style(style)["pair"]
    x = expanded_axis(coeffs.x, terms, decimals=decimals, style=style)
    y = expanded_axis(coeffs.y, terms, decimals=decimals, style=style)
    return f"{opening}{x},{y}{closing}"


def _parse_expanded_axis(text: str, style: str) -> PolarTerms:
    m = re.match(_NUM, text)
    if m is None:
        raise ValueError(f"Axis expression must start with the constant term: {text[:60]!r}")
    const = float(m.group(0))
    rest = text[m.end():]

    amplitude: List[float] = []
    phase: List[float] = []
    pos = 0
    term_re = re.compile(_style(style)["term_re"])
    while pos < len(rest):
        tm = term_re.match(rest, pos)
        if tm is None:
            raise ValueError(f"Malformed term at {rest[pos:pos + 60]!r}")
        k = int(tm.group(2))
        if k != len(amplitude) + 1:
            raise ValueError(f"Harmonic orders must run 1..n in sequence, got {k} after {len(amplitude)}")
        amplitude.append(float(tm.group(1)))
        phase.append(float(tm.group(3)))
        pos = tm.end()

    return PolarTerms.from_flat([const, *amplitude, *phase])


def parse_desmos_expanded(text: str) -> Tuple[PolarTerms, PolarTerms]:
    """Parse :func:`desmos_expanded` output back into ``(x_terms, y_terms)``."""
    style = _detect_style(text)
    opening, closing = _STYLES[style]["pair"]
    body = _unwrap(text, opening, closing)
    axes = body.split(",")
    if len(axes) != 2:
        raise ValueError(f"Expected exactly two comma-separated axis expressions, got {len(axes)}")
    return _parse_expanded_axis(axes[0], style), _parse_expanded_axis(axes[1], style)


# ----------------------------------------------------------------------
# Flat list
# ----------------------------------------------------------------------

def desmos_list_values(source: CoefficientSource, terms: int = -1, *, decimals: int = DEFAULT_DECIMALS) -> List[float]:
    """Flat ``[x-axis list, y-axis list]`` of rounded values, ``2*(2n+1)`` entries."""
    coeffs = _coefficients(source)
    x = to_polar(coeffs.x, terms, decimals=decimals)
    y = to_polar(coeffs.y, terms, decimals=decimals)
    return x.to_flat() + y.to_flat()


def desmos_list(source: CoefficientSource, terms: int = -1, *, decimals: int = DEFAULT_DECIMALS, style: str = "plain") -> str:
    """Flat coefficient list string for the first ``terms`` harmonics."""
    opening, closing = _style(style)["list"]
    values = desmos_list_values(source, terms, decimals=decimals)
    return opening + ",".join(format_number(v, decimals) for v in values) + closing


def parse_desmos_list(text: str) -> Tuple[PolarTerms, PolarTerms]:
    """Parse :func:`desmos_list` output back into ``(x_terms, y_terms)``."""
    style = _detect_style(text)
    opening, closing = _STYLES[style]["list"]
    body = _unwrap(text, opening, closing)
    try:
        values = [float(v) for v in body.split(",")]
    except ValueError as e:
        raise ValueError(f"Flat list must hold comma-separated numbers: {e}") from e

    if len(values) < 2 or len(values) % 4 != 2:
        raise ValueError(f"Flat list must hold 2*(2n+1) numbers, got {len(values)}")
    half = len(values) // 2
    return PolarTerms.from_flat(values[:half]), PolarTerms.from_flat(values[half:])
