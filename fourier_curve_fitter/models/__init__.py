from .coefficients import AxisCoefficients, CurveCoefficients, resolve_terms
from .profile import DEFAULT_DECIMALS, DEFAULT_N_HARMONICS, FitProfile
from .samples import CurveSamples

__all__ = [
    "AxisCoefficients",
    "CurveCoefficients",
    "resolve_terms",
    "DEFAULT_DECIMALS",
    "DEFAULT_N_HARMONICS",
    "FitProfile",
    "CurveSamples",
]
