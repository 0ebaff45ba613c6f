from .polar import PolarTerms, format_number, round_half_up, to_polar
from .desmos import (
    DESMOS_LIST_EQUATION,
    desmos_expanded,
    desmos_list,
    desmos_list_values,
    expanded_axis,
    parse_desmos_expanded,
    parse_desmos_list,
)
from .tables import coefficient_table, read_coefficients_csv, write_coefficients_csv

__all__ = [
    "PolarTerms",
    "format_number",
    "round_half_up",
    "to_polar",
    "DESMOS_LIST_EQUATION",
    "desmos_expanded",
    "desmos_list",
    "desmos_list_values",
    "expanded_axis",
    "parse_desmos_expanded",
    "parse_desmos_list",
    "coefficient_table",
    "read_coefficients_csv",
    "write_coefficients_csv",
]
