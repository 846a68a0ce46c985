"""
Tolerance formatting for dimension labels.

Values are printed as given: integral values drop their decimal point,
everything else uses the shortest representation that round-trips.
"""

from __future__ import annotations

from ..parts import DimTol


def format_number(value: float) -> str:
    """Format a number without forced decimal places (30.0 -> "30", 0.15 -> "0.15")."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_tolerance(
    nominal: float | None,
    plus: float | None = 0,
    minus: float | None = 0,
    unit: str = "",
) -> str:
    """
    Format a nominal value with its tolerance band.

    - no tolerance:        "9.8mm"
    - symmetric tolerance: "9.8mm ±0.15mm"
    - asymmetric:          "9.8mm +0.2mm -0.1mm"

    Returns an empty string when ``nominal`` is None.
    """
    if nominal is None:
        return ""

    p = plus or 0
    m = minus or 0
    base = f"{format_number(nominal)}{unit}"

    if p == 0 and m == 0:
        return base
    if p == m:
        return f"{base} ±{format_number(p)}{unit}"
    return f"{base} +{format_number(p)}{unit} -{format_number(m)}{unit}"


def format_dimtol(dim: DimTol | None, unit: str = "") -> str:
    """format_tolerance() for a DimTol (empty string for None)."""
    if dim is None:
        return ""
    return format_tolerance(dim.nominal, dim.tol_plus, dim.tol_minus, unit)
