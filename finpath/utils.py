"""General utilities for FinPath

Contents
--------
- Validation helpers (finite, non-negative, unit interval)
- Percentage conversions
- Reporting helpers (percent_change, format_currency)
- Matplotlib formatters (thousands_formatter)
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from .exceptions import InvalidInputError

__all__ = [
    # Validation
    "check_finite",
    "check_non_negative",
    "check_unit_interval",
    "check_all_finite",
    # Rates
    "percent_to_fraction",
    "fraction_to_percent",
    # Reporting
    "percent_change",
    "format_currency",
    # Matplotlib formatters
    "thousands_formatter",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_finite(name: str, value: float) -> float:
    """Return *value* as float, raising if it is not a finite number."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number (got {value!r}).")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number (got {value!r}).") from None
    if not math.isfinite(v):
        raise InvalidInputError(f"{name} must be finite (got {v}).")
    return v


def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative (got {value}).")


def check_unit_interval(name: str, value: float) -> None:
    """Raise if *value* lies outside [0, 1]."""
    if not 0.0 <= value <= 1.0:
        raise InvalidInputError(f"{name} must be within [0, 1] (got {value}).")


def check_all_finite(name: str, values: Iterable[float]) -> bool:
    """Return True when every value is finite."""
    arr = np.asarray(list(values), dtype=float)
    return bool(np.isfinite(arr).all())


# ---------------------------------------------------------------------------
# Percentage conversions
# ---------------------------------------------------------------------------

def percent_to_fraction(value: float) -> float:
    """Convert a UI percentage (e.g. 15) to a decimal fraction (0.15)."""
    return float(value) / 100.0


def fraction_to_percent(value: float) -> float:
    """Convert a decimal fraction (0.15) to a UI percentage (15)."""
    return float(value) * 100.0


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------

def percent_change(current: float, reference: float) -> float:
    """Percent change of *current* against *reference*.

    A zero reference is replaced by 1 so the delta stays finite.
    """
    return (current - reference) / (reference or 1.0) * 100.0


def format_currency(value: float, symbol: str = "$") -> str:
    """
    Format currency values for tables and labels.

    Parameters
    ----------
    value : float
        Monetary value.
    symbol : str, default '$'
        Currency symbol prefix.

    Returns
    -------
    str
        Compact label: millions with one decimal, otherwise whole units
        with thousands separators.

    Examples
    --------
    >>> format_currency(2_500_000)
    '$2.5M'
    >>> format_currency(37600)
    '$37,600'
    >>> format_currency(-420.4)
    '-$420'
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return f"{sign}{symbol}{magnitude / 1_000_000:.1f}M"
    return f"{sign}{symbol}{round(magnitude):,}"


# ---------------------------------------------------------------------------
# Matplotlib formatters
# ---------------------------------------------------------------------------

def thousands_formatter(x: float, pos: Optional[int]) -> str:
    """
    Format axis values as thousands for matplotlib FuncFormatter.

    - 25_000 → "25k"
    - 12_500 → "12.5k"
    - 0 → "0"
    """
    if x == 0:
        return "0"
    val = x / 1e3
    return f"{val:.0f}k" if val == int(val) else f"{val:.1f}k"
