"""
Rate normalization for FinPath.

Purpose
-------
Turns raw slider values into a validated ``Inputs`` snapshot. The UI hands
over percentages (savings 15, returns 7, inflation 3); inside the engine
every rate is a decimal fraction. This module is the only place where that
conversion happens.

Raw slider keys
---------------
income     : annual income (currency, > 0)
savings    : savings rate in percent
loan       : initial loan principal (currency, >= 0)
lifestyle  : monthly discretionary spend (currency, >= 0)
returns    : annual investment return in percent
inflation  : annual inflation in percent

Example
-------
>>> inputs = normalize({
...     "income": 25000, "savings": 15, "loan": 40000,
...     "lifestyle": 800, "returns": 6, "inflation": 3,
... })
>>> inputs.savings_rate
0.15
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping

from .exceptions import InvalidInputError
from .types import RawInputsDict
from .utils import (
    check_finite,
    check_non_negative,
    check_unit_interval,
    percent_to_fraction,
    fraction_to_percent,
)

__all__ = [
    "Inputs",
    "RAW_FIELDS",
    "normalize",
    "to_raw",
]

# Raw slider key -> (Inputs field, given in percent)
RAW_FIELDS: Dict[str, tuple] = {
    "income": ("income", False),
    "savings": ("savings_rate", True),
    "loan": ("loan", False),
    "lifestyle": ("lifestyle", False),
    "returns": ("return_rate", True),
    "inflation": ("inflation_rate", True),
}


@dataclass(frozen=True)
class Inputs:
    """
    Immutable snapshot of the six economic assumptions.

    Parameters
    ----------
    income : float
        Annual income, strictly positive.
    savings_rate : float
        Fraction of income saved each year, in [0, 1].
    lifestyle : float
        Monthly discretionary spend, non-negative.
    loan : float
        Initial loan principal, non-negative.
    return_rate : float
        Annual investment return as a fraction, in [0, 1].
    inflation_rate : float
        Annual inflation as a fraction, in [0, 1].

    Raises
    ------
    InvalidInputError
        If any value is non-finite or out of range.
    """
    income: float
    savings_rate: float
    lifestyle: float
    loan: float
    return_rate: float
    inflation_rate: float

    def __post_init__(self):
        for name in ("income", "savings_rate", "lifestyle", "loan",
                     "return_rate", "inflation_rate"):
            object.__setattr__(self, name, check_finite(name, getattr(self, name)))

        if self.income <= 0:
            raise InvalidInputError(f"income must be positive (got {self.income}).")
        check_non_negative("loan", self.loan)
        check_non_negative("lifestyle", self.lifestyle)
        check_unit_interval("savings_rate", self.savings_rate)
        check_unit_interval("return_rate", self.return_rate)
        check_unit_interval("inflation_rate", self.inflation_rate)

    @property
    def annual_savings(self) -> float:
        """Amount saved per year: income * savings_rate."""
        return self.income * self.savings_rate

    @property
    def annual_lifestyle(self) -> float:
        """Lifestyle spend over a full year."""
        return self.lifestyle * 12

    @property
    def debt_to_income(self) -> float:
        return self.loan / self.income

    def with_changes(self, **changes: float) -> "Inputs":
        """Return a new validated snapshot with some fields replaced."""
        return replace(self, **changes)


def normalize(raw: Mapping[str, Any], *, percent: bool = True) -> Inputs:
    """
    Normalize raw slider values into an ``Inputs`` snapshot.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Slider values keyed by ``income``, ``savings``, ``loan``,
        ``lifestyle``, ``returns``, ``inflation``. When ``percent=False``
        the mapping must use the ``Inputs`` field names with fractional
        rates instead.
    percent : bool, default True
        Whether rates are given as percentages.

    Returns
    -------
    Inputs

    Raises
    ------
    InvalidInputError
        If a value is missing, non-numeric, non-finite or out of range.
    """
    if percent:
        values: Dict[str, float] = {}
        for key, (field_name, is_percent) in RAW_FIELDS.items():
            if key not in raw:
                raise InvalidInputError(f"Missing slider value '{key}'.")
            value = check_finite(key, raw[key])
            values[field_name] = percent_to_fraction(value) if is_percent else value
    else:
        values = {}
        for field_name, _ in RAW_FIELDS.values():
            if field_name not in raw:
                raise InvalidInputError(f"Missing input field '{field_name}'.")
            values[field_name] = raw[field_name]

    return Inputs(**values)


def to_raw(inputs: Inputs) -> RawInputsDict:
    """Inverse of ``normalize``: express an ``Inputs`` snapshot as slider values."""
    raw: Dict[str, float] = {}
    for key, (field_name, is_percent) in RAW_FIELDS.items():
        value = getattr(inputs, field_name)
        raw[key] = fraction_to_percent(value) if is_percent else value
    return RawInputsDict(**raw)
