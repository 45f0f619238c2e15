"""
Opportunity cost of discretionary spending.

Future value of a monthly spend stream, had it been invested instead, minus
the nominal principal spent. Uses the ordinary-annuity formula with monthly
compounding:

    FV = m * ((1 + i) ** n - 1) / i,   i = r / 12,  n = 12 * years
    opportunity_cost = FV - m * n

When i == 0 the annuity factor collapses to n and the cost is exactly 0;
that limit is substituted directly instead of dividing by zero.
"""

from __future__ import annotations

import math
from typing import List

from .constants import MONTHS_PER_YEAR
from .exceptions import FinPathError
from .utils import check_finite, check_non_negative

__all__ = [
    "future_value_annuity",
    "estimate_opportunity_cost",
    "opportunity_cost_series",
]


def future_value_annuity(payment: float, rate: float, periods: int) -> float:
    """Future value of ``periods`` end-of-period payments at ``rate`` per period."""
    if rate == 0:
        return payment * periods
    return payment * ((1.0 + rate) ** periods - 1.0) / rate


def estimate_opportunity_cost(monthly_spend: float, annual_return_rate: float, years: float) -> float:
    """
    Investment growth forgone by spending ``monthly_spend`` every month.

    Parameters
    ----------
    monthly_spend : float
        Recurring monthly spend (>= 0).
    annual_return_rate : float
        Annual return as a fraction (>= 0).
    years : float
        Horizon in years (>= 0).

    Returns
    -------
    float
        Growth above principal; 0 when the return rate is 0.

    Raises
    ------
    InvalidInputError
        If an argument is negative or non-finite.
    FinPathError
        If the future value overflows to a non-finite number.
    """
    monthly_spend = check_finite("monthly_spend", monthly_spend)
    annual_return_rate = check_finite("annual_return_rate", annual_return_rate)
    years = check_finite("years", years)
    check_non_negative("monthly_spend", monthly_spend)
    check_non_negative("annual_return_rate", annual_return_rate)
    check_non_negative("years", years)

    months = years * MONTHS_PER_YEAR
    monthly_rate = annual_return_rate / MONTHS_PER_YEAR
    if monthly_rate == 0:
        return 0.0

    try:
        fv = future_value_annuity(monthly_spend, monthly_rate, months)
    except OverflowError as e:
        raise FinPathError(
            f"Opportunity cost overflowed for {monthly_spend}/month at "
            f"{annual_return_rate} over {years} years."
        ) from e
    if not math.isfinite(fv):
        raise FinPathError(
            f"Opportunity cost is non-finite for {monthly_spend}/month at "
            f"{annual_return_rate} over {years} years."
        )
    return fv - monthly_spend * months


def opportunity_cost_series(monthly_spend: float, annual_return_rate: float, years: int) -> List[float]:
    """Opportunity cost at the end of each year 0..years."""
    return [
        estimate_opportunity_cost(monthly_spend, annual_return_rate, y)
        for y in range(int(years) + 1)
    ]
