"""
Loan amortization for FinPath.

Purpose
-------
Advances a single loan balance one period at a time under a fixed
installment plan. The payment capacity is a constant fraction of the
ORIGINAL principal, not of the current balance:

    interest  = B_t * r
    payment   = min(c, B_t + interest)
    B_{t+1}   = max(0, B_t + interest - payment)

with c = payment_fraction * B_0.

Canonical policy: r = 0.06, payment_fraction = 0.12 per year. Other
copies of the original tool used different constants; they are kept as
named variants (``LoanTerms.SMART``, ``LoanTerms.IMPULSIVE``) and are
never blended into the canonical terms.

Example
-------
>>> amortization_step(40_000, 0.06, payment_capacity(40_000))
37600.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

import pandas as pd

from .constants import LOAN_INTEREST_RATE, LOAN_PAYMENT_FRACTION
from .exceptions import ConfigurationError
from .utils import check_non_negative

__all__ = [
    "LoanTerms",
    "amortization_step",
    "payment_capacity",
    "amortization_schedule",
    "years_to_payoff",
]


@dataclass(frozen=True)
class LoanTerms:
    """
    Interest rate and installment policy applied to a loan.

    Parameters
    ----------
    rate : float
        Interest rate per period (annual in the trajectory model).
    payment_fraction : float
        Payment capacity per period as a fraction of the original principal.
    """
    rate: float = LOAN_INTEREST_RATE
    payment_fraction: float = LOAN_PAYMENT_FRACTION

    SMART: ClassVar["LoanTerms"]
    IMPULSIVE: ClassVar["LoanTerms"]

    def __post_init__(self):
        if self.rate < 0:
            raise ConfigurationError(f"Loan rate must be non-negative, got {self.rate}.")
        if self.payment_fraction < 0:
            raise ConfigurationError(
                f"payment_fraction must be non-negative, got {self.payment_fraction}."
            )

    def capacity(self, principal: float) -> float:
        return payment_capacity(principal, self.payment_fraction)


# Variants from the smart-vs-impulsive projection page
LoanTerms.SMART = LoanTerms(rate=0.05, payment_fraction=0.15)
LoanTerms.IMPULSIVE = LoanTerms(rate=0.08, payment_fraction=0.06)


def payment_capacity(principal: float, fraction: float = LOAN_PAYMENT_FRACTION) -> float:
    """Fixed per-period payment capacity; zero when there is no loan."""
    if principal <= 0:
        return 0.0
    return principal * fraction


def amortization_step(balance: float, rate: float, payment_capacity: float) -> float:
    """
    Advance a loan balance by one period.

    Parameters
    ----------
    balance : float
        Current balance (>= 0).
    rate : float
        Period interest rate (>= 0).
    payment_capacity : float
        Maximum amount paid this period.

    Returns
    -------
    float
        New balance, never negative and never above ``balance + interest``.
    """
    check_non_negative("balance", balance)
    check_non_negative("rate", rate)
    check_non_negative("payment_capacity", payment_capacity)

    interest = balance * rate
    payment = min(payment_capacity, balance + interest)
    return max(0.0, balance + interest - payment)


def amortization_schedule(
    principal: float,
    terms: Optional[LoanTerms] = None,
    years: int = 10,
) -> pd.DataFrame:
    """
    Year-by-year amortization table for a loan under ``terms``.

    Returns
    -------
    pd.DataFrame
        Indexed by year (1..years) with columns ``opening``, ``interest``,
        ``payment`` and ``closing``.
    """
    terms = terms or LoanTerms()
    check_non_negative("principal", principal)
    check_non_negative("years", years)

    capacity = terms.capacity(principal)
    rows = []
    balance = float(principal)
    for year in range(1, int(years) + 1):
        interest = balance * terms.rate
        closing = amortization_step(balance, terms.rate, capacity)
        rows.append({
            "year": year,
            "opening": balance,
            "interest": interest,
            "payment": balance + interest - closing,
            "closing": closing,
        })
        balance = closing

    if not rows:
        return pd.DataFrame(columns=["opening", "interest", "payment", "closing"],
                            index=pd.Index([], name="year"))
    return pd.DataFrame(rows).set_index("year")


def years_to_payoff(
    principal: float,
    terms: Optional[LoanTerms] = None,
    max_years: int = 100,
) -> Optional[int]:
    """First year in which the balance reaches zero, or None within ``max_years``.

    A capacity at or below the first year's interest never amortizes.
    """
    terms = terms or LoanTerms()
    if principal <= 0:
        return 0
    capacity = terms.capacity(principal)
    balance = float(principal)
    for year in range(1, int(max_years) + 1):
        balance = amortization_step(balance, terms.rate, capacity)
        if balance == 0:
            return year
    return None
