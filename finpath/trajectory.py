"""
Trajectory simulation for FinPath.

Purpose
-------
Year-by-year recurrence that turns an ``Inputs`` snapshot into net-worth,
savings and debt series, nominal and inflation-adjusted.

Recurrence
----------
For y = 0 the initial state is recorded as is (S_0 = 0, L_0 = loan).
For y >= 1:

    S_y = S_{y-1} + income * savings_rate + S_{y-1} * return_rate
    L_y = step(L_{y-1}, loan_rate, payment_fraction * loan)
    NW_y      = S_y - L_y
    NW_real_y = NW_y / (1 + inflation_rate) ** y

Growth is earned on the balance carried from the previous year; the
current year's contribution earns nothing in that same year.

Design goals
------------
- Pure: output depends only on (inputs, horizon, loan terms).
- Immutable: ``Trajectory`` and its records are frozen; a new object is
  built for every recalculation.

Example
-------
>>> from finpath.rates import Inputs
>>> inputs = Inputs(income=25_000, savings_rate=0.15, lifestyle=800,
...                 loan=40_000, return_rate=0.06, inflation_rate=0.03)
>>> traj = simulate(inputs, horizon_years=1)
>>> traj[1].total_saved, traj[1].loan_remaining
(3750.0, 37600.0)
"""

from __future__ import annotations

import logging
import numbers
import operator
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import pandas as pd

from .amortization import LoanTerms, amortization_step
from .constants import DEFAULT_HORIZON_YEARS
from .exceptions import FinPathError, InvalidInputError
from .rates import Inputs
from .utils import check_all_finite

__all__ = [
    "YearRecord",
    "Trajectory",
    "TrajectorySimulator",
    "simulate",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearRecord:
    year: int
    net_worth_nominal: float
    net_worth_real: float
    total_saved: float
    loan_remaining: float
    interest_paid: float = 0.0


@dataclass(frozen=True)
class Trajectory:
    """
    Ordered per-year records, index 0..horizon_years.

    Attributes
    ----------
    records : Tuple[YearRecord, ...]
        One record per year; ``records[0]`` is the initial state.
    inflation_rate : float
        Deflator used for the real series (kept for reporting only).
    """
    records: Tuple[YearRecord, ...]
    inflation_rate: float

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, year: int) -> YearRecord:
        return self.records[year]

    def __iter__(self) -> Iterator[YearRecord]:
        return iter(self.records)

    @property
    def horizon_years(self) -> int:
        return len(self.records) - 1

    @property
    def final(self) -> YearRecord:
        return self.records[-1]

    def _series(self, name: str) -> Tuple[float, ...]:
        getter = operator.attrgetter(name)
        return tuple(getter(r) for r in self.records)

    @property
    def net_worth_nominal(self) -> Tuple[float, ...]:
        return self._series("net_worth_nominal")

    @property
    def net_worth_real(self) -> Tuple[float, ...]:
        return self._series("net_worth_real")

    @property
    def total_saved(self) -> Tuple[float, ...]:
        return self._series("total_saved")

    @property
    def loan_remaining(self) -> Tuple[float, ...]:
        return self._series("loan_remaining")

    @property
    def total_interest(self) -> float:
        """Loan interest accrued over years 1..N."""
        return sum(r.interest_paid for r in self.records)

    def net_worth(self, real: bool = False) -> Tuple[float, ...]:
        """Net-worth series in the requested view."""
        return self.net_worth_real if real else self.net_worth_nominal

    def to_frame(self) -> pd.DataFrame:
        """Return the trajectory as a DataFrame indexed by year."""
        df = pd.DataFrame(
            {
                "net_worth_nominal": self.net_worth_nominal,
                "net_worth_real": self.net_worth_real,
                "total_saved": self.total_saved,
                "loan_remaining": self.loan_remaining,
                "interest_paid": self._series("interest_paid"),
            },
            index=pd.Index(self._series("year"), name="year"),
        )
        return df


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

class TrajectorySimulator:
    """Runs the trajectory recurrence under a fixed loan policy."""

    def __init__(self, loan_terms: Optional[LoanTerms] = None):
        self.loan_terms = loan_terms or LoanTerms()

    def run(self, inputs: Inputs, horizon_years: int = DEFAULT_HORIZON_YEARS) -> Trajectory:
        if isinstance(horizon_years, bool) or not isinstance(horizon_years, numbers.Integral):
            raise InvalidInputError(
                f"horizon_years must be an integer, got {horizon_years!r}."
            )
        if horizon_years < 0:
            raise InvalidInputError(
                f"horizon_years must be non-negative, got {horizon_years}."
            )

        horizon_years = int(horizon_years)
        terms = self.loan_terms
        capacity = terms.capacity(inputs.loan)
        annual_savings = inputs.annual_savings
        deflator_base = 1.0 + inputs.inflation_rate

        total_saved = 0.0
        loan_remaining = float(inputs.loan)
        records = [
            YearRecord(
                year=0,
                net_worth_nominal=total_saved - loan_remaining,
                net_worth_real=total_saved - loan_remaining,
                total_saved=total_saved,
                loan_remaining=loan_remaining,
            )
        ]

        for year in range(1, horizon_years + 1):
            growth = total_saved * inputs.return_rate
            total_saved += annual_savings + growth

            interest = loan_remaining * terms.rate
            loan_remaining = amortization_step(loan_remaining, terms.rate, capacity)

            nominal = total_saved - loan_remaining
            records.append(
                YearRecord(
                    year=year,
                    net_worth_nominal=nominal,
                    net_worth_real=nominal / deflator_base ** year,
                    total_saved=total_saved,
                    loan_remaining=loan_remaining,
                    interest_paid=interest,
                )
            )

        trajectory = Trajectory(records=tuple(records), inflation_rate=inputs.inflation_rate)
        if not check_all_finite("trajectory", trajectory.net_worth_real + trajectory.total_saved):
            raise FinPathError(
                f"Simulation produced non-finite values for {inputs!r} "
                f"over {horizon_years} years."
            )

        logger.debug(
            "Simulated %d years: final net worth %.2f (real %.2f)",
            horizon_years, trajectory.final.net_worth_nominal, trajectory.final.net_worth_real,
        )
        return trajectory


def simulate(
    inputs: Inputs,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
    loan_terms: Optional[LoanTerms] = None,
) -> Trajectory:
    """
    Project ``inputs`` over ``horizon_years`` years.

    Parameters
    ----------
    inputs : Inputs
        Validated snapshot.
    horizon_years : int, default 10
        Number of simulated years; 0 yields only the initial state.
    loan_terms : LoanTerms, optional
        Loan policy; defaults to the canonical 6% rate, 12% installment.

    Returns
    -------
    Trajectory
        ``horizon_years + 1`` records.
    """
    return TrajectorySimulator(loan_terms).run(inputs, horizon_years)
