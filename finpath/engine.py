"""Evaluation orchestrator for FinPath

Runs one full recalculation for an ``Inputs`` snapshot: trajectory,
opportunity cost, risk score, behavior signals against the caller's
previous snapshot, headline KPIs, the annual breakdown and recommendation
cards.

Design goals
------------
- Stateless: the previous snapshot is an explicit argument; the caller
  replaces it after each successful evaluation.
- Values only: the returned ``Evaluation`` is consumed by presentation
  code (CLI tables, charts) and never mutated.

Typical usage
-------------
>>> from finpath.personas import get_persona
>>> persona = get_persona("student")
>>> result = evaluate(persona.inputs(), SimulationConfig(optimal_savings=persona.optimal_savings))
>>> result.risk.band
<RiskBand.MILD_RISK: 'mild_risk'>
>>> previous = persona.inputs()   # keep for the next call
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .amortization import LoanTerms
from .behavior import BehaviorSignal, detect
from .config import BehaviorRules, SimulationConfig
from .constants import (
    HIGH_OPPORTUNITY_COST,
    LOW_RESILIENCE_SCORE,
    MAX_RECOMMENDATIONS,
    MONTHS_PER_YEAR,
)
from .opportunity import estimate_opportunity_cost
from .rates import Inputs
from .risk import RiskAssessment, score
from .trajectory import Trajectory, simulate
from .utils import percent_change

__all__ = [
    "Kpis",
    "Breakdown",
    "Recommendation",
    "Evaluation",
    "compute_roi",
    "compute_kpis",
    "compute_breakdown",
    "recommend",
    "evaluate",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Kpis:
    """
    Headline figures for the final projected year.

    The ``*_change`` fields are percent changes against the year before
    (0 for a zero horizon). ``monthly_passive_income`` is the monthly
    return the final savings would earn.
    """
    net_worth_nominal: float
    net_worth_real: float
    total_saved: float
    loan_remaining: float
    roi: float
    net_worth_nominal_change: float
    net_worth_real_change: float
    total_saved_change: float
    loan_remaining_change: float
    monthly_passive_income: float

    def net_worth(self, real: bool = False) -> float:
        return self.net_worth_real if real else self.net_worth_nominal

    def net_worth_change(self, real: bool = False) -> float:
        return self.net_worth_real_change if real else self.net_worth_nominal_change


@dataclass(frozen=True)
class Breakdown:
    """Annual money flows shown next to the chart (first projected year)."""
    annual_savings: float
    annual_spending: float
    growth: float
    loan_payment: float
    opportunity_cost: float


@dataclass(frozen=True)
class Recommendation:
    title: str
    text: str


@dataclass(frozen=True)
class Evaluation:
    inputs: Inputs
    trajectory: Trajectory
    opportunity_cost: float
    risk: RiskAssessment
    signals: Tuple[BehaviorSignal, ...]
    kpis: Kpis
    breakdown: Breakdown
    recommendations: Tuple[Recommendation, ...]


# ---------------------------------------------------------------------------
# Derived figures
# ---------------------------------------------------------------------------

def compute_roi(total_saved: float, annual_savings: float, years: int) -> float:
    """Growth of savings over contributions, in percent.

    Defined as (saved - contributions) / contributions * 100 with
    contributions = annual_savings * years; 0 when nothing is contributed.
    """
    contributions = annual_savings * years
    if annual_savings <= 0 or contributions == 0:
        return 0.0
    return (total_saved - contributions) / contributions * 100.0


def compute_kpis(trajectory: Trajectory, inputs: Inputs) -> Kpis:
    last = trajectory.final
    prior = trajectory[max(0, trajectory.horizon_years - 1)]
    return Kpis(
        net_worth_nominal=last.net_worth_nominal,
        net_worth_real=last.net_worth_real,
        total_saved=last.total_saved,
        loan_remaining=last.loan_remaining,
        roi=compute_roi(last.total_saved, inputs.annual_savings, trajectory.horizon_years),
        net_worth_nominal_change=percent_change(last.net_worth_nominal, prior.net_worth_nominal),
        net_worth_real_change=percent_change(last.net_worth_real, prior.net_worth_real),
        total_saved_change=percent_change(last.total_saved, prior.total_saved),
        loan_remaining_change=percent_change(last.loan_remaining, prior.loan_remaining),
        monthly_passive_income=last.total_saved * inputs.return_rate / MONTHS_PER_YEAR,
    )


def compute_breakdown(
    trajectory: Trajectory,
    inputs: Inputs,
    opportunity_cost: float,
    loan_terms: Optional[LoanTerms] = None,
) -> Breakdown:
    loan_terms = loan_terms or LoanTerms()
    first_year_saved = trajectory[1].total_saved if len(trajectory) > 1 else 0.0
    return Breakdown(
        annual_savings=inputs.annual_savings,
        annual_spending=inputs.annual_lifestyle,
        growth=first_year_saved * inputs.return_rate,
        loan_payment=inputs.loan * loan_terms.payment_fraction,
        opportunity_cost=opportunity_cost,
    )


def recommend(
    inputs: Inputs,
    risk: RiskAssessment,
    opportunity_cost: float,
    *,
    inflation_adjusted: bool = False,
    comparing: bool = False,
) -> List[Recommendation]:
    """Ordered recommendation cards, at most ``MAX_RECOMMENDATIONS``."""
    recs: List[Recommendation] = []
    if inputs.inflation_rate > inputs.return_rate:
        recs.append(Recommendation("Beat Inflation", "Returns < Inflation. Real value is dropping."))
    if inflation_adjusted:
        recs.append(Recommendation("Real View", "You are viewing purchasing power, not nominal dollars."))
    if comparing:
        recs.append(Recommendation("Comparing", "Comparing vs Saved Scenario."))
    if risk.score < LOW_RESILIENCE_SCORE:
        recs.append(Recommendation("Build Emergency Fund", "Resilience is low."))
    if opportunity_cost > HIGH_OPPORTUNITY_COST:
        recs.append(Recommendation("High Opp. Cost", "Investing lifestyle spend could yield huge returns."))
    return recs[:MAX_RECOMMENDATIONS]


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def evaluate(
    inputs: Inputs,
    config: Optional[SimulationConfig] = None,
    previous: Optional[Inputs] = None,
    rules: Optional[BehaviorRules] = None,
    comparing: bool = False,
) -> Evaluation:
    """
    Run one recalculation.

    Parameters
    ----------
    inputs : Inputs
        Current snapshot.
    config : SimulationConfig, optional
        Horizon, view, optimal savings rate and loan policy.
    previous : Inputs, optional
        Snapshot from the previous evaluation, for behavior detection.
    rules : BehaviorRules, optional
        Behavior rule thresholds.
    comparing : bool, default False
        Whether the caller is in saved-scenario comparison mode.

    Returns
    -------
    Evaluation
    """
    config = config or SimulationConfig()
    loan_terms = LoanTerms(
        rate=config.loan_terms.rate,
        payment_fraction=config.loan_terms.payment_fraction,
    )
    horizon = config.horizon_years

    signals = detect(previous, inputs, optimal_savings=config.optimal_savings, rules=rules)
    trajectory = simulate(inputs, horizon, loan_terms)
    opp_cost = estimate_opportunity_cost(inputs.lifestyle, inputs.return_rate, horizon)
    risk = score(inputs)

    evaluation = Evaluation(
        inputs=inputs,
        trajectory=trajectory,
        opportunity_cost=opp_cost,
        risk=risk,
        signals=tuple(signals),
        kpis=compute_kpis(trajectory, inputs),
        breakdown=compute_breakdown(trajectory, inputs, opp_cost, loan_terms),
        recommendations=tuple(
            recommend(
                inputs, risk, opp_cost,
                inflation_adjusted=config.inflation_adjusted,
                comparing=comparing,
            )
        ),
    )
    logger.info(
        "Evaluated %d-year horizon: score %d, %d signal(s)",
        horizon, risk.score, len(signals),
    )
    return evaluation
