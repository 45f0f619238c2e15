"""
Scenario comparison for FinPath

Purpose
-------
Supports the "save scenario, then compare" workflow and the fixed
smart-vs-impulsive projection:

- compare(saved, current): evaluates both snapshots over the same horizon,
  reports KPI deltas of the current scenario against the saved one and the
  behavior signals between the two (the detector invoked on demand).
- smart_vs_impulsive(): two preset scenarios projected with their own loan
  policies (``LoanTerms.SMART`` and ``LoanTerms.IMPULSIVE``).

The saved scenario is owned by the caller and passed in explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .amortization import LoanTerms
from .behavior import BehaviorSignal, detect
from .config import BehaviorRules, SimulationConfig
from .engine import Evaluation, evaluate
from .rates import Inputs
from .trajectory import Trajectory, simulate
from .utils import percent_change

__all__ = [
    "KpiDeltas",
    "ScenarioComparison",
    "compare",
    "SMART_SCENARIO",
    "IMPULSIVE_SCENARIO",
    "smart_vs_impulsive",
]


# ---------------------------------------------------------------------------
# Saved-scenario comparison
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KpiDeltas:
    """Percent change of the current scenario against the saved one."""
    net_worth_nominal: float
    net_worth_real: float
    total_saved: float
    loan_remaining: float

    def net_worth(self, real: bool = False) -> float:
        return self.net_worth_real if real else self.net_worth_nominal


@dataclass(frozen=True)
class ScenarioComparison:
    saved: Evaluation
    current: Evaluation
    deltas: KpiDeltas
    signals: Tuple[BehaviorSignal, ...]

    @property
    def net_worth_gap(self) -> float:
        """Absolute final net-worth difference (current - saved), nominal."""
        return self.current.kpis.net_worth_nominal - self.saved.kpis.net_worth_nominal


def compare(
    saved: Inputs,
    current: Inputs,
    config: Optional[SimulationConfig] = None,
    rules: Optional[BehaviorRules] = None,
) -> ScenarioComparison:
    """
    Compare ``current`` against a previously saved snapshot.

    Both scenarios are evaluated with the same ``config``; deltas use the
    final year of each trajectory.
    """
    config = config or SimulationConfig()
    saved_eval = evaluate(saved, config, rules=rules)
    current_eval = evaluate(current, config, rules=rules, comparing=True)

    ref, cur = saved_eval.kpis, current_eval.kpis
    deltas = KpiDeltas(
        net_worth_nominal=percent_change(cur.net_worth_nominal, ref.net_worth_nominal),
        net_worth_real=percent_change(cur.net_worth_real, ref.net_worth_real),
        total_saved=percent_change(cur.total_saved, ref.total_saved),
        loan_remaining=percent_change(cur.loan_remaining, ref.loan_remaining),
    )
    signals = detect(saved, current, optimal_savings=config.optimal_savings, rules=rules)
    return ScenarioComparison(
        saved=saved_eval,
        current=current_eval,
        deltas=deltas,
        signals=tuple(signals),
    )


# ---------------------------------------------------------------------------
# Smart vs impulsive projection
# ---------------------------------------------------------------------------

# Fractions; income is supplied by the caller
SMART_SCENARIO: Dict[str, float] = {
    "savings_rate": 0.25,
    "lifestyle": 1_800,
    "loan": 10_000,
    "return_rate": 0.08,
}

IMPULSIVE_SCENARIO: Dict[str, float] = {
    "savings_rate": 0.05,
    "lifestyle": 4_500,
    "loan": 50_000,
    "return_rate": 0.04,
}


def smart_vs_impulsive(
    income: float = 70_000,
    horizon_years: int = 10,
    inflation_rate: float = 0.03,
    smart: Optional[Inputs] = None,
) -> Dict[str, Trajectory]:
    """
    Project the smart and impulsive presets side by side.

    Parameters
    ----------
    income : float, default 70,000
        Annual income shared by both scenarios.
    horizon_years : int, default 10
        Projection horizon.
    inflation_rate : float, default 0.03
        Deflator for the real series.
    smart : Inputs, optional
        The user's own snapshot, replacing the smart preset. The impulsive
        scenario then uses the same income.

    Returns
    -------
    Dict[str, Trajectory]
        Keys ``"smart"`` and ``"impulsive"``.
    """
    if smart is None:
        smart = Inputs(income=income, inflation_rate=inflation_rate, **SMART_SCENARIO)
    impulsive = Inputs(income=smart.income, inflation_rate=smart.inflation_rate, **IMPULSIVE_SCENARIO)
    return {
        "smart": simulate(smart, horizon_years, LoanTerms.SMART),
        "impulsive": simulate(impulsive, horizon_years, LoanTerms.IMPULSIVE),
    }
