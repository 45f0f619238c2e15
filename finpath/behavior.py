"""
Behavioral bias detection for FinPath.

Compares two successive ``Inputs`` snapshots and classifies the change into
named bias signals. Rules are independent; any subset may fire. Signals are
returned in a fixed order (present bias, lifestyle inflation, debt risk,
savings collapse) so callers see a stable list. The savings-collapse rule
is a variant and only runs when ``BehaviorRules.savings_collapse`` is set.

Presentation (pop-ups, animations) is downstream: this module only returns
values. The caller owns the previous snapshot and passes it explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .config import BehaviorRules
from .constants import DEFAULT_OPTIMAL_SAVINGS
from .rates import Inputs

__all__ = [
    "BiasKind",
    "Severity",
    "BehaviorSignal",
    "detect",
]

logger = logging.getLogger(__name__)


class BiasKind(str, Enum):
    PRESENT_BIAS = "present_bias"
    LIFESTYLE_INFLATION = "lifestyle_inflation"
    DEBT_RISK_RISING = "debt_risk_rising"
    SAVINGS_COLLAPSE = "savings_collapse"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class BehaviorSignal:
    """
    One detected deviation between two snapshots.

    Attributes
    ----------
    kind : BiasKind
        Bias pattern.
    severity : Severity
        How urgent the signal is.
    fields : Tuple[str, ...]
        ``Inputs`` fields that triggered the rule.
    title : str
        Short headline for alert pop-ups.
    message : str
        One-line explanation.
    """
    kind: BiasKind
    severity: Severity
    fields: Tuple[str, ...]
    title: str
    message: str


def _present_bias(prev: Inputs, curr: Inputs, optimal: float, rules: BehaviorRules) -> Optional[BehaviorSignal]:
    if curr.savings_rate < prev.savings_rate - rules.present_bias_drop and curr.savings_rate < optimal:
        return BehaviorSignal(
            kind=BiasKind.PRESENT_BIAS,
            severity=Severity.WARNING,
            fields=("savings_rate",),
            title="Present Bias Detected",
            message="Short-term comfort > long-term gain.",
        )
    return None


def _lifestyle_inflation(prev: Inputs, curr: Inputs, rules: BehaviorRules) -> Optional[BehaviorSignal]:
    if curr.lifestyle > prev.lifestyle * rules.lifestyle_inflation_factor and curr.income <= prev.income:
        return BehaviorSignal(
            kind=BiasKind.LIFESTYLE_INFLATION,
            severity=Severity.WARNING,
            fields=("lifestyle", "income"),
            title="Lifestyle Inflation",
            message="Spending rising faster than income.",
        )
    return None


def _debt_risk(prev: Inputs, curr: Inputs, rules: BehaviorRules) -> Optional[BehaviorSignal]:
    if curr.loan > prev.loan + rules.debt_jump and curr.loan / curr.income > rules.debt_to_income_alert:
        return BehaviorSignal(
            kind=BiasKind.DEBT_RISK_RISING,
            severity=Severity.DANGER,
            fields=("loan", "income"),
            title="Debt Risk Rising",
            message="Delay new liabilities.",
        )
    return None


def _savings_collapse(prev: Inputs, curr: Inputs, rules: BehaviorRules) -> Optional[BehaviorSignal]:
    floor = rules.savings_collapse_floor
    if curr.savings_rate < floor <= prev.savings_rate:
        return BehaviorSignal(
            kind=BiasKind.SAVINGS_COLLAPSE,
            severity=Severity.DANGER,
            fields=("savings_rate",),
            title="Savings Collapse",
            message="Saving almost nothing leaves no cushion.",
        )
    return None


def detect(
    previous: Optional[Inputs],
    current: Inputs,
    optimal_savings: float = DEFAULT_OPTIMAL_SAVINGS,
    rules: Optional[BehaviorRules] = None,
) -> List[BehaviorSignal]:
    """
    Classify the change from ``previous`` to ``current`` into bias signals.

    Parameters
    ----------
    previous : Inputs or None
        Earlier snapshot; None on the first observation.
    current : Inputs
        Latest snapshot.
    optimal_savings : float, default 0.15
        Persona-defined optimal savings rate for the present-bias rule.
    rules : BehaviorRules, optional
        Rule thresholds; defaults to the canonical values.

    Returns
    -------
    List[BehaviorSignal]
        Empty when ``previous`` is None or nothing fired.
    """
    if previous is None:
        return []
    rules = rules or BehaviorRules()

    candidates = [
        _present_bias(previous, current, optimal_savings, rules),
        _lifestyle_inflation(previous, current, rules),
        _debt_risk(previous, current, rules),
    ]
    if rules.savings_collapse:
        candidates.append(_savings_collapse(previous, current, rules))

    signals = [s for s in candidates if s is not None]
    for s in signals:
        logger.debug("Behavior signal %s (%s) on %s", s.kind.value, s.severity.value, s.fields)
    return signals
