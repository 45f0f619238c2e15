"""
Financial stress scoring for FinPath.

Purpose
-------
Maps an ``Inputs`` snapshot to a bounded stress score using a fixed rule
table. The score starts at 100 and each of four independent ladders
subtracts at most one penalty (the highest threshold crossed):

| Ladder              | Ratio                     | Penalties                      |
|---------------------|---------------------------|--------------------------------|
| debt_to_income      | loan / income             | >0.6: 30, >0.4: 20, >0.2: 10   |
| savings_rate        | savings_rate              | <0.05: 25, <0.10: 15, <0.15: 8 |
| inflation_vs_return | inflation vs return       | >=return: 20, >0.7*return: 10  |
| lifestyle           | lifestyle * 12 / income   | >0.6: 20, >0.4: 10, >0.3: 5    |

The result is clamped to [0, 100] and mapped to a band:
>=70 Stable, >=50 Mild Risk, >=30 Debt Pressure, else High Stress.

This is a deterministic rule table, not a statistical model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Sequence, Tuple

from .rates import Inputs

__all__ = [
    "RiskBand",
    "RiskAssessment",
    "score",
    "band_for",
    "debt_penalty",
    "savings_penalty",
    "inflation_penalty",
    "lifestyle_penalty",
]

logger = logging.getLogger(__name__)


class RiskBand(str, Enum):
    """Ordered stress bands, best first."""
    STABLE = "stable"
    MILD_RISK = "mild_risk"
    DEBT_PRESSURE = "debt_pressure"
    HIGH_STRESS = "high_stress"

    @property
    def label(self) -> str:
        return _BAND_COPY[self][0]

    @property
    def narrative(self) -> str:
        return _BAND_COPY[self][1]


_BAND_COPY: Dict[RiskBand, Tuple[str, str]] = {
    RiskBand.STABLE: (
        "Financially Stable",
        "Smart decisions build resilience over time.",
    ),
    RiskBand.MILD_RISK: (
        "Mild Risk",
        "Some adjustments could strengthen your position.",
    ),
    RiskBand.DEBT_PRESSURE: (
        "Debt Pressure Building",
        "Your debt load is affecting your trajectory.",
    ),
    RiskBand.HIGH_STRESS: (
        "High Financial Stress",
        "Immediate action recommended to improve outlook.",
    ),
}

# Lower bound of each band, checked top-down
_BAND_FLOORS: Sequence[Tuple[int, RiskBand]] = (
    (70, RiskBand.STABLE),
    (50, RiskBand.MILD_RISK),
    (30, RiskBand.DEBT_PRESSURE),
)


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    band: RiskBand
    label: str
    narrative: str
    penalties: Mapping[str, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Ladders
# ---------------------------------------------------------------------------

def debt_penalty(debt_ratio: float) -> int:
    if debt_ratio > 0.6:
        return 30
    if debt_ratio > 0.4:
        return 20
    if debt_ratio > 0.2:
        return 10
    return 0


def savings_penalty(savings_rate: float) -> int:
    if savings_rate < 0.05:
        return 25
    if savings_rate < 0.10:
        return 15
    if savings_rate < 0.15:
        return 8
    return 0


def inflation_penalty(inflation_rate: float, return_rate: float) -> int:
    if inflation_rate >= return_rate:
        return 20
    if inflation_rate > 0.7 * return_rate:
        return 10
    return 0


def lifestyle_penalty(lifestyle_ratio: float) -> int:
    if lifestyle_ratio > 0.6:
        return 20
    if lifestyle_ratio > 0.4:
        return 10
    if lifestyle_ratio > 0.3:
        return 5
    return 0


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def band_for(value: float) -> RiskBand:
    """Band containing a (clamped) score."""
    for floor, band in _BAND_FLOORS:
        if value >= floor:
            return band
    return RiskBand.HIGH_STRESS


def score(inputs: Inputs) -> RiskAssessment:
    """
    Composite stress score of an ``Inputs`` snapshot.

    Returns
    -------
    RiskAssessment
        Integer score in [0, 100], its band, label and narrative, plus the
        penalty applied by each ladder.
    """
    penalties = {
        "debt_to_income": debt_penalty(inputs.loan / inputs.income),
        "savings_rate": savings_penalty(inputs.savings_rate),
        "inflation_vs_return": inflation_penalty(inputs.inflation_rate, inputs.return_rate),
        "lifestyle": lifestyle_penalty(inputs.annual_lifestyle / inputs.income),
    }
    value = max(0, min(100, 100 - sum(penalties.values())))
    band = band_for(value)

    logger.debug("Risk score %d (%s), penalties %s", value, band.value, penalties)
    return RiskAssessment(
        score=value,
        band=band,
        label=band.label,
        narrative=band.narrative,
        penalties=penalties,
    )
