"""
Global constants for FinPath.

Purpose
-------
Centralizes the policy constants and rule thresholds used by the engine.
The numeric values are part of the reproducibility contract: reference
scenarios only match when these values are used exactly.

Usage
-----
>>> from finpath.constants import DEFAULT_HORIZON_YEARS, LOAN_PAYMENT_FRACTION
>>>
>>> trajectory = simulate(inputs, DEFAULT_HORIZON_YEARS)

Categories
----------
- Horizon: default and maximum projection length
- Loan: canonical amortization policy
- Behavior: bias detection thresholds
- Recommendations: trigger levels for advice cards
- Plotting: figure sizes and line widths
"""

from typing import Tuple

__all__ = [
    # Horizon
    "DEFAULT_HORIZON_YEARS",
    "MAX_HORIZON_YEARS",
    "MONTHS_PER_YEAR",
    # Loan
    "LOAN_INTEREST_RATE",
    "LOAN_PAYMENT_FRACTION",
    # Behavior
    "DEFAULT_OPTIMAL_SAVINGS",
    "PRESENT_BIAS_DROP",
    "LIFESTYLE_INFLATION_FACTOR",
    "DEBT_JUMP_AMOUNT",
    "DEBT_TO_INCOME_ALERT",
    "SAVINGS_COLLAPSE_FLOOR",
    # Recommendations
    "MAX_RECOMMENDATIONS",
    "LOW_RESILIENCE_SCORE",
    "HIGH_OPPORTUNITY_COST",
    # Plotting
    "DEFAULT_FIGSIZE_WIDE",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_LINEWIDTH_THICK",
]


# =============================================================================
# Horizon
# =============================================================================

DEFAULT_HORIZON_YEARS: int = 10
"""Default projection horizon selected by the UI (years)."""

MAX_HORIZON_YEARS: int = 60
"""Upper bound accepted by SimulationConfig."""

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (used for annuity and lifestyle conversions)."""


# =============================================================================
# Loan Policy
# =============================================================================

LOAN_INTEREST_RATE: float = 0.06
"""Annual interest charged on the outstanding loan balance."""

LOAN_PAYMENT_FRACTION: float = 0.12
"""Annual payment capacity as a fraction of the ORIGINAL principal.

Models a fixed installment plan, not a payment sized on the current balance.
"""


# =============================================================================
# Behavior Detection
# =============================================================================

DEFAULT_OPTIMAL_SAVINGS: float = 0.15
"""Optimal savings rate used when no persona is selected (student preset)."""

PRESENT_BIAS_DROP: float = 0.05
"""Savings-rate drop between snapshots that counts as present bias."""

LIFESTYLE_INFLATION_FACTOR: float = 1.1
"""Lifestyle growth factor (10%) that counts as lifestyle inflation."""

DEBT_JUMP_AMOUNT: float = 5000.0
"""Loan increase between snapshots that counts as new debt."""

DEBT_TO_INCOME_ALERT: float = 0.5
"""Loan-to-income ratio above which new debt is flagged."""

SAVINGS_COLLAPSE_FLOOR: float = 0.05
"""Savings rate below which a drop counts as a savings collapse."""


# =============================================================================
# Recommendations
# =============================================================================

MAX_RECOMMENDATIONS: int = 4
"""Maximum number of recommendation cards returned."""

LOW_RESILIENCE_SCORE: int = 60
"""Risk score below which an emergency fund is recommended."""

HIGH_OPPORTUNITY_COST: float = 50_000.0
"""Opportunity cost above which lifestyle spend is flagged."""


# =============================================================================
# Plotting
# =============================================================================

DEFAULT_FIGSIZE_WIDE: Tuple[int, int] = (12, 6)
"""Figure size for trajectory charts."""

DEFAULT_LINEWIDTH: float = 1.5
"""Line width for secondary series (savings, debt)."""

DEFAULT_LINEWIDTH_THICK: float = 2.5
"""Line width for the net-worth series."""
