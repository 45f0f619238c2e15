"""
Unit tests for scenario.py module.

Tests saved-scenario comparison and the smart-vs-impulsive projection.
"""

import pytest

from finpath.behavior import BiasKind
from finpath.config import SimulationConfig
from finpath.personas import get_persona
from finpath.scenario import (
    IMPULSIVE_SCENARIO,
    ScenarioComparison,
    compare,
    smart_vs_impulsive,
)
from finpath.utils import percent_change


@pytest.fixture
def saved():
    """Saved scenario: salaried persona."""
    return get_persona("salaried").inputs()


class TestCompare:
    """Comparison against a saved snapshot."""

    def test_identical_scenarios(self, saved):
        """Comparing a scenario with itself gives zero deltas and no signals."""
        result = compare(saved, saved)

        assert isinstance(result, ScenarioComparison)
        assert result.deltas.net_worth_nominal == 0
        assert result.deltas.total_saved == 0
        assert result.deltas.loan_remaining == 0
        assert result.signals == ()
        assert result.net_worth_gap == 0

    def test_lower_savings(self, saved):
        """Saving less lowers total saved and flags present bias."""
        current = saved.with_changes(savings_rate=0.10)
        result = compare(saved, current)

        assert result.deltas.total_saved < 0
        assert result.net_worth_gap < 0
        assert [s.kind for s in result.signals] == [BiasKind.PRESENT_BIAS]

    def test_delta_formula(self, saved):
        """Deltas are percent changes of the final-year KPIs."""
        current = saved.with_changes(return_rate=0.09)
        result = compare(saved, current)

        expected = percent_change(
            result.current.kpis.total_saved, result.saved.kpis.total_saved
        )
        assert result.deltas.total_saved == pytest.approx(expected)

    def test_zero_reference(self, saved):
        """A zero reference is replaced by 1."""
        reference = saved.with_changes(loan=0)
        current = saved.with_changes(loan=0)
        assert compare(reference, current).deltas.loan_remaining == 0.0

    def test_real_view_delta(self, saved):
        """net_worth(real=True) selects the real delta."""
        result = compare(saved, saved.with_changes(savings_rate=0.30))
        assert result.deltas.net_worth(real=True) == result.deltas.net_worth_real

    def test_current_marked_as_comparing(self, saved):
        """Only the current evaluation carries the comparison card."""
        result = compare(saved, saved)

        assert "Comparing" in [r.title for r in result.current.recommendations]
        assert "Comparing" not in [r.title for r in result.saved.recommendations]

    def test_shared_horizon(self, saved):
        """Both scenarios use the configured horizon."""
        result = compare(saved, saved, SimulationConfig(horizon_years=25))

        assert result.saved.trajectory.horizon_years == 25
        assert result.current.trajectory.horizon_years == 25


class TestSmartVsImpulsive:
    """Two preset scenarios under their own loan policies."""

    def test_keys(self):
        """Both scenarios are returned."""
        assert set(smart_vs_impulsive()) == {"smart", "impulsive"}

    def test_first_year(self):
        """Year-1 values of both presets at 70,000 income."""
        result = smart_vs_impulsive()
        smart, impulsive = result["smart"][1], result["impulsive"][1]

        assert smart.total_saved == pytest.approx(17_500)
        assert smart.loan_remaining == pytest.approx(10_000 * 1.05 - 1_500)
        assert impulsive.total_saved == pytest.approx(3_500)
        assert impulsive.loan_remaining == pytest.approx(50_000 * 1.08 - 3_000)

    def test_smart_wins(self):
        """Smart habits end with higher net worth."""
        result = smart_vs_impulsive(horizon_years=20)
        assert result["smart"].final.net_worth_nominal > result["impulsive"].final.net_worth_nominal

    def test_impulsive_debt_grows(self):
        """A 6% installment on 8% interest never amortizes."""
        loan = smart_vs_impulsive()["impulsive"].loan_remaining
        assert loan[-1] > loan[0]

    def test_custom_smart_snapshot(self, saved):
        """The user's snapshot replaces the smart preset; income is shared."""
        result = smart_vs_impulsive(smart=saved, horizon_years=5)

        assert result["smart"][1].total_saved == pytest.approx(saved.annual_savings)
        assert result["impulsive"][1].total_saved == pytest.approx(
            saved.income * IMPULSIVE_SCENARIO["savings_rate"]
        )
        assert result["smart"].horizon_years == 5
