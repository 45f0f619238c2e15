"""
Unit tests for amortization.py module.

Tests the single-period loan step, loan policies and schedules.
"""

import pytest

from finpath.amortization import (
    LoanTerms,
    amortization_step,
    payment_capacity,
    amortization_schedule,
    years_to_payoff,
)
from finpath.exceptions import ConfigurationError, InvalidInputError


class TestAmortizationStep:
    """Test one-period balance updates."""

    def test_reference_step(self):
        """40,000 at 6% with a 4,800 installment leaves 37,600."""
        assert amortization_step(40_000, 0.06, 4_800) == pytest.approx(37_600)

    def test_zero_balance_stays_zero(self):
        """Nothing to pay on a cleared loan."""
        assert amortization_step(0, 0.06, 4_800) == 0

    def test_final_payment_clears_balance(self):
        """Payment is capped at balance plus interest; result is exactly 0."""
        assert amortization_step(1_000, 0.06, 4_800) == 0.0

    def test_capacity_below_interest_grows_balance(self):
        """If the installment does not cover interest, the balance rises."""
        new_balance = amortization_step(10_000, 0.10, 500)
        assert new_balance == pytest.approx(10_500)

    def test_never_negative(self):
        """Any capacity leaves a non-negative balance."""
        for capacity in (0, 10, 1_000, 1e9):
            assert amortization_step(5_000, 0.06, capacity) >= 0

    def test_never_above_balance_plus_interest(self):
        """The new balance is bounded by balance plus interest."""
        assert amortization_step(5_000, 0.06, 0) == pytest.approx(5_300)

    def test_negative_arguments_rejected(self):
        """Negative balance, rate or capacity are input errors."""
        with pytest.raises(InvalidInputError, match="balance"):
            amortization_step(-1, 0.06, 100)
        with pytest.raises(InvalidInputError, match="rate"):
            amortization_step(100, -0.01, 100)
        with pytest.raises(InvalidInputError, match="payment_capacity"):
            amortization_step(100, 0.06, -5)


class TestPaymentCapacity:
    """Test the fixed installment rule."""

    def test_fraction_of_principal(self):
        """Capacity is 12% of the original principal by default."""
        assert payment_capacity(40_000) == pytest.approx(4_800)

    def test_zero_principal(self):
        """No loan means no capacity."""
        assert payment_capacity(0) == 0.0


class TestLoanTerms:
    """Test loan policy objects."""

    def test_canonical_defaults(self):
        """Default terms are 6% interest, 12% installment."""
        terms = LoanTerms()
        assert terms.rate == 0.06
        assert terms.payment_fraction == 0.12

    def test_variants_are_distinct(self):
        """The smart and impulsive variants keep their own constants."""
        assert LoanTerms.SMART == LoanTerms(rate=0.05, payment_fraction=0.15)
        assert LoanTerms.IMPULSIVE == LoanTerms(rate=0.08, payment_fraction=0.06)
        assert LoanTerms.SMART != LoanTerms()

    def test_capacity_uses_fraction(self):
        """capacity() applies the policy's payment fraction."""
        assert LoanTerms.IMPULSIVE.capacity(50_000) == pytest.approx(3_000)

    def test_negative_rate_rejected(self):
        """Negative rates are a configuration error."""
        with pytest.raises(ConfigurationError, match="rate"):
            LoanTerms(rate=-0.01)

    def test_negative_fraction_rejected(self):
        """Negative payment fractions are a configuration error."""
        with pytest.raises(ConfigurationError, match="payment_fraction"):
            LoanTerms(payment_fraction=-0.1)


class TestAmortizationSchedule:
    """Test the year-by-year table."""

    def test_shape_and_columns(self):
        """One row per year with opening/interest/payment/closing."""
        df = amortization_schedule(40_000, years=5)

        assert list(df.columns) == ["opening", "interest", "payment", "closing"]
        assert list(df.index) == [1, 2, 3, 4, 5]
        assert df.index.name == "year"

    def test_first_row(self):
        """First year matches the reference step."""
        row = amortization_schedule(40_000, years=1).loc[1]

        assert row["opening"] == pytest.approx(40_000)
        assert row["interest"] == pytest.approx(2_400)
        assert row["payment"] == pytest.approx(4_800)
        assert row["closing"] == pytest.approx(37_600)

    def test_closing_feeds_next_opening(self):
        """Each year opens at the previous closing balance."""
        df = amortization_schedule(40_000, years=4)
        assert df["opening"].iloc[1:].tolist() == pytest.approx(df["closing"].iloc[:-1].tolist())

    def test_zero_years(self):
        """An empty horizon yields an empty table."""
        df = amortization_schedule(40_000, years=0)
        assert df.empty


class TestYearsToPayoff:
    """Test payoff horizon search."""

    def test_no_loan(self):
        """A zero principal is already paid off."""
        assert years_to_payoff(0) == 0

    def test_canonical_policy_pays_off(self):
        """12% installments at 6% interest clear the loan within 20 years."""
        years = years_to_payoff(40_000)
        assert years is not None
        assert 10 < years < 20

    def test_faster_with_smart_terms(self):
        """Higher installment and lower rate clear the loan sooner."""
        assert years_to_payoff(40_000, LoanTerms.SMART) < years_to_payoff(40_000)

    def test_never_when_capacity_below_interest(self):
        """An installment below the interest never amortizes."""
        assert years_to_payoff(10_000, LoanTerms(rate=0.10, payment_fraction=0.05), max_years=50) is None
