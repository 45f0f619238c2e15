"""
Unit tests for rates.py module.

Tests slider normalization and Inputs validation.
"""

import math

import pytest

from finpath.exceptions import InvalidInputError, ValidationError, FinPathError
from finpath.rates import Inputs, normalize, to_raw


class TestNormalize:
    """Test conversion of raw slider values into Inputs."""

    def test_percentages_become_fractions(self, raw_sliders):
        """Rates given in percent are divided by 100."""
        inputs = normalize(raw_sliders)

        assert inputs.savings_rate == pytest.approx(0.15)
        assert inputs.return_rate == pytest.approx(0.06)
        assert inputs.inflation_rate == pytest.approx(0.03)

    def test_currency_values_unchanged(self, raw_sliders):
        """Income, loan and lifestyle pass through as given."""
        inputs = normalize(raw_sliders)

        assert inputs.income == 25_000
        assert inputs.loan == 40_000
        assert inputs.lifestyle == 800

    def test_values_are_floats(self, raw_sliders):
        """Integer slider values are stored as floats."""
        inputs = normalize(raw_sliders)
        assert all(isinstance(getattr(inputs, f), float) for f in (
            "income", "savings_rate", "lifestyle", "loan", "return_rate", "inflation_rate"
        ))

    def test_fraction_mode_uses_field_names(self):
        """percent=False accepts Inputs field names with fractional rates."""
        inputs = normalize({
            "income": 50_000, "savings_rate": 0.2, "lifestyle": 1_000,
            "loan": 0, "return_rate": 0.07, "inflation_rate": 0.03,
        }, percent=False)

        assert inputs.savings_rate == 0.2

    def test_missing_slider_raises(self, raw_sliders):
        """A missing slider value is an input error."""
        del raw_sliders["returns"]
        with pytest.raises(InvalidInputError, match="returns"):
            normalize(raw_sliders)

    def test_non_numeric_raises(self, raw_sliders):
        """Non-numeric slider values are rejected."""
        raw_sliders["income"] = "lots"
        with pytest.raises(InvalidInputError, match="income"):
            normalize(raw_sliders)

    def test_nan_raises(self, raw_sliders):
        """NaN is rejected before any computation."""
        raw_sliders["loan"] = math.nan
        with pytest.raises(InvalidInputError, match="finite"):
            normalize(raw_sliders)

    def test_rate_above_hundred_percent_raises(self, raw_sliders):
        """A savings rate of 150% leaves the unit interval."""
        raw_sliders["savings"] = 150
        with pytest.raises(InvalidInputError, match="savings_rate"):
            normalize(raw_sliders)

    def test_to_raw_inverts_normalize(self, raw_sliders):
        """to_raw expresses an Inputs snapshot back as slider values."""
        raw = to_raw(normalize(raw_sliders))
        for key, value in raw_sliders.items():
            assert raw[key] == pytest.approx(value)


class TestInputsValidation:
    """Test Inputs invariants."""

    def test_zero_income_rejected(self):
        """Income must be strictly positive."""
        with pytest.raises(InvalidInputError, match="income must be positive"):
            Inputs(income=0, savings_rate=0.1, lifestyle=0, loan=0,
                   return_rate=0.05, inflation_rate=0.02)

    def test_negative_loan_rejected(self):
        """Negative loan principal is rejected."""
        with pytest.raises(InvalidInputError, match="loan must be non-negative"):
            Inputs(income=1, savings_rate=0.1, lifestyle=0, loan=-1,
                   return_rate=0.05, inflation_rate=0.02)

    def test_negative_lifestyle_rejected(self):
        """Negative lifestyle spend is rejected."""
        with pytest.raises(InvalidInputError, match="lifestyle"):
            Inputs(income=1, savings_rate=0.1, lifestyle=-5, loan=0,
                   return_rate=0.05, inflation_rate=0.02)

    def test_percentage_passed_as_fraction_rejected(self):
        """A return of 7 (percent) inside the engine is out of range."""
        with pytest.raises(InvalidInputError, match="return_rate"):
            Inputs(income=1, savings_rate=0.1, lifestyle=0, loan=0,
                   return_rate=7, inflation_rate=0.02)

    def test_infinite_income_rejected(self):
        """Infinite values are rejected."""
        with pytest.raises(InvalidInputError):
            Inputs(income=math.inf, savings_rate=0.1, lifestyle=0, loan=0,
                   return_rate=0.05, inflation_rate=0.02)

    def test_bool_rejected(self):
        """Booleans are not accepted as numbers."""
        with pytest.raises(InvalidInputError):
            Inputs(income=50_000, savings_rate=True, lifestyle=0, loan=0,
                   return_rate=0.05, inflation_rate=0.02)

    def test_error_hierarchy(self):
        """InvalidInputError is catchable as ValidationError and FinPathError."""
        assert issubclass(InvalidInputError, ValidationError)
        assert issubclass(InvalidInputError, FinPathError)

    def test_boundaries_accepted(self):
        """Rates of exactly 0 and 1 are valid."""
        inputs = Inputs(income=1, savings_rate=1.0, lifestyle=0, loan=0,
                        return_rate=0.0, inflation_rate=0.0)
        assert inputs.savings_rate == 1.0

    def test_immutable(self, example_inputs):
        """Inputs snapshots are frozen."""
        with pytest.raises(AttributeError):
            example_inputs.income = 1


class TestInputsProperties:
    """Test derived Inputs figures."""

    def test_annual_savings(self, example_inputs):
        """Annual savings is income times savings rate."""
        assert example_inputs.annual_savings == pytest.approx(3_750)

    def test_annual_lifestyle(self, example_inputs):
        """Annual lifestyle spend is twelve months."""
        assert example_inputs.annual_lifestyle == 9_600

    def test_debt_to_income(self, example_inputs):
        """Debt ratio is loan over income."""
        assert example_inputs.debt_to_income == pytest.approx(1.6)

    def test_with_changes_returns_new_snapshot(self, example_inputs):
        """with_changes leaves the original untouched."""
        changed = example_inputs.with_changes(savings_rate=0.3)

        assert changed.savings_rate == 0.3
        assert example_inputs.savings_rate == 0.15

    def test_with_changes_validates(self, example_inputs):
        """Changed values go through validation again."""
        with pytest.raises(InvalidInputError):
            example_inputs.with_changes(income=-1)
