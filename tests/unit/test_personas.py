"""
Unit tests for personas.py module.
"""

import pytest

from finpath.exceptions import ConfigurationError
from finpath.personas import PERSONAS, Persona, get_persona, list_personas
from finpath.rates import Inputs


class TestPersonas:
    """Test persona presets."""

    def test_three_presets(self):
        """Student, freelancer and salaried are available."""
        assert set(PERSONAS) == {"student", "freelancer", "salaried"}

    def test_student_values(self):
        """Student preset: low income, large loan."""
        p = get_persona("student")

        assert p.income == 25_000
        assert p.loan == 40_000
        assert p.optimal_savings == 0.15

    @pytest.mark.parametrize("key,optimal", [
        ("student", 0.15), ("freelancer", 0.25), ("salaried", 0.30),
    ])
    def test_optimal_savings(self, key, optimal):
        """Each persona carries its own optimal savings rate."""
        assert get_persona(key).optimal_savings == optimal

    def test_inputs_are_normalized(self):
        """Persona sliders are percentages; inputs() converts them."""
        inputs = get_persona("salaried").inputs()

        assert isinstance(inputs, Inputs)
        assert inputs.savings_rate == pytest.approx(0.25)
        assert inputs.return_rate == pytest.approx(0.07)

    def test_raw_has_slider_keys(self):
        """raw() uses the UI slider names."""
        assert set(get_persona("freelancer").raw()) == {
            "income", "savings", "loan", "lifestyle", "returns", "inflation",
        }

    def test_lookup_case_insensitive(self):
        """Keys are matched case-insensitively."""
        assert get_persona(" Student ") is PERSONAS["student"]

    def test_unknown_persona(self):
        """Unknown keys raise ConfigurationError listing the options."""
        with pytest.raises(ConfigurationError, match="Unknown persona 'retiree'"):
            get_persona("retiree")

    def test_list_personas(self):
        """list_personas returns every preset in order."""
        personas = list_personas()
        assert [p.key for p in personas] == ["student", "freelancer", "salaried"]
        assert all(isinstance(p, Persona) for p in personas)
