"""
Persona presets for FinPath.

Each persona is a set of slider values (percentages for rates, like the UI
uses) plus the savings rate considered optimal for that profile. The
optimal rate feeds the present-bias rule of ``finpath.behavior``.

Example
-------
>>> persona = get_persona("student")
>>> persona.inputs().loan
40000.0
>>> persona.optimal_savings
0.15
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .exceptions import ConfigurationError
from .rates import Inputs, normalize

__all__ = [
    "Persona",
    "PERSONAS",
    "get_persona",
    "list_personas",
]


@dataclass(frozen=True)
class Persona:
    key: str
    label: str
    income: float
    savings: float
    loan: float
    lifestyle: float
    returns: float
    inflation: float
    optimal_savings: float

    def raw(self) -> Dict[str, float]:
        """Slider values as the UI would submit them."""
        return {
            "income": self.income,
            "savings": self.savings,
            "loan": self.loan,
            "lifestyle": self.lifestyle,
            "returns": self.returns,
            "inflation": self.inflation,
        }

    def inputs(self) -> Inputs:
        return normalize(self.raw())


PERSONAS: Dict[str, Persona] = {
    "student": Persona(
        key="student", label="Student",
        income=25_000, savings=10, loan=40_000, lifestyle=800,
        returns=6, inflation=3, optimal_savings=0.15,
    ),
    "freelancer": Persona(
        key="freelancer", label="Freelancer",
        income=55_000, savings=20, loan=15_000, lifestyle=2_500,
        returns=9, inflation=3, optimal_savings=0.25,
    ),
    "salaried": Persona(
        key="salaried", label="Salaried Employee",
        income=80_000, savings=25, loan=20_000, lifestyle=2_000,
        returns=7, inflation=3, optimal_savings=0.30,
    ),
}


def get_persona(key: str) -> Persona:
    """Look up a persona by key (case-insensitive)."""
    try:
        return PERSONAS[key.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown persona '{key}'. Available: {', '.join(PERSONAS)}"
        ) from None


def list_personas() -> List[Persona]:
    return list(PERSONAS.values())
