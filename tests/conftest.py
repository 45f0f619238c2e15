"""
Pytest configuration and fixtures for FinPath test suite.

This module provides reusable fixtures for testing all FinPath components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from finpath.rates import Inputs
from finpath.config import SimulationConfig, BehaviorRules
from finpath.personas import get_persona


# ---------------------------------------------------------------------------
# Horizon Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def horizon() -> int:
    """Standard projection horizon for tests."""
    return 10


# ---------------------------------------------------------------------------
# Inputs Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def example_inputs() -> Inputs:
    """
    Reference scenario with hand-checked year-1 values.

    Income: 25,000, saving 15%
    Loan: 40,000 at the canonical 6% / 12% installment policy
    Year 1: total saved 3,750, loan remaining 37,600
    """
    return Inputs(
        income=25_000,
        savings_rate=0.15,
        lifestyle=800,
        loan=40_000,
        return_rate=0.06,
        inflation_rate=0.03,
    )


@pytest.fixture
def debt_free_inputs() -> Inputs:
    """Same profile without a loan."""
    return Inputs(
        income=60_000,
        savings_rate=0.20,
        lifestyle=1_500,
        loan=0,
        return_rate=0.07,
        inflation_rate=0.03,
    )


@pytest.fixture
def stable_inputs() -> Inputs:
    """
    No risk penalty applies.

    Debt ratio 0, savings 20%, inflation well below return,
    lifestyle 12% of income: score 100, Stable.
    """
    return Inputs(
        income=100_000,
        savings_rate=0.20,
        lifestyle=1_000,
        loan=0,
        return_rate=0.07,
        inflation_rate=0.03,
    )


@pytest.fixture
def stressed_inputs() -> Inputs:
    """
    Every risk penalty stacks.

    Debt ratio 0.8 (-30), savings 3% (-25), inflation above return (-20),
    lifestyle 48% of income (-10): score 15, High Stress.
    """
    return Inputs(
        income=50_000,
        savings_rate=0.03,
        lifestyle=2_000,
        loan=40_000,
        return_rate=0.05,
        inflation_rate=0.08,
    )


@pytest.fixture
def student_inputs() -> Inputs:
    """Student persona snapshot."""
    return get_persona("student").inputs()


@pytest.fixture
def raw_sliders() -> dict:
    """Slider values as the UI submits them (rates in percent)."""
    return {
        "income": 25_000,
        "savings": 15,
        "loan": 40_000,
        "lifestyle": 800,
        "returns": 6,
        "inflation": 3,
    }


# ---------------------------------------------------------------------------
# Configuration Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> SimulationConfig:
    """Default simulation options (10 years, nominal view)."""
    return SimulationConfig()


@pytest.fixture
def rules() -> BehaviorRules:
    """Canonical behavior rule thresholds."""
    return BehaviorRules()


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def snapshot_file(tmp_path) -> Path:
    """Snapshot of the salaried persona written in the current schema."""
    path = tmp_path / "saved.json"
    payload = {
        "schema_version": "0.1.0",
        "inputs": {
            "income": 80_000,
            "savings_rate": 0.25,
            "lifestyle": 2_000,
            "loan": 20_000,
            "return_rate": 0.07,
            "inflation_rate": 0.03,
        },
    }
    with open(path, "w") as f:
        json.dump(payload, f)
    return path


# ---------------------------------------------------------------------------
# CLI Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """CLI test runner isolated from FINPATH_* variables of the host."""
    for var in ("FINPATH_DEBUG", "FINPATH_LOG_LEVEL",
                "FINPATH_DEFAULT_HORIZON", "FINPATH_DEFAULT_PERSONA"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()
