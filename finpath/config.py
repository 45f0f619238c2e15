"""
Configuration management module for FinPath.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation and serialization. Supports environment variables
and programmatic defaults.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON for snapshot files
- Environment-aware: Supports .env files for application settings

Example
-------
>>> from finpath.config import InputsConfig, BehaviorRules
>>> cfg = InputsConfig(income=80_000, savings_rate=0.25, lifestyle=2_000,
...                    loan=20_000, return_rate=0.07, inflation_rate=0.03)
>>> cfg.model_dump()["income"]
80000.0
>>> rules = BehaviorRules(savings_collapse=True)
"""

from __future__ import annotations
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_HORIZON_YEARS,
    DEFAULT_OPTIMAL_SAVINGS,
    MAX_HORIZON_YEARS,
    LOAN_INTEREST_RATE,
    LOAN_PAYMENT_FRACTION,
    PRESENT_BIAS_DROP,
    LIFESTYLE_INFLATION_FACTOR,
    DEBT_JUMP_AMOUNT,
    DEBT_TO_INCOME_ALERT,
    SAVINGS_COLLAPSE_FLOOR,
)

__all__ = [
    "InputsConfig",
    "LoanTermsConfig",
    "BehaviorRules",
    "SimulationConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Inputs Configuration
# ---------------------------------------------------------------------------

class InputsConfig(BaseModel):
    """
    Schema of a persisted ``Inputs`` snapshot.

    Only the six numeric fields are part of the schema; rates are stored
    as fractions.

    Attributes
    ----------
    income : float
        Annual income (> 0).
    savings_rate : float
        Savings rate fraction in [0, 1].
    lifestyle : float
        Monthly discretionary spend (>= 0).
    loan : float
        Initial loan principal (>= 0).
    return_rate : float
        Annual investment return fraction in [0, 1].
    inflation_rate : float
        Annual inflation fraction in [0, 1].
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    income: float = Field(gt=0, allow_inf_nan=False, description="Annual income")
    savings_rate: float = Field(ge=0, le=1, description="Savings rate (fraction)")
    lifestyle: float = Field(ge=0, allow_inf_nan=False, description="Monthly lifestyle spend")
    loan: float = Field(ge=0, allow_inf_nan=False, description="Initial loan principal")
    return_rate: float = Field(ge=0, le=1, description="Annual return (fraction)")
    inflation_rate: float = Field(ge=0, le=1, description="Annual inflation (fraction)")


# ---------------------------------------------------------------------------
# Loan Configuration
# ---------------------------------------------------------------------------

class LoanTermsConfig(BaseModel):
    """Loan interest rate and installment fraction of the original principal."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rate: float = Field(
        default=LOAN_INTEREST_RATE,
        ge=0,
        le=1,
        description="Annual loan interest rate"
    )
    payment_fraction: float = Field(
        default=LOAN_PAYMENT_FRACTION,
        ge=0,
        le=1,
        description="Annual payment as a fraction of the original principal"
    )


# ---------------------------------------------------------------------------
# Behavior Rules
# ---------------------------------------------------------------------------

class BehaviorRules(BaseModel):
    """
    Thresholds of the behavioral bias rules.

    Attributes
    ----------
    present_bias_drop : float
        Savings-rate drop that signals present bias.
    lifestyle_inflation_factor : float
        Lifestyle growth factor that signals lifestyle inflation.
    debt_jump : float
        Loan increase that signals new debt.
    debt_to_income_alert : float
        Loan-to-income ratio above which new debt is dangerous.
    savings_collapse_floor : float
        Savings rate below which a drop counts as a collapse.
    savings_collapse : bool
        Enable the savings-collapse rule, a variant of the original build
        that is off by default.

    Examples
    --------
    >>> rules = BehaviorRules(debt_jump=10_000)
    >>> rules.debt_jump
    10000.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    present_bias_drop: float = Field(
        default=PRESENT_BIAS_DROP,
        ge=0,
        le=1,
        description="Savings-rate drop signalling present bias"
    )
    lifestyle_inflation_factor: float = Field(
        default=LIFESTYLE_INFLATION_FACTOR,
        ge=1,
        description="Lifestyle growth factor signalling lifestyle inflation"
    )
    debt_jump: float = Field(
        default=DEBT_JUMP_AMOUNT,
        ge=0,
        description="Loan increase signalling new debt"
    )
    debt_to_income_alert: float = Field(
        default=DEBT_TO_INCOME_ALERT,
        ge=0,
        description="Loan-to-income ratio for the debt alert"
    )
    savings_collapse_floor: float = Field(
        default=SAVINGS_COLLAPSE_FLOOR,
        ge=0,
        le=1,
        description="Savings rate floor for the collapse rule"
    )
    savings_collapse: bool = Field(
        default=False,
        description="Enable the savings-collapse variant rule"
    )


# ---------------------------------------------------------------------------
# Simulation Configuration
# ---------------------------------------------------------------------------

class SimulationConfig(BaseModel):
    """
    Options of one recalculation.

    Attributes
    ----------
    horizon_years : int
        Projection horizon (0-60 years).
    inflation_adjusted : bool
        Report net worth in real (deflated) terms.
    optimal_savings : float
        Persona-defined optimal savings rate used by the present-bias rule.
    loan_terms : LoanTermsConfig
        Loan policy.

    Examples
    --------
    >>> config = SimulationConfig(horizon_years=20, inflation_adjusted=True)
    >>> config.horizon_years
    20
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    horizon_years: int = Field(
        default=DEFAULT_HORIZON_YEARS,
        ge=0,
        le=MAX_HORIZON_YEARS,
        description="Projection horizon (years)"
    )
    inflation_adjusted: bool = Field(
        default=False,
        description="Show purchasing power instead of nominal values"
    )
    optimal_savings: float = Field(
        default=DEFAULT_OPTIMAL_SAVINGS,
        ge=0,
        le=1,
        description="Optimal savings rate for present-bias detection"
    )
    loan_terms: LoanTermsConfig = Field(
        default_factory=LoanTermsConfig,
        description="Loan policy"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Environment variables are prefixed with FINPATH_ (e.g.
    FINPATH_LOG_LEVEL=DEBUG). Supports .env files for local use.

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging).
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".
    default_horizon : int
        Horizon used by the CLI when none is given.
    default_persona : str, optional
        Persona preloaded by the CLI when no slider values are given.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.default_horizon
    10
    """

    model_config = ConfigDict(
        env_prefix="FINPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    default_horizon: int = Field(
        default=DEFAULT_HORIZON_YEARS,
        ge=0,
        le=MAX_HORIZON_YEARS,
        description="Default projection horizon (years)"
    )
    default_persona: Optional[str] = Field(
        default=None,
        description="Persona used when no slider values are given"
    )

    @field_validator("default_persona")
    @classmethod
    def validate_persona(cls, v):
        """Normalize persona keys to lowercase."""
        if v is not None:
            v = v.strip().lower() or None
        return v

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
