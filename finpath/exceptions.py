"""
Custom exceptions for FinPath.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all FinPath modules. All exceptions inherit from FinPathError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
FinPathError (base)
├── ConfigurationError - Invalid configuration, unknown presets
└── ValidationError - Data validation failures
    └── InvalidInputError - Malformed or out-of-range raw input values

Usage
-----
>>> from finpath.exceptions import InvalidInputError
>>>
>>> # Raise specific exception
>>> raise InvalidInputError("income must be positive, got 0")
>>>
>>> # Catch all FinPath exceptions
>>> try:
...     inputs = normalize(raw)
>>> except FinPathError as e:
...     print(f"FinPath error: {e}")
"""

__all__ = [
    "FinPathError",
    "ConfigurationError",
    "ValidationError",
    "InvalidInputError",
]


class FinPathError(Exception):
    """
    Base exception for all FinPath errors.

    Also raised directly when the engine produces a non-finite value,
    which indicates a defect rather than bad input.

    Examples
    --------
    >>> try:
    ...     trajectory = simulate(inputs, 10)
    ... except FinPathError as e:
    ...     logger.error(f"Simulation failed: {e}")
    """
    pass


class ConfigurationError(FinPathError):
    """
    Invalid configuration or parameters.

    Raised when engine configuration is invalid, such as:
    - Unknown persona key
    - Loan terms with a negative rate or payment fraction

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "Unknown persona 'retiree'. Available: student, freelancer, salaried"
    ... )
    """
    pass


class ValidationError(FinPathError):
    """
    Data validation failures.

    Raised when input data fails validation checks, such as:
    - Out-of-bounds values
    - Non-finite numbers
    - Negative horizons
    """
    pass


class InvalidInputError(ValidationError):
    """
    Malformed or out-of-range raw input values.

    The only recoverable error kind of the engine. Raised synchronously
    when:
    - income <= 0
    - loan or lifestyle spend is negative
    - any rate lies outside [0, 1] after percentage conversion
    - a required slider value is missing or not numeric

    Examples
    --------
    >>> raise InvalidInputError(
    ...     "savings_rate must be within [0, 1], got 1.5. "
    ...     "Percentages are converted only by normalize()."
    ... )
    """
    pass
