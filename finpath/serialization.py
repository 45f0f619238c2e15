"""
Serialization module for FinPath snapshots.

Purpose
-------
Provides JSON persistence for ``Inputs`` snapshots (the "saved scenario"
of the comparison workflow) and a plain-dict export of trajectories.

A snapshot file holds the six numeric fields plus ``schema_version``:

    {
      "schema_version": "0.1.0",
      "inputs": {"income": 80000.0, "savings_rate": 0.25, ...}
    }

Design Principles
-----------------
- Type-safe: values are validated through ``InputsConfig`` before an
  ``Inputs`` is built
- Human-readable: indented JSON, rates stored as fractions
- Backward compatible: mismatching schema versions load with a warning

Example
-------
>>> from pathlib import Path
>>> from finpath.personas import get_persona
>>> from finpath.serialization import save_snapshot, load_snapshot
>>>
>>> inputs = get_persona("salaried").inputs()
>>> save_snapshot(inputs, Path("saved.json"))
>>> load_snapshot(Path("saved.json")) == inputs
True
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Union
from pathlib import Path
import json
import warnings

from pydantic import ValidationError as PydanticValidationError

from .config import InputsConfig
from .exceptions import InvalidInputError
from .rates import Inputs
from .trajectory import Trajectory
from .types import InputsDict, SnapshotDict, TrajectoryDict

__all__ = [
    "SCHEMA_VERSION",
    "inputs_to_dict",
    "inputs_from_dict",
    "save_snapshot",
    "load_snapshot",
    "trajectory_to_dict",
    "save_trajectory",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Inputs Serialization
# ---------------------------------------------------------------------------

def inputs_to_dict(inputs: Inputs) -> InputsDict:
    """
    Convert Inputs to dictionary representation.

    Parameters
    ----------
    inputs : Inputs
        Snapshot to serialize

    Returns
    -------
    dict
        The six numeric fields, rates as fractions
    """
    return {
        "income": inputs.income,
        "savings_rate": inputs.savings_rate,
        "lifestyle": inputs.lifestyle,
        "loan": inputs.loan,
        "return_rate": inputs.return_rate,
        "inflation_rate": inputs.inflation_rate,
    }


def inputs_from_dict(data: Mapping[str, Any]) -> Inputs:
    """
    Create Inputs from dictionary representation.

    Parameters
    ----------
    data : dict
        Dictionary with the six numeric fields

    Returns
    -------
    Inputs
        Reconstructed snapshot

    Raises
    ------
    InvalidInputError
        If a field is missing, unknown or out of range
    """
    try:
        config = InputsConfig.model_validate(dict(data))
    except PydanticValidationError as e:
        raise InvalidInputError(f"Invalid snapshot: {e}") from e

    return Inputs(**config.model_dump())


# ---------------------------------------------------------------------------
# Snapshot Files
# ---------------------------------------------------------------------------

def save_snapshot(inputs: Inputs, path: Union[str, Path]) -> None:
    """
    Save an Inputs snapshot to a JSON file.

    Parameters
    ----------
    inputs : Inputs
        Snapshot to save
    path : Path
        Output file path (should have .json extension)

    Examples
    --------
    >>> save_snapshot(inputs, Path("saved.json"))
    """
    path = Path(path)
    payload: SnapshotDict = {
        "schema_version": SCHEMA_VERSION,
        "inputs": inputs_to_dict(inputs),
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)


def load_snapshot(path: Union[str, Path]) -> Inputs:
    """
    Load an Inputs snapshot from a JSON file.

    Parameters
    ----------
    path : Path
        Input file path

    Returns
    -------
    Inputs
        Reconstructed snapshot

    Raises
    ------
    InvalidInputError
        If the file is not valid JSON or the values fail validation
    """
    with open(path, "r") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Snapshot {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict) or "inputs" not in payload:
        raise InvalidInputError(f"Snapshot {path} has no 'inputs' section.")

    # Check schema version
    schema_version = payload.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"Snapshot schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )

    return inputs_from_dict(payload["inputs"])


# ---------------------------------------------------------------------------
# Trajectory Export
# ---------------------------------------------------------------------------

def trajectory_to_dict(trajectory: Trajectory) -> TrajectoryDict:
    """
    Export a trajectory as plain lists, one entry per year.

    Examples
    --------
    >>> data = trajectory_to_dict(simulate(inputs, 2))
    >>> data["year"]
    [0, 1, 2]
    """
    return {
        "year": [r.year for r in trajectory],
        "net_worth_nominal": list(trajectory.net_worth_nominal),
        "net_worth_real": list(trajectory.net_worth_real),
        "total_saved": list(trajectory.total_saved),
        "loan_remaining": list(trajectory.loan_remaining),
    }


def save_trajectory(
    trajectory: Trajectory,
    inputs: Inputs,
    path: Union[str, Path],
) -> None:
    """
    Save a trajectory together with the snapshot that produced it.

    The ``inputs`` section has the snapshot layout, so the file can also be
    read back with ``load_snapshot``.
    """
    path = Path(path)
    payload: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "inputs": inputs_to_dict(inputs),
        "horizon_years": trajectory.horizon_years,
        "trajectory": trajectory_to_dict(trajectory),
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
