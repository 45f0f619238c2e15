"""
Type definitions for FinPath.

Purpose
-------
Provides TypedDict definitions for the dictionary shapes exchanged at the
edges of the engine: raw slider values, persisted snapshots, exported
trajectories and plot colors.

Usage
-----
>>> from finpath.types import RawInputsDict
>>>
>>> raw: RawInputsDict = {
...     "income": 25_000, "savings": 15, "loan": 40_000,
...     "lifestyle": 800, "returns": 6, "inflation": 3,
... }

Type Definitions
----------------
RawInputsDict
    Slider values as the UI submits them (rates in percent)

InputsDict
    Serialized ``Inputs`` (rates as fractions)

SnapshotDict
    Snapshot file layout: {"schema_version", "inputs"}

TrajectoryDict
    Exported trajectory series, one list entry per year

PlotColorsDict
    Line colors for ``plot_trajectory``
"""

from typing import List
from typing_extensions import TypedDict

__all__ = [
    "RawInputsDict",
    "InputsDict",
    "SnapshotDict",
    "TrajectoryDict",
    "PlotColorsDict",
]


class RawInputsDict(TypedDict):
    """
    Raw slider values.

    Attributes
    ----------
    income : float
        Annual income.
    savings : float
        Savings rate in percent (e.g. 15).
    loan : float
        Initial loan principal.
    lifestyle : float
        Monthly discretionary spend.
    returns : float
        Annual investment return in percent.
    inflation : float
        Annual inflation in percent.
    """

    income: float
    savings: float
    loan: float
    lifestyle: float
    returns: float
    inflation: float


class InputsDict(TypedDict):
    """Serialized ``Inputs`` snapshot; rates are fractions."""

    income: float
    savings_rate: float
    lifestyle: float
    loan: float
    return_rate: float
    inflation_rate: float


class SnapshotDict(TypedDict):
    schema_version: str
    inputs: InputsDict


class TrajectoryDict(TypedDict):
    """
    Trajectory series exported by ``trajectory_to_dict``.

    All lists have ``horizon_years + 1`` entries; index 0 is the initial
    state.
    """

    year: List[int]
    net_worth_nominal: List[float]
    net_worth_real: List[float]
    total_saved: List[float]
    loan_remaining: List[float]


class PlotColorsDict(TypedDict, total=False):
    """
    Color overrides for ``plot_trajectory``.

    Attributes
    ----------
    net_worth : str
        Net-worth line. Default: "#2563eb".
    savings : str
        Total saved line. Default: "#16a34a".
    debt : str
        Loan remaining line. Default: "#dc2626".
    saved : str
        Saved-scenario comparison line. Default: "#6b7280".

    Examples
    --------
    >>> colors: PlotColorsDict = {"net_worth": "#FF9800"}
    >>> plot_trajectory(traj, colors=colors)
    """

    net_worth: str
    savings: str
    debt: str
    saved: str
