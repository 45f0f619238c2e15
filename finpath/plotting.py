"""
Plotting utilities for FinPath trajectories.

Purpose
-------
Chart rendering for the CLI and notebooks. Plot functions only read the
value objects returned by the engine; they never recompute anything.

Available charts
----------------
- plot_trajectory: net worth (nominal or real), total saved and loan
  remaining over the horizon. With ``saved`` given, the saved scenario's
  net worth is overlaid as a dashed line and the savings/debt lines are
  omitted.
- plot_scenarios: net worth of several named trajectories (e.g. the
  smart-vs-impulsive projection).

matplotlib is imported lazily so the engine can be used without a
display backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

from .constants import DEFAULT_FIGSIZE_WIDE, DEFAULT_LINEWIDTH, DEFAULT_LINEWIDTH_THICK
from .types import PlotColorsDict

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from .trajectory import Trajectory

__all__ = ["DEFAULT_COLORS", "plot_trajectory", "plot_scenarios"]


DEFAULT_COLORS: PlotColorsDict = {
    "net_worth": "#2563eb",
    "savings": "#16a34a",
    "debt": "#dc2626",
    "saved": "#6b7280",
}


def _new_axes(ax: Optional[Axes], figsize: tuple) -> Axes:
    if ax is None:
        from matplotlib import pyplot as plt
        _, ax = plt.subplots(figsize=figsize)
    return ax


def _finish(ax: Axes, title: Optional[str], save_path: Optional[str]) -> None:
    from matplotlib.ticker import FuncFormatter
    from .utils import thousands_formatter

    ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    ax.axhline(0, color="black", linewidth=0.8, alpha=0.4)
    ax.set_xlabel("Year", fontsize=11)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=10)
    if title:
        ax.set_title(title, fontsize=12, fontweight="bold")
    if save_path:
        ax.figure.savefig(save_path, bbox_inches="tight", dpi=150)


def plot_trajectory(
    trajectory: Trajectory,
    real: bool = False,
    saved: Optional[Trajectory] = None,
    ax: Optional[Axes] = None,
    *,
    colors: Optional[PlotColorsDict] = None,
    title: Optional[str] = None,
    figsize: tuple = DEFAULT_FIGSIZE_WIDE,
    save_path: Optional[str] = None,
) -> Axes:
    """
    Plot a wealth trajectory.

    Parameters
    ----------
    trajectory : Trajectory
        Current scenario.
    real : bool, default False
        Plot inflation-adjusted net worth instead of nominal.
    saved : Trajectory, optional
        Saved scenario to compare against. When given, only the two
        net-worth lines are drawn (saved one dashed).
    ax : matplotlib Axes, optional
        Target axes; a new figure is created when omitted.
    colors : PlotColorsDict, optional
        Overrides for ``DEFAULT_COLORS``.
    title : str, optional
        Axes title.
    figsize : tuple, default (12, 6)
        Size of the new figure (ignored when ``ax`` is given).
    save_path : str, optional
        Path to save the figure.

    Returns
    -------
    Axes
        The axes drawn on.

    Examples
    --------
    >>> ax = plot_trajectory(simulate(inputs, 20), real=True)
    >>> ax.get_legend_handles_labels()[1]
    ['Net Worth (real)', 'Total Saved', 'Loan Remaining']
    """
    palette = {**DEFAULT_COLORS, **(colors or {})}
    ax = _new_axes(ax, figsize)
    years = [r.year for r in trajectory]
    view = "real" if real else "nominal"

    ax.plot(
        years, trajectory.net_worth(real),
        color=palette["net_worth"], linewidth=DEFAULT_LINEWIDTH_THICK,
        label=f"Net Worth ({view})",
    )

    if saved is not None:
        ax.plot(
            [r.year for r in saved], saved.net_worth(real),
            color=palette["saved"], linewidth=DEFAULT_LINEWIDTH_THICK,
            linestyle="--", label=f"Saved Scenario ({view})",
        )
    else:
        ax.plot(
            years, trajectory.total_saved,
            color=palette["savings"], linewidth=DEFAULT_LINEWIDTH,
            label="Total Saved",
        )
        ax.plot(
            years, trajectory.loan_remaining,
            color=palette["debt"], linewidth=DEFAULT_LINEWIDTH,
            label="Loan Remaining",
        )

    ax.set_ylabel("Amount", fontsize=11)
    _finish(ax, title, save_path)
    return ax


def plot_scenarios(
    trajectories: Mapping[str, Trajectory],
    real: bool = False,
    ax: Optional[Axes] = None,
    *,
    title: Optional[str] = None,
    figsize: tuple = DEFAULT_FIGSIZE_WIDE,
    save_path: Optional[str] = None,
) -> Axes:
    """Plot the net worth of several labelled trajectories on one axes."""
    ax = _new_axes(ax, figsize)
    for label, traj in trajectories.items():
        ax.plot(
            [r.year for r in traj], traj.net_worth(real),
            linewidth=DEFAULT_LINEWIDTH_THICK, label=label.replace("_", " ").title(),
        )
    ax.set_ylabel("Net Worth", fontsize=11)
    _finish(ax, title, save_path)
    return ax
