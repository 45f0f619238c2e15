"""
Command-Line Interface for FinPath.

Purpose
-------
Runs the simulation engine from the terminal: the same six slider values
the dashboard exposes are given as options (or preloaded from a persona),
and results are printed as tables.

Commands
--------
- simulate: Project a scenario and print KPIs, risk and behavior signals
- score: Print the risk assessment and its penalties
- compare: Compare current slider values against a saved snapshot
- snapshot: Save slider values to a JSON snapshot
- personas: List persona presets
- plot: Write a trajectory chart to an image file
- info: Display package and dependency versions

Example Usage
-------------
    # Project the student persona over 20 years in real terms
    $ finpath simulate --persona student --horizon 20 --real

    # Override one slider of a persona
    $ finpath simulate --persona salaried --savings 10

    # Save a scenario, then compare a change against it
    $ finpath snapshot saved.json --persona freelancer
    $ finpath compare --saved saved.json --persona freelancer --loan 30000

Environment
-----------
FINPATH_LOG_LEVEL, FINPATH_DEBUG, FINPATH_DEFAULT_HORIZON and
FINPATH_DEFAULT_PERSONA are read through ``AppSettings``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import AppSettings, SimulationConfig
from .constants import DEFAULT_OPTIMAL_SAVINGS, MAX_HORIZON_YEARS
from .exceptions import FinPathError
from .personas import get_persona, list_personas
from .rates import Inputs, normalize

logger = logging.getLogger(__name__)

SEVERITY_STYLES = {"info": "cyan", "warning": "yellow", "danger": "bold red"}
BAND_STYLES = {
    "stable": "green",
    "mild_risk": "yellow",
    "debt_pressure": "dark_orange",
    "high_stress": "bold red",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def input_options(func):
    """Attach the persona and slider options shared by most commands."""
    options = [
        click.option("--persona", "-p", type=str, default=None,
                     help="Preload slider values from a persona (student, freelancer, salaried)"),
        click.option("--income", type=float, default=None, help="Annual income"),
        click.option("--savings", type=float, default=None, help="Savings rate in percent"),
        click.option("--loan", type=float, default=None, help="Initial loan principal"),
        click.option("--lifestyle", type=float, default=None, help="Monthly lifestyle spend"),
        click.option("--returns", type=float, default=None, help="Annual return in percent"),
        click.option("--inflation", type=float, default=None, help="Annual inflation in percent"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def horizon_option(func):
    return click.option(
        "--horizon", "-H",
        type=click.IntRange(0, MAX_HORIZON_YEARS),
        default=None,
        help="Projection horizon in years (default: FINPATH_DEFAULT_HORIZON or 10)",
    )(func)


def resolve_inputs(
    settings: AppSettings,
    persona: Optional[str],
    sliders: Dict[str, Optional[float]],
) -> Tuple[Inputs, float]:
    """
    Build ``Inputs`` from a persona plus explicit slider overrides.

    Without a persona (option or ``FINPATH_DEFAULT_PERSONA``) all six
    sliders must be given. Returns the snapshot and the optimal savings
    rate for the present-bias rule.
    """
    raw: Dict[str, float] = {}
    optimal = DEFAULT_OPTIMAL_SAVINGS
    key = persona or settings.default_persona
    if key:
        preset = get_persona(key)
        raw.update(preset.raw())
        optimal = preset.optimal_savings
    raw.update({k: v for k, v in sliders.items() if v is not None})
    return normalize(raw), optimal


def _simulation_config(
    settings: AppSettings,
    horizon: Optional[int],
    real: bool,
    optimal: float,
) -> SimulationConfig:
    return SimulationConfig(
        horizon_years=settings.default_horizon if horizon is None else horizon,
        inflation_adjusted=real,
        optimal_savings=optimal,
    )


def _print_signals(console: Console, signals, quiet: bool) -> None:
    for s in signals:
        if quiet:
            click.echo(f"[{s.severity.value}] {s.title}: {s.message}")
        else:
            style = SEVERITY_STYLES[s.severity.value]
            console.print(f"[{style}]{s.title}[/{style}] - {s.message}")


# ---------------------------------------------------------------------------
# Command group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="finpath")
@click.option("--quiet", "-q", is_flag=True, help="Plain-text output without tables")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    FinPath - Personal Finance Trajectory Simulator.

    Projects net worth, savings and debt from six economic assumptions,
    scores financial resilience and flags behavioral biases between
    scenarios.

    Use 'finpath COMMAND --help' for command-specific help.
    """
    try:
        settings = AppSettings()
    except ValueError as e:
        _fail(e)

    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Settings: %s", settings.model_dump())
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


# ---------------------------------------------------------------------------
# simulate
# ---------------------------------------------------------------------------

@main.command()
@input_options
@horizon_option
@click.option("--real", is_flag=True, help="Report inflation-adjusted net worth")
@click.option(
    "--previous",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Snapshot of the previous scenario, for behavior detection",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the trajectory to a JSON file",
)
@click.pass_context
def simulate(
    ctx: click.Context,
    persona: Optional[str],
    horizon: Optional[int],
    real: bool,
    previous: Optional[Path],
    output: Optional[Path],
    **sliders: Optional[float],
) -> None:
    """
    Project a scenario over the horizon.

    Example:
        finpath simulate --persona student --horizon 20 --real
    """
    from .engine import evaluate
    from .serialization import load_snapshot, save_trajectory
    from .utils import format_currency

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    settings: AppSettings = ctx.obj["settings"]

    try:
        inputs, optimal = resolve_inputs(settings, persona, sliders)
        config = _simulation_config(settings, horizon, real, optimal)
        prev = load_snapshot(previous) if previous else None
        result = evaluate(inputs, config, previous=prev)
    except FinPathError as e:
        _fail(e)

    kpis = result.kpis
    view = "real" if real else "nominal"
    if quiet:
        click.echo(f"Net Worth ({view}): {format_currency(kpis.net_worth(real))}")
        click.echo(f"Total Saved: {format_currency(kpis.total_saved)}")
        click.echo(f"Loan Remaining: {format_currency(kpis.loan_remaining)}")
        click.echo(f"ROI: {kpis.roi:.1f}%")
        click.echo(f"Net Worth Change (YoY): {kpis.net_worth_change(real):+.1f}%")
        click.echo(f"Passive Income: {format_currency(kpis.monthly_passive_income)}/mo")
        click.echo(f"Opportunity Cost: {format_currency(result.opportunity_cost)}")
        click.echo(f"Risk Score: {result.risk.score} ({result.risk.label})")
    else:
        table = Table(title=f"Projection over {config.horizon_years} years", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row(f"Net Worth ({view})", format_currency(kpis.net_worth(real)))
        table.add_row("Total Saved", format_currency(kpis.total_saved))
        table.add_row("Loan Remaining", format_currency(kpis.loan_remaining))
        table.add_row("ROI", f"{kpis.roi:.1f}%")
        table.add_row("Net Worth Change (YoY)", f"{kpis.net_worth_change(real):+.1f}%")
        table.add_row("Passive Income/mo", format_currency(kpis.monthly_passive_income))
        table.add_row("", "")
        table.add_row("Annual Savings", format_currency(result.breakdown.annual_savings))
        table.add_row("Annual Spending", format_currency(result.breakdown.annual_spending))
        table.add_row("First-Year Growth", format_currency(result.breakdown.growth))
        table.add_row("Loan Payment", format_currency(result.breakdown.loan_payment))
        table.add_row("Opportunity Cost", format_currency(result.opportunity_cost))
        console.print(table)

        style = BAND_STYLES[result.risk.band.value]
        console.print(Panel(
            f"[{style}]{result.risk.label}[/{style}]\n{result.risk.narrative}",
            title=f"Risk Score {result.risk.score}/100",
            border_style=style,
        ))
        for rec in result.recommendations:
            console.print(f"[bold]{rec.title}[/bold]: {rec.text}")

    _print_signals(console, result.signals, quiet)

    if output:
        save_trajectory(result.trajectory, inputs, output)
        click.echo(f"Trajectory saved to {output}")


# ---------------------------------------------------------------------------
# score
# ---------------------------------------------------------------------------

@main.command()
@input_options
@click.pass_context
def score(ctx: click.Context, persona: Optional[str], **sliders: Optional[float]) -> None:
    """
    Print the risk assessment of a scenario.

    Example:
        finpath score --persona freelancer --loan 60000
    """
    from .risk import score as risk_score

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]

    try:
        inputs, _ = resolve_inputs(ctx.obj["settings"], persona, sliders)
    except FinPathError as e:
        _fail(e)

    assessment = risk_score(inputs)

    if quiet:
        click.echo(f"Score: {assessment.score}")
        click.echo(f"Band: {assessment.label}")
        for name, penalty in assessment.penalties.items():
            click.echo(f"{name}: -{penalty}")
        return

    table = Table(title="Risk Penalties")
    table.add_column("Factor", style="cyan")
    table.add_column("Penalty", justify="right")
    for name, penalty in assessment.penalties.items():
        table.add_row(name.replace("_", " ").title(), f"-{penalty}")
    console.print(table)

    style = BAND_STYLES[assessment.band.value]
    console.print(Panel(
        f"[{style}]{assessment.label}[/{style}]\n{assessment.narrative}",
        title=f"Risk Score {assessment.score}/100",
        border_style=style,
    ))


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--saved", "-s",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Snapshot of the saved scenario",
)
@input_options
@horizon_option
@click.option("--real", is_flag=True, help="Compare inflation-adjusted net worth")
@click.pass_context
def compare(
    ctx: click.Context,
    saved: Path,
    persona: Optional[str],
    horizon: Optional[int],
    real: bool,
    **sliders: Optional[float],
) -> None:
    """
    Compare current slider values against a saved snapshot.

    Example:
        finpath compare --saved saved.json --persona salaried --savings 15
    """
    from .scenario import compare as compare_scenarios
    from .serialization import load_snapshot
    from .utils import format_currency

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    settings: AppSettings = ctx.obj["settings"]

    try:
        reference = load_snapshot(saved)
        inputs, optimal = resolve_inputs(settings, persona, sliders)
        config = _simulation_config(settings, horizon, real, optimal)
        comparison = compare_scenarios(reference, inputs, config)
    except FinPathError as e:
        _fail(e)

    ref, cur, deltas = comparison.saved.kpis, comparison.current.kpis, comparison.deltas
    rows = [
        ("Net Worth", ref.net_worth(real), cur.net_worth(real), deltas.net_worth(real)),
        ("Total Saved", ref.total_saved, cur.total_saved, deltas.total_saved),
        ("Loan Remaining", ref.loan_remaining, cur.loan_remaining, deltas.loan_remaining),
    ]

    if quiet:
        for label, old, new, delta in rows:
            click.echo(f"{label}: {format_currency(old)} -> {format_currency(new)} ({delta:+.1f}%)")
    else:
        table = Table(title="Saved vs Current", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Saved", justify="right")
        table.add_column("Current", justify="right")
        table.add_column("Change", justify="right")
        for label, old, new, delta in rows:
            colour = "green" if delta >= 0 else "red"
            table.add_row(label, format_currency(old), format_currency(new),
                          f"[{colour}]{delta:+.1f}%[/{colour}]")
        console.print(table)

    _print_signals(console, comparison.signals, quiet)


# ---------------------------------------------------------------------------
# snapshot
# ---------------------------------------------------------------------------

@main.command()
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@input_options
@click.pass_context
def snapshot(
    ctx: click.Context,
    output_file: Path,
    persona: Optional[str],
    **sliders: Optional[float],
) -> None:
    """
    Save slider values to a JSON snapshot.

    Example:
        finpath snapshot saved.json --persona student --savings 20
    """
    from .serialization import save_snapshot

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]

    try:
        inputs, _ = resolve_inputs(ctx.obj["settings"], persona, sliders)
    except FinPathError as e:
        _fail(e)

    save_snapshot(inputs, output_file)

    if quiet:
        click.echo(f"Snapshot saved to {output_file}")
    else:
        console.print(f"[green]Snapshot saved to {output_file}[/green]")


# ---------------------------------------------------------------------------
# personas
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def personas(ctx: click.Context) -> None:
    """List persona presets."""
    from .utils import format_currency

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]

    if quiet:
        for p in list_personas():
            click.echo(p.key)
        return

    # One column per persona keeps the keys readable at 80 columns.
    presets = list_personas()
    table = Table(title="Personas")
    table.add_column("", style="cyan", no_wrap=True)
    for p in presets:
        table.add_column(p.key, justify="right", no_wrap=True)

    rows = [
        ("Name", lambda p: p.label),
        ("Income", lambda p: format_currency(p.income)),
        ("Savings", lambda p: f"{p.savings:g}%"),
        ("Loan", lambda p: format_currency(p.loan)),
        ("Lifestyle/mo", lambda p: format_currency(p.lifestyle)),
        ("Returns", lambda p: f"{p.returns:g}%"),
        ("Inflation", lambda p: f"{p.inflation:g}%"),
        ("Optimal Savings", lambda p: f"{p.optimal_savings:.0%}"),
    ]
    for label, cell in rows:
        table.add_row(label, *(cell(p) for p in presets))
    console.print(table)


# ---------------------------------------------------------------------------
# plot
# ---------------------------------------------------------------------------

@main.command()
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@input_options
@horizon_option
@click.option("--real", is_flag=True, help="Plot inflation-adjusted net worth")
@click.option(
    "--saved", "-s",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Overlay the net worth of a saved snapshot",
)
@click.option(
    "--smart-vs-impulsive",
    is_flag=True,
    help="Plot the smart and impulsive projections instead",
)
@click.pass_context
def plot(
    ctx: click.Context,
    output_file: Path,
    persona: Optional[str],
    horizon: Optional[int],
    real: bool,
    saved: Optional[Path],
    smart_vs_impulsive: bool,
    **sliders: Optional[float],
) -> None:
    """
    Write a trajectory chart to an image file.

    Example:
        finpath plot chart.png --persona student --horizon 30 --real
    """
    import matplotlib
    matplotlib.use("Agg")
    from matplotlib import pyplot as plt

    from .plotting import plot_scenarios, plot_trajectory
    from .scenario import smart_vs_impulsive as project_smart_vs_impulsive
    from .serialization import load_snapshot
    from .trajectory import simulate as run_simulation

    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    settings: AppSettings = ctx.obj["settings"]
    years = settings.default_horizon if horizon is None else horizon

    try:
        if smart_vs_impulsive:
            trajectories = project_smart_vs_impulsive(horizon_years=years)
            ax = plot_scenarios(trajectories, real=real, title="Smart vs Impulsive")
        else:
            inputs, _ = resolve_inputs(settings, persona, sliders)
            reference = (
                run_simulation(load_snapshot(saved), years) if saved else None
            )
            ax = plot_trajectory(
                run_simulation(inputs, years),
                real=real,
                saved=reference,
                title=f"Projection over {years} years",
            )
    except FinPathError as e:
        _fail(e)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    ax.figure.savefig(output_file, bbox_inches="tight", dpi=150)
    plt.close(ax.figure)

    if quiet:
        click.echo(f"Chart saved to {output_file}")
    else:
        console.print(f"[green]Chart saved to {output_file}[/green]")


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display package and dependency versions.
    """
    from importlib.metadata import PackageNotFoundError, version

    console: Console = ctx.obj["console"]
    settings: AppSettings = ctx.obj["settings"]

    info_lines = [
        f"FinPath Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]

    for name in ("numpy", "pandas", "pydantic", "pydantic-settings", "matplotlib", "rich", "click"):
        try:
            info_lines.append(f"{name}: {version(name)}")
        except PackageNotFoundError:
            info_lines.append(f"{name}: not installed")

    info_lines.append(f"Log level: {settings.effective_log_level}")

    if ctx.obj["quiet"]:
        for line in info_lines:
            click.echo(line)
    else:
        console.print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
