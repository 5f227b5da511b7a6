"""List highlighted moon phase dates."""

import typer
from typing_extensions import Annotated

from planner.models.customizations import MoonPhase
from planner.moon_phase import MoonPhaseCalculator
from cli.display import TableRenderer
from cli.utils import resolve_year


def moon(
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year (default: current year)"),
    ] = None,
    phase: Annotated[
        list[MoonPhase] | None,
        typer.Option(
            "--phase",
            "-p",
            case_sensitive=False,
            help="Phase to include (repeatable, default: all)",
        ),
    ] = None,
) -> None:
    """List the dates each moon phase is highlighted in a year."""
    year = resolve_year(year)
    phases = phase or list(MoonPhase)
    TableRenderer().render_moon_phases(MoonPhaseCalculator().for_year(year, phases), year)
