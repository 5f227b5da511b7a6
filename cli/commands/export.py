"""Export a generated calendar to ICS or JSON."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from planner.exceptions import ExportError, UnsupportedFormatError
from planner.output import SUPPORTED_FORMATS, get_writer
from cli.context import get_context
from cli.utils import load_source, resolve_year

logger = logging.getLogger(__name__)


def export(
    user_id: Annotated[
        str | None,
        typer.Argument(help="User whose saved customizations to export"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Customizations JSON file to export instead"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: planner-<year>.<format>)"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", help=f"Output format: {', '.join(SUPPORTED_FORMATS)}"),
    ] = "ics",
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year to export (default: current year)"),
    ] = None,
    tz: Annotated[
        str | None,
        typer.Option("--tz", help="IANA time zone for timed reminders"),
    ] = None,
    recurring: Annotated[
        bool,
        typer.Option("--recurring", help="Emit repeating rules instead of one event per occurrence"),
    ] = False,
    events: Annotated[
        bool,
        typer.Option("--events", help="Include sync events in JSON output"),
    ] = False,
) -> None:
    """Export a year to a calendar file.

    ICS output can be imported into Google Calendar, Apple Calendar or
    Outlook. JSON output contains the month grids, and with --events the
    flattened sync events as well.
    """
    ctx = get_context()

    try:
        writer = get_writer(format, include_events=events)
    except UnsupportedFormatError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    customizations = load_source(ctx.repository, user_id, file)
    year = resolve_year(year)
    ctx.service.notices(customizations, year)

    try:
        calendar_export = ctx.service.build_export(
            customizations, year, time_zone=tz, recurring=recurring
        )
        path = output or Path(f"planner-{year}.{writer.get_extension()}")
        writer.write(calendar_export, path)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        raise typer.Exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported {format.upper()}")
    print(f"  {path.resolve()}")
    print(f"  Events: {len(calendar_export.events)}")
