"""Show upcoming events for a user."""

import logging
from datetime import date, timedelta

import typer
from typing_extensions import Annotated

from planner.calendar_service import MAX_YEAR
from planner.exceptions import ExportError
from cli.context import get_context
from cli.display import EventRenderer
from cli.utils import parse_date, require_customizations

logger = logging.getLogger(__name__)


def agenda(
    user_id: Annotated[
        str,
        typer.Argument(help="User id"),
    ],
    days: Annotated[
        int | None,
        typer.Option("--days", "-n", min=1, help="Number of days to show (default: PREVIEW_DAYS)"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--from", help="First day (YYYY-MM-DD, default: today)"),
    ] = None,
    tz: Annotated[
        str | None,
        typer.Option("--tz", help="IANA time zone for timed reminders"),
    ] = None,
) -> None:
    """Show the events a calendar app would display for the next few days."""
    ctx = get_context()
    days = days or ctx.config.preview_days
    first = parse_date(start) if start else date.today()
    try:
        last = first + timedelta(days=days - 1)
    except OverflowError:
        last = None
    if last is None or last.year > MAX_YEAR:
        logger.error(f"Agenda range must end by year {MAX_YEAR}")
        raise typer.Exit(1)

    customizations = require_customizations(ctx.repository, user_id)

    # The range can cross into the next year
    events = []
    try:
        for year in range(first.year, last.year + 1):
            calendar_export = ctx.service.build_export(customizations, year, time_zone=tz)
            events.extend(e for e in calendar_export.events if first <= e.date <= last)
    except ExportError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    subtitle = f"{first.isoformat()} to {last.isoformat()}"
    EventRenderer().render_agenda(events, title=user_id, subtitle=subtitle, today=date.today())
