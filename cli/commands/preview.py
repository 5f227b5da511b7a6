"""Preview a generated calendar in the terminal."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from planner.calendar_query import CalendarQuery
from cli.context import get_context
from cli.display import MonthRenderer
from cli.utils import load_source, resolve_year

logger = logging.getLogger(__name__)


def preview(
    user_id: Annotated[
        str | None,
        typer.Argument(help="User whose saved customizations to use"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Customizations JSON file to preview instead"),
    ] = None,
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year to generate (default: current year)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", min=1, max=12, help="Only show this month (1-12)"),
    ] = None,
) -> None:
    """Render month grids with tasks, holidays and moon phases."""
    ctx = get_context()
    customizations = load_source(ctx.repository, user_id, file)
    year = resolve_year(year)

    calendar_data = ctx.service.generator.generate(customizations, year)
    notices = ctx.service.notices(customizations, year)

    query = CalendarQuery(calendar_data)
    months = [query.month(month - 1)] if month else list(calendar_data.months)

    renderer = MonthRenderer()
    for index, month_data in enumerate(months):
        # Notices only once, under the last grid
        renderer.render_month(month_data, notices if index == len(months) - 1 else None)
