"""List public holidays for a country."""

import logging

import typer
from typing_extensions import Annotated

from planner.exceptions import HolidayProviderError
from cli.context import get_context
from cli.display import TableRenderer
from cli.utils import resolve_year

logger = logging.getLogger(__name__)


def holidays(
    country_code: Annotated[
        str,
        typer.Argument(help="Two-letter country code, e.g. US or IN"),
    ],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year (default: current year)"),
    ] = None,
) -> None:
    """List the public holidays a calendar would mark."""
    ctx = get_context()
    year = resolve_year(year)
    country_code = country_code.upper()

    try:
        found = ctx.holiday_provider.fetch_holidays(country_code, year)
    except HolidayProviderError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    TableRenderer().render_holidays(found, country_code, year)
