"""Show today's reminder digest."""

import logging
from datetime import date

import typer
from typing_extensions import Annotated

from planner.exceptions import ExportError
from planner.notifications import build_daily_digest
from cli.context import get_context
from cli.display import console
from cli.utils import parse_date, require_customizations, resolve_year

logger = logging.getLogger(__name__)


def today(
    user_id: Annotated[
        str,
        typer.Argument(help="User id"),
    ],
    on: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day to notify about (YYYY-MM-DD, default: today)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Show the digest even if already delivered"),
    ] = False,
) -> None:
    """Show the day's digest once, then remember it was delivered."""
    ctx = get_context()
    repository = ctx.repository
    target = parse_date(on) if on else date.today()
    resolve_year(target.year)

    customizations = require_customizations(repository, user_id)
    try:
        calendar_export = ctx.service.build_export(customizations, target.year)
    except ExportError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    state = repository.load_reminder_state(user_id)
    if force:
        state = state.model_copy(update={"notified_dates": state.notified_dates - {target}})

    digest, state = build_daily_digest(calendar_export.events, target, state)
    if digest is None:
        console.print("[dim]Nothing new to notify about[/dim]")
        return

    console.print(f"\n[bold]{digest.title}[/bold]")
    console.print(digest.body, markup=False)
    console.print()
    repository.save_reminder_state(user_id, state)
