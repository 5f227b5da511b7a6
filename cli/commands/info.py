"""Show a user's saved customizations."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import CustomizationRenderer, console

logger = logging.getLogger(__name__)


def info(
    user_id: Annotated[
        str,
        typer.Argument(help="User id"),
    ],
) -> None:
    """Show the recurrence rules saved for a user."""
    ctx = get_context()

    try:
        saved = ctx.repository.load(user_id)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if saved is None:
        console.print(f"\n[red]No customizations saved for '{user_id}'[/red]")
        raise typer.Exit(1)

    CustomizationRenderer().render(saved)
    console.print(f"[dim]{ctx.repository.get_paths(user_id).directory.resolve()}[/dim]")
