"""Delete a user's saved customizations."""

import logging

import typer
from typing_extensions import Annotated

from planner.exceptions import CustomizationsNotFoundError
from cli.context import get_context

logger = logging.getLogger(__name__)


def delete(
    user_id: Annotated[
        str,
        typer.Argument(help="User whose customizations to delete"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete a user's customizations and reminder state."""
    ctx = get_context()
    repository = ctx.repository

    try:
        paths = repository.get_paths(user_id)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not force:
        print(f"\nDelete customizations for '{user_id}'")
        print(f"  Directory: {paths.directory}")
        print()
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    try:
        repository.delete(user_id)
    except CustomizationsNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Deleted '{user_id}'")
