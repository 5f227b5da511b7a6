"""Save customizations for a user."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.utils import read_customizations_file

logger = logging.getLogger(__name__)


def save(
    user_id: Annotated[
        str,
        typer.Argument(help="User to save customizations for"),
    ],
    file: Annotated[
        Path,
        typer.Argument(help="Customizations JSON file"),
    ],
) -> None:
    """Save customizations from a JSON file, replacing any existing ones."""
    ctx = get_context()
    customizations = read_customizations_file(file)

    try:
        saved = ctx.repository.save(user_id, customizations)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    action = "Updated" if saved.created_at != saved.updated_at else "Saved"
    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} {action} customizations for '{user_id}'")
    print(f"  {ctx.repository.get_paths(user_id).customizations.resolve()}")
