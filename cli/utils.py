"""Shared helpers for CLI commands."""

import json
import logging
from datetime import date, datetime
from pathlib import Path

import typer

from planner.calendar_service import MAX_YEAR, MIN_YEAR
from planner.exceptions import CustomizationsNotFoundError
from planner.models.customizations import Customizations
from planner.storage.customization_repository import CustomizationRepository

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def read_customizations_file(path: Path) -> Customizations:
    """Load customizations from a JSON file.

    Exits with an error if the file is missing or not a JSON object.
    """
    if not path.exists():
        logger.error(f"File not found: {path}")
        raise typer.Exit(1)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        logger.error(f"Expected a JSON object in {path}")
        raise typer.Exit(1)

    # Accept a full saved record as well as bare customizations
    if isinstance(data.get("customizations"), dict):
        data = data["customizations"]
    return Customizations.model_validate(data)


def require_customizations(
    repository: CustomizationRepository, user_id: str
) -> Customizations:
    """Load a user's customizations or exit with an error."""
    try:
        return repository.load_customizations(user_id)
    except (CustomizationsNotFoundError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(1)


def resolve_year(year: int | None) -> int:
    """The given year (default: current year), or exit if out of range."""
    if year is None:
        return date.today().year
    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.error(f"Year must be between {MIN_YEAR} and {MAX_YEAR}: {year}")
        raise typer.Exit(1)
    return year


def load_source(
    repository: CustomizationRepository, user_id: str | None, file: Path | None
) -> Customizations:
    """Customizations from a file if given, otherwise from a saved user."""
    if file is not None:
        return read_customizations_file(file)
    if user_id is None:
        logger.error("Provide a user id or --file")
        raise typer.Exit(1)
    return require_customizations(repository, user_id)
