"""Table renderer for user lists, holidays and moon phases."""

from pathlib import Path

from rich.table import Table

from planner.models.holiday import Holiday
from planner.models.saved import SavedCustomizations
from planner.moon_phase import MoonPhaseDate
from cli.display.console import console
from cli.display.formatters import format_datetime, format_moon_phase


class TableRenderer:
    """Render tables with Rich's Table class."""

    def render_user_list(self, saved: list[SavedCustomizations], storage_dir: Path) -> None:
        """Render users with saved customizations."""
        if not saved:
            console.print("No saved customizations found")
            return

        console.print(f"Listing users at {storage_dir.resolve()}:")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("USER", style="cyan")
        table.add_column("CREATED", style="dim")
        table.add_column("UPDATED", style="dim")

        for record in saved:
            table.add_row(
                record.user_id,
                format_datetime(record.created_at),
                format_datetime(record.updated_at),
            )

        console.print(table)

    def render_holidays(self, holidays: list[Holiday], country_code: str, year: int) -> None:
        if not holidays:
            console.print(f"No holidays found for {country_code} {year}")
            return

        table = Table(
            title=f"Holidays: {country_code} {year}",
            show_header=True,
            header_style="bold",
            box=None,
            padding=(0, 2),
        )
        table.add_column("DATE", style="cyan")
        table.add_column("DAY", style="dim")
        table.add_column("NAME")

        for holiday in holidays:
            table.add_row(
                holiday.date.isoformat(), holiday.date.strftime("%a"), holiday.name
            )

        console.print(table)

    def render_moon_phases(self, matches: list[MoonPhaseDate], year: int) -> None:
        if not matches:
            console.print(f"No matching moon phases in {year}")
            return

        table = Table(
            title=f"Moon phases: {year}",
            show_header=True,
            header_style="bold",
            box=None,
            padding=(0, 2),
        )
        table.add_column("DATE", style="cyan")
        table.add_column("DAY", style="dim")
        table.add_column("PHASE")

        for match in matches:
            table.add_row(
                match.date.isoformat(),
                match.date.strftime("%a"),
                format_moon_phase(match.phase),
            )

        console.print(table)
