"""Renderer for a user's saved customizations."""

from rich.markup import escape

from planner.constants import WEEKDAY_NAMES
from planner.models.customizations import Customizations
from planner.models.saved import SavedCustomizations
from cli.display.console import console
from cli.display.formatters import format_datetime, format_moon_phase


class CustomizationRenderer:
    """Show the recurrence rules behind a user's calendar."""

    def render(self, saved: SavedCustomizations) -> None:
        console.print()
        console.print(f"[bold]Customizations: {saved.user_id}[/bold]")
        console.print(f"  Created: {format_datetime(saved.created_at)}")
        console.print(f"  Updated: {format_datetime(saved.updated_at)}")
        self.render_rules(saved.customizations)

    def render_rules(self, customizations: Customizations) -> None:
        console.print(
            f"\n[bold]Week starts on:[/bold] {customizations.week_starts_on.value.title()}"
        )

        console.print("\n[bold]Day planner:[/bold]")
        if not customizations.day_planner:
            console.print("  [dim](none)[/dim]")
        for day_name in WEEKDAY_NAMES:
            text = customizations.day_planner.get(day_name)
            if text:
                console.print(f"  {day_name.title():<10} {escape(text)}")

        console.print("\n[bold]Week planner:[/bold]")
        if not customizations.week_planner:
            console.print("  [dim](none)[/dim]")
        for ordinal, text in sorted(customizations.week_planner.items()):
            console.print(f"  Week {ordinal:<5} {escape(text)}")

        month_text = (
            escape(customizations.month_planner)
            if customizations.month_planner
            else "[dim](none)[/dim]"
        )
        console.print(f"\n[bold]Month planner:[/bold] {month_text}")

        cheat_day = customizations.cheat_day
        if cheat_day is not None and cheat_day.enabled and cheat_day.day_of_month:
            console.print(
                f"[bold]Cheat day:[/bold] day {cheat_day.day_of_month}: {escape(cheat_day.text)}"
            )
        else:
            console.print("[bold]Cheat day:[/bold] [dim]off[/dim]")

        if customizations.reminder_time:
            console.print(f"[bold]Reminder time:[/bold] {escape(customizations.reminder_time)}")

        if customizations.include_holidays:
            country = customizations.country_code or "[yellow]no country set[/yellow]"
            console.print(f"[bold]Holidays:[/bold] {country}")
        else:
            console.print("[bold]Holidays:[/bold] [dim]off[/dim]")

        phases = sorted(customizations.moon_phases, key=lambda phase: phase.value)
        phase_text = ", ".join(format_moon_phase(phase) for phase in phases)
        console.print(f"[bold]Moon phases:[/bold] {phase_text or '[dim](none)[/dim]'}")
        console.print()
