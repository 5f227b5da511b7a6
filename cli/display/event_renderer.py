"""Rich-based sync event renderer for terminal display."""

from collections import defaultdict
from datetime import date

from rich.console import Console
from rich.text import Text

from planner.models.event import EventKind, SyncEvent
from cli.display.console import console as shared_console
from cli.display.formatters import format_day_label, format_event_time

KIND_STYLES = {
    EventKind.MONTH: "green",
    EventKind.WEEK: "magenta",
    EventKind.DAY: "default",
    EventKind.HOLIDAY: "red",
    EventKind.MOON_PHASE: "yellow",
}


class EventRenderer:
    """Render sync events using Rich.

    Colors follow the event kind: month tasks green, week banners
    magenta, holidays red, moon phases yellow.
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_agenda(
        self,
        events: list[SyncEvent],
        title: str | None = None,
        subtitle: str | None = None,
        today: date | None = None,
    ) -> None:
        """Render events grouped by day.

        Args:
            events: Events to render (sorted by date).
            title: Optional title for the display header.
            subtitle: Optional subtitle (e.g., date range info).
            today: Reference date for relative labels (defaults to today).
        """
        if not events:
            self.render_empty()
            return

        self._print_header(title, subtitle)

        by_date: dict[date, list[SyncEvent]] = defaultdict(list)
        for event in events:
            by_date[event.date].append(event)

        today = today or date.today()
        for event_date in sorted(by_date):
            self.console.print(f"\n[cyan]{format_day_label(event_date, today)}[/cyan]")
            for event in by_date[event_date]:
                line = Text("  ")
                line.append(f"{format_event_time(event):<14}", style="dim")
                line.append(event.summary, style=KIND_STYLES[event.kind])
                if event.is_recurring:
                    line.append(" (repeats)", style="dim")
                self.console.print(line)

        self._print_footer(len(events))

    def render_empty(self, message: str | None = None) -> None:
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    def _print_header(self, title: str | None, subtitle: str | None) -> None:
        self.console.print()
        self.console.print("━" * 40)
        if title:
            header_text = f"  {title}"
            if subtitle:
                header_text += f" [dim]({subtitle})[/dim]"
            self.console.print(f"[bold]{header_text}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        self.console.print()
        self.console.print("─" * 40)
        event_word = "event" if count == 1 else "events"
        self.console.print(f"[dim]{count} {event_word}[/dim]")
        self.console.print()
