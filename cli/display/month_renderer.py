"""Month grid renderer."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from planner.constants import WEEKDAY_SHORT_NAMES
from planner.models.calendar import Day, MonthData
from cli.display.console import console as shared_console
from cli.display.formatters import MOON_SYMBOLS


class MonthRenderer:
    """Render a month grid as a Rich table.

    Each week row is followed by its week-planner banner (if any); the
    monthly task is shown under the title. Holidays are red, moon phases
    get a symbol next to the day number.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render_month(self, month: MonthData, notices: list[str] | None = None) -> None:
        """Render one month.

        Args:
            month: Month to render.
            notices: Optional non-fatal messages to show under the grid.
        """
        title = f"{month.month_name} {month.year}"
        caption = f"Monthly: {month.monthly_task}" if month.monthly_task else None

        table = Table(
            title=title,
            caption=caption,
            show_header=True,
            header_style="bold",
            show_lines=True,
            expand=True,
        )
        # Column headers follow the weekday of the first real row
        for day_of_week in self._column_weekdays(month):
            table.add_column(WEEKDAY_SHORT_NAMES[day_of_week], vertical="top", ratio=1)

        for week_index, week in enumerate(month.weeks):
            table.add_row(*(self._format_cell(day) for day in week))
            banner = month.weekly_task(week_index)
            if banner:
                table.add_row(
                    Text(f"Week {banner.week_number}: {banner.text}", style="magenta"),
                    *([""] * 6),
                )

        self.console.print(table)
        for notice in notices or []:
            self.console.print(f"[yellow]![/yellow] {notice}")

    def _column_weekdays(self, month: MonthData) -> list[int]:
        return [day.day_of_week for day in month.weeks[0]]

    def _format_cell(self, day: Day) -> Text:
        if day.is_padding:
            return Text("")

        cell = Text()
        cell.append(str(day.day_of_month), style="bold red" if day.is_holiday else "bold")
        if day.moon_phase is not None:
            cell.append(f" {MOON_SYMBOLS[day.moon_phase]}")
        if day.holiday_name:
            cell.append(f"\n{day.holiday_name}", style="red")
        for task in day.tasks:
            cell.append(f"\n• {task.text}", style="cyan")
        return cell
