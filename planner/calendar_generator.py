"""Calendar generation: expand recurrence rules into a year of month grids."""

import calendar
import logging
import math
from datetime import date

from planner.constants import MONTH_NAMES, WEEKDAY_SHORT_NAMES
from planner.holiday_provider import HolidayProvider, HolidaySource
from planner.models.calendar import (
    CalendarData,
    Day,
    MonthData,
    Task,
    TaskType,
    WeeklyTask,
)
from planner.models.customizations import Customizations, MoonPhase, WeekStart
from planner.models.holiday import Holiday
from planner.moon_phase import MoonPhaseCalculator

logger = logging.getLogger(__name__)

# Row that receives the week-1 banner when a month spills into a sixth row
SIXTH_WEEK_INDEX = 5


def sunday_based_weekday(day: date) -> int:
    """Weekday with 0 = Sunday .. 6 = Saturday."""
    return (day.weekday() + 1) % 7


def start_offset(first_day_of_week: int, week_start: WeekStart) -> int:
    """Number of padding cells before day 1 of a month.

    Args:
        first_day_of_week: Weekday of day 1 (0 = Sunday)
        week_start: Which weekday the grid's first column shows
    """
    if week_start == WeekStart.SUNDAY:
        return first_day_of_week
    return 6 if first_day_of_week == 0 else first_day_of_week - 1


def week_in_month(day_of_month: int, offset: int) -> int:
    """1-based grid row a day falls in."""
    return (day_of_month + offset - 1) // 7 + 1


def grid_cell_count(offset: int, days_in_month: int) -> int:
    """Smallest multiple of 7 that fits the padding and all days."""
    return math.ceil((offset + days_in_month) / 7) * 7


class CalendarGenerator:
    """Build CalendarData from Customizations.

    Generation is pure and deterministic for a given provider: holiday
    and moon-phase lookups are computed once per call and never cached
    across calls.
    """

    def __init__(
        self,
        holiday_provider: HolidaySource | None = None,
        moon_calculator: MoonPhaseCalculator | None = None,
    ):
        self.holiday_provider = holiday_provider or HolidayProvider()
        self.moon_calculator = moon_calculator or MoonPhaseCalculator()

    def generate(self, customizations: Customizations, year: int) -> CalendarData:
        """Generate a full year of month grids."""
        holidays_by_date = self._holidays_by_date(customizations, year)
        moon_phases_by_date = self.moon_calculator.by_date(
            year, customizations.moon_phases
        )

        months = tuple(
            self._build_month(
                customizations, year, month, holidays_by_date, moon_phases_by_date
            )
            for month in range(12)
        )
        logger.debug(
            f"Generated {year}: {len(holidays_by_date)} holidays, "
            f"{len(moon_phases_by_date)} moon phase days"
        )
        return CalendarData(year=year, months=months)

    def _holidays_by_date(
        self, customizations: Customizations, year: int
    ) -> dict[date, Holiday]:
        """Holiday lookup for the year; empty if disabled or unavailable."""
        if not customizations.holidays_enabled:
            return {}

        by_date: dict[date, Holiday] = {}
        for holiday in self.holiday_provider.get_holidays(
            customizations.country_code, year
        ):
            # First holiday listed for a date wins
            by_date.setdefault(holiday.date, holiday)
        return by_date

    def _build_month(
        self,
        customizations: Customizations,
        year: int,
        month: int,
        holidays_by_date: dict[date, Holiday],
        moon_phases_by_date: dict[date, MoonPhase],
    ) -> MonthData:
        """Build one month grid (month is 0-based)."""
        first_day = date(year, month + 1, 1)
        days_in_month = calendar.monthrange(year, month + 1)[1]
        offset = start_offset(
            sunday_based_weekday(first_day), customizations.week_starts_on
        )
        row_count = grid_cell_count(offset, days_in_month) // 7

        weeks = []
        weekly_tasks: dict[int, str] = {}
        for week_index in range(row_count):
            week = []
            for column in range(7):
                day_of_month = week_index * 7 + column - offset + 1
                if day_of_month < 1 or day_of_month > days_in_month:
                    week.append(
                        self._padding_day(column, customizations.week_starts_on)
                    )
                    continue

                day = date(year, month + 1, day_of_month)
                week_text = customizations.week_task(
                    week_in_month(day_of_month, offset)
                )
                if week_text and week_index not in weekly_tasks:
                    weekly_tasks[week_index] = week_text

                week.append(
                    self._build_day(
                        customizations,
                        day,
                        holidays_by_date.get(day),
                        moon_phases_by_date.get(day),
                    )
                )
            weeks.append(tuple(week))

        # Only week 1 repeats into a sixth row
        if row_count == 6:
            first_week_text = customizations.week_task(1)
            if first_week_text:
                weekly_tasks[SIXTH_WEEK_INDEX] = first_week_text

        return MonthData(
            month=month,
            month_name=MONTH_NAMES[month],
            year=year,
            weeks=tuple(weeks),
            weekly_tasks=tuple(
                WeeklyTask(week_index=index, week_number=index + 1, text=text)
                for index, text in sorted(weekly_tasks.items())
            ),
            monthly_task=customizations.month_planner,
        )

    def _build_day(
        self,
        customizations: Customizations,
        day: date,
        holiday: Holiday | None,
        moon_phase: MoonPhase | None,
    ) -> Day:
        """Build a real day cell with its tasks and annotations."""
        day_of_week = sunday_based_weekday(day)

        tasks = []
        day_text = customizations.day_task(day_of_week)
        if day_text:
            tasks.append(Task(type=TaskType.DAY, text=day_text))

        cheat_day = customizations.cheat_day
        if cheat_day is not None and cheat_day.applies_to(day.day):
            tasks.append(Task(type=TaskType.DAY, text=cheat_day.text))

        return Day(
            date=day,
            day_of_month=day.day,
            day_of_week=day_of_week,
            day_name=WEEKDAY_SHORT_NAMES[day_of_week],
            is_current_month=True,
            tasks=tuple(tasks),
            is_holiday=holiday is not None,
            holiday_name=holiday.name if holiday else None,
            moon_phase=moon_phase,
        )

    def _padding_day(self, column: int, week_start: WeekStart) -> Day:
        """Empty cell; day_of_week is the weekday shown in that column."""
        first_column = 0 if week_start == WeekStart.SUNDAY else 1
        return Day(
            day_of_month=0,
            day_of_week=(first_column + column) % 7,
            is_current_month=False,
        )


def generate_calendar(
    customizations: Customizations,
    year: int | None = None,
    holiday_provider: HolidaySource | None = None,
) -> CalendarData:
    """Generate a calendar for a year (defaults to the current year)."""
    if year is None:
        year = date.today().year
    generator = CalendarGenerator(holiday_provider=holiday_provider)
    return generator.generate(customizations, year)
