"""Calendar query module for selecting days from a generated calendar."""

from datetime import date, timedelta

from planner.models.calendar import CalendarData, Day, MonthData, WeeklyTask


class CalendarQuery:
    """Select days and banners from a generated calendar.

    Padding cells are never returned; every method works on real days
    in date order.
    """

    def __init__(self, calendar_data: CalendarData):
        """Initialize with a generated calendar.

        Args:
            calendar_data: Calendar to query.
        """
        self.calendar_data = calendar_data
        self._days = [
            day
            for month in calendar_data.months
            for week in month.weeks
            for day in week
            if not day.is_padding
        ]
        self._by_date = {day.date: day for day in self._days}

    def days(self) -> list[Day]:
        """All real days of the year, in order."""
        return list(self._days)

    def on_date(self, target: date) -> Day | None:
        """The day cell for a date, or None if outside the year."""
        return self._by_date.get(target)

    def month(self, index: int) -> MonthData:
        """Month by 0-based index.

        Raises:
            IndexError: If index is not in 0..11
        """
        if not 0 <= index < len(self.calendar_data.months):
            raise IndexError(f"Month index out of range: {index}")
        return self.calendar_data.months[index]

    def date_range(self, start: date, end: date) -> list[Day]:
        """Days within a date range (inclusive)."""
        return [day for day in self._days if start <= day.date <= end]

    def upcoming(self, days: int = 7, ref_date: date | None = None) -> list[Day]:
        """Days in the next N days, starting at ref_date (defaults to today)."""
        start = ref_date or date.today()
        end = start + timedelta(days=days - 1)
        return self.date_range(start, end)

    def holidays(self) -> list[Day]:
        """Days flagged as holidays."""
        return [day for day in self._days if day.is_holiday]

    def moon_days(self) -> list[Day]:
        """Days with a highlighted moon phase."""
        return [day for day in self._days if day.moon_phase is not None]

    def weekly_task_for(self, target: date) -> WeeklyTask | None:
        """Week banner shown on the row containing a date."""
        if target not in self._by_date:
            return None
        month = self.calendar_data.months[target.month - 1]
        for week_index, week in enumerate(month.weeks):
            if any(day.date == target for day in week):
                return month.weekly_task(week_index)
        return None
