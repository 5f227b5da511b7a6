"""Flatten a generated calendar into sync events for external calendars."""

import logging
import re
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from planner.calendar_generator import sunday_based_weekday
from planner.constants import WEEKDAY_NAMES, WEEKDAY_RRULE_CODES
from planner.exceptions import ExportError
from planner.models.calendar import CalendarData, Day, MonthData
from planner.models.customizations import Customizations
from planner.models.event import EventKind, SyncEvent

logger = logging.getLogger(__name__)

# Length of a timed reminder event
REMINDER_DURATION = timedelta(minutes=30)

_REMINDER_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})\s?([AaPp][Mm])?$")


def parse_reminder_time(value: str | None) -> time | None:
    """Parse a reminder time of day.

    Accepts 12-hour ("9:30 AM", "12:05pm") and 24-hour ("18:45") forms.

    Returns:
        The time, or None if value is empty or not a valid time
    """
    if not value:
        return None
    match = _REMINDER_TIME_RE.match(value.strip())
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    period = match.group(3)

    if period is not None:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12
        if period.upper() == "PM":
            hour += 12
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _until(year: int) -> str:
    return f"{year}1231T235959Z"


class SyncEventBuilder:
    """Build a day-ordered list of sync events from a generated calendar.

    Each task, weekly banner, monthly task, holiday and moon phase becomes
    one event. Task events are timed when a reminder time is configured;
    holidays and moon phases are always all-day.

    With recurring=True the day planner and month planner are emitted as
    one recurring event each instead of one event per occurrence.
    """

    def __init__(self, time_zone: str = "UTC", recurring: bool = False):
        """Initialize the builder.

        Raises:
            ExportError: If time_zone is not a known IANA time zone
        """
        try:
            ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ExportError(f"Unknown time zone: {time_zone}") from e
        self.time_zone = time_zone
        self.recurring = recurring

    def build(
        self, customizations: Customizations, calendar_data: CalendarData
    ) -> list[SyncEvent]:
        """Flatten the calendar into events sorted by date, then kind."""
        reminder = parse_reminder_time(customizations.reminder_time)
        if customizations.reminder_time and reminder is None:
            logger.warning(
                f"Ignoring invalid reminder time '{customizations.reminder_time}'"
            )

        events = []
        if self.recurring:
            events.extend(
                self._recurring_events(customizations, calendar_data.year, reminder)
            )
        for month in calendar_data.months:
            events.extend(self._month_events(customizations, month, reminder))

        events.sort(key=lambda e: (e.date, e.kind.sort_order))
        logger.debug(f"Built {len(events)} sync events for {calendar_data.year}")
        return events

    def _month_events(
        self,
        customizations: Customizations,
        month: MonthData,
        reminder: time | None,
    ) -> list[SyncEvent]:
        events = []

        if month.monthly_task and not self.recurring:
            events.append(
                self._task_event(
                    EventKind.MONTH,
                    month.monthly_task,
                    "Monthly Planner Task",
                    date(month.year, month.month + 1, 1),
                    reminder,
                )
            )

        for weekly_task in month.weekly_tasks:
            first_day = next(
                day for day in month.weeks[weekly_task.week_index] if not day.is_padding
            )
            events.append(
                self._task_event(
                    EventKind.WEEK,
                    weekly_task.text,
                    f"Week Planner: Week {weekly_task.week_number} of {month.month_name}",
                    first_day.date,
                    reminder,
                )
            )

        for week in month.weeks:
            for day in week:
                if not day.is_padding:
                    events.extend(self._day_events(customizations, day, reminder))

        return events

    def _day_events(
        self, customizations: Customizations, day: Day, reminder: time | None
    ) -> list[SyncEvent]:
        events = []

        # The day-planner task, when present, is always the first task
        planner_text = customizations.day_task(day.day_of_week)
        for position, task in enumerate(day.tasks):
            from_planner = position == 0 and planner_text is not None
            if from_planner and self.recurring:
                continue
            if from_planner:
                description = f"Day Planner: {WEEKDAY_NAMES[day.day_of_week].title()}"
            else:
                description = "Cheat Day"
            events.append(
                self._task_event(
                    EventKind.DAY, task.text, description, day.date, reminder
                )
            )

        if day.is_holiday and day.holiday_name:
            events.append(
                SyncEvent(
                    kind=EventKind.HOLIDAY,
                    summary=day.holiday_name,
                    description="Public Holiday",
                    date=day.date,
                    time_zone=self.time_zone,
                    use_default_reminders=False,
                )
            )

        if day.moon_phase is not None:
            events.append(
                SyncEvent(
                    kind=EventKind.MOON_PHASE,
                    summary=f"{day.moon_phase.value} - Moon Phase",
                    description=f"Moon phase: {day.moon_phase.value}",
                    date=day.date,
                    time_zone=self.time_zone,
                    use_default_reminders=False,
                )
            )

        return events

    def _recurring_events(
        self, customizations: Customizations, year: int, reminder: time | None
    ) -> list[SyncEvent]:
        events = []
        jan_first = date(year, 1, 1)

        for day_of_week, day_name in enumerate(WEEKDAY_NAMES):
            text = customizations.day_task(day_of_week)
            if not text:
                continue
            # First occurrence of this weekday in the year
            shift = (day_of_week - sunday_based_weekday(jan_first)) % 7
            events.append(
                self._task_event(
                    EventKind.DAY,
                    text,
                    f"Day Planner: {day_name.title()}",
                    jan_first + timedelta(days=shift),
                    reminder,
                    recurrence=[
                        f"RRULE:FREQ=WEEKLY;BYDAY={WEEKDAY_RRULE_CODES[day_of_week]};"
                        f"UNTIL={_until(year)}"
                    ],
                )
            )

        if customizations.month_planner:
            events.append(
                self._task_event(
                    EventKind.MONTH,
                    customizations.month_planner,
                    "Monthly Planner Task",
                    jan_first,
                    reminder,
                    recurrence=[f"RRULE:FREQ=MONTHLY;BYMONTHDAY=1;UNTIL={_until(year)}"],
                )
            )

        return events

    def _task_event(
        self,
        kind: EventKind,
        summary: str,
        description: str,
        day: date,
        reminder: time | None,
        recurrence: list[str] | None = None,
    ) -> SyncEvent:
        start = end = None
        if reminder is not None:
            start = datetime.combine(day, reminder)
            end = start + REMINDER_DURATION

        return SyncEvent(
            kind=kind,
            summary=summary,
            description=description,
            date=day,
            start=start,
            end=end,
            time_zone=self.time_zone,
            recurrence=recurrence or [],
            use_default_reminders=True,
        )
