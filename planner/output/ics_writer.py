"""ICS file writer for generated calendars."""

import logging
import uuid
from collections import Counter
from datetime import datetime, timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from icalendar import Alarm, Calendar, Event, vRecur

from planner.exceptions import ExportError
from planner.models.event import SyncEvent
from planner.models.export import CalendarExport

logger = logging.getLogger(__name__)

PRODID = "-//Planner Calendar//EN"

# Stable UIDs let re-exports update events instead of duplicating them
_UID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "planner-calendar")


class ICSWriter:
    """Writer for ICS calendar files."""

    def render(self, export: CalendarExport) -> bytes:
        """Build the iCalendar document.

        Raises:
            ExportError: If an event uses an unknown time zone
        """
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", f"{export.name} {export.calendar.year}")
        cal.add("X-WR-TIMEZONE", export.time_zone)

        seen: Counter[str] = Counter()
        dtstamp = datetime.now(timezone.utc)
        for sync_event in export.events:
            key = f"{sync_event.date.isoformat()}/{sync_event.kind.value}/{sync_event.summary}"
            seen[key] += 1
            uid = uuid.uuid5(_UID_NAMESPACE, f"{key}/{seen[key]}")
            cal.add_component(self._build_event(sync_event, uid, dtstamp))

        ical_content = cal.to_ical()
        if not ical_content:
            raise ExportError("Calendar.to_ical() returned empty content")
        return ical_content

    def _build_event(
        self, sync_event: SyncEvent, uid: uuid.UUID, dtstamp: datetime
    ) -> Event:
        event = Event()

        # Required fields
        event.add("summary", sync_event.summary)
        event.add("uid", f"{uid}@planner")
        event.add("dtstamp", dtstamp)
        if sync_event.description:
            event.add("description", sync_event.description)

        if sync_event.is_all_day:
            event.add("dtstart", sync_event.date)
            # All-day events end on the next day (DTEND is exclusive)
            try:
                event.add("dtend", sync_event.date + timedelta(days=1))
            except OverflowError as e:
                raise ExportError(
                    f"Event '{sync_event.summary}' on {sync_event.date} has no "
                    "representable end date"
                ) from e
        else:
            try:
                tz = ZoneInfo(sync_event.time_zone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ExportError(
                    f"Event '{sync_event.summary}' uses unknown time zone "
                    f"'{sync_event.time_zone}'"
                ) from e
            event.add("dtstart", sync_event.start.replace(tzinfo=tz))
            event.add("dtend", sync_event.end.replace(tzinfo=tz))

        for rule in sync_event.recurrence:
            event.add("rrule", vRecur.from_ical(rule.removeprefix("RRULE:")))

        if sync_event.use_default_reminders and not sync_event.is_all_day:
            alarm = Alarm()
            alarm.add("action", "DISPLAY")
            alarm.add("description", sync_event.summary)
            alarm.add("trigger", timedelta(0))
            event.add_component(alarm)

        return event

    def write(self, export: CalendarExport, path: Path) -> None:
        """Write calendar to ICS file."""
        ical_content = self.render(export)

        try:
            with open(path, "wb") as f:
                f.write(ical_content)

            # Verify file was written
            if path.stat().st_size == 0:
                raise IOError(f"File was created but is empty: {path}")
        except OSError:
            # Remove empty file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise

        logger.info(f"Wrote {len(export.events)} events to {path}")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
