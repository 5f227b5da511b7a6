"""Tests for output layer."""

import json
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

import pytest
from icalendar import Calendar as ICalendar

from planner.calendar_service import CalendarService
from planner.exceptions import ExportError, UnsupportedFormatError
from planner.models.calendar import CalendarData
from planner.models.customizations import Customizations
from planner.models.event import EventKind, SyncEvent
from planner.models.export import CalendarExport
from planner.output import (
    ICSWriter,
    JSONWriter,
    SyncEventBuilder,
    get_writer,
    parse_reminder_time,
)


@pytest.fixture
def service(config, fake_holidays):
    return CalendarService(config, holiday_provider=fake_holidays)


@pytest.fixture
def customizations():
    return Customizations.model_validate(
        {
            "dayPlanner": {"monday": "Gym"},
            "weekPlanner": {"1": "Plan week"},
            "monthPlanner": "Pay rent",
            "cheatDay": {"enabled": True, "dayOfMonth": 15, "actionText": "Pizza"},
            "includeHolidays": True,
            "countryCode": "US",
            "moonPhases": ["Poornima"],
        }
    )


def vevents(ical_content: bytes):
    return list(ICalendar.from_ical(ical_content).walk("VEVENT"))


@pytest.mark.parametrize(
    "value,expected",
    [
        ("9:30 AM", time(9, 30)),
        ("12:05 pm", time(12, 5)),
        ("12:00 AM", time(0, 0)),
        ("11:45PM", time(23, 45)),
        ("18:45", time(18, 45)),
        ("7:00", time(7, 0)),
        ("13:00 PM", None),
        ("25:00", None),
        ("soon", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_reminder_time(value, expected):
    assert parse_reminder_time(value) == expected


def test_unknown_time_zone_rejected():
    with pytest.raises(ExportError):
        SyncEventBuilder(time_zone="Mars/Olympus_Mons")


def test_events_sorted_by_date_then_kind(service, customizations):
    export = service.build_export(customizations, 2024)
    keys = [(e.date, e.kind.sort_order) for e in export.events]
    assert keys == sorted(keys)

    jan_1 = [e for e in export.events if e.date == date(2024, 1, 1)]
    assert [e.kind for e in jan_1] == [
        EventKind.MONTH,
        EventKind.WEEK,
        EventKind.DAY,
        EventKind.HOLIDAY,
    ]
    assert [e.summary for e in jan_1] == [
        "Pay rent",
        "Plan week",
        "Gym",
        "New Year's Day",
    ]


def test_event_descriptions(service, customizations):
    events = service.build_export(customizations, 2024).events
    by_summary = {e.summary: e for e in events}

    assert by_summary["Gym"].description == "Day Planner: Monday"
    assert by_summary["Pizza"].description == "Cheat Day"
    assert by_summary["Pay rent"].description == "Monthly Planner Task"
    holiday = by_summary["Independence Day"]
    assert holiday.description == "Public Holiday"
    assert not holiday.use_default_reminders
    moon = by_summary["Poornima - Moon Phase"]
    assert moon.description == "Moon phase: Poornima"
    assert moon.is_all_day


def test_weekly_event_on_first_real_day(service, customizations):
    """Week 1 of February starts on the 1st, not on a padding cell."""
    events = service.build_export(customizations, 2024).events
    week_events = [e for e in events if e.kind == EventKind.WEEK and e.date.month == 2]
    assert [e.date for e in week_events] == [date(2024, 2, 1)]


def test_event_counts(service, customizations):
    events = service.build_export(customizations, 2024).events
    count = lambda kind: sum(1 for e in events if e.kind == kind)

    assert count(EventKind.MONTH) == 12
    assert count(EventKind.HOLIDAY) == 2
    # 53 Mondays in 2024 plus one cheat day per month
    assert count(EventKind.DAY) == 53 + 12


def test_all_day_without_reminder(service, customizations):
    events = service.build_export(customizations, 2024).events
    assert all(e.is_all_day for e in events)


def test_timed_events_with_reminder(service, customizations):
    customizations = customizations.model_copy(update={"reminder_time": "7:15 AM"})
    export = service.build_export(customizations, 2024, time_zone="America/New_York")

    gym = next(e for e in export.events if e.summary == "Gym")
    assert gym.start == datetime(2024, 1, 1, 7, 15)
    assert gym.end == datetime(2024, 1, 1, 7, 45)
    assert gym.time_zone == "America/New_York"
    holiday = next(e for e in export.events if e.kind == EventKind.HOLIDAY)
    assert holiday.is_all_day


def test_invalid_reminder_falls_back_to_all_day(service, customizations):
    customizations = customizations.model_copy(update={"reminder_time": "whenever"})
    events = service.build_export(customizations, 2024).events
    assert all(e.is_all_day for e in events)


def test_recurring_mode(service, customizations):
    events = service.build_export(customizations, 2024, recurring=True).events

    gym = [e for e in events if e.summary == "Gym"]
    assert len(gym) == 1
    assert gym[0].date == date(2024, 1, 1)
    assert gym[0].recurrence == ["RRULE:FREQ=WEEKLY;BYDAY=MO;UNTIL=20241231T235959Z"]

    rent = [e for e in events if e.summary == "Pay rent"]
    assert len(rent) == 1
    assert rent[0].recurrence == ["RRULE:FREQ=MONTHLY;BYMONTHDAY=1;UNTIL=20241231T235959Z"]

    # Cheat days and banners are still listed one by one
    assert sum(1 for e in events if e.summary == "Pizza") == 12
    assert sum(1 for e in events if e.kind == EventKind.WEEK) >= 12


def test_recurring_first_occurrence_later_in_week(service):
    customizations = Customizations.model_validate({"dayPlanner": {"saturday": "Hike"}})
    events = service.build_export(customizations, 2024, recurring=True).events
    assert [e.date for e in events] == [date(2024, 1, 6)]


def test_ics_writer_all_day_events(service, customizations, tmp_path):
    export = service.build_export(customizations, 2024)
    path = tmp_path / "planner.ics"
    ICSWriter().write(export, path)

    ical_content = path.read_bytes()
    assert b"BEGIN:VCALENDAR" in ical_content
    assert b"PRODID:-//Planner Calendar//EN" in ical_content
    assert b"X-WR-CALNAME:My Planner 2024" in ical_content

    events = vevents(ical_content)
    assert len(events) == len(export.events)
    holiday = next(e for e in events if str(e["summary"]) == "Independence Day")
    assert holiday["dtstart"].dt == date(2024, 7, 4)
    assert holiday["dtend"].dt == date(2024, 7, 5)
    assert "VALARM" not in [c.name for c in holiday.subcomponents]


def test_ics_writer_timed_events(service, customizations):
    customizations = customizations.model_copy(update={"reminder_time": "18:00"})
    export = service.build_export(customizations, 2024, time_zone="Asia/Kolkata")

    gym = next(e for e in vevents(ICSWriter().render(export)) if str(e["summary"]) == "Gym")
    start = gym["dtstart"].dt
    assert start == datetime(2024, 1, 1, 18, 0, tzinfo=ZoneInfo("Asia/Kolkata"))
    assert [c.name for c in gym.subcomponents] == ["VALARM"]


def test_ics_writer_recurrence(service, customizations):
    export = service.build_export(customizations, 2024, recurring=True)
    gym = next(
        e for e in vevents(ICSWriter().render(export)) if str(e["summary"]) == "Gym"
    )
    assert gym["rrule"]["FREQ"] == ["WEEKLY"]
    assert gym["rrule"]["BYDAY"] == ["MO"]


def test_ics_uids_are_stable(service, customizations):
    export = service.build_export(customizations, 2024)
    first = [str(e["uid"]) for e in vevents(ICSWriter().render(export))]
    second = [str(e["uid"]) for e in vevents(ICSWriter().render(export))]
    assert first == second
    assert len(set(first)) == len(first)
    assert all(uid.endswith("@planner") for uid in first)


def test_json_writer(service, customizations, tmp_path):
    export = service.build_export(customizations, 2024)

    document = json.loads(JSONWriter().render(export))
    assert document["year"] == 2024
    assert len(document["months"]) == 12
    assert "events" not in document

    path = tmp_path / "planner.json"
    JSONWriter(include_events=True).write(export, path)
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["name"] == "My Planner"
    assert document["timeZone"] == "UTC"
    assert document["calendar"]["year"] == 2024
    assert len(document["events"]) == len(export.events)
    assert document["events"][0]["isAllDay"] is True


def test_get_writer():
    assert isinstance(get_writer("ics"), ICSWriter)
    writer = get_writer("json", include_events=True)
    assert isinstance(writer, JSONWriter)
    assert writer.include_events
    assert writer.get_extension() == "json"
    with pytest.raises(UnsupportedFormatError):
        get_writer("docx")


def test_ics_writer_end_of_calendar_range():
    """An all-day event on the last representable date cannot be exported."""
    export = CalendarExport(
        name="Edge",
        calendar=CalendarData(year=9999, months=()),
        events=[SyncEvent(kind=EventKind.DAY, summary="Last", date=date(9999, 12, 31))],
    )
    with pytest.raises(ExportError):
        ICSWriter().render(export)
