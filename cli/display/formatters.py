"""Pure formatting functions for display output."""

from datetime import date, datetime, timezone

from planner.models.customizations import MoonPhase
from planner.models.event import SyncEvent

MOON_SYMBOLS = {
    MoonPhase.AMAVASYA: "🌑",
    MoonPhase.POORNIMA: "🌕",
    MoonPhase.EKADASHI: "🌓",
}


def format_moon_phase(phase: MoonPhase | None) -> str:
    """Symbol and name, e.g. "🌕 Poornima"; empty if no phase."""
    if phase is None:
        return ""
    return f"{MOON_SYMBOLS[phase]} {phase.value}"


def format_event_time(event: SyncEvent) -> str:
    """Time range like "09:00–09:30", or "All day"."""
    if event.is_all_day:
        return "All day"
    return f"{event.start.strftime('%H:%M')}–{event.end.strftime('%H:%M')}"


def format_day_label(day: date, today: date) -> str:
    """Human-readable day label, e.g. "TODAY (Thu Jan 16)" or "Mon Jan 19"."""
    delta = (day - today).days

    if delta == 0:
        return f"TODAY ({day.strftime('%a %b %d')})"
    elif delta == 1:
        return f"Tomorrow ({day.strftime('%a %b %d')})"
    elif delta == -1:
        return f"Yesterday ({day.strftime('%a %b %d')})"
    else:
        return day.strftime("%a %b %d")


def format_datetime(dt: datetime | None) -> str:
    """Format a timestamp in UTC, or "N/A" if missing."""
    if dt is None:
        return "N/A"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
