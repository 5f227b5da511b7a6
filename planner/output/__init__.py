"""Output layer: sync events and calendar files."""

from planner.output.base import CalendarWriter
from planner.output.event_builder import SyncEventBuilder, parse_reminder_time
from planner.output.factory import SUPPORTED_FORMATS, get_writer
from planner.output.ics_writer import ICSWriter
from planner.output.json_writer import JSONWriter

__all__ = [
    "CalendarWriter",
    "ICSWriter",
    "JSONWriter",
    "SUPPORTED_FORMATS",
    "SyncEventBuilder",
    "get_writer",
    "parse_reminder_time",
]
