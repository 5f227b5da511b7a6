"""Writer lookup by format name."""

from planner.exceptions import UnsupportedFormatError
from planner.output.base import CalendarWriter
from planner.output.ics_writer import ICSWriter
from planner.output.json_writer import JSONWriter

SUPPORTED_FORMATS = ("ics", "json")


def get_writer(format: str, include_events: bool = False) -> CalendarWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter(include_events=include_events)
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")
