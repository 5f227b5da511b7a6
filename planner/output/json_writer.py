"""JSON file writer for generated calendars."""

from pathlib import Path

from planner.models.export import CalendarExport


class JSONWriter:
    """Writer for JSON calendar files."""

    def __init__(self, include_events: bool = False):
        self.include_events = include_events

    def render(self, export: CalendarExport) -> str:
        """Serialize the month grids (and optionally the sync events)."""
        if not self.include_events:
            return export.calendar.model_dump_json(indent=2, by_alias=True)
        return export.model_dump_json(indent=2, by_alias=True)

    def write(self, export: CalendarExport, path: Path) -> None:
        """Write calendar to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render(export))

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
