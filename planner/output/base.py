"""Base classes for calendar writers."""

from pathlib import Path
from typing import Protocol

from planner.models.export import CalendarExport


class CalendarWriter(Protocol):
    """Protocol for calendar writers."""

    def render(self, export: CalendarExport) -> str | bytes:
        """Serialize calendar to file content."""
        ...

    def write(self, export: CalendarExport, path: Path) -> None:
        """Write calendar to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...
