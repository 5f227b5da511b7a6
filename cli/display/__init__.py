"""Display module for rendering planner output.

This module provides renderers for various display contexts:
- MonthRenderer: Month grids with tasks, holidays and moon phases
- EventRenderer: Sync events in agenda view
- TableRenderer: User, holiday and moon phase lists
- CustomizationRenderer: A user's recurrence rules
"""

from cli.display.console import console
from cli.display.customization_renderer import CustomizationRenderer
from cli.display.event_renderer import EventRenderer
from cli.display.formatters import (
    format_datetime,
    format_day_label,
    format_event_time,
    format_moon_phase,
)
from cli.display.month_renderer import MonthRenderer
from cli.display.table_renderer import TableRenderer

__all__ = [
    "console",
    "CustomizationRenderer",
    "EventRenderer",
    "MonthRenderer",
    "TableRenderer",
    "format_datetime",
    "format_day_label",
    "format_event_time",
    "format_moon_phase",
]
