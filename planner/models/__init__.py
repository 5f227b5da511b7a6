"""Pydantic models for the planner."""

from planner.models.calendar import (
    CalendarData,
    Day,
    MonthData,
    Task,
    TaskType,
    WeeklyTask,
)
from planner.models.customizations import (
    CheatDay,
    Customizations,
    MoonPhase,
    WeekStart,
)
from planner.models.event import EventKind, SyncEvent
from planner.models.export import CalendarExport
from planner.models.holiday import Holiday
from planner.models.saved import ReminderState, SavedCustomizations

__all__ = [
    "CalendarData",
    "CalendarExport",
    "CheatDay",
    "Customizations",
    "Day",
    "EventKind",
    "Holiday",
    "MonthData",
    "MoonPhase",
    "ReminderState",
    "SavedCustomizations",
    "SyncEvent",
    "Task",
    "TaskType",
    "WeekStart",
    "WeeklyTask",
]
