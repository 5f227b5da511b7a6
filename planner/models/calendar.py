"""Generated calendar models: a year of month grids."""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from planner.models.customizations import MoonPhase


class TaskType(str, Enum):
    """Which planner rule produced a task."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class _FrozenModel(BaseModel):
    """Generated output is never mutated after construction."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Task(_FrozenModel):
    """A reminder attached to a day."""

    type: TaskType
    text: str
    week_number: Optional[int] = None


class Day(_FrozenModel):
    """One cell of a month grid.

    Padding cells (before day 1 or after the last day) have
    day_of_month == 0, no date and no annotations.
    """

    date: Optional[datetime.date] = None
    day_of_month: int
    day_of_week: int  # 0 = Sunday
    day_name: str = ""
    is_current_month: bool
    tasks: tuple[Task, ...] = ()
    is_holiday: bool = False
    holiday_name: Optional[str] = None
    moon_phase: Optional[MoonPhase] = None

    @property
    def is_padding(self) -> bool:
        return self.day_of_month == 0


class WeeklyTask(_FrozenModel):
    """Week-planner banner for one row of a month grid."""

    week_index: int  # 0-based row
    week_number: int  # 1-based, week_index + 1
    text: str


class MonthData(_FrozenModel):
    """A month grid with its weekly and monthly banners."""

    month: int = Field(ge=0, le=11)  # 0-based
    month_name: str
    year: int
    weeks: tuple[tuple[Day, ...], ...]
    weekly_tasks: tuple[WeeklyTask, ...] = ()
    monthly_task: Optional[str] = None

    @computed_field
    @property
    def week_count(self) -> int:
        return len(self.weeks)

    def weekly_task(self, week_index: int) -> WeeklyTask | None:
        """Banner for a row, if one was configured."""
        for task in self.weekly_tasks:
            if task.week_index == week_index:
                return task
        return None


class CalendarData(_FrozenModel):
    """A full generated year."""

    year: int
    months: tuple[MonthData, ...]

    def to_document(self) -> dict:
        """Plain JSON-ready mapping (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)
