"""Sync event model: one entry of a flattened, exportable calendar."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


class EventKind(str, Enum):
    """Where a sync event came from, in display order within a day."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOLIDAY = "holiday"
    MOON_PHASE = "moon_phase"

    @property
    def sort_order(self) -> int:
        return list(EventKind).index(self)


class SyncEvent(BaseModel):
    """Candidate event for an external calendar.

    All-day when start/end are unset; otherwise a timed event
    in time_zone.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: EventKind
    summary: str
    description: Optional[str] = None
    date: date
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    time_zone: str = "UTC"
    recurrence: list[str] = Field(default_factory=list)
    use_default_reminders: bool = True

    @model_validator(mode="after")
    def validate_times(self):
        """Timed events need both ends, in order."""
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be set together")
        if self.start is not None and self.end < self.start:
            raise ValueError("end must be >= start")
        return self

    @computed_field
    @property
    def is_all_day(self) -> bool:
        """True if start and end are None."""
        return self.start is None

    @computed_field
    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence)
