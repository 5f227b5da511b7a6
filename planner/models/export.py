"""Export bundle handed to calendar writers."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from planner.models.calendar import CalendarData
from planner.models.event import SyncEvent


class CalendarExport(BaseModel):
    """A generated calendar with its flattened sync events."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    calendar: CalendarData
    events: list[SyncEvent]
    time_zone: str = "UTC"
