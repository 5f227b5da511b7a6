"""Persisted per-user records."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from planner.models.customizations import Customizations


class SavedCustomizations(BaseModel):
    """A user's stored customizations.

    Stored in customizations.json within each user directory. The derived
    calendar is never stored; it is regenerated on load.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    customizations: Customizations
    created_at: datetime
    updated_at: datetime


class ReminderState(BaseModel):
    """Days for which the daily digest has already been delivered."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    notified_dates: set[date] = Field(default_factory=set)

    def was_notified(self, day: date) -> bool:
        return day in self.notified_dates

    def mark_notified(self, day: date) -> "ReminderState":
        """Return a copy with day recorded.

        Dates from years before day's year are dropped.
        """
        kept = {d for d in self.notified_dates if d.year >= day.year}
        return ReminderState(notified_dates=kept | {day})
