"""Daily reminder digest.

Delivery (desktop, push, email) is up to the caller; this module only
decides what to say and whether today's digest was already sent. The
already-notified state is passed in and returned, never kept here.
"""

import logging
from collections.abc import Iterable
from datetime import date

from pydantic import BaseModel

from planner.models.event import SyncEvent
from planner.models.saved import ReminderState

logger = logging.getLogger(__name__)


class DailyDigest(BaseModel):
    """One notification summarizing a day's events."""

    date: date
    title: str
    body: str
    items: list[str]


def build_daily_digest(
    events: Iterable[SyncEvent], today: date, state: ReminderState
) -> tuple[DailyDigest | None, ReminderState]:
    """Build today's digest unless it was already delivered.

    Args:
        events: Flattened sync events (recurring events only count on
            their first date)
        today: The day to notify about
        state: Days already notified

    Returns:
        The digest (or None if already sent or nothing happens today)
        and the state to persist afterwards
    """
    if state.was_notified(today):
        logger.debug(f"Digest for {today} already delivered")
        return None, state

    items = [event.summary for event in events if event.date == today]
    if not items:
        return None, state

    count = len(items)
    digest = DailyDigest(
        date=today,
        title=f"You have {count} event{'s' if count > 1 else ''} today!",
        body="\n".join(f"• {item}" for item in items),
        items=items,
    )
    return digest, state.mark_notified(today)
