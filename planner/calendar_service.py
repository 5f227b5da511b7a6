"""Glue between stored customizations, the generator and the writers.

Shared by the HTTP app and the CLI so both surfaces build calendars and
exports the same way.
"""

import logging

from planner.calendar_generator import CalendarGenerator
from planner.config import PlannerConfig
from planner.holiday_provider import HolidayProvider
from planner.models.customizations import Customizations
from planner.models.export import CalendarExport
from planner.output.event_builder import SyncEventBuilder

logger = logging.getLogger(__name__)

MIN_YEAR = 1
# Last year whose events (and exclusive all-day ends) stay in date range
MAX_YEAR = 9998


def holiday_notices(
    customizations: Customizations, year: int, provider: HolidayProvider
) -> list[str]:
    """Non-fatal messages explaining why holidays are missing, if they are."""
    if not customizations.include_holidays:
        return []
    if customizations.country_code is None:
        return ["Holidays are enabled but no country is selected"]
    if not provider.supports(customizations.country_code, year):
        return [
            f"Holidays are not available for '{customizations.country_code}'; "
            "the calendar was generated without them"
        ]
    return []


class CalendarService:
    """Generate calendars and exports from customizations."""

    def __init__(
        self,
        config: PlannerConfig | None = None,
        holiday_provider: HolidayProvider | None = None,
    ):
        self.config = config or PlannerConfig()
        self.holiday_provider = holiday_provider or HolidayProvider()
        self.generator = CalendarGenerator(holiday_provider=self.holiday_provider)

    def notices(self, customizations: Customizations, year: int) -> list[str]:
        notices = holiday_notices(customizations, year, self.holiday_provider)
        for notice in notices:
            logger.warning(notice)
        return notices

    def build_export(
        self,
        customizations: Customizations,
        year: int,
        time_zone: str | None = None,
        recurring: bool = False,
    ) -> CalendarExport:
        """Generate a year and flatten it into sync events.

        Raises:
            ExportError: If time_zone is unknown
        """
        time_zone = time_zone or self.config.default_timezone
        builder = SyncEventBuilder(time_zone=time_zone, recurring=recurring)
        calendar_data = self.generator.generate(customizations, year)
        return CalendarExport(
            name=self.config.calendar_name,
            calendar=calendar_data,
            events=builder.build(customizations, calendar_data),
            time_zone=time_zone,
        )
