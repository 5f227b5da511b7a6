"""Public holiday lookup backed by the `holidays` package."""

import logging
from datetime import date
from typing import Protocol

import holidays

from planner.exceptions import HolidayProviderError
from planner.models.holiday import Holiday

logger = logging.getLogger(__name__)


class HolidaySource(Protocol):
    """Anything the calendar generator can ask for holidays."""

    def get_holidays(self, country_code: str, year: int) -> list[Holiday]:
        """Holidays for a country and year; empty on failure."""
        ...


class HolidayProvider:
    """Holiday lookup for a country and year.

    Holidays are best-effort: get_holidays() and is_holiday() never raise,
    they log and return nothing. Use fetch_holidays() or supports() when
    the caller wants to tell the user why no holidays were applied.
    """

    def fetch_holidays(self, country_code: str, year: int) -> list[Holiday]:
        """Holidays for a country and year, sorted by date.

        Raises:
            HolidayProviderError: If the country is unknown or the lookup fails
        """
        if not country_code:
            raise HolidayProviderError("No country code given")

        try:
            country_holidays = holidays.country_holidays(
                country_code.upper(), years=year
            )
            entries = sorted(country_holidays.items())
        except NotImplementedError as e:
            raise HolidayProviderError(
                f"Holidays are not available for country '{country_code}'"
            ) from e
        except (KeyError, ValueError) as e:
            raise HolidayProviderError(
                f"Error fetching holidays for {country_code} {year}: {e}"
            ) from e

        return [Holiday(date=day, name=name) for day, name in entries]

    def get_holidays(self, country_code: str, year: int) -> list[Holiday]:
        """Holidays for a country and year, or [] if unavailable."""
        if not country_code:
            return []

        try:
            return self.fetch_holidays(country_code, year)
        except HolidayProviderError as e:
            logger.warning(str(e))
            return []

    def is_holiday(self, day: date, country_code: str) -> Holiday | None:
        """The first holiday falling on a date, if any."""
        for holiday in self.get_holidays(country_code, day.year):
            if holiday.date == day:
                return holiday
        return None

    def supports(self, country_code: str, year: int) -> bool:
        """True if holidays can be fetched for this country."""
        try:
            self.fetch_holidays(country_code, year)
        except HolidayProviderError:
            return False
        return True
