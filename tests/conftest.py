from datetime import date

import pytest

from planner import create_app
from planner.config import PlannerConfig
from planner.exceptions import HolidayProviderError
from planner.holiday_provider import HolidayProvider
from planner.models.holiday import Holiday


class FakeHolidayProvider(HolidayProvider):
    """Holiday provider with a fixed table instead of the holidays package."""

    def __init__(self, table: dict[str, list[Holiday]] | None = None):
        self.table = table or {}
        self.calls: list[tuple[str, int]] = []

    def fetch_holidays(self, country_code: str, year: int) -> list[Holiday]:
        self.calls.append((country_code, year))
        if country_code not in self.table:
            raise HolidayProviderError(
                f"Holidays are not available for country '{country_code}'"
            )
        return [h for h in self.table[country_code] if h.date.year == year]


@pytest.fixture
def fake_holidays():
    """Provider knowing two US holidays in 2024."""
    return FakeHolidayProvider(
        {
            "US": [
                Holiday(date=date(2024, 1, 1), name="New Year's Day"),
                Holiday(date=date(2024, 7, 4), name="Independence Day"),
            ]
        }
    )


@pytest.fixture
def config(tmp_path):
    """Config pointing storage and logs at a temporary directory."""
    return PlannerConfig(
        storage_dir=tmp_path / "users",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def app(config, fake_holidays):
    """Create and configure a Flask app for testing."""
    app = create_app(config, holiday_provider=fake_holidays)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
