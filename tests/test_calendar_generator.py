"""Tests for calendar generation."""

from datetime import date

import pytest

from planner.calendar_generator import (
    CalendarGenerator,
    generate_calendar,
    grid_cell_count,
    start_offset,
    sunday_based_weekday,
    week_in_month,
)
from planner.models.calendar import TaskType
from planner.models.customizations import Customizations, MoonPhase, WeekStart


@pytest.fixture
def generator(fake_holidays):
    return CalendarGenerator(holiday_provider=fake_holidays)


def real_days(month):
    return [day for week in month.weeks for day in week if not day.is_padding]


def test_sunday_based_weekday():
    """Sunday is 0 and Saturday is 6."""
    assert sunday_based_weekday(date(2024, 2, 4)) == 0
    assert sunday_based_weekday(date(2024, 2, 1)) == 4
    assert sunday_based_weekday(date(2024, 2, 3)) == 6


@pytest.mark.parametrize(
    "first_day_of_week,week_start,expected",
    [
        (0, WeekStart.SUNDAY, 0),
        (4, WeekStart.SUNDAY, 4),
        (0, WeekStart.MONDAY, 6),
        (1, WeekStart.MONDAY, 0),
        (4, WeekStart.MONDAY, 3),
    ],
)
def test_start_offset(first_day_of_week, week_start, expected):
    assert start_offset(first_day_of_week, week_start) == expected


def test_grid_cell_count_and_week_in_month():
    assert grid_cell_count(4, 29) == 35
    assert grid_cell_count(5, 31) == 42
    assert grid_cell_count(0, 28) == 28
    assert week_in_month(1, 4) == 1
    assert week_in_month(4, 4) == 2
    assert week_in_month(29, 4) == 5


def test_generate_full_year_shape(generator):
    """Every month has whole weeks and exactly its own days."""
    calendar_data = generator.generate(Customizations(), 2024)

    assert calendar_data.year == 2024
    assert len(calendar_data.months) == 12
    expected_lengths = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    for index, month in enumerate(calendar_data.months):
        assert month.month == index
        assert all(len(week) == 7 for week in month.weeks)
        assert 4 <= month.week_count <= 6
        days = real_days(month)
        assert [d.day_of_month for d in days] == list(range(1, expected_lengths[index] + 1))
        assert all(d.is_current_month for d in days)


def test_february_2024_sunday_start(generator):
    """Feb 1 2024 is a Thursday: four padding cells and five rows."""
    february = generator.generate(Customizations(), 2024).months[1]

    assert february.month_name == "February"
    assert february.week_count == 5
    first_row = february.weeks[0]
    assert [d.is_padding for d in first_row[:5]] == [True, True, True, True, False]
    assert first_row[4].date == date(2024, 2, 1)
    assert first_row[4].day_name == "Thu"
    # Padding cells carry the weekday of their column
    assert [d.day_of_week for d in first_row] == [0, 1, 2, 3, 4, 5, 6]


def test_february_2024_monday_start(generator):
    customizations = Customizations(week_starts_on=WeekStart.MONDAY)
    february = generator.generate(customizations, 2024).months[1]

    first_row = february.weeks[0]
    assert sum(d.is_padding for d in first_row) == 3
    assert first_row[0].day_of_week == 1
    assert first_row[6].day_of_week == 0
    assert first_row[3].date == date(2024, 2, 1)


def test_padding_cells_are_empty(generator):
    customizations = Customizations.model_validate(
        {"dayPlanner": {"sunday": "Rest"}, "moonPhases": ["Amavasya"]}
    )
    calendar_data = generator.generate(customizations, 2024)
    for month in calendar_data.months:
        for week in month.weeks:
            for day in week:
                if day.is_padding:
                    assert day.date is None
                    assert day.tasks == ()
                    assert day.moon_phase is None
                    assert not day.is_holiday


def test_day_planner_tasks(generator):
    """Every Monday gets the day-planner task."""
    customizations = Customizations.model_validate({"dayPlanner": {"monday": "Gym"}})
    january = generator.generate(customizations, 2024).months[0]

    with_tasks = [d for d in real_days(january) if d.tasks]
    assert [d.day_of_month for d in with_tasks] == [1, 8, 15, 22, 29]
    assert all(d.tasks[0].type == TaskType.DAY for d in with_tasks)
    assert all(d.tasks[0].text == "Gym" for d in with_tasks)


def test_week_planner_banners(generator):
    customizations = Customizations.model_validate(
        {"weekPlanner": {"2": "Budget review", "5": "Month wrap-up"}}
    )
    february = generator.generate(customizations, 2024).months[1]

    banners = {t.week_index: t for t in february.weekly_tasks}
    assert set(banners) == {1, 4}
    assert banners[1].week_number == 2
    assert banners[1].text == "Budget review"
    assert february.weekly_task(4).text == "Month wrap-up"
    assert february.weekly_task(0) is None


def test_week_one_repeats_in_sixth_row(generator):
    """March 2024 spills into a sixth row, which repeats the week 1 banner."""
    customizations = Customizations.model_validate({"weekPlanner": {"1": "Plan month"}})
    march = generator.generate(customizations, 2024).months[2]

    assert march.week_count == 6
    assert [t.week_index for t in march.weekly_tasks] == [0, 5]
    assert march.weekly_task(5).text == "Plan month"
    assert march.weekly_task(5).week_number == 6


def test_monthly_task(generator):
    customizations = Customizations.model_validate({"monthPlanner": "Pay rent"})
    calendar_data = generator.generate(customizations, 2024)
    assert all(m.monthly_task == "Pay rent" for m in calendar_data.months)


def test_cheat_day_skips_short_months(generator):
    """A cheat day on the 30th never appears in February."""
    customizations = Customizations.model_validate(
        {"cheatDay": {"enabled": True, "dayOfMonth": 30, "actionText": "Pizza"}}
    )
    calendar_data = generator.generate(customizations, 2024)

    january = real_days(calendar_data.months[0])
    assert [t.text for t in january[29].tasks] == ["Pizza"]
    february = real_days(calendar_data.months[1])
    assert not any(d.tasks for d in february)


def test_cheat_day_default_text_after_day_task(generator):
    customizations = Customizations.model_validate(
        {
            "dayPlanner": {"tuesday": "Swim"},
            "cheatDay": {"enabled": True, "dayOfMonth": 2},
        }
    )
    january = real_days(generator.generate(customizations, 2024).months[0])
    # Jan 2 2024 is a Tuesday
    assert [t.text for t in january[1].tasks] == ["Swim", "🎉 Cheat Day"]


def test_disabled_cheat_day(generator):
    customizations = Customizations.model_validate(
        {"cheatDay": {"enabled": False, "dayOfMonth": 5}}
    )
    calendar_data = generator.generate(customizations, 2024)
    assert not any(d.tasks for m in calendar_data.months for d in real_days(m))


def test_holidays_marked(generator, fake_holidays):
    customizations = Customizations.model_validate(
        {"includeHolidays": True, "countryCode": "us"}
    )
    calendar_data = generator.generate(customizations, 2024)

    july_4 = real_days(calendar_data.months[6])[3]
    assert july_4.is_holiday
    assert july_4.holiday_name == "Independence Day"
    holidays = [d for m in calendar_data.months for d in real_days(m) if d.is_holiday]
    assert len(holidays) == 2
    # Looked up once for the whole year
    assert fake_holidays.calls == [("US", 2024)]


def test_holidays_skipped_without_country(generator, fake_holidays):
    customizations = Customizations.model_validate({"includeHolidays": True})
    calendar_data = generator.generate(customizations, 2024)

    assert not any(d.is_holiday for m in calendar_data.months for d in real_days(m))
    assert fake_holidays.calls == []


def test_unknown_country_generates_without_holidays(generator):
    customizations = Customizations.model_validate(
        {"includeHolidays": True, "countryCode": "ZZ"}
    )
    calendar_data = generator.generate(customizations, 2024)
    assert not any(d.is_holiday for m in calendar_data.months for d in real_days(m))


def test_moon_phases_marked(generator):
    customizations = Customizations.model_validate({"moonPhases": ["Amavasya"]})
    calendar_data = generator.generate(customizations, 2000)

    january = real_days(calendar_data.months[0])
    assert january[5].moon_phase == MoonPhase.AMAVASYA
    marked = {d.moon_phase for m in calendar_data.months for d in real_days(m)}
    assert marked == {None, MoonPhase.AMAVASYA}


def test_generation_is_deterministic(generator):
    customizations = Customizations.model_validate(
        {
            "dayPlanner": {"friday": "Review"},
            "weekPlanner": {"1": "Plan"},
            "includeHolidays": True,
            "countryCode": "US",
            "moonPhases": ["Poornima", "Ekadashi"],
        }
    )
    assert generator.generate(customizations, 2024) == generator.generate(
        customizations, 2024
    )


def test_generate_calendar_defaults_to_current_year(fake_holidays):
    calendar_data = generate_calendar(Customizations(), holiday_provider=fake_holidays)
    assert calendar_data.year == date.today().year


def test_sixth_row_empty_without_week_one_task(generator):
    """A six-row month gets no sixth banner when week 1 is blank."""
    customizations = Customizations.model_validate(
        {"weekPlanner": {"2": "two", "1": "   "}}
    )
    march = generator.generate(customizations, 2024).months[2]

    assert march.week_count == 6
    assert [t.week_index for t in march.weekly_tasks] == [1]
    assert march.weekly_task(5) is None


def test_monday_planner_with_monday_start(generator):
    """Every Monday of the year carries exactly one Gym task, no other day does."""
    customizations = Customizations.model_validate(
        {"weekStartsOn": "monday", "dayPlanner": {"monday": "Gym"}}
    )
    calendar_data = generator.generate(customizations, 2024)

    mondays = 0
    for month in calendar_data.months:
        for week in month.weeks:
            # Monday is the first column
            assert week[0].day_of_week == 1
        for day in real_days(month):
            if day.date.weekday() == 0:
                mondays += 1
                assert [(t.type, t.text) for t in day.tasks] == [(TaskType.DAY, "Gym")]
            else:
                assert day.tasks == ()
    assert mondays == 53
