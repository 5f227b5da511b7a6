"""Tests for the moon phase calculator."""

from datetime import date, timedelta

from planner.models.customizations import MoonPhase
from planner.moon_phase import REFERENCE_NEW_MOON, MoonPhaseCalculator, PhaseBand

ALL_PHASES = set(MoonPhase)


def test_reference_date_is_new_moon():
    calculator = MoonPhaseCalculator()
    assert calculator.phase_fraction(REFERENCE_NEW_MOON) == 0.0
    assert calculator.phase_for_date(REFERENCE_NEW_MOON, ALL_PHASES) == MoonPhase.AMAVASYA


def test_known_phases_after_reference():
    calculator = MoonPhaseCalculator()
    assert calculator.phase_for_date(date(2000, 1, 21), ALL_PHASES) == MoonPhase.POORNIMA
    assert calculator.phase_for_date(date(2000, 1, 14), ALL_PHASES) == MoonPhase.EKADASHI
    assert calculator.phase_for_date(date(2000, 1, 29), ALL_PHASES) == MoonPhase.EKADASHI
    assert calculator.phase_for_date(date(2000, 1, 28), ALL_PHASES) is None


def test_unselected_phase_is_not_reported():
    calculator = MoonPhaseCalculator()
    assert calculator.phase_for_date(date(2000, 1, 21), {MoonPhase.AMAVASYA}) is None
    assert calculator.phase_for_date(date(2000, 1, 21), set()) is None


def test_dates_before_reference():
    """One synodic month earlier is still a new moon."""
    calculator = MoonPhaseCalculator()
    fraction = calculator.phase_fraction(date(1999, 12, 7))
    assert 0.0 <= fraction < 1.0
    assert calculator.classify(fraction) == MoonPhase.AMAVASYA


def test_band_wraps_around_cycle():
    band = PhaseBand(MoonPhase.AMAVASYA, centre=0.0, half_width=0.03)
    assert band.contains(0.99)
    assert band.contains(0.01)
    assert not band.contains(0.5)


def test_for_year_once_or_twice_per_cycle():
    """Each new moon marks one or two consecutive days."""
    matches = MoonPhaseCalculator().for_year(2024, {MoonPhase.AMAVASYA})
    assert all(m.phase == MoonPhase.AMAVASYA for m in matches)
    assert all(m.date.year == 2024 for m in matches)

    runs = 1
    for previous, current in zip(matches, matches[1:]):
        if current.date - previous.date > timedelta(days=1):
            runs += 1
    assert runs in (12, 13)
    assert len(matches) <= 2 * runs


def test_for_year_sorted_and_empty_selection():
    calculator = MoonPhaseCalculator()
    matches = calculator.for_year(2024, ALL_PHASES)
    assert [m.date for m in matches] == sorted(m.date for m in matches)
    assert calculator.for_year(2024, []) == []


def test_by_date_lookup():
    lookup = MoonPhaseCalculator().by_date(2000, {MoonPhase.POORNIMA})
    assert lookup[date(2000, 1, 21)] == MoonPhase.POORNIMA
    assert date(2000, 1, 6) not in lookup
