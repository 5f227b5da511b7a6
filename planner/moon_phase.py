"""Approximate moon phase calculator.

Phases are estimated from the number of days since a reference new moon,
modulo the mean synodic month. This is a coarse classifier,
not an ephemeris: each highlighted phase covers a narrow band of the
lunar cycle, so a phase may land on one or two consecutive days (or, for
the narrower Ekadashi bands, occasionally none) per cycle.
"""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from planner.models.customizations import MoonPhase

REFERENCE_NEW_MOON = date(2000, 1, 6)

# Mean length of a lunar cycle in days
SYNODIC_MONTH = 29.53058867


@dataclass(frozen=True)
class PhaseBand:
    """A window of the lunar cycle, as a fraction in [0, 1).

    The window wraps around 0/1, so a centre of 0.0 covers both the end
    of one cycle and the start of the next.
    """

    phase: MoonPhase
    centre: float
    half_width: float

    def contains(self, fraction: float) -> bool:
        distance = abs(fraction - self.centre) % 1.0
        return min(distance, 1.0 - distance) < self.half_width


PHASE_BANDS = (
    PhaseBand(MoonPhase.AMAVASYA, centre=0.0, half_width=0.03),
    PhaseBand(MoonPhase.POORNIMA, centre=0.5, half_width=0.03),
    PhaseBand(MoonPhase.EKADASHI, centre=0.285, half_width=0.015),
    PhaseBand(MoonPhase.EKADASHI, centre=0.785, half_width=0.015),
)


@dataclass(frozen=True)
class MoonPhaseDate:
    """A date on which a selected phase occurs."""

    date: date
    phase: MoonPhase


class MoonPhaseCalculator:
    """Classify calendar dates into highlighted moon phases."""

    def __init__(
        self,
        reference_new_moon: date = REFERENCE_NEW_MOON,
        synodic_month: float = SYNODIC_MONTH,
        bands: tuple[PhaseBand, ...] = PHASE_BANDS,
    ):
        self.reference_new_moon = reference_new_moon
        self.synodic_month = synodic_month
        self.bands = bands

    def phase_fraction(self, day: date) -> float:
        """Position of a date in the lunar cycle, in [0, 1).

        0 is new moon, 0.5 is full moon. Dates before the reference are
        handled by the floor modulo.
        """
        days_since = (day - self.reference_new_moon).days
        return (days_since % self.synodic_month) / self.synodic_month

    def classify(self, fraction: float) -> MoonPhase | None:
        """Phase whose band contains the fraction, if any."""
        for band in self.bands:
            if band.contains(fraction):
                return band.phase
        return None

    def phase_for_date(
        self, day: date, selected_phases: Iterable[MoonPhase]
    ) -> MoonPhase | None:
        """Phase on a date, only if it is one of the selected phases."""
        selected = frozenset(selected_phases)
        if not selected:
            return None

        phase = self.classify(self.phase_fraction(day))
        return phase if phase in selected else None

    def for_year(
        self, year: int, selected_phases: Iterable[MoonPhase]
    ) -> list[MoonPhaseDate]:
        """All dates in a year that fall on a selected phase, in order."""
        selected = frozenset(selected_phases)
        if not selected:
            return []

        days_in_year = 366 if calendar.isleap(year) else 365
        start = date(year, 1, 1)

        matches = []
        for offset in range(days_in_year):
            day = start + timedelta(days=offset)
            phase = self.phase_for_date(day, selected)
            if phase is not None:
                matches.append(MoonPhaseDate(date=day, phase=phase))
        return matches

    def by_date(
        self, year: int, selected_phases: Iterable[MoonPhase]
    ) -> dict[date, MoonPhase]:
        """Year lookup indexed by date."""
        return {
            match.date: match.phase for match in self.for_year(year, selected_phases)
        }
