"""Customizations model: the sparse recurrence rules a calendar is built from."""

import logging
import re
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from planner.constants import DEFAULT_CHEAT_DAY_TEXT, WEEK_ORDINALS, WEEKDAY_NAMES

logger = logging.getLogger(__name__)

_COUNTRY_CODE_RE = re.compile(r"^[A-Za-z]{2}$")

# Flat cheat-day keys written by older clients
_LEGACY_CHEAT_DAY_KEYS = {
    "cheatDayEnabled": "enabled",
    "cheatDayDate": "dayOfMonth",
    "cheatDayActionItems": "actionText",
}


class WeekStart(str, Enum):
    """First column of the calendar grid."""

    SUNDAY = "sunday"
    MONDAY = "monday"


class MoonPhase(str, Enum):
    """Moon phases a user can highlight."""

    POORNIMA = "Poornima"
    AMAVASYA = "Amavasya"
    EKADASHI = "Ekadashi"


def clean_text(value: Any) -> str | None:
    """Return trimmed text, or None if the value is not non-blank text."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class _LenientModel(BaseModel):
    """Base for input models where a malformed field means "no rule".

    Any field that fails validation falls back to its default instead of
    raising, so a partially broken document still loads.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _degrade_to_default(cls, value, handler, info: ValidationInfo):
        try:
            return handler(value)
        except ValidationError:
            logger.debug(
                f"Ignoring invalid value for {cls.__name__}.{info.field_name}: {value!r}"
            )
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )


class CheatDay(_LenientModel):
    """A one-off monthly task pinned to a fixed day of the month."""

    enabled: bool = False
    day_of_month: Optional[int] = Field(default=None, ge=1, le=31)
    action_text: Optional[str] = None

    @field_validator("action_text", mode="before")
    @classmethod
    def _clean_action_text(cls, v):
        return clean_text(v)

    @property
    def text(self) -> str:
        """Task text, falling back to the default label."""
        return self.action_text or DEFAULT_CHEAT_DAY_TEXT

    def applies_to(self, day_of_month: int) -> bool:
        """True if the cheat day is active and falls on this day."""
        return (
            self.enabled
            and self.day_of_month is not None
            and self.day_of_month == day_of_month
        )


class Customizations(_LenientModel):
    """User configuration for a generated calendar.

    Only this structure is persisted; everything derived from it
    (grids, holidays, moon phases) is regenerated on demand.
    """

    week_starts_on: WeekStart = WeekStart.SUNDAY
    day_planner: dict[str, str] = Field(default_factory=dict)
    week_planner: dict[int, str] = Field(default_factory=dict)
    month_planner: Optional[str] = None
    cheat_day: Optional[CheatDay] = None
    reminder_time: Optional[str] = None
    include_holidays: bool = False
    country_code: Optional[str] = None
    moon_phases: frozenset[MoonPhase] = Field(default_factory=frozenset)

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_cheat_day(cls, data):
        """Fold flat cheatDay* keys into a nested cheatDay mapping."""
        if not isinstance(data, dict):
            return data
        if not any(key in data for key in _LEGACY_CHEAT_DAY_KEYS):
            return data

        data = dict(data)
        cheat_day = {}
        for legacy_key, key in _LEGACY_CHEAT_DAY_KEYS.items():
            if legacy_key in data:
                cheat_day[key] = data.pop(legacy_key)
        if "cheatDay" not in data and "cheat_day" not in data:
            data["cheatDay"] = cheat_day
        return data

    @field_validator("week_starts_on", mode="before")
    @classmethod
    def _parse_week_start(cls, v):
        # 0/1 as used by JavaScript Date.getDay()
        if v in (0, 1) and not isinstance(v, bool):
            return WeekStart.MONDAY if v == 1 else WeekStart.SUNDAY
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("day_planner", mode="before")
    @classmethod
    def _clean_day_planner(cls, v):
        if not isinstance(v, dict):
            return {}
        planner = {}
        for day_name, text in v.items():
            if not isinstance(day_name, str):
                continue
            day_name = day_name.strip().lower()
            text = clean_text(text)
            if day_name in WEEKDAY_NAMES and text:
                planner[day_name] = text
        return planner

    @field_validator("week_planner", mode="before")
    @classmethod
    def _clean_week_planner(cls, v):
        if not isinstance(v, dict):
            return {}
        planner = {}
        for ordinal, text in v.items():
            try:
                ordinal = int(ordinal)
            except (TypeError, ValueError):
                continue
            text = clean_text(text)
            if ordinal in WEEK_ORDINALS and text:
                planner[ordinal] = text
        return planner

    @field_validator("month_planner", "reminder_time", mode="before")
    @classmethod
    def _clean_optional_text(cls, v):
        return clean_text(v)

    @field_validator("country_code", mode="before")
    @classmethod
    def _clean_country_code(cls, v):
        v = clean_text(v)
        if v is None or not _COUNTRY_CODE_RE.match(v):
            return None
        return v.upper()

    @field_validator("moon_phases", mode="before")
    @classmethod
    def _clean_moon_phases(cls, v):
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple, set, frozenset)):
            return frozenset()
        known = {phase.value.lower(): phase for phase in MoonPhase}
        phases = set()
        for name in v:
            if isinstance(name, MoonPhase):
                phases.add(name)
            elif isinstance(name, str) and name.strip().lower() in known:
                phases.add(known[name.strip().lower()])
        return frozenset(phases)

    @field_serializer("moon_phases")
    def _serialize_moon_phases(self, phases):
        return sorted(phase.value for phase in phases)

    def day_task(self, day_of_week: int) -> str | None:
        """Day-planner text for a weekday (0 = Sunday)."""
        return self.day_planner.get(WEEKDAY_NAMES[day_of_week])

    def week_task(self, ordinal: int) -> str | None:
        """Week-planner text for a 1-based week ordinal."""
        return self.week_planner.get(ordinal)

    @property
    def holidays_enabled(self) -> bool:
        """True if holidays should be looked up."""
        return self.include_holidays and self.country_code is not None

    def to_document(self) -> dict:
        """Plain JSON-ready mapping (camelCase keys) for persistence."""
        return self.model_dump(mode="json", by_alias=True)
