"""Shared constants for the planner."""

# Sunday-first, matching the day_of_week numbering used throughout (0 = Sunday)
WEEKDAY_NAMES = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

WEEKDAY_SHORT_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# RFC 5545 BYDAY codes, same order as WEEKDAY_NAMES
WEEKDAY_RRULE_CODES = ("SU", "MO", "TU", "WE", "TH", "FR", "SA")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_CHEAT_DAY_TEXT = "🎉 Cheat Day"

# Week planner ordinals a user can configure
WEEK_ORDINALS = (1, 2, 3, 4, 5)

# Per-user storage file names
CUSTOMIZATIONS_FILENAME = "customizations.json"
REMINDER_STATE_FILENAME = "reminder_state.json"
