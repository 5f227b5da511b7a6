"""Exception hierarchy for planner operations."""


class PlannerError(Exception):
    """Base exception for planner operations."""

    pass


class HolidayProviderError(PlannerError):
    """Holiday data could not be fetched for a country/year."""

    pass


class CustomizationsNotFoundError(PlannerError):
    """No saved customizations for the requested user."""

    pass


class UnsupportedFormatError(PlannerError):
    """Export format not supported."""

    pass


class ExportError(PlannerError):
    """Error during calendar export."""

    pass
