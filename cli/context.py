"""Shared CLI context with lazy-initialized dependencies."""

from planner.calendar_service import CalendarService
from planner.config import PlannerConfig
from planner.holiday_provider import HolidayProvider
from planner.storage.customization_repository import CustomizationRepository


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        users = ctx.repository.list_users()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: PlannerConfig | None = None
        self._holiday_provider: HolidayProvider | None = None
        self._repository: CustomizationRepository | None = None
        self._service: CalendarService | None = None

    @property
    def config(self) -> PlannerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PlannerConfig.from_env()
        return self._config

    @property
    def holiday_provider(self) -> HolidayProvider:
        if self._holiday_provider is None:
            self._holiday_provider = HolidayProvider()
        return self._holiday_provider

    @property
    def repository(self) -> CustomizationRepository:
        """Get customization repository (lazy-loaded)."""
        if self._repository is None:
            self._repository = CustomizationRepository(self.config.storage_dir)
        return self._repository

    @property
    def service(self) -> CalendarService:
        """Get calendar service (lazy-loaded)."""
        if self._service is None:
            self._service = CalendarService(
                self.config, holiday_provider=self.holiday_provider
            )
        return self._service


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
