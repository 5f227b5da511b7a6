"""User paths dataclass for consistent path access."""

from dataclasses import dataclass
from pathlib import Path

from planner.constants import CUSTOMIZATIONS_FILENAME, REMINDER_STATE_FILENAME


@dataclass(frozen=True)
class UserPaths:
    """Paths for a user's files.

    Always returns paths regardless of whether files exist.
    """

    directory: Path

    @property
    def customizations(self) -> Path:
        """customizations.json - the only persisted calendar input."""
        return self.directory / CUSTOMIZATIONS_FILENAME

    @property
    def reminder_state(self) -> Path:
        return self.directory / REMINDER_STATE_FILENAME

    @property
    def exists(self) -> bool:
        """Check if the user has saved customizations."""
        return self.customizations.exists()
