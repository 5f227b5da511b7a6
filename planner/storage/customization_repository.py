"""Repository for per-user customizations stored as JSON files."""

import logging
import re
import shutil
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from planner.exceptions import CustomizationsNotFoundError
from planner.models.customizations import Customizations
from planner.models.saved import ReminderState, SavedCustomizations
from planner.storage.paths import UserPaths

logger = logging.getLogger(__name__)

_USER_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.@-]*$")


class CustomizationRepository:
    """Store and load customizations keyed by user id.

    Layout:
        <storage_dir>/<user_id>/customizations.json
        <storage_dir>/<user_id>/reminder_state.json

    Only customizations are stored; calendars are regenerated on load.
    """

    def __init__(self, storage_dir: Path):
        """
        Initialize repository.

        Args:
            storage_dir: Base directory for user data
        """
        self.storage_dir = storage_dir

    def get_paths(self, user_id: str) -> UserPaths:
        """Get paths for a user.

        Raises:
            ValueError: If user_id is not a plain directory name
        """
        if not _USER_ID_RE.match(user_id) or ".." in user_id:
            raise ValueError(f"Invalid user id: {user_id!r}")
        return UserPaths(directory=self.storage_dir / user_id)

    def exists(self, user_id: str) -> bool:
        return self.get_paths(user_id).exists

    def save(
        self, user_id: str, customizations: Customizations
    ) -> SavedCustomizations:
        """Save customizations, keeping the original creation time.

        Returns:
            The saved record
        """
        paths = self.get_paths(user_id)
        now = datetime.now(timezone.utc)

        existing = self.load(user_id)
        saved = SavedCustomizations(
            user_id=user_id,
            customizations=customizations,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )

        paths.directory.mkdir(parents=True, exist_ok=True)
        paths.customizations.write_text(
            saved.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
        )
        logger.info(f"Saved customizations for '{user_id}'")
        return saved

    def load(self, user_id: str) -> SavedCustomizations | None:
        """Load a user's saved customizations, or None if there are none."""
        paths = self.get_paths(user_id)
        if not paths.exists:
            return None

        try:
            return SavedCustomizations.model_validate_json(
                paths.customizations.read_text(encoding="utf-8")
            )
        except ValidationError as e:
            logger.error(f"Unreadable customizations for '{user_id}': {e}")
            return None

    def load_customizations(self, user_id: str) -> Customizations:
        """Load just the customizations.

        Raises:
            CustomizationsNotFoundError: If the user has none saved
        """
        saved = self.load(user_id)
        if saved is None:
            raise CustomizationsNotFoundError(
                f"No customizations saved for '{user_id}'"
            )
        return saved.customizations

    def list_users(self) -> list[str]:
        """User ids with saved customizations, sorted."""
        if not self.storage_dir.exists():
            return []
        return sorted(
            d.name
            for d in self.storage_dir.iterdir()
            if d.is_dir()
            and not d.name.startswith(".")
            and UserPaths(directory=d).exists
        )

    def delete(self, user_id: str) -> None:
        """Delete everything stored for a user.

        Raises:
            CustomizationsNotFoundError: If the user has nothing saved
        """
        paths = self.get_paths(user_id)
        if not paths.directory.exists():
            raise CustomizationsNotFoundError(
                f"No customizations saved for '{user_id}'"
            )
        shutil.rmtree(paths.directory)
        logger.info(f"Deleted customizations for '{user_id}'")

    def load_reminder_state(self, user_id: str) -> ReminderState:
        """Digest delivery state; empty if none recorded."""
        paths = self.get_paths(user_id)
        if not paths.reminder_state.exists():
            return ReminderState()
        try:
            return ReminderState.model_validate_json(
                paths.reminder_state.read_text(encoding="utf-8")
            )
        except ValidationError as e:
            logger.warning(f"Resetting unreadable reminder state for '{user_id}': {e}")
            return ReminderState()

    def save_reminder_state(self, user_id: str, state: ReminderState) -> None:
        paths = self.get_paths(user_id)
        paths.directory.mkdir(parents=True, exist_ok=True)
        paths.reminder_state.write_text(
            state.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
        )
