"""Storage layer for user customizations."""

from planner.storage.customization_repository import CustomizationRepository
from planner.storage.paths import UserPaths

__all__ = ["CustomizationRepository", "UserPaths"]
