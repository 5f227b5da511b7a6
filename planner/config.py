"""Configuration for the planner."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class PlannerConfig(BaseModel):
    """Planner configuration with Pydantic validation."""

    # Storage paths
    storage_dir: Path = Field(default=Path("data/users"))
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="planner.log")

    # Export
    calendar_name: str = Field(default="My Planner")
    default_timezone: str = Field(default="UTC")
    ics_export_filename: str = Field(default="calendar.ics")

    # CLI defaults
    preview_days: int = Field(default=7, ge=1)

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "PLANNER_STORAGE_DIR" in os.environ:
            config_dict["storage_dir"] = Path(os.environ["PLANNER_STORAGE_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Export
        if "CALENDAR_NAME" in os.environ:
            config_dict["calendar_name"] = os.environ["CALENDAR_NAME"]
        if "DEFAULT_TIMEZONE" in os.environ:
            config_dict["default_timezone"] = os.environ["DEFAULT_TIMEZONE"]

        # CLI defaults
        if "PREVIEW_DAYS" in os.environ:
            try:
                preview_days = int(os.environ["PREVIEW_DAYS"])
            except ValueError:
                preview_days = None  # Keep default if invalid
            if preview_days is not None and preview_days >= 1:
                config_dict["preview_days"] = preview_days

        return cls(**config_dict)
