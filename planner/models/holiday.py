"""Public holiday model."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class Holiday(BaseModel):
    """A public holiday returned by the holiday provider."""

    model_config = ConfigDict(frozen=True)

    date: date
    name: str
    type: str = "public"
