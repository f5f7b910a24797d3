"""Configuration models for Workforce Management."""

from pydantic import BaseModel, Field, field_validator

from ..core.constants import LOG_LEVELS, STORE_FILE_NAME


class WorkforceConfig(BaseModel):
    """Per-project configuration stored in the data directory."""
    default_actor_id: int = Field(0, description="Actor recorded when --actor is not given")
    log_level: str = "WARNING"
    store_file: str = STORE_FILE_NAME

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level
