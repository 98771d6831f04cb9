"""Schedule configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ScheduleSettings(BaseSettings):
    """Schedule library settings."""

    # Calendar conventions
    date_format: str = Field("%Y-%m-%d", description="strftime format for slot dates")
    time_format: str = Field("%H:%M", description="strftime format for time of day")

    # Logging
    log_level: str = "INFO"
    service_name: str = "room-schedule"
    log_dir: Optional[str] = None
    log_enable_console: bool = True
    log_enable_file: bool = False

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        """Pydantic config."""
        env_prefix = "SCHEDULE_"
        env_file = ".env"
        case_sensitive = False
        env_ignore_empty = True
        extra = "ignore"


@lru_cache()
def get_settings() -> ScheduleSettings:
    """Get cached schedule settings."""
    return ScheduleSettings()
