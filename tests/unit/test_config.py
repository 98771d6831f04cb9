"""Unit tests for schedule settings."""

import pytest

from room_schedule.infrastructure.config import ScheduleSettings, get_settings


class TestScheduleSettings:
    """Test cases for ScheduleSettings."""

    def test_defaults(self, monkeypatch):
        """Test default calendar and logging settings."""
        for name in ("SCHEDULE_DATE_FORMAT", "SCHEDULE_TIME_FORMAT", "SCHEDULE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = ScheduleSettings()

        assert settings.date_format == "%Y-%m-%d"
        assert settings.time_format == "%H:%M"
        assert settings.log_level == "INFO"
        assert settings.log_enable_file is False

    def test_environment_override(self, monkeypatch):
        """Test settings are read from SCHEDULE_ prefixed variables."""
        monkeypatch.setenv("SCHEDULE_DATE_FORMAT", "%d.%m.%Y")
        monkeypatch.setenv("SCHEDULE_LOG_LEVEL", "debug")

        settings = ScheduleSettings()

        assert settings.date_format == "%d.%m.%Y"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            ScheduleSettings(log_level="verbose")

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        get_settings.cache_clear()

        assert get_settings() is get_settings()

        get_settings.cache_clear()
