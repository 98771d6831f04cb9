"""Validation errors raised by schedule slot construction and mutation."""

from typing import Optional


class ScheduleError(ValueError):
    """Base class for all schedule slot validation failures."""


class MissingFieldError(ScheduleError):
    """A mandatory field was not supplied to the slot builder."""

    def __init__(self, field_name: str, message: Optional[str] = None):
        self.field_name = field_name
        super().__init__(message or f"{field_name} required")


class UnderspecifiedIntervalError(ScheduleError):
    """Neither an end time nor a positive duration was supplied."""

    def __init__(self, message: str = "neither end time nor duration given"):
        super().__init__(message)


class InconsistentTimingError(ScheduleError):
    """Supplied end time and duration describe different intervals."""

    def __init__(self, duration: int, implied_duration: int):
        self.duration = duration
        self.implied_duration = implied_duration
        super().__init__(
            f"End time and duration do not match: duration is {duration} minutes "
            f"but the end time implies {implied_duration} minutes"
        )


class InvalidIntervalError(ScheduleError):
    """The start instant is not before the end instant."""


class InvalidDateTimeError(ScheduleError):
    """A date or time-of-day value could not be parsed."""

    def __init__(self, value: object, expected_format: str):
        self.value = value
        self.expected_format = expected_format
        super().__init__(f"Cannot parse {value!r} with format {expected_format!r}")


class InvalidDurationError(ScheduleError):
    """The duration is not a whole number of minutes."""

    def __init__(self, duration: object):
        self.duration = duration
        super().__init__(f"Duration must be an integer number of minutes, got {duration!r}")
