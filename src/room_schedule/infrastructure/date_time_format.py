"""Date and time-of-day parsing and formatting for schedule slots."""

from datetime import date, datetime, time, timedelta
from typing import Union

from .config import ScheduleSettings
from ..domain.exceptions import InvalidDateTimeError


# Instants are naive: milliseconds since 1970-01-01T00:00 with no time zone.
EPOCH = datetime(1970, 1, 1)
MILLIS_PER_MINUTE = 60 * 1000

DateLike = Union[date, datetime, str]
TimeLike = Union[time, str]


class DateTimeFormatter:
    """Converts between (date, time-of-day) pairs and absolute instants.

    The formatter holds no process-wide state: two formatters built with the
    same formats always produce the same results.
    """

    def __init__(self, date_format: str = "%Y-%m-%d", time_format: str = "%H:%M"):
        self.date_format = date_format
        self.time_format = time_format

    @classmethod
    def from_settings(cls, settings: ScheduleSettings) -> "DateTimeFormatter":
        """Create a formatter from schedule settings."""
        return cls(date_format=settings.date_format, time_format=settings.time_format)

    def parse_date(self, value: DateLike) -> date:
        """Parse a date, dropping the time component of datetimes."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(value.strip(), self.date_format).date()
        except (AttributeError, TypeError, ValueError):
            raise InvalidDateTimeError(value, self.date_format) from None

    def format_date(self, value: date) -> str:
        return value.strftime(self.date_format)

    def parse_time(self, value: TimeLike) -> time:
        """Parse a time of day.

        Text must round-trip through the configured format exactly, so
        "9:00" is rejected under "%H:%M".
        """
        if isinstance(value, time):
            return value.replace(second=0, microsecond=0)
        try:
            text = value.strip()
            parsed = datetime.strptime(text, self.time_format).time()
        except (AttributeError, TypeError, ValueError):
            raise InvalidDateTimeError(value, self.time_format) from None
        if parsed.strftime(self.time_format) != text:
            raise InvalidDateTimeError(value, self.time_format)
        return parsed

    def format_time(self, value: time) -> str:
        return value.strftime(self.time_format)

    def normalize_time(self, value: TimeLike) -> str:
        """Canonical text form of a time of day."""
        return self.format_time(self.parse_time(value))

    def combine(self, day: DateLike, time_of_day: TimeLike) -> datetime:
        """Anchor a time of day on a calendar date."""
        return datetime.combine(self.parse_date(day), self.parse_time(time_of_day))

    def to_millis(self, day: DateLike, time_of_day: TimeLike) -> int:
        """Absolute instant of a time of day on a date, in milliseconds."""
        return (self.combine(day, time_of_day) - EPOCH) // timedelta(milliseconds=1)

    def from_millis(self, millis: int) -> datetime:
        return EPOCH + timedelta(milliseconds=millis)

    def format_time_from_millis(self, millis: int) -> str:
        """Time-of-day text of an absolute instant."""
        return self.format_time(self.from_millis(millis).time())

    @staticmethod
    def day_of_week_index(day: date) -> int:
        """Calendar day-of-week index: Sunday=1, Monday=2, ..., Saturday=7."""
        return day.isoweekday() % 7 + 1
