"""Week day enumeration."""

from enum import Enum


class WeekDay(Enum):
    """Days of the week, ordered Sunday first.

    The calendar index of a day is its 1-based position in this ordering:
    Sunday=1, Monday=2, ..., Saturday=7.
    """

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def index(self) -> int:
        """Get the calendar index (1..7) of this day."""
        return list(WeekDay).index(self) + 1

    @classmethod
    def from_index(cls, index: int) -> "WeekDay":
        """Resolve a calendar index (1..7) to a week day."""
        if not 1 <= index <= 7:
            raise ValueError(f"Week day index must be between 1 and 7, got {index}")
        return list(cls)[index - 1]

    @property
    def is_weekend(self) -> bool:
        """Check if the day falls on a weekend."""
        return self in (WeekDay.SATURDAY, WeekDay.SUNDAY)
