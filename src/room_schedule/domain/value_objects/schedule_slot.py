"""Schedule slot value object: a single bookable interval on a given date."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

from ..entities.room import RoomProperties
from ..exceptions import (
    InconsistentTimingError,
    InvalidDurationError,
    InvalidIntervalError,
    MissingFieldError,
    ScheduleError,
    UnderspecifiedIntervalError,
)
from .week_day import WeekDay
from ...infrastructure.date_time_format import (
    MILLIS_PER_MINUTE,
    DateLike,
    DateTimeFormatter,
    TimeLike,
)
from ...infrastructure.exporter import serialize_object
from ...infrastructure.logging import get_logger, log_slot_violation


logger = get_logger(__name__)


def _minutes_between(start_millis: int, end_millis: int) -> int:
    """Whole minutes from one instant to another."""
    return round((end_millis - start_millis) / MILLIS_PER_MINUTE)


def _check_duration(duration: Any) -> int:
    """Reject durations that are not plain integers (bool included)."""
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidDurationError(duration)
    return duration


def _end_time_for(formatter: DateTimeFormatter, day: date, start: str, duration: int) -> str:
    """End time of a slot starting at `start` on `day`.

    The end must fall on the same day as the start; HH:MM text cannot
    express a following day.
    """
    end = formatter.from_millis(formatter.to_millis(day, start) + duration * MILLIS_PER_MINUTE)
    if end.date() != day:
        raise InvalidIntervalError(
            f"Slot starting at {start} with duration {duration} runs past the end of {day.isoformat()}"
        )
    return formatter.format_time(end.time())


def _resolve_interval(
    formatter: DateTimeFormatter,
    day: Optional[DateLike],
    start_time: Optional[TimeLike],
    end_time: Optional[TimeLike],
    duration: int
) -> Tuple[date, str, str, int]:
    """Validate partial timing input and derive the missing field.

    Returns the normalized (date, start, end, duration) quadruple.
    """
    if start_time is None:
        raise MissingFieldError("start time")
    if day is None:
        raise MissingFieldError("date")

    duration = _check_duration(duration)
    day = formatter.parse_date(day)
    start = formatter.normalize_time(start_time)
    start_millis = formatter.to_millis(day, start)

    if duration > 0:
        if end_time is None:
            end = _end_time_for(formatter, day, start, duration)
            logger.debug("Derived end time %s from duration %d", end, duration)
            return day, start, end, duration

        end = formatter.normalize_time(end_time)
        implied = _minutes_between(start_millis, formatter.to_millis(day, end))
        if implied != duration:
            raise InconsistentTimingError(duration, implied)
        return day, start, end, duration

    if end_time is None:
        raise UnderspecifiedIntervalError()

    end = formatter.normalize_time(end_time)
    derived = _minutes_between(start_millis, formatter.to_millis(day, end))
    if derived <= 0:
        raise InvalidIntervalError(f"Start time {start} must be before end time {end}")
    logger.debug("Derived duration %d from end time %s", derived, end)
    return day, start, end, derived


class ScheduleSlot:
    """A time interval on one date, optionally tied to a room.

    Start time, end time and duration are kept consistent at all times:
    the end instant always equals the start instant plus the duration, and
    both instants fall on the slot date.
    Instances are not safe for concurrent mutation.
    """

    def __init__(
        self,
        date: Optional[DateLike],
        start_time: Optional[TimeLike],
        end_time: Optional[TimeLike] = None,
        duration: int = 0,
        location: Optional[RoomProperties] = None,
        attributes: Optional[Dict[str, Any]] = None,
        formatter: Optional[DateTimeFormatter] = None
    ):
        self._formatter = formatter or DateTimeFormatter()
        try:
            self._date, self._start_time, self._end_time, self._duration = _resolve_interval(
                self._formatter, date, start_time, end_time, duration
            )
        except ScheduleError as error:
            log_slot_violation(
                logger, error,
                slot_date=date, start_time=start_time, end_time=end_time, duration=duration
            )
            raise

        self._location = location
        self._attributes = dict(attributes or {})

    @property
    def date(self) -> date:
        return self._date

    @property
    def start_time(self) -> str:
        return self._start_time

    @property
    def end_time(self) -> str:
        return self._end_time

    @property
    def duration(self) -> int:
        """Get duration in minutes."""
        return self._duration

    @property
    def location(self) -> Optional[RoomProperties]:
        return self._location

    @property
    def attributes(self) -> Dict[str, Any]:
        """Get a copy of the slot attributes."""
        return dict(self._attributes)

    @property
    def start_time_in_millis(self) -> int:
        """Absolute start instant in milliseconds."""
        return self._formatter.to_millis(self._date, self._start_time)

    @property
    def end_time_in_millis(self) -> int:
        """Absolute end instant in milliseconds, start plus duration."""
        return self.start_time_in_millis + self._duration * MILLIS_PER_MINUTE

    @property
    def datetime_start(self) -> datetime:
        """Get start datetime combining date and start_time."""
        return self._formatter.from_millis(self.start_time_in_millis)

    @property
    def datetime_end(self) -> datetime:
        """Get end datetime combining date and end_time."""
        return self._formatter.from_millis(self.end_time_in_millis)

    @property
    def day_of_week(self) -> WeekDay:
        """Get the week day the slot falls on."""
        return WeekDay.from_index(self._formatter.day_of_week_index(self._date))

    def is_colliding_with(self, other: "ScheduleSlot") -> bool:
        """Check if two slots overlap as half-open [start, end) intervals.

        Slots that merely touch (one ends when the other starts) do not
        collide.
        """
        start_1 = self.start_time_in_millis
        end_1 = self.end_time_in_millis
        start_2 = other.start_time_in_millis
        end_2 = other.end_time_in_millis

        return (start_1 <= start_2 < end_1) or (start_2 <= start_1 < end_2)

    def set_date(self, value: DateLike) -> None:
        """Move the slot to another date.

        Start, end and duration are kept as they are and are not checked
        against the new date.
        """
        self._date = self._checked(self._formatter.parse_date, value)

    def set_start_time(self, value: TimeLike) -> None:
        """Change the start time, recomputing the duration."""
        start = self._checked(self._formatter.normalize_time, value)
        self._duration = self._checked(self._interval_minutes, start, self._end_time)
        self._start_time = start

    def set_end_time(self, value: TimeLike) -> None:
        """Change the end time, recomputing the duration."""
        end = self._checked(self._formatter.normalize_time, value)
        self._duration = self._checked(self._interval_minutes, self._start_time, end)
        self._end_time = end

    def update_duration(self) -> None:
        """Recompute the duration from the current date, start and end."""
        self._duration = self._checked(self._interval_minutes, self._start_time, self._end_time)

    def set_duration(self, minutes: int) -> None:
        """Change the duration, moving the end time. Start time is unchanged."""
        self._end_time = self._checked(self._end_time_for_duration, minutes)
        self._duration = minutes

    def set_location(self, location: Optional[RoomProperties]) -> None:
        self._location = location

    def set_attribute(self, name: str, value: Any) -> "ScheduleSlot":
        """Set a single attribute; returns the slot for chaining."""
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def _end_time_for_duration(self, minutes: int) -> str:
        minutes = _check_duration(minutes)
        if minutes <= 0:
            raise InvalidIntervalError(f"Duration must be positive, got {minutes}")
        return _end_time_for(self._formatter, self._date, self._start_time, minutes)

    def _interval_minutes(self, start: str, end: str) -> int:
        start_millis = self._formatter.to_millis(self._date, start)
        end_millis = self._formatter.to_millis(self._date, end)
        if start_millis >= end_millis:
            raise InvalidIntervalError(f"Start time {start} must be before end time {end}")
        return _minutes_between(start_millis, end_millis)

    def _checked(self, operation, *args):
        """Run a validation step, logging any rejection before re-raising."""
        try:
            return operation(*args)
        except ScheduleError as error:
            log_slot_violation(logger, error, slot=repr(self))
            raise

    def __repr__(self) -> str:
        return f"ScheduleSlot({self._date.isoformat()}, {self._start_time}-{self._end_time})"

    def __str__(self) -> str:
        """String representation."""
        location_name = self._location.name if self._location is not None else None
        return (
            f"<on day: {self._formatter.format_date(self._date)}>"
            f" <starts at: {self._start_time}>"
            f" <ends at: {self._end_time}>"
            f" <location: {location_name}>"
            f" <properties: {serialize_object(self._attributes)}>"
        )


@dataclass
class SlotConfig:
    """Raw, unvalidated input for building a schedule slot."""

    date: Optional[DateLike] = None
    start_time: Optional[TimeLike] = None
    end_time: Optional[TimeLike] = None
    duration: int = 0
    location: Optional[RoomProperties] = None
    attributes: Dict[str, Any] = field(default_factory=dict)


def build_slot(config: SlotConfig, formatter: Optional[DateTimeFormatter] = None) -> ScheduleSlot:
    """Validate a slot configuration and build the slot.

    Either a fully consistent slot is returned or a ScheduleError is raised.
    The attribute mapping is copied, so later changes to config.attributes
    do not reach the slot.
    """
    return ScheduleSlot(
        date=config.date,
        start_time=config.start_time,
        end_time=config.end_time,
        duration=config.duration,
        location=config.location,
        attributes=config.attributes,
        formatter=formatter
    )


class ScheduleSlotBuilder:
    """Chained front-end collecting a SlotConfig for build_slot."""

    def __init__(self, formatter: Optional[DateTimeFormatter] = None):
        self._config = SlotConfig()
        self._formatter = formatter

    def set_date(self, value: DateLike) -> "ScheduleSlotBuilder":
        self._config.date = value
        return self

    def set_start_time(self, value: TimeLike) -> "ScheduleSlotBuilder":
        self._config.start_time = value
        return self

    def set_end_time(self, value: TimeLike) -> "ScheduleSlotBuilder":
        self._config.end_time = value
        return self

    def set_duration(self, minutes: int) -> "ScheduleSlotBuilder":
        self._config.duration = minutes
        return self

    def set_location(self, location: RoomProperties) -> "ScheduleSlotBuilder":
        self._config.location = location
        return self

    def set_attribute(self, name: str, value: Any) -> "ScheduleSlotBuilder":
        self._config.attributes[name] = value
        return self

    def set_attributes(self, attributes: Dict[str, Any]) -> "ScheduleSlotBuilder":
        """Replace all attributes with a copy of the given mapping."""
        self._config.attributes = dict(attributes)
        return self

    def build(self) -> ScheduleSlot:
        return build_slot(self._config, self._formatter)
