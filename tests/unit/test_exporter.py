"""Unit tests for attribute serialization."""

from datetime import date, time

from room_schedule.domain.entities.room import RoomProperties
from room_schedule.domain.value_objects.week_day import WeekDay
from room_schedule.infrastructure.exporter import serialize_object


class TestSerializeObject:
    """Test cases for serialize_object."""

    def test_keys_are_sorted(self):
        """Test output does not depend on insertion order."""
        assert serialize_object({"b": 1, "a": 2}) == serialize_object({"a": 2, "b": 1})
        assert serialize_object({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'

    def test_empty_mapping(self):
        """Test empty attributes serialize to an empty object."""
        assert serialize_object({}) == "{}"

    def test_dates_and_times(self):
        """Test dates and times are written in ISO format."""
        result = serialize_object({"day": date(2024, 1, 8), "at": time(9, 30)})

        assert result == '{"at": "09:30:00", "day": "2024-01-08"}'

    def test_enums_and_objects_with_to_dict(self):
        """Test enums use their value and rich objects their to_dict."""
        result = serialize_object({"day": WeekDay.MONDAY, "room": RoomProperties("Lab", capacity=5)})

        assert '"day": "monday"' in result
        assert '"name": "Lab"' in result
        assert '"capacity": 5' in result

    def test_unknown_objects_use_str(self):
        """Test values without a JSON form fall back to str."""
        class Marker:
            def __str__(self):
                return "marker"

        assert serialize_object({"m": Marker()}) == '{"m": "marker"}'

    def test_unicode_preserved(self):
        """Test non-ASCII text is not escaped."""
        assert serialize_object({"predmet": "Računarstvo"}) == '{"predmet": "Računarstvo"}'
