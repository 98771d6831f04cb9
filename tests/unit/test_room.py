"""Unit tests for room entity."""

import pytest

from room_schedule.domain.entities.room import RoomProperties


class TestRoomProperties:
    """Test cases for RoomProperties entity."""

    def test_room_creation(self):
        """Test basic room creation."""
        room = RoomProperties("Room 101", capacity=30, has_projector=True)

        assert room.name == "Room 101"
        assert room.capacity == 30
        assert room.has_projector is True
        assert room.has_computers is False
        assert room.extra == {}

    def test_name_is_stripped(self):
        """Test surrounding whitespace is removed from the name."""
        assert RoomProperties("  Lab 3 ").name == "Lab 3"

    def test_empty_name_raises_error(self):
        """Test that blank names raise ValueError."""
        for name in ("", "   "):
            with pytest.raises(ValueError, match="Room name cannot be empty"):
                RoomProperties(name)

    def test_non_string_name_raises_error(self):
        """Test that non-string names raise ValueError."""
        for name in (None, 101, ["Room 101"]):
            with pytest.raises(ValueError, match="Room name must be a string"):
                RoomProperties(name)

    def test_negative_capacity_raises_error(self):
        """Test that negative capacity raises ValueError."""
        with pytest.raises(ValueError, match="Room capacity cannot be negative"):
            RoomProperties("Room 101", capacity=-1)

    def test_extra_is_copied(self):
        """Test extra properties cannot be changed from outside."""
        extra = {"floor": 2}
        room = RoomProperties("Room 101", extra=extra)
        extra["floor"] = 5
        room.extra["floor"] = 7

        assert room.extra == {"floor": 2}

    def test_equality_by_name(self):
        """Test rooms with the same name are equal."""
        assert RoomProperties("Room 101", capacity=10) == RoomProperties("Room 101", capacity=40)
        assert RoomProperties("Room 101") != RoomProperties("Room 102")
        assert RoomProperties("Room 101") != "Room 101"
        assert len({RoomProperties("A"), RoomProperties("A")}) == 1

    def test_to_dict(self):
        """Test plain mapping output."""
        room = RoomProperties("Lab 3", capacity=20, has_computers=True, extra={"floor": 1})

        assert room.to_dict() == {
            "name": "Lab 3",
            "capacity": 20,
            "has_computers": True,
            "has_projector": False,
            "extra": {"floor": 1},
        }
