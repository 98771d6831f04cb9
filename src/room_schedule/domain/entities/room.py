"""Room entity describing where a schedule slot takes place."""

from typing import Any, Dict, Optional


class RoomProperties:
    """Room (location) descriptor shared between schedule slots."""

    def __init__(
        self,
        name: str,
        capacity: int = 0,
        has_computers: bool = False,
        has_projector: bool = False,
        extra: Optional[Dict[str, Any]] = None
    ):
        if not isinstance(name, str):
            raise ValueError("Room name must be a string")
        if not name.strip():
            raise ValueError("Room name cannot be empty")
        if capacity < 0:
            raise ValueError("Room capacity cannot be negative")

        self._name = name.strip()
        self._capacity = capacity
        self._has_computers = has_computers
        self._has_projector = has_projector
        self._extra = dict(extra or {})

    @property
    def name(self) -> str:
        """Get room name."""
        return self._name

    @property
    def capacity(self) -> int:
        """Get number of seats."""
        return self._capacity

    @property
    def has_computers(self) -> bool:
        return self._has_computers

    @property
    def has_projector(self) -> bool:
        return self._has_projector

    @property
    def extra(self) -> Dict[str, Any]:
        """Get a copy of the additional room properties."""
        return dict(self._extra)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping used for serialization."""
        return {
            "name": self._name,
            "capacity": self._capacity,
            "has_computers": self._has_computers,
            "has_projector": self._has_projector,
            "extra": dict(self._extra),
        }

    def __eq__(self, other: object) -> bool:
        """Check equality based on room name."""
        if not isinstance(other, RoomProperties):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        """Hash based on room name."""
        return hash(self._name)

    def __str__(self) -> str:
        """String representation."""
        return f"RoomProperties({self._name}, capacity={self._capacity})"
