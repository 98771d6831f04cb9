"""JSON serialization of slot attributes and related objects."""

import json
from datetime import date, datetime, time
from enum import Enum
from typing import Any


def _default(value: Any) -> Any:
    """Fallback conversion for values json cannot encode natively."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)


def serialize_object(obj: Any) -> str:
    """Serialize an object to deterministic JSON text.

    Keys are sorted so the same mapping always renders the same string.
    """
    return json.dumps(obj, default=_default, ensure_ascii=False, sort_keys=True)
