"""Interval class for representing ClickUp time entries."""
import re
from typing import Optional, Dict, Any

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_timestamp(value: Any) -> int:
    """Parse a millisecond timestamp as delivered by the ClickUp API.

    ClickUp sends timestamps as decimal strings. Anything that is not a plain
    (optionally signed) integer parses to 0 instead of raising.

    Args:
        value: Raw timestamp (string or int)

    Returns:
        Milliseconds since epoch, or 0 if the value is not an integer
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value):
        return int(value)
    return 0


class Interval:
    """A tracked time span. ``end`` is None while the timer is still running."""

    def __init__(self, start: int, end: Optional[int] = None, description: str = ""):
        self.start = start
        self.end = end
        self.description = description

    @classmethod
    def from_api(cls, entry_data: Dict[str, Any]) -> "Interval":
        """Build an Interval from a raw time entry.

        Args:
            entry_data: Raw entry data from the ClickUp API

        Returns:
            Interval

        Raises:
            TypeError: If the entry is not a JSON object
        """
        if not isinstance(entry_data, dict):
            raise TypeError(f"expected a time entry object, got {type(entry_data).__name__}")
        raw_end = entry_data.get("end")
        end = None if raw_end is None else parse_timestamp(raw_end)
        task = entry_data.get("task")
        description = entry_data.get("description") or (task.get("name") if isinstance(task, dict) else "") or ""
        return cls(parse_timestamp(entry_data.get("start")), end, description)

    @property
    def is_ongoing(self) -> bool:
        return self.end is None

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __repr__(self):
        return f"Interval(start={self.start!r}, end={self.end!r})"
