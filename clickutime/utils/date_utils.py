"""Date utility functions for clickuTime."""
import time as _time
from datetime import datetime, time
from typing import Optional, Tuple


def now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(_time.time() * 1000)


def today_window(now: Optional[datetime] = None) -> Tuple[int, int]:
    """Get the millisecond window covering the current local day.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        Tuple of (start_ms, end_ms): local midnight and 24 hours later
    """
    ms_in_day = 86400000
    now = now or datetime.now()
    midnight = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    start = int(midnight.timestamp()) * 1000
    return start, start + ms_in_day


def ms_to_local_hm(ms: int) -> str:
    """Format a millisecond timestamp as HH:MM in local time.

    Args:
        ms: Milliseconds since epoch

    Returns:
        Formatted time string (HH:MM), or empty string if out of range
    """
    try:
        return datetime.fromtimestamp(ms / 1000).astimezone().strftime("%H:%M")
    except (OverflowError, OSError, ValueError):
        return ""
