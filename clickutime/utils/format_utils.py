"""Formatting utility functions for clickuTime."""
import math
from typing import Tuple

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE


def split_hours_minutes(total_ms: int) -> Tuple[int, int]:
    """Split a duration into floored hours and the floored remaining minutes.

    Args:
        total_ms: Duration in milliseconds (can be negative)

    Returns:
        Tuple of (hours, minutes)
    """
    hours = math.floor(total_ms / MS_PER_HOUR)
    minutes = math.floor(total_ms / MS_PER_MINUTE - hours * 60)
    return hours, minutes


def format_summary(total_ms: int, ongoing: bool, overtime: bool) -> str:
    """Format the one-line day summary.

    Args:
        total_ms: Tracked time in milliseconds
        ongoing: Whether a timer is currently running
        overtime: Whether the overtime threshold was reached

    Returns:
        Summary such as "8:15 [+] [!]"
    """
    hours, minutes = split_hours_minutes(total_ms)
    ongoing_flag = " [+]" if ongoing else ""
    overtime_flag = " [!]" if overtime else ""
    return f"{hours}:{minutes}{ongoing_flag}{overtime_flag}"


def format_hm(total_ms: int) -> str:
    """Format a duration as H:MM.

    Args:
        total_ms: Duration in milliseconds (can be negative)

    Returns:
        Formatted duration (with leading '-' if negative)
    """
    seconds = abs(total_ms) // 1000
    sign = "-" if total_ms < 0 else ""
    return f"{sign}{seconds // 3600}:{(seconds % 3600) // 60:02}"
