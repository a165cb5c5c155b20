"""Utility modules for clickuTime."""

from .date_utils import now_ms, today_window, ms_to_local_hm
from .format_utils import split_hours_minutes, format_summary, format_hm

__all__ = [
    'now_ms', 'today_window', 'ms_to_local_hm',
    'split_hours_minutes', 'format_summary', 'format_hm'
]
