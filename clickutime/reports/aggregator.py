"""Summing tracked intervals into a day total."""
from typing import Iterable, List, Optional
from io import StringIO
from tabulate import tabulate

from .interval import Interval
from ..utils.date_utils import now_ms as current_ms, ms_to_local_hm
from ..utils.format_utils import split_hours_minutes, format_summary, format_hm

OVERTIME_HOURS = 8


def interval_elapsed_ms(interval: Interval, now_ms: int) -> int:
    """Elapsed time of one interval; a running interval ends at ``now_ms``."""
    end = interval.end if interval.end is not None else now_ms
    # abs() on each endpoint, not on the difference
    return abs(end) - abs(interval.start)


def sum_intervals(intervals: Iterable[Interval], now_ms: Optional[int] = None) -> int:
    """Sum the elapsed time of all intervals.

    Args:
        intervals: Intervals to sum
        now_ms: End time for running intervals (defaults to the current time)

    Returns:
        Total duration in milliseconds
    """
    if now_ms is None:
        now_ms = current_ms()
    return sum(interval_elapsed_ms(interval, now_ms) for interval in intervals)


class DaySummary:
    """Tracked time for one day plus the overtime and running-timer flags."""

    def __init__(self, entries: List[Interval], current: Optional[Interval] = None,
                 now_ms: Optional[int] = None):
        """Initialize a DaySummary.

        Args:
            entries: Completed entries of the day
            current: The running entry, if any
            now_ms: Evaluation time (defaults to the current time)
        """
        self.now_ms = now_ms if now_ms is not None else current_ms()
        self.intervals = list(entries)
        if current is not None:
            self.intervals.append(current)
        self.ongoing = current is not None
        self.total_ms = sum_intervals(self.intervals, self.now_ms)
        self.hours, self.minutes = split_hours_minutes(self.total_ms)
        self.overtime = self.hours >= OVERTIME_HOURS

    def summary_line(self) -> str:
        return format_summary(self.total_ms, self.ongoing, self.overtime)

    def breakdown_table(self) -> str:
        """Render the day's intervals as a table.

        Returns:
            GitHub-style table, one row per interval
        """
        rows = []
        for idx, interval in enumerate(self.intervals, start=1):
            rows.append([
                idx,
                interval.description,
                ms_to_local_hm(interval.start),
                "running" if interval.is_ongoing else ms_to_local_hm(interval.end),
                format_hm(interval_elapsed_ms(interval, self.now_ms)),
            ])
        output = StringIO()
        print(tabulate(rows, headers=["#", "Description", "Start", "End", "Duration"], tablefmt="github"),
              file=output)
        return output.getvalue()
