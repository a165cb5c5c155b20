import sys
import os
import unittest
from datetime import datetime, timezone

# Add the parent directory to sys.path to import the clickutime package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from clickutime.reports.interval import Interval, parse_timestamp
from clickutime.reports.aggregator import DaySummary, sum_intervals, interval_elapsed_ms
from clickutime.utils.date_utils import today_window
from clickutime.utils.format_utils import split_hours_minutes, format_hm

HOUR_MS = 3600000
NOW_MS = 1700000000000


class TestSumIntervals(unittest.TestCase):
    """Test summing of tracked intervals."""

    def test_empty_list_is_zero(self):
        self.assertEqual(sum_intervals([], NOW_MS), 0)

    def test_single_completed_hour(self):
        self.assertEqual(sum_intervals([Interval(0, HOUR_MS)], NOW_MS), HOUR_MS)

    def test_running_interval_ends_now(self):
        """A running interval counts up to the evaluation time."""
        self.assertEqual(sum_intervals([Interval(NOW_MS - 90000)], NOW_MS), 90000)

    def test_order_does_not_matter(self):
        forward = [Interval(0, 1000), Interval(2000, 5000)]
        backward = list(reversed(forward))
        self.assertEqual(sum_intervals(forward, NOW_MS), 4000)
        self.assertEqual(sum_intervals(forward, NOW_MS), sum_intervals(backward, NOW_MS))

    def test_absolute_value_applied_to_each_endpoint(self):
        # |500| - |-1000|, not |500 - (-1000)|
        self.assertEqual(interval_elapsed_ms(Interval(-1000, 500), NOW_MS), -500)

    def test_end_before_start_counts_negative(self):
        entries = [Interval(0, 2 * HOUR_MS), Interval(5000, 4000)]
        self.assertEqual(sum_intervals(entries, NOW_MS), 2 * HOUR_MS - 1000)

    def test_defaults_to_current_time(self):
        """Without an explicit time the running interval is measured against the clock."""
        start = int(datetime.now().timestamp() * 1000) - 60000
        total = sum_intervals([Interval(start)])
        self.assertGreaterEqual(total, 60000)
        self.assertLess(total, 120000)


class TestDaySummary(unittest.TestCase):
    """Test the day summary line and its flags."""

    def test_empty_day(self):
        summary = DaySummary([], None, now_ms=NOW_MS)
        self.assertEqual(summary.summary_line(), "0:0")
        self.assertFalse(summary.ongoing)
        self.assertFalse(summary.overtime)

    def test_one_hour(self):
        summary = DaySummary([Interval(0, HOUR_MS)], now_ms=NOW_MS)
        self.assertEqual(summary.summary_line(), "1:0")

    def test_running_timer_ninety_seconds(self):
        summary = DaySummary([], Interval(NOW_MS - 90000), now_ms=NOW_MS)
        self.assertEqual((summary.hours, summary.minutes), (0, 1))
        self.assertEqual(summary.summary_line(), "0:1 [+]")

    def test_running_timer_flag_at_zero(self):
        summary = DaySummary([], Interval(NOW_MS), now_ms=NOW_MS)
        self.assertEqual(summary.summary_line(), "0:0 [+]")

    def test_running_timer_is_appended_last(self):
        current = Interval(NOW_MS - 1000)
        summary = DaySummary([Interval(0, 1000), Interval(2000, 3000)], current, now_ms=NOW_MS)
        self.assertEqual(len(summary.intervals), 3)
        self.assertIs(summary.intervals[-1], current)

    def test_overtime_threshold(self):
        just_under = DaySummary([Interval(0, int(7.99 * HOUR_MS))], now_ms=NOW_MS)
        self.assertFalse(just_under.overtime)
        self.assertEqual(just_under.summary_line(), "7:59")

        exactly = DaySummary([Interval(0, 8 * HOUR_MS)], now_ms=NOW_MS)
        self.assertTrue(exactly.overtime)
        self.assertEqual(exactly.summary_line(), "8:0 [!]")

    def test_both_flags_order(self):
        entries = [Interval(0, 8 * HOUR_MS + 15 * 60000)]
        summary = DaySummary(entries, Interval(NOW_MS), now_ms=NOW_MS)
        self.assertEqual(summary.summary_line(), "8:15 [+] [!]")

    def test_breakdown_table(self):
        entries = [Interval(0, HOUR_MS, "Write report")]
        summary = DaySummary(entries, Interval(NOW_MS - 30 * 60000, None, "Review"), now_ms=NOW_MS)
        table = summary.breakdown_table()
        self.assertIn("Description", table)
        self.assertIn("Write report", table)
        self.assertIn("running", table)
        self.assertIn("1:00", table)
        self.assertIn("0:30", table)


class TestParsing(unittest.TestCase):
    """Test parsing of raw ClickUp time entries."""

    def test_parse_timestamp(self):
        test_cases = [
            ("1700000000000", 1700000000000),
            ("-5", -5),
            ("+7", 7),
            (1234, 1234),
            ("", 0),
            ("abc", 0),
            ("12abc", 0),
            (" 12", 0),
            ("1_000", 0),
            ("1.5", 0),
            (None, 0),
            (True, 0),
        ]
        for raw, expected in test_cases:
            with self.subTest(raw=raw):
                self.assertEqual(parse_timestamp(raw), expected)

    def test_from_api_completed(self):
        interval = Interval.from_api({"id": "1", "start": "1000", "end": "4000", "task": {"name": "Task A"}})
        self.assertEqual(interval, Interval(1000, 4000))
        self.assertFalse(interval.is_ongoing)
        self.assertEqual(interval.description, "Task A")

    def test_from_api_running(self):
        interval = Interval.from_api({"start": "1000", "end": None, "description": "Debugging"})
        self.assertTrue(interval.is_ongoing)
        self.assertEqual(interval.description, "Debugging")

    def test_from_api_garbage_timestamps(self):
        self.assertEqual(Interval.from_api({"start": "soon", "end": "later"}), Interval(0, 0))
        self.assertEqual(Interval.from_api({}), Interval(0, None))

    def test_from_api_rejects_non_object(self):
        with self.assertRaises(TypeError):
            Interval.from_api(["1000", "2000"])


class TestUnits(unittest.TestCase):
    """Test duration and window helpers."""

    def test_split_hours_minutes_floors(self):
        self.assertEqual(split_hours_minutes(0), (0, 0))
        self.assertEqual(split_hours_minutes(HOUR_MS + 59999), (1, 0))
        self.assertEqual(split_hours_minutes(2 * HOUR_MS + 45 * 60000), (2, 45))
        self.assertEqual(split_hours_minutes(-30 * 60000), (-1, 30))

    def test_format_hm(self):
        self.assertEqual(format_hm(90 * 60000), "1:30")
        self.assertEqual(format_hm(-5 * 60000), "-0:05")

    def test_today_window(self):
        now = datetime(2024, 3, 5, 15, 30, tzinfo=timezone.utc)
        start, end = today_window(now)
        self.assertEqual(start, 1709596800000)
        self.assertEqual(end - start, 86400000)


if __name__ == '__main__':
    unittest.main()
