"""Report modules for clickuTime."""

from .interval import Interval
from .aggregator import DaySummary, sum_intervals

__all__ = ['Interval', 'DaySummary', 'sum_intervals']
