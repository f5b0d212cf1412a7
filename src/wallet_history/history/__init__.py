"""
History layer: time grids, balance reconstruction and report summaries.

Everything here is a pure function of its inputs; the wall clock enters only
through the ``now`` passed to build_grid.
"""

from wallet_history.history.reconstruction import SeriesPoint, reconstruct
from wallet_history.history.summary import (
    BalanceSummary,
    MonthlySummary,
    monthly_summary,
    summarize,
)
from wallet_history.history.time_grid import (
    DAILY_SPAN,
    HOURLY_SPAN,
    TimeBucket,
    build_grid,
    build_grid_for,
)

__all__ = [
    "BalanceSummary",
    "DAILY_SPAN",
    "HOURLY_SPAN",
    "MonthlySummary",
    "SeriesPoint",
    "TimeBucket",
    "build_grid",
    "build_grid_for",
    "monthly_summary",
    "reconstruct",
    "summarize",
]
