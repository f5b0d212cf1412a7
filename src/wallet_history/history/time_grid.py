"""
Time-grid builder for balance charts.

Responsibility: Produce the ordered bucket boundaries a chart is drawn on.
Does NOT look at transactions; the grid depends only on the clock and the
view's fixed shape.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from wallet_history.shared.models.enums import Granularity

HOURLY_SPAN = timedelta(hours=1)
DAILY_SPAN = timedelta(days=1)

# Offsets counted from the newest bucket of a day grid that carry a label.
_DAY_LABELS = {
    0: "Today",
    7: "1w ago",
    14: "2w ago",
    21: "3w ago",
    28: "4w ago",
}


@dataclass(frozen=True, slots=True)
class TimeBucket:
    """One slot of a time grid.

    ``start`` doubles as the bucket's boundary for reconstruction. ``label`` is
    empty for buckets that get no axis tick.
    """

    start: datetime
    label: str = ""


def span_for(granularity: Granularity) -> timedelta:
    """Bucket span for a granularity."""
    return HOURLY_SPAN if granularity is Granularity.HOUR else DAILY_SPAN


def _label(start: datetime, offset_from_end: int, bucket_span: timedelta) -> str:
    if bucket_span < DAILY_SPAN:
        return f"{start.hour:02d}:00"
    return _DAY_LABELS.get(offset_from_end, "")


def build_grid(
    now: datetime,
    bucket_count: int,
    bucket_span: timedelta,
) -> tuple[TimeBucket, ...]:
    """
    Build ``bucket_count`` buckets ending at ``now``, oldest first.

    Bucket ``i`` starts at ``now - (bucket_count - 1 - i) * bucket_span``, so
    the newest bucket starts exactly at ``now``. Hourly grids label every
    bucket with its hour; day grids label only today and the 1-4 weeks ago
    marks.

    Args:
        now: Wall-clock instant the grid ends at
        bucket_count: Number of buckets (fixed per view)
        bucket_span: Spacing between bucket starts

    Returns:
        Immutable, ascending tuple of TimeBucket

    Raises:
        ValueError: If bucket_count is negative or bucket_span is not positive
    """
    if bucket_count < 0:
        raise ValueError(f"bucket_count must be >= 0, got {bucket_count}")
    if bucket_span <= timedelta(0):
        raise ValueError(f"bucket_span must be positive, got {bucket_span}")

    buckets = []
    for index in range(bucket_count):
        offset_from_end = bucket_count - 1 - index
        start = now - bucket_span * offset_from_end
        buckets.append(
            TimeBucket(start=start, label=_label(start, offset_from_end, bucket_span))
        )
    return tuple(buckets)


def build_grid_for(
    now: datetime, bucket_count: int, granularity: Granularity
) -> tuple[TimeBucket, ...]:
    """Convenience wrapper taking a granularity instead of a span."""
    return build_grid(now, bucket_count, span_for(granularity))
