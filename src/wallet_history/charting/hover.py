"""Pointer hover lookup over a render layout.

``locate`` is a pure query: it reads only the layout it is given. Callers
must pair a layout with the series it was rendered from.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta

import numpy as np

from wallet_history.charting.formatting import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DECIMALS,
    format_value,
)
from wallet_history.charting.layout import RenderLayout
from wallet_history.history.reconstruction import SeriesPoint
from wallet_history.shared.models.enums import Granularity, ValueFormat

DEFAULT_HOVER_THRESHOLD = 15.0


@dataclass(frozen=True, slots=True)
class TooltipPayload:
    """What a tooltip shows for a hovered point."""

    bucket_label: str
    formatted_value: str


def locate(
    cursor_x: float,
    cursor_y: float,
    layout: RenderLayout,
    threshold: float = DEFAULT_HOVER_THRESHOLD,
) -> int | None:
    """
    Find the plotted point nearest to the cursor.

    Args:
        cursor_x: Cursor x in logical pixels
        cursor_y: Cursor y in logical pixels
        layout: Layout returned by the render that is on screen
        threshold: Distance (logical pixels) the nearest point must be under

    Returns:
        Index of the nearest point, the lowest index on ties, or None when
        nothing is within the threshold
    """
    if layout.is_empty:
        return None

    coords = np.array([(p.x, p.y) for p in layout.points], dtype=float)
    distances = np.hypot(coords[:, 0] - cursor_x, coords[:, 1] - cursor_y)
    # argmin returns the first minimum, so ties resolve to the lowest index
    index = int(np.argmin(distances))
    if distances[index] < threshold:
        return index
    return None


def _infer_granularity(series: Sequence[SeriesPoint]) -> Granularity:
    if len(series) > 1 and series[1].bucket.start - series[0].bucket.start >= timedelta(days=1):
        return Granularity.DAY
    return Granularity.HOUR


def tooltip_for(
    index: int | None,
    series: Sequence[SeriesPoint],
    *,
    value_format: ValueFormat = ValueFormat.PLAIN,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    decimals: int = DEFAULT_DECIMALS,
    granularity: Granularity | None = None,
) -> TooltipPayload | None:
    """
    Build the tooltip for a located point.

    Buckets without an axis label are described by their start: "%b %d" on
    day grids, "%H:00" on hourly grids.

    Returns:
        TooltipPayload, or None if ``index`` is None or outside ``series``
    """
    if index is None or not 0 <= index < len(series):
        return None

    point = series[index]
    label = point.bucket.label
    if not label:
        granularity = granularity or _infer_granularity(series)
        fmt = "%b %d" if granularity is Granularity.DAY else "%H:00"
        label = point.bucket.start.strftime(fmt)

    return TooltipPayload(
        bucket_label=label,
        formatted_value=format_value(
            point.value,
            value_format,
            currency_symbol=currency_symbol,
            decimals=decimals,
        ),
    )
