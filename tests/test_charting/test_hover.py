"""
Tests for hover lookup and tooltip payloads.

``locate`` only reads the layout it is given, so layouts are built by hand.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from wallet_history.charting.hover import TooltipPayload, locate, tooltip_for
from wallet_history.charting.layout import PointPosition, RenderLayout
from wallet_history.history.reconstruction import SeriesPoint
from wallet_history.history.time_grid import DAILY_SPAN, HOURLY_SPAN, TimeBucket, build_grid
from wallet_history.shared.models import Granularity, ValueFormat


def _layout(*points: tuple[float, float]) -> RenderLayout:
    return RenderLayout(
        origin_x=40.0,
        origin_y=40.0,
        plot_width=320.0,
        plot_height=120.0,
        points=tuple(PointPosition(x, y) for x, y in points),
    )


class TestLocate:
    def test_within_threshold(self):
        assert locate(110, 50, _layout((100, 50))) == 0

    def test_outside_threshold(self):
        assert locate(120, 50, _layout((100, 50))) is None

    def test_distance_equal_to_threshold_misses(self):
        assert locate(115, 50, _layout((100, 50)), threshold=15.0) is None

    def test_uses_euclidean_distance(self):
        # dx = 9, dy = 12 -> distance 15
        assert locate(109, 62, _layout((100, 50))) is None
        assert locate(108, 61, _layout((100, 50))) == 0

    def test_picks_nearest_point(self):
        layout = _layout((100, 50), (120, 50), (140, 50))

        assert locate(126, 52, layout) == 1

    def test_tie_goes_to_lowest_index(self):
        layout = _layout((100, 50), (120, 50))

        assert locate(110, 50, layout) == 0

    def test_empty_layout(self):
        assert locate(100, 50, RenderLayout.empty()) is None

    def test_custom_threshold(self):
        assert locate(130, 50, _layout((100, 50)), threshold=40) == 0

    def test_pure_query(self):
        layout = _layout((100, 50), (200, 80))

        assert [locate(198, 81, layout) for _ in range(3)] == [1, 1, 1]


class TestTooltipFor:
    @pytest.fixture
    def series(self, now):
        grid = build_grid(now, 3, HOURLY_SPAN)
        return tuple(
            SeriesPoint(bucket=b, value=Decimal(v)) for b, v in zip(grid, ["12", "7", "1234.5"])
        )

    def test_payload(self, series):
        assert tooltip_for(2, series) == TooltipPayload(
            bucket_label="12:00", formatted_value="1,234.50"
        )

    def test_currency_payload(self, series):
        payload = tooltip_for(0, series, value_format=ValueFormat.CURRENCY)

        assert payload.formatted_value == "12.00 CW"

    def test_none_index(self, series):
        assert tooltip_for(None, series) is None

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range_index(self, series, index):
        assert tooltip_for(index, series) is None

    def test_unlabelled_day_bucket_uses_date(self, now):
        grid = build_grid(now, 30, DAILY_SPAN)
        series = [SeriesPoint(bucket=b, value=Decimal(1)) for b in grid]

        payload = tooltip_for(10, series)

        assert payload.bucket_label == (now - timedelta(days=19)).strftime("%b %d")

    def test_unlabelled_hour_bucket_with_explicit_granularity(self):
        bucket = TimeBucket(start=datetime(2024, 1, 2, 9, 0, tzinfo=UTC))

        payload = tooltip_for(
            0, [SeriesPoint(bucket=bucket, value=Decimal(0))], granularity=Granularity.HOUR
        )

        assert payload == TooltipPayload(bucket_label="09:00", formatted_value="0.00")
