"""
Tests for balance-series reconstruction.

Scenario used throughout: current balance 10, sent 5 two hours ago and
received 3 one hour ago, on a 3-bucket hourly grid ending now.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from wallet_history.history.reconstruction import (
    SeriesPoint,
    reconstruct,
    series_values,
    to_decimal,
)
from wallet_history.history.time_grid import DAILY_SPAN, HOURLY_SPAN, build_grid
from wallet_history.shared.models import TransactionAction


@pytest.fixture
def hourly_grid(now):
    return build_grid(now, 3, HOURLY_SPAN)


class TestReconstruct:
    def test_concrete_scenario(self, sample_transactions, hourly_grid):
        series = reconstruct(sample_transactions, 10, hourly_grid)

        assert [point.value for point in series] == [
            Decimal(12),
            Decimal(7),
            Decimal(10),
        ]
        assert [point.bucket for point in series] == list(hourly_grid)

    def test_transaction_on_boundary_is_undone(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        on_boundary = make_transaction("b", TransactionAction.RECEIVED, 4, grid[0].start)

        series = reconstruct([on_boundary], 10, grid)

        # timestamp == start of the first bucket counts as "at or after" it
        assert series[0].value == Decimal(6)
        assert series[1].value == Decimal(10)

    def test_transaction_just_before_boundary_is_kept(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        before = make_transaction(
            "b", TransactionAction.RECEIVED, 4, grid[0].start - timedelta(seconds=1)
        )

        series = reconstruct([before], 10, grid)

        assert [p.value for p in series] == [Decimal(10), Decimal(10)]

    def test_values_never_negative(self, now, make_transaction):
        grid = build_grid(now, 3, HOURLY_SPAN)
        big_receipt = make_transaction(
            "r", TransactionAction.RECEIVED, 100, now - timedelta(minutes=90)
        )

        series = reconstruct([big_receipt], 10, grid)

        assert [p.value for p in series] == [Decimal(0), Decimal(10), Decimal(10)]
        assert all(p.value >= 0 for p in series)

    def test_empty_transactions_give_flat_series(self, hourly_grid):
        series = reconstruct([], Decimal("42.5"), hourly_grid)

        assert [p.value for p in series] == [Decimal("42.5")] * 3

    def test_empty_grid(self, sample_transactions):
        assert reconstruct(sample_transactions, 10, ()) == ()

    def test_mined_counts_as_incoming(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        reward = make_transaction("m", TransactionAction.MINED, 50, now - timedelta(minutes=30))

        series = reconstruct([reward], 60, grid)

        assert [p.value for p in series] == [Decimal(10), Decimal(60)]

    def test_signed_sent_amount_treated_as_outgoing(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        sent = make_transaction("s", TransactionAction.SENT, -5, now - timedelta(minutes=30))

        series = reconstruct([sent], 10, grid)

        assert series[0].value == Decimal(15)

    def test_malformed_timestamp_excluded(self, now, make_transaction, hourly_grid):
        broken = make_transaction("x", TransactionAction.RECEIVED, 7, "not-a-date")

        series = reconstruct([broken], 10, hourly_grid)

        assert broken.timestamp is None
        assert [p.value for p in series] == [Decimal(10)] * 3

    def test_future_transaction_undone_everywhere(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        later = make_transaction("f", TransactionAction.SENT, 2, now + timedelta(minutes=5))

        series = reconstruct([later], 10, grid)

        assert [p.value for p in series] == [Decimal(12), Decimal(12)]

    def test_order_of_transactions_irrelevant(self, sample_transactions, hourly_grid):
        forward = reconstruct(sample_transactions, 10, hourly_grid)
        backward = reconstruct(list(reversed(sample_transactions)), 10, hourly_grid)

        assert forward == backward

    def test_deterministic(self, sample_transactions, hourly_grid):
        assert reconstruct(sample_transactions, 10, hourly_grid) == reconstruct(
            sample_transactions, 10, hourly_grid
        )

    def test_daily_grid(self, now, make_transaction):
        grid = build_grid(now, 3, DAILY_SPAN)
        txs = [
            make_transaction("a", TransactionAction.RECEIVED, "2.5", now - timedelta(days=1, hours=3)),
            make_transaction("b", TransactionAction.SENT, 1, now - timedelta(hours=2)),
        ]

        series = reconstruct(txs, 20, grid)

        assert [p.value for p in series] == [Decimal("18.5"), Decimal(21), Decimal(20)]

    def test_decimal_amounts_stay_exact(self, now, make_transaction):
        grid = build_grid(now, 2, HOURLY_SPAN)
        tx = make_transaction("d", TransactionAction.RECEIVED, 0.1, now - timedelta(minutes=1))

        series = reconstruct([tx], 0.3, grid)

        assert series[0].value == Decimal("0.2")


class TestHelpers:
    def test_to_decimal_float_uses_printed_value(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(3) == Decimal(3)
        assert to_decimal("1.50") == Decimal("1.50")

    def test_series_values(self, hourly_grid):
        series = [SeriesPoint(bucket=b, value=Decimal("1.5")) for b in hourly_grid]

        assert series_values(series) == [1.5, 1.5, 1.5]
