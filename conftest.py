"""
Shared fixtures for the wallet-history test suite.
Clock, transaction log and drawing-surface doubles.
"""

import sys
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src on path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from wallet_history.infrastructure.ports import IClock  # noqa: E402
from wallet_history.shared.models import TransactionAction, TransactionRecord  # noqa: E402

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


class FixedClock(IClock):
    """Clock frozen at a given UTC instant."""

    def __init__(self, instant: datetime = NOW):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def utcnow(self) -> datetime:
        return self.instant


def make_tx(
    tx_id: str,
    action: TransactionAction | str,
    amount: Decimal | int | float | str,
    timestamp: datetime | str | None,
) -> TransactionRecord:
    return TransactionRecord(id=tx_id, action=action, amount=amount, timestamp=timestamp)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def sample_transactions() -> list[TransactionRecord]:
    """Sent 5 two hours ago, received 3 one hour ago."""
    return [
        make_tx("tx-1", TransactionAction.SENT, 5, NOW - timedelta(hours=2)),
        make_tx("tx-2", TransactionAction.RECEIVED, 3, NOW - timedelta(hours=1)),
    ]


@pytest.fixture
def mock_surface() -> MagicMock:
    """Drawing surface double recording every call, 400x200 logical pixels."""
    surface = MagicMock()
    surface.size = (400.0, 200.0)
    return surface


@pytest.fixture
def make_transaction():
    """Factory for TransactionRecord objects."""
    return make_tx
