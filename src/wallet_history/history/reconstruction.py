"""Balance-series reconstruction.

Infers the wallet balance at each grid boundary from a single known current
balance by undoing every transaction recorded at or after that boundary:

    value(b) = max(0, current_balance - sum(effect(tx) for tx.timestamp >= b.start))

where ``effect`` is +amount for received/mined and -amount for sent.
Transactions without a timestamp are left out. Every call recomputes the full
series.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from wallet_history.common.utils.date_utils import ensure_utc
from wallet_history.history.time_grid import TimeBucket
from wallet_history.infrastructure.observability import get_history_logger
from wallet_history.shared.models.transactions import TransactionRecord

logger = get_history_logger("reconstructor")

ZERO = Decimal(0)


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """Reconstructed balance for one bucket."""

    bucket: TimeBucket
    value: Decimal


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a balance to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def reconstruct(
    transactions: Iterable[TransactionRecord],
    current_balance: Decimal | int | float | str,
    grid: tuple[TimeBucket, ...] | list[TimeBucket],
) -> tuple[SeriesPoint, ...]:
    """
    Reconstruct one balance value per grid bucket.

    Args:
        transactions: Wallet transaction log, any order
        current_balance: Balance as of now; already reflects every transaction
        grid: Buckets from build_grid, oldest first

    Returns:
        One SeriesPoint per bucket, in grid order, every value >= 0
    """
    balance = to_decimal(current_balance)
    dated = [(tx.timestamp, tx.effect) for tx in transactions if tx.timestamp is not None]

    points = []
    for bucket in grid:
        boundary = ensure_utc(bucket.start)
        undone = sum(
            (effect for timestamp, effect in dated if timestamp >= boundary),
            ZERO,
        )
        points.append(SeriesPoint(bucket=bucket, value=max(ZERO, balance - undone)))

    logger.debug(
        "series_reconstructed",
        buckets=len(points),
        transactions=len(dated),
    )
    return tuple(points)


def series_values(series: Iterable[SeriesPoint]) -> list[float]:
    """Plain float values of a series, for geometry."""
    return [float(point.value) for point in series]
