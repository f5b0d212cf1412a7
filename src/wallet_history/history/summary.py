"""Report summaries over a wallet transaction log.

Provides:
- summarize: totals and counts per action, net change and current balance
- monthly_summary: the same restricted to the calendar month containing now

Amounts are aggregated as unsigned Decimal magnitudes; direction comes from
the action, as in balance reconstruction.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

import pandas as pd

from wallet_history.common.utils.date_utils import ensure_utc, month_start, next_month_start
from wallet_history.history.reconstruction import ZERO, to_decimal
from wallet_history.infrastructure.observability import get_history_logger
from wallet_history.shared.models.enums import TransactionAction
from wallet_history.shared.models.transactions import TransactionRecord

logger = get_history_logger("summary")

_COLUMNS = ["action", "amount", "timestamp"]


@dataclass(frozen=True, slots=True)
class BalanceSummary:
    """Aggregated activity for a wallet."""

    current_balance: Decimal
    total_sent: Decimal = ZERO
    total_received: Decimal = ZERO
    total_mined: Decimal = ZERO
    sent_count: int = 0
    received_count: int = 0
    mined_count: int = 0

    @property
    def transaction_count(self) -> int:
        return self.sent_count + self.received_count + self.mined_count

    @property
    def net_change(self) -> Decimal:
        return self.total_received + self.total_mined - self.total_sent


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    """Activity for one calendar month."""

    month: str
    year: int
    summary: BalanceSummary


def _to_frame(transactions: Iterable[TransactionRecord]) -> pd.DataFrame:
    rows = [
        {
            "action": tx.action.value,
            # Decimal objects keep the column in object dtype, summed exactly
            "amount": abs(tx.amount),
            "timestamp": tx.timestamp,
        }
        for tx in transactions
    ]
    frame = pd.DataFrame(rows, columns=_COLUMNS)
    frame["timestamp"] = pd.to_datetime(frame["timestamp"], utc=True, errors="coerce")
    return frame


def _decimal_sum(amounts: pd.Series) -> Decimal:
    return sum(amounts, ZERO)


def summarize(
    transactions: Iterable[TransactionRecord],
    current_balance: Decimal | int | float,
    *,
    since: datetime | None = None,
    until: datetime | None = None,
) -> BalanceSummary:
    """
    Summarize a transaction log.

    Args:
        transactions: Wallet transaction log
        current_balance: Balance as of now
        since: If given, only transactions at or after this instant count
        until: If given, only transactions strictly before this instant count

    Transactions without a timestamp are excluded whenever a window applies.

    Returns:
        BalanceSummary with per-action totals and counts
    """
    frame = _to_frame(transactions)
    if since is not None:
        frame = frame[frame["timestamp"] >= pd.Timestamp(ensure_utc(since))]
    if until is not None:
        frame = frame[frame["timestamp"] < pd.Timestamp(ensure_utc(until))]

    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    if not frame.empty:
        grouped = frame.groupby("action")["amount"]
        totals = {action: to_decimal(total) for action, total in grouped.agg(_decimal_sum).items()}
        counts = {action: int(count) for action, count in grouped.size().items()}

    summary = BalanceSummary(
        current_balance=to_decimal(current_balance),
        total_sent=totals.get(TransactionAction.SENT.value, ZERO),
        total_received=totals.get(TransactionAction.RECEIVED.value, ZERO),
        total_mined=totals.get(TransactionAction.MINED.value, ZERO),
        sent_count=counts.get(TransactionAction.SENT.value, 0),
        received_count=counts.get(TransactionAction.RECEIVED.value, 0),
        mined_count=counts.get(TransactionAction.MINED.value, 0),
    )
    logger.debug(
        "summary_computed",
        transactions=summary.transaction_count,
        since=since.isoformat() if since else None,
        until=until.isoformat() if until else None,
    )
    return summary


def monthly_summary(
    transactions: Iterable[TransactionRecord],
    current_balance: Decimal | int | float,
    now: datetime,
) -> MonthlySummary:
    """Summarize the calendar month containing ``now``; later months are excluded."""
    start = month_start(ensure_utc(now))
    return MonthlySummary(
        month=start.strftime("%B"),
        year=start.year,
        summary=summarize(
            transactions,
            current_balance,
            since=start,
            until=next_month_start(start),
        ),
    )
