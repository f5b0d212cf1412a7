"""Shared models: transaction records and enumerations."""

from wallet_history.shared.models.enums import (
    ChartView,
    Granularity,
    TransactionAction,
    TransactionStatus,
    ValueFormat,
)
from wallet_history.shared.models.transactions import TransactionRecord

__all__ = [
    "ChartView",
    "Granularity",
    "TransactionAction",
    "TransactionRecord",
    "TransactionStatus",
    "ValueFormat",
]
