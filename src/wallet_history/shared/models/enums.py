"""
Shared enumerations for wallet-history.

Separates what happened to a wallet (action, status) from how it is
presented (granularity, view, value format).
"""

import enum


# ============================================================================
# TRANSACTION CLASSIFICATION
# ============================================================================
class TransactionAction(str, enum.Enum):
    """Direction of a transaction relative to the wallet being charted."""

    SENT = "sent"
    RECEIVED = "received"
    MINED = "mined"

    @property
    def is_incoming(self) -> bool:
        return self is not TransactionAction.SENT


class TransactionStatus(str, enum.Enum):
    """Settlement state reported by the transaction-history service."""

    PENDING = "pending"
    SUCCESS = "success"


# ============================================================================
# PRESENTATION
# ============================================================================
class Granularity(str, enum.Enum):
    """Time-grid bucket size."""

    HOUR = "hour"
    DAY = "day"


class ChartView(str, enum.Enum):
    """
    Views that embed the balance chart.
    Each view has a fixed grid shape; see config.state.ViewConfig.
    """

    DASHBOARD = "dashboard"
    REPORTS_30D = "reports_30d"
    REPORTS_90D = "reports_90d"
    REPORTS_365D = "reports_365d"


class ValueFormat(str, enum.Enum):
    """How numeric values are printed on axes and tooltips."""

    PLAIN = "plain"
    CURRENCY = "currency"
