"""Chart workflows."""

from wallet_history.orchestration.workflows.balance_chart import (
    BalanceChartWorkflow,
    ChartSnapshot,
)

__all__ = ["BalanceChartWorkflow", "ChartSnapshot"]
