"""
Orchestration layer: wires configuration, clock, history and charting into
per-view chart workflows.
"""

from wallet_history.orchestration.workflows import BalanceChartWorkflow, ChartSnapshot

__all__ = ["BalanceChartWorkflow", "ChartSnapshot"]
