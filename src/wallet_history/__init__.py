"""
Wallet balance history and charting.
Reconstructs past balances from a transaction log and draws them as a chart.

Modules:
- history: Time grids, balance reconstruction, report summaries
- charting: Renderer, hover lookup, drawing surfaces
- ingestion: Transaction-history feed normalization
- orchestration: Per-view chart workflows
- shared: Common models, enums, exceptions
- infrastructure: Clock, logging
- config: Chart configuration
"""

__version__ = "1.0.0"
