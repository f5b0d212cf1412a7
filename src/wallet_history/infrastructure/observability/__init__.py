"""
Observability for wallet-history: structured logging shared by every layer.
Each layer gets a factory that binds its layer and component names, so log
lines from grid building, reconstruction, rendering and hover lookups can be
filtered and correlated without parsing message text.
"""

from .logging import (
    # Layer-specific logger factories
    get_charting_logger,
    get_history_logger,
    get_infrastructure_logger,
    get_ingestion_logger,
    # Base logger factory
    get_logger,
    get_orchestration_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_infrastructure_logger",
    "get_ingestion_logger",
    "get_history_logger",
    "get_charting_logger",
    "get_orchestration_logger",
]
