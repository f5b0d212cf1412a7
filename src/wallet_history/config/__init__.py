"""
Configuration exports for wallet-history.

Usage:
    from wallet_history.config import get_config
    view = get_config().view("dashboard")
"""

from wallet_history.config.state import (
    ChartStyleConfig,
    ConfigLoader,
    ConfigState,
    FormattingConfig,
    HoverConfig,
    LoggingConfig,
    ViewConfig,
    get_config,
)

__all__ = [
    "ChartStyleConfig",
    "ConfigLoader",
    "ConfigState",
    "FormattingConfig",
    "HoverConfig",
    "LoggingConfig",
    "ViewConfig",
    "get_config",
]
