"""
wallet-history Exception Hierarchy

Provides specific exception types for the failure scenarios that callers may
want to tell apart. Everything derives from WalletHistoryError.
"""


class WalletHistoryError(Exception):
    """Base exception for all wallet-history errors."""

    pass


class ConfigurationError(WalletHistoryError):
    """Configuration files or overrides failed validation."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class NormalizationError(WalletHistoryError):
    """A raw transaction-history record could not be turned into a TransactionRecord."""

    def __init__(self, message: str, record_id: str | None = None):
        super().__init__(message)
        self.record_id = record_id


class RenderError(WalletHistoryError):
    """The drawing surface rejected a drawing command."""

    pass
