"""Ingestion layer: transaction-history feed -> TransactionRecord."""

from wallet_history.ingestion.normalizer import TransactionNormalizer

__all__ = ["TransactionNormalizer"]
