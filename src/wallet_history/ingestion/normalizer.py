"""Normalizer for the transaction-history feed.

Converts raw feed dicts into TransactionRecord objects:
- ``id`` (falls back to ``tx_id``), ``amount`` and ``action`` are required
- ``timestamp`` is parsed leniently; unparseable values become None and are
  later left out of balance reconstruction
- ``counterparty`` and ``status`` are optional

Actions outside sent/received/mined, statuses outside pending/success and
non-numeric amounts make a record unusable. Zakat deductions
(``zakat_deducted``) are not part of the action set and are ignored on
purpose: they are skipped like any other unknown action, so neither balance
reconstruction nor report summaries account for them.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from wallet_history.infrastructure.observability import get_ingestion_logger
from wallet_history.shared.exceptions import NormalizationError
from wallet_history.shared.models import TransactionRecord


class TransactionNormalizer:
    """Turns transaction-history feed records into TransactionRecords.

    In strict mode the first unusable record raises NormalizationError.
    Otherwise unusable records are logged, counted in ``skipped`` and
    dropped from the batch.
    """

    def __init__(self, strict: bool = False):
        """Initialize normalizer.

        Args:
            strict: Raise on unusable records instead of skipping them
        """
        self.strict = strict
        self.skipped = 0
        self.logger = get_ingestion_logger("normalizer", strict=strict)

    def normalize_single(self, raw: Mapping[str, Any]) -> TransactionRecord:
        """Normalize one feed record.

        Args:
            raw: Raw record from the transaction-history feed

        Returns:
            TransactionRecord with validated fields

        Raises:
            NormalizationError: If the record is unusable
        """
        if not isinstance(raw, Mapping):
            raise NormalizationError(f"Expected a mapping, got {type(raw).__name__}")
        record_id = self._extract_id(raw)
        if record_id is None:
            raise NormalizationError("Transaction has no id")
        try:
            return TransactionRecord(
                id=record_id,
                timestamp=raw.get("timestamp"),
                amount=raw["amount"],
                action=raw["action"],
                counterparty=raw.get("counterparty") or None,
                status=raw.get("status") or "success",
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise NormalizationError(
                f"Failed to normalize transaction {record_id}: {e}",
                record_id=record_id,
            ) from e

    def normalize_batch(self, raws: Iterable[Mapping[str, Any]]) -> list[TransactionRecord]:
        """Normalize a batch of feed records, preserving feed order.

        Args:
            raws: Raw records from the transaction-history feed

        Returns:
            List of TransactionRecord objects

        Raises:
            NormalizationError: In strict mode, on the first unusable record
        """
        records = []
        skipped = 0

        for index, raw in enumerate(raws):
            try:
                records.append(self.normalize_single(raw))
            except NormalizationError as e:
                if self.strict:
                    raise
                skipped += 1
                self.logger.warning(
                    "transaction_skipped",
                    index=index,
                    record_id=e.record_id,
                    error=str(e),
                )

        self.skipped += skipped
        if skipped:
            self.logger.info("transactions_skipped", skipped=skipped, kept=len(records))
        self.logger.debug("batch_normalized", records=len(records))
        return records

    @staticmethod
    def _extract_id(raw: Mapping[str, Any]) -> str | None:
        for key in ("id", "tx_id"):
            value = raw.get(key)
            if value not in (None, ""):
                return str(value)
        return None
