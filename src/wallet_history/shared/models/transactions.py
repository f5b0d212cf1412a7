"""Transaction models consumed by the history layer.

Records are owned by the external transaction-history service; this package
only reads them.

All models use:
- Pydantic for validation
- DECIMAL amounts (not float) for financial accuracy
- Timezone-aware UTC datetimes
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wallet_history.common.utils.date_utils import parse_timestamp
from wallet_history.shared.models.enums import TransactionAction, TransactionStatus


class TransactionRecord(BaseModel):
    """A single entry of a wallet's transaction log.

    ``amount`` is an unsigned magnitude at the API boundary; direction comes
    from ``action``. ``timestamp`` is None when the feed value could not be
    parsed, and such records are left out of balance reconstruction.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Transaction identifier")
    timestamp: datetime | None = Field(
        None, description="When the transaction was recorded (UTC)"
    )
    amount: Decimal = Field(..., description="Transferred amount (DECIMAL)")
    action: TransactionAction = Field(..., description="sent, received or mined")
    counterparty: str | None = Field(None, description="Other wallet, if any")
    status: TransactionStatus = Field(
        TransactionStatus.SUCCESS, description="pending or success"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str:
        return str(v)

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_feed_timestamp(cls, v: object) -> datetime | None:
        """Malformed timestamps become None instead of failing validation."""
        return parse_timestamp(v)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> object:
        # float -> str keeps the printed value instead of the binary expansion
        if isinstance(v, float):
            return str(v)
        return v

    @property
    def effect(self) -> Decimal:
        """Signed contribution of this transaction to the wallet balance."""
        magnitude = abs(self.amount)
        return magnitude if self.action.is_incoming else -magnitude
