"""Default implementations of infrastructure abstractions."""

from datetime import datetime

from wallet_history.common.utils.date_utils import utc_now
from wallet_history.infrastructure.ports.system import IClock


class SystemClock(IClock):
    """Default implementation using system time."""

    def now(self) -> datetime:
        """Get current local time."""
        return datetime.now().astimezone()

    def utcnow(self) -> datetime:
        """Get current UTC time."""
        return utc_now()
