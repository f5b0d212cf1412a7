"""System infrastructure port definitions."""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Abstract interface for clock operations."""

    @abstractmethod
    def now(self) -> datetime:
        """Get current local time."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Get current UTC time (timezone-aware)."""
        ...
