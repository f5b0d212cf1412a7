"""Infrastructure port definitions."""

from .system import IClock  # noqa: F401

__all__ = [
    "IClock",
]
