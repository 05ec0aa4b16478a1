"""
Diagnostic logger interface.

Components report validation and dispatch details at debug level and
unreadable configuration at warning level. Nothing else is logged; command
failures surface as exceptions, not log records.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Sink for svnprovider diagnostics, resolved from the container."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Record a %-style debug message (cross-checks, dispatch)."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Record a %-style warning (unreadable config files)."""
