"""
Diagnostic logging for svnprovider.

Messages go through a stdlib logger named 'svnprovider'. LoggingConfig
decides the level and whether records reach stderr, a rotating log file,
both, or nowhere.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".svnprovider" / "svnprovider.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_file(config: LoggingConfig) -> Path:
    """Return the configured log file path, or the per-user default."""
    if config.log_file:
        return Path(config.log_file).expanduser()
    return DEFAULT_LOG_FILE


class SvnProviderLogger(ILogger):
    """
    ILogger writing to the outputs enabled in a LoggingConfig.

    The stdlib logger is reconfigured on construction, so building a new
    SvnProviderLogger (e.g. after settings change) replaces earlier handlers.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    def __init__(self, config: LoggingConfig | None = None, name: str = "svnprovider") -> None:
        config = config or LoggingConfig()

        self._logger = logging.getLogger(name)
        self._logger.setLevel(config.level.upper())
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        # Diagnostics stay out of the host application's root handlers
        self._logger.propagate = False

        self.handlers: list[logging.Handler] = []
        if config.console:
            self._attach(logging.StreamHandler(sys.stderr))
        if config.file:
            path = resolve_log_file(config)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
                )
            )

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self._logger.addHandler(handler)
        self.handlers.append(handler)

    @property
    def level(self) -> int:
        return self._logger.level

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def close(self) -> None:
        """Detach and close every handler this logger added."""
        for handler in self.handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()


class NullLogger(ILogger):
    """Discards everything; used until bootstrap() registers a real logger."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass
