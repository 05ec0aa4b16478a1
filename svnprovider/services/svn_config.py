"""
Reader for the Subversion client configuration file.

The client keeps INI-style runtime configuration in ``<config dir>/config``;
the [tunnels] section there defines the svn+xxx schemes the client accepts.
"""

from __future__ import annotations

import configparser
import os
import sys
from pathlib import Path

from ..core.di import get_logger
from ..core.interfaces.tunnels import ITunnelSettings


def default_config_directory() -> Path:
    """Return the platform's default Subversion configuration directory."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "Subversion"
    return Path.home() / ".subversion"


class SvnConfigFileReader(ITunnelSettings):
    """
    ITunnelSettings backed by the Subversion client 'config' file.

    The file is parsed once, on the first lookup. A missing or unreadable
    file behaves like an empty one.
    """

    CONFIG_FILENAME = "config"

    def __init__(self, config_directory: str | Path | None = None) -> None:
        self._config_directory = (
            Path(config_directory) if config_directory else default_config_directory()
        )
        self._parser: configparser.ConfigParser | None = None

    @property
    def config_directory(self) -> Path:
        return self._config_directory

    @property
    def config_file(self) -> Path:
        return self._config_directory / self.CONFIG_FILENAME

    def _load(self) -> configparser.ConfigParser:
        if self._parser is not None:
            return self._parser

        # svn option names are case-sensitive and values may contain '%'
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        parser.optionxform = str  # type: ignore[assignment,method-assign]

        path = self.config_file
        if path.is_file():
            try:
                with open(path, encoding="utf-8") as f:
                    parser.read_file(f)
            except (OSError, UnicodeDecodeError) as e:
                get_logger().warning("Failed to read svn config file %s: %s", path, e)
            except configparser.Error as e:
                get_logger().warning("Failed to parse svn config file %s: %s", path, e)
        else:
            get_logger().debug("No svn config file at %s", path)

        self._parser = parser
        return parser

    def get_property(self, section: str, key: str) -> str | None:
        """Return the value of key in section, or None if undefined."""
        parser = self._load()
        if not parser.has_section(section):
            return None
        return parser.get(section, key, fallback=None)
