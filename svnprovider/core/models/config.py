"""
Configuration models.

Sections of SvnProviderSettings. Values arrive from TOML files and
environment variables, so these models coerce types instead of rejecting them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict

from .base import SvnBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(SvnBaseModel):
    """Config section: lenient about types and unknown keys."""

    model_config = ConfigDict(strict=False, extra="ignore")


class LoggingConfig(ConfigBaseModel):
    """Diagnostic logging section ([logging] / SVNPROVIDER_LOGGING__*).

    Attributes:
        level: Minimum level written to any enabled output
        console: Write to stderr
        file: Write to a rotating log file
        log_file: Log file path; defaults to ~/.svnprovider/svnprovider.log
    """

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    log_file: str | None = None
