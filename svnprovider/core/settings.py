"""
Pydantic Settings for svnprovider configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .di import get_logger
from .models.config import LoggingConfig

CONFIG_DIR_NAME = ".svnprovider"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .svnprovider/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.svnprovider] section also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / "config.toml"
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "svnprovider" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("svnprovider", {})

            self._data = data
        except tomllib.TOMLDecodeError as e:
            get_logger().warning("Failed to parse config file %s: %s", path, e)
        except OSError as e:
            get_logger().warning("Failed to read config file %s: %s", path, e)

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class SvnProviderSettings(BaseSettings):
    """svnprovider settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (SVNPROVIDER_<field>, SVNPROVIDER_<section>__<field>)
    3. TOML config file (.svnprovider/config.toml or pyproject.toml [tool.svnprovider])
    4. Model defaults

    Fields:
        config_directory: Subversion client configuration directory override
            (defaults to the platform's standard location when unset)
        current_working_directory: When set, URLs are cross-checked against
            'svn info' run in this directory
    """

    model_config = {
        "env_prefix": "SVNPROVIDER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    config_directory: str | None = None
    current_working_directory: str | None = None
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The config path can't be passed through here, so load_settings()
        hands it over in module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None

_settings: SvnProviderSettings | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> SvnProviderSettings:
    """Load svnprovider settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values taking precedence over every source

    Returns:
        SvnProviderSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        return SvnProviderSettings(**overrides)
    finally:
        _current_config_path = None
        _current_start_dir = None


def get_settings() -> SvnProviderSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings

    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: SvnProviderSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget cached settings (for testing)."""
    global _settings
    _settings = None
