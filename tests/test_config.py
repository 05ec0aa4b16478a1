"""
Tests for svnprovider configuration loading.

Tests verify:
- find_config_file() locates .svnprovider/config.toml and pyproject.toml sections
- Environment variables (including nested sections) override TOML values
- Explicit values override every source
- get_settings() caches one process-wide instance
"""

from pathlib import Path

import pytest

from svnprovider.core.models.config import LoggingConfig
from svnprovider.core.settings import (
    SvnProviderSettings,
    find_config_file,
    get_settings,
    load_settings,
    reset_settings,
    set_settings,
)


def write_config(root: Path, body: str) -> Path:
    config_dir = root / ".svnprovider"
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(body)
    return path


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_finds_config_in_start_dir(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "")
        assert find_config_file(str(tmp_path)) == path

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == path

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.svnprovider]\nconfig_directory = "/etc/svn"\n')

        assert find_config_file(str(tmp_path)) == pyproject

    def test_pyproject_without_section_is_ignored(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.other]\nkey = "value"\n')

        assert find_config_file(str(tmp_path)) != pyproject

    def test_broken_pyproject_is_ignored(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.svnprovider\n")

        assert find_config_file(str(tmp_path)) != pyproject

    def test_config_dir_wins_over_pyproject(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "")
        (tmp_path / "pyproject.toml").write_text("[tool.svnprovider]\n")

        assert find_config_file(str(tmp_path)) == path


class TestLoadSettings:
    """Tests for merging settings sources."""

    def test_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))

        assert settings.config_directory is None
        assert settings.current_working_directory is None
        assert settings.logging == LoggingConfig()
        assert settings.logging.level == "warning"
        assert settings.logging.file is False

    def test_toml_values(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            'current_working_directory = "/work"\n'
            "\n"
            "[logging]\n"
            'level = "debug"\n'
            "console = true\n",
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.current_working_directory == "/work"
        assert settings.logging.level == "debug"
        assert settings.logging.console is True

    def test_pyproject_values(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.svnprovider]\nconfig_directory = "/etc/subversion"\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.config_directory == "/etc/subversion"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "elsewhere.toml"
        path.write_text('config_directory = "/opt/svn"\n')

        settings = load_settings(config_path=path)

        assert settings.config_directory == "/opt/svn"

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path: Path) -> None:
        write_config(tmp_path, "current_working_directory = \n")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.current_working_directory is None

    def test_environment_variable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SVNPROVIDER_CONFIG_DIRECTORY", "/env/svn")

        assert load_settings(start_dir=str(tmp_path)).config_directory == "/env/svn"

    def test_nested_environment_variable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SVNPROVIDER_LOGGING__LEVEL", "error")

        assert load_settings(start_dir=str(tmp_path)).logging.level == "error"

    def test_environment_overrides_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(tmp_path, 'config_directory = "/toml/svn"\n')
        monkeypatch.setenv("SVNPROVIDER_CONFIG_DIRECTORY", "/env/svn")

        assert load_settings(start_dir=str(tmp_path)).config_directory == "/env/svn"

    def test_explicit_value_overrides_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SVNPROVIDER_CONFIG_DIRECTORY", "/env/svn")

        settings = load_settings(start_dir=str(tmp_path), config_directory="/init/svn")

        assert settings.config_directory == "/init/svn"

    def test_invalid_log_level_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_settings(start_dir=str(tmp_path), logging={"level": "verbose"})


class TestProcessSettings:
    """Tests for the cached process-wide settings."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("SVNPROVIDER_CURRENT_WORKING_DIRECTORY", "/work")

        assert get_settings().current_working_directory is None
        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.current_working_directory == "/work"

    def test_set_settings(self) -> None:
        settings = SvnProviderSettings(config_directory="/custom")
        set_settings(settings)

        assert get_settings() is settings

    def test_loaded_from_working_directory(self) -> None:
        write_config(Path.cwd(), 'current_working_directory = "/from/cwd"\n')

        assert get_settings().current_working_directory == "/from/cwd"
