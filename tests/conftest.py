"""
Shared pytest fixtures for svnprovider tests.

Provides:
- clean_state: isolates settings, container and environment per test
- StubCommand / StubProvider: in-memory backend variant returning fixed results
- tunnels: dict-backed tunnel settings
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from svnprovider.core import bootstrap as bootstrap_module
from svnprovider.core.exceptions import CommandExecutionFailed
from svnprovider.core.interfaces.command import SvnCommand
from svnprovider.core.interfaces.tunnels import ITunnelSettings
from svnprovider.core.models import (
    RESULT_TYPES,
    CommandParameters,
    ScmFileSet,
    ScmOperation,
    ScmResult,
    SvnRepository,
)
from svnprovider.core.settings import reset_settings
from svnprovider.provider import AbstractSvnScmProvider, CommandRegistry


class StubCommand(SvnCommand):
    """Command returning a fixed result (or raising) and recording its calls."""

    def __init__(self, result: ScmResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[SvnRepository, ScmFileSet, CommandParameters]] = []

    def execute(self, repository, file_set, parameters):
        self.calls.append((repository, file_set, parameters))
        if self.error is not None:
            raise self.error
        return self.result


class DictTunnelSettings(ITunnelSettings):
    """Tunnel settings held in a dict of sections."""

    def __init__(self, sections: dict[str, dict[str, str]] | None = None) -> None:
        self.sections = sections or {}
        self.lookups: list[tuple[str, str]] = []

    def get_property(self, section: str, key: str) -> str | None:
        self.lookups.append((section, key))
        return self.sections.get(section, {}).get(key)


class StubProvider(AbstractSvnScmProvider):
    """Backend variant built from stub commands."""

    def __init__(
        self,
        commands: dict[ScmOperation, StubCommand] | None = None,
        urls_by_path: dict[Path, str] | None = None,
        tunnels: ITunnelSettings | None = None,
    ) -> None:
        self.stubs = {
            op: StubCommand(RESULT_TYPES[op](success=True, command_output=f"{op.value} done"))
            for op in ScmOperation
        }
        self.stubs.update(commands or {})
        self.urls_by_path = urls_by_path or {}
        super().__init__(
            CommandRegistry.from_mapping(self.stubs),
            tunnels=tunnels or DictTunnelSettings(),
        )

    def get_repository_url(self, path: Path) -> str:
        return self.urls_by_path[path]

    def remote_url_exist(self, repository, parameters=None) -> bool:
        try:
            return self.info(repository, ScmFileSet(basedir=Path.cwd()), parameters).success
        except CommandExecutionFailed:
            return False


@pytest.fixture(autouse=True)
def clean_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty directory with fresh settings and container."""
    for name in list(os.environ):
        if name.startswith("SVNPROVIDER_"):
            monkeypatch.delenv(name)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    reset_settings()
    bootstrap_module.reset()
    yield
    reset_settings()
    bootstrap_module.reset()


@pytest.fixture
def tunnels() -> DictTunnelSettings:
    """Tunnel settings defining a 'foo' tunnel."""
    return DictTunnelSettings({"tunnels": {"foo": "foo-client -q"}})


@pytest.fixture
def stub_command() -> Callable[..., StubCommand]:
    """Factory for StubCommand instances."""
    return StubCommand


@pytest.fixture
def make_provider() -> Callable[..., StubProvider]:
    """Factory for StubProvider instances."""
    return StubProvider


@pytest.fixture
def provider(tunnels: DictTunnelSettings) -> StubProvider:
    """A StubProvider whose every command succeeds."""
    return StubProvider(tunnels=tunnels)


@pytest.fixture
def make_tunnels() -> Callable[..., DictTunnelSettings]:
    """Factory for DictTunnelSettings instances."""
    return DictTunnelSettings
