"""
Repository reference factory.

Turns a URL, or a working copy believed to be under svn control, into an
SvnRepository. Optionally reconciles a supplied URL with the one 'svn info'
reports for the current working directory.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from ..core.di import get_logger
from ..core.exceptions import (
    InvalidRepositoryUrl,
    NotACheckout,
    NotADirectory,
    RepositoryResolutionFailed,
    ScmException,
    ScmRepositoryError,
)
from ..core.interfaces.tunnels import ITunnelSettings
from ..core.models.fileset import ScmFileSet
from ..core.models.parameters import CommandParameters
from ..core.models.repository import SvnRepository
from ..core.models.results import InfoScmResult
from ..core.settings import get_settings
from ..utils.svn_url import parse_svn_url

SVN_MARKER = ".svn"

InfoProbe = Callable[[SvnRepository, ScmFileSet, CommandParameters], InfoScmResult]
UrlResolver = Callable[[Path], str]


class WorkingDirectoryDefault(Enum):
    """Marker for "read current_working_directory from settings"."""

    FROM_SETTINGS = "from-settings"


FROM_SETTINGS = WorkingDirectoryDefault.FROM_SETTINGS

WorkingDirectory = str | Path | WorkingDirectoryDefault | None


class RepositoryFactory:
    """
    Builds repository references.

    Usage:
        factory = RepositoryFactory(info=provider.info, resolve_url=provider.get_repository_url)
        repository = factory.from_url("https://svn.example.org/repo/trunk")
    """

    def __init__(
        self,
        info: InfoProbe,
        resolve_url: UrlResolver,
        tunnels: ITunnelSettings | None = None,
        marker: str = SVN_MARKER,
    ) -> None:
        """
        Args:
            info: Runs the info operation; used for the working-directory cross-check
            resolve_url: Backend-specific path-to-URL resolver
            tunnels: Tunnel settings for svn+xxx validation (default: svn config file)
            marker: Administrative entry that marks a working copy
        """
        self._info = info
        self._resolve_url = resolve_url
        self._tunnels = tunnels
        self.marker = marker

    def from_url(
        self, url: str, current_working_directory: WorkingDirectory = FROM_SETTINGS
    ) -> SvnRepository:
        """
        Build a repository reference from an svn URL.

        Args:
            url: svn location string
            current_working_directory: Directory to cross-check against with
                'svn info'. Defaults to the current_working_directory setting;
                pass None to skip the check.

        Raises:
            InvalidRepositoryUrl: If validation or the cross-check fails
            RepositoryResolutionFailed: If the info probe itself fails
        """
        outcome = parse_svn_url(url, self._tunnels)
        messages = list(outcome.messages)

        if current_working_directory is FROM_SETTINGS:
            current_working_directory = get_settings().current_working_directory

        if current_working_directory and outcome.repository is not None:
            mismatch = self._check_working_directory_url(
                url, outcome.repository, str(current_working_directory)
            )
            if mismatch:
                messages.append(mismatch)

        if messages:
            raise InvalidRepositoryUrl(messages, url=url)

        return outcome.repository

    def _check_working_directory_url(
        self, url: str, repository: SvnRepository, working_directory: str
    ) -> str | None:
        """Compare url with the URL 'svn info' reports for working_directory."""
        logger = get_logger()
        logger.debug("Checking svn info 'URL:' field matches current sources directory")

        try:
            info = self._info(
                repository, ScmFileSet(basedir=working_directory), CommandParameters()
            )
        except ScmException as e:
            raise RepositoryResolutionFailed(
                "An error occurred while trying to svn info",
                path=working_directory,
            ) from e

        info_url = info.first_url()
        if info_url is None:
            logger.debug("URL not found (command output=%s)", info.command_output)
            return None

        logger.debug("URL found: %s", info_url)
        comparison = f"'{info_url}' vs. '{url}'"
        logger.debug("Comparing : %s", comparison)
        if info_url != url:
            return f"Scm url does not match the value returned by svn info ({comparison})"
        return None

    def from_working_directory(self, path: str | Path) -> SvnRepository:
        """
        Build a repository reference from an existing working copy.

        Raises:
            NotADirectory: If path is not a directory
            NotACheckout: If path has no svn marker entry
            RepositoryResolutionFailed: If the URL cannot be resolved
            InvalidRepositoryUrl: If the resolved URL is rejected
        """
        directory = Path(path)
        if not directory.is_dir():
            raise NotADirectory(str(directory.absolute()))

        if not (directory / self.marker).exists():
            raise NotACheckout(str(directory.absolute()))

        try:
            url = self._resolve_url(directory)
        except Exception as e:
            raise RepositoryResolutionFailed(
                "Error executing info command",
                path=str(directory.absolute()),
            ) from e

        return self.from_url(url)

    def validate(self, url: str) -> list[str]:
        """Return validation messages for url; empty when it is valid."""
        try:
            self.from_url(url)
        except ScmRepositoryError as e:
            return e.validation_messages or [e.message]
        return []
