"""
SCM provider interface definitions.

Enables pluggable svn backends (command-line client, native bindings, ...)
behind one repository-construction and validation contract.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from svnprovider.core.models.parameters import CommandParameters
from svnprovider.core.models.repository import SvnRepository


class IScmProvider(ABC):
    """
    Interface for an svn provider.

    Implementations build repository references and run operations
    against them.
    """

    @property
    @abstractmethod
    def scm_type(self) -> str:
        """Provider type identifier ('svn')."""
        pass

    @property
    @abstractmethod
    def scm_specific_filename(self) -> str:
        """Name of the administrative entry marking a working copy."""
        pass

    @abstractmethod
    def make_provider_repository(self, scm_specific_url: str) -> SvnRepository:
        """
        Build a repository reference from a provider-specific URL.

        Raises:
            InvalidRepositoryUrl: If the URL is rejected
        """
        pass

    @abstractmethod
    def make_provider_repository_from_path(self, path: str | Path) -> SvnRepository:
        """
        Build a repository reference from an existing working copy.

        Raises:
            NotADirectory, NotACheckout, RepositoryResolutionFailed
        """
        pass

    @abstractmethod
    def validate_scm_url(self, scm_specific_url: str) -> list[str]:
        """Return validation messages for a URL (empty when valid)."""
        pass

    @abstractmethod
    def remote_url_exist(
        self,
        repository: SvnRepository,
        parameters: CommandParameters | None = None,
    ) -> bool:
        """Check whether the repository location exists on the server."""
        pass
