"""
Executable command interface.

A backend variant supplies one SvnCommand per operation kind. How a command
invokes the svn tool and parses its output is its own business.
"""

from abc import ABC, abstractmethod

from svnprovider.core.models.fileset import ScmFileSet
from svnprovider.core.models.parameters import CommandParameters
from svnprovider.core.models.repository import SvnRepository
from svnprovider.core.models.results import ScmResult


class SvnCommand(ABC):
    """
    Interface for an executable svn command.

    Implementations raise CommandExecutionFailed when the underlying tool
    fails or its output cannot be parsed.
    """

    @abstractmethod
    def execute(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters,
    ) -> ScmResult:
        """
        Execute the command.

        Args:
            repository: Validated repository reference
            file_set: Working directory and optional path restriction
            parameters: Operation-specific parameters

        Returns:
            The result type matching the command's operation
        """
        pass
