"""
Command dispatch.

Runs a resolved command against a (repository, file set, parameters) triple
and narrows its result to the type the operation promises.
"""

from __future__ import annotations

from typing import TypeVar

from ..core.di import get_logger
from ..core.exceptions import CommandExecutionFailed, ScmException
from ..core.interfaces.command import SvnCommand
from ..core.models.fileset import ScmFileSet
from ..core.models.parameters import CommandParameters
from ..core.models.repository import SvnRepository
from ..core.models.results import ScmResult

R = TypeVar("R", bound=ScmResult)


class Dispatcher:
    """
    Executes commands and surfaces their failures uniformly.

    ScmException subclasses raised by a command propagate unchanged; any
    other exception is wrapped in CommandExecutionFailed.
    """

    def execute(
        self,
        command: SvnCommand,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters,
    ) -> ScmResult:
        """Invoke the command and return its result unmodified."""
        get_logger().debug(
            "Executing %s against %s in %s",
            type(command).__name__,
            repository.url,
            file_set.basedir,
        )
        try:
            return command.execute(repository, file_set, parameters)
        except ScmException:
            raise
        except Exception as e:
            raise CommandExecutionFailed(
                f"{type(command).__name__} failed: {e}",
                context={"url": repository.url},
            ) from e

    @staticmethod
    def narrow(result: ScmResult, expected: type[R], operation: str) -> R:
        """
        Check that a result has the type the operation promises.

        Raises:
            CommandExecutionFailed: If the command returned another result type
        """
        if not isinstance(result, expected):
            raise CommandExecutionFailed(
                f"Expected {expected.__name__}, got {type(result).__name__}",
                operation=operation,
            )
        return result
