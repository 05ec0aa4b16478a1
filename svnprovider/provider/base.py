"""
Base svn provider.

Composes the repository factory, a backend's command registry and the
dispatcher into the uniform operation set. A backend variant supplies its
CommandRegistry plus the two pieces that stay backend-specific: resolving a
working copy's URL and probing whether a remote URL exists.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TypeVar

from ..core.interfaces.provider import IScmProvider
from ..core.interfaces.tunnels import ITunnelSettings
from ..core.models.fileset import ScmFileSet
from ..core.models.operation import ScmOperation
from ..core.models.parameters import CommandParameters
from ..core.models.repository import ScmRepository, SvnRepository
from ..core.models.results import (
    RESULT_TYPES,
    AddScmResult,
    BlameScmResult,
    BranchScmResult,
    ChangeLogScmResult,
    CheckInScmResult,
    CheckOutScmResult,
    DiffScmResult,
    ExportScmResult,
    InfoScmResult,
    ListScmResult,
    MkdirScmResult,
    RemoveScmResult,
    ScmResult,
    StatusScmResult,
    TagScmResult,
    UntagScmResult,
    UpdateScmResult,
)
from .commands import CommandRegistry
from .dispatcher import Dispatcher
from .factory import FROM_SETTINGS, SVN_MARKER, RepositoryFactory, WorkingDirectory

R = TypeVar("R", bound=ScmResult)


class AbstractSvnScmProvider(IScmProvider):
    """
    Abstract base class for svn backend variants.

    Subclasses pass their CommandRegistry to __init__ and implement
    get_repository_url() and remote_url_exist().
    """

    def __init__(
        self,
        commands: CommandRegistry,
        *,
        tunnels: ITunnelSettings | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self._commands = commands
        self._dispatcher = dispatcher or Dispatcher()
        self._factory = RepositoryFactory(
            info=self.info,
            resolve_url=self.get_repository_url,
            tunnels=tunnels,
            marker=self.scm_specific_filename,
        )

    # -------------------------------------------------------------------------
    # Provider metadata
    # -------------------------------------------------------------------------

    @property
    def scm_type(self) -> str:
        return "svn"

    @property
    def scm_specific_filename(self) -> str:
        return SVN_MARKER

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    @property
    def repository_factory(self) -> RepositoryFactory:
        return self._factory

    # -------------------------------------------------------------------------
    # Repository construction
    # -------------------------------------------------------------------------

    def make_provider_repository(
        self,
        scm_specific_url: str,
        current_working_directory: WorkingDirectory = FROM_SETTINGS,
    ) -> SvnRepository:
        """Build a repository reference from an svn URL."""
        return self._factory.from_url(scm_specific_url, current_working_directory)

    def make_provider_repository_from_path(self, path: str | Path) -> SvnRepository:
        """Build a repository reference from an svn working copy."""
        return self._factory.from_working_directory(path)

    def make_scm_repository(self, scm_specific_url: str) -> ScmRepository:
        """Build a provider-tagged repository handle from an svn URL."""
        return ScmRepository(
            provider=self.scm_type,
            provider_repository=self.make_provider_repository(scm_specific_url),
        )

    def validate_scm_url(self, scm_specific_url: str) -> list[str]:
        return self._factory.validate(scm_specific_url)

    @abstractmethod
    def get_repository_url(self, path: Path) -> str:
        """
        Resolve the repository URL of a working copy.

        Args:
            path: Working copy directory containing the svn marker

        Returns:
            The URL the working copy was checked out from
        """
        pass

    @abstractmethod
    def remote_url_exist(
        self,
        repository: SvnRepository,
        parameters: CommandParameters | None = None,
    ) -> bool:
        """Check whether the repository location exists on the server."""
        pass

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def _run(
        self,
        operation: ScmOperation,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None,
        expected: type[R],
    ) -> R:
        command = self._commands.resolve(operation)
        if parameters is None:
            parameters = CommandParameters()
        result = self.execute_command(command, repository, file_set, parameters)
        return self._dispatcher.narrow(result, expected, operation.value)

    def execute_command(self, command, repository, file_set, parameters) -> ScmResult:
        """Hand a resolved command to the dispatcher."""
        return self._dispatcher.execute(command, repository, file_set, parameters)

    def add(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> AddScmResult:
        return self._run(ScmOperation.ADD, repository, file_set, parameters, AddScmResult)

    def blame(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> BlameScmResult:
        return self._run(ScmOperation.BLAME, repository, file_set, parameters, BlameScmResult)

    def branch(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> BranchScmResult:
        return self._run(ScmOperation.BRANCH, repository, file_set, parameters, BranchScmResult)

    def changelog(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> ChangeLogScmResult:
        return self._run(
            ScmOperation.CHANGELOG, repository, file_set, parameters, ChangeLogScmResult
        )

    def checkin(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> CheckInScmResult:
        return self._run(ScmOperation.CHECKIN, repository, file_set, parameters, CheckInScmResult)

    def checkout(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> CheckOutScmResult:
        return self._run(ScmOperation.CHECKOUT, repository, file_set, parameters, CheckOutScmResult)

    def diff(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> DiffScmResult:
        return self._run(ScmOperation.DIFF, repository, file_set, parameters, DiffScmResult)

    def export(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> ExportScmResult:
        return self._run(ScmOperation.EXPORT, repository, file_set, parameters, ExportScmResult)

    def info(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> InfoScmResult:
        return self._run(ScmOperation.INFO, repository, file_set, parameters, InfoScmResult)

    def list(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> ListScmResult:
        return self._run(ScmOperation.LIST, repository, file_set, parameters, ListScmResult)

    def mkdir(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> MkdirScmResult:
        return self._run(ScmOperation.MKDIR, repository, file_set, parameters, MkdirScmResult)

    def remove(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> RemoveScmResult:
        return self._run(ScmOperation.REMOVE, repository, file_set, parameters, RemoveScmResult)

    def status(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> StatusScmResult:
        return self._run(ScmOperation.STATUS, repository, file_set, parameters, StatusScmResult)

    def tag(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> TagScmResult:
        return self._run(ScmOperation.TAG, repository, file_set, parameters, TagScmResult)

    def untag(
        self,
        repository: ScmRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> UntagScmResult:
        """Remove a tag. Takes the repository handle and unwraps its reference."""
        return self._run(
            ScmOperation.UNTAG,
            repository.provider_repository,
            file_set,
            parameters,
            UntagScmResult,
        )

    def update(
        self,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> UpdateScmResult:
        return self._run(ScmOperation.UPDATE, repository, file_set, parameters, UpdateScmResult)

    def run(
        self,
        operation: ScmOperation | str,
        repository: SvnRepository,
        file_set: ScmFileSet,
        parameters: CommandParameters | None = None,
    ) -> ScmResult:
        """Run any operation by kind, narrowed to its result type."""
        op = ScmOperation(operation)
        return self._run(op, repository, file_set, parameters, RESULT_TYPES[op])
