"""
svnprovider - a Subversion provider abstraction.

Exposes a uniform operation set (checkout, update, checkin, add, remove,
branch, tag, diff, blame, list, mkdir, status, changelog, export, ...)
implemented by delegating to the commands of a backend variant.
"""

from .core.exceptions import (
    CommandExecutionFailed,
    IncompleteCommandRegistry,
    InvalidRepositoryUrl,
    NotACheckout,
    NotADirectory,
    RepositoryResolutionFailed,
    ScmException,
)
from .core.interfaces.command import SvnCommand
from .core.models import (
    CommandParameters,
    ScmFileSet,
    ScmOperation,
    ScmRepository,
    SvnRepository,
    ValidationOutcome,
)
from .provider import AbstractSvnScmProvider, CommandRegistry, Dispatcher, RepositoryFactory
from .utils.svn_url import parse_svn_url

__all__ = [
    "AbstractSvnScmProvider",
    "CommandExecutionFailed",
    "CommandParameters",
    "CommandRegistry",
    "Dispatcher",
    "IncompleteCommandRegistry",
    "InvalidRepositoryUrl",
    "NotACheckout",
    "NotADirectory",
    "RepositoryFactory",
    "RepositoryResolutionFailed",
    "ScmException",
    "ScmFileSet",
    "ScmOperation",
    "ScmRepository",
    "SvnCommand",
    "SvnRepository",
    "ValidationOutcome",
    "parse_svn_url",
]
