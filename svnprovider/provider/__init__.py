"""
Svn provider core: repository construction, command registry and dispatch.
"""

from .base import AbstractSvnScmProvider
from .commands import CommandRegistry
from .dispatcher import Dispatcher
from .factory import SVN_MARKER, RepositoryFactory

__all__ = [
    "SVN_MARKER",
    "AbstractSvnScmProvider",
    "CommandRegistry",
    "Dispatcher",
    "RepositoryFactory",
]
