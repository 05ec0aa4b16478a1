"""
Pydantic models for svnprovider.

Typed, validated models for repository references, working sets and
command results. All models use Pydantic v2 with strict validation.
"""

from .base import ImmutableModel, SvnBaseModel
from .config import LoggingConfig
from .fileset import ScmFileSet
from .operation import ScmOperation
from .parameters import CommandParameter, CommandParameters
from .repository import ScmRepository, SvnRepository
from .results import (
    RESULT_TYPES,
    AddScmResult,
    AnyScmResult,
    BlameLine,
    BlameScmResult,
    BranchScmResult,
    ChangeLogScmResult,
    ChangeSet,
    CheckInScmResult,
    CheckOutScmResult,
    DiffScmResult,
    ExportScmResult,
    InfoItem,
    InfoScmResult,
    ListScmResult,
    MkdirScmResult,
    RemoveScmResult,
    ScmFile,
    ScmFileStatus,
    ScmResult,
    StatusScmResult,
    TagScmResult,
    UntagScmResult,
    UpdateScmResult,
)
from .validation import ValidationOutcome

__all__ = [
    "RESULT_TYPES",
    "AddScmResult",
    "AnyScmResult",
    "BlameLine",
    "BlameScmResult",
    "BranchScmResult",
    "ChangeLogScmResult",
    "ChangeSet",
    "CheckInScmResult",
    "CheckOutScmResult",
    "CommandParameter",
    "CommandParameters",
    "DiffScmResult",
    "ExportScmResult",
    "ImmutableModel",
    "InfoItem",
    "InfoScmResult",
    "ListScmResult",
    "LoggingConfig",
    "MkdirScmResult",
    "RemoveScmResult",
    "ScmFile",
    "ScmFileSet",
    "ScmFileStatus",
    "ScmOperation",
    "ScmRepository",
    "ScmResult",
    "StatusScmResult",
    "SvnBaseModel",
    "SvnRepository",
    "TagScmResult",
    "UntagScmResult",
    "UpdateScmResult",
    "ValidationOutcome",
]
