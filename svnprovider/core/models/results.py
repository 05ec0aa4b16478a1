"""
Command result models.

One result type per operation kind. Every result carries the common
success/output fields plus a literal ``kind`` tag, so a result can be
narrowed by type or validated through the ``AnyScmResult`` union.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from .base import ImmutableModel
from .operation import ScmOperation


class ScmFileStatus(str, Enum):
    """Status of a file as reported by a command."""

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    MISSING = "missing"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CONFLICT = "conflict"
    PATCHED = "patched"
    UPDATED = "updated"
    TAGGED = "tagged"
    LOCKED = "locked"
    UNVERSIONED = "unversioned"
    UNKNOWN = "unknown"


class ScmFile(ImmutableModel):
    """A path with the status a command reported for it."""

    path: str
    status: ScmFileStatus = ScmFileStatus.UNKNOWN


class InfoItem(ImmutableModel):
    """One entry reported by an info probe."""

    path: str | None = None
    url: str | None = None
    repository_root: str | None = None
    repository_uuid: str | None = None
    revision: str | None = None
    node_kind: str | None = None
    schedule: str | None = None
    last_changed_author: str | None = None
    last_changed_revision: str | None = None
    last_changed_date: str | None = None


class BlameLine(ImmutableModel):
    revision: str
    author: str
    date: datetime | None = None


class ChangeSet(ImmutableModel):
    """A single commit as reported by changelog or update."""

    revision: str | None = None
    author: str | None = None
    date: datetime | None = None
    comment: str = ""
    files: list[ScmFile] = Field(default_factory=list)


class ScmResult(ImmutableModel):
    """Fields common to every command result."""

    success: bool
    command_output: str = ""
    provider_message: str | None = None
    command_line: str | None = None

    @classmethod
    def error(
        cls,
        provider_message: str,
        command_output: str = "",
        command_line: str | None = None,
    ):
        """Create a failed result of this type."""
        return cls(
            success=False,
            provider_message=provider_message,
            command_output=command_output,
            command_line=command_line,
        )


class AddScmResult(ScmResult):
    kind: Literal["add"] = "add"
    added_files: list[ScmFile] = Field(default_factory=list)


class BlameScmResult(ScmResult):
    kind: Literal["blame"] = "blame"
    lines: list[BlameLine] = Field(default_factory=list)


class BranchScmResult(ScmResult):
    kind: Literal["branch"] = "branch"
    branched_files: list[ScmFile] = Field(default_factory=list)


class ChangeLogScmResult(ScmResult):
    kind: Literal["changelog"] = "changelog"
    change_sets: list[ChangeSet] = Field(default_factory=list)


class CheckInScmResult(ScmResult):
    kind: Literal["checkin"] = "checkin"
    checked_in_files: list[ScmFile] = Field(default_factory=list)
    revision: str | None = None


class CheckOutScmResult(ScmResult):
    kind: Literal["checkout"] = "checkout"
    checked_out_files: list[ScmFile] = Field(default_factory=list)
    revision: str | None = None


class DiffScmResult(ScmResult):
    kind: Literal["diff"] = "diff"
    changed_files: list[ScmFile] = Field(default_factory=list)
    differences: dict[str, str] = Field(default_factory=dict)
    patch: str = ""


class ExportScmResult(ScmResult):
    kind: Literal["export"] = "export"
    exported_files: list[ScmFile] = Field(default_factory=list)


class InfoScmResult(ScmResult):
    kind: Literal["info"] = "info"
    info_items: list[InfoItem] = Field(default_factory=list)

    def first_url(self) -> str | None:
        """Return the first non-null URL among the info items."""
        for item in self.info_items:
            if item.url is not None:
                return item.url
        return None


class ListScmResult(ScmResult):
    kind: Literal["list"] = "list"
    files: list[ScmFile] = Field(default_factory=list)


class MkdirScmResult(ScmResult):
    kind: Literal["mkdir"] = "mkdir"
    created_dirs: list[ScmFile] = Field(default_factory=list)
    revision: str | None = None


class RemoveScmResult(ScmResult):
    kind: Literal["remove"] = "remove"
    removed_files: list[ScmFile] = Field(default_factory=list)


class StatusScmResult(ScmResult):
    kind: Literal["status"] = "status"
    changed_files: list[ScmFile] = Field(default_factory=list)


class TagScmResult(ScmResult):
    kind: Literal["tag"] = "tag"
    tagged_files: list[ScmFile] = Field(default_factory=list)


class UntagScmResult(ScmResult):
    kind: Literal["untag"] = "untag"


class UpdateScmResult(ScmResult):
    kind: Literal["update"] = "update"
    updated_files: list[ScmFile] = Field(default_factory=list)
    changes: list[ChangeSet] = Field(default_factory=list)


AnyScmResult = Annotated[
    Union[
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
        StatusScmResult,
        TagScmResult,
        UntagScmResult,
        UpdateScmResult,
    ],
    Field(discriminator="kind"),
]

RESULT_TYPES: dict[ScmOperation, type[ScmResult]] = {
    ScmOperation.ADD: AddScmResult,
    ScmOperation.BLAME: BlameScmResult,
    ScmOperation.BRANCH: BranchScmResult,
    ScmOperation.CHANGELOG: ChangeLogScmResult,
    ScmOperation.CHECKIN: CheckInScmResult,
    ScmOperation.CHECKOUT: CheckOutScmResult,
    ScmOperation.DIFF: DiffScmResult,
    ScmOperation.EXPORT: ExportScmResult,
    ScmOperation.INFO: InfoScmResult,
    ScmOperation.LIST: ListScmResult,
    ScmOperation.MKDIR: MkdirScmResult,
    ScmOperation.REMOVE: RemoveScmResult,
    ScmOperation.STATUS: StatusScmResult,
    ScmOperation.TAG: TagScmResult,
    ScmOperation.UNTAG: UntagScmResult,
    ScmOperation.UPDATE: UpdateScmResult,
}
