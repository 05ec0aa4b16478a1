"""
Operation kinds understood by an svn provider.
"""

from __future__ import annotations

from enum import Enum


class ScmOperation(str, Enum):
    """The sixteen operations a backend variant must supply a command for."""

    ADD = "add"
    BLAME = "blame"
    BRANCH = "branch"
    CHANGELOG = "changelog"
    CHECKIN = "checkin"
    CHECKOUT = "checkout"
    DIFF = "diff"
    EXPORT = "export"
    INFO = "info"
    LIST = "list"
    MKDIR = "mkdir"
    REMOVE = "remove"
    STATUS = "status"
    TAG = "tag"
    UNTAG = "untag"
    UPDATE = "update"
