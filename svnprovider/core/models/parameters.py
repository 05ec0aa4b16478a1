"""
Parameter bag handed to commands.

The core never looks inside; each command reads the parameters it understands.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from datetime import datetime
from enum import Enum
from typing import Any


class CommandParameter(str, Enum):
    """Well-known parameter names."""

    MESSAGE = "message"
    TAG_NAME = "tag_name"
    BRANCH_NAME = "branch_name"
    SCM_VERSION = "scm_version"
    START_SCM_VERSION = "start_scm_version"
    END_SCM_VERSION = "end_scm_version"
    START_DATE = "start_date"
    END_DATE = "end_date"
    RECURSIVE = "recursive"
    BINARY = "binary"
    REVISION = "revision"
    OUTPUT_DIRECTORY = "output_directory"
    SCM_MKDIR_CREATE_IN_LOCAL = "scm_mkdir_create_in_local"


def _key(name: str | CommandParameter) -> str:
    return name.value if isinstance(name, CommandParameter) else name


class CommandParameters(MutableMapping[str, Any]):
    """
    Mapping from parameter name to value with typed getters.

    Keys may be given as plain strings or CommandParameter members.
    """

    def __init__(self, values: Mapping[str | CommandParameter, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        if values:
            for name, value in values.items():
                self[name] = value

    def __getitem__(self, name: str | CommandParameter) -> Any:
        return self._values[_key(name)]

    def __setitem__(self, name: str | CommandParameter, value: Any) -> None:
        self._values[_key(name)] = value

    def __delitem__(self, name: str | CommandParameter) -> None:
        del self._values[_key(name)]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (str, CommandParameter)):
            return _key(name) in self._values
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"CommandParameters({self._values!r})"

    def get_string(self, name: str | CommandParameter, default: str | None = None) -> str | None:
        value = self._values.get(_key(name))
        if value is None:
            return default
        return str(value)

    def get_bool(self, name: str | CommandParameter, default: bool = False) -> bool:
        value = self._values.get(_key(name))
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "yes", "1", "on")
        return bool(value)

    def get_int(self, name: str | CommandParameter, default: int | None = None) -> int | None:
        value = self._values.get(_key(name))
        if value is None:
            return default
        return int(value)

    def get_datetime(
        self, name: str | CommandParameter, default: datetime | None = None
    ) -> datetime | None:
        value = self._values.get(_key(name))
        if value is None:
            return default
        if isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value))
