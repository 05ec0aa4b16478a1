"""
Per-backend command registry.

A backend variant builds one CommandRegistry holding a command for every
operation kind. All sixteen are required constructor arguments, so a
registry with a missing command cannot be built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from ..core.exceptions import IncompleteCommandRegistry
from ..core.interfaces.command import SvnCommand
from ..core.models.operation import ScmOperation


@dataclass(frozen=True)
class CommandRegistry:
    """One executable command per ScmOperation, keyed by operation name."""

    add: SvnCommand
    blame: SvnCommand
    branch: SvnCommand
    changelog: SvnCommand
    checkin: SvnCommand
    checkout: SvnCommand
    diff: SvnCommand
    export: SvnCommand
    info: SvnCommand
    list: SvnCommand
    mkdir: SvnCommand
    remove: SvnCommand
    status: SvnCommand
    tag: SvnCommand
    untag: SvnCommand
    update: SvnCommand

    def __post_init__(self) -> None:
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise IncompleteCommandRegistry(missing)
        for f in fields(self):
            command = getattr(self, f.name)
            if not isinstance(command, SvnCommand):
                raise TypeError(
                    f"Command for '{f.name}' must be an SvnCommand, got {type(command).__name__}"
                )

    @classmethod
    def from_mapping(cls, commands: Mapping[ScmOperation | str, SvnCommand]) -> CommandRegistry:
        """
        Build a registry from a mapping of operation to command.

        Raises:
            IncompleteCommandRegistry: If any operation has no command
        """
        by_name = {ScmOperation(op).value: command for op, command in commands.items()}
        missing = [op.value for op in ScmOperation if op.value not in by_name]
        if missing:
            raise IncompleteCommandRegistry(missing)
        return cls(**by_name)

    def resolve(self, operation: ScmOperation | str) -> SvnCommand:
        """Return the command for an operation kind."""
        return getattr(self, ScmOperation(operation).value)

    def items(self) -> list[tuple[ScmOperation, SvnCommand]]:
        return [(op, self.resolve(op)) for op in ScmOperation]
