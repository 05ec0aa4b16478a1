"""
Working-set model passed to every operation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from .base import ImmutableModel


class ScmFileSet(ImmutableModel):
    """A working-directory root plus an optional restricted list of paths.

    Paths in ``files`` are relative to ``basedir``. An empty list means the
    whole working directory.
    """

    basedir: Path
    files: tuple[Path, ...] = Field(default_factory=tuple)

    @field_validator("basedir", mode="before")
    @classmethod
    def ensure_path(cls, v: Any) -> Path:
        """Ensure basedir is a Path object."""
        return Path(v) if not isinstance(v, Path) else v

    @field_validator("files", mode="before")
    @classmethod
    def ensure_paths(cls, v: Any) -> tuple[Path, ...]:
        """Accept any iterable of str/Path for files."""
        if v is None:
            return ()
        return tuple(Path(f) if not isinstance(f, Path) else f for f in v)

    @property
    def is_restricted(self) -> bool:
        return len(self.files) > 0

    def absolute_files(self) -> list[Path]:
        """Return the restricted paths resolved against basedir."""
        return [f if f.is_absolute() else self.basedir / f for f in self.files]
