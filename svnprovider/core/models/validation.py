"""
Result of svn URL validation.
"""

from __future__ import annotations

from pydantic import computed_field, model_validator

from .base import ImmutableModel
from .repository import SvnRepository


class ValidationOutcome(ImmutableModel):
    """Messages from validating a location string, plus the reference on success.

    The repository is present exactly when there are no messages.
    """

    messages: tuple[str, ...] = ()
    repository: SvnRepository | None = None

    @model_validator(mode="after")
    def check_repository_iff_valid(self) -> ValidationOutcome:
        if self.messages and self.repository is not None:
            raise ValueError("an invalid outcome cannot carry a repository")
        if not self.messages and self.repository is None:
            raise ValueError("a valid outcome must carry a repository")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.messages

    @classmethod
    def valid(cls, url: str) -> ValidationOutcome:
        return cls(repository=SvnRepository(url=url))

    @classmethod
    def invalid(cls, *messages: str) -> ValidationOutcome:
        return cls(messages=tuple(messages))
