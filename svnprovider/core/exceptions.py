"""
Custom exception hierarchy for svnprovider.

Every failure surfaced by the provider is a typed ScmException so callers
can tell bad URLs, bad working directories and failed commands apart.
"""

from __future__ import annotations

from collections.abc import Iterable


class ScmException(Exception):
    """
    Base exception for all svnprovider errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, URLs, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Repository Errors
# =============================================================================


class ScmRepositoryError(ScmException):
    """
    Base class for errors building a repository reference.

    Attributes:
        validation_messages: Human-readable reasons the location was rejected
    """

    def __init__(
        self,
        message: str,
        *,
        validation_messages: Iterable[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.validation_messages: list[str] = list(validation_messages or [])
        super().__init__(message, context=context, cause=cause)


class InvalidRepositoryUrl(ScmRepositoryError):
    """
    The svn URL failed validation.

    Carries one or more messages; always surfaced to the caller.
    """

    def __init__(
        self,
        validation_messages: Iterable[str],
        *,
        url: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if url is not None:
            ctx["url"] = url
        super().__init__(
            "The scm url is invalid.",
            validation_messages=validation_messages,
            context=ctx,
            cause=cause,
        )


class NotADirectory(ScmRepositoryError):
    """The path given as a working copy is not a directory."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        self.path = path
        super().__init__(f"{path} isn't a valid directory.", cause=cause)


class NotACheckout(ScmRepositoryError):
    """The directory has no svn administrative marker."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        self.path = path
        super().__init__(f"{path} isn't a svn checkout directory.", cause=cause)


class RepositoryResolutionFailed(ScmRepositoryError):
    """
    A collaborator failed while resolving the repository.

    Raised when the path-to-URL resolver or the info probe fails.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Command Errors
# =============================================================================


class ScmCommandError(ScmException):
    """Base class for command execution errors."""

    recoverable: bool = True


class CommandExecutionFailed(ScmCommandError):
    """
    A command failed to execute or returned an unusable result.

    Raised by commands themselves, or by the dispatcher when wrapping
    an unexpected failure.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message, context=ctx, cause=cause)
        self.operation = operation


# =============================================================================
# Configuration Errors
# =============================================================================


class ScmConfigurationError(ScmException):
    """Base class for provider wiring and configuration errors."""

    pass


class IncompleteCommandRegistry(ScmConfigurationError, TypeError):
    """
    A backend variant did not supply a command for every operation.

    Inherits from TypeError, matching a missing constructor argument.
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = sorted(missing)
        super().__init__(
            "Backend variant is missing commands",
            context={"missing": self.missing},
        )


class BackendNotFoundError(ScmConfigurationError):
    """Requested backend variant is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No svn backend registered: {name}", context={"backend": name})
