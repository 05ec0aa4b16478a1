"""
Repository reference models.

SvnRepository wraps a validated svn location string. The URL is kept verbatim;
everything else is derived from it on access.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

from pydantic import computed_field

from .base import ImmutableModel

SCHEME_SEPARATOR = "://"

_TRUNK_SEGMENT = re.compile(r"/trunk(?=/|$)")


def _path_start(url: str) -> int:
    """Index where the path begins, past the scheme and authority."""
    sep = url.find(SCHEME_SEPARATOR)
    if sep < 0:
        return 0
    slash = url.find("/", sep + len(SCHEME_SEPARATOR))
    return len(url) if slash < 0 else slash


def _layout_base(url: str, name: str) -> str:
    """Resolve the tags/branches directory for a trunk/tags/branches layout.

    Only the path is searched for a trunk segment; a host named 'trunk'
    does not count.
    """
    match = _TRUNK_SEGMENT.search(url, _path_start(url))
    if match:
        return f"{url[: match.start()]}/{name}"
    return f"{url.rstrip('/')}/{name}"


class SvnRepository(ImmutableModel):
    """Immutable reference to a validated svn repository location.

    Only built by the repository factory once the URL has passed validation.
    Validation is prefix-based, so the authority may still be malformed
    (e.g. an unclosed IPv6 bracket); the URL-derived fields are then None.
    """

    url: str

    def _split(self) -> SplitResult | None:
        try:
            return urlsplit(self.url)
        except ValueError:
            return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def protocol(self) -> str:
        """URL scheme, e.g. 'https' or 'svn+ssh'."""
        return self.url.partition(SCHEME_SEPARATOR)[0].lower()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tunnel(self) -> str | None:
        """Tunnel name for svn+xxx URLs, case preserved."""
        scheme = self.url.partition(SCHEME_SEPARATOR)[0]
        if scheme.lower().startswith("svn+"):
            return scheme[len("svn+") :]
        return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def host(self) -> str | None:
        parts = self._split()
        return parts.hostname if parts else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def port(self) -> int | None:
        parts = self._split()
        try:
            return parts.port if parts else None
        except ValueError:
            return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def user(self) -> str | None:
        parts = self._split()
        return parts.username if parts else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def path(self) -> str | None:
        parts = self._split()
        return parts.path if parts else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tag_base(self) -> str:
        """Base URL under which tags are created."""
        return _layout_base(self.url, "tags")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def branch_base(self) -> str:
        """Base URL under which branches are created."""
        return _layout_base(self.url, "branches")

    def __str__(self) -> str:
        return self.url


class ScmRepository(ImmutableModel):
    """Higher-level repository handle pairing a provider type with its reference."""

    provider: str = "svn"
    provider_repository: SvnRepository
