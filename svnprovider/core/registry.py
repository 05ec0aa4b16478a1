"""
Backend registry with entry-point discovery.

Backend variants are registered from:
1. Entry points in the 'svnprovider.backends' group of installed packages
2. The @register_backend decorator
"""

from __future__ import annotations

from collections.abc import Callable
from importlib.metadata import entry_points

from .container import get_container
from .di import get_logger
from .interfaces.provider import IScmProvider

ENTRY_POINT_GROUP = "svnprovider.backends"


def discover_backends(group: str = ENTRY_POINT_GROUP) -> list[str]:
    """
    Discover and register backends published via entry points.

    External packages register a backend by adding to pyproject.toml:

        [project.entry-points."svnprovider.backends"]
        svnexe = "my_package.provider:SvnExeScmProvider"

    Returns:
        Names of the backends registered by this call
    """
    container = get_container()
    registered = []

    for ep in entry_points(group=group):
        try:
            backend_cls = ep.load()
        except Exception as e:
            # Don't fail startup due to broken external plugins
            get_logger().debug("Failed to load backend entry point %s: %s", ep.name, e)
            continue

        if not _implements(backend_cls, IScmProvider):
            get_logger().debug("Entry point %s is not an svn provider, skipping", ep.name)
            continue

        container.register_backend(ep.name, backend_cls)
        registered.append(ep.name)

    return registered


def _implements(cls: object, interface: type) -> bool:
    """
    Check if a class implements an interface.

    Returns True if cls is a concrete subclass of interface
    (not the interface itself and not abstract).
    """
    return (
        isinstance(cls, type)
        and issubclass(cls, interface)
        and cls is not interface
        and not getattr(cls, "__abstractmethods__", set())
    )


def register_backend(name: str) -> Callable[[type], type]:
    """
    Decorator to register a backend class under a name.

    Usage:
        @register_backend("svnexe")
        class SvnExeScmProvider(AbstractSvnScmProvider):
            ...
    """

    def decorator(cls: type) -> type:
        if not _implements(cls, IScmProvider):
            raise TypeError(f"{cls.__name__} is not a concrete svn provider")
        get_container().register_backend(name, cls)
        return cls

    return decorator
