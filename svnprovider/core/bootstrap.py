"""
Application bootstrap for svnprovider.

Initializes the DI container with the logger and discovered backends.
Call once at application startup; library use without bootstrap falls
back to a NullLogger.
"""

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .registry import discover_backends
from .settings import get_settings

_initialized = False


def bootstrap() -> ServiceContainer:
    """
    Bootstrap svnprovider.

    Registers the configured logger and discovers backend variants.

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container)
    discover_backends()

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer) -> None:
    """Register core services."""
    from ..services.logging import SvnProviderLogger

    def create_logger() -> ILogger:
        return SvnProviderLogger(get_settings().logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
