"""
Dependency injection container for svnprovider.

Uses dependency-injector for DI with support for:
- Singleton and transient lifetimes
- Interface-based resolution
- A registry of svn backend variants
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .exceptions import BackendNotFoundError
from .interfaces.provider import IScmProvider

T = TypeVar("T")


class ServiceContainer:
    """
    Dependency injection container for svnprovider.

    Combines dependency-injector's providers with a registry of
    backend variants keyed by name.
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        """Initialize the container with empty registries."""
        # Dynamic provider storage (interface -> provider)
        self._providers: dict[type, providers.Provider] = {}

        self._backends: dict[str, Callable[[], IScmProvider]] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the global container (for testing)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Core service registration (uses dependency-injector providers)
    # -------------------------------------------------------------------------

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a singleton service.

        Args:
            interface: The interface type
            implementation: Optional concrete instance
            factory: Optional factory function (for lazy init)
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def register_transient(
        self,
        interface: type[T],
        factory: Callable[..., T],
    ) -> None:
        """Register a transient service (new instance per resolve)."""
        self._providers[interface] = providers.Factory(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, returning None if not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Override a registered provider (useful for testing)."""
        self._providers[interface] = provider

    # -------------------------------------------------------------------------
    # Backend registry
    # -------------------------------------------------------------------------

    def register_backend(
        self,
        name: str,
        factory: Callable[[], IScmProvider],
    ) -> None:
        """
        Register an svn backend variant.

        Args:
            name: Backend name (e.g., 'svnexe', 'svnjava')
            factory: Provider class or zero-argument factory
        """
        self._backends[name] = factory

    def get_backend(self, name: str) -> IScmProvider:
        """
        Get a backend provider instance by name.

        Raises:
            BackendNotFoundError: If no backend is registered under name
        """
        if name not in self._backends:
            raise BackendNotFoundError(name)
        return self._backends[name]()

    def list_backends(self) -> list[str]:
        """List registered backend names."""
        return sorted(self._backends)


# -------------------------------------------------------------------------
# Module-level convenience functions
# -------------------------------------------------------------------------


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    """Resolve a service from the global container."""
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    """Try to resolve a service, returning None if not registered."""
    return get_container().try_resolve(interface)
