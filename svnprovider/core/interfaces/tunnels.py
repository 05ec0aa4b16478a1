"""
Tunnel settings interface.

Consulted only while validating svn+xxx URLs.
"""

from abc import ABC, abstractmethod


class ITunnelSettings(ABC):
    """Read-only access to Subversion client configuration properties."""

    @abstractmethod
    def get_property(self, section: str, key: str) -> str | None:
        """
        Look up a configuration property.

        Args:
            section: Configuration section (e.g. 'tunnels')
            key: Property name within the section

        Returns:
            The property value, or None if it is not defined
        """
        pass
