"""
Interface definitions for svnprovider's pluggable pieces.
"""

from .command import SvnCommand
from .logger import ILogger
from .provider import IScmProvider
from .tunnels import ITunnelSettings

__all__ = [
    "ILogger",
    "IScmProvider",
    "ITunnelSettings",
    "SvnCommand",
]
