"""
Click command implementations for the svnprovider CLI.
"""

from .backends import backends
from .validate import validate

COMMANDS = [
    backends,
    validate,
]

__all__ = [
    "COMMANDS",
    "backends",
    "validate",
]
