"""
Native Click implementation of the backends command.

Usage: svnprovider backends
"""

from __future__ import annotations

import click

from ...core.container import get_container


@click.command("backends")
def backends() -> None:
    """List registered svn backend variants."""
    names = get_container().list_backends()
    if not names:
        click.echo("No svn backends registered.")
        return

    for name in names:
        click.echo(name)
