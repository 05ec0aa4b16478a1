"""
Click-based CLI for svnprovider.

Usage:
    from svnprovider.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.bootstrap import bootstrap

try:
    from importlib.metadata import version

    __version__ = version("svnprovider")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="svnprovider")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """svnprovider - uniform Subversion operations over pluggable backends

    \b
    Commands:
        svnprovider validate <url>...   Check svn URLs
        svnprovider backends            List registered backends
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        bootstrap()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "__version__",
    "cli",
]
