"""
Native Click implementation of the validate command.

Usage: svnprovider validate [--config-dir DIR | --backend NAME] URL...
"""

from __future__ import annotations

from collections.abc import Callable

import click

from ...core.container import get_container
from ...core.exceptions import BackendNotFoundError
from ...core.settings import get_settings
from ...services.svn_config import SvnConfigFileReader
from ...utils.svn_url import parse_svn_url


def _structural_checker(config_dir: str | None) -> Callable[[str], list[str]]:
    tunnels = SvnConfigFileReader(config_dir or get_settings().config_directory)
    return lambda url: list(parse_svn_url(url, tunnels).messages)


def _backend_checker(name: str) -> Callable[[str], list[str]]:
    try:
        provider = get_container().get_backend(name)
    except BackendNotFoundError as e:
        raise click.BadParameter(e.message, param_hint="'--backend'") from e
    return provider.validate_scm_url


@click.command("validate")
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Subversion configuration directory used to look up tunnels.",
)
@click.option(
    "--backend",
    default=None,
    help=(
        "Validate through a registered backend. This also cross-checks each URL "
        "against 'svn info' when current_working_directory is configured."
    ),
)
def validate(urls: tuple[str, ...], config_dir: str | None, backend: str | None) -> None:
    """Check that each URL is a well-formed svn URL.

    Without --backend only the URL form and tunnel definitions are checked.
    """
    if backend and config_dir:
        raise click.UsageError("--config-dir cannot be combined with --backend")
    check = _backend_checker(backend) if backend else _structural_checker(config_dir)

    failures = 0
    for url in urls:
        messages = check(url)
        if not messages:
            click.echo(f"{url}: OK")
            continue

        failures += 1
        click.echo(f"{url}: INVALID")
        for message in messages:
            click.echo(f"  - {message}")

    if failures:
        raise SystemExit(1)
