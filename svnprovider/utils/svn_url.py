"""
Svn URL validation.

Classifies an svn location string by scheme and rejects malformed forms
before any repository reference is built. Rules are checked in order and the
first matching prefix decides; at most one message is produced per URL.
"""

from __future__ import annotations

from ..core.interfaces.tunnels import ITunnelSettings
from ..core.models.validation import ValidationOutcome

TUNNEL_PREFIX = "svn+"
SCHEME_SEPARATOR = "://"
TUNNELS_SECTION = "tunnels"

# Always allowed without a [tunnels] entry.
BUILTIN_TUNNEL = "ssh"


def _default_tunnel_settings() -> ITunnelSettings:
    from ..core.settings import get_settings
    from ..services.svn_config import SvnConfigFileReader

    return SvnConfigFileReader(get_settings().config_directory)


def tunnel_name(url: str) -> str | None:
    """
    Extract the tunnel name from an svn+xxx:// URL.

    Returns:
        The text between 'svn+' and '://', or None if url is not a tunnel URL
    """
    if not url.startswith(TUNNEL_PREFIX) or SCHEME_SEPARATOR not in url:
        return None
    return url[len(TUNNEL_PREFIX) : url.index(SCHEME_SEPARATOR)]


def parse_svn_url(url: str, tunnels: ITunnelSettings | None = None) -> ValidationOutcome:
    """
    Validate an svn URL.

    Args:
        url: Provider-specific location string
        tunnels: Source for [tunnels] entries; defaults to the Subversion
            client config file. Only consulted for non-ssh svn+xxx URLs.

    Returns:
        ValidationOutcome wrapping the URL verbatim on success,
        or carrying a single message on failure
    """
    if url.startswith("file"):
        if not url.startswith("file://"):
            return ValidationOutcome.invalid(
                "A svn 'file' url must be on the form 'file://[hostname]/'."
            )
    elif url.startswith("https"):
        if not url.startswith("https://"):
            return ValidationOutcome.invalid("A svn 'http' url must be on the form 'https://'.")
    elif url.startswith("http"):
        if not url.startswith("http://"):
            return ValidationOutcome.invalid("A svn 'http' url must be on the form 'http://'.")
    elif url.startswith(TUNNEL_PREFIX):
        tunnel = tunnel_name(url)
        if tunnel is None:
            return ValidationOutcome.invalid(
                "A svn 'svn+xxx' url must be on the form 'svn+xxx://'."
            )
        if tunnel != BUILTIN_TUNNEL:
            if tunnels is None:
                tunnels = _default_tunnel_settings()
            if not tunnels.get_property(TUNNELS_SECTION, tunnel):
                return ValidationOutcome.invalid(
                    f"The tunnel '{tunnel}' isn't defined in your subversion configuration file."
                )
    elif url.startswith("svn"):
        if not url.startswith("svn://"):
            return ValidationOutcome.invalid("A svn 'svn' url must be on the form 'svn://'.")
    else:
        return ValidationOutcome.invalid(f"{url} url isn't a valid svn URL.")

    return ValidationOutcome.valid(url)


def is_valid_svn_url(url: str, tunnels: ITunnelSettings | None = None) -> bool:
    """Check whether parse_svn_url accepts url."""
    return parse_svn_url(url, tunnels).is_valid
