"""Rendering of managed routing-file blocks."""

from ghswitch.config.models import ServiceConfig
from ghswitch.models.profiles import Profile

BLOCK_TEMPLATE = """\
{marker} {username}
Host {host_alias}
    HostName {hostname}
    User {transport_user}
    IdentityFile {key_reference}
    IdentitiesOnly yes

"""


def render_block(profile: Profile, service: ServiceConfig) -> str:
    """Render the managed block for one profile, ending in a blank line."""
    return BLOCK_TEMPLATE.format(
        marker=service.marker_token,
        username=profile.username,
        host_alias=service.host_alias(profile.username),
        hostname=service.hostname,
        transport_user=service.transport_user,
        key_reference=profile.key_reference,
    )
