"""Tests for managed block rendering."""

from ghswitch.config.models import ServiceConfig
from ghswitch.models.profiles import Profile
from ghswitch.routing.template import render_block


def test_render_default_service() -> None:
    """Block matches the documented layout and ends with a blank line."""
    profile = Profile(username="alice", key_reference="/tmp/k")

    assert render_block(profile, ServiceConfig()) == (
        "# GitHub account: alice\n"
        "Host github.com-alice\n"
        "    HostName github.com\n"
        "    User git\n"
        "    IdentityFile /tmp/k\n"
        "    IdentitiesOnly yes\n"
        "\n"
    )


def test_render_custom_service() -> None:
    service = ServiceConfig(label="GitLab", hostname="gitlab.example.com", transport_user="gitlab")
    profile = Profile(username="bob", key_reference="~/.ssh/id_bob")

    block = render_block(profile, service)

    assert block.startswith("# GitLab account: bob\nHost gitlab.example.com-bob\n")
    assert "    HostName gitlab.example.com\n" in block
    assert "    User gitlab\n" in block
    assert "    IdentityFile ~/.ssh/id_bob\n" in block
