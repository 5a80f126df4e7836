"""Services that wrap external tools around the profile set."""

from ghswitch.services.clone import (
    CloneFailedError,
    CloneOutcome,
    CloneService,
    ssh_troubleshooting_hints,
)
from ghswitch.services.command_runner import SubprocessRunner
from ghswitch.services.identity import GitIdentityService, IdentitySnapshot, SwitchOutcome
from ghswitch.services.keys import KeyGenerator, default_key_path, resolve_key_path
from ghswitch.services.remote_url import RepoRef, parse_repo_url
from ghswitch.services.signing import SigningKeyLocator, parse_secret_key_id

__all__ = [
    "CloneFailedError",
    "CloneOutcome",
    "CloneService",
    "GitIdentityService",
    "IdentitySnapshot",
    "KeyGenerator",
    "RepoRef",
    "SigningKeyLocator",
    "SubprocessRunner",
    "SwitchOutcome",
    "default_key_path",
    "parse_repo_url",
    "parse_secret_key_id",
    "resolve_key_path",
    "ssh_troubleshooting_hints",
]
