"""Clone repositories through a matching account's host alias."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ghswitch.config.models import ServiceConfig
from ghswitch.errors import CommandError, GhswitchError, MissingKeyError
from ghswitch.models.profiles import Profile, ProfileSet
from ghswitch.ports.commands import CommandRunner
from ghswitch.services.identity import GitIdentityService
from ghswitch.services.remote_url import parse_repo_url


@dataclass(frozen=True)
class CloneOutcome:
    """Result of a clone."""

    url: str
    directory: Path
    alias: str | None = None


def ssh_troubleshooting_hints(profile: Profile, service: ServiceConfig) -> list[str]:
    """Hints shown after a clone through a host alias fails."""
    host_alias = service.host_alias(profile.username)
    return [
        "If you're seeing SSH key errors, try:",
        "1. Start ssh-agent:",
        '   eval "$(ssh-agent -s)"',
        "2. Add your SSH key:",
        f"   ssh-add {profile.key_reference}",
        "",
        "Or verify your SSH configuration:",
        "1. Test SSH connection:",
        f"   ssh -T {service.transport_user}@{host_alias}",
        "2. Check if the key exists:",
        f"   ls -l {profile.key_reference}",
    ]


class CloneFailedError(CommandError):
    """git clone exited non-zero; carries the matched profile for hints."""

    def __init__(
        self,
        message: str,
        args: list[str],
        exit_status: int | None,
        alias: str | None = None,
        profile: Profile | None = None,
    ) -> None:
        super().__init__(message, args, exit_status)
        self.alias = alias
        self.profile = profile


class CloneService:
    """Clones with the SSH host alias of the account that owns the repository."""

    def __init__(
        self,
        runner: CommandRunner,
        identity: GitIdentityService,
        service: ServiceConfig | None = None,
    ) -> None:
        self.runner = runner
        self.identity = identity
        self.service = service or ServiceConfig()

    def clone(
        self,
        profiles: ProfileSet,
        url: str,
        target_dir: str | None = None,
        cwd: Path | None = None,
    ) -> CloneOutcome:
        """
        Clone ``url``; when its owner matches an account, clone through that
        account's host alias and apply the account to the new repository.

        Raises:
            RemoteUrlError: If the URL cannot be parsed.
            MissingKeyError: If the matching account's key is missing.
            CloneFailedError: If git clone fails.
        """
        cwd = cwd or Path.cwd()
        ref = parse_repo_url(url, self.service.hostname)

        match = profiles.find_by_username(ref.owner)
        alias: str | None = None
        profile: Profile | None = None
        if match is not None:
            alias, profile = match
            if not Path(profile.key_reference).expanduser().exists():
                raise MissingKeyError(alias, profile.key_reference)
            host_alias = self.service.host_alias(profile.username)
            clone_url = ref.ssh_url(host_alias, self.service.transport_user)
            logger.info("Using SSH configuration for account '{}'", alias)
        else:
            clone_url = url
            logger.info("No matching account found, using original URL")

        args = ["git", "clone", clone_url]
        if target_dir:
            args.append(target_dir)

        result = self.runner.run(args, cwd=cwd, capture=False)
        if not result.ok:
            raise CloneFailedError(
                "failed to clone repository", args, result.exit_status, alias, profile
            )

        directory = cwd / (target_dir or ref.name)
        if alias is not None and profile is not None:
            try:
                self.identity.switch(alias, profile, directory)
            except GhswitchError as e:
                logger.warning("Failed to configure repository: {}", e)

        return CloneOutcome(url=clone_url, directory=directory, alias=alias)
