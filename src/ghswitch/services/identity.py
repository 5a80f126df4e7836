"""Apply a profile to a repository's local git configuration."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ghswitch.errors import CommandError, GhswitchError, NotARepositoryError
from ghswitch.models.profiles import Profile
from ghswitch.ports.commands import CommandRunner
from ghswitch.services.signing import SigningKeyLocator


@dataclass(frozen=True)
class SwitchOutcome:
    """What ``switch`` ended up configuring."""

    alias: str
    signing_key: str | None = None


@dataclass(frozen=True)
class IdentitySnapshot:
    """Identity currently configured in a repository."""

    name: str
    email: str
    signing_key: str | None = None


def ensure_repository(repo_dir: Path) -> None:
    """Raise NotARepositoryError unless ``repo_dir`` holds a ``.git`` entry."""
    if not (repo_dir / ".git").exists():
        raise NotARepositoryError(repo_dir)


class GitIdentityService:
    """Reads and writes ``user.*`` settings in a repository."""

    def __init__(self, runner: CommandRunner, signing: SigningKeyLocator | None = None) -> None:
        self.runner = runner
        self.signing = signing or SigningKeyLocator(runner)

    def switch(self, alias: str, profile: Profile, repo_dir: Path) -> SwitchOutcome:
        """
        Configure ``repo_dir`` to commit as ``profile``.

        Name and email are mandatory; signing setup is attempted and
        only logged when it fails.

        Raises:
            NotARepositoryError: If repo_dir is not a git repository.
            CommandError: If user.name or user.email cannot be set.
        """
        ensure_repository(repo_dir)

        self._set(repo_dir, "user.name", profile.display_name)
        self._set(repo_dir, "user.email", profile.email)

        signing_key = self._configure_signing(repo_dir, profile.email)
        logger.debug("Applied account {} to {}", alias, repo_dir)
        return SwitchOutcome(alias=alias, signing_key=signing_key)

    def current(self, repo_dir: Path) -> IdentitySnapshot:
        """
        Read the identity configured for ``repo_dir``.

        Raises:
            NotARepositoryError: If repo_dir is not a git repository.
            CommandError: If user.name or user.email is unset.
        """
        ensure_repository(repo_dir)

        name = self._get(repo_dir, "user.name")
        email = self._get(repo_dir, "user.email")
        if name is None:
            raise CommandError("failed to get git user.name", ["git", "config", "user.name"])
        if email is None:
            raise CommandError("failed to get git user.email", ["git", "config", "user.email"])

        # Signing key is optional
        signing_key = self._get(repo_dir, "user.signingkey")
        return IdentitySnapshot(name=name, email=email, signing_key=signing_key)

    def _configure_signing(self, repo_dir: Path, email: str) -> str | None:
        try:
            key_id = self.signing.find(email)
        except GhswitchError as e:
            logger.warning("Failed to find GPG key: {}", e)
            logger.warning("You may need to set up GPG keys manually.")
            return None

        try:
            self._set(repo_dir, "user.signingkey", key_id)
            self._set(repo_dir, "commit.gpgsign", "true")
        except CommandError as e:
            logger.warning("Failed to configure commit signing: {}", e)
            return None

        logger.debug("Configured GPG key {} for email {}", key_id, email)
        return key_id

    def _set(self, repo_dir: Path, key: str, value: str) -> None:
        args = ["git", "config", key, value]
        result = self.runner.run(args, cwd=repo_dir)
        if not result.ok:
            raise CommandError(f"failed to set git {key}", args, result.exit_status)

    def _get(self, repo_dir: Path, key: str) -> str | None:
        result = self.runner.run(["git", "config", key], cwd=repo_dir)
        value = result.stdout.strip()
        if not result.ok or not value:
            return None
        return value
