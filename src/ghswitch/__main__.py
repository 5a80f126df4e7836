"""CLI entry point for ghswitch.

Provides commands for adding accounts, switching the identity
of the current repository, and keeping the SSH configuration
in sync with the stored accounts.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ghswitch import __version__

if TYPE_CHECKING:
    from ghswitch.config.models import Config
    from ghswitch.models.profiles import ProfileSet
    from ghswitch.models.results import ReconcileResult
    from ghswitch.ports.commands import CommandRunner

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)


def _load(config: Path | None) -> "Config":
    """Load configuration and set up logging for a command."""
    from ghswitch.config.loader import default_config_path, load_config
    from ghswitch.errors import ConfigurationError
    from ghswitch.utils.logging import configure_logging

    try:
        cfg = load_config(config or default_config_path())
    except (ConfigurationError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    configure_logging(cfg.logging)
    return cfg


def _runner() -> "CommandRunner":
    from ghswitch.services.command_runner import SubprocessRunner

    return SubprocessRunner()


def _sync(cfg: "Config", profiles: "ProfileSet") -> "ReconcileResult":
    from ghswitch.errors import ReconcileError
    from ghswitch.routing.reconciler import reconcile

    try:
        return reconcile(profiles, cfg.paths.routing_file, cfg.service)
    except ReconcileError as e:
        raise click.ClickException(f"Error updating SSH config: {e}") from e


def _load_profiles(cfg: "Config") -> "ProfileSet":
    from ghswitch.errors import ProfileStoreError
    from ghswitch.store.profiles import ProfileStore

    try:
        return ProfileStore(cfg.paths.profiles_file).load()
    except ProfileStoreError as e:
        raise click.ClickException(str(e)) from e


def _save_profiles(cfg: "Config", profiles: "ProfileSet") -> None:
    from ghswitch.errors import ProfileStoreError
    from ghswitch.store.profiles import ProfileStore

    try:
        ProfileStore(cfg.paths.profiles_file).save(profiles)
    except ProfileStoreError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """GitHub Account Switcher.

    Keeps several GitHub accounts side by side, applies one of
    them to the current repository, and maintains an SSH host
    alias per account in ~/.ssh/config.
    """
    pass


@cli.command()
@config_option
def add(config: Path | None) -> None:
    """Add a new GitHub account and configure SSH."""
    from pydantic import ValidationError

    from ghswitch.errors import CommandError
    from ghswitch.models.profiles import Profile
    from ghswitch.services.keys import KeyGenerator, default_key_path, resolve_key_path

    cfg = _load(config)
    profiles = _load_profiles(cfg)
    key_directory = cfg.paths.key_directory

    alias = click.prompt("Enter account alias (e.g., work, personal)").strip()
    if not alias:
        raise click.ClickException("Account alias must not be empty")
    username = click.prompt("Enter GitHub username").strip()
    owner = profiles.find_by_username(username)
    if owner is not None and owner[0] != alias:
        raise click.ClickException(
            f"username '{username}' is already used by account '{owner[0]}'"
        )
    name = click.prompt("Enter your name").strip()
    email = click.prompt("Enter your email").strip()
    default_key = default_key_path(key_directory, username)
    raw_key = click.prompt("Enter SSH key path", default=str(default_key), show_default=True)
    key_path = resolve_key_path(raw_key.strip() or str(default_key), key_directory)

    if not key_path.exists() and click.confirm(
        f"SSH key not found. Generate new key at {key_path}?", default=True
    ):
        try:
            public_key = KeyGenerator(_runner(), cfg.keys).generate(key_path, email)
        except CommandError as e:
            raise click.ClickException(str(e)) from e
        click.echo("\nSSH key generated. Add this public key to GitHub:")
        click.echo(f"cat {public_key}")

    if not key_path.exists():
        raise click.ClickException(
            f"SSH key not found at {key_path}\n"
            "Please ensure the SSH key exists before adding the account."
        )

    try:
        profile = Profile(
            display_name=name, email=email, username=username, key_reference=str(key_path)
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid account: {e}") from e

    profiles = profiles.with_profile(alias, profile)
    _save_profiles(cfg, profiles)
    _sync(cfg, profiles)

    click.echo(f"\nAccount '{alias}' added successfully.")
    click.echo("\nTo clone repositories, use:")
    click.echo(f"git clone git@{cfg.service.host_alias(username)}:owner/repo.git")


@cli.command("list")
@config_option
def list_accounts(config: Path | None) -> None:
    """List all configured accounts."""
    cfg = _load(config)
    profiles = _load_profiles(cfg)

    click.echo("Available GitHub accounts:")
    if not len(profiles):
        click.echo("  No accounts configured yet.")
        return

    for alias, profile in profiles.ordered():
        click.echo(f" {alias:<15} ({profile.display_name}, {profile.email})")


@cli.command()
@click.argument("alias")
@config_option
def remove(alias: str, config: Path | None) -> None:
    """Remove an account and its SSH host alias."""
    cfg = _load(config)
    profiles = _load_profiles(cfg)

    if alias not in profiles:
        raise click.ClickException(f"account '{alias}' not found")

    profiles = profiles.without(alias)
    _save_profiles(cfg, profiles)
    _sync(cfg, profiles)
    click.echo(f"Account '{alias}' removed.")


@cli.command()
@click.argument("alias")
@config_option
def switch(alias: str, config: Path | None) -> None:
    """Switch the current repository to the specified account."""
    from ghswitch.errors import GhswitchError, ProfileNotFoundError
    from ghswitch.services.identity import GitIdentityService

    cfg = _load(config)
    profiles = _load_profiles(cfg)

    profile = profiles.get(alias)
    try:
        if profile is None:
            raise ProfileNotFoundError(alias)
        outcome = GitIdentityService(_runner()).switch(alias, profile, Path.cwd())
    except GhswitchError as e:
        raise click.ClickException(str(e)) from e

    if outcome.signing_key:
        click.echo(f"Configured GPG key {outcome.signing_key} for email {profile.email}")
    click.echo(
        f"Switched to {cfg.service.label} account: {alias} "
        f"({profile.display_name}, {profile.email}) for current repository"
    )


@cli.command()
@config_option
def current(config: Path | None) -> None:
    """Show the current repository's git identity."""
    from ghswitch.errors import GhswitchError
    from ghswitch.services.identity import GitIdentityService

    _load(config)
    try:
        snapshot = GitIdentityService(_runner()).current(Path.cwd())
    except GhswitchError as e:
        raise click.ClickException(str(e)) from e

    click.echo("Current repository configuration:")
    click.echo(f"Name:  {snapshot.name}")
    click.echo(f"Email: {snapshot.email}")
    if snapshot.signing_key:
        click.echo(f"GPG:   {snapshot.signing_key}")


@cli.command()
@click.argument("url")
@click.argument("directory", required=False)
@config_option
def clone(url: str, directory: str | None, config: Path | None) -> None:
    """Clone a repository, using the SSH alias of the account that owns it."""
    from ghswitch.errors import GhswitchError
    from ghswitch.services.clone import CloneFailedError, CloneService, ssh_troubleshooting_hints
    from ghswitch.services.identity import GitIdentityService

    cfg = _load(config)
    profiles = _load_profiles(cfg)
    runner = _runner()
    service = CloneService(runner, GitIdentityService(runner), cfg.service)

    try:
        outcome = service.clone(profiles, url, directory, Path.cwd())
    except CloneFailedError as e:
        if e.profile is not None:
            click.echo("", err=True)
            for line in ssh_troubleshooting_hints(e.profile, cfg.service):
                click.echo(line, err=True)
        raise click.ClickException(str(e)) from e
    except GhswitchError as e:
        raise click.ClickException(str(e)) from e

    if outcome.alias:
        click.echo(f"Cloned into {outcome.directory} using account '{outcome.alias}'")
    else:
        click.echo(f"Cloned into {outcome.directory}")


@cli.command()
@config_option
def sync(config: Path | None) -> None:
    """Rewrite the SSH configuration from the stored accounts."""
    cfg = _load(config)
    profiles = _load_profiles(cfg)

    result = _sync(cfg, profiles)

    click.echo(f"Updated {result.path}")
    click.echo(f"  Written: {len(result.written)}")
    click.echo(f"  Skipped: {len(result.skipped)}")
    for notice in result.skipped:
        click.echo(f"    {notice.alias}: {notice.reason.value}")
    if result.backup_path:
        click.echo(f"  Backup: {result.backup_path}")


@cli.command("help")
@config_option
@click.pass_context
def help_command(ctx: click.Context, config: Path | None) -> None:
    """Show this help information."""
    cfg = _load(config)
    parent = ctx.parent or ctx
    click.echo(parent.get_help())
    click.echo("\nExample SSH clone command:")
    click.echo(f"  git clone git@{cfg.service.host_alias('username')}:owner/repo.git")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
