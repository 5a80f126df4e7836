"""ghswitch error types.

All custom exceptions inherit from GhswitchError to allow
catching any ghswitch-specific error at the command boundary.
"""

from collections.abc import Sequence
from pathlib import Path


class GhswitchError(Exception):
    """Base exception for all ghswitch errors."""

    pass


class ConfigurationError(GhswitchError):
    """Invalid configuration."""

    pass


class ProfileStoreError(GhswitchError):
    """Profile file could not be read, parsed, or written."""

    pass


class ProfileNotFoundError(GhswitchError):
    """No profile is stored under the requested alias."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"account '{alias}' not found")
        self.alias = alias


class MissingKeyError(GhswitchError):
    """A profile's private key does not exist on disk."""

    def __init__(self, alias: str, key_reference: str) -> None:
        super().__init__(f"SSH key not found for account '{alias}' at {key_reference}")
        self.alias = alias
        self.key_reference = key_reference


class NotARepositoryError(GhswitchError):
    """Operation requires a git working tree."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} is not a git repository")
        self.path = path


class RemoteUrlError(GhswitchError):
    """Remote URL is not in a supported format."""

    pass


class SigningKeyNotFoundError(GhswitchError):
    """No commit-signing key could be located for an email."""

    pass


class CommandError(GhswitchError):
    """External command failed or could not be started."""

    def __init__(self, message: str, args: Sequence[str], exit_status: int | None = None) -> None:
        super().__init__(message)
        self.command = list(args)
        self.exit_status = exit_status


class ReconcileError(GhswitchError):
    """Routing file could not be reconciled.

    The target file is left untouched whenever this is raised.
    """

    kind = "reconcile"

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ReadFailedError(ReconcileError):
    """Existing routing file is present but unreadable."""

    kind = "read_failed"


class BackupFailedError(ReconcileError):
    """Backup of the existing routing file could not be written."""

    kind = "backup_failed"


class TempWriteFailedError(ReconcileError):
    """Temporary sibling file could not be created or written."""

    kind = "temp_write_failed"


class RenameFailedError(ReconcileError):
    """Temporary file could not replace the routing file."""

    kind = "rename_failed"
