"""Routing file reconciler.

Rewrites the SSH client configuration from the stored profiles.
Profiles are authoritative for the managed blocks; every other line
in the file belongs to the user and is carried over untouched.
"""

from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from ghswitch.config.models import ServiceConfig
from ghswitch.errors import (
    BackupFailedError,
    ReadFailedError,
    RenameFailedError,
    TempWriteFailedError,
)
from ghswitch.models.profiles import Profile, ProfileSet
from ghswitch.models.results import ReconcileResult, SkipNotice, SkipReason
from ghswitch.routing.parser import BlockState, scan
from ghswitch.routing.template import render_block
from ghswitch.utils.fileio import atomic_write_bytes, replace_atomically, write_temp_sibling

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def backup_path_for(path: Path) -> Path:
    """Sibling path holding the pre-reconciliation copy."""
    return path.with_name(path.name + ".bak")


class RoutingFileReconciler:
    """
    Merges a set of profiles into a shared routing file.

    Each run:
    - drops every existing managed block
    - renders one block per profile whose key exists, alias-ascending,
      keeping only the first profile for each username
    - backs up the previous file to ``<path>.bak``
    - replaces the file atomically
    """

    def __init__(self, service: ServiceConfig | None = None) -> None:
        self.service = service or ServiceConfig()

    def reconcile(self, profiles: ProfileSet | Mapping[str, Profile], path: Path) -> ReconcileResult:
        """
        Reconcile ``path`` with ``profiles``.

        Args:
            profiles: Profiles to render, keyed by alias. May be empty.
            path: Routing file location. May not exist yet.

        Returns:
            ReconcileResult describing what was written and skipped.

        Raises:
            ReadFailedError: Existing file could not be read.
            BackupFailedError: Backup copy could not be written.
            TempWriteFailedError: Temporary file could not be written.
            RenameFailedError: Temporary file could not replace the target.
        """
        if not isinstance(profiles, ProfileSet):
            profiles = ProfileSet(accounts=dict(profiles))

        result = ReconcileResult(path=path)
        original = self._read_existing(path)

        scanned = scan(
            original.decode(_ENCODING, _ERRORS), self.service.marker_token, self.service.hostname
        )
        if scanned.managed_usernames:
            logger.debug("Replacing managed blocks for: {}", ", ".join(scanned.managed_usernames))
        if scanned.final_state is not BlockState.OUTSIDE:
            logger.debug("Routing file {} ended inside a managed block", path)
        for line in scanned.absorbed_lines:
            logger.warning("Dropping line found inside a managed block in {}: {!r}", path, line)
        result.absorbed_lines = scanned.absorbed_lines

        blocks: list[str] = []
        owners: dict[str, str] = {}
        for alias, profile in profiles.ordered():
            notice = self._check_key(alias, profile)
            if notice is None and profile.username in owners:
                logger.warning(
                    "Skipping SSH config for account '{}': username '{}' already used by '{}'",
                    alias,
                    profile.username,
                    owners[profile.username],
                )
                notice = SkipNotice(alias, SkipReason.DUPLICATE_USERNAME, profile.key_reference)
            if notice is not None:
                result.skipped.append(notice)
                continue
            owners[profile.username] = alias
            blocks.append(render_block(profile, self.service))
            result.written.append(alias)

        foreign = scanned.foreign_text.rstrip("\n")
        if foreign:
            foreign += "\n\n"
        content = (foreign + "".join(blocks)).encode(_ENCODING, _ERRORS)

        if original:
            result.backup_path = self._write_backup(path, original)

        self._commit(path, content)

        logger.info(
            "Updated routing file {}: {} block(s) written, {} skipped",
            path,
            len(result.written),
            len(result.skipped),
        )
        return result

    def _read_existing(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return b""
        except OSError as e:
            raise ReadFailedError(f"failed to read routing file {path}: {e}", path) from e

    def _check_key(self, alias: str, profile: Profile) -> SkipNotice | None:
        if not profile.key_reference:
            logger.warning("Skipping SSH config for account '{}' due to empty key path", alias)
            return SkipNotice(alias, SkipReason.EMPTY_KEY_PATH)

        if not Path(profile.key_reference).expanduser().exists():
            logger.warning(
                "SSH key not found for account '{}' at {}", alias, profile.key_reference
            )
            return SkipNotice(alias, SkipReason.MISSING_KEY, profile.key_reference)

        return None

    def _write_backup(self, path: Path, original: bytes) -> Path:
        backup = backup_path_for(path)
        try:
            atomic_write_bytes(backup, original)
        except OSError as e:
            raise BackupFailedError(f"failed to create backup {backup}: {e}", path) from e
        logger.debug("Backed up {} to {}", path, backup)
        return backup

    def _commit(self, path: Path, content: bytes) -> None:
        try:
            tmp_path = write_temp_sibling(path, content)
        except OSError as e:
            raise TempWriteFailedError(
                f"failed to write temporary file next to {path}: {e}", path
            ) from e

        try:
            replace_atomically(tmp_path, path)
        except OSError as e:
            raise RenameFailedError(f"failed to update routing file {path}: {e}", path) from e


def reconcile(
    profiles: ProfileSet | Mapping[str, Profile],
    routing_file_path: Path,
    service: ServiceConfig | None = None,
) -> ReconcileResult:
    """Reconcile ``routing_file_path`` with ``profiles`` using ``service`` settings."""
    return RoutingFileReconciler(service).reconcile(profiles, routing_file_path)
