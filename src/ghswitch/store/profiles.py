"""JSON-backed profile store.

File layout (compatible with ``~/.github-switcher.json``)::

    {
      "accounts": {
        "work": {"name": "...", "email": "...", "username": "...", "ssh_key_path": "..."}
      }
    }
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from ghswitch.errors import ProfileStoreError
from ghswitch.models.profiles import ProfileSet
from ghswitch.utils.fileio import atomic_write_bytes


class ProfileStore:
    """Loads and saves the profile set at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> ProfileSet:
        """
        Load profiles from disk.

        Returns:
            ProfileSet, empty when the file does not exist yet.

        Raises:
            ProfileStoreError: If the file is unreadable or malformed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Profile file {} does not exist yet", self.path)
            return ProfileSet()
        except OSError as e:
            raise ProfileStoreError(f"Error reading config file {self.path}: {e}") from e

        if not raw.strip():
            return ProfileSet()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ProfileStoreError(f"Error parsing config file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ProfileStoreError(
                f"Config file {self.path} must contain a JSON object, not {type(data).__name__}"
            )

        # Older files may have "accounts": null
        if data.get("accounts") is None:
            data["accounts"] = {}

        try:
            return ProfileSet.model_validate(data)
        except ValidationError as e:
            raise ProfileStoreError(f"Invalid account data in {self.path}: {e}") from e

    def save(self, profiles: ProfileSet) -> None:
        """
        Write profiles to disk atomically with owner-only permissions.

        Raises:
            ProfileStoreError: If the file could not be written.
        """
        payload = profiles.model_dump(by_alias=True)
        data = json.dumps(payload, indent=2, sort_keys=True) + "\n"
        try:
            atomic_write_bytes(self.path, data.encode("utf-8"), mode=0o600)
        except OSError as e:
            raise ProfileStoreError(f"Error saving config file {self.path}: {e}") from e
        logger.debug("Saved {} account(s) to {}", len(profiles), self.path)
