"""Key-pair generation through ssh-keygen."""

from pathlib import Path

from loguru import logger

from ghswitch.config.models import KeyConfig
from ghswitch.errors import CommandError
from ghswitch.ports.commands import CommandRunner


def default_key_path(key_directory: Path, username: str) -> Path:
    """Conventional private key location for ``username``."""
    return key_directory / f"id_rsa_{username}"


def resolve_key_path(raw: str, key_directory: Path) -> Path:
    """Expand ``~`` and anchor relative paths under ``key_directory``."""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = key_directory / path
    return path


class KeyGenerator:
    """Creates new key pairs for accounts that do not have one yet."""

    def __init__(self, runner: CommandRunner, keys: KeyConfig | None = None) -> None:
        self.runner = runner
        self.keys = keys or KeyConfig()

    def generate(self, key_path: Path, email: str) -> Path:
        """
        Generate an unencrypted key pair at ``key_path``.

        Returns:
            Path of the public key.

        Raises:
            CommandError: If the key directory cannot be created or
                ssh-keygen fails.
        """
        args = ["ssh-keygen", "-t", self.keys.key_type]
        if self.keys.key_type != "ed25519":
            args += ["-b", str(self.keys.bits)]
        args += ["-C", email, "-f", str(key_path), "-N", ""]

        try:
            key_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as e:
            raise CommandError(f"Error creating key directory {key_path.parent}: {e}", args) from e

        result = self.runner.run(args, capture=False)
        if not result.ok:
            raise CommandError("Error generating SSH key", args, result.exit_status)

        public_key = key_path.with_name(key_path.name + ".pub")
        logger.info("SSH key generated at {}", key_path)
        return public_key
