"""Commit-signing key lookup through gpg."""

from ghswitch.errors import SigningKeyNotFoundError
from ghswitch.ports.commands import CommandRunner


def parse_secret_key_id(output: str) -> str | None:
    """
    Extract the long key id from ``gpg --list-secret-keys --keyid-format LONG``.

    The id follows the slash on the ``sec`` line, e.g.
    ``sec   rsa4096/3AA5C34371567BD2 2016-03-10 [SC]``.
    """
    for line in output.splitlines():
        if "sec" not in line:
            continue
        parts = line.split("/")
        if len(parts) >= 2:
            key_id = parts[1].split(" ")[0]
            if key_id:
                return key_id
    return None


class SigningKeyLocator:
    """Finds the secret signing key registered for an email address."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def find(self, email: str) -> str:
        """
        Return the signing key id for ``email``.

        Raises:
            SigningKeyNotFoundError: If gpg fails or lists no matching key.
        """
        result = self.runner.run(["gpg", "--list-secret-keys", "--keyid-format", "LONG", email])
        if not result.ok:
            detail = result.stderr.strip() or f"exit status {result.exit_status}"
            raise SigningKeyNotFoundError(f"failed to list GPG keys: {detail}")

        key_id = parse_secret_key_id(result.stdout)
        if key_id is None:
            raise SigningKeyNotFoundError(f"no GPG key found for email: {email}")
        return key_id
