"""Port interface for running external commands."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of an external command."""

    stdout: str
    exit_status: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_status == 0


class CommandRunner(Protocol):
    """Protocol for running git, gpg, ssh-keygen and friends."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> CommandResult:
        """Run ``args`` and return its result.

        With ``capture=False`` output goes straight to the terminal and
        ``stdout`` in the result is empty.
        """
        ...
