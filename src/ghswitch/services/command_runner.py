"""subprocess-backed CommandRunner."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from ghswitch.errors import CommandError
from ghswitch.ports.commands import CommandResult


class SubprocessRunner:
    """Runs commands with ``subprocess.run``; never raises on non-zero exit."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> CommandResult:
        argv = list(args)
        logger.debug("Running {} (cwd={})", argv, cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=capture,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandError(f"{argv[0]} not found on PATH", argv) from e
        except OSError as e:
            raise CommandError(f"failed to start {argv[0]}: {e}", argv) from e

        return CommandResult(
            stdout=completed.stdout or "",
            exit_status=completed.returncode,
            stderr=completed.stderr or "",
        )
