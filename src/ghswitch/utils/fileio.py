"""Crash-safe file writing helpers.

Content is written to a temporary file in the target's own directory
and then moved into place with ``os.replace()``, so the rename never
crosses a filesystem and readers never see a partial file.
"""

import os
import tempfile
from pathlib import Path

from loguru import logger


def write_temp_sibling(target: Path, data: bytes, mode: int = 0o600) -> Path:
    """Write ``data`` to a new temporary file next to ``target``.

    The parent directory is created (0700) if missing. On any failure
    the temporary file is removed before the error propagates.

    Returns:
        Path of the temporary file.

    Raises:
        OSError: If the directory, file, or write fails.
    """
    target.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
    except BaseException:
        discard(tmp_path)
        raise
    return tmp_path


def replace_atomically(tmp_path: Path, target: Path) -> None:
    """Move ``tmp_path`` onto ``target``; remove ``tmp_path`` if that fails."""
    try:
        os.replace(tmp_path, target)
    except BaseException:
        discard(tmp_path)
        raise


def atomic_write_bytes(target: Path, data: bytes, mode: int = 0o600) -> None:
    """Write ``data`` to ``target`` via a sibling temp file and an atomic replace."""
    tmp_path = write_temp_sibling(target, data, mode=mode)
    replace_atomically(tmp_path, target)


def discard(path: Path) -> None:
    """Best-effort removal of a leftover temporary file."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove temporary file {}: {}", path, e)
