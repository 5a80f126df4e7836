"""Result models for routing-file reconciliation."""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class SkipReason(StrEnum):
    """Why a profile produced no managed block."""

    EMPTY_KEY_PATH = "empty_key_path"
    MISSING_KEY = "missing_key"
    DUPLICATE_USERNAME = "duplicate_username"


@dataclass(frozen=True)
class SkipNotice:
    """Non-fatal per-profile notice emitted during reconciliation."""

    alias: str
    reason: SkipReason
    key_reference: str = ""


@dataclass
class ReconcileResult:
    """Outcome of a successful reconciliation."""

    path: Path
    written: list[str] = field(default_factory=list)
    skipped: list[SkipNotice] = field(default_factory=list)
    backup_path: Path | None = None
    absorbed_lines: list[str] = field(default_factory=list)
