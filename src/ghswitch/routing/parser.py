"""Separation of a routing file into foreign and managed lines.

A managed block looks like::

    # GitHub account: alice
    Host github.com-alice
        HostName github.com
        ...
    <blank>

The scan is a small state machine. The marker line opens a block in
``HEADER``. The block's own ``Host <hostname>-<username>`` line moves it
to ``INSIDE``; any other unindented line closes the block at once. In
``INSIDE`` the next unindented non-blank line closes it and is kept as
foreign content. End of file closes any open block.
"""

from dataclasses import dataclass, field
from enum import Enum

# Directives the block template emits; anything else indented inside a
# block was added by someone else and is reported when dropped.
MANAGED_DIRECTIVES = frozenset({"HostName", "User", "IdentityFile", "IdentitiesOnly"})


class BlockState(Enum):
    """Position of the scanner relative to managed blocks."""

    OUTSIDE = "outside"
    HEADER = "header"
    INSIDE = "inside"


@dataclass
class ScanResult:
    """Lines retained as foreign content, plus what was cut out."""

    foreign_lines: list[str] = field(default_factory=list)
    managed_usernames: list[str] = field(default_factory=list)
    absorbed_lines: list[str] = field(default_factory=list)
    final_state: BlockState = BlockState.OUTSIDE

    @property
    def foreign_text(self) -> str:
        if not self.foreign_lines:
            return ""
        return "\n".join(self.foreign_lines) + "\n"


def _is_indented(line: str) -> bool:
    return line.startswith((" ", "\t"))


def _is_block_terminator(line: str) -> bool:
    return line != "" and not _is_indented(line)


def _is_foreign_directive(line: str) -> bool:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return False
    keyword = stripped.split(None, 1)[0]
    return keyword not in MANAGED_DIRECTIVES


def split_lines(text: str) -> list[str]:
    """Split on newlines without producing a phantom final empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def scan(text: str, marker_token: str, hostname: str = "github.com") -> ScanResult:
    """
    Split routing file text into foreign lines and managed blocks.

    Args:
        text: Full routing file content.
        marker_token: Substring identifying a managed block's first line,
            e.g. ``"# GitHub account:"``.
        hostname: Service hostname; a block's own host line is
            ``Host <hostname>-<username>``.

    Returns:
        ScanResult with foreign lines in original order.
    """
    result = ScanResult()
    state = BlockState.OUTSIDE
    host_line = ""

    for line in split_lines(text):
        if marker_token in line:
            state = BlockState.HEADER
            username = line.split(marker_token, 1)[1].strip()
            result.managed_usernames.append(username)
            host_line = f"Host {hostname}-{username}"
            continue

        if state is BlockState.HEADER:
            if line.rstrip() == host_line:
                state = BlockState.INSIDE
                continue
            # Anything unindented other than the block's own host line
            # belongs to the user.
            state = BlockState.OUTSIDE if _is_block_terminator(line) else BlockState.INSIDE

        if state is BlockState.INSIDE:
            if _is_block_terminator(line):
                state = BlockState.OUTSIDE
            else:
                if _is_foreign_directive(line):
                    result.absorbed_lines.append(line)
                continue

        result.foreign_lines.append(line)

    result.final_state = state
    return result
