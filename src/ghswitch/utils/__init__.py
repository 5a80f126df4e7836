"""ghswitch utility modules."""

from ghswitch.utils.fileio import atomic_write_bytes, replace_atomically, write_temp_sibling
from ghswitch.utils.logging import configure_logging

__all__ = [
    "atomic_write_bytes",
    "configure_logging",
    "replace_atomically",
    "write_temp_sibling",
]
