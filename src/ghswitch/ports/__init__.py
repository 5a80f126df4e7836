"""Port interfaces for ghswitch.

Services depend on these abstractions rather than on concrete
process execution, so they can be exercised without shelling out.
"""

from ghswitch.ports.commands import CommandResult, CommandRunner

__all__ = ["CommandResult", "CommandRunner"]
