"""GitHub account switcher.

Keeps several GitHub identities side by side, applies one of them
to the current repository, and maintains the matching host aliases
in the SSH client configuration.
"""

__version__ = "0.1.0"
