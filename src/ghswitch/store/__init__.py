"""Persistent profile storage."""

from ghswitch.store.profiles import ProfileStore

__all__ = ["ProfileStore"]
