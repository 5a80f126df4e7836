"""Domain models for ghswitch."""

from ghswitch.models.profiles import Profile, ProfileSet
from ghswitch.models.results import ReconcileResult, SkipNotice, SkipReason

__all__ = [
    "Profile",
    "ProfileSet",
    "ReconcileResult",
    "SkipNotice",
    "SkipReason",
]
