"""Profile models.

The on-disk JSON keeps the field names used by existing
``~/.github-switcher.json`` files (``name``, ``ssh_key_path``);
either spelling is accepted when loading.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """A single identity for the hosting service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str = Field(default="", alias="name")
    email: str = ""
    username: str = Field(min_length=1)
    key_reference: str = Field(default="", alias="ssh_key_path")

    @field_validator("display_name", "email", "key_reference")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Trim surrounding whitespace left over from prompts or hand edits."""
        return v.strip()

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Username becomes part of a host alias, so it must be a single token."""
        v = v.strip()
        if not v:
            raise ValueError("username must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError("username must not contain whitespace")
        return v


class ProfileSet(BaseModel):
    """Mapping of alias to profile.

    Aliases are unique keys. Iteration through ``ordered()`` is
    alias-ascending so that everything derived from the set is
    reproducible.
    """

    accounts: dict[str, Profile] = Field(default_factory=dict)

    def ordered(self) -> Iterator[tuple[str, Profile]]:
        """Yield (alias, profile) pairs sorted by alias."""
        for alias in sorted(self.accounts):
            yield alias, self.accounts[alias]

    def get(self, alias: str) -> Profile | None:
        return self.accounts.get(alias)

    def with_profile(self, alias: str, profile: Profile) -> "ProfileSet":
        """Return a copy with ``alias`` set to ``profile`` (replacing any previous one)."""
        accounts = dict(self.accounts)
        accounts[alias] = profile
        return ProfileSet(accounts=accounts)

    def without(self, alias: str) -> "ProfileSet":
        """Return a copy with ``alias`` removed."""
        accounts = {k: v for k, v in self.accounts.items() if k != alias}
        return ProfileSet(accounts=accounts)

    def find_by_username(self, username: str) -> tuple[str, Profile] | None:
        """Return the first (alias, profile) whose username matches."""
        for alias, profile in self.ordered():
            if profile.username == username:
                return alias, profile
        return None

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, alias: object) -> bool:
        return alias in self.accounts
