"""Pydantic configuration models for ghswitch."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ServiceConfig(BaseModel):
    """Hosting service the managed host aliases point at."""

    label: str = "GitHub"
    hostname: str = "github.com"
    transport_user: str = "git"

    @field_validator("hostname")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        """Reject values that would break a Host line."""
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("hostname must be a single non-empty token")
        return v

    @property
    def marker_token(self) -> str:
        """Substring that identifies a managed block's first line."""
        return f"# {self.label} account:"

    def host_alias(self, username: str) -> str:
        """SSH host alias for one account, e.g. ``github.com-alice``."""
        return f"{self.hostname}-{username}"


def _expand(v: Path | str) -> Path:
    if isinstance(v, str):
        v = Path(v)
    return v.expanduser()


class PathsConfig(BaseModel):
    """Locations of the files ghswitch reads and writes."""

    profiles_file: Path = Field(default_factory=lambda: Path("~/.github-switcher.json").expanduser())
    routing_file: Path = Field(default_factory=lambda: Path("~/.ssh/config").expanduser())
    key_directory: Path = Field(default_factory=lambda: Path("~/.ssh").expanduser())

    @field_validator("profiles_file", "routing_file", "key_directory", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str) -> Path:
        """Expand user path."""
        return _expand(v)


class KeyConfig(BaseModel):
    """Parameters for generated key pairs."""

    key_type: Literal["rsa", "ed25519", "ecdsa"] = "rsa"
    bits: int = Field(default=4096, ge=1024, le=16384)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for ghswitch."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    keys: KeyConfig = Field(default_factory=KeyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "GHSWITCH_",
        "env_nested_delimiter": "__",
    }
