"""Tests for config loader."""

from pathlib import Path

import pytest

from ghswitch.config.loader import default_config_path, load_config
from ghswitch.errors import ConfigurationError


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a sample config YAML file."""
    config_content = f"""
service:
  label: GitHub Enterprise
  hostname: github.example.com

paths:
  profiles_file: {tmp_path}/accounts.json
  routing_file: {tmp_path}/ssh/config

keys:
  key_type: ed25519

logging:
  level: DEBUG
"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(config_content)
    return config_path


def test_load_config_defaults() -> None:
    """Test load_config returns defaults when no path given."""
    config = load_config(None)
    assert config.service.hostname == "github.com"
    assert config.service.transport_user == "git"
    assert config.paths.routing_file == Path("~/.ssh/config").expanduser()
    assert config.paths.profiles_file.name == ".github-switcher.json"
    assert config.keys.key_type == "rsa"
    assert config.keys.bits == 4096


def test_load_config_from_yaml(sample_config_yaml: Path, tmp_path: Path) -> None:
    """Test load_config loads from YAML file."""
    config = load_config(sample_config_yaml)
    assert config.service.label == "GitHub Enterprise"
    assert config.service.hostname == "github.example.com"
    assert config.paths.routing_file == tmp_path / "ssh" / "config"
    assert config.keys.key_type == "ed25519"
    assert config.logging.level == "DEBUG"


def test_load_config_expands_home(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("paths:\n  routing_file: ~/custom/ssh_config\n")

    config = load_config(config_path)

    assert config.paths.routing_file == Path("~/custom/ssh_config").expanduser()


def test_load_config_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")
    assert load_config(config_path).service.label == "GitHub"


def test_load_config_file_not_found() -> None:
    """Test load_config raises error for missing file."""
    with pytest.raises(FileNotFoundError):
        load_config(Path("/nonexistent/config.yaml"))


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Test load_config raises error for invalid YAML."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("invalid: yaml: content: [")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(config_path)
    assert "Invalid YAML" in str(exc_info.value)


def test_load_config_non_mapping_root(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- one\n- two\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(config_path)


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GHSWITCH_SERVICE__HOSTNAME", "ghe.internal")
    config = load_config(None)
    assert config.service.hostname == "ghe.internal"


def test_load_config_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("keys:\n  bits: 12\n")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(config_path)


class TestDefaultConfigPath:
    """Test config file discovery."""

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GHSWITCH_CONFIG", str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"

    def test_xdg_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GHSWITCH_CONFIG", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        config_path = tmp_path / ".config" / "ghswitch" / "config.yaml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{}")

        assert default_config_path() == config_path

    def test_none_when_absent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GHSWITCH_CONFIG", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_path() is None
