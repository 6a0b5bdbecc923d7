"""Tests for configuration loading."""

import pytest

from pipedrive_toolkit.core.models import ClientConfig, ConfigError
from pipedrive_toolkit.core.config_store import config_from_env


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Pipedrive environment variables."""
    for name in ("PIPEDRIVE_API_TOKEN", "PIPEDRIVE_BASE_URL", "PIPEDRIVE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_config_from_env(clean_env):
    """Test building a config from environment variables."""
    clean_env.setenv("PIPEDRIVE_API_TOKEN", "env-token")
    clean_env.setenv("PIPEDRIVE_BASE_URL", "https://company.pipedrive.com/api/v1")
    clean_env.setenv("PIPEDRIVE_TIMEOUT", "30")

    config = config_from_env()

    assert config.api_token == "env-token"
    assert config.base_url == "https://company.pipedrive.com/api/v1"
    assert config.timeout_seconds == 30.0


def test_config_from_env_custom_prefix(clean_env):
    """Test reading variables with another prefix."""
    clean_env.setenv("SANDBOX_API_TOKEN", "sandbox-token")

    assert config_from_env("SANDBOX_").api_token == "sandbox-token"


def test_config_from_env_defaults(clean_env):
    """Test config_from_env without any variables set."""
    assert config_from_env() == ClientConfig()


def test_config_from_env_empty_token(clean_env):
    """Test that an empty token counts as no token."""
    clean_env.setenv("PIPEDRIVE_API_TOKEN", "")

    assert config_from_env().api_token is None


def test_config_from_env_invalid_timeout(clean_env):
    """Test that an invalid timeout raises ConfigError."""
    clean_env.setenv("PIPEDRIVE_TIMEOUT", "forever")

    with pytest.raises(ConfigError):
        config_from_env()


def test_config_from_env_touches_no_files(clean_env, tmp_path):
    """Test that loading config does not create anything under HOME."""
    clean_env.setenv("HOME", str(tmp_path))
    clean_env.setenv("PIPEDRIVE_API_TOKEN", "t")

    config_from_env()

    assert list(tmp_path.iterdir()) == []
