"""Test configuration functionality."""

import pytest

from scoresystem.config import (
    ScoresystemConfig,
    get_config,
    reset_config,
    update_config,
)


def test_config_defaults():
    """Test default configuration values."""
    config = ScoresystemConfig()

    assert config.max_events == 20
    assert config.warn_events == 16
    assert config.default_win_probability == 0.5
    assert config.verbose is False


def test_config_from_env(monkeypatch):
    """Test configuration from environment variables."""
    monkeypatch.setenv("SCORESYSTEM_MAX_EVENTS", "12")
    monkeypatch.setenv("SCORESYSTEM_VERBOSE", "true")
    monkeypatch.setenv("SCORESYSTEM_DEFAULT_PROBABILITY", "0.65")

    config = ScoresystemConfig()

    assert config.max_events == 12
    assert config.verbose is True
    assert config.default_win_probability == 0.65


def test_config_rejects_out_of_range_probability(monkeypatch):
    monkeypatch.setenv("SCORESYSTEM_DEFAULT_PROBABILITY", "1.5")

    with pytest.raises(ValueError):
        ScoresystemConfig()


def test_get_config():
    """Test getting global configuration."""
    config = get_config()
    assert isinstance(config, ScoresystemConfig)


def test_update_config():
    """Test updating configuration."""
    update_config(max_events=10)
    assert get_config().max_events == 10

    reset_config()
    assert get_config().max_events == 20


def test_update_config_invalid_key():
    """Test updating configuration with invalid key."""
    with pytest.raises(ValueError, match="Unknown configuration option"):
        update_config(invalid_key="value")


def test_invalid_environment_keeps_current_config(monkeypatch):
    """A failed reset leaves the previous configuration in place."""
    current = get_config()
    monkeypatch.setenv("SCORESYSTEM_DEFAULT_PROBABILITY", "1.5")

    with pytest.raises(ValueError):
        reset_config()

    assert get_config() is current
