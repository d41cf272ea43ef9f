"""Configuration management for scoresystem."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoresystemConfig(BaseSettings):
    """Configuration settings for scoresystem."""

    # Enumeration limits
    max_events: int = Field(
        default=20,
        ge=0,
        description="Largest event count accepted before enumeration is refused",
        alias="SCORESYSTEM_MAX_EVENTS",
    )

    warn_events: int = Field(
        default=16,
        ge=0,
        description="Event count above which a warning is logged before enumeration",
        alias="SCORESYSTEM_WARN_EVENTS",
    )

    # Query defaults
    default_win_probability: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Per-event win probability used by the CLI when none is given",
        alias="SCORESYSTEM_DEFAULT_PROBABILITY",
    )

    # Logging
    verbose: bool = Field(
        default=False,
        description="Log enumeration details at INFO level",
        alias="SCORESYSTEM_VERBOSE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Global configuration instance
config = ScoresystemConfig()


def get_config() -> ScoresystemConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> None:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown configuration option: {key}")


def reset_config() -> None:
    """Reset configuration to defaults."""
    global config
    config = ScoresystemConfig()
