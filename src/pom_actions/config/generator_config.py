"""Generator configuration with environment variable loading."""

import os
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class GeneratorConfig(BaseModel):
    """Configuration for page object method generation."""

    model_config = ConfigDict(validate_default=True)

    # Naming
    locate_prefix: str = Field(
        default_factory=lambda: os.getenv("POM_ACTIONS_LOCATE_PREFIX", "locate"),
        description="Prefix of the always-generated locate method",
    )

    # Waiting
    default_timeout_ms: int = Field(
        default_factory=lambda: int(os.getenv("POM_ACTIONS_DEFAULT_TIMEOUT_MS", "10000")),
        description="Timeout for wait actions when none is given (milliseconds)",
    )
    poll_interval_ms: int = Field(
        default_factory=lambda: int(os.getenv("POM_ACTIONS_POLL_INTERVAL_MS", "100")),
        description="Delay between polls in wait actions (milliseconds)",
    )

    # Screenshots
    screenshot_type: Literal["png", "jpeg"] = Field(
        default_factory=lambda: os.getenv("POM_ACTIONS_SCREENSHOT_TYPE", "png"),
        description="Image format for element screenshots",
    )

    @field_validator("locate_prefix")
    @classmethod
    def _prefix_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"locate_prefix must be an identifier, got {value!r}")
        return value

    @field_validator("default_timeout_ms", "poll_interval_ms")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("timeouts and intervals must be positive")
        return value


_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get the shared generator configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = GeneratorConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration (for testing)."""
    global _config
    _config = None
