"""
Configuration schema for the chat-completion client.

This module defines dataclasses that provide type safety and validation
for configuration files. Used with Hydra and OmegaConf for robust
configuration management, or constructed directly and passed to the client.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional
import os


# Environment variables read by OpenAIConfig.from_env
ENV_BASE_URL = "OPENAI_API_BASE"
ENV_API_KEY = "OPENAI_API_KEY"
ENV_MODEL = "OPENAI_API_MODEL"


@dataclass
class OpenAIConfig:
    """Chat-completion endpoint settings.

    Unset values stay ``None``; the client applies the defaults when it is
    constructed.
    """
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = None
    timeout: Optional[float] = None

    def __post_init__(self):
        """Normalise empty strings and validate the timeout."""
        if self.base_url == "":
            self.base_url = None
        if self.api_key == "":
            self.api_key = None
        if self.model is not None:
            self.model = self.model.strip() or None
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("OpenAI timeout must be a positive number of seconds")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OpenAIConfig":
        """Build a config from OPENAI_API_BASE, OPENAI_API_KEY and OPENAI_API_MODEL."""
        env = os.environ if environ is None else environ
        return cls(
            base_url=env.get(ENV_BASE_URL),
            api_key=env.get(ENV_API_KEY),
            model=env.get(ENV_MODEL),
        )


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = "detailed"  # simple, detailed, json
    file: Optional[str] = None
    rotation: str = "100 MB"
    retention: str = "30 days"
    compression: Optional[str] = "gz"
    colorize: bool = True

    def __post_init__(self):
        """Validate logging configuration values."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        self.level = self.level.upper()

        valid_formats = ["simple", "detailed", "json"]
        if self.format not in valid_formats:
            raise ValueError(f"Invalid log format. Must be one of: {valid_formats}")


@dataclass
class AppConfig:
    """Complete configuration for the completion client and its tooling."""
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
