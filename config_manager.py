#!/usr/bin/env python3
"""
Configuration Manager for the chat-completion client

Provides configuration loading using Hydra and OmegaConf frameworks.
Composes YAML configuration, applies dot-notation overrides and validates the
result against the dataclass schema in ``config.schema``.

Features:
- YAML configuration with environment variable interpolation (oc.env)
- Type-safe configuration validation with dataclasses
- Command-line parameter overrides with nested dot notation

Dependencies:
- hydra-core: Configuration management framework by Facebook
- omegaconf: Configuration objects with validation
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf

from config.schema import AppConfig
from providers.errors import ConfigurationError


class ConfigManager:
    """Configuration management using Hydra and OmegaConf frameworks.

    Attributes:
        config_dir (Path): Directory containing configuration files
        config (AppConfig): Currently loaded configuration
        schema_class: Configuration schema class for validation

    Example:
        config_manager = ConfigManager()
        config = config_manager.load_config("default", ["openai.model=gpt-4"])
        client = CompletionClient(config.openai)
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir (Path, optional): Directory containing config files.
                                       Defaults to ./config/
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)
        self.config: Optional[AppConfig] = None
        self.schema_class = AppConfig

    def load_config(self,
                    config_name: str = "default",
                    overrides: Optional[List[str]] = None) -> AppConfig:
        """Load configuration from YAML files with optional overrides.

        Args:
            config_name (str): Name of the configuration file to load
            overrides (List[str], optional): Parameter overrides in dot
                                           notation (e.g., "openai.model=gpt-4")

        Returns:
            AppConfig: Loaded and validated configuration object

        Raises:
            ConfigurationError: If configuration files are not found or invalid
        """
        if overrides is None:
            overrides = []

        # Clear any existing Hydra global state
        if GlobalHydra().is_initialized():
            GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(
                config_dir=str(self.config_dir.resolve()),
                version_base=None
            ):
                raw = compose(config_name=config_name, overrides=overrides)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        self.config = self.validate_config(raw)
        return self.config

    def validate_config(self, config: DictConfig) -> AppConfig:
        """Validate configuration against the schema.

        Merges the loaded values onto the structured schema, resolves
        interpolations and instantiates the dataclasses so their own
        validation runs.

        Raises:
            ConfigurationError: If configuration validation fails
        """
        try:
            structured_config = OmegaConf.structured(self.schema_class)
            merged = OmegaConf.merge(structured_config, config)
            return OmegaConf.to_object(merged)
        except Exception as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def get_config_summary(self, config: AppConfig) -> Dict[str, Any]:
        """Get a summary of the configuration for logging/debugging.

        The API key is never included, only whether one is set.
        """
        return {
            "openai_base_url": config.openai.base_url or "default",
            "openai_model": config.openai.model or "default",
            "openai_key_set": bool(config.openai.api_key),
            "openai_timeout": config.openai.timeout,
            "logging_level": config.logging.level,
            "logging_format": config.logging.format,
        }

    @staticmethod
    def create_override_list(overrides_dict: Dict[str, Any]) -> List[str]:
        """Convert dictionary of overrides to Hydra override list format.

        Example:
            overrides = ConfigManager.create_override_list({
                "openai": {"model": "gpt-4"},
                "logging.level": "DEBUG"
            })
            # Returns: ["openai.model=gpt-4", "logging.level=DEBUG"]
        """
        override_list = []

        def _flatten_dict(d: Dict[str, Any], prefix: str = "") -> None:
            for key, value in d.items():
                full_key = f"{prefix}.{key}" if prefix else key

                if isinstance(value, dict):
                    _flatten_dict(value, full_key)
                elif value is None:
                    override_list.append(f"{full_key}=null")
                else:
                    override_list.append(f"{full_key}={value}")

        _flatten_dict(overrides_dict)
        return override_list


# Global configuration manager instance
_config_manager = ConfigManager()


def load_config(config_name: str = "default",
                overrides: Optional[List[str]] = None) -> AppConfig:
    """Load configuration using global ConfigManager instance."""
    return _config_manager.load_config(config_name, overrides)
