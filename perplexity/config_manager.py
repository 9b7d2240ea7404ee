"""
Configuration Manager for the Perplexity client

Loads client and logging settings with OmegaConf and validates them against
the dataclass schema in ``perplexity.config.schema``. These are optional
helpers for applications embedding the client: ``Client`` itself never reads
files or environment variables and only takes what it is constructed with.

Features:
- YAML files or plain mappings as configuration sources
- Dot-notation overrides (e.g. "client.request_timeout=10")
- Type-safe validation via structured configs and dataclass checks

Dependencies:
- omegaconf: Configuration objects with validation
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from omegaconf import DictConfig, OmegaConf

from perplexity.config.schema import PerplexityConfig

API_KEY_ENV = "PERPLEXITY_API_KEY"


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""
    pass


class ConfigManager:
    """Load and validate client configuration using OmegaConf.

    Attributes:
        schema_class: Configuration schema class for validation
        config (PerplexityConfig): Most recently loaded configuration

    Example:
        manager = ConfigManager()
        config = manager.load_config("perplexity.yaml", ["client.request_timeout=10"])
        client = Client.from_config(manager.get_api_key(), config)
    """

    def __init__(self):
        self.schema_class = PerplexityConfig
        self.config: Optional[PerplexityConfig] = None

    def load_config(self,
                    source: Union[str, Path, Mapping[str, Any], DictConfig, None] = None,
                    overrides: Optional[List[str]] = None) -> PerplexityConfig:
        """Load configuration from a YAML file or mapping with optional overrides.

        Args:
            source: Path to a YAML file, a mapping, or None for defaults
            overrides (List[str], optional): Dot-notation overrides
                                             (e.g., "logging.level=DEBUG")

        Returns:
            PerplexityConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is missing or values are invalid
        """
        try:
            if source is None:
                loaded = OmegaConf.create({})
            elif isinstance(source, (str, Path)):
                path = Path(source)
                if not path.exists():
                    raise ConfigurationError(f"Configuration file not found: {path}")
                loaded = OmegaConf.load(path)
            elif isinstance(source, DictConfig):
                loaded = source
            else:
                loaded = OmegaConf.create(dict(source))

            if overrides:
                loaded = OmegaConf.merge(loaded, OmegaConf.from_dotlist(list(overrides)))

            self.config = self.validate_config(loaded)
            return self.config

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def validate_config(self, config: DictConfig) -> PerplexityConfig:
        """Merge ``config`` over the structured schema and build typed objects.

        Raises:
            ConfigurationError: If a value has the wrong type or fails validation
        """
        try:
            structured_config = OmegaConf.structured(self.schema_class)
            merged = OmegaConf.merge(structured_config, config)
            return OmegaConf.to_object(merged)
        except Exception as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def get_config_summary(self, config: PerplexityConfig) -> Dict[str, Any]:
        """Get a summary of the configuration for logging/debugging."""
        return {
            "model": config.model,
            "request_timeout": config.client.request_timeout,
            "logging_level": config.logging.level,
            "logging_format": config.logging.format,
            "logging_file": config.logging.file or "console-only",
        }

    @staticmethod
    def get_api_key() -> str:
        """Get the Perplexity API key from the environment."""
        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV} environment variable is required. "
                f"Set it with: export {API_KEY_ENV}='your-key-here'"
            )
        return api_key


# Global configuration manager instance
_config_manager = ConfigManager()


def load_config(source: Union[str, Path, Mapping[str, Any], DictConfig, None] = None,
                overrides: Optional[List[str]] = None) -> PerplexityConfig:
    """Load configuration using the global ConfigManager instance."""
    return _config_manager.load_config(source, overrides)


def get_api_key() -> str:
    """Read the API key using the global ConfigManager instance."""
    return _config_manager.get_api_key()
