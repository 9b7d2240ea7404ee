"""
Configuration schema for the Perplexity client.

Dataclasses that provide type safety and validation for client options.
Used with OmegaConf structured configs by ``perplexity.config_manager``.
"""

from dataclasses import dataclass, field
from typing import Optional

from perplexity.constants import MODEL_LLAMA_31_SONAR_SMALL_128K_ONLINE


@dataclass
class ClientOptions:
    """HTTP behaviour of the client."""
    request_timeout: float = 30.0

    def __post_init__(self):
        """Validate client option values."""
        if self.request_timeout <= 0:
            raise ValueError("Request timeout must be greater than 0 seconds")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = "detailed"  # simple, detailed, json
    file: Optional[str] = None
    rotation: str = "100 MB"
    retention: str = "30 days"
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
class PerplexityConfig:
    """Complete configuration for an application using the client."""
    model: str = MODEL_LLAMA_31_SONAR_SMALL_128K_ONLINE
    client: ClientOptions = field(default_factory=ClientOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        if not self.model:
            raise ValueError("Default model must not be empty")
