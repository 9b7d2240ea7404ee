"""
Logging Manager for the Perplexity client

Sets up Loguru sinks for applications that embed the client. The client
modules only emit records through ``loguru.logger``; where they go is decided
here.

Dependencies:
- loguru: Logging framework
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from perplexity.config.schema import LoggingConfig


class LoggingManager:
    """Loguru setup for console and file logging.

    Attributes:
        config (LoggingConfig): Logging configuration last applied
        handler_ids (list): Loguru handler ids added by this manager

    Example:
        log_manager = LoggingManager()
        log_manager.setup_logging(LoggingConfig(level="DEBUG"))
    """

    def __init__(self):
        """Initialize the logging manager."""
        self.config: Optional[LoggingConfig] = None
        self.handler_ids = []

    def setup_logging(self, log_config: LoggingConfig):
        """Configure Loguru logging.

        Removes every existing Loguru handler, then adds a stderr handler and,
        when ``log_config.file`` is set, a rotating file handler.

        Args:
            log_config (LoggingConfig): Logging settings
        """
        self.config = log_config

        logger.remove()
        self.handler_ids = []

        self.handler_ids.append(logger.add(
            sys.stderr,
            format=self._get_console_format(log_config.format),
            level=log_config.level,
            colorize=log_config.colorize,
            backtrace=True,
            diagnose=False
        ))

        if log_config.file:
            self.handler_ids.append(self._setup_file_logging(log_config))

        logger.debug("Loguru logging configured",
                     level=log_config.level,
                     format=log_config.format,
                     file=log_config.file or "console-only")

    def _get_console_format(self, format_type: str) -> str:
        """Get console logging format string based on configuration."""
        if format_type == "simple":
            return "<level>{level}</level> - {message}"
        elif format_type == "json":
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | {message} | {extra}"
        else:  # detailed
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

    def _setup_file_logging(self, log_config: LoggingConfig) -> int:
        """Add a file handler with rotation and compression."""
        file_path = Path(log_config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        if log_config.format == "json":
            return logger.add(
                file_path,
                level=log_config.level,
                rotation=log_config.rotation,
                retention=log_config.retention,
                compression="gz",
                serialize=True
            )
        return logger.add(
            file_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_config.level,
            rotation=log_config.rotation,
            retention=log_config.retention,
            compression="gz"
        )

    @staticmethod
    def get_logger():
        """Get the Loguru logger instance."""
        return logger


# Global logging manager instance for easy access
_logging_manager = LoggingManager()


def setup_logging(log_config: LoggingConfig):
    """Setup global logging configuration."""
    _logging_manager.setup_logging(log_config)


def get_logger():
    """Get the configured logger instance."""
    return _logging_manager.get_logger()
