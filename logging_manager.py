#!/usr/bin/env python3
"""
Logging Manager for the chat-completion client

Provides logging infrastructure using the Loguru framework.
Handles console and file logging with configurable formats, rotation, and retention.

The completion client never logs through a global: it receives a logger when
it is constructed. ``get_logger()`` returns the configured Loguru logger to
pass in, and ``NullLogger`` is the no-op stand-in used when none is given.

Dependencies:
- loguru: Professional logging framework
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from config.schema import LoggingConfig


class NullLogger:
    """Logger that discards every record.

    Implements the part of the Loguru interface the client relies on, so it
    can be bound and called exactly like the real logger.
    """

    def bind(self, **kwargs) -> "NullLogger":
        return self

    def _discard(self, message, *args, **kwargs) -> None:
        return None

    trace = _discard
    debug = _discard
    info = _discard
    success = _discard
    warning = _discard
    error = _discard
    critical = _discard
    exception = _discard


class LoggingManager:
    """Logging infrastructure management using Loguru framework.

    Attributes:
        config (LoggingConfig): Logging configuration currently applied

    Example:
        log_manager = LoggingManager()
        log_manager.setup_logging(LoggingConfig(level="DEBUG"))
        client = CompletionClient(config, log=log_manager.get_logger())
    """

    def __init__(self):
        """Initialize the logging manager."""
        self.config: Optional[LoggingConfig] = None

    def setup_logging(self, cfg: LoggingConfig):
        """Configure Loguru logging.

        Removes the default Loguru handler, then adds a console handler and,
        when ``cfg.file`` is set, a rotating file handler.

        Args:
            cfg (LoggingConfig): Logging settings

        Logging Configuration Options:
            - level: TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
            - format: simple, detailed, json
            - file: Optional file path for file logging
            - rotation: Log rotation size (default: 100 MB)
            - retention: Log retention period (default: 30 days)
            - compression: Archive format for closed log files (default: gz)
            - colorize: Enable/disable console colors (default: True)
        """
        self.config = cfg

        logger.remove()

        logger.add(
            sys.stderr,
            format=self._get_console_format(cfg.format),
            level=cfg.level,
            colorize=cfg.colorize,
            backtrace=True,
            diagnose=False,
        )

        if cfg.file:
            self._setup_file_logging(cfg)

        logger.debug("Loguru logging configured",
                     level=cfg.level,
                     format=cfg.format,
                     file=cfg.file or "console-only")

    def _get_console_format(self, format_type: str) -> str:
        """Get console logging format string.

        Args:
            format_type (str): Format type - simple, detailed, or json

        Returns:
            str: Loguru format string for console output
        """
        if format_type == "simple":
            return "<level>{level}</level> - {message}"
        elif format_type == "json":
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message} | {extra}"
        else:  # detailed
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

    def _setup_file_logging(self, cfg: LoggingConfig):
        """Setup file logging with rotation and compression.

        Args:
            cfg (LoggingConfig): Logging settings
        """
        file_path = Path(cfg.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        if cfg.format == "json":
            logger.add(
                file_path,
                level=cfg.level,
                rotation=cfg.rotation,
                retention=cfg.retention,
                compression=cfg.compression,
                serialize=True
            )
        else:
            logger.add(
                file_path,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}",
                level=cfg.level,
                rotation=cfg.rotation,
                retention=cfg.retention,
                compression=cfg.compression
            )

    @staticmethod
    def get_logger():
        """Get the Loguru logger instance.

        Returns:
            Logger: Configured Loguru logger
        """
        return logger


# Global logging manager instance for easy access
_logging_manager = LoggingManager()


def setup_logging(cfg: LoggingConfig):
    """Setup global logging configuration.

    Args:
        cfg (LoggingConfig): Logging settings
    """
    _logging_manager.setup_logging(cfg)


def get_logger():
    """Get the configured logger instance.

    Returns:
        Logger: Configured Loguru logger
    """
    return _logging_manager.get_logger()
