"""Logging package."""

from pulsegate.logging.logger import StructuredLogger, get_logger, configure_logging, LogLevel

__all__ = ["StructuredLogger", "get_logger", "configure_logging", "LogLevel"]
