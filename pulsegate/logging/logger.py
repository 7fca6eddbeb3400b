"""Structured logging for pulsegate."""

import logging
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from enum import Enum


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StructuredLogger:
    """
    Structured logger for gates and schedules.
    
    Outputs one JSON object per record (or key=value text) so that
    suppressed pulses can be parsed back by log processors.
    """
    
    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        format_json: bool = True,
        extra_fields: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize structured logger.
        
        Args:
            name: Logger name
            level: Logging level
            format_json: Use JSON formatting
            extra_fields: Additional fields to include in all logs
        """
        self.name = name
        self.level = LogLevel(level)
        self.format_json = format_json
        self.extra_fields = extra_fields or {}
        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, self.level.value))
    
    def _format_message(
        self,
        level: LogLevel,
        message: str,
        **kwargs: Any
    ) -> str:
        """Format log message."""
        if self.format_json:
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": level.value,
                "logger": self.name,
                "message": message,
                **self.extra_fields,
                **kwargs
            }
            return json.dumps(log_data, default=str)
        
        fields = {**self.extra_fields, **kwargs}
        extras = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"[{level.value}] {message} {extras}".rstrip()
    
    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        """
        Internal logging method.
        
        Args:
            level: Log level
            message: Log message
            **kwargs: Additional fields
        """
        numeric = getattr(logging, level.value)
        if not self._logger.isEnabledFor(numeric):
            return
        self._logger.log(numeric, self._format_message(level, message, **kwargs))
    
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)
    
    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, **kwargs)
    
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)
    
    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message, **kwargs)
    
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log critical message."""
        self._log(LogLevel.CRITICAL, message, **kwargs)


def configure_logging(level: LogLevel = LogLevel.INFO) -> None:
    """
    Attach a console handler to the pulsegate logger hierarchy.
    
    Messages are already formatted by StructuredLogger, so the handler
    prints them verbatim. Safe to call more than once.
    
    Args:
        level: Level for the "pulsegate" logger
    """
    root = logging.getLogger("pulsegate")
    root.setLevel(getattr(logging, LogLevel(level).value))
    
    for handler in root.handlers:
        if getattr(handler, "_pulsegate_console", False):
            return
    
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._pulsegate_console = True
    root.addHandler(handler)


def get_logger(
    name: str,
    level: Optional[LogLevel] = None,
    format_json: Optional[bool] = None,
    **extra_fields: Any
) -> StructuredLogger:
    """
    Get or create a structured logger.
    
    Level and format default to the global configuration.
    
    Args:
        name: Logger name
        level: Logging level
        format_json: Use JSON formatting
        **extra_fields: Additional fields to include in all logs
    
    Returns:
        Structured logger instance
    """
    if level is None or format_json is None:
        from pulsegate.core.config import get_config
        config = get_config()
        if level is None:
            level = LogLevel(config.log_level)
        if format_json is None:
            format_json = config.log_format == "json"
    
    return StructuredLogger(name, level, format_json, extra_fields)
