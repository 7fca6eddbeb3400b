"""
Exception hierarchy for pulsegate.

Every error raised by pulsegate itself derives from PulseGateError and
carries a machine-readable error code plus a context dict. Failures coming
from a downstream sink are never wrapped: they reach the caller unchanged.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for monitoring and alerting."""
    
    # Configuration errors (1xxx)
    CONFIG_INVALID = "E1001"
    CONFIG_MISSING = "E1002"
    CONFIG_VALIDATION_FAILED = "E1003"
    
    # Schedule errors (2xxx)
    INVALID_EXPRESSION = "E2001"
    INVALID_SCHEDULE = "E2002"


class PulseGateError(Exception):
    """
    Base exception for all pulsegate errors.
    
    Provides:
    - Error code for monitoring
    - Context for debugging
    """
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize pulsegate error.
        
        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context for debugging
            cause: Original exception if this is a wrapped error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "code": self.error_code.value,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None
        }
    
    def __str__(self) -> str:
        """String representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# Configuration Errors
class ConfigurationError(PulseGateError):
    """Configuration-related errors."""
    
    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, ErrorCode.CONFIG_INVALID, context, cause)


class ConfigNotFoundError(ConfigurationError):
    """Configuration file does not exist."""
    
    def __init__(self, path: str):
        PulseGateError.__init__(
            self,
            f"Configuration file not found: {path}",
            ErrorCode.CONFIG_MISSING,
            {"path": path}
        )


class ConfigValidationError(ConfigurationError):
    """Configuration values rejected by validation."""
    
    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        PulseGateError.__init__(
            self, message, ErrorCode.CONFIG_VALIDATION_FAILED, context, cause
        )


# Schedule Errors
class ScheduleError(PulseGateError, ValueError):
    """Base class for schedule parsing errors."""
    pass


class InvalidExpressionError(ScheduleError):
    """A single field token has none of the recognized shapes."""
    
    def __init__(self, token: str, field: Optional[str] = None):
        where = f" in {field} field" if field else ""
        super().__init__(
            f"invalid crontab sector '{token}'{where}",
            ErrorCode.INVALID_EXPRESSION,
            {"token": token, "field": field}
        )
        self.token = token
        self.field = field


class InvalidScheduleError(ScheduleError):
    """Schedule text does not split into exactly five fields."""
    
    def __init__(self, expression: str, fields: int):
        super().__init__(
            f"invalid crontab definition '{expression}': "
            f"expected 5 fields, got {fields}",
            ErrorCode.INVALID_SCHEDULE,
            {"expression": expression, "fields": fields}
        )
        self.expression = expression
        self.fields = fields
