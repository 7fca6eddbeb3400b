"""
pulsegate core - shared foundation.

This module provides:
- Exception hierarchy with error codes
- Configuration management with validation
- Gate metrics
"""

from pulsegate.core.exceptions import (
    PulseGateError,
    ErrorCode,
    ConfigurationError,
    ConfigNotFoundError,
    ConfigValidationError,
    ScheduleError,
    InvalidExpressionError,
    InvalidScheduleError,
)

from pulsegate.core.config import (
    PulseGateConfig,
    get_config,
    reset_config,
)

from pulsegate.core.observability import (
    GateMetrics,
    PulseOutcome,
    get_metrics,
)

__all__ = [
    # Exceptions
    "PulseGateError",
    "ErrorCode",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ScheduleError",
    "InvalidExpressionError",
    "InvalidScheduleError",
    
    # Configuration
    "PulseGateConfig",
    "get_config",
    "reset_config",
    
    # Observability
    "GateMetrics",
    "PulseOutcome",
    "get_metrics",
]
