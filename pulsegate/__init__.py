"""
pulsegate - send pulses through only at certain moments.

Example:
    >>> from pulsegate import Gate, FunctionSink
    >>> gate = Gate("@daily", FunctionSink(run_backup))
    >>> gate.pulse({"trigger": "timer"})
"""

from pulsegate.__version__ import __version__, __title__, __description__
from pulsegate.core.exceptions import (
    PulseGateError,
    InvalidExpressionError,
    InvalidScheduleError,
)
from pulsegate.scheduler import (
    ALIASES,
    Schedule,
    Gate,
    Sink,
    FunctionSink,
    SystemClock,
)

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "PulseGateError",
    "InvalidExpressionError",
    "InvalidScheduleError",
    "ALIASES",
    "Schedule",
    "Gate",
    "Sink",
    "FunctionSink",
    "SystemClock",
]
