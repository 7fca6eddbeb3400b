"""
pulsegate scheduler - cron-style gating of pulses.

Provides:
- Schedule aliases (@daily, @hourly, ...)
- Field expression parsing into alternatives
- Five-field schedules with match and lag estimation
- Gates forwarding pulses to a sink at the right moment
"""

from pulsegate.scheduler.aliases import ALIASES, expand_alias
from pulsegate.scheduler.alternatives import (
    Alternative,
    Exact,
    Range,
    Step,
    Wildcard,
    FieldExpression,
)
from pulsegate.scheduler.parser import parse_token, parse_field
from pulsegate.scheduler.fields import CalendarField, FieldGate, format_duration
from pulsegate.scheduler.schedule import Schedule, FIELD_ORDER
from pulsegate.scheduler.clock import Clock, SystemClock
from pulsegate.scheduler.gate import Gate, Sink, FunctionSink


__all__ = [
    "ALIASES",
    "expand_alias",
    "Alternative",
    "Exact",
    "Range",
    "Step",
    "Wildcard",
    "FieldExpression",
    "parse_token",
    "parse_field",
    "CalendarField",
    "FieldGate",
    "format_duration",
    "Schedule",
    "FIELD_ORDER",
    "Clock",
    "SystemClock",
    "Gate",
    "Sink",
    "FunctionSink",
]
