"""
Field gates - one calendar field of a schedule.

A field gate reads one integer out of an instant (minute, hour, day of
month, month, day of week), checks it against its field expression and
turns the expression's distance into milliseconds.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Dict

from pulsegate.scheduler.alternatives import FieldExpression
from pulsegate.scheduler.parser import parse_field


MINUTE_MS = int(timedelta(minutes=1).total_seconds() * 1000)
HOUR_MS = int(timedelta(hours=1).total_seconds() * 1000)
DAY_MS = int(timedelta(days=1).total_seconds() * 1000)
# Not calendar accurate
MONTH_MS = 30 * DAY_MS


class CalendarField(str, Enum):
    """Schedule fields, in expression order."""
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


def to_utc(instant: datetime) -> datetime:
    """
    Normalize an instant to UTC.
    
    Naive datetimes are taken to be UTC already.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def _day_of_week(instant: datetime) -> int:
    # Sunday is 1, Saturday is 7
    return instant.isoweekday() % 7 + 1


EXTRACTORS: Dict[CalendarField, Callable[[datetime], int]] = {
    CalendarField.MINUTE: lambda instant: instant.minute,
    CalendarField.HOUR: lambda instant: instant.hour,
    CalendarField.DAY_OF_MONTH: lambda instant: instant.day,
    CalendarField.MONTH: lambda instant: instant.month,
    CalendarField.DAY_OF_WEEK: _day_of_week,
}

SCALES: Dict[CalendarField, int] = {
    CalendarField.MINUTE: MINUTE_MS,
    CalendarField.HOUR: HOUR_MS,
    CalendarField.DAY_OF_MONTH: DAY_MS,
    CalendarField.MONTH: MONTH_MS,
    CalendarField.DAY_OF_WEEK: DAY_MS,
}


@dataclass(frozen=True)
class FieldGate:
    """
    Field expression bound to a calendar field.
    
    Attributes:
        field: Which calendar field this gate reads
        expression: Parsed alternatives
        extract: Reads the field value from a UTC instant
        scale_ms: Milliseconds per unit of distance
    """
    
    field: CalendarField
    expression: FieldExpression
    extract: Callable[[datetime], int]
    scale_ms: int
    
    @classmethod
    def build(cls, field: CalendarField, text: str) -> "FieldGate":
        """
        Parse a field specification and bind it to a calendar field.
        
        Args:
            field: Calendar field
            text: Field specification, e.g. "*/5"
            
        Returns:
            FieldGate
            
        Raises:
            InvalidExpressionError: If the specification cannot be parsed
        """
        return cls(
            field=field,
            expression=parse_field(text, field.value),
            extract=EXTRACTORS[field],
            scale_ms=SCALES[field],
        )
    
    def value(self, instant: datetime) -> int:
        """Field value of the instant."""
        return self.extract(to_utc(instant))
    
    def matches(self, instant: datetime) -> bool:
        """Whether the instant passes this gate."""
        return self.expression.matches(self.value(instant))
    
    def distance(self, instant: datetime) -> int:
        """Estimated milliseconds until this field would pass."""
        return self.expression.distance(self.value(instant)) * self.scale_ms


_UNITS = (
    ("d", DAY_MS),
    ("h", HOUR_MS),
    ("min", MINUTE_MS),
    ("s", 1000),
    ("ms", 1),
)


def format_duration(millis: int) -> str:
    """
    Render milliseconds as a short human readable duration.
    
    Example:
        >>> format_duration(6431400000)
        '74d 10h 30min'
    """
    if millis <= 0:
        return "0ms"
    
    parts = []
    remainder = millis
    for suffix, size in _UNITS:
        count, remainder = divmod(remainder, size)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)
