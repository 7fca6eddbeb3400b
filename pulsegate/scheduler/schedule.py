"""
Schedule - compiled five-field cron-style expression.

Field order is fixed: minute, hour, day of month, month, day of week.
A schedule is parsed eagerly when it is built and never changes
afterwards, so one instance can be shared by any number of threads.
"""

from datetime import datetime
from typing import Dict, Tuple

from pulsegate.core.exceptions import InvalidScheduleError
from pulsegate.scheduler.aliases import expand_alias
from pulsegate.scheduler.fields import CalendarField, FieldGate


FIELD_ORDER: Tuple[CalendarField, ...] = (
    CalendarField.MINUTE,
    CalendarField.HOUR,
    CalendarField.DAY_OF_MONTH,
    CalendarField.MONTH,
    CalendarField.DAY_OF_WEEK,
)


class Schedule:
    """
    Five field gates, AND-combined.
    
    Example:
        >>> schedule = Schedule("@daily")
        >>> schedule.expression
        '0 0 * * *'
        >>> schedule.matches(datetime(2024, 3, 15, 0, 0))
        True
    """
    
    __slots__ = ("_text", "_expression", "_gates")
    
    def __init__(self, text: str):
        """
        Parse a schedule.
        
        Args:
            text: Alias such as "@daily" or a five-field expression
            
        Raises:
            InvalidScheduleError: If the text does not have five fields
            InvalidExpressionError: If a field cannot be parsed
        """
        expression = expand_alias(text)
        parts = expression.split()
        if len(parts) != len(FIELD_ORDER):
            raise InvalidScheduleError(text, len(parts))
        
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_expression", " ".join(parts))
        object.__setattr__(self, "_gates", tuple(
            FieldGate.build(field, part)
            for field, part in zip(FIELD_ORDER, parts)
        ))
    
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Schedule is immutable, cannot set '{name}'")
    
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Schedule is immutable, cannot delete '{name}'")
    
    @property
    def text(self) -> str:
        """Text the schedule was built from."""
        return self._text
    
    @property
    def expression(self) -> str:
        """Canonical five-field expression, aliases expanded."""
        return self._expression
    
    @property
    def gates(self) -> Tuple[FieldGate, ...]:
        return self._gates
    
    @property
    def fields(self) -> Dict[str, str]:
        """Field name to field specification."""
        return {gate.field.value: str(gate.expression) for gate in self._gates}
    
    def matches(self, instant: datetime) -> bool:
        """
        Check whether every field passes at the given instant.
        
        Args:
            instant: Moment to check (naive values are taken as UTC)
            
        Returns:
            True if all five fields match
        """
        return all(gate.matches(instant) for gate in self._gates)
    
    def estimated_lag(self, instant: datetime) -> int:
        """
        Rough estimate of milliseconds until the next opportunity.
        
        This is the plain sum of every field's distance, matching fields
        included (they add zero). No carry between fields is applied, so
        the figure is a diagnostic hint, not the next fire time.
        
        Args:
            instant: Moment to estimate from
            
        Returns:
            Lag in milliseconds
        """
        return sum(gate.distance(instant) for gate in self._gates)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schedule):
            return NotImplemented
        return self._text == other._text
    
    def __hash__(self) -> int:
        return hash(self._text)
    
    def __str__(self) -> str:
        return self._text
    
    def __repr__(self) -> str:
        return f"Schedule('{self._text}')"
