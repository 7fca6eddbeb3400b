"""Clocks supplying the current instant."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current instant."""
    
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC."""
    
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
    
    def __repr__(self) -> str:
        return "SystemClock()"
