"""
Mock System - deterministic collaborators for testing gates.

Features:
- Fixed, settable clock
- Sink with call tracking and error injection
"""

from typing import Any, List, Optional
from datetime import datetime, timedelta

from pulsegate.scheduler.fields import to_utc


class FixedClock:
    """Clock that always returns the instant it was given."""
    
    def __init__(self, instant: datetime):
        """
        Initialize clock.
        
        Args:
            instant: Instant to report (naive values are taken as UTC)
        """
        self.instant = to_utc(instant)
    
    def now(self) -> datetime:
        return self.instant
    
    def set(self, instant: datetime):
        """Move the clock to a new instant."""
        self.instant = to_utc(instant)
    
    def advance(self, **delta: float):
        """Move the clock forward, e.g. advance(minutes=5)."""
        self.instant = self.instant + timedelta(**delta)


class MockSink:
    """
    Mock sink for testing.
    
    Features:
    - Call tracking
    - Error injection
    """
    
    def __init__(self, name: str = "mock_sink"):
        """Initialize mock sink."""
        self.name = name
        self.contexts: List[Any] = []
        
        # Configuration
        self.error: Optional[Exception] = None
    
    def fail_with(self, error: Exception):
        """Make every following accept raise the given error."""
        self.error = error
    
    def accept(self, context: Any) -> None:
        """Record the context, then raise the injected error if any."""
        self.contexts.append(context)
        if self.error is not None:
            raise self.error
    
    def assert_called_times(self, expected: int):
        """Assert sink was called specific number of times."""
        actual = len(self.contexts)
        if actual != expected:
            raise AssertionError(
                f"Expected {expected} calls, got {actual}"
            )
    
    def assert_not_called(self):
        """Assert sink was never called."""
        if self.contexts:
            raise AssertionError(
                f"Mock sink '{self.name}' was called {len(self.contexts)} times"
            )
    
    def reset(self):
        """Reset mock state."""
        self.contexts.clear()
        self.error = None
    
    def __repr__(self) -> str:
        return f"MockSink({self.name})"
