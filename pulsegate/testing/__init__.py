"""Test doubles for code that uses gates."""

from pulsegate.testing.mocks import FixedClock, MockSink

__all__ = ["FixedClock", "MockSink"]
