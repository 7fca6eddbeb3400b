"""
Alternatives - parsed atoms of one comma-separated field.

Each alternative answers two questions about an integer: does it match,
and how far is it from matching. The numeric rules below are kept exactly
as the schedules in the wild rely on them, even where they differ from
conventional cron:

- Range(low, high) matches ``i >= low or i <= high``.
- Step(divisor) matches ``i // divisor == 0``, i.e. only ``0 <= i < divisor``.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Exact:
    """Matches a single value."""
    
    value: int
    
    def matches(self, number: int) -> bool:
        return number == self.value
    
    def distance(self, number: int) -> int:
        return abs(number - self.value)
    
    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Range:
    """Matches by a disjunctive bound test."""
    
    low: int
    high: int
    
    def matches(self, number: int) -> bool:
        return number >= self.low or number <= self.high
    
    def distance(self, number: int) -> int:
        if self.matches(number):
            return 0
        return abs(number - self.low)
    
    def __str__(self) -> str:
        return f"{self.low}-{self.high}"


@dataclass(frozen=True)
class Step:
    """Matches values whose integer quotient by the divisor is zero."""
    
    divisor: int
    
    def matches(self, number: int) -> bool:
        return number // self.divisor == 0
    
    def distance(self, number: int) -> int:
        if self.matches(number):
            return 0
        return abs(number - self.divisor)
    
    def __str__(self) -> str:
        return f"*/{self.divisor}"


@dataclass(frozen=True)
class Wildcard:
    """Matches everything."""
    
    def matches(self, number: int) -> bool:
        return True
    
    def distance(self, number: int) -> int:
        return 0
    
    def __str__(self) -> str:
        return "*"


Alternative = Union[Exact, Range, Step, Wildcard]


@dataclass(frozen=True)
class FieldExpression:
    """
    All alternatives of one field, OR-combined.
    
    A value matches when any alternative matches; its distance is the
    smallest distance over all alternatives.
    """
    
    alternatives: Tuple[Alternative, ...]
    
    def matches(self, number: int) -> bool:
        return any(alt.matches(number) for alt in self.alternatives)
    
    def distance(self, number: int) -> int:
        return min(alt.distance(number) for alt in self.alternatives)
    
    def __str__(self) -> str:
        return ",".join(str(alt) for alt in self.alternatives)
