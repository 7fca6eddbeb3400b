"""
Field expression parser.

A field is split on commas and every token is parsed into one
alternative. Shapes are tried in order, first match wins:

    digits          -> Exact
    digits-digits   -> Range
    */digits        -> Step
    *               -> Wildcard
"""

import re
from typing import Optional

from pulsegate.core.exceptions import InvalidExpressionError
from pulsegate.scheduler.alternatives import (
    Alternative,
    Exact,
    FieldExpression,
    Range,
    Step,
    Wildcard,
)

_EXACT = re.compile(r"[0-9]+")
_RANGE = re.compile(r"([0-9]+)-([0-9]+)")
_STEP = re.compile(r"\*/([0-9]+)")


def parse_token(token: str, field: Optional[str] = None) -> Alternative:
    """
    Parse one token into an alternative.
    
    Args:
        token: Token text, e.g. "5", "1-15", "*/5" or "*"
        field: Field name, used in error messages only
        
    Returns:
        Parsed alternative
        
    Raises:
        InvalidExpressionError: If the token has none of the known shapes
    """
    if _EXACT.fullmatch(token):
        return Exact(int(token))
    
    match = _RANGE.fullmatch(token)
    if match:
        return Range(int(match.group(1)), int(match.group(2)))
    
    match = _STEP.fullmatch(token)
    if match:
        divisor = int(match.group(1))
        # Would divide by zero on every evaluation
        if divisor == 0:
            raise InvalidExpressionError(token, field)
        return Step(divisor)
    
    if token == "*":
        return Wildcard()
    
    raise InvalidExpressionError(token, field)


def parse_field(text: str, field: Optional[str] = None) -> FieldExpression:
    """
    Parse a comma-separated field specification.
    
    Args:
        text: Field text, e.g. "*/5,30"
        field: Field name, used in error messages only
        
    Returns:
        FieldExpression holding one alternative per token
        
    Raises:
        InvalidExpressionError: If any token is invalid
    """
    return FieldExpression(
        tuple(parse_token(part, field) for part in text.split(","))
    )
