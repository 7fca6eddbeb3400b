"""
Predefined schedule aliases.

See https://en.wikipedia.org/wiki/Cron#Predefined_scheduling_definitions
"""

from types import MappingProxyType
from typing import Mapping


ALIASES: Mapping[str, str] = MappingProxyType({
    "@yearly": "0 0 1 1 *",
    "@annually": "0 0 1 1 *",
    "@monthly": "0 0 1 * *",
    "@weekly": "0 0 * * 0",
    "@daily": "0 0 * * *",
    "@hourly": "0 * * * *",
})


def expand_alias(text: str) -> str:
    """
    Expand an alias into its five-field expression.
    
    Only an exact key match is expanded; anything else is returned as is.
    
    Args:
        text: Schedule text
        
    Returns:
        Canonical five-field expression or the input unchanged
    """
    return ALIASES.get(text, text)
