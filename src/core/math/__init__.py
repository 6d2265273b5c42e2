"""
Core math modules для pairmax

Примитивы сравнения и поиска максимума двух значений одного типа.
"""

# Ordering contract
from src.core.math.ordering import (
    DEFAULT_TIE_BREAK,
    GreaterThan,
    SupportsGreaterThan,
    TieBreak,
    native_greater,
    select_greater,
)

# Maximum
from src.core.math.maximum import (
    max_by_key,
    max_of,
)

__all__ = [
    # Ordering — Constants
    "DEFAULT_TIE_BREAK",
    # Ordering — Types
    "GreaterThan",
    "SupportsGreaterThan",
    "TieBreak",
    # Ordering — Functions
    "native_greater",
    "select_greater",
    # Maximum — Functions
    "max_by_key",
    "max_of",
]
