"""
Domain models and value objects.

Contains PairHolder, the immutable two-value holder.
"""

from src.core.domain.pair_holder import PairHolder

__all__ = [
    "PairHolder",
]
