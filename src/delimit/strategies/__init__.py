"""
Delimit Strategies
==================
Delimiter strategies that decide where a text is split.
"""

from .delimiter_strategies import (
    CharDelimiter,
    StringDelimiter,
    PatternDelimiter,
    FixedLengthDelimiter,
    CharClassDelimiter,
    DelimiterStrategy,
    STRATEGY_REGISTRY,
    locate,
    strategy_from_dict,
)

__all__ = [
    "CharDelimiter",
    "StringDelimiter",
    "PatternDelimiter",
    "FixedLengthDelimiter",
    "CharClassDelimiter",
    "DelimiterStrategy",
    "STRATEGY_REGISTRY",
    "locate",
    "strategy_from_dict",
]
