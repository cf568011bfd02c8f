"""Core data shared across the locale service and parsing layers.

By isolating locale-independent data here, we maintain a clean dependency graph:

    core <- runtime <- parsing

Exports:
    get_numbering_system_digits: Digits of a CLDR numeric numbering system
    is_numeric_numbering_system: Check for a known digit repertoire
    list_numbering_systems: All supported numeric numbering systems
    transliterate_digits: Render ASCII digits in another numbering system

Python 3.13+.
"""

from .numbering_systems import (
    NumberingSystemId,
    get_numbering_system_digits,
    is_numeric_numbering_system,
    list_numbering_systems,
    transliterate_digits,
)

__all__ = [
    "NumberingSystemId",
    "get_numbering_system_digits",
    "is_numeric_numbering_system",
    "list_numbering_systems",
    "transliterate_digits",
]
