"""Enumerations for localizednumbers type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NumberPartType(StrEnum):
    """Classification of a fragment of a formatted number.

    Values mirror the part types of Intl.NumberFormat.formatToParts so that
    breakdowns read the same across platforms.

    StrEnum provides automatic string conversion: str(NumberPartType.GROUP) == "group"
    """

    MINUS_SIGN = "minusSign"
    """Locale minus sign, possibly wrapped in bidi marks: -, U+2212, U+061C-"""

    PLUS_SIGN = "plusSign"
    """Locale plus sign"""

    INTEGER = "integer"
    """Run of digits before the decimal separator"""

    GROUP = "group"
    """Grouping separator: , in en, . in de, U+066C in ar-EG"""

    DECIMAL = "decimal"
    """Decimal separator: . in en, , in de, U+066B in ar-EG"""

    FRACTION = "fraction"
    """Run of digits after the decimal separator"""

    LITERAL = "literal"
    """Anything else the pattern emits (bidi marks, padding)"""


__all__ = [
    "NumberPartType",
]
