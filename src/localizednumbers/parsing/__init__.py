"""Locale-aware parsing: display strings back to Python numbers.

- parse() and parse_number() NEVER raise for unparseable text; they return math.nan
- Unknown or malformed locales raise at parser construction (Babel errors)

All parsing is thread-safe. Classifiers are derived from Babel CLDR data.

Public API:
    Parsing:
        LocalizedNumberParser - Reusable per-locale parser
        parse_number - One-shot parse, defaulting to the system locale

    Classifiers:
        DigitIndex - Numeral -> value mapping of a numbering system
        SeparatorSet - Group/decimal character classes and minus sign

    Type Guards:
        is_valid_number - TypeIs guard for finite float

Example:
    >>> from localizednumbers.parsing import LocalizedNumberParser, is_valid_number
    >>> parser = LocalizedNumberParser("en-IN")
    >>> result = parser.parse("1,23,45,678.9")
    >>> if is_valid_number(result):
    ...     total = round(result, 2)

Python 3.13+. Uses Babel CLDR data + stdlib for all parsing.
"""

from .guards import is_valid_number
from .numbers import DigitIndex, LocalizedNumberParser, SeparatorSet, parse_number

__all__ = [
    # Classifiers
    "DigitIndex",
    "SeparatorSet",
    # Parsing
    "LocalizedNumberParser",
    "parse_number",
    # Type guards
    "is_valid_number",
]
