"""Hypothesis strategies for localizednumbers property-based testing.

Strategies are organized by domain:

- numbers: Locale tags, formattable values and arbitrary parser input

Usage:
    from tests.strategies import locale_codes, formattable_integers
"""

from .numbers import (
    ROUNDTRIP_LOCALES,
    arbitrary_text,
    formattable_decimals,
    formattable_integers,
    locale_codes,
)

__all__ = [
    "ROUNDTRIP_LOCALES",
    "arbitrary_text",
    "formattable_decimals",
    "formattable_integers",
    "locale_codes",
]
