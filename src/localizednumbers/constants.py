"""Shared constants for localizednumbers.

This module provides centralized configuration constants used across
the locale service and parsing packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Reference numbers: Values rendered by the locale service to derive classifiers
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: Fallbacks when the environment or CLDR data is silent

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reference numbers
    "DIGIT_REFERENCE",
    "SEPARATOR_REFERENCE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "FALLBACK_LOCALE",
    "DEFAULT_NUMBERING_SYSTEM",
]

# ============================================================================
# REFERENCE NUMBERS
# ============================================================================

# Rendered without grouping to obtain every numeral of a numbering system
# in descending value order (9 down to 0).
DIGIT_REFERENCE: int = 9876543210

# Rendered with grouping into classified parts to obtain the group and
# decimal separators. Five integer digits force a group separator even in
# locales with minimumGroupingDigits=2 (es, pl). Formatted negated so the
# minus sign appears in the same breakdown.
SEPARATOR_REFERENCE: float = 12345.6

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances and Babel Locale objects.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
FALLBACK_LOCALE: str = "en_US"

# CLDR numbering system used when a locale's default is not a numeric system.
DEFAULT_NUMBERING_SYSTEM: str = "latn"
