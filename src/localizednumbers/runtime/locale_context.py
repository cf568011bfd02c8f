"""Locale context: the locale service consulted when building parsers.

This module wraps Babel (CLDR data) behind the small surface the parsers
need: rendering an integer in the locale's digits, and breaking a formatted
number into classified parts.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatting uses Babel (thread-safe, CLDR-based)
    - Digits are transliterated from ASCII using CLDR numbering systems,
      since Babel only localizes symbols
    - No dependency on Python's locale module (avoids global state)

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state)
    - Locale errors propagate (no silent fallback to another locale)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from threading import RLock
from typing import ClassVar

from babel import Locale
from babel import numbers as babel_numbers

from localizednumbers.constants import DEFAULT_NUMBERING_SYSTEM, MAX_LOCALE_CACHE_SIZE
from localizednumbers.core.numbering_systems import (
    NumberingSystemId,
    is_numeric_numbering_system,
    transliterate_digits,
)
from localizednumbers.enums import NumberPartType
from localizednumbers.locale_utils import (
    get_babel_locale,
    normalize_locale,
    split_unicode_extension,
)
from localizednumbers.runtime.value_types import NumberPart

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for the locale service operations.

    Use LocaleContext.create() to construct instances. Direct construction
    bypasses numbering system resolution.

    Attributes:
        locale_code: Locale code exactly as given by the caller
        numbering_system: CLDR numbering system whose digits are rendered
        symbols_numbering_system: Numbering system whose CLDR symbols
            (group, decimal, signs) are used. Equal to numbering_system
            unless CLDR carries no symbols for it in this locale, in which
            case "latn" symbols apply.

    Examples:
        >>> ctx = LocaleContext.create('ar-EG')
        >>> ctx.numbering_system
        'arab'
        >>> ctx.format_integer(2024)
        '٢٠٢٤'

        >>> ctx = LocaleContext.create('zh-Hans-CN-u-nu-hanidec')
        >>> ctx.format_integer(2024)
        '二〇二四'

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    locale_code: str
    _babel_locale: Locale
    numbering_system: NumberingSystemId
    symbols_numbering_system: str

    # Class-level LRU cache keyed by normalized locale code
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached LocaleContext instances."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create a LocaleContext, reusing a cached instance when available.

        The numbering system is resolved from the -u-nu- keyword when it
        names a numeric system, otherwise from the locale's CLDR default.
        Unknown nu values are ignored with a warning.

        Args:
            locale_code: BCP-47 locale identifier (e.g., 'en-IN', 'ar-EG',
                'zh-Hans-CN-u-nu-hanidec'); POSIX spelling also accepted

        Returns:
            LocaleContext instance

        Raises:
            babel.UnknownLocaleError: If the locale has no CLDR data
            ValueError: If the locale code is malformed
        """
        cache_key = normalize_locale(locale_code).lower()

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        babel_locale = get_babel_locale(locale_code)
        _, keywords = split_unicode_extension(locale_code)
        numbering_system = _resolve_numbering_system(
            babel_locale, keywords.get("nu"), locale_code
        )

        if numbering_system in babel_locale.number_symbols:
            symbols_numbering_system = numbering_system
        else:
            logger.debug(
                "No CLDR symbols for numbering system '%s' in locale '%s'; using %s symbols",
                numbering_system,
                locale_code,
                DEFAULT_NUMBERING_SYSTEM,
            )
            symbols_numbering_system = DEFAULT_NUMBERING_SYSTEM

        ctx = cls(
            locale_code=locale_code,
            _babel_locale=babel_locale,
            numbering_system=numbering_system,
            symbols_numbering_system=symbols_numbering_system,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Get Babel Locale object for advanced formatting."""
        return self._babel_locale

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        use_grouping: bool = True,
    ) -> str:
        """Format number with the locale's standard decimal pattern.

        Uses the locale's own grouping sizes (3 for en, 3+2 for en-IN) and at
        most three fraction digits, matching Intl.NumberFormat defaults.

        Args:
            value: Number to format
            use_grouping: Insert group separators (default: True)

        Returns:
            Formatted number in the locale's digits and symbols

        Examples:
            >>> LocaleContext.create('en-IN').format_number(12345678.9)
            '1,23,45,678.9'
            >>> LocaleContext.create('de').format_number(1234.5, use_grouping=False)
            '1234,5'
        """
        parts = self.format_to_parts(value, use_grouping=use_grouping)
        return "".join(part.value for part in parts)

    def format_integer(self, value: int) -> str:
        """Format an integer without grouping, in the locale's digits.

        Example:
            >>> LocaleContext.create('en').format_integer(9876543210)
            '9876543210'
        """
        return self.format_number(value, use_grouping=False)

    def format_to_parts(
        self,
        value: int | float | Decimal,
        *,
        use_grouping: bool = True,
    ) -> tuple[NumberPart, ...]:
        """Format number and classify every fragment of the result.

        Babel renders the pattern's sign characters literally; they are
        replaced by the locale's minus/plus sign symbols here, as CLDR
        prescribes for pattern sign characters.

        Args:
            value: Number to format
            use_grouping: Insert group separators (default: True)

        Returns:
            Tuple of NumberPart in output order

        Example:
            >>> [p.type.value for p in LocaleContext.create('de').format_to_parts(-1234.5)]
            ['minusSign', 'integer', 'group', 'integer', 'decimal', 'fraction']
        """
        system = self.symbols_numbering_system
        locale = self._babel_locale
        formatted = babel_numbers.format_decimal(
            value,
            locale=locale,
            group_separator=use_grouping,
            numbering_system=system,
        )
        minus_sign = babel_numbers.get_minus_sign_symbol(locale, numbering_system=system)
        plus_sign = babel_numbers.get_plus_sign_symbol(locale, numbering_system=system)
        decimal = babel_numbers.get_decimal_symbol(locale, numbering_system=system)
        group = babel_numbers.get_group_symbol(locale, numbering_system=system)
        # (type, text as Babel emits it, text as the locale writes it)
        symbols = (
            (NumberPartType.MINUS_SIGN, minus_sign, minus_sign),
            (NumberPartType.MINUS_SIGN, "-", minus_sign),
            (NumberPartType.PLUS_SIGN, plus_sign, plus_sign),
            (NumberPartType.PLUS_SIGN, "+", plus_sign),
            (NumberPartType.DECIMAL, decimal, decimal),
            (NumberPartType.GROUP, group, group),
        )
        return _split_parts(formatted, symbols, self.numbering_system)


def _resolve_numbering_system(
    babel_locale: Locale,
    requested: str | None,
    locale_code: str,
) -> NumberingSystemId:
    """Pick the numbering system whose digits the locale renders."""
    if requested is not None:
        if is_numeric_numbering_system(requested):
            return requested
        logger.warning(
            "Ignoring unsupported numbering system '%s' in locale '%s'",
            requested,
            locale_code,
        )

    default = babel_locale.default_numbering_system
    if is_numeric_numbering_system(default):
        return default

    logger.warning(
        "Default numbering system '%s' of locale '%s' has no digits; using %s",
        default,
        locale_code,
        DEFAULT_NUMBERING_SYSTEM,
    )
    return DEFAULT_NUMBERING_SYSTEM


def _split_parts(
    formatted: str,
    symbols: tuple[tuple[NumberPartType, str, str], ...],
    numbering_system: NumberingSystemId,
) -> tuple[NumberPart, ...]:
    """Classify Babel output (ASCII digits, localized symbols) into parts.

    Each symbol is (type, text as emitted, text as written). Symbols are
    matched in the given order, so the decimal symbol must precede the
    group symbol. Digit runs switch from integer to fraction
    after the decimal symbol and are transliterated into numbering_system.
    Adjacent unrecognized characters merge into one literal part.
    """
    parts: list[NumberPart] = []
    in_fraction = False
    pos = 0
    while pos < len(formatted):
        if formatted[pos] in _ASCII_DIGITS:
            end = pos
            while end < len(formatted) and formatted[end] in _ASCII_DIGITS:
                end += 1
            kind = NumberPartType.FRACTION if in_fraction else NumberPartType.INTEGER
            digits = transliterate_digits(formatted[pos:end], numbering_system)
            parts.append(NumberPart(kind, digits))
            pos = end
            continue

        for kind, emitted, written in symbols:
            if emitted and formatted.startswith(emitted, pos):
                break
        else:
            literal = formatted[pos]
            if parts and parts[-1].type is NumberPartType.LITERAL:
                literal = parts.pop().value + literal
            parts.append(NumberPart(NumberPartType.LITERAL, literal))
            pos += 1
            continue

        if kind is NumberPartType.DECIMAL:
            in_fraction = True
        parts.append(NumberPart(kind, written))
        pos += len(emitted)

    return tuple(parts)
