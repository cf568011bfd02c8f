"""Number parsing with locale awareness.

- LocalizedNumberParser is built once per locale and reused
- parse() never raises: unparseable input returns math.nan
- Locale errors raised by Babel propagate from construction unmodified

Construction queries the locale service twice:
    1. The reference integer 9876543210 without grouping, giving the locale's
       ten numerals in descending order (DigitIndex)
    2. The reference number -12345.6 broken into classified parts, giving the
       group separator, decimal separator and minus sign (SeparatorSet)

Thread-safe. Parsers hold only immutable data after construction.

Python 3.13+.
"""

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from types import MappingProxyType

from localizednumbers.constants import DIGIT_REFERENCE, SEPARATOR_REFERENCE
from localizednumbers.enums import NumberPartType
from localizednumbers.locale_utils import get_system_locale
from localizednumbers.runtime.locale_context import LocaleContext
from localizednumbers.runtime.value_types import NumberPart

__all__ = [
    "DigitIndex",
    "LocalizedNumberParser",
    "SeparatorSet",
    "parse_number",
]

logger = logging.getLogger(__name__)

# Characters float() may see after normalization. Excludes the spellings
# float() would otherwise accept: inf, nan, exponents, underscores, spaces
# and non-ASCII decimal digits.
_NORMALIZED_ALPHABET = frozenset("0123456789.+-")

_ASCII_DIGITS = "0123456789"

# LRM, RLM and ALM: CLDR wraps sign symbols in these for bidi text.
_BIDI_MARKS = "\u200e\u200f\u061c"

_SIGNS = frozenset("+-")


@dataclass(frozen=True, slots=True)
class DigitIndex:
    """Mapping from a numbering system's numerals to their values.

    Attributes:
        numerals: Ten single-code-point numerals; position i holds value i
        values: Read-only numeral -> value mapping, computed at construction

    Example:
        >>> index = DigitIndex.from_numerals(reversed("٩٨٧٦٥٤٣٢١٠"))
        >>> index["٣"]
        3
    """

    numerals: str
    values: MappingProxyType[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the repertoire and build the lookup mapping."""
        if len(self.numerals) != 10 or len(set(self.numerals)) != 10:
            msg = (
                f"Numeral repertoire must be ten distinct single code points, "
                f"got {self.numerals!r}"
            )
            raise ValueError(msg)
        object.__setattr__(
            self,
            "values",
            MappingProxyType({numeral: value for value, numeral in enumerate(self.numerals)}),
        )

    @classmethod
    def from_numerals(cls, numerals: Iterable[str]) -> "DigitIndex":
        """Build from numerals already ordered by ascending value."""
        return cls("".join(numerals))

    def __contains__(self, char: object) -> bool:
        return char in self.values

    def __getitem__(self, char: str) -> int:
        return self.values[char]

    def __len__(self) -> int:
        return len(self.numerals)

    def __iter__(self) -> Iterator[str]:
        return iter(self.numerals)


@dataclass(frozen=True, slots=True)
class SeparatorSet:
    """Character classes for a locale's group and decimal separators.

    Either class may be empty, matching nothing, when the locale does not
    use that separator.

    Attributes:
        group: Code points removed during parsing
        decimal: Code points replaced with "." during parsing
        minus_sign: Locale minus-sign text replaced with "-" during parsing,
            or "" when the locale service reported none
    """

    group: frozenset[str] = frozenset()
    decimal: frozenset[str] = frozenset()
    minus_sign: str = ""

    @classmethod
    def from_parts(cls, parts: Iterable[NumberPart]) -> "SeparatorSet":
        """Extract separators from a classified formatting of a number.

        The first part of each type wins.

        Example:
            >>> SeparatorSet.from_parts(LocaleContext.create("de").format_to_parts(-12345.6))
            SeparatorSet(group=frozenset({'.'}), decimal=frozenset({','}), minus_sign='-')
        """
        found: dict[NumberPartType, str] = {}
        for part in parts:
            found.setdefault(part.type, part.value)
        return cls(
            group=frozenset(found.get(NumberPartType.GROUP, "")),
            decimal=frozenset(found.get(NumberPartType.DECIMAL, "")),
            minus_sign=found.get(NumberPartType.MINUS_SIGN, ""),
        )


class LocalizedNumberParser:
    """Reusable parser for numerals written in one locale's conventions.

    Examples:
        >>> LocalizedNumberParser("en").parse("12,345,678.90")
        12345678.9
        >>> LocalizedNumberParser("de").parse("12.345.678,9")
        12345678.9
        >>> LocalizedNumberParser("ar-EG").parse("١٬٢٣٤٫٥٦")
        1234.56
        >>> LocalizedNumberParser("en").parse("   ")
        nan

    Thread Safety:
        Immutable after construction; share one instance across threads.
    """

    __slots__ = ("_digits", "_locale_code", "_separators")

    def __init__(self, locale_code: str) -> None:
        """Build the locale's classifiers.

        Args:
            locale_code: BCP-47 locale identifier, optionally with a
                numbering system extension (zh-Hans-CN-u-nu-hanidec)

        Raises:
            babel.UnknownLocaleError: If the locale has no CLDR data
            ValueError: If the locale code is malformed
        """
        context = LocaleContext.create(locale_code)
        self._locale_code = locale_code
        self._digits = DigitIndex.from_numerals(
            reversed(context.format_integer(DIGIT_REFERENCE))
        )
        self._separators = SeparatorSet.from_parts(
            context.format_to_parts(-SEPARATOR_REFERENCE)
        )
        logger.debug(
            "Number parser for '%s': numerals=%r group=%r decimal=%r minus=%r",
            locale_code,
            self._digits.numerals,
            "".join(sorted(self._separators.group)),
            "".join(sorted(self._separators.decimal)),
            self._separators.minus_sign,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._locale_code!r})"

    @property
    def locale_code(self) -> str:
        """Locale code the parser was built for."""
        return self._locale_code

    @property
    def digits(self) -> DigitIndex:
        """Numeral repertoire of the locale."""
        return self._digits

    @property
    def separators(self) -> SeparatorSet:
        """Group/decimal classes and minus sign of the locale."""
        return self._separators

    def parse(self, text: str) -> float:
        """Parse a locale-formatted numeral into a float.

        Whitespace is trimmed, group separators are removed, the decimal
        separator becomes ".", the locale minus sign becomes "-" and locale
        numerals become ASCII digits. ASCII digits are accepted as-is. Bidi
        marks (LRM, RLM, ALM) next to a sign are dropped, so a minus sign
        carrying only some of its marks still parses. Values that overflow
        float are rejected.

        Args:
            text: Numeral as written in the locale (e.g., "1,23,45,678.9")

        Returns:
            Parsed value, or math.nan if the text is not a plain numeral
        """
        normalized = text.strip()
        minus_sign = self._separators.minus_sign.strip(_BIDI_MARKS)
        if minus_sign and minus_sign != "-":
            normalized = normalized.replace(minus_sign, "-")

        group = self._separators.group
        decimal = self._separators.decimal
        digits = self._digits.values
        chars: list[str] = []
        for index, char in enumerate(normalized):
            if char in group:
                continue
            if char in _BIDI_MARKS and _adjacent_to_sign(normalized, index):
                continue
            if char in decimal:
                chars.append(".")
            elif char in digits:
                chars.append(_ASCII_DIGITS[digits[char]])
            elif char in _NORMALIZED_ALPHABET:
                chars.append(char)
            else:
                return math.nan

        numeric = "".join(chars)
        if not numeric:
            return math.nan
        try:
            value = float(numeric)
        except ValueError:
            return math.nan
        # float() overflows long digit strings to inf instead of raising
        if not math.isfinite(value):
            return math.nan
        return value


def _adjacent_to_sign(text: str, index: int) -> bool:
    """Whether the character at index borders an ASCII sign."""
    before = text[index - 1] if index > 0 else ""
    after = text[index + 1] if index + 1 < len(text) else ""
    return before in _SIGNS or after in _SIGNS


def parse_number(text: str, locale_code: str | None = None) -> float:
    """Parse a locale-formatted numeral with a transient parser.

    When locale_code is omitted, the environment's active locale is resolved
    once here via get_system_locale() and passed to the parser.

    Args:
        text: Numeral as written in the locale
        locale_code: BCP-47 locale identifier (default: system locale)

    Returns:
        Parsed value, or math.nan if the text is not a plain numeral

    Raises:
        babel.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale code is malformed

    Example:
        >>> parse_number("1,23,45,678.9", "en-IN")
        12345678.9
    """
    if locale_code is None:
        locale_code = get_system_locale()
    return LocalizedNumberParser(locale_code).parse(text)
