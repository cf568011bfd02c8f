"""CLDR numbering-system digit repertoires.

Babel exposes per-numbering-system symbols (decimal, group, minus sign) but
always renders ASCII digits. The digits themselves come from CLDR
numberingSystems.xml and are reproduced here for every numeric system.

Most numeric systems occupy ten consecutive code points starting at the
digit zero; those are stored by their zero code point. Systems whose digits
are scattered (hanidec) are stored as an explicit ten-character string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "NumberingSystemId",
    # Lookup functions
    "get_numbering_system_digits",
    "is_numeric_numbering_system",
    "list_numbering_systems",
    # Transliteration
    "transliterate_digits",
]

type NumberingSystemId = str
"""CLDR numbering system identifier (e.g., 'latn', 'arab', 'hanidec')."""

_ASCII_DIGITS = "0123456789"

# Zero code point of each contiguous numeric system.
_CONTIGUOUS_ZERO: MappingProxyType[str, int] = MappingProxyType({
    "adlm": 0x1E950,
    "ahom": 0x11730,
    "arab": 0x0660,
    "arabext": 0x06F0,
    "bali": 0x1B50,
    "beng": 0x09E6,
    "bhks": 0x11C50,
    "brah": 0x11066,
    "cakm": 0x11136,
    "cham": 0xAA50,
    "deva": 0x0966,
    "diak": 0x11950,
    "fullwide": 0xFF10,
    "gong": 0x11DA0,
    "gonm": 0x11D50,
    "gujr": 0x0AE6,
    "guru": 0x0A66,
    "hmng": 0x16B50,
    "hmnp": 0x1E140,
    "java": 0xA9D0,
    "kali": 0xA900,
    "khmr": 0x17E0,
    "knda": 0x0CE6,
    "lana": 0x1A80,
    "lanatham": 0x1A90,
    "laoo": 0x0ED0,
    "latn": 0x0030,
    "lepc": 0x1C40,
    "limb": 0x1946,
    "mathbold": 0x1D7CE,
    "mathdbl": 0x1D7D8,
    "mathmono": 0x1D7F6,
    "mathsanb": 0x1D7EC,
    "mathsans": 0x1D7E2,
    "mlym": 0x0D66,
    "modi": 0x11650,
    "mong": 0x1810,
    "mroo": 0x16A60,
    "mtei": 0xABF0,
    "mymr": 0x1040,
    "mymrshan": 0x1090,
    "mymrtlng": 0xA9F0,
    "newa": 0x11450,
    "nkoo": 0x07C0,
    "olck": 0x1C50,
    "orya": 0x0B66,
    "osma": 0x104A0,
    "rohg": 0x10D30,
    "saur": 0xA8D0,
    "segment": 0x1FBF0,
    "shrd": 0x111D0,
    "sind": 0x112F0,
    "sinh": 0x0DE6,
    "sora": 0x110F0,
    "sund": 0x1BB0,
    "takr": 0x116C0,
    "talu": 0x19D0,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "thai": 0x0E50,
    "tibt": 0x0F20,
    "tirh": 0x114D0,
    "vaii": 0xA620,
    "wara": 0x118E0,
    "wcho": 0x1E2F0,
})

# Numeric systems whose digits are not consecutive code points.
_SCATTERED_DIGITS: MappingProxyType[str, str] = MappingProxyType({
    "hanidec": "〇一二三四五六七八九",
})

_DIGITS: MappingProxyType[str, str] = MappingProxyType({
    **{
        system: "".join(chr(zero + offset) for offset in range(10))
        for system, zero in _CONTIGUOUS_ZERO.items()
    },
    **_SCATTERED_DIGITS,
})


def is_numeric_numbering_system(system: str) -> bool:
    """Check whether a numbering system has a known decimal digit repertoire.

    Algorithmic systems (roman, hans, ethi, ...) are not numeric and return False.

    Example:
        >>> is_numeric_numbering_system("arab")
        True
        >>> is_numeric_numbering_system("roman")
        False
    """
    return system in _DIGITS


def get_numbering_system_digits(system: NumberingSystemId) -> str:
    """Get the ten digits of a numeric numbering system, ordered 0 to 9.

    Args:
        system: CLDR numbering system identifier

    Returns:
        Ten-character string; index i holds the digit of value i

    Raises:
        KeyError: If the system is unknown or algorithmic

    Example:
        >>> get_numbering_system_digits("arab")
        '٠١٢٣٤٥٦٧٨٩'
    """
    return _DIGITS[system]


def list_numbering_systems() -> frozenset[NumberingSystemId]:
    """List every numeric numbering system with a digit repertoire."""
    return frozenset(_DIGITS)


def transliterate_digits(text: str, system: NumberingSystemId) -> str:
    """Replace ASCII digits in text with the digits of a numbering system.

    Non-digit characters pass through unchanged.

    Example:
        >>> transliterate_digits("12.5", "hanidec")
        '一二.五'
    """
    if system == "latn":
        return text
    return text.translate(str.maketrans(_ASCII_DIGITS, _DIGITS[system]))
