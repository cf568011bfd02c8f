"""Type guard for parsing results.

LocalizedNumberParser.parse() returns math.nan for every unparseable input.
The guard narrows a result to a usable finite float for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from localizednumbers.parsing import parse_number
    >>> from localizednumbers.parsing.guards import is_valid_number
    >>> result = parse_number("1,234.56", "en_US")
    >>> if is_valid_number(result):
    ...     total = result * 1.21
"""

import math
from typing import TypeIs

__all__ = [
    "is_valid_number",
]


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: Check if parsed number is valid (not None/NaN/Infinity).

    Safe to call directly on a parse() result. Returns False for None, the
    NaN sentinel, and infinities.

    Args:
        value: Float from parse() or parse_number()

    Returns:
        True if value is a finite float, False otherwise

    Example:
        >>> is_valid_number(parse_number("12.345.678,9", "de"))
        True
        >>> is_valid_number(parse_number("", "de"))
        False
    """
    return value is not None and math.isfinite(value)
