"""Locale service: Babel-backed formatting used to derive locale classifiers.

Exports:
    LocaleContext: Immutable per-locale formatting facade
    NumberPart: Classified fragment of a formatted number

Python 3.13+.
"""

from .locale_context import LocaleContext
from .value_types import NumberPart

__all__ = ["LocaleContext", "NumberPart"]
