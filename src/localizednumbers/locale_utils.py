"""Locale utilities for BCP-47 tags, Unicode extensions and POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Babel understands POSIX-style identifiers (zh_Hans_CN) but not BCP-47
Unicode extensions (-u-nu-hanidec), so tags are split here before they reach
Babel and the extension keywords are handed to the caller separately.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os

from babel import Locale

from localizednumbers.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_unicode_extension",
]

# Pseudo-locales that carry no language information.
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Any Unicode extension must be removed first with split_unicode_extension().

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh-Hans-CN")
        'zh_Hans_CN'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def split_unicode_extension(locale_code: str) -> tuple[str, dict[str, str]]:
    """Separate a BCP-47 Unicode locale extension from the base tag.

    Keywords are two-character keys followed by their value subtags
    (RFC 6067). Attributes and keys without a value are ignored. Other
    singleton extensions (-t-, -x-) terminate the -u- extension.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Tuple of (base tag without the extension, lowercase keyword mapping)

    Example:
        >>> split_unicode_extension("zh-Hans-CN-u-nu-hanidec")
        ('zh-Hans-CN', {'nu': 'hanidec'})
        >>> split_unicode_extension("de_DE")
        ('de_DE', {})
    """
    subtags = normalize_locale(locale_code).split("_")
    lowered = [subtag.lower() for subtag in subtags]
    if "u" not in lowered[1:]:
        return locale_code, {}

    start = lowered.index("u", 1)
    base = "-".join(subtags[:start])

    keywords: dict[str, str] = {}
    key: str | None = None
    values: list[str] = []
    for subtag in lowered[start + 1 :]:
        if len(subtag) == 1:
            break
        if len(subtag) == 2:
            if key is not None and values:
                keywords[key] = "-".join(values)
            key, values = subtag, []
        elif key is not None:
            values.append(subtag)
    if key is not None and values:
        keywords[key] = "-".join(values)

    return base, keywords


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Unicode extensions
    are dropped; use split_unicode_extension() to read them.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-IN")
        >>> locale.language
        'en'
        >>> locale.territory
        'IN'
    """
    base, _ = split_unicode_extension(locale_code)
    return Locale.parse(normalize_locale(base))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the locale used for numbers from the OS and environment.

    Detection order:
    1. Python locale.getlocale(LC_NUMERIC) (set only after setlocale())
    2. LC_ALL environment variable (overrides all)
    3. LC_NUMERIC environment variable (numeric formatting category)
    4. LANG environment variable (default locale)

    Encoding suffixes and modifiers are stripped. "C" and "POSIX"
    pseudo-locales are skipped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LC_ALL'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale(locale_module.LC_NUMERIC)
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidate = _strip_posix_suffixes(system_locale)
        if candidate not in _PSEUDO_LOCALES:
            return normalize_locale(candidate)

    for var in ("LC_ALL", "LC_NUMERIC", "LANG"):
        candidate = _strip_posix_suffixes(os.environ.get(var, ""))
        if candidate not in _PSEUDO_LOCALES:
            return normalize_locale(candidate)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_NUMERIC, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE


def _strip_posix_suffixes(value: str) -> str:
    """Strip '.encoding' and '@modifier' from a POSIX locale string."""
    return value.split("@")[0].split(".")[0]
