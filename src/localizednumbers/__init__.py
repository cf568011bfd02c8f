"""localizednumbers - Parse locale-formatted numerals back into numbers.

Converts human-readable numerals such as "12,345,678.90" (en),
"12.345.678,9" (de), "1,23,45,678.9" (en-IN) or "١٬٢٣٤٫٥٦" (ar-EG) into
floats, honoring each locale's grouping separator, decimal separator and
numbering system. Locale data comes from Babel (CLDR).

Public API:
    LocalizedNumberParser - Per-locale parser, build once and reuse
    parse_number - One-shot parse, defaulting to the system locale
    is_valid_number - Type guard rejecting the NaN sentinel
    get_system_locale - Environment locale used when none is given

Submodules:
    localizednumbers.parsing - Parsers, classifiers and guards
    localizednumbers.runtime - LocaleContext locale service over Babel
    localizednumbers.core - CLDR numbering-system digit repertoires
    localizednumbers.locale_utils - Locale tag helpers
"""

from .locale_utils import get_system_locale
from .parsing import LocalizedNumberParser, is_valid_number, parse_number

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localizednumbers")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LocalizedNumberParser",
    "__version__",
    "get_system_locale",
    "is_valid_number",
    "parse_number",
]
