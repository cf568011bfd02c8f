"""Quickstart example for localizednumbers.

This example demonstrates parsing numerals written in different locales.

Note: parse() never raises for bad input; it returns nan. Check results with
is_valid_number() before using them.
"""

from localizednumbers import LocalizedNumberParser, is_valid_number, parse_number
from localizednumbers.runtime import LocaleContext

# Example 1: One parser per locale
print("=" * 50)
print("Example 1: Locale Parsers")
print("=" * 50)

samples = {
    "en": "12,345,678.90",
    "de": "12.345.678,9",
    "en-IN": "1,23,45,678.9",
    "ar-EG": "١٬٢٣٤٫٥٦",
    "zh-Hans-CN-u-nu-hanidec": "一,二三四.五六",
}
for locale_code, text in samples.items():
    parser = LocalizedNumberParser(locale_code)
    print(f"{locale_code:>26}: {text!r} -> {parser.parse(text)}")
# Output:
#                         en: '12,345,678.90' -> 12345678.9
#                         de: '12.345.678,9' -> 12345678.9
#                      en-IN: '1,23,45,678.9' -> 12345678.9
#                      ar-EG: '١٬٢٣٤٫٥٦' -> 1234.56
#    zh-Hans-CN-u-nu-hanidec: '一,二三四.五六' -> 1234.56

# Example 2: Reuse a parser
print("\n" + "=" * 50)
print("Example 2: Reusing a Parser")
print("=" * 50)

parser = LocalizedNumberParser("de")
for text in ["1.234,5", "-0,25", "  42  ", "1,2,3", ""]:
    result = parser.parse(text)
    status = "ok" if is_valid_number(result) else "invalid"
    print(f"{text!r:>12} -> {result} ({status})")

# Example 3: Format, then parse back
print("\n" + "=" * 50)
print("Example 3: Round Trip")
print("=" * 50)

for locale_code in ["fr", "fa", "hi-IN-u-nu-deva"]:
    ctx = LocaleContext.create(locale_code)
    formatted = ctx.format_number(-9876543.21)
    parsed = LocalizedNumberParser(locale_code).parse(formatted)
    print(f"{locale_code:>16}: {formatted!r} -> {parsed}")

# Example 4: System locale
print("\n" + "=" * 50)
print("Example 4: System Locale (LC_ALL / LC_NUMERIC / LANG)")
print("=" * 50)

print(parse_number("1234"))
