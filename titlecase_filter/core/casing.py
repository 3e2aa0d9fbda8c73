"""Locale-aware single-word case transformation.

WHY: Title casing only ever touches the case of letters. Python's
``str.upper()`` and ``str.lower()`` use Unicode default mappings, which
are wrong for Turkic languages (``i`` must become ``İ``, ``I`` must
become ``ı``) and which may change a string's length (``ß`` → ``SS``).
Both would break the promise that only letter case changes.

HOW: Every character is mapped on its own. Locale-specific mappings
from _LOCALE_UPPER / _LOCALE_LOWER are consulted first; otherwise the
Unicode default mapping is used, but only when it yields exactly one
character.

RULES:
- The locale is always an explicit argument, never read from process state
- Locale tags are matched on their primary language subtag ("tr-TR" → "tr")
- A character whose mapping is not one character long stays unchanged
- Empty words pass through unchanged
"""

from __future__ import annotations

import re

_LOCALE_SEPARATOR_RE = re.compile(r"[-_.@]")

# Primary language subtags with special-cased letter mappings.
_LOCALE_UPPER: dict[str, dict[str, str]] = {
    "tr": {"i": "İ", "ı": "I"},
    "az": {"i": "İ", "ı": "I"},
}

_LOCALE_LOWER: dict[str, dict[str, str]] = {
    "tr": {"I": "ı", "İ": "i"},
    "az": {"I": "ı", "İ": "i"},
}


def primary_language(locale: str) -> str:
    """Return the lowercased primary language subtag of a locale tag."""
    return _LOCALE_SEPARATOR_RE.split(locale.strip(), maxsplit=1)[0].lower()


def upper_char(char: str, locale: str) -> str:
    special = _LOCALE_UPPER.get(primary_language(locale), {})
    if char in special:
        return special[char]
    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def lower_char(char: str, locale: str) -> str:
    special = _LOCALE_LOWER.get(primary_language(locale), {})
    if char in special:
        return special[char]
    mapped = char.lower()
    return mapped if len(mapped) == 1 else char


def capitalize_word(word: str, fold_rest: bool = False, locale: str = "en-us") -> str:
    """Upper-case the first character of a word.

    Args:
        word: The word to capitalize.
        fold_rest: Also lower-case every remaining character. When False
                   the rest is left exactly as given, so acronyms and
                   mixed-case words ("iPhone", "NATO") survive.
        locale: Locale tag for the case mappings.

    Returns:
        The capitalized word, same length as the input.
    """
    if not word:
        return word

    first = upper_char(word[0], locale)
    if not fold_rest:
        return first + word[1:]
    return first + "".join(lower_char(c, locale) for c in word[1:])


def lowercase_word(word: str, locale: str = "en-us") -> str:
    """Lower-case every character of a word."""
    return "".join(lower_char(c, locale) for c in word)


def has_lowercase(text: str) -> bool:
    """True if ``text`` contains at least one lower-case letter."""
    return any(c.islower() for c in text)
