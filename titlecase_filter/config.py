"""Title-case word lists, defaults and environment overrides.

WHY: Which words stay lower case and which language spellings count as
English are editorial choices that change per citation style. They live
here as data, next to the TITLECASE_* switches, so a style maintainer
can adjust them without reading the rule engine.

HOW: A .env file in the working directory is read once at import.
STOPWORDS and ENGLISH_LANGUAGE_TERMS are frozen module-level data.
load_settings() reads the TITLECASE_* variables at call time and builds
a CapitalizationSettings value; explicit arguments win over them.

RULES:
- STOPWORDS holds lowercase words only; membership is tested on the lowered word
- ENGLISH_LANGUAGE_TERMS are matched as whole words, case-insensitively
- Defaults: language check on, uppercase mode "never", locale "en-us"
- A bad TITLECASE_* value raises ValueError naming the accepted spellings
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from titlecase_filter.core.models import CapitalizationSettings, UppercaseMode

# TITLECASE_* overrides from a local .env file
load_dotenv()

# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

STOPWORDS: frozenset[str] = frozenset({
    "a", "an", "and", "as", "at",
    "but", "by", "down", "for", "from",
    "in", "into", "nor",
    "of", "on", "onto", "or", "over",
    "so", "the", "till", "to",
    "up", "via", "with", "yet",
})
"""Words kept in lower case inside a title; add words as required."""

ENGLISH_LANGUAGE_TERMS: tuple[str, ...] = (
    "en",
    "eng",
    "engl",
    "English",
    "Englisch",
)
"""Whole-word spellings that mark a reference language as English."""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

DEFAULT_ENSURE_ENGLISH = os.getenv("TITLECASE_ENSURE_ENGLISH", "true")
DEFAULT_UPPERCASE_MODE = os.getenv("TITLECASE_CONVERT_UPPERCASE", "never")
DEFAULT_LOCALE = os.getenv("TITLECASE_LOCALE", "").strip() or "en-us"


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value.

    RULES:
    - Accepts 1/0, true/false, yes/no, on/off (case-insensitive)
    - Raises ValueError on anything else
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        "Invalid boolean value '{}'. Use one of: {}".format(
            value, ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES))
        )
    )


def parse_uppercase_mode(value: str) -> UppercaseMode:
    """Parse an uppercase mode name ("never", "always", "auto")."""
    try:
        return UppercaseMode(value.strip().lower())
    except ValueError:
        raise ValueError(
            "Unknown uppercase mode '{}'. Available: {}".format(
                value, ", ".join(mode.value for mode in UppercaseMode)
            )
        ) from None


def load_settings(
    ensure_english: Optional[bool] = None,
    convert_full_uppercase: Optional[UppercaseMode] = None,
    locale: Optional[str] = None,
) -> CapitalizationSettings:
    """Build CapitalizationSettings from the environment.

    WHY: The host calls the filter without any configuration of its own;
    the behaviour is controlled by the deployment (.env or environment).
    Explicit arguments let callers such as the CLI override single values.

    HOW: Reads TITLECASE_ENSURE_ENGLISH, TITLECASE_CONVERT_UPPERCASE and
    TITLECASE_LOCALE at call time (falling back to the values seen at
    import), then applies any non-None overrides.

    RULES:
    - Raises ValueError for an invalid boolean or mode value
    - An empty locale falls back to DEFAULT_LOCALE
    """
    if ensure_english is None:
        ensure_english = parse_bool(
            os.getenv("TITLECASE_ENSURE_ENGLISH", DEFAULT_ENSURE_ENGLISH)
        )
    if convert_full_uppercase is None:
        convert_full_uppercase = parse_uppercase_mode(
            os.getenv("TITLECASE_CONVERT_UPPERCASE", DEFAULT_UPPERCASE_MODE)
        )
    if not locale:
        locale = os.getenv("TITLECASE_LOCALE", "").strip() or DEFAULT_LOCALE

    return CapitalizationSettings(
        ensure_english=ensure_english,
        convert_full_uppercase=convert_full_uppercase,
        locale=locale,
    )
