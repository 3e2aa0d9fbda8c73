"""Language applicability gate.

WHY: English title case is wrong for German, French or most other
languages, so a field is only rewritten when its reference is in
English. Users type the language field freely ("en", "English",
"eng; ger", "Englisch"), so the check looks for a known term as a
whole word rather than comparing the full string.

HOW: resolve_language() picks the language string that applies to the
field's scope, with the parent-reference fallback for contributions.
is_english() searches it for ENGLISH_LANGUAGE_TERMS. is_eligible()
combines both with the ensure_english switch.

RULES:
- ensure_english=False → every field is eligible, no language lookup
- Scope REFERENCE: reference language, else parent language if a parent exists
- Scope PARENT_REFERENCE: parent language only; no parent → not eligible
- Empty resolved language → not eligible
- Terms match as whole words, case-insensitively ("en-GB" matches, "ben" does not)
"""

from __future__ import annotations

import re
from typing import Any, Optional

from titlecase_filter.config import ENGLISH_LANGUAGE_TERMS
from titlecase_filter.core.models import FieldScope

_ENGLISH_RE = re.compile(
    r"\b({})\b".format("|".join(re.escape(t) for t in ENGLISH_LANGUAGE_TERMS)),
    re.IGNORECASE,
)


def is_english(language: Optional[str]) -> bool:
    """True if the language string names English as a whole word."""
    if not language:
        return False
    return _ENGLISH_RE.search(language) is not None


def resolve_language(scope: FieldScope, reference: Any) -> str:
    """Return the language string that applies to a field.

    Args:
        scope: Whether the field belongs to the reference itself or to
               its parent reference; a FieldScope or its string value.
        reference: The citation's reference; needs ``language`` and
                   ``parent_reference`` attributes.

    Returns:
        The resolved language, or "" when none can be resolved.
    """
    parent = getattr(reference, "parent_reference", None)

    if FieldScope(scope) is FieldScope.PARENT_REFERENCE:
        if parent is None:
            return ""
        return parent.language or ""

    language = reference.language or ""
    if not language and parent is not None:
        language = parent.language or ""
    return language


def is_eligible(scope: FieldScope, reference: Any, ensure_english: bool = True) -> bool:
    """Decide whether a field may be title-cased at all."""
    if not ensure_english:
        return True
    return is_english(resolve_language(scope, reference))
