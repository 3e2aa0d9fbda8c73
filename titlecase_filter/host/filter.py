"""Component-part filter: title-case one field of one citation.

WHY: The host pipeline asks every registered filter, field by field,
whether it wants to replace the field's text. The answer has two
parts — the text units to render and a ``handled`` flag. When the flag
is False the host falls back to its own unfiltered rendering, so every
problem with the host data must turn into "not handled". An exception
escaping here could make the host disable the filter altogether.

HOW: Guard clauses for missing citation, reference, component part or
template; then the language gate; then the unfiltered text units are
fetched and handed to the engine, which rewrites them in place.

RULES:
- Returns FilterResult(None, False) for every abnormal condition
- Returns FilterResult(units, True) only after all units are rewritten
- Settings default to config.load_settings() (environment / .env)
- Invalid TITLECASE_* environment values are logged at WARNING and
  give "not handled"
- Any other reason for "not handled" is logged at DEBUG; nothing is raised
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from titlecase_filter.config import load_settings
from titlecase_filter.core.engine import apply_to_text_units
from titlecase_filter.core.language import is_eligible
from titlecase_filter.core.models import CapitalizationSettings, FieldScope

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Outcome of filtering one field.

    Attributes:
        text_units: The rewritten text units, or None when not handled.
        handled: True if the host must render ``text_units``; False if
                 it should fall back to its default rendering.
    """

    text_units: Optional[List[Any]]
    handled: bool


NOT_HANDLED = FilterResult(text_units=None, handled=False)


def filter_text_units(
    component_part: Any,
    template: Any,
    citation: Any,
    settings: Optional[CapitalizationSettings] = None,
) -> FilterResult:
    """Title-case one text field of a citation.

    Args:
        component_part: The field; needs ``scope`` and
                        ``get_text_units_unfiltered(citation, template)``.
        template: The citation style template in use.
        citation: The citation; needs ``reference`` (with ``language``
                  and ``parent_reference``).
        settings: Filter configuration; loaded from the environment when
                  omitted.

    Returns:
        FilterResult with the rewritten units and handled=True, or
        NOT_HANDLED.
    """
    if citation is None or citation.reference is None:
        logger.debug("Not handled: no citation or reference")
        return NOT_HANDLED
    if component_part is None or template is None:
        logger.debug("Not handled: no component part or template")
        return NOT_HANDLED

    if settings is None:
        try:
            settings = load_settings()
        except ValueError as e:
            logger.warning("Not handled: invalid filter configuration: %s", e)
            return NOT_HANDLED

    try:
        scope = FieldScope(component_part.scope)
    except ValueError:
        logger.debug("Not handled: unknown field scope %r", component_part.scope)
        return NOT_HANDLED

    if not is_eligible(scope, citation.reference, settings.ensure_english):
        logger.debug(
            "Not handled: reference language is not English (scope %s)",
            scope.value,
        )
        return NOT_HANDLED

    text_units = component_part.get_text_units_unfiltered(citation, template)
    if not text_units:
        logger.debug("Not handled: field has no text units")
        return NOT_HANDLED

    apply_to_text_units(
        text_units,
        mode=settings.convert_full_uppercase,
        locale=settings.locale,
    )
    logger.debug("Title-cased %d text unit(s)", len(text_units))
    return FilterResult(text_units=text_units, handled=True)
