"""Host boundary — citation data model and the component-part filter.

WHY: The capitalization engine works on plain strings. The host
document pipeline works on citations, references, templates and text
units. This package translates between the two and implements the
"handled / not handled" contract the host expects.

HOW: models.py mirrors the parts of the host object model the filter
reads, filter.py implements the field filter, and person_match.py the
unrelated template condition that checks for one named person.

RULES:
- Missing host data is reported as "not handled", never raised
- Host objects are duck-typed; the dataclasses here are one conforming shape
"""

from titlecase_filter.host.filter import FilterResult, filter_text_units
from titlecase_filter.host.models import (
    Citation,
    ComponentPart,
    Person,
    Reference,
    Template,
    TextUnit,
)
from titlecase_filter.host.person_match import PersonIdentity, citation_has_person

__all__ = [
    "Citation",
    "ComponentPart",
    "FilterResult",
    "Person",
    "PersonIdentity",
    "Reference",
    "Template",
    "TextUnit",
    "citation_has_person",
    "filter_text_units",
]
