"""Host-side dataclasses: citations, references, persons and text units.

WHY: The filter is called by a host pipeline with its own object
model. Only a handful of attributes are read: a reference's language,
its parent reference, its person list, and a field's text units. These
dataclasses describe exactly that shape so the filter can be used and
tested without the host.

HOW: Plain dataclasses forming a hierarchy:
  Citation      — one citation of one reference
  Reference     — language, optional parent reference, persons
  Person        — name parts as entered by the user
  ComponentPart — one text field of a citation style (scope + text units)
  TextUnit      — one formatting run of a field's text (mutable)
  Template      — the citation style template in use

RULES:
- TextUnit.text is the only attribute the filter ever writes
- ComponentPart.get_text_units_unfiltered() returns fresh TextUnit
  copies, or None when the field is empty for the citation
- Any host object with the same attributes works in place of these
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from titlecase_filter.core.models import FieldScope


@dataclass
class Person:
    """An author, editor or organization as stored on a reference."""

    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    prefix: str = ""
    suffix: str = ""
    abbreviation: str = ""


@dataclass
class Reference:
    """A bibliographic reference.

    Attributes:
        language: Free-text language field ("en", "English", "de; en", ...).
        parent_reference: The containing work (e.g. the edited book of a
                          chapter), or None.
        authors_or_editors_or_organizations: Persons responsible for the work.
    """

    language: str = ""
    parent_reference: Optional["Reference"] = None
    authors_or_editors_or_organizations: List[Person] = field(default_factory=list)


@dataclass
class Citation:
    """One citation of a reference in a document."""

    reference: Optional[Reference] = None


@dataclass
class Template:
    """Citation style template in use for a citation."""

    name: str = ""


@dataclass
class TextUnit:
    """One contiguous run of a field's text with uniform formatting."""

    text: str = ""


@dataclass
class ComponentPart:
    """One text field of a citation style, e.g. Title or Subtitle.

    Attributes:
        scope: Whether the field reads from the reference or its parent.
        text_units: The field's raw text runs, or None if the field is
                    empty for this citation.
    """

    scope: FieldScope = FieldScope.REFERENCE
    text_units: Optional[List[TextUnit]] = None

    def get_text_units_unfiltered(
        self,
        citation: Citation,
        template: Template,
    ) -> Optional[List[TextUnit]]:
        """Return copies of the field's raw text units, before any filter."""
        if self.text_units is None:
            return None
        return [TextUnit(text=unit.text) for unit in self.text_units]
