"""Template condition: does a citation name one specific person?

WHY: Some citation styles switch to a dedicated template when a
particular author (e.g. the document's own author, or a house
organization) appears on a reference or on the containing work. The
person must match exactly as entered in the person editor; a fuzzy
match would pick the wrong template for namesakes.

HOW: PersonIdentity holds the six name parts. matches_person() compares
them one by one with plain string equality (ordinal, case-sensitive).
citation_has_person() checks the reference's persons and, unless
disabled, the parent reference's persons.

RULES:
- All six name parts must be equal; "" matches only "" (None counts as "")
- Comparison is ordinal: "Duck" != "duck"
- check_parent_reference=False ignores the parent reference entirely
- Missing citation or reference → False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class PersonIdentity:
    """The person to look for, name parts exactly as entered."""

    last_name: str
    first_name: str = ""
    middle_name: str = ""
    prefix: str = ""
    suffix: str = ""
    abbreviation: str = ""


_NAME_PARTS = (
    "last_name",
    "first_name",
    "middle_name",
    "prefix",
    "suffix",
    "abbreviation",
)


def matches_person(person: Any, identity: PersonIdentity) -> bool:
    for part in _NAME_PARTS:
        if (getattr(person, part, None) or "") != getattr(identity, part):
            return False
    return True


def has_person(persons: Optional[Iterable[Any]], identity: PersonIdentity) -> bool:
    """True if any person in ``persons`` matches ``identity`` exactly."""
    if not persons:
        return False
    return any(matches_person(person, identity) for person in persons)


def citation_has_person(
    citation: Any,
    identity: PersonIdentity,
    check_parent_reference: bool = True,
) -> bool:
    """Check a citation's reference (and parent reference) for a person.

    Args:
        citation: The citation; needs ``reference`` with
                  ``authors_or_editors_or_organizations`` and
                  ``parent_reference``.
        identity: The person to look for.
        check_parent_reference: Also look at the parent reference's persons.

    Returns:
        True if the person is found.
    """
    if citation is None or citation.reference is None:
        return False

    reference = citation.reference
    if has_person(reference.authors_or_editors_or_organizations, identity):
        return True

    if not check_parent_reference:
        return False

    parent = reference.parent_reference
    if parent is None:
        return False
    return has_person(parent.authors_or_editors_or_organizations, identity)
