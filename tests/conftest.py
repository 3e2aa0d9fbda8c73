"""Shared test fixtures for the titlecase_filter test suite.

WHY: Several test modules need the same citations — an English
reference, a German one, a chapter inside an English book — and the
same default settings. Centralizing them keeps the tests short and
makes sure the environment cannot leak into them.

HOW: Pytest fixtures build host dataclasses; an autouse fixture clears
the TITLECASE_* environment variables for every test.

RULES:
- Settings fixtures are explicit; tests never depend on a developer's .env
- make_field(segments, scope) builds a ComponentPart with one TextUnit per segment
"""

from typing import List, Optional

import pytest

from titlecase_filter.core.models import CapitalizationSettings, FieldScope, UppercaseMode
from titlecase_filter.host.models import (
    Citation,
    ComponentPart,
    Person,
    Reference,
    Template,
    TextUnit,
)

_ENV_VARS = (
    "TITLECASE_ENSURE_ENGLISH",
    "TITLECASE_CONVERT_UPPERCASE",
    "TITLECASE_LOCALE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove TITLECASE_* variables so defaults apply."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_field():
    """Factory for a ComponentPart with one TextUnit per segment."""

    def _make(
        segments: Optional[List[str]],
        scope: FieldScope = FieldScope.REFERENCE,
    ) -> ComponentPart:
        units = None if segments is None else [TextUnit(text=s) for s in segments]
        return ComponentPart(scope=scope, text_units=units)

    return _make


@pytest.fixture
def template():
    return Template(name="APA")


@pytest.fixture
def default_settings():
    """Host defaults: language check on, all-caps words never folded."""
    return CapitalizationSettings(
        ensure_english=True,
        convert_full_uppercase=UppercaseMode.NEVER,
        locale="en-us",
    )


@pytest.fixture
def english_citation():
    return Citation(reference=Reference(language="English"))


@pytest.fixture
def german_citation():
    return Citation(reference=Reference(language="de"))


@pytest.fixture
def chapter_citation():
    """A chapter with no language of its own inside an English edited book."""
    book = Reference(
        language="en",
        authors_or_editors_or_organizations=[
            Person(last_name="Duck", first_name="Dagobert"),
        ],
    )
    chapter = Reference(
        language="",
        parent_reference=book,
        authors_or_editors_or_organizations=[
            Person(last_name="Mouse", first_name="Mickey"),
        ],
    )
    return Citation(reference=chapter)
