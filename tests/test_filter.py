"""Unit tests for the component-part filter.

WHY: The host relies on the handled flag to decide which text to
render. Returning handled=True with half-processed units, or raising on
missing data, would break the bibliography or disable the filter.

HOW: Tests cover the happy path, every "not handled" guard, language
gating through both scopes, settings loaded from the environment and
the debug log line for rejected fields.

RULES:
- Fixtures come from conftest.py; settings are passed explicitly
  unless the test is about environment loading.
"""

import dataclasses
import logging

import pytest

from titlecase_filter.core.models import FieldScope, UppercaseMode
from titlecase_filter.host.filter import NOT_HANDLED, filter_text_units
from titlecase_filter.host.models import Citation, Reference


def _texts(result):
    return [unit.text for unit in result.text_units]


class TestHandled:
    """English fields are title-cased and reported as handled."""

    def test_single_segment(self, make_field, template, english_citation, default_settings):
        field = make_field(["the lord of the rings"])
        result = filter_text_units(field, template, english_citation, default_settings)
        assert result.handled is True
        assert _texts(result) == ["The Lord of the Rings"]

    def test_multiple_segments(self, make_field, template, english_citation, default_settings):
        field = make_field(["the lord", " of the rings: ", "the return of the king"])
        result = filter_text_units(field, template, english_citation, default_settings)
        assert _texts(result) == ["The Lord", " of the Rings: ", "the Return of the King"]

    def test_host_units_are_not_touched(self, make_field, template, english_citation, default_settings):
        field = make_field(["the lord of the rings"])
        filter_text_units(field, template, english_citation, default_settings)
        assert field.text_units[0].text == "the lord of the rings"

    def test_chapter_uses_parent_language(self, make_field, template, chapter_citation, default_settings):
        result = filter_text_units(make_field(["a tale"]), template, chapter_citation, default_settings)
        assert result.handled is True
        assert _texts(result) == ["A Tale"]

    def test_uppercase_mode_from_settings(self, make_field, template, english_citation, default_settings):
        settings = dataclasses.replace(default_settings, convert_full_uppercase=UppercaseMode.AUTO)
        field = make_field(["UN AND US GOVERNMENT"])
        result = filter_text_units(field, template, english_citation, settings)
        assert _texts(result) == ["Un and Us Government"]

    def test_language_check_disabled(self, make_field, template, german_citation, default_settings):
        settings = dataclasses.replace(default_settings, ensure_english=False)
        result = filter_text_units(make_field(["der zauberberg"]), template, german_citation, settings)
        assert result.handled is True
        assert _texts(result) == ["Der Zauberberg"]


class TestNotHandled:
    """Every abnormal condition turns into NOT_HANDLED."""

    def test_german_reference(self, make_field, template, german_citation, default_settings):
        field = make_field(["der zauberberg"])
        result = filter_text_units(field, template, german_citation, default_settings)
        assert result == NOT_HANDLED
        assert result.text_units is None
        assert field.text_units[0].text == "der zauberberg"

    def test_parent_scope_without_parent(self, make_field, template, english_citation, default_settings):
        field = make_field(["the book"], scope=FieldScope.PARENT_REFERENCE)
        assert filter_text_units(field, template, english_citation, default_settings) == NOT_HANDLED

    def test_missing_citation(self, make_field, template, default_settings):
        assert filter_text_units(make_field(["x"]), template, None, default_settings) == NOT_HANDLED

    def test_missing_reference(self, make_field, template, default_settings):
        citation = Citation(reference=None)
        assert filter_text_units(make_field(["x"]), template, citation, default_settings) == NOT_HANDLED

    def test_missing_component_part(self, template, english_citation, default_settings):
        assert filter_text_units(None, template, english_citation, default_settings) == NOT_HANDLED

    def test_missing_template(self, make_field, english_citation, default_settings):
        assert filter_text_units(make_field(["x"]), None, english_citation, default_settings) == NOT_HANDLED

    def test_no_text_units(self, make_field, template, english_citation, default_settings):
        assert filter_text_units(make_field(None), template, english_citation, default_settings) == NOT_HANDLED

    def test_empty_text_units(self, make_field, template, english_citation, default_settings):
        assert filter_text_units(make_field([]), template, english_citation, default_settings) == NOT_HANDLED

    def test_reason_is_logged(self, make_field, template, german_citation, default_settings, caplog):
        with caplog.at_level(logging.DEBUG, logger="titlecase_filter.host.filter"):
            filter_text_units(make_field(["x"]), template, german_citation, default_settings)
        assert "not English" in caplog.text

    def test_plain_string_parent_scope(self, make_field, template, default_settings):
        citation = Citation(reference=Reference(language="en", parent_reference=Reference(language="de")))
        field = make_field(["der zauberberg"], scope="parent_reference")
        assert filter_text_units(field, template, citation, default_settings) == NOT_HANDLED

    def test_unknown_scope(self, make_field, template, english_citation, default_settings):
        field = make_field(["x"], scope="footnote")
        assert filter_text_units(field, template, english_citation, default_settings) == NOT_HANDLED

    @pytest.mark.parametrize("name, value", [
        ("TITLECASE_CONVERT_UPPERCASE", "loud"),
        ("TITLECASE_ENSURE_ENGLISH", "maybe"),
    ])
    def test_invalid_environment_value(
        self, make_field, template, english_citation, monkeypatch, caplog, name, value
    ):
        monkeypatch.setenv(name, value)
        with caplog.at_level(logging.WARNING, logger="titlecase_filter.host.filter"):
            result = filter_text_units(make_field(["x"]), template, english_citation)
        assert result == NOT_HANDLED
        assert "invalid filter configuration" in caplog.text


class TestEnvironmentSettings:
    """Without explicit settings the environment decides."""

    def test_defaults(self, make_field, template, english_citation):
        result = filter_text_units(make_field(["UN AND US"]), template, english_citation)
        assert _texts(result) == ["UN and US"]

    def test_uppercase_mode_from_environment(self, make_field, template, english_citation, monkeypatch):
        monkeypatch.setenv("TITLECASE_CONVERT_UPPERCASE", "always")
        result = filter_text_units(make_field(["UN AND US"]), template, english_citation)
        assert _texts(result) == ["Un and Us"]

    def test_language_check_from_environment(self, make_field, template, german_citation, monkeypatch):
        monkeypatch.setenv("TITLECASE_ENSURE_ENGLISH", "false")
        result = filter_text_units(make_field(["der zauberberg"]), template, german_citation)
        assert result.handled is True
