"""Pydantic request/response models for the JSON field document.

WHY: The CLI accepts a whole field — its segments, scope and reference
languages — as one JSON document, so hosts in other languages can call
the filter as a subprocess. Pydantic validates the document and
generates the JSON Schema callers can check their payloads against.

HOW: FieldRequest describes the input and converts itself into host
objects (Citation, ComponentPart) plus optional settings overrides.
FieldResponse carries the handled flag and the resulting segments.

RULES:
- All models use Field(description=...) for schema documentation
- Enum values match titlecase_filter.core.models exactly
- segments=None means the field is empty for this citation
- FieldResponse.segments is the rewritten text when handled, else the input
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from titlecase_filter.core.models import FieldScope, UppercaseMode
from titlecase_filter.host.models import (
    Citation,
    ComponentPart,
    Reference,
    TextUnit,
)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ReferenceModel(BaseModel):
    """The parts of a reference the language gate reads."""

    language: str = Field(
        default="",
        description="Free-text language field, e.g. 'en', 'English', 'de; en'.",
    )
    parent_reference: Optional[ReferenceModel] = Field(
        default=None,
        description="The containing work, if any.",
    )

    def to_host(self) -> Reference:
        parent = self.parent_reference.to_host() if self.parent_reference else None
        return Reference(language=self.language, parent_reference=parent)


ReferenceModel.model_rebuild()


class SettingsModel(BaseModel):
    """Optional per-request overrides of the environment settings."""

    ensure_english: Optional[bool] = Field(
        default=None,
        description="Only capitalize English references.",
    )
    convert_full_uppercase: Optional[UppercaseMode] = Field(
        default=None,
        description="Treatment of all-caps words: never, always or auto.",
    )
    locale: Optional[str] = Field(
        default=None,
        description="Locale tag for letter casing, e.g. 'en-us' or 'tr-tr'.",
    )


class FieldRequest(BaseModel):
    """One text field of one citation."""

    segments: Optional[List[str]] = Field(
        default=None,
        description="The field's text runs in order; null if the field is empty.",
    )
    scope: FieldScope = Field(
        default=FieldScope.REFERENCE,
        description="Whether the field belongs to the reference or its parent.",
    )
    reference: ReferenceModel = Field(
        default_factory=ReferenceModel,
        description="Reference whose language decides eligibility.",
    )
    settings: SettingsModel = Field(
        default_factory=SettingsModel,
        description="Overrides of the environment configuration.",
    )

    def to_citation(self) -> Citation:
        return Citation(reference=self.reference.to_host())

    def to_component_part(self) -> ComponentPart:
        units = None
        if self.segments is not None:
            units = [TextUnit(text=s) for s in self.segments]
        return ComponentPart(scope=self.scope, text_units=units)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FieldResponse(BaseModel):
    """Result of filtering one field."""

    handled: bool = Field(
        description="True if the segments were title-cased.",
    )
    segments: List[str] = Field(
        default_factory=list,
        description="Title-cased segments when handled, else the input segments.",
    )
