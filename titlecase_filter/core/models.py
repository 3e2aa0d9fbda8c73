"""Token, mode and settings dataclasses for the capitalization engine.

WHY: The tokenizer, the case folder and the rule engine all talk about
the same few things: a classified piece of text, the all-caps folding
mode, and the state carried from one token to the next. Keeping them in
one module gives every stage a single, well-typed vocabulary.

HOW: Enums for the closed sets (token kinds, uppercase modes, field
scopes), frozen dataclasses for values that are passed around and
replaced rather than mutated (Token, CarryState), and a plain dataclass
for the per-call settings.

RULES:
- Token.text is never empty; concatenating a segment's tokens gives the segment back
- CarryState is immutable — advancing it returns a new value
- CarryState.previous never holds a whitespace token
- CapitalizationSettings defaults match the host's documented defaults
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    """Classification of one token produced by the tokenizer."""

    WORD = "word"
    INTERPUNCTUATION = "interpunctuation"
    QUOTATION_MARK = "quotation_mark"
    SEPARATOR = "separator"
    WHITESPACE = "whitespace"


class UppercaseMode(str, Enum):
    """How words written entirely in upper case are treated.

    Example field 1: ``UN and US government made agreement``
    Example field 2: ``UN AND US GOVERNMENT MADE AGREEMENT``

    - NEVER:  1 → ``UN and US Government Made Agreement``,
              2 → ``UN and US GOVERNMENT MADE AGREEMENT``
    - ALWAYS: 1 → ``Un and Us Government Made Agreement``,
              2 → ``Un and Us Government Made Agreement``
    - AUTO:   1 → ``UN and US Government Made Agreement``,
              2 → ``Un and Us Government Made Agreement``
    """

    NEVER = "never"
    ALWAYS = "always"
    AUTO = "auto"


class FieldScope(str, Enum):
    """Which reference a text field belongs to.

    A field of a contribution (e.g. a chapter title) has scope
    REFERENCE; a field of the containing book rendered alongside it
    (e.g. the book title) has scope PARENT_REFERENCE.
    """

    REFERENCE = "reference"
    PARENT_REFERENCE = "parent_reference"


@dataclass(frozen=True)
class Token:
    """A maximal piece of segment text tagged with its kind."""

    kind: TokenKind
    text: str

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE


@dataclass(frozen=True)
class CarryState:
    """Previous-token history carried across the tokens of one field.

    Attributes:
        previous: The most recently emitted non-whitespace token, or
                  None at the start of the field.
        spaced: True if whitespace was emitted after ``previous``.
                A quotation mark only opens a quote for the word glued
                directly to it.
    """

    previous: Optional[Token] = None
    spaced: bool = False

    def advance(self, token: Token) -> "CarryState":
        """Return the state after emitting ``token``."""
        if token.is_whitespace:
            return replace(self, spaced=True)
        return CarryState(previous=token, spaced=False)

    @property
    def is_fresh(self) -> bool:
        """True when no non-whitespace token has been emitted yet."""
        return self.previous is None

    @property
    def follows_quotation_mark(self) -> bool:
        return (
            self.previous is not None
            and self.previous.kind is TokenKind.QUOTATION_MARK
            and not self.spaced
        )


@dataclass
class CapitalizationSettings:
    """Per-call configuration of the title-case filter.

    Attributes:
        ensure_english: Only capitalize fields whose resolved reference
                        language is English. False capitalizes every field.
        convert_full_uppercase: Treatment of words written entirely in
                                upper case.
        locale: Locale tag used for letter casing, e.g. ``"en-us"`` or
                ``"tr-tr"``.
    """

    ensure_english: bool = True
    convert_full_uppercase: UppercaseMode = UppercaseMode.NEVER
    locale: str = "en-us"
