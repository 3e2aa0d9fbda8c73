"""Title-case rule engine.

WHY: A host renders one text field as a list of segments (formatting
runs such as plain text followed by italics). Title casing has to treat
the whole field as one title — "The" opens the field, not every
segment — while writing each segment back separately. The decision for
a word depends on the token before it, which may sit in the previous
segment.

HOW: decide_fold_full_uppercase() settles the all-caps treatment once
for the field. capitalize_segment() tokenizes one segment and applies
the word rules, taking a CarryState in and handing the updated one
back. capitalize_field() threads that state through all segments, and
apply_to_text_units() writes the results into the host's objects.

RULES (word tokens — words, quotation marks, separators):
1. First word token of the first segment → capitalize
2. First word token of a later segment, nothing emitted yet, not a
   stopword → capitalize
3. Same as 2 but a stopword → leave as is
4. Word glued to a preceding quotation mark → capitalize (even stopwords)
5. Stopword → lower case
6. Anything else → capitalize
- Interpunctuation (. : ? !) is emitted unchanged and becomes "previous"
- Whitespace is emitted unchanged and never becomes "previous"
- Text units are only written once every segment has been computed
"""

from __future__ import annotations

from typing import AbstractSet, Any, List, Optional, Sequence, Tuple

from titlecase_filter.config import STOPWORDS
from titlecase_filter.core.casing import capitalize_word, has_lowercase, lowercase_word
from titlecase_filter.core.models import CarryState, Token, TokenKind, UppercaseMode
from titlecase_filter.core.tokenizer import tokenize


def decide_fold_full_uppercase(full_text: str, mode: UppercaseMode) -> bool:
    """Decide once per field whether capitalized words get their tail lowered.

    RULES:
    - NEVER → False
    - ALWAYS → True
    - AUTO → True only if the field has no lower-case letter at all
      (the whole field is shouting; a lone all-caps word in a normal
      title is an acronym and stays)
    """
    if mode is UppercaseMode.NEVER:
        return False
    if mode is UppercaseMode.ALWAYS:
        return True
    if mode is UppercaseMode.AUTO:
        return not has_lowercase(full_text)
    raise ValueError("Unknown uppercase mode: {!r}".format(mode))


def _transform_word(
    token: Token,
    state: CarryState,
    first_in_segment: bool,
    first_segment: bool,
    fold_full_uppercase: bool,
    locale: str,
    exceptions: AbstractSet[str],
) -> str:
    """Apply the word rules to one word-like token."""
    word = token.text
    is_stopword = lowercase_word(word, locale) in exceptions

    if first_in_segment and first_segment:
        return capitalize_word(word, fold_full_uppercase, locale)
    if first_in_segment and state.is_fresh:
        if is_stopword:
            return word
        return capitalize_word(word, fold_full_uppercase, locale)
    if state.follows_quotation_mark:
        return capitalize_word(word, fold_full_uppercase, locale)
    if is_stopword:
        return lowercase_word(word, locale)
    return capitalize_word(word, fold_full_uppercase, locale)


def capitalize_segment(
    text: str,
    state: CarryState,
    *,
    first_segment: bool,
    fold_full_uppercase: bool = False,
    locale: str = "en-us",
    exceptions: AbstractSet[str] = STOPWORDS,
) -> Tuple[str, CarryState]:
    """Title-case one segment.

    Args:
        text: Raw segment text.
        state: Carry state left by the previous segment (CarryState()
               for the first segment of a field).
        first_segment: True for the first segment of the field.
        fold_full_uppercase: Lower the tail of every capitalized word.
        locale: Locale tag for the case mappings.
        exceptions: Lowercase stopwords.

    Returns:
        The new segment text and the carry state for the next segment.
    """
    parts: List[str] = []
    first_in_segment = True

    for token in tokenize(text):
        if token.kind is TokenKind.INTERPUNCTUATION or token.is_whitespace:
            parts.append(token.text)
            state = state.advance(token)
            continue

        parts.append(_transform_word(
            token,
            state,
            first_in_segment,
            first_segment,
            fold_full_uppercase,
            locale,
            exceptions,
        ))
        first_in_segment = False
        state = state.advance(token)

    return "".join(parts), state


def capitalize_field(
    segments: Sequence[str],
    *,
    fold_full_uppercase: bool = False,
    locale: str = "en-us",
    exceptions: AbstractSet[str] = STOPWORDS,
) -> List[str]:
    """Title-case all segments of one field, in order.

    The carry state flows from each segment into the next, so a segment
    boundary inside a title behaves like any other position.
    """
    state = CarryState()
    result: List[str] = []
    for index, text in enumerate(segments):
        new_text, state = capitalize_segment(
            text,
            state,
            first_segment=(index == 0),
            fold_full_uppercase=fold_full_uppercase,
            locale=locale,
            exceptions=exceptions,
        )
        result.append(new_text)
    return result


def apply_to_text_units(
    text_units: Optional[Sequence[Any]],
    *,
    mode: UppercaseMode = UppercaseMode.NEVER,
    locale: str = "en-us",
    exceptions: AbstractSet[str] = STOPWORDS,
) -> bool:
    """Title-case host text units in place.

    Args:
        text_units: Objects with a mutable ``text`` attribute, in field order.
        mode: Treatment of all-caps words; decided once on the joined text.
        locale: Locale tag for the case mappings.
        exceptions: Lowercase stopwords.

    Returns:
        True if the units were rewritten, False if there was nothing to do
        (None or empty sequence).
    """
    if not text_units:
        return False

    texts = [unit.text or "" for unit in text_units]
    fold = decide_fold_full_uppercase("".join(texts), mode)
    new_texts = capitalize_field(
        texts,
        fold_full_uppercase=fold,
        locale=locale,
        exceptions=exceptions,
    )

    for unit, new_text in zip(text_units, new_texts):
        unit.text = new_text
    return True
