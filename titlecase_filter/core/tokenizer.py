"""Split segment text into classified tokens.

WHY: The word rules need to know, for every piece of a segment, whether
it is a word, sentence punctuation, a quotation mark, a separator or
whitespace, and the output must be reassembled from exactly the same
characters. A classify-then-scan tokenizer makes the recognised
character sets explicit and never drops or reorders anything.

HOW: classify_char() maps one character to a TokenKind. tokenize()
walks the text once: consecutive WORD characters are merged into one
token, every other character becomes a one-character token of its own.

RULES:
- "".join(t.text for t in tokenize(s)) == s for every string s
- Whitespace, hyphen, parentheses, quotes and . : ? ! split words
- Each splitting character is its own token (two spaces → two tokens)
- Apostrophes (') are part of words ("don't", "O'Neil")
"""

from __future__ import annotations

from typing import List

from titlecase_filter.core.models import Token, TokenKind

INTERPUNCTUATION: frozenset[str] = frozenset({".", ":", "?", "!"})

QUOTATION_MARKS: frozenset[str] = frozenset({
    "\"",
    "‘",  # Left Single Quotation Mark
    "’",  # Right Single Quotation Mark
    "‚",  # Single Low-9 Quotation Mark
    "“",  # Left Double Quotation Mark
    "”",  # Right Double Quotation Mark
    "„",  # Double Low-9 Quotation Mark
    "‟",  # Double High-Reversed-9 Quotation Mark
    "‹",  # Single Left-Pointing Angle Quotation Mark
    "›",  # Single Right-Pointing Angle Quotation Mark
    "«",  # Double Left-Pointing Angle Quotation Mark
    "»",  # Double Right-Pointing Angle Quotation Mark
})

SEPARATORS: frozenset[str] = frozenset({"-", "(", ")"})


def classify_char(char: str) -> TokenKind:
    """Return the token kind a single character belongs to."""
    if char.isspace():
        return TokenKind.WHITESPACE
    if char in QUOTATION_MARKS:
        return TokenKind.QUOTATION_MARK
    if char in SEPARATORS:
        return TokenKind.SEPARATOR
    if char in INTERPUNCTUATION:
        return TokenKind.INTERPUNCTUATION
    return TokenKind.WORD


def tokenize(text: str) -> List[Token]:
    """Tokenize one segment's text.

    Args:
        text: Raw segment text (may be empty).

    Returns:
        Tokens in text order; their texts concatenate back to ``text``.
    """
    tokens: List[Token] = []
    word_start = None

    for i, char in enumerate(text):
        kind = classify_char(char)
        if kind is TokenKind.WORD:
            if word_start is None:
                word_start = i
            continue

        if word_start is not None:
            tokens.append(Token(TokenKind.WORD, text[word_start:i]))
            word_start = None
        tokens.append(Token(kind, char))

    if word_start is not None:
        tokens.append(Token(TokenKind.WORD, text[word_start:]))

    return tokens
