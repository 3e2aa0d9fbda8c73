"""Title-case filter for citation text fields.

WHY: Reference managers store titles the way they were typed or
imported: all lower case, all caps, or sentence case. Citation styles
for English-language sources want English title case. This package
rewrites one text field at a time without touching a single character
other than letter case.

HOW: Three-stage pipeline — gate (is the reference English?), decide
(should all-caps words be folded?), capitalize (tokenize each segment
and apply the word rules with state carried across segments). The
host boundary in ``titlecase_filter.host`` wires the stages to a
citation object and reports whether the field was handled.

RULES:
- Only letter case ever changes; whitespace, punctuation and quotes stay put
- Every call is self-contained — no module-level mutable state
- Missing host data means "not handled", never an exception
"""

__version__ = "0.1.0"
