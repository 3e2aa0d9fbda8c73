"""Core tokenization, casing and rule-engine modules.

WHY: The core package contains the only real decision logic of the
filter: which words get capitalized, lowered or left alone. It knows
nothing about citations beyond a reference's language fields.

HOW: models.py defines the shared types, casing.py the per-word case
mappings, tokenizer.py the character classification, language.py the
English gate, and engine.py the stateful word rules.

RULES:
- Pure functions over strings and small immutable values
- No logging and no host objects in the core
- The locale is always passed in explicitly
"""
