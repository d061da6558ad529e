"""Hypothesis strategies for typedl10n property-based testing.

- translations: placeholder identifiers, translation text, locale tables

Usage:
    from tests.strategies.translations import identifiers, brace_free_text
"""

from .translations import (
    brace_free_text,
    identifiers,
    locale_codes,
    locale_tables,
    translation_texts,
    type_suffixes,
    typed_locale_tables,
)

__all__ = [
    "brace_free_text",
    "identifiers",
    "locale_codes",
    "locale_tables",
    "translation_texts",
    "type_suffixes",
    "typed_locale_tables",
]
