"""Core utilities shared across syntax, tree and collection layers.

Exports:
    is_valid_identifier: Identifier grammar shared by parser and collector
    sanitize_key: Literal key to generated-code-safe identifier
    escape_translation: Template-literal escaping of translation text

Python 3.13+.
"""

from .identifier_validation import is_valid_identifier
from .sanitize import escape_translation, sanitize_key

__all__ = ["escape_translation", "is_valid_identifier", "sanitize_key"]
