"""Unified identifier validation for placeholder and namespace names.

This module provides the single source of truth for the identifier grammar,
shared by the interpolation parser (placeholder names) and the file collector
(namespace names in namespaced file stems).

Identifier Grammar:
    [a-zA-Z][a-zA-Z0-9_]*

    - Start: ASCII letter (a-z, A-Z)
    - Continue: ASCII letter, ASCII digit, or underscore

Unicode letters are rejected on purpose: generated accessors must stay valid
identifiers in every target language.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "is_valid_identifier",
]

_IDENTIFIER_CONTINUATION_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_]*$")


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier.

    Python's str.isalpha() accepts Unicode letters (e.g., 'é'), so the
    ASCII check comes first.

    Example:
        >>> is_identifier_start('a')
        True
        >>> is_identifier_start('1')
        False
        >>> is_identifier_start('é')
        False
    """
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier.

    Example:
        >>> is_identifier_char('_')
        True
        >>> is_identifier_char('-')
        False
    """
    return len(ch) == 1 and ch.isascii() and (ch.isalnum() or ch == "_")


def is_valid_identifier(name: str) -> bool:
    """Validate complete identifier.

    Args:
        name: Identifier string to validate

    Returns:
        True if name matches [a-zA-Z][a-zA-Z0-9_]*, False otherwise

    Example:
        >>> is_valid_identifier("user_name2")
        True
        >>> is_valid_identifier("user-name")
        False
        >>> is_valid_identifier("")
        False
    """
    if not name:
        return False

    if not is_identifier_start(name[0]):
        return False

    return _IDENTIFIER_CONTINUATION_PATTERN.match(name[1:]) is not None
