"""Locale utilities backed by Babel's CLDR data.

Locales are opaque, case-sensitive strings to the compiler; these helpers
only add optional metadata for logging and generated comments. Every
function degrades gracefully when Babel is not installed.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from typedl10n.core.babel_compat import (
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("fr-CA")
        'fr_CA'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale | None:
    """Parse a locale code with Babel, caching the result.

    Returns:
        Babel Locale, or None when Babel is missing or the code is unknown
    """
    if not is_babel_available():
        return None

    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return locale_class.parse(normalize_locale(locale_code))
    except (unknown_locale_error, ValueError):
        return None


def is_known_locale(locale_code: str) -> bool | None:
    """Check a locale code against CLDR.

    Returns:
        True/False when Babel is installed, None when it cannot be checked
    """
    if not is_babel_available():
        return None
    return get_babel_locale(locale_code) is not None


def locale_display_name(locale_code: str) -> str | None:
    """English display name of a locale (e.g. 'French (Canada)').

    Returns:
        Display name, or None when unavailable
    """
    locale = get_babel_locale(locale_code)
    if locale is None:
        return None
    return locale.get_display_name("en")
