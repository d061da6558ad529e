"""Shared constants for typedl10n.

Centralized configuration constants used across the collection, tree and
generation packages. Placing constants here avoids circular imports.

Constants are grouped by domain:
- Input: translation file discovery
- Output: generated code layout and placeholder syntax
- Locales: default locale for the generated runtime

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input
    "TRANSLATION_FILE_SUFFIX",
    "NAMESPACE_SEPARATOR",
    "KEY_PATH_SEPARATOR",
    # Output
    "DEFAULT_OUTPUT_DIR",
    "PLACEHOLDER_TEMPLATE",
    "ROOT_MODULE_FILENAME",
    "INDEX_FILENAME",
    # Locales
    "DEFAULT_LOCALE",
]

# ============================================================================
# INPUT
# ============================================================================

TRANSLATION_FILE_SUFFIX: str = ".toml"
"""Only files with this suffix are considered translation files."""

NAMESPACE_SEPARATOR: str = "."
"""Separates namespace and locale in namespaced file stems (common.en.toml)."""

KEY_PATH_SEPARATOR: str = "."
"""Joins literal key segments into dotted diagnostic paths."""

# ============================================================================
# OUTPUT
# ============================================================================

DEFAULT_OUTPUT_DIR: str = "messages"

PLACEHOLDER_TEMPLATE: str = "${{args.{name}}}"
"""Output-placeholder token; {name} receives the sanitized placeholder key."""

ROOT_MODULE_FILENAME: str = "root.ts"
INDEX_FILENAME: str = "index.ts"

# ============================================================================
# LOCALES
# ============================================================================

DEFAULT_LOCALE: str = "en"
