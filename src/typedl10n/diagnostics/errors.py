"""typedl10n exception hierarchy.

Only fatal conditions are exceptions. Content problems (placeholder syntax,
unsupported values, type mismatches) are never raised; they are collected in
Diagnostics and the build continues.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "CollectionError",
    "InvalidFileNameError",
    "InvalidInputDirectoryError",
    "MixedFileModesError",
    "OutputFileExistsError",
    "RootNotTableError",
    "TranslationFileError",
    "Typedl10nError",
]


class Typedl10nError(Exception):
    """Base exception for all typedl10n errors."""


class RootNotTableError(Typedl10nError):
    """Top-level value of a locale is not a table.

    Aborts the build; no partial module is returned.

    Attributes:
        locale: Offending locale
        value_type: Type name of the root value
        namespace: Namespace of the table (None in flat mode)
    """

    def __init__(self, locale: str, value_type: str, namespace: str | None = None) -> None:
        where = f"locale '{locale}'" if namespace is None else f"'{namespace}.{locale}'"
        super().__init__(f"Root of {where} must be a table, got {value_type}")
        self.locale = locale
        self.value_type = value_type
        self.namespace = namespace


class CollectionError(Typedl10nError):
    """Failure while discovering or reading translation files."""


class InvalidInputDirectoryError(CollectionError):
    """Input path is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path is not a directory: {path}")
        self.path = path


class InvalidFileNameError(CollectionError):
    """Namespaced file name is not 'namespace.locale.toml'."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"Invalid file name: {filename}, expected flat or namespaced format"
        )
        self.filename = filename


class MixedFileModesError(CollectionError):
    """Directory contains both flat and namespaced translation files."""

    def __init__(self) -> None:
        super().__init__("Found both flat and namespaced files")


class TranslationFileError(CollectionError):
    """Translation file could not be read or deserialized.

    The underlying OSError or tomllib.TOMLDecodeError is chained as __cause__.
    """

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Error parsing translation file {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class OutputFileExistsError(Typedl10nError):
    """Output path exists and is a file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File exists at output path {path}")
        self.path = path
