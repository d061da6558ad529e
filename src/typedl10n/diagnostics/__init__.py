"""Diagnostic system for translation builds.

Provides the non-fatal diagnostics accumulator, its formatter, and the
exception hierarchy for fatal errors.

Python 3.13+. Zero external dependencies.
"""

from .collector import (
    Diagnostics,
    FileRef,
    InterpolationErrors,
    KeyDiagnostic,
    MismatchRef,
    UnsupportedValueType,
)
from .errors import (
    CollectionError,
    InvalidFileNameError,
    InvalidInputDirectoryError,
    MixedFileModesError,
    OutputFileExistsError,
    RootNotTableError,
    TranslationFileError,
    Typedl10nError,
)
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "CollectionError",
    "DiagnosticFormatter",
    "Diagnostics",
    "FileRef",
    "InterpolationErrors",
    "InvalidFileNameError",
    "InvalidInputDirectoryError",
    "KeyDiagnostic",
    "MismatchRef",
    "MixedFileModesError",
    "OutputFileExistsError",
    "OutputFormat",
    "RootNotTableError",
    "TranslationFileError",
    "Typedl10nError",
    "UnsupportedValueType",
]
