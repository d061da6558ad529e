"""Diagnostics accumulator for tree builds.

A Diagnostics instance is created empty at build start, passed explicitly
through every recursive call of the builder, and returned alongside the
module tree. It is never global.

Two aggregations are kept:
    file_diagnostics: structural problems per (namespace, locale, source) and
        dotted key path (unsupported values, placeholder syntax errors)
    type_mismatches: per (namespace, path, placeholder) the full set of
        (locale, type) pairs that disagree

Each record carries everything a renderer needs; no further lookups into the
tree are required to report it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from typedl10n.enums import InterpolationType
from typedl10n.syntax.interpolation import InterpolationParseError

__all__ = [
    "Diagnostics",
    "FileRef",
    "InterpolationErrors",
    "KeyDiagnostic",
    "MismatchRef",
    "UnsupportedValueType",
]


@dataclass(frozen=True, slots=True)
class FileRef:
    """Source of a structural diagnostic.

    Attributes:
        namespace: Namespace of the file (None in flat mode)
        locale: Locale of the file
        source: Normalized source identifier (e.g., 'common.en.toml')
    """

    namespace: str | None
    locale: str
    source: str

    def sort_key(self) -> tuple[str, str, str]:
        return (self.namespace or "", self.locale, self.source)


@dataclass(frozen=True, slots=True)
class MismatchRef:
    """Placeholder whose type differs between locales.

    Attributes:
        namespace: Namespace of the message (None in flat mode)
        path: Dotted literal key path of the message
        name: Placeholder name
    """

    namespace: str | None
    path: str
    name: str

    def sort_key(self) -> tuple[str, str, str]:
        return (self.namespace or "", self.path, self.name)


@dataclass(frozen=True, slots=True)
class UnsupportedValueType:
    """Key holds a value that is neither a string nor a table."""

    value_type: str

    code = "unsupported-value-type"

    @property
    def message(self) -> str:
        return f"Unsupported value type: {self.value_type}"


@dataclass(frozen=True, slots=True)
class InterpolationErrors:
    """Translation contains malformed placeholders.

    Attributes:
        source_text: Translation as written in the source file; error spans
            index into its UTF-8 encoding
        errors: Every error found in one pass
    """

    source_text: str
    errors: tuple[InterpolationParseError, ...]

    code = "interpolation-errors"

    @property
    def message(self) -> str:
        return "Interpolation errors found"


type KeyDiagnostic = UnsupportedValueType | InterpolationErrors


@dataclass(slots=True)
class Diagnostics:
    """Mutable accumulator of non-fatal build problems."""

    file_diagnostics: dict[FileRef, dict[str, list[KeyDiagnostic]]] = field(default_factory=dict)
    type_mismatches: dict[MismatchRef, set[tuple[str, InterpolationType]]] = field(
        default_factory=dict
    )

    def add_key_diagnostic(self, ref: FileRef, path: str, diagnostic: KeyDiagnostic) -> None:
        """Record a structural problem at a dotted key path.

        A quoted key containing the separator ('"a.b" = ...') and a nested
        key (a.b) share one path, so every problem recorded there is kept.
        """
        self.file_diagnostics.setdefault(ref, {}).setdefault(path, []).append(diagnostic)

    def add_type_mismatch(
        self,
        ref: MismatchRef,
        locale: str,
        found: InterpolationType,
        existing: InterpolationType,
        existing_locales: Iterable[str],
    ) -> None:
        """Record a placeholder type conflict.

        Args:
            ref: Message path and placeholder name
            locale: Locale that brought the conflicting type
            found: Type parsed in that locale
            existing: Type already on file for the placeholder
            existing_locales: Locales whose ranges carry the existing type
        """
        entry = self.type_mismatches.setdefault(ref, set())
        entry.update((other, existing) for other in existing_locales)
        entry.add((locale, found))

    def extend_type_mismatch(
        self, ref: MismatchRef, locale: str, agreeing: InterpolationType
    ) -> None:
        """Add a locale that agrees with the type on file to an existing conflict.

        No-op when no conflict has been recorded for ref.
        """
        entry = self.type_mismatches.get(ref)
        if entry is not None:
            entry.add((locale, agreeing))

    def is_empty(self) -> bool:
        return not self.file_diagnostics and not self.type_mismatches

    @property
    def error_count(self) -> int:
        """Total number of recorded issues (keys plus mismatches)."""
        key_count = sum(
            len(found) for keys in self.file_diagnostics.values() for found in keys.values()
        )
        return key_count + len(self.type_mismatches)

    def iter_file_diagnostics(self) -> Iterator[tuple[FileRef, str, KeyDiagnostic]]:
        """Yield (file, path, diagnostic) in deterministic order.

        Diagnostics sharing a path keep their recording order.
        """
        for ref in sorted(self.file_diagnostics, key=FileRef.sort_key):
            keys = self.file_diagnostics[ref]
            for path in sorted(keys):
                for diagnostic in keys[path]:
                    yield ref, path, diagnostic

    def iter_type_mismatches(
        self,
    ) -> Iterator[tuple[MismatchRef, tuple[tuple[str, InterpolationType], ...]]]:
        """Yield (placeholder, sorted competing (locale, type) pairs)."""
        for ref in sorted(self.type_mismatches, key=MismatchRef.sort_key):
            yield ref, tuple(sorted(self.type_mismatches[ref]))
