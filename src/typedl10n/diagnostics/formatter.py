"""Diagnostic formatting service.

Renders a Diagnostics accumulator into human-readable or machine-readable
output. Rendering never consults the module tree: every record carries its
own path, locale, namespace and competing types.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum

from .collector import (
    Diagnostics,
    FileRef,
    InterpolationErrors,
    KeyDiagnostic,
    MismatchRef,
    UnsupportedValueType,
)

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_MISMATCH_CODE = "interpolation-type-mismatch"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    TEXT = "text"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # One line per issue
    JSON = "json"  # JSON array for tooling integration


def _column_of(text: str, byte_offset: int) -> int:
    """Convert a UTF-8 byte offset into a code point column (0-indexed)."""
    return len(text.encode("utf-8")[:byte_offset].decode("utf-8", errors="ignore"))


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (text, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> from typedl10n.tree.builder import build_module
        >>> _, diagnostics = build_module({"en": {"x": 42}})
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostics))
        en.toml:x: unsupported-value-type: Unsupported value type: integer
    """

    output_format: OutputFormat = OutputFormat.TEXT
    color: bool = False

    def format(self, diagnostics: Diagnostics) -> str:
        """Format every recorded issue.

        Returns:
            Formatted string; empty when there is nothing to report
        """
        match self.output_format:
            case OutputFormat.TEXT:
                return self._format_text(diagnostics)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostics)
            case OutputFormat.JSON:
                return self._format_json(diagnostics)

    def summary(self, diagnostics: Diagnostics) -> str:
        """One-line count of recorded issues."""
        if diagnostics.is_empty():
            return "No issues found"
        return f"Found {diagnostics.error_count} issue(s)"

    # ------------------------------------------------------------------
    # TEXT
    # ------------------------------------------------------------------

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"\033[{code}m{text}\033[0m"

    def _heading(self, code: str, message: str) -> str:
        return f"{self._paint('error', '1;31')}[{code}]: {message}"

    def _format_key_text(self, ref: FileRef, path: str, diagnostic: KeyDiagnostic) -> str:
        location = f"  --> {self._paint(ref.source, '32')}: {self._paint(path, '33')}"
        match diagnostic:
            case UnsupportedValueType():
                return "\n".join(
                    (self._heading(diagnostic.code, diagnostic.message), location)
                )
            case InterpolationErrors(source_text=source_text, errors=errors):
                parts = [self._heading(diagnostic.code, diagnostic.message), location, "   |"]
                parts.append(f"   | {source_text}")
                for error in errors:
                    column = _column_of(source_text, error.start)
                    width = max(1, _column_of(source_text, error.end) - column)
                    underline = self._paint("^" * width, "1;31")
                    parts.append(f"   | {' ' * column}{underline} {error.message}")
                return "\n".join(parts)

    def _format_mismatch_text(
        self, ref: MismatchRef, competing: tuple[tuple[str, str], ...]
    ) -> str:
        message = (
            f"Interpolation {self._paint(ref.name, '36')} in key "
            f"{self._paint(ref.path, '33')} has different types between locales"
        )
        parts = [self._heading(_MISMATCH_CODE, message)]
        if ref.namespace is not None:
            parts.append(f"  --> namespace {self._paint(ref.namespace, '32')}")
        for locale, type_ in competing:
            parts.append(
                f"  = locale {self._paint(locale, '34')} defines type as: "
                f"{self._paint(type_, '35')}"
            )
        return "\n".join(parts)

    def _format_text(self, diagnostics: Diagnostics) -> str:
        blocks = [
            self._format_key_text(ref, path, diagnostic)
            for ref, path, diagnostic in diagnostics.iter_file_diagnostics()
        ]
        blocks.extend(
            self._format_mismatch_text(ref, competing)
            for ref, competing in diagnostics.iter_type_mismatches()
        )
        return "\n\n".join(blocks)

    # ------------------------------------------------------------------
    # SIMPLE
    # ------------------------------------------------------------------

    def _format_simple(self, diagnostics: Diagnostics) -> str:
        lines: list[str] = []
        for ref, path, diagnostic in diagnostics.iter_file_diagnostics():
            match diagnostic:
                case UnsupportedValueType():
                    lines.append(f"{ref.source}:{path}: {diagnostic.code}: {diagnostic.message}")
                case InterpolationErrors(errors=errors):
                    lines.extend(
                        f"{ref.source}:{path}: {error.kind}: {error.message}" for error in errors
                    )
        for ref, competing in diagnostics.iter_type_mismatches():
            prefix = ref.path if ref.namespace is None else f"{ref.namespace}:{ref.path}"
            types = ", ".join(f"{locale}={type_}" for locale, type_ in competing)
            lines.append(f"{prefix}: {_MISMATCH_CODE}: {ref.name} ({types})")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def _format_json(self, diagnostics: Diagnostics) -> str:
        records: list[dict[str, object]] = []
        for ref, path, diagnostic in diagnostics.iter_file_diagnostics():
            record: dict[str, object] = {
                "code": diagnostic.code,
                "message": diagnostic.message,
                "namespace": ref.namespace,
                "locale": ref.locale,
                "source": ref.source,
                "path": path,
            }
            match diagnostic:
                case UnsupportedValueType(value_type=value_type):
                    record["value_type"] = value_type
                case InterpolationErrors(source_text=source_text, errors=errors):
                    record["text"] = source_text
                    record["errors"] = [
                        {
                            "kind": str(error.kind),
                            "message": error.message,
                            "start": error.start,
                            "end": error.end,
                            "text": error.text,
                        }
                        for error in errors
                    ]
            records.append(record)

        for ref, competing in diagnostics.iter_type_mismatches():
            records.append(
                {
                    "code": _MISMATCH_CODE,
                    "namespace": ref.namespace,
                    "path": ref.path,
                    "name": ref.name,
                    "types": [
                        {"locale": locale, "type": str(type_)} for locale, type_ in competing
                    ],
                }
            )
        return json.dumps(records, ensure_ascii=False, indent=2)
