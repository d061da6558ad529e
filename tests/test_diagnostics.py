"""Tests for the diagnostics accumulator, formatter and exceptions."""

from __future__ import annotations

import json

import pytest

from typedl10n.diagnostics import (
    CollectionError,
    DiagnosticFormatter,
    Diagnostics,
    FileRef,
    InterpolationErrors,
    InvalidFileNameError,
    InvalidInputDirectoryError,
    MismatchRef,
    MixedFileModesError,
    OutputFileExistsError,
    OutputFormat,
    RootNotTableError,
    TranslationFileError,
    Typedl10nError,
    UnsupportedValueType,
)
from typedl10n.enums import InterpolationType
from typedl10n.tree import build_module, build_namespaced_module

_EN = FileRef(None, "en", "en.toml")


@pytest.fixture
def mixed_diagnostics() -> Diagnostics:
    """Diagnostics holding one of each kind of record."""
    _, diagnostics = build_module({
        "en": {"x": 42, "bad": "Hi {user-name}", "count": "{n:number}"},
        "fr": {"count": "{n:string}"},
    })
    return diagnostics


# ============================================================================
# ACCUMULATOR
# ============================================================================


class TestDiagnostics:
    """Recording and iteration."""

    def test_new_is_empty(self) -> None:
        diagnostics = Diagnostics()
        assert diagnostics.is_empty()
        assert diagnostics.error_count == 0

    def test_key_diagnostics_sharing_path_are_kept(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.add_key_diagnostic(_EN, "x", UnsupportedValueType("integer"))
        diagnostics.add_key_diagnostic(_EN, "x", UnsupportedValueType("float"))

        assert diagnostics.file_diagnostics == {
            _EN: {"x": [UnsupportedValueType("integer"), UnsupportedValueType("float")]}
        }
        assert diagnostics.error_count == 2
        assert [found for _, _, found in diagnostics.iter_file_diagnostics()] == [
            UnsupportedValueType("integer"),
            UnsupportedValueType("float"),
        ]

    def test_extend_type_mismatch_joins_existing_conflict(self) -> None:
        diagnostics = Diagnostics()
        ref = MismatchRef(None, "count", "n")
        diagnostics.add_type_mismatch(
            ref, "fr", InterpolationType.STRING, InterpolationType.NUMBER, ["en"]
        )
        diagnostics.extend_type_mismatch(ref, "it", InterpolationType.NUMBER)

        assert diagnostics.type_mismatches[ref] == {
            ("en", InterpolationType.NUMBER),
            ("fr", InterpolationType.STRING),
            ("it", InterpolationType.NUMBER),
        }

    def test_extend_type_mismatch_without_conflict_is_noop(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.extend_type_mismatch(
            MismatchRef(None, "count", "n"), "it", InterpolationType.NUMBER
        )
        assert diagnostics.is_empty()

    def test_type_mismatch_accumulates(self) -> None:
        diagnostics = Diagnostics()
        ref = MismatchRef(None, "count", "n")
        diagnostics.add_type_mismatch(
            ref, "fr", InterpolationType.STRING, InterpolationType.NUMBER, ["en"]
        )
        diagnostics.add_type_mismatch(
            ref, "de", InterpolationType.NONE, InterpolationType.NUMBER, ["en"]
        )

        assert diagnostics.type_mismatches[ref] == {
            ("en", InterpolationType.NUMBER),
            ("fr", InterpolationType.STRING),
            ("de", InterpolationType.NONE),
        }
        assert diagnostics.error_count == 1

    def test_error_count(self, mixed_diagnostics: Diagnostics) -> None:
        assert mixed_diagnostics.error_count == 3

    def test_iteration_order(self) -> None:
        diagnostics = Diagnostics()
        fr = FileRef(None, "fr", "fr.toml")
        diagnostics.add_key_diagnostic(fr, "b", UnsupportedValueType("integer"))
        diagnostics.add_key_diagnostic(_EN, "z", UnsupportedValueType("integer"))
        diagnostics.add_key_diagnostic(_EN, "a", UnsupportedValueType("integer"))

        assert [(ref.locale, path) for ref, path, _ in diagnostics.iter_file_diagnostics()] == [
            ("en", "a"),
            ("en", "z"),
            ("fr", "b"),
        ]

    def test_mismatch_pairs_sorted(self, mixed_diagnostics: Diagnostics) -> None:
        ((ref, competing),) = list(mixed_diagnostics.iter_type_mismatches())
        assert ref == MismatchRef(None, "count", "n")
        assert competing == (("en", InterpolationType.NUMBER), ("fr", InterpolationType.STRING))


# ============================================================================
# FORMATTER
# ============================================================================


class TestSimpleFormat:
    """One line per issue."""

    def test_lines(self, mixed_diagnostics: Diagnostics) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(mixed_diagnostics)

        assert output.splitlines() == [
            "en.toml:bad: invalid-identifier: Invalid interpolation identifier "
            "'user-name': must match [a-zA-Z][a-zA-Z0-9_]*",
            "en.toml:x: unsupported-value-type: Unsupported value type: integer",
            "count: interpolation-type-mismatch: n (en=number, fr=string)",
        ]

    def test_namespace_prefix(self) -> None:
        _, diagnostics = build_namespaced_module({
            "shop": {"en": {"c": "{n:number}"}, "fr": {"c": "{n}"}},
        })
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostics)
        assert output == "shop:c: interpolation-type-mismatch: n (en=number, fr=none)"

    def test_empty(self) -> None:
        assert DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(Diagnostics()) == ""


class TestTextFormat:
    """Compiler-style blocks."""

    def test_unsupported_value(self) -> None:
        _, diagnostics = build_module({"en": {"x": 42}})
        output = DiagnosticFormatter().format(diagnostics)

        assert output == (
            "error[unsupported-value-type]: Unsupported value type: integer\n"
            "  --> en.toml: x"
        )

    def test_interpolation_errors_underlined(self) -> None:
        _, diagnostics = build_module({"en": {"k": "{user-name}"}})
        output = DiagnosticFormatter().format(diagnostics)

        assert "error[interpolation-errors]: Interpolation errors found" in output
        assert "   | {user-name}" in output
        assert "   |  ^^^^^^^^^ Invalid interpolation identifier 'user-name'" in output

    def test_underline_counts_characters_not_bytes(self) -> None:
        _, diagnostics = build_module({"en": {"k": "Unicode {名前}"}})
        output = DiagnosticFormatter().format(diagnostics)

        assert "   | " + " " * 9 + "^^ Invalid" in output

    def test_mismatch_lists_every_locale(self, mixed_diagnostics: Diagnostics) -> None:
        output = DiagnosticFormatter().format(mixed_diagnostics)

        assert "error[interpolation-type-mismatch]: Interpolation n in key count" in output
        assert "  = locale en defines type as: number" in output
        assert "  = locale fr defines type as: string" in output

    def test_mismatch_shows_namespace(self) -> None:
        _, diagnostics = build_namespaced_module({
            "shop": {"en": {"c": "{n:number}"}, "fr": {"c": "{n}"}},
        })
        assert "  --> namespace shop" in DiagnosticFormatter().format(diagnostics)

    def test_color(self) -> None:
        _, diagnostics = build_module({"en": {"x": 42}})
        output = DiagnosticFormatter(color=True).format(diagnostics)
        assert "\033[1;31merror\033[0m" in output


class TestJsonFormat:
    """Machine-readable records."""

    def test_records(self, mixed_diagnostics: Diagnostics) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        records = json.loads(formatter.format(mixed_diagnostics))

        assert [record["code"] for record in records] == [
            "interpolation-errors",
            "unsupported-value-type",
            "interpolation-type-mismatch",
        ]
        errors = records[0]["errors"]
        assert errors == [
            {
                "kind": "invalid-identifier",
                "message": "Invalid interpolation identifier 'user-name': "
                "must match [a-zA-Z][a-zA-Z0-9_]*",
                "start": 4,
                "end": 13,
                "text": "user-name",
            }
        ]
        assert records[1]["value_type"] == "integer"
        assert records[1]["namespace"] is None
        assert records[2]["types"] == [
            {"locale": "en", "type": "number"},
            {"locale": "fr", "type": "string"},
        ]

    def test_empty(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        assert json.loads(formatter.format(Diagnostics())) == []


class TestSummary:
    """Issue counts."""

    def test_no_issues(self) -> None:
        assert DiagnosticFormatter().summary(Diagnostics()) == "No issues found"

    def test_issue_count(self, mixed_diagnostics: Diagnostics) -> None:
        assert DiagnosticFormatter().summary(mixed_diagnostics) == "Found 3 issue(s)"


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Fatal error hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidInputDirectoryError("/nope"),
            InvalidFileNameError("a.b.c.toml"),
            MixedFileModesError(),
            TranslationFileError("en.toml", "bad"),
        ],
    )
    def test_collection_errors(self, error: CollectionError) -> None:
        assert isinstance(error, CollectionError)
        assert isinstance(error, Typedl10nError)

    def test_messages(self) -> None:
        assert str(InvalidInputDirectoryError("/nope")) == "Path is not a directory: /nope"
        assert str(MixedFileModesError()) == "Found both flat and namespaced files"
        assert str(OutputFileExistsError("out")) == "File exists at output path out"
        assert str(RootNotTableError("en", "array")) == (
            "Root of locale 'en' must be a table, got array"
        )

    def test_interpolation_errors_record(self) -> None:
        record = InterpolationErrors("x", ())
        assert record.code == "interpolation-errors"
        assert record.message == "Interpolation errors found"
