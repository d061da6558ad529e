"""Tests for the placeholder lexer.

Covers valid placeholders, identifier errors, type errors, brace escapes,
nesting recovery, unclosed placeholders and UTF-8 byte offsets.
"""

from __future__ import annotations

from typedl10n.enums import InterpolationErrorKind, InterpolationType
from typedl10n.syntax.interpolation import (
    InterpolationParseError,
    ParsedInterpolations,
    parse_interpolations,
)


def _occurrences(text: str) -> list[tuple[str, InterpolationType, int, int]]:
    return [(o.name, o.type, o.start, o.end) for o in parse_interpolations(text).occurrences]


def _errors(text: str) -> list[tuple[InterpolationErrorKind, int, int, str]]:
    return [(e.kind, e.start, e.end, e.text) for e in parse_interpolations(text).errors]


# ============================================================================
# VALID PLACEHOLDERS
# ============================================================================


class TestValidPlaceholders:
    """Well-formed placeholders produce occurrences with inclusive spans."""

    def test_untyped(self) -> None:
        assert _occurrences("Hello {name}") == [("name", InterpolationType.NONE, 6, 11)]

    def test_number_type(self) -> None:
        assert _occurrences("Count: {count:number}") == [
            ("count", InterpolationType.NUMBER, 7, 20)
        ]

    def test_string_type(self) -> None:
        assert _occurrences("{name:string}") == [("name", InterpolationType.STRING, 0, 12)]

    def test_multiple(self) -> None:
        assert _occurrences("Multiple {firstName} {lastName}") == [
            ("firstName", InterpolationType.NONE, 9, 19),
            ("lastName", InterpolationType.NONE, 21, 30),
        ]

    def test_adjacent_placeholders_are_independent(self) -> None:
        assert _occurrences("{a}{b}{c}") == [
            ("a", InterpolationType.NONE, 0, 2),
            ("b", InterpolationType.NONE, 3, 5),
            ("c", InterpolationType.NONE, 6, 8),
        ]

    def test_identifier_with_digits_and_underscores(self) -> None:
        assert _occurrences("Mixed {value1} and {item_2}") == [
            ("value1", InterpolationType.NONE, 6, 13),
            ("item_2", InterpolationType.NONE, 19, 26),
        ]

    def test_empty_type_suffix_is_untyped(self) -> None:
        assert _occurrences("{a:}") == [("a", InterpolationType.NONE, 0, 3)]
        assert _errors("{a:}") == []

    def test_no_errors_for_valid_input(self) -> None:
        result = parse_interpolations("Mixed types: {name:string} has {count:number} items")
        assert not result.has_errors
        assert [o.name for o in result.occurrences] == ["name", "count"]


# ============================================================================
# FAST PATH AND ESCAPES
# ============================================================================


class TestEscapes:
    """Brace escapes and text without placeholders."""

    def test_no_brace_returns_empty_result(self) -> None:
        assert parse_interpolations("Only text no braces") == ParsedInterpolations()

    def test_escaped_literal(self) -> None:
        result = parse_interpolations("{{literal}}")
        assert result.occurrences == ()
        assert result.errors == ()

    def test_escape_next_to_placeholder(self) -> None:
        assert _occurrences("{name} and {{literal}}") == [("name", InterpolationType.NONE, 0, 5)]
        assert _occurrences("{{start}} {name}") == [("name", InterpolationType.NONE, 10, 15)]

    def test_double_escape(self) -> None:
        assert parse_interpolations("{{{{") == ParsedInterpolations()

    def test_escape_then_open_brace(self) -> None:
        assert _errors("{{{") == [(InterpolationErrorKind.UNCLOSED, 2, 3, "{")]

    def test_lone_closing_brace_is_text(self) -> None:
        assert parse_interpolations("Just } here") == ParsedInterpolations()

    def test_escaped_brace_inside_placeholder_invalidates_name(self) -> None:
        assert _errors("{a{{b}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 1, 5, "a{b"),
        ]
        assert _occurrences("{a{{b}") == []


# ============================================================================
# ERRORS
# ============================================================================


class TestIdentifierErrors:
    """Invalid names are reported with a span covering the name."""

    def test_digit_start(self) -> None:
        assert _errors("{123name}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 1, 8, "123name"),
        ]
        assert _occurrences("{123name}") == []

    def test_hyphen(self) -> None:
        assert _errors("{user-name}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 1, 10, "user-name"),
        ]

    def test_hyphen_after_text(self) -> None:
        assert _errors("Hyphen {user-name}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 8, 17, "user-name"),
        ]

    def test_underscore_start(self) -> None:
        assert _errors("{_name}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 1, 6, "_name"),
        ]

    def test_unicode_name_rejected_with_byte_span(self) -> None:
        assert _errors("Unicode {名前}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 9, 15, "名前"),
        ]

    def test_invalid_name_before_type(self) -> None:
        assert _errors("{1a:string}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 1, 3, "1a"),
        ]


class TestEmptyErrors:
    """Blank names."""

    def test_empty_braces(self) -> None:
        assert _errors("{}") == [(InterpolationErrorKind.EMPTY, 0, 2, "")]

    def test_empty_name_with_type(self) -> None:
        assert _errors("{:string}") == [(InterpolationErrorKind.EMPTY, 0, 2, "")]
        assert _occurrences("{:string}") == []

    def test_whitespace_name(self) -> None:
        assert _errors("{ }") == [(InterpolationErrorKind.EMPTY, 0, 3, " ")]


class TestTypeErrors:
    """Type suffixes outside the vocabulary."""

    def test_unknown_type(self) -> None:
        assert _errors("{count:int}") == [
            (InterpolationErrorKind.INVALID_TYPE, 7, 10, "int"),
        ]
        assert _occurrences("{count:int}") == []

    def test_second_colon_belongs_to_type(self) -> None:
        assert _errors("{a:b:c}") == [
            (InterpolationErrorKind.INVALID_TYPE, 3, 6, "b:c"),
        ]

    def test_none_is_not_a_spellable_type(self) -> None:
        assert _errors("{a:none}")[0][0] == InterpolationErrorKind.INVALID_TYPE


class TestRecovery:
    """Nesting and unclosed placeholders."""

    def test_nested_braces_single_error(self) -> None:
        assert _errors("{outer{inner}}") == [
            (InterpolationErrorKind.INVALID_IDENTIFIER, 0, 13, "{outer{inner}"),
        ]
        assert _occurrences("{outer{inner}}") == []

    def test_scanning_resumes_after_nesting_error(self) -> None:
        assert _occurrences("{a{b} {c}") == [("c", InterpolationType.NONE, 6, 8)]
        assert len(_errors("{a{b} {c}")) == 1

    def test_unclosed(self) -> None:
        assert _errors("{name without closing") == [
            (InterpolationErrorKind.UNCLOSED, 0, 21, "{name without closing"),
        ]

    def test_unclosed_after_valid(self) -> None:
        assert _occurrences("{a}{b") == [("a", InterpolationType.NONE, 0, 2)]
        assert _errors("{a}{b") == [(InterpolationErrorKind.UNCLOSED, 3, 5, "{b")]

    def test_closing_before_opening(self) -> None:
        assert _errors("} and { separate") == [
            (InterpolationErrorKind.UNCLOSED, 6, 16, "{ separate"),
        ]

    def test_all_errors_reported_in_one_pass(self) -> None:
        result = parse_interpolations("{1a} {b:int} {ok}")
        assert [e.kind for e in result.errors] == [
            InterpolationErrorKind.INVALID_IDENTIFIER,
            InterpolationErrorKind.INVALID_TYPE,
        ]
        assert [(o.name, o.start, o.end) for o in result.occurrences] == [("ok", 13, 16)]


# ============================================================================
# BYTE OFFSETS
# ============================================================================


class TestByteOffsets:
    """Spans are UTF-8 byte offsets."""

    def test_two_byte_character(self) -> None:
        assert _occurrences("Café {name}") == [("name", InterpolationType.NONE, 6, 11)]

    def test_four_byte_character(self) -> None:
        assert _occurrences("🎉 {party:number}") == [
            ("party", InterpolationType.NUMBER, 5, 18)
        ]

    def test_span_slices_encoded_text(self) -> None:
        text = "中文 {count:number} 测试"
        (occurrence,) = parse_interpolations(text).occurrences
        encoded = text.encode("utf-8")
        assert encoded[occurrence.start : occurrence.end + 1] == b"{count:number}"


class TestErrorMessages:
    """Human-readable messages."""

    def test_messages_mention_offending_text(self) -> None:
        error = InterpolationParseError(InterpolationErrorKind.INVALID_TYPE, 0, 1, "int")
        assert "'int'" in error.message
        error = InterpolationParseError(InterpolationErrorKind.INVALID_IDENTIFIER, 0, 1, "a-b")
        assert "'a-b'" in error.message

    def test_every_kind_has_message(self) -> None:
        for kind in InterpolationErrorKind:
            assert InterpolationParseError(kind, 0, 1).message
