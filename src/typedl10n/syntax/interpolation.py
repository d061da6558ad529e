"""Interpolation lexer for translation strings.

Recognizes placeholders inside one translation string:

    {name}          untyped placeholder
    {name:string}   typed placeholder (vocabulary: string, number)
    {{              escape for a literal '{' (never a placeholder)

Design Philosophy:
    - Never raises: malformed input becomes InterpolationParseError entries
    - Error recovery, not early exit: one pass reports every problem
    - One error per malformed block: after an error the scanner resynchronizes
      on the next '}' so errors do not cascade
    - Offsets are UTF-8 byte offsets into the scanned text, so spans stay
      meaningful to tools that operate on encoded output

Spans:
    Occurrence.start/end are INCLUSIVE (opening brace through closing brace).
    InterpolationParseError.start/end are HALF-OPEN [start, end).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from typedl10n.core.identifier_validation import is_valid_identifier
from typedl10n.enums import InterpolationErrorKind, InterpolationType

__all__ = [
    "InterpolationParseError",
    "Occurrence",
    "ParsedInterpolations",
    "parse_interpolations",
]


@dataclass(frozen=True, slots=True)
class Occurrence:
    """One recognized placeholder.

    Attributes:
        name: Placeholder name as written
        type: Parsed type tag (NONE when no suffix was given)
        start: Byte offset of the opening brace
        end: Byte offset of the closing brace (inclusive)
    """

    name: str
    type: InterpolationType
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class InterpolationParseError:
    """Structured placeholder syntax error.

    Attributes:
        kind: Error kind
        start: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)
        text: Offending text (name, type suffix, or malformed region)
    """

    kind: InterpolationErrorKind
    start: int
    end: int
    text: str = ""

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        match self.kind:
            case InterpolationErrorKind.EMPTY:
                return "Interpolation name is empty"
            case InterpolationErrorKind.INVALID_IDENTIFIER:
                return (
                    f"Invalid interpolation identifier {self.text!r}: "
                    "must match [a-zA-Z][a-zA-Z0-9_]*"
                )
            case InterpolationErrorKind.INVALID_TYPE:
                return (
                    f"Invalid interpolation type {self.text!r}: "
                    "expected 'string' or 'number'"
                )
            case InterpolationErrorKind.UNCLOSED:
                return "Interpolation is not closed"


@dataclass(frozen=True, slots=True)
class ParsedInterpolations:
    """Result of scanning one translation string."""

    occurrences: tuple[Occurrence, ...] = ()
    errors: tuple[InterpolationParseError, ...] = ()

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


def _utf8_width(ch: str) -> int:
    """Number of bytes a single code point occupies in UTF-8."""
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def _skip_past_close(text: str, index: int, offset: int) -> tuple[int, int]:
    """Advance to just after the next '}' (or to end of text).

    Returns:
        (index, offset) of the first character after the skipped region
    """
    length = len(text)
    while index < length and text[index] != "}":
        offset += _utf8_width(text[index])
        index += 1
    if index < length:
        index += 1
        offset += 1
    return index, offset


def _validate_name(
    name: str, brace_start: int, name_start: int, name_end: int
) -> InterpolationParseError | None:
    """Validate an accumulated placeholder name.

    Args:
        name: Accumulated name
        brace_start: Byte offset of the opening brace
        name_start: Byte offset of the first name byte
        name_end: Byte offset of the character terminating the name
    """
    if not name.strip():
        return InterpolationParseError(
            InterpolationErrorKind.EMPTY, brace_start, name_end + 1, name
        )
    if not is_valid_identifier(name):
        return InterpolationParseError(
            InterpolationErrorKind.INVALID_IDENTIFIER, name_start, name_end, name
        )
    return None


def parse_interpolations(text: str) -> ParsedInterpolations:
    """Scan a translation string for placeholders.

    Args:
        text: Translation text (the escaped form stored in the tree)

    Returns:
        ParsedInterpolations with occurrences in source order and all
        errors found in a single pass

    Example:
        >>> result = parse_interpolations("Hello {name}, {count:number} new")
        >>> [(o.name, str(o.type), o.start, o.end) for o in result.occurrences]
        [('name', 'none', 6, 11), ('count', 'number', 14, 27)]
        >>> result.errors
        ()
    """
    if "{" not in text:
        return ParsedInterpolations()

    occurrences: list[Occurrence] = []
    errors: list[InterpolationParseError] = []

    length = len(text)
    index = 0
    offset = 0

    is_open = False
    reading_type = False
    open_index = 0
    start = 0
    type_start = 0
    name: list[str] = []
    suffix: list[str] = []

    while index < length:
        ch = text[index]

        if ch == "{" and index + 1 < length and text[index + 1] == "{":
            # Escaped brace. Inside a placeholder it is a literal character,
            # which no identifier or type name may contain.
            if is_open:
                (suffix if reading_type else name).append("{")
            index += 2
            offset += 2
            continue

        if ch == "{":
            if is_open:
                index, offset = _skip_past_close(text, index, offset)
                errors.append(
                    InterpolationParseError(
                        InterpolationErrorKind.INVALID_IDENTIFIER,
                        start,
                        offset,
                        text[open_index:index],
                    )
                )
                is_open = False
                continue

            is_open = True
            reading_type = False
            open_index = index
            start = offset
            name.clear()
            suffix.clear()
            index += 1
            offset += 1
            continue

        if not is_open:
            offset += _utf8_width(ch)
            index += 1
            continue

        if ch == ":" and not reading_type:
            error = _validate_name("".join(name), start, start + 1, offset)
            if error is not None:
                errors.append(error)
                index, offset = _skip_past_close(text, index, offset)
                is_open = False
                continue

            reading_type = True
            type_start = offset + 1
            index += 1
            offset += 1
            continue

        if ch == "}":
            is_open = False
            placeholder = "".join(name)

            if reading_type and suffix:
                type_text = "".join(suffix)
                found = InterpolationType.parse(type_text)
                if found is None:
                    errors.append(
                        InterpolationParseError(
                            InterpolationErrorKind.INVALID_TYPE,
                            type_start,
                            offset,
                            type_text,
                        )
                    )
                    index += 1
                    offset += 1
                    continue
            else:
                if not reading_type:
                    error = _validate_name(placeholder, start, start + 1, offset)
                    if error is not None:
                        errors.append(error)
                        index += 1
                        offset += 1
                        continue
                found = InterpolationType.NONE

            occurrences.append(Occurrence(placeholder, found, start, offset))
            index += 1
            offset += 1
            continue

        (suffix if reading_type else name).append(ch)
        offset += _utf8_width(ch)
        index += 1

    if is_open:
        errors.append(
            InterpolationParseError(
                InterpolationErrorKind.UNCLOSED, start, offset, text[open_index:]
            )
        )

    return ParsedInterpolations(tuple(occurrences), tuple(errors))
