"""Enumerations for typedl10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "FileMode",
    "InterpolationErrorKind",
    "InterpolationType",
]


class InterpolationType(StrEnum):
    """Type tag of a placeholder.

    StrEnum provides automatic string conversion: str(InterpolationType.NUMBER) == "number"
    """

    NONE = "none"
    """Untyped placeholder: {name}"""

    STRING = "string"
    """String placeholder: {name:string}"""

    NUMBER = "number"
    """Number placeholder: {count:number}"""

    @classmethod
    def parse(cls, suffix: str) -> "InterpolationType | None":
        """Resolve a type suffix to its member.

        Only the explicit suffixes are accepted; "none" is the implicit
        default and cannot be spelled out.

        Example:
            >>> InterpolationType.parse("number")
            <InterpolationType.NUMBER: 'number'>
            >>> InterpolationType.parse("int") is None
            True
        """
        match suffix:
            case "string":
                return cls.STRING
            case "number":
                return cls.NUMBER
            case _:
                return None

    @property
    def typescript_type(self) -> str:
        """TypeScript type emitted for arguments of this type."""
        return "number" if self is InterpolationType.NUMBER else "string"


class InterpolationErrorKind(StrEnum):
    """Kind of interpolation parse error."""

    EMPTY = "empty"
    """Blank placeholder name: {} or {:string}"""

    INVALID_IDENTIFIER = "invalid-identifier"
    """Name is not [a-zA-Z][a-zA-Z0-9_]*, or braces are nested."""

    INVALID_TYPE = "invalid-type"
    """Type suffix outside the vocabulary: {count:int}"""

    UNCLOSED = "unclosed"
    """End of text reached inside a placeholder."""


class FileMode(StrEnum):
    """Naming scheme of translation files in an input directory."""

    FLAT = "flat"
    """One file per locale: en.toml"""

    NAMESPACED = "namespaced"
    """One file per namespace and locale: common.en.toml"""
