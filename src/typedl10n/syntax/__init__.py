"""Translation string syntax.

Provides the placeholder lexer used by the tree builder.

Python 3.13+.
"""

from .interpolation import (
    InterpolationParseError,
    Occurrence,
    ParsedInterpolations,
    parse_interpolations,
)

__all__ = [
    "InterpolationParseError",
    "Occurrence",
    "ParsedInterpolations",
    "parse_interpolations",
]
