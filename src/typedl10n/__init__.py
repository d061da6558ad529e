"""typedl10n - compile TOML translation tables into typed accessors.

Merges per-locale (optionally per-namespace) translation tables into a
validated tree, checks placeholders across locales, and generates
TypeScript accessor functions typed from the placeholders.

Public API:
    parse_interpolations - Scan one translation string for placeholders
    build_module - Build a tree from one table per locale
    build_namespaced_module - Build a tree of namespaces
    materialize - Locale-specific template text of a message
    collect_and_build - Collect a directory of .toml files and build it
    generate - Write TypeScript accessors for a built tree
    Diagnostics - Accumulated non-fatal issues of a build
    DiagnosticFormatter - Render Diagnostics as text, lines or JSON

Exceptions:
    Typedl10nError - Base exception class
    RootNotTableError - A locale's root value is not a table
    CollectionError - Directory, file name or file content failure

Submodules:
    typedl10n.syntax - Placeholder lexer
    typedl10n.tree - Model, builder, materializer
    typedl10n.diagnostics - Accumulator, formatter, exceptions
    typedl10n.collect - File discovery and TOML loading
    typedl10n.generate - TypeScript emission
"""

from .collect import BuildResult, collect_and_build
from .diagnostics import (
    CollectionError,
    DiagnosticFormatter,
    Diagnostics,
    OutputFormat,
    RootNotTableError,
    Typedl10nError,
)
from .enums import FileMode, InterpolationErrorKind, InterpolationType
from .generate import generate
from .syntax import parse_interpolations
from .tree import (
    Interpolation,
    Key,
    Message,
    Module,
    Translation,
    build_module,
    build_namespaced_module,
    materialize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("typedl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildResult",
    "CollectionError",
    "DiagnosticFormatter",
    "Diagnostics",
    "FileMode",
    "Interpolation",
    "InterpolationErrorKind",
    "InterpolationType",
    "Key",
    "Message",
    "Module",
    "OutputFormat",
    "RootNotTableError",
    "Translation",
    "Typedl10nError",
    "__version__",
    "build_module",
    "build_namespaced_module",
    "collect_and_build",
    "generate",
    "materialize",
    "parse_interpolations",
]
