"""Translation file collection.

Discovers TOML translation files in a directory, detects the naming scheme,
deserializes them with tomllib and hands the tables to the tree builder.

File modes:
    FLAT - one file per locale: en.toml, fr-CA.toml
    NAMESPACED - one file per namespace and locale: common.en.toml

Only files ending in .toml are considered. Mixing both modes in one
directory is an error.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from typedl10n.constants import NAMESPACE_SEPARATOR, TRANSLATION_FILE_SUFFIX
from typedl10n.core.identifier_validation import is_valid_identifier
from typedl10n.diagnostics.collector import Diagnostics
from typedl10n.diagnostics.errors import (
    InvalidFileNameError,
    InvalidInputDirectoryError,
    MixedFileModesError,
    TranslationFileError,
)
from typedl10n.enums import FileMode
from typedl10n.locale_utils import is_known_locale
from typedl10n.tree.builder import build_module, build_namespaced_module
from typedl10n.tree.model import LocaleCode, Module

logger = logging.getLogger(__name__)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Discovery
    "detect_file_mode",
    "collect_flat",
    "collect_namespaced",
    # Orchestration
    "BuildResult",
    "collect_and_build",
]


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of collecting and building a translation directory.

    Attributes:
        module: Root module of the compiled tree
        diagnostics: Every non-fatal issue found
        locales: Sorted, de-duplicated locales seen in the directory
        mode: Detected file mode
    """

    module: Module
    diagnostics: Diagnostics
    locales: tuple[LocaleCode, ...]
    mode: FileMode


def _translation_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        raise InvalidInputDirectoryError(str(directory))
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix == TRANSLATION_FILE_SUFFIX
    )


def _load_table(path: Path) -> dict[str, Any]:
    """Read and deserialize one TOML file.

    Raises:
        TranslationFileError: If the file cannot be read or is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise TranslationFileError(path.name, str(e)) from e
    except OSError as e:
        raise TranslationFileError(path.name, e.strerror or str(e)) from e


def _check_locale(locale: LocaleCode, filename: str) -> None:
    if is_known_locale(locale) is False:
        logger.warning("Locale '%s' from %s is not a known CLDR locale", locale, filename)


def detect_file_mode(directory: str | Path) -> FileMode:
    """Determine the naming scheme of a translation directory.

    A stem containing a dot (common.en) is namespaced, anything else is flat.
    An empty directory is flat.

    Raises:
        InvalidInputDirectoryError: If directory is not a directory
        MixedFileModesError: If both kinds of file names are present
    """
    has_flat = False
    has_namespaced = False

    for path in _translation_files(Path(directory)):
        if NAMESPACE_SEPARATOR in path.stem:
            has_namespaced = True
        else:
            has_flat = True

        if has_flat and has_namespaced:
            raise MixedFileModesError()

    return FileMode.NAMESPACED if has_namespaced else FileMode.FLAT


def collect_flat(directory: str | Path) -> dict[LocaleCode, dict[str, Any]]:
    """Load every '<locale>.toml' file of a directory.

    Returns:
        Deserialized table per locale

    Raises:
        InvalidInputDirectoryError: If directory is not a directory
        TranslationFileError: If a file cannot be read or parsed
    """
    result: dict[LocaleCode, dict[str, Any]] = {}
    for path in _translation_files(Path(directory)):
        locale = path.stem
        _check_locale(locale, path.name)
        logger.debug("Loading %s as locale %s", path, locale)
        result[locale] = _load_table(path)
    return result


def collect_namespaced(directory: str | Path) -> dict[str, dict[LocaleCode, dict[str, Any]]]:
    """Load every '<namespace>.<locale>.toml' file of a directory.

    Returns:
        Deserialized table per locale, per namespace

    Raises:
        InvalidInputDirectoryError: If directory is not a directory
        InvalidFileNameError: If a stem is not exactly 'namespace.locale' with
            an identifier namespace
        TranslationFileError: If a file cannot be read or parsed
    """
    result: dict[str, dict[LocaleCode, dict[str, Any]]] = {}
    for path in _translation_files(Path(directory)):
        parts = path.stem.split(NAMESPACE_SEPARATOR)
        if len(parts) != 2 or not is_valid_identifier(parts[0]) or not parts[1]:
            raise InvalidFileNameError(path.name)

        namespace, locale = parts
        _check_locale(locale, path.name)
        logger.debug("Loading %s as namespace %s, locale %s", path, namespace, locale)
        result.setdefault(namespace, {})[locale] = _load_table(path)
    return result


def collect_and_build(directory: str | Path) -> BuildResult:
    """Collect a translation directory and build its module tree.

    Args:
        directory: Directory holding the .toml translation files

    Returns:
        BuildResult with the tree, diagnostics, locales and detected mode

    Raises:
        CollectionError: On any directory, file name or file content failure
    """
    directory = Path(directory)
    mode = detect_file_mode(directory)
    logger.info("Collecting %s translation files from %s", mode, directory)

    match mode:
        case FileMode.FLAT:
            tables = collect_flat(directory)
            locales = set(tables)
            module, diagnostics = build_module(tables)
        case FileMode.NAMESPACED:
            namespaces = collect_namespaced(directory)
            locales = {locale for tables in namespaces.values() for locale in tables}
            module, diagnostics = build_namespaced_module(namespaces)

    logger.info(
        "Built %d locale(s) with %d diagnostic(s)", len(locales), diagnostics.error_count
    )
    return BuildResult(module, diagnostics, tuple(sorted(locales)), mode)
