"""Module tree builder.

Merges one already-deserialized table per locale into a single key-indexed
tree of messages and nested modules, enforcing cross-locale consistency.

Architecture:
    - build_module(): Flat entry point, one table per locale
    - build_namespaced_module(): Runs the flat build per namespace and nests
      each result under the namespace key
    - _BuildContext: Per-(locale, table) walk state threaded through the
      recursion together with the shared Diagnostics
    - _walk_table(): Recursive walk; strings become messages, tables become
      modules, anything else is diagnosed and skipped
    - _merge_occurrences(): Read-modify-write of a message's placeholders
    - _sort_module(): Final pass that puts every map in key order

Failure semantics:
    Only a non-table locale root is fatal (RootNotTableError). All content
    problems are recorded in Diagnostics and the walk continues.

Python 3.13+.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from typedl10n.constants import KEY_PATH_SEPARATOR, TRANSLATION_FILE_SUFFIX
from typedl10n.diagnostics.collector import (
    Diagnostics,
    FileRef,
    InterpolationErrors,
    MismatchRef,
    UnsupportedValueType,
)
from typedl10n.diagnostics.errors import RootNotTableError
from typedl10n.syntax.interpolation import Occurrence, parse_interpolations
from typedl10n.tree.model import (
    Interpolation,
    Key,
    LocaleCode,
    Message,
    Module,
    Translation,
)

logger = logging.getLogger(__name__)

__all__ = [
    "build_module",
    "build_namespaced_module",
    "value_type_name",
]


def value_type_name(value: object) -> str:
    """Name a value's shape the way TOML documents do.

    Example:
        >>> value_type_name(42)
        'integer'
        >>> value_type_name([1, 2])
        'array'
    """
    match value:
        case str():
            return "string"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case Mapping():
            return "table"
        case list() | tuple():
            return "array"
        case datetime.datetime():
            return "datetime"
        case datetime.date():
            return "date"
        case datetime.time():
            return "time"
        case None:
            return "null"
        case _:
            return type(value).__name__


@dataclass(slots=True)
class _BuildContext:
    """Walk state for one locale's table.

    Attributes:
        locale: Locale being walked
        file: Diagnostic file reference of the table
        diagnostics: Shared accumulator
        key_path: Literal keys of the ancestors of the current table
    """

    locale: LocaleCode
    file: FileRef
    diagnostics: Diagnostics
    key_path: tuple[str, ...] = field(default=())

    def path_at(self, key: str) -> str:
        return KEY_PATH_SEPARATOR.join((*self.key_path, key))

    def child(self, key: str) -> _BuildContext:
        return _BuildContext(self.locale, self.file, self.diagnostics, (*self.key_path, key))


def _merge_occurrences(
    ctx: _BuildContext, key: str, message: Message, occurrences: tuple[Occurrence, ...]
) -> None:
    """Merge one locale's placeholders into a message.

    First-seen type wins. A conflicting locale is recorded as a mismatch
    together with every locale already on file, and its range is dropped.
    A later locale that agrees with the type on file joins an existing
    mismatch, so every competing (locale, type) pair is reported.
    """
    for occurrence in occurrences:
        interpolation = message.interpolations.get(Key.of(occurrence.name))
        if interpolation is None:
            interpolation = Interpolation(type=occurrence.type)
            message.interpolations[Key.of(occurrence.name)] = interpolation

        if occurrence.type != interpolation.type:
            logger.debug(
                "Type mismatch for '%s' in '%s' (%s): %s != %s",
                occurrence.name,
                ctx.path_at(key),
                ctx.locale,
                occurrence.type,
                interpolation.type,
            )
            ctx.diagnostics.add_type_mismatch(
                MismatchRef(ctx.file.namespace, ctx.path_at(key), occurrence.name),
                ctx.locale,
                occurrence.type,
                interpolation.type,
                interpolation.ranges.keys(),
            )
            continue

        interpolation.ranges[ctx.locale] = (occurrence.start, occurrence.end)
        ctx.diagnostics.extend_type_mismatch(
            MismatchRef(ctx.file.namespace, ctx.path_at(key), occurrence.name),
            ctx.locale,
            interpolation.type,
        )


def _add_translation(ctx: _BuildContext, module: Module, key: str, text: str) -> None:
    translation = Translation.of(text)
    parsed = parse_interpolations(translation.escaped)
    if parsed.has_errors:
        # Escaping never touches braces or colons, so the literal text yields
        # the same errors with offsets into the text as written.
        reported = parse_interpolations(translation.literal)
        ctx.diagnostics.add_key_diagnostic(
            ctx.file,
            ctx.path_at(key),
            InterpolationErrors(translation.literal, reported.errors),
        )

    message = module.messages.setdefault(Key.of(key), Message())
    message.translations[ctx.locale] = translation
    _merge_occurrences(ctx, key, message, parsed.occurrences)


def _walk_table(ctx: _BuildContext, module: Module, table: Mapping[str, object]) -> None:
    for key, value in table.items():
        match value:
            case str():
                _add_translation(ctx, module, key, value)
            case Mapping():
                child = module.modules.setdefault(Key.of(key), Module())
                _walk_table(ctx.child(key), child, value)
            case _:
                value_type = value_type_name(value)
                logger.debug(
                    "Skipping '%s' (%s): unsupported value type %s",
                    ctx.path_at(key),
                    ctx.locale,
                    value_type,
                )
                ctx.diagnostics.add_key_diagnostic(
                    ctx.file, ctx.path_at(key), UnsupportedValueType(value_type)
                )


def _sort_module(module: Module) -> Module:
    """Rebuild every map of the tree in key order."""
    for message in module.messages.values():
        message.translations = dict(sorted(message.translations.items()))
        for interpolation in message.interpolations.values():
            interpolation.ranges = dict(sorted(interpolation.ranges.items()))
        message.interpolations = dict(sorted(message.interpolations.items()))
    module.messages = dict(sorted(module.messages.items()))
    module.modules = {key: _sort_module(child) for key, child in sorted(module.modules.items())}
    return module


def _default_source(locale: LocaleCode, namespace: str | None) -> str:
    stem = locale if namespace is None else f"{namespace}.{locale}"
    return f"{stem}{TRANSLATION_FILE_SUFFIX}"


def build_module(
    locale_tables: Mapping[LocaleCode, object],
    *,
    diagnostics: Diagnostics | None = None,
    namespace: str | None = None,
    sources: Mapping[LocaleCode, str] | None = None,
) -> tuple[Module, Diagnostics]:
    """Build one module from a table per locale.

    Locales are walked in sorted order, so first-seen type resolution and
    diagnostics are independent of mapping iteration order.

    Args:
        locale_tables: Deserialized root value per locale
        diagnostics: Accumulator to append to (a new one if None)
        namespace: Namespace recorded on every diagnostic
        sources: Source identifier per locale for diagnostics; defaults to
            '<locale>.toml' or '<namespace>.<locale>.toml'

    Returns:
        (module, diagnostics)

    Raises:
        RootNotTableError: If a locale's root value is not a table

    Example:
        >>> module, diagnostics = build_module({
        ...     "en": {"greet": "Hello {name}"},
        ...     "fr": {"greet": "Bonjour {name}"},
        ... })
        >>> [key.literal for key in module.messages]
        ['greet']
        >>> diagnostics.is_empty()
        True
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    for locale, table in locale_tables.items():
        if not isinstance(table, Mapping):
            raise RootNotTableError(locale, value_type_name(table), namespace)

    root = Module()
    for locale in sorted(locale_tables):
        source = (sources or {}).get(locale) or _default_source(locale, namespace)
        logger.debug("Building locale %s from %s", locale, source)
        ctx = _BuildContext(locale, FileRef(namespace, locale, source), diagnostics)
        _walk_table(ctx, root, locale_tables[locale])  # type: ignore[arg-type]

    return _sort_module(root), diagnostics


def build_namespaced_module(
    namespaces: Mapping[str, Mapping[LocaleCode, object]],
    *,
    sources: Mapping[str, Mapping[LocaleCode, str]] | None = None,
) -> tuple[Module, Diagnostics]:
    """Build a root module whose children are namespaces.

    Each namespace is built with the flat builder into one shared
    Diagnostics; the namespace travels as an explicit diagnostic field, so
    identical key paths in different namespaces stay distinguishable.

    Args:
        namespaces: Per-locale tables per namespace
        sources: Source identifiers per namespace and locale

    Returns:
        (root module with only child modules, diagnostics)

    Raises:
        RootNotTableError: If any locale's root value is not a table
    """
    diagnostics = Diagnostics()
    root = Module()

    for namespace in sorted(namespaces):
        module, _ = build_module(
            namespaces[namespace],
            diagnostics=diagnostics,
            namespace=namespace,
            sources=(sources or {}).get(namespace),
        )
        root.modules[Key.of(namespace)] = module

    logger.info(
        "Built %d namespace(s) with %d diagnostic(s)",
        len(root.modules),
        diagnostics.error_count,
    )
    return root, diagnostics
