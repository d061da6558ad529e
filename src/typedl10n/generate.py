"""TypeScript code generation.

Walks a built module tree and writes typed accessor modules:

    <out>/index.ts          locale state (setLocale/getLocale), Locale type,
                            re-export of the root module as `m`
    <out>/root.ts           messages and sub-modules of the root module
    <out>/<name>/index.ts   one file per nested module, recursively

Every message becomes an exported function. Its `args` parameter is typed
from the message's interpolations; bodies are materialized per locale.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from typedl10n.constants import DEFAULT_LOCALE, INDEX_FILENAME, ROOT_MODULE_FILENAME
from typedl10n.diagnostics.errors import OutputFileExistsError
from typedl10n.locale_utils import locale_display_name
from typedl10n.tree.materialize import materialize
from typedl10n.tree.model import Key, LocaleCode, Message, Module

logger = logging.getLogger(__name__)

__all__ = ["generate", "render_message", "render_module"]

_HEADER = "// eslint-disable\n// Generated by typedl10n. Do not edit.\n"


def _args_signature(message: Message) -> str:
    if not message.interpolations:
        return ""
    fields = "; ".join(
        f"{key.sanitized}: {interpolation.type.typescript_type}"
        for key, interpolation in message.interpolations.items()
    )
    return f"args: {{ {fields} }}, "


def render_message(key: Key, message: Message) -> str:
    """Render one message as an exported TypeScript function.

    Example:
        >>> from typedl10n.tree.builder import build_module
        >>> module, _ = build_module({"en": {"greet": "Hi {name}"}})
        >>> (key, message), = module.messages.items()
        >>> print(render_message(key, message))
        export const greet = (args: { name: string }, locale?: Locale) => {
          const resolved = locale ?? getLocale()
          if (resolved === "en") return `Hi ${args.name}`
          return "greet"
        }
    """
    lines = [
        f"export const {key.sanitized} = ({_args_signature(message)}locale?: Locale) => {{",
        "  const resolved = locale ?? getLocale()",
    ]
    for locale in message.translations:
        lines.append(f'  if (resolved === "{locale}") return `{materialize(message, locale)}`')
    lines.append(f'  return "{key.sanitized}"')
    lines.append("}")
    return "\n".join(lines)


def render_module(module: Module, depth: int) -> str:
    """Render the source of one module file.

    Args:
        module: Module to render
        depth: Nesting depth (0 for root.ts)
    """
    root_import = "." if depth == 0 else "/".join([".."] * depth)
    parts = [_HEADER + f'import {{ getLocale, type Locale }} from "{root_import}"\n']
    parts.extend(render_message(key, message) + "\n" for key, message in module.messages.items())
    parts.extend(
        f'export * as {key.sanitized} from "./{key.sanitized}"\n' for key in module.modules
    )
    return "\n".join(parts)


def _render_index(locales: Sequence[LocaleCode], default_locale: LocaleCode) -> str:
    quoted = [f'"{locale}"' for locale in locales]
    union = " | ".join(quoted) or "never"
    listed = ", ".join(quoted)
    lines = [_HEADER]
    for locale in locales:
        name = locale_display_name(locale)
        if name is not None:
            lines.append(f"// {locale}: {name}")
    lines.extend(
        [
            f"export type Locale = {union}",
            f"export const locales: readonly Locale[] = [{listed}]",
            f'let _locale: Locale = "{default_locale}"',
            "export const setLocale = (locale: Locale) => (_locale = locale)",
            "export const getLocale = () => _locale",
            'export * as m from "./root"',
            "",
        ]
    )
    return "\n".join(lines)


def _write_module(directory: Path, module: Module, depth: int) -> None:
    filename = ROOT_MODULE_FILENAME if depth == 0 else INDEX_FILENAME
    (directory / filename).write_text(render_module(module, depth), encoding="utf-8")
    logger.debug("Wrote %s", directory / filename)

    for key, child in module.modules.items():
        child_dir = directory / key.sanitized
        child_dir.mkdir(parents=True, exist_ok=True)
        _write_module(child_dir, child, depth + 1)


def generate(
    out_dir: str | Path,
    locales: Sequence[LocaleCode],
    module: Module,
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
) -> Path:
    """Write the TypeScript accessors of a module tree.

    An existing output directory is replaced.

    Args:
        out_dir: Output directory
        locales: Locales of the generated Locale type
        module: Built root module
        default_locale: Initial runtime locale; the first locale is used when
            it is not among locales

    Returns:
        The output directory

    Raises:
        OutputFileExistsError: If out_dir exists and is a file
        OSError: If writing fails
    """
    out = Path(out_dir)
    if out.is_file():
        raise OutputFileExistsError(str(out))

    locales = sorted(locales)
    if locales and default_locale not in locales:
        logger.warning(
            "Default locale '%s' not among %s; using '%s'",
            default_locale,
            locales,
            locales[0],
        )
        default_locale = locales[0]

    if out.exists():
        logger.info("Replacing output directory %s", out)
        shutil.rmtree(out)
    out.mkdir(parents=True)

    (out / INDEX_FILENAME).write_text(_render_index(locales, default_locale), encoding="utf-8")
    _write_module(out, module, 0)
    logger.info("Generated accessors for %d locale(s) in %s", len(locales), out)
    return out
