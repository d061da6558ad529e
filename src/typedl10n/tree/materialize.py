"""Template materialization.

Bridges the compiled tree and the code generator: turns one message's
translation for one locale into output-template text with every placeholder
rewritten to a template token.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typedl10n.constants import PLACEHOLDER_TEMPLATE

if TYPE_CHECKING:
    from typedl10n.tree.model import Key, LocaleCode, Message

__all__ = ["materialize"]


def _collapse_escapes(segment: bytes) -> str:
    """Resolve brace escapes in literal text between placeholders.

    Every '{{' becomes '{'. A '}}' becomes '}' only when it closes an
    escaped '{{' earlier in the same segment; unpaired '}}' is kept.

    Example:
        >>> _collapse_escapes(b"{{x}} and a }} b")
        '{x} and a }} b'
    """
    text = segment.decode("utf-8")
    if "{{" not in text:
        return text

    pieces: list[str] = []
    open_escapes = 0
    index = 0
    length = len(text)
    while index < length:
        pair = text[index : index + 2]
        if pair == "{{":
            pieces.append("{")
            open_escapes += 1
            index += 2
        elif pair == "}}" and open_escapes:
            pieces.append("}")
            open_escapes -= 1
            index += 2
        else:
            pieces.append(text[index])
            index += 1
    return "".join(pieces)


def materialize(
    message: Message,
    locale: LocaleCode,
    *,
    placeholder: str = PLACEHOLDER_TEMPLATE,
) -> str | None:
    """Produce the locale-specific template string of a message.

    Placeholder spans are inclusive UTF-8 byte ranges into the escaped
    translation. Substitution runs back to front, consuming the text from
    its end, so a replacement never shifts the offsets of spans not yet
    processed. Brace escapes are resolved only in the literal text between
    placeholders, after substitution: '{{' becomes '{', and a '}}' closing such
    an escape becomes '}'. Any other '}}' is left as written.

    Args:
        message: Built message
        locale: Target locale
        placeholder: Format string for the replacement token; receives the
            sanitized placeholder key as {name}

    Returns:
        Template text, or None if the message has no translation for locale

    Example:
        >>> from typedl10n.tree.builder import build_module
        >>> module, _ = build_module({"en": {"greet": "Hi {name}, {{ok}}"}})
        >>> message = next(iter(module.messages.values()))
        >>> materialize(message, "en")
        'Hi ${args.name}, {ok}'
    """
    translation = message.translations.get(locale)
    if translation is None:
        return None

    spans: list[tuple[int, int, Key]] = [
        (ranges[locale][0], ranges[locale][1], key)
        for key, interpolation in message.interpolations.items()
        if locale in (ranges := interpolation.ranges)
    ]
    spans.sort(key=lambda span: span[0])

    text = translation.escaped.encode("utf-8")
    pieces: list[str] = []
    cursor = len(text)
    for start, end, key in reversed(spans):
        pieces.append(_collapse_escapes(text[end + 1 : cursor]))
        pieces.append(placeholder.format(name=key.sanitized))
        cursor = start
    pieces.append(_collapse_escapes(text[:cursor]))

    return "".join(reversed(pieces))
