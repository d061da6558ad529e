"""Data model of the compiled translation tree.

Node types:
    Key - Literal key plus its sanitized identifier (identity on literal)
    Translation - One locale's text, escaped for template output
    Interpolation - Cross-locale merged record of one placeholder
    Message - Leaf node: translations and interpolations of one key
    Module - Inner node: nested messages and modules

All maps are plain dicts. The builder inserts freely during the walk and
sorts every map before handing the tree to the caller, so iteration order of
a returned tree is always key order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from typedl10n.constants import KEY_PATH_SEPARATOR, PLACEHOLDER_TEMPLATE
from typedl10n.core.sanitize import escape_translation, sanitize_key
from typedl10n.enums import InterpolationType

__all__ = [
    "Interpolation",
    "Key",
    "LocaleCode",
    "Message",
    "Module",
    "Translation",
]

type LocaleCode = str
"""Opaque, case-sensitive locale identifier (e.g., 'en', 'fr-CA')."""


@dataclass(frozen=True, slots=True, order=True)
class Key:
    """Key of a message, module or placeholder.

    Equality, hashing and ordering use the literal only: two keys with the
    same literal are the same key regardless of how they sanitize.

    Attributes:
        literal: Key as it appeared in the source
        sanitized: Identifier safe for generated code
    """

    literal: str
    sanitized: str = field(compare=False)

    @classmethod
    def of(cls, literal: str) -> Key:
        """Create a key, deriving the sanitized identifier.

        Example:
            >>> Key.of("sign-in").sanitized
            'signin'
        """
        return cls(literal, sanitize_key(literal))

    def __str__(self) -> str:
        return self.literal


@dataclass(frozen=True, slots=True)
class Translation:
    """Translation text for one (key, locale) pair.

    Attributes:
        literal: Text as read from the source, kept for diagnostics
        escaped: Template-literal-safe text; placeholder offsets refer to it
    """

    literal: str
    escaped: str

    @classmethod
    def of(cls, literal: str) -> Translation:
        return cls(literal, escape_translation(literal))


@dataclass(slots=True)
class Interpolation:
    """Merged view of one placeholder across locales.

    Attributes:
        type: Type tag; the first type seen wins
        ranges: Inclusive (start, end) byte span per locale
    """

    type: InterpolationType = InterpolationType.NONE
    ranges: dict[LocaleCode, tuple[int, int]] = field(default_factory=dict)


@dataclass(slots=True)
class Message:
    """Leaf node holding every locale's translation of one key."""

    translations: dict[LocaleCode, Translation] = field(default_factory=dict)
    interpolations: dict[Key, Interpolation] = field(default_factory=dict)

    def template_for_locale(
        self, locale: LocaleCode, *, placeholder: str = PLACEHOLDER_TEMPLATE
    ) -> str | None:
        """Materialize this message for a locale.

        See typedl10n.tree.materialize.materialize.
        """
        from typedl10n.tree.materialize import materialize  # noqa: PLC0415

        return materialize(self, locale, placeholder=placeholder)


@dataclass(slots=True)
class Module:
    """Inner node: a namespace of messages and nested modules."""

    messages: dict[Key, Message] = field(default_factory=dict)
    modules: dict[Key, Module] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.messages and not self.modules

    def find(self, path: str | Sequence[str]) -> Message | Module | None:
        """Look up a node by dotted literal path (e.g., 'auth.login.title').

        A sequence of literal segments reaches keys that contain the
        separator themselves: find(["errors", "http.404"]).

        When a message and a module share the final literal, the message
        is returned.
        """
        segments = path.split(KEY_PATH_SEPARATOR) if isinstance(path, str) else list(path)
        if not segments:
            return None
        *parents, last = segments
        node: Module = self
        for segment in parents:
            child = node.modules.get(Key.of(segment))
            if child is None:
                return None
            node = child
        key = Key.of(last)
        return node.messages.get(key) or node.modules.get(key)
