"""Identifier sanitization and template-literal escaping.

Both functions are pure string rewrites used when building the tree:

    sanitize_key: literal TOML key -> identifier safe in generated TypeScript
    escape_translation: raw translation -> body safe inside a template literal

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "RESERVED_WORDS",
    "escape_translation",
    "sanitize_key",
]

RESERVED_WORDS: frozenset[str] = frozenset({
    # JavaScript reserved keywords
    "abstract", "arguments", "await", "boolean", "break", "byte", "case",
    "catch", "char", "class", "const", "continue", "debugger", "default",
    "delete", "do", "double", "else", "enum", "eval", "export", "extends",
    "false", "final", "finally", "float", "for", "function", "goto", "if",
    "implements", "import", "in", "instanceof", "int", "interface", "let",
    "long", "native", "new", "null", "package", "private", "protected",
    "public", "return", "short", "static", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "true", "try", "typeof", "var",
    "void", "volatile", "while", "with", "yield",
    # TypeScript additional keywords
    "any", "as", "async", "asserts", "bigint", "constructor", "declare",
    "from", "get", "infer", "is", "keyof", "module", "namespace", "never",
    "readonly", "require", "set", "string", "symbol", "type", "undefined",
    "unique", "unknown", "using",
    # Global objects
    "Array", "Boolean", "Date", "Error", "Function", "JSON", "Math", "Number",
    "Object", "Promise", "RegExp", "String", "Symbol", "Map", "Set",
    "WeakMap", "WeakSet",
    # Browser/Node.js globals
    "console", "window", "document", "process", "global", "Buffer",
    "exports", "__dirname", "__filename",
})
"""Names that get an underscore appended when used as generated identifiers."""


def sanitize_key(key: str) -> str:
    """Rewrite a literal key into a generated-code-safe identifier.

    Rules:
        - Only alphanumeric characters and underscores are kept
        - Keys starting with a digit get an underscore prepended
        - Reserved words get an underscore appended

    Example:
        >>> sanitize_key("hello-world")
        'helloworld'
        >>> sanitize_key("123-class")
        '_123class'
        >>> sanitize_key("class")
        'class_'
    """
    sanitized = "".join(c for c in key if c.isalnum() or c == "_")

    if sanitized and sanitized[0].isnumeric():
        sanitized = f"_{sanitized}"

    if sanitized in RESERVED_WORDS:
        sanitized += "_"

    return sanitized


def escape_translation(text: str) -> str:
    r"""Escape characters with meaning inside a JavaScript template literal.

    Placeholders ({name}, {name:type}) and brace escapes ({{) are left
    untouched; they are resolved at materialization time.

    Escaped:
        - ` becomes \`
        - \ becomes \\
        - ${ becomes \${

    Example:
        >>> escape_translation("price: ${amount}")
        'price: \\${amount}'
    """
    parts: list[str] = []
    for index, ch in enumerate(text):
        match ch:
            case "`":
                parts.append("\\`")
            case "\\":
                parts.append("\\\\")
            case "$" if text.startswith("{", index + 1):
                parts.append("\\$")
            case _:
                parts.append(ch)
    return "".join(parts)
