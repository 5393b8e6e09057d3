"""Reference card describing the regex fragment operations."""

from __future__ import annotations

_INTRO = "Execute regex fragment operations. Each op: VERB [args...] [key:value ...]"

_TABLES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "FRAGMENTS",
        (
            ("define NAME ELEMENT [ELEMENT...]", "Create named pattern fragment"),
            ("from SOURCE [as:ALIAS]", "Import from pattern library"),
            ("compile NAME [flavor:F] [anchored:bool]", "Emit regex string"),
            ("drop NAME", "Remove fragment"),
            ("rename OLD NEW", "Rename fragment"),
        ),
    ),
    (
        "ELEMENTS",
        (
            ("<name>", "Reference another fragment"),
            ("lit:<chars>", "Literal (auto-escaped)"),
            ("any:<C><Q>", "Character class"),
            ("none:<C><Q>", "Negated class"),
            ("chars:<S><Q>", "Custom char set"),
            ("not:<S><Q>", "Negated set"),
            ("opt:<name>", "Optional"),
            ("alt:<a>|<b>", "Alternation"),
            ("cap:<name>", "Capture group"),
            ("cap:<L>/<N>", "Named capture"),
            ("sep:<N>/<L>", "Separated repeat"),
            ("raw:<regex>", "Raw regex"),
        ),
    ),
)

_CLASSES = ("digit", "alpha", "alphanumeric", "word", "whitespace", "any")

_QUANTIFIERS = (
    ("+", "1+"),
    ("*", "0+"),
    ("?", "0..1"),
    ("{N}", ""),
    ("{N,M}", ""),
    ("{N,}", ""),
)

_TRAILING_TABLES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "QUERIES (via regex_query)",
        (
            ("show NAME", "Fragment tree + regex"),
            ("test NAME against:STR", "Test match"),
            ("list", "All fragments"),
            ("list library", "Pattern categories"),
            ("get PATTERN", "Library pattern detail"),
        ),
    ),
    (
        "SESSION (via regex_session)",
        (
            ('new "Title" [flavor:pcre]', "Start session"),
            ("close / status / undo / redo", ""),
        ),
    ),
)

_PREFIXES = (
    ("+", "created"),
    ("*", "modified"),
    ("-", "deleted"),
    ("=", "result"),
    ("!", "error"),
)


def _table(heading: str, rows: tuple[tuple[str, str], ...]) -> str:
    width = max(len(syntax) for syntax, _ in rows) + 2
    body = (f"  {syntax.ljust(width)}{text}".rstrip() for syntax, text in rows)
    return "\n".join((f"{heading}:", *body))


def _quantifier(symbol: str, meaning: str) -> str:
    return f"{symbol} ({meaning})" if meaning else symbol


def _build() -> str:
    blocks = [_INTRO]
    blocks.extend(_table(heading, rows) for heading, rows in _TABLES)
    blocks.append(
        "\n".join(
            (
                "CLASSES: " + " ".join(_CLASSES),
                "QUANTIFIERS: " + " ".join(_quantifier(s, m) for s, m in _QUANTIFIERS),
            )
        )
    )
    blocks.extend(_table(heading, rows) for heading, rows in _TRAILING_TABLES)
    blocks.append(
        "RESPONSE PREFIXES: " + "  ".join(f"{sym} {word}" for sym, word in _PREFIXES)
    )
    return "\n\n".join(blocks)


REFERENCE_CARD = _build()