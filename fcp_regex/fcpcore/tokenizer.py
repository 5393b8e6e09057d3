"""Tokenizing of operation strings and classification of their tokens."""

from __future__ import annotations

import re

_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")
_ARROWS = frozenset({"->", "<->", "--"})


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read quoted content starting just after an opening quote.

    Returns the unescaped content and the index of the closing quote
    (or the end of the text if the quote is never closed).
    """
    n = len(text)
    parts: list[str] = []
    while pos < n and text[pos] != '"':
        ch = text[pos]
        if ch == "\\" and pos + 1 < n:
            following = text[pos + 1]
            parts.append("\n" if following == "n" else following)
            pos += 2
        else:
            parts.append(ch)
            pos += 1
    return "".join(parts), pos


def tokenize(text: str) -> list[str]:
    """Split an operation string into tokens.

    Handles fully quoted tokens, quoted sections embedded in a token,
    backslash escapes and the ``\\n`` newline escape.
    """
    n = len(text)
    tokens: list[str] = []
    pos = 0
    while pos < n:
        while pos < n and text[pos] == " ":
            pos += 1
        if pos >= n:
            break

        if text[pos] == '"':
            content, pos = _read_quoted(text, pos + 1)
            if pos < n:
                pos += 1
            tokens.append(content)
            continue

        parts: list[str] = []
        while pos < n and text[pos] != " ":
            if text[pos] == '"':
                parts.append('"')
                content, pos = _read_quoted(text, pos + 1)
                parts.append(content)
                if pos < n:
                    parts.append('"')
                    pos += 1
            else:
                parts.append(text[pos])
                pos += 1
        tokens.append("".join(parts).replace("\\n", "\n"))

    return tokens


def is_arrow(token: str) -> bool:
    """Return True if the token is an arrow operator: ``->``, ``<->`` or ``--``."""
    return token in _ARROWS


def is_selector(token: str) -> bool:
    """Return True if the token is a selector (starts with ``@``)."""
    return token.startswith("@")


def is_key_value(token: str) -> bool:
    """Return True if the token is a ``key:value`` pair (not a selector or arrow)."""
    if is_selector(token) or is_arrow(token):
        return False
    idx = token.find(":")
    if idx <= 0 or idx >= len(token) - 1:
        return False
    return _KEY_RE.fullmatch(token[:idx]) is not None


def parse_key_value_with_meta(token: str) -> tuple[str, str, bool]:
    """Split a ``key:value`` token, also reporting whether the value was quoted."""
    key, sep, raw_value = token.partition(":")
    if not sep:
        raise ValueError(f"not a key:value token: {token!r}")
    if len(raw_value) >= 2 and raw_value.startswith('"') and raw_value.endswith('"'):
        return key, raw_value[1:-1], True
    return key, raw_value, False


def parse_key_value(token: str) -> tuple[str, str]:
    """Split a ``key:value`` token; surrounding double quotes on the value are stripped."""
    key, value, _ = parse_key_value_with_meta(token)
    return key, value