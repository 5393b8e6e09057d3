"""Parsing of regex fragment operations into verbs, positionals and params."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .fcpcore.formatter import suggest as _suggest
from .fcpcore.parsed_op import ParseError
from .fcpcore.tokenizer import is_key_value, parse_key_value, tokenize

__all__ = ["ParseError", "ParsedOp", "parse_op", "suggest"]

# Verbs whose leading positional slots are taken verbatim, so that names
# containing a colon (such as ``rfc3986:scheme``) are not read as params.
_FORCED_POSITIONALS = {
    "from": 1,
    "compile": 1,
    "drop": 1,
    "define": 1,
    "rename": 2,
}


@dataclass
class ParsedOp:
    """A successfully parsed fragment operation."""

    verb: str
    positionals: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)
    raw: str = ""


def parse_op(text: str) -> ParsedOp:
    """Parse an operation string into a ParsedOp.

    Raises ParseError if the string holds no tokens.
    """
    raw = text.strip()
    tokens = tokenize(raw)
    if not tokens:
        raise ParseError("empty operation", raw)

    op = ParsedOp(verb=tokens[0].lower(), raw=raw)
    forced = _FORCED_POSITIONALS.get(op.verb, 0)
    for index, token in enumerate(tokens[1:]):
        if index >= forced and is_key_value(token):
            key, value = parse_key_value(token)
            op.params[key] = value
        else:
            op.positionals.append(token)
    return op


def suggest(text: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate closest to ``text``, or None if none is within distance 3."""
    return _suggest(text, candidates)