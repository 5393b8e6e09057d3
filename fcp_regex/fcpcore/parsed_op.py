"""Parsing of operation strings into verbs, positionals, params and selectors."""

from __future__ import annotations

from dataclasses import dataclass, field

from .tokenizer import is_key_value, is_selector, parse_key_value_with_meta, tokenize


@dataclass
class ParsedOp:
    """A successfully parsed operation."""

    verb: str
    positionals: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)
    selectors: list[str] = field(default_factory=list)
    quoted_params: dict[str, bool] = field(default_factory=dict)
    raw: str = ""


class ParseError(ValueError):
    """Raised when an operation string cannot be parsed."""

    def __init__(self, error: str, raw: str) -> None:
        super().__init__(error)
        self.error = error
        self.raw = raw


def parse_op(text: str) -> ParsedOp:
    """Parse an operation string into a ParsedOp.

    Raises ParseError if the string holds no tokens.
    """
    raw = text.strip()
    tokens = tokenize(raw)
    if not tokens:
        raise ParseError("empty operation", raw)

    op = ParsedOp(verb=tokens[0].lower(), raw=raw)
    for token in tokens[1:]:
        if is_selector(token):
            op.selectors.append(token)
        elif is_key_value(token):
            key, value, was_quoted = parse_key_value_with_meta(token)
            op.params[key] = value
            if was_quoted:
                op.quoted_params[key] = True
        else:
            op.positionals.append(token)
    return op