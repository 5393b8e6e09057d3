# fcp-regex

Building blocks for a small text language that composes regular expressions
out of named fragments, with operations such as `define digits any:digit+`
or `compile semver anchored:true`.

## What is in the package

- `fcp_regex.fcpcore.tokenizer`
  - `tokenize(text)` splits an operation string into tokens on spaces. It
    handles fully quoted tokens, quoted sections inside a token, backslash
    escapes and the `\n` newline escape.
  - `is_key_value(token)` checks for `key:value` tokens.
  - `is_selector(token)` checks for `@selector` tokens.
  - `is_arrow(token)` checks for the arrows `->`, `<->` and `--`.
  - `parse_key_value(token)` and `parse_key_value_with_meta(token)` split a
    `key:value` token. They strip surrounding quotes from the value, and the
    second also reports whether it was quoted.
- `fcp_regex.fcpcore.parsed_op`
  - `parse_op(text)` returns a `ParsedOp` with `verb` (lower-cased),
    `positionals`, `params`, `selectors`, `quoted_params` and `raw`.
  - Empty input raises `ParseError`, a `ValueError` with `error` and `raw`
    attributes.
- `fcp_regex.fcpcore.formatter`
  - `format_result(success, message, prefix)` gives `ERROR: message` on
    failure, and otherwise `prefix message`, or the plain message when there
    is no prefix.
  - `levenshtein(a, b)` returns the edit distance between two strings.
  - `suggest(text, candidates)` returns the closest candidate within distance
    3, compared case-insensitively, or `None`.
- `fcp_regex.fcpcore.event_log`
  - `EventLog` is a cursor-based log with `append`, `undo(count)`,
    `redo(count)`, named checkpoints (`checkpoint(name)`, `undo_to(name)`),
    `recent(count)`, `cursor()`, `can_undo()`, `can_redo()` and `len()`.
  - `undo_to` raises `ValueError` if the checkpoint is unknown or not before
    the cursor.
  - Appending after an undo discards the redo tail, together with any
    checkpoints beyond it.
- `fcp_regex.fcpcore.verb_registry`
  - `VerbSpec(name, syntax, category)` describes one verb.
  - `VerbRegistry` offers `register`, `register_many`, `lookup`, `verbs` and
    `generate_reference_card(extra_sections)`. The reference card lists the
    verbs grouped by upper-cased category, in registration order.
- `fcp_regex.fcpcore.session`
  - `Session(hooks)` runs session command strings through `dispatch`. The
    commands are `new "Title" [key:value...]`, `open PATH`, `save`,
    `save as:PATH`, `checkpoint NAME`, `undo`, `undo to:NAME`, `redo`,
    `status` and `close`.
  - `dispatch` returns a text result.
  - You supply a `SessionHooks` subclass: `on_new`, `on_open`, `on_save`,
    `on_rebuild_indices`, `get_digest`, `reverse` and `replay`. A hook that
    fails raises, and the session reports `error: <message>`.
- `fcp_regex.parse`
  - `parse_op(text)` parses the fragment verbs. The first positional of
    `define`, `from`, `compile` and `drop`, and the first two of `rename`, are
    taken verbatim, so names such as `rfc3986:scheme` stay positionals.
  - It returns a `ParsedOp` with `verb`, `positionals`, `params` and `raw`, and
    raises `ParseError` on empty input.
  - The module also provides `suggest`.
- `fcp_regex.reference_card`
  - `REFERENCE_CARD` is the help text for the operation language.

## Installation

```
pip install .
```

## Example

```python
from fcp_regex.parse import parse_op, suggest
from fcp_regex.fcpcore.event_log import EventLog

op = parse_op("from rfc3986:scheme as:myscheme")
op.verb          # "from"
op.positionals   # ["rfc3986:scheme"]
op.params        # {"as": "myscheme"}

suggest("defne", ["define", "compile"])   # "define"

log = EventLog()
log.append("a")
log.checkpoint("v1")
log.append("b")
log.undo_to("v1")   # ["b"]
log.redo(1)         # ["b"]
```

## What the package does not do

The package parses operations and keeps undo/redo history, but it does not
carry out the fragment operations themselves:

- There is no fragment registry.
- There is no compiler that turns fragments into a regex.
- There is no library of ready-made patterns.
- There is no query handler.
- There is no server or command-line program.

The verbs described in `REFERENCE_CARD` (`define`, `from`, `compile`, `drop`,
`rename`, and the queries) are parsed, but not executed.

In `Session`, the `status` and `close` commands return the fixed texts
`status: placeholder` and `close: placeholder`.

## Running the tests

```
pip install ".[test]"
pytest
```