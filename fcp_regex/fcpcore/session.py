"""Session-level actions (new, open, save, checkpoint, undo, redo) over a domain model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Generic, TypeVar

from .event_log import EventLog
from .tokenizer import is_key_value, parse_key_value, tokenize

M = TypeVar("M")
E = TypeVar("E")

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quote(text: str) -> str:
    """Return ``text`` in double quotes with quotes, backslashes and controls escaped."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


class SessionHooks(ABC, Generic[M, E]):
    """Lifecycle hooks a domain supplies to a Session.

    Hooks that can fail signal it by raising an exception; the session
    reports the exception's message to the caller.
    """

    @abstractmethod
    def on_new(self, params: Mapping[str, str]) -> M:
        """Create a new empty model from the given params."""

    @abstractmethod
    def on_open(self, path: str) -> M:
        """Load a model from a file path."""

    @abstractmethod
    def on_save(self, model: M, path: str) -> None:
        """Write a model to a file path."""

    @abstractmethod
    def on_rebuild_indices(self, model: M) -> None:
        """Rebuild derived indices after undo or redo."""

    @abstractmethod
    def get_digest(self, model: M) -> str:
        """Return a compact digest of the model for drift detection."""

    @abstractmethod
    def reverse(self, event: E, model: M) -> None:
        """Reverse a single event on the model (undo)."""

    @abstractmethod
    def replay(self, event: E, model: M) -> None:
        """Re-apply a single event on the model (redo)."""


class Session(Generic[M, E]):
    """Routes session command strings to the matching action."""

    def __init__(self, hooks: SessionHooks[M, E]) -> None:
        self.model: M | None = None
        self.file_path = ""
        self.log: EventLog[E] = EventLog()
        self._hooks = hooks

    def dispatch(self, action: str) -> str:
        """Parse and run a session command, returning a human-readable result.

        Commands: new "Title" [params...], open PATH, save, save as:PATH,
        checkpoint NAME, undo, undo to:NAME, redo, status, close.
        """
        tokens = tokenize(action)
        if not tokens:
            return "empty action"

        command = tokens[0].lower()
        args = tokens[1:]
        if command == "new":
            return self._new(args)
        if command == "open":
            return self._open(args)
        if command == "save":
            return self._save(args)
        if command == "checkpoint":
            return self._checkpoint(args)
        if command == "undo":
            return self._undo(args)
        if command == "redo":
            return self._redo()
        if command == "status":
            return self._status()
        if command == "close":
            return self._close()
        return f"unknown session action {_quote(command)}"

    def _new(self, args: list[str]) -> str:
        params: dict[str, str] = {}
        positionals: list[str] = []
        for token in args:
            if is_key_value(token):
                key, value = parse_key_value(token)
                params[key] = value
            else:
                positionals.append(token)
        if positionals:
            params["title"] = positionals[0]

        try:
            model = self._hooks.on_new(params)
        except Exception as exc:
            return f"error: {exc}"

        self.model = model
        self.log = EventLog()
        self.file_path = ""
        title = params.get("title") or "Untitled"
        return f"new {_quote(title)} created"

    def _open(self, args: list[str]) -> str:
        if not args:
            return "open requires a file path"
        path = args[0]
        try:
            model = self._hooks.on_open(path)
        except Exception as exc:
            return f"error: {exc}"

        self.model = model
        self.log = EventLog()
        self.file_path = path
        return f"opened {_quote(path)}"

    def _save(self, args: list[str]) -> str:
        if self.model is None:
            return "error: no model to save"

        save_path = self.file_path
        for token in args:
            if is_key_value(token):
                key, value = parse_key_value(token)
                if key == "as":
                    save_path = value
        if not save_path:
            return "error: no file path. Use save as:./file"

        try:
            self._hooks.on_save(self.model, save_path)
        except Exception as exc:
            return f"error: {exc}"
        self.file_path = save_path
        return f"saved {_quote(save_path)}"

    def _checkpoint(self, args: list[str]) -> str:
        if not args:
            return "checkpoint requires a name"
        name = args[0]
        self.log.checkpoint(name)
        return f"checkpoint {_quote(name)} created"

    def _apply_reverse(self, events: list[E]) -> None:
        model = self.model
        for event in events:
            self._hooks.reverse(event, model)  # type: ignore[arg-type]
        self._hooks.on_rebuild_indices(model)  # type: ignore[arg-type]

    def _undo(self, args: list[str]) -> str:
        if self.model is None:
            return "nothing to undo"

        if args and args[0].startswith("to:"):
            name = args[0][len("to:"):]
            if not name:
                return "undo to: requires a checkpoint name"
            try:
                events = self.log.undo_to(name)
            except ValueError:
                return f"cannot undo to {_quote(name)}"
            self._apply_reverse(events)
            count = len(events)
            return f"undone {count} event{_plural(count)} to checkpoint {_quote(name)}"

        events = self.log.undo(1)
        if not events:
            return "nothing to undo"
        self._apply_reverse(events)
        count = len(events)
        return f"undone {count} event{_plural(count)}"

    def _redo(self) -> str:
        if self.model is None:
            return "nothing to redo"
        events = self.log.redo(1)
        if not events:
            return "nothing to redo"
        model = self.model
        for event in events:
            self._hooks.replay(event, model)
        self._hooks.on_rebuild_indices(model)
        count = len(events)
        return f"redone {count} event{_plural(count)}"

    def _status(self) -> str:
        return "status: placeholder"

    def _close(self) -> str:
        return "close: placeholder"