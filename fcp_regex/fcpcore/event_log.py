"""Cursor-based event log with undo/redo and named checkpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class _Checkpoint:
    """Sentinel stored in the log where a checkpoint was taken."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<checkpoint>"


_CHECKPOINT = _Checkpoint()


class EventLog(Generic[T]):
    """Event log with a cursor, undo/redo and named checkpoints.

    The cursor points one past the last applied entry. Undo moves it back,
    redo moves it forward, and appending a new event discards the redo tail.
    Checkpoint sentinels live in the log but are skipped by undo and redo.
    """

    def __init__(self) -> None:
        self._entries: list[object] = []
        self._cursor = 0
        self._checkpoints: dict[str, int] = {}

    def append(self, event: T) -> None:
        """Append an event, discarding any redo history beyond the cursor."""
        if self._cursor < len(self._entries):
            del self._entries[self._cursor :]
            self._checkpoints = {
                name: idx for name, idx in self._checkpoints.items() if idx <= self._cursor
            }
        self._entries.append(event)
        self._cursor = len(self._entries)

    def checkpoint(self, name: str) -> None:
        """Record a named checkpoint at the current cursor position."""
        self._checkpoints[name] = self._cursor
        self._entries.append(_CHECKPOINT)
        self._cursor = len(self._entries)

    def undo(self, count: int = 1) -> list[T]:
        """Undo up to ``count`` events; return them most recent first."""
        result: list[T] = []
        pos = self._cursor - 1
        while pos >= 0 and len(result) < count:
            entry = self._entries[pos]
            if entry is not _CHECKPOINT:
                result.append(entry)  # type: ignore[arg-type]
            pos -= 1
        self._cursor = pos + 1
        return result

    def undo_to(self, name: str) -> list[T]:
        """Undo back to a named checkpoint; return the events most recent first.

        Raises ValueError if the checkpoint is unknown or not before the cursor.
        """
        target = self._checkpoints.get(name)
        if target is None or target >= self._cursor:
            raise ValueError(f'cannot undo to "{name}"')
        result = [
            entry
            for entry in reversed(self._entries[target : self._cursor])
            if entry is not _CHECKPOINT
        ]
        self._cursor = target
        return result  # type: ignore[return-value]

    def redo(self, count: int = 1) -> list[T]:
        """Redo up to ``count`` events; return them in forward order."""
        result: list[T] = []
        pos = self._cursor
        while pos < len(self._entries) and len(result) < count:
            entry = self._entries[pos]
            if entry is not _CHECKPOINT:
                result.append(entry)  # type: ignore[arg-type]
            pos += 1
        self._cursor = pos
        return result

    def recent(self, count: int = 0) -> list[T]:
        """Return the last ``count`` applied events, oldest first; 0 means all."""
        limit = self._cursor if count == 0 else count
        result: list[T] = []
        for entry in reversed(self._entries[: self._cursor]):
            if len(result) >= limit:
                break
            if entry is not _CHECKPOINT:
                result.append(entry)  # type: ignore[arg-type]
        result.reverse()
        return result

    def cursor(self) -> int:
        """Return the cursor position (one past the last applied entry)."""
        return self._cursor

    def __len__(self) -> int:
        """Return the number of entries, checkpoints included."""
        return len(self._entries)

    def can_undo(self) -> bool:
        """Return whether any event before the cursor can be undone."""
        return any(entry is not _CHECKPOINT for entry in self._entries[: self._cursor])

    def can_redo(self) -> bool:
        """Return whether there are entries after the cursor."""
        return self._cursor < len(self._entries)