"""Result formatting and spelling suggestions.

Prefix conventions:
  + created
  ~ modified (edge/connection)
  * changed (property)
  - removed
  ! meta/group operation
  @ bulk/layout operation
"""

from __future__ import annotations

from collections.abc import Iterable

_MAX_SUGGEST_DISTANCE = 3


def format_result(success: bool, message: str, prefix: str | None = None) -> str:
    """Format a result line.

    Failures become ``ERROR: message`` (the prefix is ignored); successes
    carry the prefix when one is given.
    """
    if not success:
        return f"ERROR: {message}"
    if prefix:
        return f"{prefix} {message}"
    return message


def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between two strings."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def suggest(text: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate closest to ``text``, or None if none is within distance 3.

    Comparison is case-insensitive; on ties the earliest candidate wins.
    """
    lowered = text.lower()
    best: str | None = None
    best_dist = None
    for candidate in candidates:
        dist = levenshtein(lowered, candidate.lower())
        if best_dist is None or dist < best_dist:
            best_dist = dist
            best = candidate
    if best_dist is not None and best_dist <= _MAX_SUGGEST_DISTANCE:
        return best
    return None