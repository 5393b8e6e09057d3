"""Registry of verb specifications and reference card generation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class VerbSpec:
    """A single verb: its name, its syntax line and its category."""

    name: str
    syntax: str
    category: str


class VerbRegistry:
    """Verb specifications looked up by name and grouped by category."""

    def __init__(self) -> None:
        self._specs: dict[str, VerbSpec] = {}
        self._categories: dict[str, list[VerbSpec]] = {}

    def register(self, spec: VerbSpec) -> None:
        """Register one verb specification."""
        self._specs[spec.name] = spec
        self._categories.setdefault(spec.category, []).append(spec)

    def register_many(self, specs: Iterable[VerbSpec]) -> None:
        """Register several verb specifications."""
        for spec in specs:
            self.register(spec)

    def lookup(self, name: str) -> VerbSpec | None:
        """Return the specification for ``name``, or None if it is unknown."""
        return self._specs.get(name)

    def verbs(self) -> list[VerbSpec]:
        """Return all registered verb specifications."""
        return list(self._specs.values())

    def generate_reference_card(self, extra_sections: Mapping[str, str] | None = None) -> str:
        """Build a reference card grouped by category, in registration order.

        Extra sections, if given, follow the verb listing, each under its
        upper-cased title.
        """
        lines: list[str] = []
        for category, specs in self._categories.items():
            lines.append(f"{category.upper()}:")
            lines.extend(f"  {spec.syntax}" for spec in specs)
            lines.append("")

        for title, content in (extra_sections or {}).items():
            lines.append(f"{title.upper()}:")
            lines.append(content)
            lines.append("")

        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)