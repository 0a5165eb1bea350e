"""Index entries and traversal context records."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Literal

EntryType = Literal["module", "package", "type", "method", "variable"]

ENTRY_TYPES: tuple[EntryType, ...] = ("module", "package", "type", "method", "variable")


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """One searchable item."""

    id: int
    type: EntryType
    key: str  # space-separated search tokens
    title: str  # fully-qualified display name
    link: str  # relative to the javadoc root, "" for modules
    unifier: str | None = None  # owning type for methods
    body: str | None = None  # normalized doc comment

    def to_dict(self) -> dict[str, Any]:
        """Serialize with optional keys omitted."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "key": self.key,
            "title": self.title,
            "link": self.link,
        }
        if self.unifier is not None:
            data["unifier"] = self.unifier
        if self.body is not None:
            data["body"] = self.body
        return data


@dataclass(frozen=True, slots=True)
class NestedIndex:
    """Enclosing type (or package) on the traversal stack."""

    name: str
    link: str | None = None


@dataclass
class IndexStats:
    """Entry counts per type for a finished traversal."""

    counts: Counter[str] = field(default_factory=Counter)

    @classmethod
    def from_entries(cls, entries: list[IndexEntry]) -> IndexStats:
        return cls(Counter(e.type for e in entries))

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> dict[str, int]:
        return {t: self.counts.get(t, 0) for t in ENTRY_TYPES}
