"""Registry of declared classes, their parents and default field values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Optional, Union

MAX_CLASS_NAME_LENGTH = 127
MAX_FIELD_VALUE_LENGTH = 255

FieldSpec = Union[Mapping[str, Optional[str]], Iterable[tuple[str, Optional[str]]]]


@dataclass(frozen=True)
class ClassEntry:
    """A registered class: its name, parent name ("" when none) and field defaults."""

    name: str
    parent: str = ""
    fields: tuple[tuple[str, str], ...] = field(default_factory=tuple)


def _normalise_fields(fields: Optional[FieldSpec]) -> tuple[tuple[str, str], ...]:
    if fields is None:
        return ()
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    result = []
    for field_name, value in pairs:
        text = "" if value is None else str(value)
        result.append((field_name, text[:MAX_FIELD_VALUE_LENGTH]))
    return tuple(result)


class ClassRegistry:
    """Classes in the order they were registered, looked up by name."""

    def __init__(self) -> None:
        self._entries: dict[str, ClassEntry] = {}

    def register(
        self,
        name: Optional[str],
        parent: Optional[str] = None,
        fields: Optional[FieldSpec] = None,
    ) -> bool:
        """Register a class; return False if the name is empty or already taken.

        ``fields`` gives the class's own fields that have an initial value,
        as a mapping or as (name, value) pairs.
        """
        if not name:
            return False
        key = name[:MAX_CLASS_NAME_LENGTH]
        if key in self._entries:
            return False
        parent_name = (parent or "")[:MAX_CLASS_NAME_LENGTH]
        self._entries[key] = ClassEntry(key, parent_name, _normalise_fields(fields))
        return True

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None if isinstance(name, str) else False

    def __iter__(self) -> Iterator[ClassEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def find(self, name: Optional[str]) -> Optional[ClassEntry]:
        """Return the entry for a class name, or None when it is unknown."""
        if name is None:
            return None
        return self._entries.get(name[:MAX_CLASS_NAME_LENGTH])

    def parent_of(self, name: Optional[str]) -> Optional[str]:
        """Return the parent's name, or None for unknown or root classes."""
        entry = self.find(name)
        if entry is None or not entry.parent:
            return None
        return entry.parent

    def lineage(self, name: Optional[str]) -> list[str]:
        """Names from the class itself up through its registered ancestors.

        An unknown class has an empty lineage; a parent that is not registered
        ends the chain. A cycle in the hierarchy raises ValueError.
        """
        chain: list[str] = []
        current = self.find(name)
        while current is not None:
            if current.name in chain:
                raise ValueError(f"Class hierarchy of '{name}' contains a cycle")
            chain.append(current.name)
            current = self.find(current.parent) if current.parent else None
        return chain

    def default_fields(self, name: Optional[str]) -> list[tuple[str, str]]:
        """Field defaults in the order they are applied to a new instance.

        The class's own fields come first, then each ancestor's; when a name
        repeats, the later (ancestor's) value is the one that remains.
        """
        result: list[tuple[str, str]] = []
        for class_name in self.lineage(name):
            entry = self._entries[class_name]
            result.extend(entry.fields)
        return result

    def clear(self) -> None:
        """Forget every registered class."""
        self._entries.clear()