"""StructuredNode — the tree produced by the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Leaf:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class Entry:
    key: str
    value: "Node"


@dataclass
class Object:
    """Ordered key/value container. Keys are unique within one Object."""

    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(e.key == key for e in self.entries)

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def get(self, key: str, default: "Node | None" = None) -> "Node | None":
        for e in self.entries:
            if e.key == key:
                return e.value
        return default

    def __getitem__(self, key: str) -> "Node":
        for e in self.entries:
            if e.key == key:
                return e.value
        raise KeyError(key)


Node = Union[Leaf, Object]


# ---------------------------------------------------------------------------
# Conversion to / from plain Python values
# ---------------------------------------------------------------------------

def to_python(node: Node) -> str | dict:
    """Return *node* as nested dicts and strings (insertion order kept)."""
    if isinstance(node, Leaf):
        return node.value
    return {e.key: to_python(e.value) for e in node.entries}


def from_python(value) -> Node:
    """Build a Node from nested dicts and strings.

    Raises ``TypeError`` for anything else (numbers, lists, None, ...),
    since the source format only has string scalars.
    """
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, dict):
        entries: list[Entry] = []
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"object key must be str, got {type(k).__name__}")
            entries.append(Entry(key=k, value=from_python(v)))
        return Object(entries)
    raise TypeError(f"unsupported value type: {type(value).__name__}")
