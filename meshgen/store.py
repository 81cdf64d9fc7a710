"""
Identifier-keyed containers backing a Mesh.

``Arena.get`` hands out copies; ``Arena.get_ref`` returns the stored object
and is meant for the owning Mesh only.
"""
from __future__ import annotations

from typing import Dict, Generic, List, Optional, TypeVar

from .base import Identifier

T = TypeVar("T")


class Arena(Generic[T]):
    def __init__(self) -> None:
        self._items: Dict[Identifier, T] = {}

    def insert(self, item: T) -> None:
        self._items[item.id] = item  # type: ignore[attr-defined]

    def get(self, id: Identifier) -> Optional[T]:
        item = self._items.get(id)
        if item is None:
            return None
        return item.copy()  # type: ignore[attr-defined]

    def get_ref(self, id: Identifier) -> Optional[T]:
        return self._items.get(id)

    def remove(self, id: Identifier) -> None:
        self._items.pop(id, None)

    def ids(self) -> List[Identifier]:
        return sorted(self._items)

    def values(self) -> List[T]:
        return [self._items[i].copy() for i in self.ids()]  # type: ignore[attr-defined]

    def __contains__(self, id: object) -> bool:
        return id in self._items

    def __len__(self) -> int:
        return len(self._items)


class AdjacencyIndex:
    """vertex id -> ids of the faces created over it.

    Append-only: deleting a face does not remove it from here, so entries
    can name faces that no longer exist.
    """

    def __init__(self) -> None:
        self._faces: Dict[Identifier, List[Identifier]] = {}

    def register(self, vertex_id: Identifier) -> None:
        self._faces.setdefault(vertex_id, [])

    def append(self, vertex_id: Identifier, face_id: Identifier) -> None:
        self._faces.setdefault(vertex_id, []).append(face_id)

    def faces_of(self, vertex_id: Identifier) -> List[Identifier]:
        return list(self._faces.get(vertex_id, ()))

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._faces

    def __len__(self) -> int:
        return len(self._faces)
