"""
Tests for the id allocator, the arenas and the adjacency index.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meshgen.base import IdAllocator
from meshgen.entities import Face, Vertex
from meshgen.store import AdjacencyIndex, Arena


def test_allocator_counts_up_from_zero():
    ids = IdAllocator()
    assert [ids.next() for _ in range(5)] == [0, 1, 2, 3, 4]


def test_arena_insert_get_remove():
    arena = Arena()
    arena.insert(Vertex(3, 1.0, 2.0, 3.0))
    arena.insert(Vertex(1, 0.0, 0.0, 0.0))
    assert len(arena) == 2
    assert 3 in arena and 2 not in arena
    assert arena.get(3) == Vertex(3, 1.0, 2.0, 3.0)
    assert arena.get(2) is None
    assert arena.ids() == [1, 3]

    arena.remove(3)
    arena.remove(42)
    assert arena.ids() == [1]


def test_arena_get_returns_copy():
    arena = Arena()
    arena.insert(Face(0, [1, 2, 3]))
    face = arena.get(0)
    face.vertices.append(4)
    assert arena.get(0).vertices == [1, 2, 3]

    ref = arena.get_ref(0)
    ref.vertices.append(4)
    assert arena.get(0).vertices == [1, 2, 3, 4]


def test_arena_insert_is_upsert():
    arena = Arena()
    arena.insert(Vertex(0, 1.0, 1.0, 1.0))
    arena.insert(Vertex(0, 2.0, 2.0, 2.0))
    assert len(arena) == 1
    assert arena.get(0).x == 2.0
    assert [v.id for v in arena.values()] == [0]


def test_adjacency_is_append_only():
    index = AdjacencyIndex()
    index.register(0)
    assert index.faces_of(0) == []
    index.append(0, 5)
    index.append(0, 9)
    index.register(0)
    assert index.faces_of(0) == [5, 9]
    assert index.faces_of(1) == []

    # appending for an unregistered vertex creates the entry
    index.append(1, 5)
    assert 1 in index
    assert len(index) == 2
