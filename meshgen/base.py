from __future__ import annotations

from dataclasses import dataclass

# Internal mesh identifier, shared by vertices and faces
Identifier = int

# Returned by Mesh.duplicate_vertex when the source vertex does not exist
INVALID_ID: Identifier = -1


@dataclass
class IdAllocator:
    """Monotonic counter. Values are never handed out twice."""

    counter: Identifier = 0

    def next(self) -> Identifier:
        res = self.counter
        self.counter += 1
        return res
