from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .base import Identifier
from .vector import VectorOps, f32


@dataclass
class Vertex(VectorOps):
    id: Identifier
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x, self.y, self.z = f32(self.x), f32(self.y), f32(self.z)

    def get_x(self) -> np.float32:
        return self.x

    def get_y(self) -> np.float32:
        return self.y

    def get_z(self) -> np.float32:
        return self.z

    def set_x(self, x: float) -> None:
        self.x = f32(x)

    def set_y(self, y: float) -> None:
        self.y = f32(y)

    def set_z(self, z: float) -> None:
        self.z = f32(z)

    def copy(self) -> "Vertex":
        return Vertex(self.id, self.x, self.y, self.z)


@dataclass
class Face:
    """Polygon over vertex ids. The order of ``vertices`` is the winding."""

    id: Identifier
    vertices: List[Identifier] = field(default_factory=list)

    def copy(self) -> "Face":
        return Face(self.id, list(self.vertices))


@dataclass(frozen=True)
class ExtrudeResult:
    top_face: Identifier
    side_faces: List[Identifier]
