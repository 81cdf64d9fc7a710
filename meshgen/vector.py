"""
Shared x/y/z arithmetic.

Anything with a position implements the six accessors of ``VectorOps``
(get/set for x, y and z) and inherits the arithmetic below, which is written
purely in terms of those accessors. Components are kept as 32-bit floats.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

Vec3Tuple = Tuple[float, float, float]


def f32(value: float) -> np.float32:
    return np.float32(value)


class VectorOps:
    """Capability mixin: subclasses provide the accessors, arithmetic is shared."""

    def get_x(self) -> np.float32:
        raise NotImplementedError

    def get_y(self) -> np.float32:
        raise NotImplementedError

    def get_z(self) -> np.float32:
        raise NotImplementedError

    def set_x(self, x: float) -> None:
        raise NotImplementedError

    def set_y(self, y: float) -> None:
        raise NotImplementedError

    def set_z(self, z: float) -> None:
        raise NotImplementedError

    # ---- in-place arithmetic ----
    def add_to(self, v: "VectorOps") -> None:
        x, y, z = self.get_x(), self.get_y(), self.get_z()
        self.set_x(x + v.get_x())
        self.set_y(y + v.get_y())
        self.set_z(z + v.get_z())

    def sub_from(self, v: "VectorOps") -> None:
        x, y, z = self.get_x(), self.get_y(), self.get_z()
        self.set_x(x - v.get_x())
        self.set_y(y - v.get_y())
        self.set_z(z - v.get_z())

    def mult_scalar_to(self, factor: float) -> None:
        factor = f32(factor)
        x, y, z = self.get_x(), self.get_y(), self.get_z()
        self.set_x(x * factor)
        self.set_y(y * factor)
        self.set_z(z * factor)

    def cross_prod_to(self, v: "VectorOps") -> None:
        x = self.get_y() * v.get_z() - v.get_y() * self.get_z()
        y = self.get_z() * v.get_x() - v.get_z() * self.get_x()
        z = self.get_x() * v.get_y() - v.get_x() * self.get_y()
        self.set_x(x)
        self.set_y(y)
        self.set_z(z)

    def length(self) -> np.float32:
        x, y, z = self.get_x(), self.get_y(), self.get_z()
        return np.sqrt(x * x + y * y + z * z)

    def normalize(self) -> None:
        # zero length gives NaN components, callers must not rely on a fallback
        length = self.length()
        with np.errstate(divide="ignore", invalid="ignore"):
            x = self.get_x() / length
            y = self.get_y() / length
            z = self.get_z() / length
        self.set_x(x)
        self.set_y(y)
        self.set_z(z)

    def as_tuple(self) -> Vec3Tuple:
        return (float(self.get_x()), float(self.get_y()), float(self.get_z()))


@dataclass
class Vec3(VectorOps):
    """Free-standing displacement / direction."""

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

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    @classmethod
    def of(cls, v: VectorOps) -> "Vec3":
        return cls(v.get_x(), v.get_y(), v.get_z())
