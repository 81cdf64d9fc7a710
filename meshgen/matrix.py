"""
4x4 homogeneous transforms.

Matrices are numpy float32 arrays acting on column vectors:
v' = M @ [x, y, z, 1]. Combine with mat_mul (rightmost applies first) and
hand the result to Mesh.transform_vertices via mat_transform.
"""
from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

import numpy as np

from .vector import Vec3, VectorOps

Mat4 = np.ndarray


def mat_identity() -> Mat4:
    return np.identity(4, dtype=np.float32)


def mat_mul(a: Mat4, b: Mat4) -> Mat4:
    return (a @ b).astype(np.float32)


def mat_translate(dx: float, dy: float, dz: float) -> Mat4:
    m = mat_identity()
    m[:3, 3] = (dx, dy, dz)
    return m


def mat_scale(sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> Mat4:
    diag = (sx, sx if sy is None else sy, sx if sz is None else sz, 1.0)
    return np.diag(np.asarray(diag, dtype=np.float32))


def mat_rotate(a: float, axis: Sequence[float]) -> Mat4:
    """Rotation by ``a`` radians around ``axis`` (right-handed, Rodrigues)."""
    k = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(k)
    if norm == 0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = k / norm
    c, s = math.cos(a), math.sin(a)
    t = 1.0 - c
    m = mat_identity()
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def apply_mat(v: VectorOps, m: Mat4) -> Vec3:
    p = m @ np.array([v.get_x(), v.get_y(), v.get_z(), 1.0], dtype=np.float32)
    # projective matrices leave w outside {0, 1}
    if p[3] not in (0.0, 1.0):
        p = p / p[3]
    return Vec3(*p[:3])


def translation(m: Mat4) -> Vec3:
    """Where ``m`` sends the origin, as a displacement."""
    return apply_mat(Vec3(), m)


def mat_transform(m: Mat4) -> Callable[[VectorOps], None]:
    """In-place vertex function for Mesh.transform_vertices."""
    def f(v: VectorOps) -> None:
        res = apply_mat(v, m)
        v.set_x(res.x)
        v.set_y(res.y)
        v.set_z(res.z)

    return f
