from __future__ import annotations

import math
from typing import List

from .base import Identifier
from .matrix import mat_transform, mat_translate
from .mesh import Mesh
from .vector import Vec3


# -----------------------
# Faces on an existing mesh
# -----------------------

def regular_polygon(mesh: Mesh, sides: int, radius: float = 1.0, z: float = 0.0) -> Identifier:
    """Add a regular polygon in the plane z, counter-clockwise seen from +Z."""
    if sides < 3:
        raise ValueError(f"sides must be >= 3 (got {sides})")
    ids: List[Identifier] = []
    for i in range(sides):
        ang = i * 2 * math.pi / sides
        ids.append(mesh.gen_vertex(radius * math.cos(ang), radius * math.sin(ang), z))
    return mesh.gen_face(ids)


def square(mesh: Mesh, size: float = 2.0, z: float = 0.0) -> Identifier:
    h = size / 2
    ids = [
        mesh.gen_vertex(-h, -h, z),
        mesh.gen_vertex(h, -h, z),
        mesh.gen_vertex(h, h, z),
        mesh.gen_vertex(-h, h, z),
    ]
    return mesh.gen_face(ids)


# -----------------------
# Closed solids
# -----------------------

def _close_bottom(mesh: Mesh, cap: List[Identifier]) -> Identifier:
    # extrude_face removes the cap, put it back facing -Z
    return mesh.gen_face(list(reversed(cap)))


def prism(sides: int = 6, radius: float = 1.0, height: float = 1.0) -> Mesh:
    mesh = Mesh()
    face = regular_polygon(mesh, sides, radius)
    cap = mesh.get_face(face).vertices
    mesh.extrude_face(face, Vec3(0.0, 0.0, height))
    _close_bottom(mesh, cap)
    return mesh


def cube(size: float = 1.0) -> Mesh:
    """Axis-aligned cube centred on the origin, six quads."""
    mesh = Mesh()
    face = square(mesh, size)
    cap = mesh.get_face(face).vertices
    mesh.extrude_face(face, Vec3(0.0, 0.0, size))
    _close_bottom(mesh, cap)
    mesh.transform_vertices(mesh.all_vertices(), mat_transform(mat_translate(0.0, 0.0, -size / 2)))
    return mesh
