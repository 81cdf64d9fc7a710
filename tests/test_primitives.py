"""
Tests for the procedural builders.
"""

import os
import sys
import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meshgen.mesh import Mesh
from meshgen.primitives import cube, prism, regular_polygon, square


def centroid(mesh, face_id):
    return np.mean([v.as_tuple() for v in mesh.vertices_of_face(face_id)], axis=0)


def test_regular_polygon():
    mesh = Mesh()
    face = regular_polygon(mesh, 5, radius=2.0, z=1.0)
    vertices = mesh.vertices_of_face(face)
    assert len(vertices) == 5
    for v in vertices:
        assert np.isclose(np.hypot(v.x, v.y), 2.0)
        assert v.z == 1.0
    assert np.allclose(mesh.face_normal(face).as_tuple(), (0, 0, 1), atol=1e-6)


def test_regular_polygon_needs_three_sides():
    with pytest.raises(ValueError):
        regular_polygon(Mesh(), 2)


def test_square_corners():
    mesh = Mesh()
    face = square(mesh, size=4.0)
    assert [v.as_tuple()[:2] for v in mesh.vertices_of_face(face)] == [(-2, -2), (2, -2), (2, 2), (-2, 2)]


def test_prism_counts():
    mesh = prism(6, radius=1.0, height=2.0)
    assert mesh.face_count() == 8
    assert mesh.vertex_count() == 12
    zs = sorted({float(mesh.get_vertex(v).z) for v in mesh.all_vertices()})
    assert zs == [0.0, 2.0]


def test_cube_is_closed_and_outward():
    mesh = cube(2.0)
    assert mesh.face_count() == 6
    assert len(mesh.all_vertices()) == 8
    for v in mesh.all_vertices():
        assert np.allclose(np.abs(mesh.get_vertex(v).as_tuple()), 1.0)
    for face in mesh.all_faces():
        n = np.array(mesh.face_normal(face.id).as_tuple())
        assert np.dot(n, centroid(mesh, face.id)) > 0
