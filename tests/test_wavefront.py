"""
Tests for OBJ export and import.
"""

import io
import os
import sys
import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meshgen.mesh import Mesh
from meshgen.primitives import cube, square
from meshgen.vector import Vec3
from meshgen.wavefront import export_wavefront, load_obj, read_wavefront, save_obj


def export_text(mesh, **kwargs):
    buf = io.StringIO()
    export_wavefront(mesh, buf, **kwargs)
    return buf.getvalue()


def connectivity(mesh):
    """Faces as lists of export positions, independent of the mesh ids."""
    index = {v: i for i, v in enumerate(mesh.all_vertices())}
    return [[index[v] for v in f.vertices] for f in mesh.all_faces()]


def test_export_unit_square():
    mesh = Mesh()
    square(mesh)
    assert export_text(mesh).splitlines() == [
        "# meshgen wavefront export",
        "v -1 -1 0",
        "v 1 -1 0",
        "v 1 1 0",
        "v -1 1 0",
        "f 1 2 3 4",
    ]


def test_export_name_and_precision():
    mesh = Mesh()
    ids = [mesh.gen_vertex(0.5, 0, 0), mesh.gen_vertex(0, 0.25, 0), mesh.gen_vertex(0, 0, 1)]
    mesh.gen_face(ids)
    lines = export_text(mesh, name="tri", precision=2).splitlines()
    assert lines[1] == "o tri"
    assert lines[2] == "v 0.50 0.00 0.00"
    assert lines[-1] == "f 1 2 3"


def test_export_keeps_small_coordinates():
    """Default output reads back as the same float32 values."""
    mesh = Mesh()
    ids = [mesh.gen_vertex(1.234567e-5, 0, 0), mesh.gen_vertex(0, 2.5e-7, 0), mesh.gen_vertex(0.1, 0, 1e-3)]
    mesh.gen_face(ids)
    back = read_wavefront(io.StringIO(export_text(mesh)))
    for a, b in zip(mesh.all_vertices(), back.all_vertices()):
        assert np.allclose(mesh.get_vertex(a).as_tuple(), back.get_vertex(b).as_tuple(), rtol=1e-6, atol=0)
    assert "e" not in export_text(mesh).split("\n", 1)[1]


def test_export_uses_sequential_indices():
    """Unattached vertices are skipped and indices stay dense."""
    mesh = Mesh()
    mesh.gen_vertex(9, 9, 9)
    ids = [mesh.gen_vertex(x, 0, 0) for x in range(3)]
    mesh.gen_vertex(8, 8, 8)
    mesh.gen_face([ids[2], ids[0], ids[1]])
    lines = export_text(mesh).splitlines()
    assert sum(1 for line in lines if line.startswith("v ")) == 3
    assert lines[-1] == "f 3 1 2"


def test_export_dangling_reference():
    mesh = Mesh()
    a = mesh.gen_vertex(0, 0, 0)
    mesh.gen_face([a, 99])
    with pytest.raises(ValueError):
        export_text(mesh)


def test_round_trip_extruded_mesh(tmp_path):
    mesh = Mesh()
    face = square(mesh)
    res = mesh.extrude_face(face, Vec3(0.1, 0.2, 1.5))
    mesh.extrude_face_normal(res.top_face, 0.75)

    path = tmp_path / "out.obj"
    save_obj(str(path), mesh, name="tower")
    back = load_obj(str(path))

    assert len(back.all_vertices()) == len(mesh.all_vertices())
    assert len(back.all_faces()) == len(mesh.all_faces())
    for a, b in zip(mesh.all_vertices(), back.all_vertices()):
        assert np.allclose(mesh.get_vertex(a).as_tuple(), back.get_vertex(b).as_tuple(), atol=1e-5)
    assert connectivity(back) == connectivity(mesh)


def test_round_trip_cube():
    mesh = cube(2.0)
    back = read_wavefront(io.StringIO(export_text(mesh)))
    assert back.face_count() == 6
    assert back.vertex_count() == 8
    assert connectivity(back) == connectivity(mesh)


def test_read_face_token_forms():
    text = "\n".join([
        "# comment",
        "o thing",
        "v 0 0 0",
        "v 1 0 0  # trailing comment",
        "v 1 1 0",
        "v 0 1 0",
        "vn 0 0 1",
        "",
        "f 1/1/1 2//1 3/3 -1",
        "s off",
    ])
    mesh = read_wavefront(io.StringIO(text))
    faces = mesh.all_faces()
    assert len(faces) == 1
    assert [mesh.get_vertex(v).as_tuple() for v in faces[0].vertices] == [
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)
    ]


@pytest.mark.parametrize("text", [
    "v 0 0\n",
    "v 0 a 0\n",
    "v 0 0 0\nf 1 2\n",
    "v 0 0 0\nf 0\n",
    "v 0 0 0\nf x\n",
])
def test_read_rejects_bad_input(text):
    with pytest.raises(ValueError):
        read_wavefront(io.StringIO(text))
