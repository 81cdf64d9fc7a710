"""
Wavefront OBJ output and input.

Only positions and polygon faces are written. Each exported vertex gets a
1-based index in emission order, unrelated to its mesh Identifier.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, TextIO

import numpy as np

from .base import Identifier
from .mesh import Mesh

logger = logging.getLogger(__name__)

HEADER = "# meshgen wavefront export"


def _coord(value: np.float32, precision: Optional[int]) -> str:
    if precision is None:
        # shortest text that reads back as the same float32
        return np.format_float_positional(value, unique=True, trim="-")
    return f"{value:.{precision}f}"


def export_wavefront(mesh: Mesh, w: TextIO, *, name: Optional[str] = None, precision: Optional[int] = None) -> None:
    """Write OBJ text. Coordinates are exact float32 unless ``precision`` fixes the decimals."""
    w.write(HEADER + "\n")
    if name:
        w.write(f"o {name}\n")
    vertex_map: Dict[Identifier, int] = {}
    for i, vertex_id in enumerate(mesh.all_vertices(), start=1):
        vertex = mesh.get_vertex(vertex_id)
        if vertex is None:
            raise ValueError(f"face references missing vertex {vertex_id}")
        vertex_map[vertex_id] = i
        w.write("v " + " ".join(_coord(c, precision) for c in (vertex.x, vertex.y, vertex.z)) + "\n")
    faces = mesh.all_faces()
    for face in faces:
        w.write("f" + "".join(f" {vertex_map[v]}" for v in face.vertices) + "\n")
    logger.debug("exported %d vertices, %d faces", len(vertex_map), len(faces))


def save_obj(path: str, mesh: Mesh, *, name: Optional[str] = None, precision: Optional[int] = None) -> None:
    with open(path, "w", encoding="utf-8") as f:
        export_wavefront(mesh, f, name=name, precision=precision)


def _face_index(token: str, count: int, lineno: int) -> int:
    # "i", "i/t", "i//n", "i/t/n"; negative indices count back from the end
    try:
        i = int(token.split("/", 1)[0])
    except ValueError:
        raise ValueError(f"line {lineno}: bad face index {token!r}") from None
    if i < 0:
        i = count + i + 1
    if not 1 <= i <= count:
        raise ValueError(f"line {lineno}: face index {token!r} out of range")
    return i


def read_wavefront(r: TextIO) -> Mesh:
    """Build a Mesh from OBJ text. Directives other than v and f are skipped."""
    mesh = Mesh()
    ids: List[Identifier] = []
    face_count = 0
    for lineno, line in enumerate(r, start=1):
        parts = line.split("#", 1)[0].split()
        if not parts:
            continue
        tag, args = parts[0], parts[1:]
        if tag == "v":
            if len(args) < 3:
                raise ValueError(f"line {lineno}: vertex needs 3 coordinates")
            try:
                x, y, z = (float(a) for a in args[:3])
            except ValueError:
                raise ValueError(f"line {lineno}: bad vertex coordinate") from None
            ids.append(mesh.gen_vertex(x, y, z))
        elif tag == "f":
            mesh.gen_face([ids[_face_index(a, len(ids), lineno) - 1] for a in args])
            face_count += 1
    logger.debug("read %d vertices, %d faces", len(ids), face_count)
    return mesh


def load_obj(path: str) -> Mesh:
    with open(path, "r", encoding="utf-8") as f:
        return read_wavefront(f)
