"""
meshgen: procedural, editable polygon meshes.

Build vertices and faces by id, move and transform them, extrude faces into
solids and write the result as Wavefront OBJ.
"""
from .base import INVALID_ID, IdAllocator, Identifier
from .entities import ExtrudeResult, Face, Vertex
from .matrix import (apply_mat, mat_identity, mat_mul, mat_rotate, mat_scale, mat_transform,
                     mat_translate, translation)
from .mesh import Mesh
from .primitives import cube, prism, regular_polygon, square
from .vector import Vec3, VectorOps
from .wavefront import export_wavefront, load_obj, read_wavefront, save_obj

__all__ = [
    "INVALID_ID", "IdAllocator", "Identifier",
    "ExtrudeResult", "Face", "Vertex",
    "apply_mat", "mat_identity", "mat_mul", "mat_rotate", "mat_scale", "mat_transform",
    "mat_translate", "translation",
    "Mesh",
    "cube", "prism", "regular_polygon", "square",
    "Vec3", "VectorOps",
    "export_wavefront", "load_obj", "read_wavefront", "save_obj",
]
