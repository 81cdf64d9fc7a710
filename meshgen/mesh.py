"""
Editable polygon mesh.

The Mesh owns every vertex and face and hands out identifiers plus copies.
Editing goes through ids only:

    mesh = Mesh()
    a = mesh.gen_vertex(-1, -1, 0)
    ...
    f = mesh.gen_face([a, b, c, d])
    res = mesh.extrude_face(f, Vec3(0, 0, 1))

Missing ids are handled three ways:

- lookups (get_vertex, get_face, vertices_of_face, extrude_face) return None
- move/transform mutations silently do nothing
- duplicate_vertex returns INVALID_ID (-1)

face_normal has hard preconditions (existing face, at least three vertices)
and lets the KeyError / IndexError escape.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from .base import INVALID_ID, IdAllocator, Identifier
from .entities import ExtrudeResult, Face, Vertex
from .store import AdjacencyIndex, Arena
from .vector import Vec3, VectorOps

logger = logging.getLogger(__name__)

VertexFn = Callable[[Vertex], None]


class Mesh:
    def __init__(self) -> None:
        self._ids = IdAllocator()
        self._vertices: Arena[Vertex] = Arena()
        self._faces: Arena[Face] = Arena()
        self._vertex_faces = AdjacencyIndex()

    # ---- creation ----
    def gen_id(self) -> Identifier:
        return self._ids.next()

    def gen_vertex(self, x: float, y: float, z: float) -> Identifier:
        new_id = self.gen_id()
        self._vertex_faces.register(new_id)
        self._vertices.insert(Vertex(new_id, x, y, z))
        return new_id

    def gen_face(self, vertices: Sequence[Identifier]) -> Identifier:
        new_id = self.gen_id()
        face = Face(new_id, list(vertices))
        for vertex_id in face.vertices:
            self._vertex_faces.append(vertex_id, new_id)
        self._faces.insert(face)
        return new_id

    # ---- queries ----
    def get_vertex(self, id: Identifier) -> Optional[Vertex]:
        return self._vertices.get(id)

    def get_face(self, id: Identifier) -> Optional[Face]:
        return self._faces.get(id)

    def vertices_of_face(self, id: Identifier) -> Optional[List[Vertex]]:
        face = self._faces.get_ref(id)
        if face is None:
            return None
        return [self._vertex(v) for v in face.vertices]

    def faces_of_vertex(self, id: Identifier) -> List[Identifier]:
        """Faces created over ``id``. May include faces deleted since."""
        return self._vertex_faces.faces_of(id)

    def all_faces(self) -> List[Face]:
        return self._faces.values()

    def all_vertices(self) -> List[Identifier]:
        """Ids referenced by at least one live face, ascending.

        Vertices that were never attached, or whose faces were all deleted,
        are left out even though get_vertex still finds them.
        """
        ids = set()
        for face in self.all_faces():
            ids.update(face.vertices)
        return sorted(ids)

    def vertex_count(self) -> int:
        return len(self._vertices)

    def face_count(self) -> int:
        return len(self._faces)

    def face_normal(self, face_id: Identifier) -> Vec3:
        face = self._faces.get_ref(face_id)
        if face is None:
            raise KeyError(f"face {face_id} does not exist")
        v1, v2, v3 = (self._vertex(i) for i in (face.vertices[0], face.vertices[1], face.vertices[2]))
        a = Vec3.of(v2)
        a.sub_from(v1)
        b = Vec3.of(v3)
        b.sub_from(v2)
        a.cross_prod_to(b)
        a.normalize()
        return a

    # ---- mutation ----
    def update_vertex(self, vertex: Vertex) -> None:
        self._vertices.insert(vertex.copy())

    def delete_face(self, id: Identifier) -> None:
        # adjacency keeps pointing at the deleted face
        self._faces.remove(id)

    def move_vertex(self, id: Identifier, v: VectorOps) -> None:
        vertex = self.get_vertex(id)
        if vertex is None:
            return
        vertex.add_to(v)
        self.update_vertex(vertex)

    def move_face(self, id: Identifier, v: VectorOps) -> None:
        face = self.get_face(id)
        if face is None:
            return
        for vertex_id in face.vertices:
            self.move_vertex(vertex_id, v)

    def duplicate_vertex(self, id: Identifier) -> Identifier:
        vertex = self.get_vertex(id)
        if vertex is None:
            return INVALID_ID
        return self.gen_vertex(vertex.x, vertex.y, vertex.z)

    def duplicate_vertices(self, ids: Iterable[Identifier]) -> List[Identifier]:
        return [self.duplicate_vertex(i) for i in ids]

    def transform_vertices(self, ids: Iterable[Identifier], f: VertexFn) -> None:
        """Call ``f`` on a copy of each existing vertex and store the result."""
        for id in ids:
            vertex = self.get_vertex(id)
            if vertex is None:
                continue
            f(vertex)
            self.update_vertex(vertex)

    def transform_vertices_to_point(self, origin: VectorOps, ids: Iterable[Identifier], f: VertexFn) -> None:
        """Like transform_vertices, with ``origin`` as the pivot."""
        def around_origin(vertex: Vertex) -> None:
            vertex.sub_from(origin)
            f(vertex)
            vertex.add_to(origin)

        self.transform_vertices(ids, around_origin)

    # ---- topology ----
    def extrude_face(self, face_id: Identifier, v: VectorOps) -> Optional[ExtrudeResult]:
        face = self.get_face(face_id)
        if face is None:
            return None
        cap = face.vertices
        top = self.duplicate_vertices(cap)
        self.transform_vertices(top, lambda vertex: vertex.add_to(v))

        side_faces: List[Identifier] = []
        n = len(cap)
        for i in range(n):
            prev_cap, cur_cap = cap[i - 1], cap[i]
            prev_top, cur_top = top[i - 1], top[i]
            side_faces.append(self.gen_face([prev_cap, cur_cap, cur_top, prev_top]))

        self.delete_face(face_id)
        top_face = self.gen_face(top)
        logger.debug("extruded face %d: top face %d, %d side faces", face_id, top_face, len(side_faces))
        return ExtrudeResult(top_face, side_faces)

    def extrude_face_normal(self, face_id: Identifier, length: float) -> Optional[ExtrudeResult]:
        if face_id not in self._faces:
            return None
        v = self.face_normal(face_id)
        v.mult_scalar_to(length)
        return self.extrude_face(face_id, v)

    # ---- internals ----
    def _vertex(self, id: Identifier) -> Vertex:
        vertex = self._vertices.get(id)
        if vertex is None:
            raise KeyError(f"vertex {id} does not exist")
        return vertex
