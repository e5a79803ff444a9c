#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

from .errors import InvalidFaceIndex, MeshLoadError
from .math_utils import Vec3

logger = logging.getLogger(__name__)


class Mesh:
    """
    Immutable triangle mesh: a vertex list and a list of index triples.

    Every face index is checked against the vertex list on construction,
    so the render pipeline can index vertices without bounds checks.
    """
    __slots__ = ('_vertices', '_faces')

    def __init__(self, vertices, faces):
        self._vertices = tuple(v if isinstance(v, Vec3) else Vec3(*v) for v in vertices)
        self._faces = tuple(tuple(int(i) for i in f) for f in faces)

        n = len(self._vertices)
        for face_no, face in enumerate(self._faces):
            if len(face) != 3:
                raise ValueError(f"face {face_no} has {len(face)} indices, expected 3")
            for idx in face:
                if idx < 0 or idx >= n:
                    raise InvalidFaceIndex(face_no, idx, n)

    def __repr__(self):
        return f"Mesh(vertices={len(self._vertices)}, faces={len(self._faces)})"

    def __iter__(self):
        return iter(self._faces)

    def vertex_count(self) -> int:
        return len(self._vertices)

    def vertex(self, i: int) -> Vec3:
        return self._vertices[i]

    def face_count(self) -> int:
        return len(self._faces)

    def face(self, i: int):
        return self._faces[i]

    @property
    def vertices(self):
        return self._vertices

    @property
    def faces(self):
        return self._faces

    @classmethod
    def from_obj(cls, filename) -> 'Mesh':
        """
        Load a Wavefront OBJ file.

        Reads 'v' and 'f' records and ignores everything else. Face entries
        may use the v/vt/vn form; only the position index is kept. Polygons
        are fan-triangulated, faces with fewer than three indices are skipped.
        """
        vertices = []
        faces = []
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for line_no, line in enumerate(f, start=1):
                    if line.startswith('v '):
                        coords = line.split()[1:4]
                        if len(coords) != 3:
                            raise MeshLoadError(filename, "vertex needs 3 coordinates", line_no)
                        try:
                            xyz = [float(x) for x in coords]
                        except ValueError as e:
                            raise MeshLoadError(filename, str(e), line_no) from e
                        if not all(math.isfinite(c) for c in xyz):
                            raise MeshLoadError(filename, "non-finite vertex coordinate", line_no)
                        vertices.append(Vec3(*xyz))
                    elif line.startswith('f '):
                        try:
                            face = [_resolve_index(int(x.split('/')[0]), len(vertices))
                                    for x in line.split()[1:]]
                        except ValueError as e:
                            raise MeshLoadError(filename, str(e), line_no) from e
                        if len(face) < 3:
                            logger.warning("%s:%d: skipping face with %d indices",
                                           filename, line_no, len(face))
                            continue
                        # Fan triangulation: (0, i, i+1)
                        for i in range(1, len(face) - 1):
                            faces.append((face[0], face[i], face[i + 1]))
        except UnicodeDecodeError as e:
            raise MeshLoadError(filename, f"not UTF-8 text ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise MeshLoadError(filename, e.strerror or str(e)) from e

        mesh = cls(vertices, faces)
        logger.info("Loaded '%s': %d vertices, %d faces",
                    filename, mesh.vertex_count(), mesh.face_count())
        return mesh


def _resolve_index(obj_index: int, vertex_count: int) -> int:
    """OBJ indices are 1-based; negative ones count back from the last vertex read."""
    if obj_index < 0:
        return vertex_count + obj_index
    return obj_index - 1
