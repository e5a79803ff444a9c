#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class RasterError(Exception):
    """Base exception for all soft-rasterizer errors."""

    pass


class MeshLoadError(RasterError):
    """An OBJ file could not be read or contains a malformed record."""

    def __init__(self, path, reason, line_no=None):
        self.path = path
        self.reason = reason
        self.line_no = line_no
        where = f"{path}:{line_no}" if line_no is not None else f"{path}"
        super().__init__(f"Could not load '{where}': {reason}")


class InvalidFaceIndex(RasterError):
    """A face references a vertex outside the mesh's vertex list."""

    def __init__(self, face, index, vertex_count):
        self.face = face
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"face {face} references vertex {index}, "
            f"mesh has {vertex_count} vertices")
