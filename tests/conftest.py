import pytest

from soft_rasterizer.canvas import Canvas
from soft_rasterizer.mesh import Mesh


class RecordingCanvas:
    """Canvas double that records every set_pixel call in order."""

    def __init__(self, width=64, height=64):
        self.width = width
        self.height = height
        self.calls = []

    def set_pixel(self, x, y, color):
        self.calls.append((x, y, color))

    @property
    def points(self):
        return [(x, y) for x, y, _ in self.calls]


@pytest.fixture
def recorder():
    return RecordingCanvas()


@pytest.fixture
def canvas():
    return Canvas(20, 20)


@pytest.fixture
def unit_square():
    """Two triangles covering [-1, 1] x [-1, 1] at z = 0, normals along -Z."""
    vertices = [(-1, -1, 0), (1, -1, 0), (1, 1, 0), (-1, 1, 0)]
    faces = [(0, 1, 2), (0, 2, 3)]
    return Mesh(vertices, faces)


@pytest.fixture
def obj_file(tmp_path):
    def _write(text, name="model.obj"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
