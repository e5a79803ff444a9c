#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec2, Vec3
from .color import Color
from .errors import RasterError, MeshLoadError, InvalidFaceIndex
from .canvas import Canvas
from .mesh import Mesh
from .rasterizer import (draw_line, barycentric, fill_triangle_scanline,
                         fill_triangle_barycentric, FillStrategy)
from .config import RenderConfig, RenderMode
from .renderer import (Renderer, render_flat_shaded, render_wireframe,
                       render_random_colors)
