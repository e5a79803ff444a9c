#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import random

from .color import Color, WHITE
from .config import RenderConfig, RenderMode
from .math_utils import Vec2, Vec3
from .mesh import Mesh
from .rasterizer import FillStrategy, draw_triangle_edges

logger = logging.getLogger(__name__)


def project_to_screen(v: Vec3, width: int, height: int) -> Vec2:
    """Orthographic map of model coordinates in [-1, 1] to pixel coordinates."""
    return Vec2(int((v.x + 1.0) * width / 2.0), int((v.y + 1.0) * height / 2.0))


def face_normal(world) -> Vec3:
    """Unit normal (w2 - w0) x (w1 - w0) of a world-space triangle."""
    w0, w1, w2 = world
    return (w2 - w0).cross(w1 - w0).normalize()


def _face_points(mesh: Mesh, face, width, height):
    world = [mesh.vertex(idx) for idx in face]
    screen = [project_to_screen(v, width, height) for v in world]
    return world, screen


def render_flat_shaded(mesh: Mesh, light_dir: Vec3, canvas,
                       strategy: FillStrategy = FillStrategy.BARYCENTRIC) -> int:
    """
    Draw every face lit by `light_dir` as a solid gray triangle.

    Faces with intensity <= 0 are skipped. There is no depth test, so
    later faces overwrite earlier ones where they overlap.
    Returns the number of faces drawn.
    """
    drawn = 0
    for face_no, face in enumerate(mesh):
        world, screen = _face_points(mesh, face, canvas.width, canvas.height)
        intensity = face_normal(world).dot(light_dir)
        if intensity > 0:
            strategy.fill(screen, canvas, Color.gray(intensity))
            drawn += 1
        else:
            logger.debug("face %d culled, intensity %.3f", face_no, intensity)
    return drawn


def render_wireframe(mesh: Mesh, canvas, color: Color = WHITE) -> int:
    """Draw the three edges of every face, without shading."""
    for face in mesh:
        _, screen = _face_points(mesh, face, canvas.width, canvas.height)
        draw_triangle_edges(screen[0], screen[1], screen[2], canvas, color)
    return mesh.face_count()


def render_random_colors(mesh: Mesh, canvas, rng: random.Random = None,
                         strategy: FillStrategy = FillStrategy.BARYCENTRIC) -> int:
    """Fill every face with an unshaded random color. Handy for checking connectivity."""
    rng = rng or random.Random()
    for face in mesh:
        _, screen = _face_points(mesh, face, canvas.width, canvas.height)
        strategy.fill(screen, canvas, Color.random(rng))
    return mesh.face_count()


class Renderer:
    """
    Runs one render pass of a mesh into a canvas according to a RenderConfig.

    render(mesh, canvas) dispatches on config.mode and returns the number
    of faces that produced pixels.
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config or RenderConfig()

    def render(self, mesh: Mesh, canvas) -> int:
        config = self.config
        if config.mode is RenderMode.WIREFRAME:
            drawn = render_wireframe(mesh, canvas)
        elif config.mode is RenderMode.RANDOM:
            drawn = render_random_colors(mesh, canvas, random.Random(config.seed),
                                         config.fill)
        else:
            drawn = render_flat_shaded(mesh, config.light_vector, canvas, config.fill)

        logger.info("Rendered %d/%d faces (%s, %s fill) into %dx%d canvas",
                    drawn, mesh.face_count(), config.mode.value, config.fill.value,
                    canvas.width, canvas.height)
        return drawn
