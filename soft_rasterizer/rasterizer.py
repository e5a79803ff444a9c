#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from enum import Enum

from .math_utils import Vec3

# Returned for zero-area triangles; the negative weight rejects every point
DEGENERATE = Vec3(-1, 1, 1)


def draw_line(p1, p2, canvas, color):
    """
    Draws a segment with integer-only Bresenham stepping.
    Both endpoints are plotted; the major axis always runs upwards, so
    swapping p1 and p2 yields the same pixels in the same order.
    """
    x1, y1 = p1
    x2, y2 = p2

    if abs(x2 - x1) > abs(y2 - y1):
        # x-major
        if x2 < x1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        neg = y1 > y2
        dx = x2 - x1
        dy = y1 - y2 if neg else y2 - y1
        step = -1 if neg else 1

        P = 2 * dy - dx
        y = y1
        for x in range(x1, x2 + 1):
            canvas.set_pixel(x, y, color)
            if P < 0:
                P += 2 * dy
            else:
                P += 2 * dy - 2 * dx
                y += step
    else:
        # y-major (also covers the single-point case)
        if y2 < y1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        neg = x1 > x2
        dx = x1 - x2 if neg else x2 - x1
        dy = y2 - y1
        step = -1 if neg else 1

        P = 2 * dx - dy
        x = x1
        for y in range(y1, y2 + 1):
            canvas.set_pixel(x, y, color)
            if P < 0:
                P += 2 * dx
            else:
                P += 2 * dx - 2 * dy
                x += step


def draw_triangle_edges(v1, v2, v3, canvas, color):
    draw_line(v1, v2, canvas, color)
    draw_line(v2, v3, canvas, color)
    draw_line(v3, v1, canvas, color)


def barycentric(pts, p) -> Vec3:
    """
    Barycentric weights of integer point p in the integer triangle pts.

    The 2x2 system is solved as one cross product whose z component is
    twice the signed area. Integer inputs make |u.z| < 1 mean exactly
    zero area, in which case DEGENERATE is returned.
    """
    a, b, c = pts
    u = Vec3(c[0] - a[0], b[0] - a[0], a[0] - p[0]).cross(
        Vec3(c[1] - a[1], b[1] - a[1], a[1] - p[1]))
    if abs(u.z) < 1:
        return DEGENERATE
    return Vec3(1.0 - (u.x + u.y) / u.z, u.y / u.z, u.x / u.z)


def _hline(x1, x2, y, canvas, color):
    # Right endpoint excluded
    if x1 > x2: x1, x2 = x2, x1
    for x in range(x1, x2):
        canvas.set_pixel(x, y, color)


def _slope(dx, dy):
    return dx / dy if dy != 0 else 0.0


def fill_triangle_scanline(v1, v2, v3, canvas, color):
    """
    Fills a triangle with horizontal spans between the long edge
    (lowest to highest vertex) and the short edge, which switches from
    low->mid to mid->high at the middle vertex.
    """
    # Sort vertices by Y
    if v1[1] > v2[1]: v1, v2 = v2, v1
    if v1[1] > v3[1]: v1, v3 = v3, v1
    if v2[1] > v3[1]: v2, v3 = v3, v2

    x1, y1 = v1
    x2, y2 = v2
    x3, y3 = v3

    m_short = _slope(x2 - x1, y2 - y1)
    m_long = _slope(x3 - x1, y3 - y1)
    xs0, ys0 = x1, y1

    for y in range(y1, y3 + 1):
        if y == y2:
            m_short = _slope(x3 - x2, y3 - y2)
            xs0, ys0 = x2, y2

        xa = int((y - ys0) * m_short + xs0)
        xb = int((y - y1) * m_long + x1)
        _hline(xa, xb, y, canvas, color)


def fill_triangle_barycentric(pts, canvas, color):
    """
    Fills a triangle by testing every pixel of its bounding box (clamped
    to the canvas) against the barycentric weights. Pixels on the edges
    are included; degenerate triangles write nothing.
    """
    max_x, max_y = canvas.width - 1, canvas.height - 1
    min_bx, min_by = max_x, max_y
    max_bx, max_by = 0, 0
    for px, py in pts:
        min_bx = max(0, min(min_bx, px))
        min_by = max(0, min(min_by, py))
        max_bx = min(max_x, max(max_bx, px))
        max_by = min(max_y, max(max_by, py))

    for x in range(min_bx, max_bx + 1):
        for y in range(min_by, max_by + 1):
            bc = barycentric(pts, (x, y))
            if bc.x < 0 or bc.y < 0 or bc.z < 0:
                continue
            canvas.set_pixel(x, y, color)


class FillStrategy(Enum):
    """
    Triangle fill algorithm. The two differ on edge pixels: SCANLINE
    leaves out each span's right end, BARYCENTRIC includes every pixel
    on the boundary. BARYCENTRIC is the default used by the renderer.
    """
    SCANLINE = 'scanline'
    BARYCENTRIC = 'barycentric'

    def fill(self, pts, canvas, color):
        if self is FillStrategy.SCANLINE:
            fill_triangle_scanline(pts[0], pts[1], pts[2], canvas, color)
        else:
            fill_triangle_barycentric(pts, canvas, color)
