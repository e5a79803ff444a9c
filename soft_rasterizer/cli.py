#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from .canvas import Canvas
from .config import DEFAULT_SIZE, RenderConfig, RenderMode
from .errors import RasterError
from .logging_config import setup_logging
from .mesh import Mesh
from .rasterizer import FillStrategy
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Successful runs are silent unless -v is given
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                        1000x1000 flat-shaded head_wireframe.obj
  %(prog)s 800 600 --model cube.obj               Custom size and model
  %(prog)s --mode wireframe -o wire.tga           Edges only
  %(prog)s --mode random --seed 7                 Random face colors, reproducible
  %(prog)s --fill scanline --light 0 0 -1         Scanline fill, head-on light
"""
    parser = argparse.ArgumentParser(
        prog="soft-rasterizer",
        description="Software triangle rasterizer: renders an OBJ mesh to a TGA image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("width", nargs='?', default=None,
                        help=f"Image width in pixels (default: {DEFAULT_SIZE})")
    parser.add_argument("height", nargs='?', default=None,
                        help=f"Image height in pixels (default: {DEFAULT_SIZE})")
    parser.add_argument("-m", "--model", default="head_wireframe.obj",
                        help="Path to .obj file (default: head_wireframe.obj)")
    parser.add_argument("-o", "--output", default="output.tga",
                        help="Output image path (default: output.tga)")
    parser.add_argument("--mode", choices=[m.value for m in RenderMode],
                        default=RenderMode.FLAT.value,
                        help="flat-shaded fill, wireframe edges or random colors (default: flat)")
    parser.add_argument("--fill", choices=[s.value for s in FillStrategy],
                        default=FillStrategy.BARYCENTRIC.value,
                        help="Triangle fill algorithm (default: barycentric)")
    parser.add_argument("--light", nargs=3, type=float, default=[1.0, 0.0, -1.0],
                        metavar=("X", "Y", "Z"),
                        help="Light direction (default: 1 0 -1)")
    parser.add_argument("--background", default="#000000",
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--no-rle", action="store_true",
                        help="Write uncompressed TGA")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for --mode random")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log progress to stderr (-vv for debug output)")
    return parser.parse_args(argv)


def run(config: RenderConfig):
    """Load, render, flip and write. Nothing is written if any step fails."""
    mesh = Mesh.from_obj(config.model_path)
    canvas = Canvas(config.width, config.height, config.background)
    Renderer(config).render(mesh, canvas)
    logger.info("%d of %d pixels differ from the background",
                canvas.count_set(), canvas.width * canvas.height)
    canvas.flip_vertically()
    return canvas.write_to_file(config.output_path, rle=config.rle)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(VERBOSITY_LEVELS[min(args.verbose, len(VERBOSITY_LEVELS) - 1)])

    try:
        config = RenderConfig.from_args(args)
    except ValueError as e:
        logger.error("Invalid argument: %s", e)
        return 2

    try:
        run(config)
    except RasterError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Could not write '%s': %s", config.output_path, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
