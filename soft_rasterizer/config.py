#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .color import Color, BLACK
from .math_utils import Vec3
from .rasterizer import FillStrategy

# Used whenever a surface dimension is missing, non-numeric or not positive
DEFAULT_SIZE = 1000


class RenderMode(Enum):
    FLAT = 'flat'
    WIREFRAME = 'wireframe'
    RANDOM = 'random'


def parse_dimension(text, fallback: int = DEFAULT_SIZE) -> int:
    """
    Parse a width/height argument. Anything that is not a positive
    integer counts as 0 and is replaced by `fallback`.
    """
    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        value = 0
    return value if value > 0 else fallback


@dataclass
class RenderConfig:
    """Configuration for one render pass."""
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    model_path: str = 'head_wireframe.obj'
    output_path: str = 'output.tga'
    mode: RenderMode = RenderMode.FLAT
    fill: FillStrategy = FillStrategy.BARYCENTRIC
    light_dir: Tuple[float, float, float] = (1.0, 0.0, -1.0)
    background: Color = BLACK
    rle: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        self.mode = RenderMode(self.mode)
        self.fill = FillStrategy(self.fill)
        self.light_dir = tuple(float(c) for c in self.light_dir)
        if len(self.light_dir) != 3:
            raise ValueError("light_dir needs 3 components")

    @property
    def light_vector(self) -> Vec3:
        return Vec3(*self.light_dir)

    @classmethod
    def from_args(cls, args) -> 'RenderConfig':
        """Build a config from an argparse namespace produced by cli.parse_args()."""
        return cls(
            width=parse_dimension(args.width),
            height=parse_dimension(args.height),
            model_path=args.model,
            output_path=args.output,
            mode=RenderMode(args.mode),
            fill=FillStrategy(args.fill),
            light_dir=tuple(args.light),
            background=Color.from_hex(args.background),
            rle=not args.no_rle,
            seed=args.seed,
        )
