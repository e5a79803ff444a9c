#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import random
from typing import NamedTuple, Optional


def _clamp_channel(value) -> int:
    return max(0, min(255, int(value)))


class Color(NamedTuple):
    """RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def gray(cls, intensity: float) -> 'Color':
        """
        Gray level for a Lambert intensity in [0, 1].
        Values above 1 (unnormalized light) saturate at 255.
        """
        v = _clamp_channel(intensity * 255)
        return cls(v, v, v, 255)

    @classmethod
    def from_hex(cls, hex_str) -> 'Color':
        """
        Parse '#RRGGBB' or 'RRGGBB' (case-insensitive).
        Raises ValueError on anything else.
        """
        val = str(hex_str).strip().lstrip('#')
        if len(val) != 6:
            raise ValueError(f"expected #RRGGBB, got {hex_str!r}")
        return cls(int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16), 255)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> 'Color':
        """Opaque color with each RGB channel drawn from [0, 254]."""
        rng = rng or random
        return cls(rng.randrange(255), rng.randrange(255), rng.randrange(255), 255)

    def rgb(self):
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
