"""Colour parsing and palette-relative colour derivation."""

import math
from typing import List, NamedTuple, Tuple, Union

from .prng import SeededRandom


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float = 1.0

    def css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a:g})"

    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


ColorLike = Union[str, RGBA]

BLACK = RGBA(0, 0, 0, 1.0)
WHITE = RGBA(255, 255, 255, 1.0)
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert '#RRGGBB', 'RRGGBB' or '#RGB' to (r, g, b).

    Anything that does not parse gives opaque black instead of an error.
    """
    if not isinstance(hex_color, str):
        return (0, 0, 0)
    h = hex_color.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c*2 for c in h)
    if len(h) != 6 or not set(h) <= HEX_DIGITS:
        return (0, 0, 0)
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def to_rgba(color: ColorLike) -> RGBA:
    if isinstance(color, RGBA):
        return color
    return RGBA(*hex_to_rgb(color))


def clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def lighten(color: ColorLike, amount: float) -> RGBA:
    """Shift every channel by amount*255 (negative darkens), clamped to 0..255."""
    c = to_rgba(color)

    def shift(x: int) -> int:
        return _round_half_up(255 * clamp01(x / 255 + amount))

    return RGBA(shift(c.r), shift(c.g), shift(c.b), c.a)


def with_alpha(color: ColorLike, a: float) -> RGBA:
    c = to_rgba(color)
    return RGBA(c.r, c.g, c.b, clamp01(a))


def pick_colors(rng: SeededRandom, palette, n: int) -> List[str]:
    """Shuffle the palette accents (never index 0) and take the first n."""
    return rng.shuffle(palette.accents)[:n]

