"""Attention-heatmap grid and hex-tiled latent-space bands."""

import math
from typing import List

from ..colors import WHITE, lighten, pick_colors, with_alpha
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import (
    Circle, Primitive, Rect, fill_or_gradient, polygon, radial_gradient, solid,
)

ATTENTION_HEADS = 3
ATTENTION_HEAD_OFFSET = 8       # px shift per extra head layer
ATTENTION_HEAD_ALPHA = 0.15
ATTENTION_HIGHLIGHT = 0.7       # weights above this get a white dot
HEX_DIVISIONS = 18
SQRT3 = math.sqrt(3)


def attention_weights(rng: SeededRandom, size: int) -> List[List[float]]:
    """Synthetic attention: strong diagonal, local band, sparse long-range spikes."""
    matrix = []
    for i in range(size):
        row = []
        for j in range(size):
            if i == j:
                weight = 0.7 + rng.next() * 0.3
            elif abs(i - j) <= 2:
                weight = 0.3 + rng.next() * 0.4
            elif rng.next() < 0.1:
                weight = 0.4 + rng.next() * 0.5
            else:
                weight = rng.next() * 0.25
            row.append(weight)
        matrix.append(row)
    return matrix


def _bucket(colors, weight: float):
    return colors[min(int(weight * (len(colors) - 0.001)), len(colors) - 1)]


def style_transformer_attention(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    w, h = dims
    colors = pick_colors(rng, palette, 5)
    size = 12 + rng.next_int(0, 6)
    margin = min(w, h) * 0.1
    cell = min((w - margin * 2) / size, (h - margin * 2) / size)
    start_x = (w - cell * size) / 2
    start_y = (h - cell * size) / 2
    weights = attention_weights(rng, size)

    out: List[Primitive] = []
    for i in range(size):
        for j in range(size):
            x = start_x + j * cell
            y = start_y + i * cell
            weight = weights[i][j]
            base = _bucket(colors, weight)
            alpha = 0.3 + weight * 0.7
            if p.use_gradient:
                fill = radial_gradient(x + cell / 2, y + cell / 2, 0, x + cell / 2, y + cell / 2, cell / 2,
                                       [(0, lighten(base, 0.3)), (1, base)])
            else:
                fill = solid(base)
            out.append(Rect(x + 1, y + 1, cell - 2, cell - 2, fill, alpha, radius=cell * 0.1))
            if weight > ATTENTION_HIGHLIGHT:
                out.append(Circle(x + cell / 2, y + cell / 2, cell * 0.15,
                                  solid(with_alpha(WHITE, weight * 0.4)), alpha))

    # fainter, shifted copies suggest more heads
    for head in range(1, ATTENTION_HEADS):
        offset = head * ATTENTION_HEAD_OFFSET
        for i in range(size - 1):
            for j in range(size - 1):
                if start_x + (j + 1) * cell + offset > w or start_y + (i + 1) * cell + offset > h:
                    continue
                x = start_x + j * cell + offset
                y = start_y + i * cell + offset
                base = _bucket(colors, weights[i][j] * (1 - head * 0.3))
                out.append(Rect(x + 2, y + 2, cell - 4, cell - 4, solid(base),
                                ATTENTION_HEAD_ALPHA, radius=cell * 0.05))
    return out


def style_latent_space(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Pointy-top hexagons in three tones of one accent, banded along a random direction."""
    w, h = dims
    base = pick_colors(rng, palette, 1)[0]
    tones = (lighten(base, 0.32), lighten(base, 0.0), lighten(base, -0.22))

    radius = min(w, h) / HEX_DIVISIONS
    hex_w = radius * SQRT3
    row_step = radius * 1.5
    cols = math.ceil(w / hex_w) + 4
    rows = math.ceil(h / row_step) + 4

    angle = (rng.next() * 0.5 + 0.25) * math.pi
    dir_x, dir_y = math.cos(angle), math.sin(angle)
    bands = 12 + rng.next_int(0, 6)

    grid_w = cols * hex_w
    grid_h = rows * row_step
    off_x = (w - grid_w) / 2
    off_y = (h - grid_h) / 2

    out: List[Primitive] = []
    for row in range(-2, rows):
        for col in range(-2, cols):
            x = col * hex_w + (row % 2) * hex_w * 0.5
            y = row * row_step
            nx = (x - grid_w / 2) / max(1, grid_w)
            ny = (y - grid_h / 2) / max(1, grid_h)
            s = (nx * dir_x + ny * dir_y + 1) * 0.5
            tone = tones[int(math.floor(s * bands)) % 3]

            px, py = x + off_x, y + off_y
            pts = [(px + math.cos(math.pi / 6 + i * math.pi / 3) * radius,
                    py + math.sin(math.pi / 6 + i * math.pi / 3) * radius) for i in range(6)]
            fill = fill_or_gradient(p.use_gradient, tone, px - radius, py - radius, px + radius, py + radius,
                                    [lighten(tone, 0.15), tone])
            out.append(polygon(pts, fill))
    return out
