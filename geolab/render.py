"""
Raster backend: paint a Composition with Pillow and numpy, export PNG.

Each primitive is drawn as an 8-bit coverage mask with ImageDraw inside its
own bounding box, its paint (solid or gradient) is evaluated per pixel with
numpy, and the result is alpha-composited onto a float RGB canvas. The
canvas is opaque, like the browser canvas the artwork was designed on.
"""

import io
import logging
import math
import os
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .compose import Composition, GenerationRequest, compose
from .primitives import (
    Circle, Fill, LinearGradient, Path, Polygon, Primitive, RadialGradient,
    Rect, SolidFill, bounds,
)

log = logging.getLogger(__name__)


# ---------------------------- Coverage masks --------------------------------

def _pixel_box(prim: Primitive, scale: float, width: int, height: int) -> Optional[Tuple[int, int, int, int]]:
    x0, y0, x1, y1 = bounds(prim)
    bx0 = max(0, int(math.floor(x0 * scale)) - 1)
    by0 = max(0, int(math.floor(y0 * scale)) - 1)
    bx1 = min(width, int(math.ceil(x1 * scale)) + 1)
    by1 = min(height, int(math.ceil(y1 * scale)) + 1)
    if bx1 <= bx0 or by1 <= by0:
        return None
    return bx0, by0, bx1, by1


def draw_mask(prim: Primitive, box: Tuple[int, int, int, int], scale: float) -> Optional[Image.Image]:
    """Coverage of prim inside box as an 'L' image, or None if it covers nothing."""
    bx0, by0, bx1, by1 = box
    mask = Image.new("L", (bx1 - bx0, by1 - by0), 0)
    d = ImageDraw.Draw(mask)

    def local(x: float, y: float) -> Tuple[float, float]:
        return (x * scale - bx0, y * scale - by0)

    if isinstance(prim, Circle):
        if prim.r <= 0:
            return None
        left, top = local(prim.cx - prim.r, prim.cy - prim.r)
        right, bottom = local(prim.cx + prim.r, prim.cy + prim.r)
        d.ellipse([left, top, right, bottom], fill=255)
    elif isinstance(prim, Rect):
        if prim.w <= 0 or prim.h <= 0:
            return None
        left, top = local(prim.x, prim.y)
        right, bottom = local(prim.x + prim.w, prim.y + prim.h)
        # Pillow's rectangle includes its far edge; canvas rects do not.
        right, bottom = max(left, right - 1), max(top, bottom - 1)
        radius = prim.radius * scale
        if radius > 0:
            radius = min(radius, (right - left) / 2, (bottom - top) / 2)
            d.rounded_rectangle([left, top, right, bottom], radius=radius, fill=255)
        else:
            d.rectangle([left, top, right, bottom], fill=255)
    elif isinstance(prim, Polygon):
        if len(prim.points) < 3:
            return None
        d.polygon([local(x, y) for x, y in prim.points], fill=255)
    elif isinstance(prim, Path):
        if len(prim.points) < 2:
            return None
        pts = [local(x, y) for x, y in prim.points]
        if prim.closed:
            pts.append(pts[0])
        d.line(pts, fill=255, width=max(1, int(round(prim.width * scale))), joint="curve")
    else:
        raise ValueError(f"Unknown primitive kind: {type(prim).__name__}")
    return mask


# ---------------------------- Paint -----------------------------------------

def _interpolate(t: np.ndarray, stops) -> Tuple[np.ndarray, np.ndarray]:
    offsets = np.array([o for o, _ in stops], dtype=np.float64)
    colors = np.array([[c.r, c.g, c.b, c.a] for _, c in stops], dtype=np.float64)
    flat = np.clip(t, 0.0, 1.0).ravel()
    channels = [np.interp(flat, offsets, colors[:, k]).reshape(t.shape) for k in range(4)]
    return np.stack(channels[:3], axis=-1), channels[3]


def _linear_t(fill: LinearGradient, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    dx, dy = fill.x1 - fill.x0, fill.y1 - fill.y0
    denom = dx * dx + dy * dy
    if denom == 0:
        return np.zeros_like(X)
    return ((X - fill.x0) * dx + (Y - fill.y0) * dy) / denom


def _radial_t(fill: RadialGradient, X: np.ndarray, Y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Solve |p - c(t)| = r(t) for the largest t with r(t) >= 0 (canvas two-circle model)."""
    cdx, cdy = fill.x1 - fill.x0, fill.y1 - fill.y0
    dr = fill.r1 - fill.r0
    pdx, pdy = X - fill.x0, Y - fill.y0
    a = cdx * cdx + cdy * cdy - dr * dr
    b = pdx * cdx + pdy * cdy + fill.r0 * dr
    c = pdx * pdx + pdy * pdy - fill.r0 * fill.r0
    if abs(a) < 1e-9:
        with np.errstate(divide="ignore", invalid="ignore"):
            t = np.where(b != 0, c / (2 * b), 0.0)
        return t, (b != 0) & (fill.r0 + t * dr >= 0)
    disc = b * b - a * c
    root = np.sqrt(np.maximum(disc, 0.0))
    hi = np.maximum((b + root) / a, (b - root) / a)
    lo = np.minimum((b + root) / a, (b - root) / a)
    t = np.where(fill.r0 + hi * dr >= 0, hi, lo)
    return t, (disc >= 0) & (fill.r0 + t * dr >= 0)


def paint(fill: Fill, box: Tuple[int, int, int, int], scale: float) -> Tuple[np.ndarray, np.ndarray]:
    """(rgb, alpha) arrays of fill over box; solid fills broadcast."""
    if isinstance(fill, SolidFill):
        c = fill.color
        return np.array([[[c.r, c.g, c.b]]], dtype=np.float64), np.array([[c.a]], dtype=np.float64)
    bx0, by0, bx1, by1 = box
    xs = (np.arange(bx0, bx1) + 0.5) / scale
    ys = (np.arange(by0, by1) + 0.5) / scale
    X, Y = np.meshgrid(xs, ys)
    if isinstance(fill, LinearGradient):
        rgb, alpha = _interpolate(_linear_t(fill, X, Y), fill.stops)
        return rgb, alpha
    if isinstance(fill, RadialGradient):
        t, valid = _radial_t(fill, X, Y)
        rgb, alpha = _interpolate(np.nan_to_num(t), fill.stops)
        return rgb, alpha * valid
    raise ValueError(f"Unknown fill: {fill!r}")


# ---------------------------- Rasterizer ------------------------------------

def rasterize(composition: Composition, scale: float = 1.0) -> Image.Image:
    """Paint every primitive in order; scale is the output pixel density."""
    width = max(1, int(round(composition.width * scale)))
    height = max(1, int(round(composition.height * scale)))
    canvas = np.zeros((height, width, 3), dtype=np.float64)

    skipped = 0
    for prim in composition.primitives:
        box = _pixel_box(prim, scale, width, height)
        mask = draw_mask(prim, box, scale) if box else None
        if mask is None:
            skipped += 1
            continue
        bx0, by0, bx1, by1 = box
        coverage = np.asarray(mask, dtype=np.float64) / 255.0
        rgb, alpha = paint(prim.fill, box, scale)
        a = (coverage * alpha * prim.alpha)[..., None]
        region = canvas[by0:by1, bx0:bx1]
        canvas[by0:by1, bx0:bx1] = region * (1.0 - a) + rgb * a

    if skipped:
        log.debug("Skipped %d primitives outside the canvas or without area", skipped)
    return Image.fromarray(np.clip(np.rint(canvas), 0, 255).astype(np.uint8))


def png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    return buf.getvalue()


def export_png(composition: Composition, out_path: Optional[str] = None, scale: float = 1.0) -> str:
    """Rasterize and save. A directory (or None) gets the geo-{style}-{aspect}-{seed}.png name."""
    if out_path is None or os.path.isdir(out_path):
        out_path = os.path.join(out_path or ".", composition.request.export_filename())
    img = rasterize(composition, scale=scale)
    img.save(out_path, format="PNG", optimize=True)
    log.info("Wrote %s (%dx%d)", out_path, img.width, img.height)
    return out_path


# ---------------------------- High-level API --------------------------------

def generate(
    out_path: Optional[str] = None,
    style: str = "isoCubes",
    palette_index: int = 0,
    seed: str = "seed",
    aspect: str = "portrait",
    use_gradient: bool = True,
    dark_background: bool = True,
    use_vignette: bool = False,
    style_params: Optional[dict] = None,
    scale: float = 1.0,
) -> str:
    """High-level convenience. Returns the out_path after saving."""
    request = GenerationRequest(
        style=style, palette_index=palette_index, seed=seed, aspect=aspect,
        use_gradient=use_gradient, dark_background=dark_background,
        use_vignette=use_vignette, style_params=style_params or {},
    )
    return export_png(compose(request), out_path, scale=scale)
