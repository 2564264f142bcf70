"""
geolab
======

Seeded geometric artwork generator. A request (style, palette, seed, aspect,
flags, style parameters) becomes an ordered list of drawing primitives,
which the raster backend paints and saves as PNG.

Key features
------------
- 21 styles: concentric rects, diamonds, orbs, bands, grids, waves, kites,
  corner steps, orb trails, chevrons, tumbling blocks, iso cubes, x overlay,
  flow ribbons, sunburst, diagonal stripes, concentric diamonds,
  attention heatmaps, hex latent space, gradient flow, perspective grids.
- 15 curated six-colour palettes and three aspect presets.
- Deterministic: the same request always gives the same primitives, on any
  machine (xmur3 + sfc32 with 32-bit integer arithmetic).
- Linear and radial gradients, optional vignette, light or dark background.

Quick start
-----------
>>> from geolab import GenerationRequest, compose, export_png
>>> comp = compose(GenerationRequest(style="isoCubes", seed="abc123"))
>>> export_png(comp, "cubes.png")
'cubes.png'

Command line
------------
$ python -m geolab --style orbTrail --palette "Deep Navy Pop" --seed hello \\
    --aspect landscape --param count=9 --vignette --out /tmp/trail.png
$ geolab --list-styles
"""

from .compose import Composition, GenerationRequest, compose
from .palettes import ASPECT_RATIOS, PALETTES
from .prng import rng_from_seed
from .registry import STYLE_OPTIONS, ConfigurationError, Style
from .render import export_png, generate, png_bytes, rasterize

__all__ = [
    "ASPECT_RATIOS", "PALETTES", "STYLE_OPTIONS",
    "Composition", "ConfigurationError", "GenerationRequest", "Style",
    "compose", "export_png", "generate", "png_bytes", "rasterize", "rng_from_seed",
]
