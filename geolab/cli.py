"""Command line entry point: one request in, one PNG out."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence, Tuple

from .compose import GenerationRequest, compose
from .palettes import ASPECT_RATIOS, PALETTES
from .params import active_params, defaults, schema_for
from .registry import STYLE_OPTIONS, ConfigurationError
from .render import export_png

log = logging.getLogger(__name__)


def parse_param(s: str) -> Tuple[str, str]:
    name, sep, value = s.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError("--param must be NAME=VALUE")
    return name.strip(), value.strip()


def parse_palette(s: str) -> int:
    """Palette by index or (case-insensitive) name."""
    if s.strip().lstrip("-").isdigit():
        return int(s)
    for i, pal in enumerate(PALETTES):
        if pal.name.lower() == s.strip().lower():
            return i
    raise argparse.ArgumentTypeError(f"Unknown palette: {s!r}")


def _load_json_dict(path: str, flag: str) -> Dict[str, Any]:
    with open(path, "r") as jf:
        data = json.load(jf)
    if not isinstance(data, dict):
        raise SystemExit(f"{flag} JSON must be an object")
    return data


def _list_styles() -> None:
    """One line per style; parameters gated off by the defaults are shown in parentheses."""
    for sid, label in STYLE_OPTIONS:
        active = active_params(sid, defaults(sid))
        names = ", ".join(spec.name if spec.name in active else f"({spec.name})" for spec in schema_for(sid))
        print(f"{sid:22s} {label}" + (f"  [{names}]" if names else ""))


def _list_palettes() -> None:
    for i, pal in enumerate(PALETTES):
        print(f"{i:2d}  {pal.name:16s} {' '.join(pal.colors)}")


def build_request(args: argparse.Namespace) -> GenerationRequest:
    """Request file first, then explicit flags on top."""
    data: Dict[str, Any] = {}
    if args.request:
        data.update(_load_json_dict(args.request, "--request"))
    request = GenerationRequest.from_mapping(data)

    overrides: Dict[str, Any] = {}
    if args.style is not None:
        overrides["style"] = args.style
    if args.palette is not None:
        overrides["palette_index"] = args.palette
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.aspect is not None:
        overrides["aspect"] = args.aspect
    if args.no_gradient:
        overrides["use_gradient"] = False
    if args.light:
        overrides["dark_background"] = False
    if args.vignette:
        overrides["use_vignette"] = True

    style_params = dict(request.style_params)
    if args.params:
        style_params.update(_load_json_dict(args.params, "--params"))
    style_params.update(dict(args.param or []))
    overrides["style_params"] = style_params

    fields = {name: getattr(request, name) for name in GenerationRequest.__dataclass_fields__}
    fields.update(overrides)
    return GenerationRequest(**fields)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate seeded geometric artwork as PNG")
    ap.add_argument("--style", default=None, help="Style id (see --list-styles); default isoCubes")
    ap.add_argument("--palette", type=parse_palette, default=None, help="Palette index or name (see --list-palettes)")
    ap.add_argument("--seed", default=None, help="Seed text; same seed and settings give the same image")
    ap.add_argument("--aspect", default=None, choices=sorted(ASPECT_RATIOS.keys()))
    ap.add_argument("--no-gradient", action="store_true", help="Flat fills instead of gradients")
    ap.add_argument("--light", action="store_true", help="White background instead of the palette's first color")
    ap.add_argument("--vignette", action="store_true", help="Darken the edges")
    ap.add_argument("--param", type=parse_param, action="append", help="Style parameter NAME=VALUE (repeatable)")
    ap.add_argument("--params", default=None, help="JSON object of style parameters")
    ap.add_argument("--request", default=None, help="JSON object with a full request (camelCase keys accepted)")
    ap.add_argument("--scale", type=float, default=1.0, help="Pixel density multiplier")
    ap.add_argument("--out", default=None, help="Output PNG path or directory (default: geo-STYLE-ASPECT-SEED.png)")
    ap.add_argument("--json", default=None, help="Also write the primitive list as JSON ('-' for stdout)")
    ap.add_argument("--list-styles", action="store_true")
    ap.add_argument("--list-palettes", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.list_styles:
        _list_styles()
        return 0
    if args.list_palettes:
        _list_palettes()
        return 0
    if args.scale <= 0:
        raise SystemExit("--scale must be positive")

    try:
        request = build_request(args)
        composition = compose(request)
    except ConfigurationError as e:
        raise SystemExit(str(e))

    if args.json:
        text = composition.to_json(indent=2)
        if args.json == "-":
            sys.stdout.write(text + "\n")
        else:
            with open(args.json, "w") as jf:
                jf.write(text)
            log.info("Wrote %s", args.json)

    out = export_png(composition, args.out, scale=args.scale)
    if args.json != "-":
        print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
