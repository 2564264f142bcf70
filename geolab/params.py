"""
Per-style parameter schemas and clamping.

Callers may send anything; every declared parameter comes back present and
inside its range. Nothing is rejected: numbers are clamped, ints rounded,
values that cannot be read as the declared kind fall back to the default.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

log = logging.getLogger(__name__)

Value = Union[int, float, bool]


@dataclass(frozen=True)
class ParamSpec:
    name: str
    kind: str                       # "int" | "float" | "bool"
    default: Value
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    label: str = ""
    gate: Optional[Tuple[str, bool]] = None   # (flag name, value it must have)

    def clamp(self, value: Any) -> Value:
        if self.kind == "bool":
            return _as_bool(value)
        number = float(value)
        if math.isnan(number):
            raise ValueError(f"{self.name} is NaN")
        number = max(self.minimum, min(self.maximum, number))
        if self.kind == "int":
            number = math.floor(number + 0.5)
        return int(number) if self.kind == "int" else number


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("1", "true", "yes", "on"):
            return True
        if v in ("0", "false", "no", "off", ""):
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)


@dataclass(frozen=True)
class StyleParams:
    """What a generator receives besides dims, rng and palette."""
    use_gradient: bool = True
    values: Mapping[str, Value] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Value:
        return self.values[name]

    def get(self, name: str, default: Value = None) -> Value:
        return self.values.get(name, default)


PARAM_SCHEMAS: Dict[str, Tuple[ParamSpec, ...]] = {
    "orbTrail": (
        ParamSpec("count", "int", 7, 3, 12, "Count"),
        ParamSpec("radius_pct", "float", 0.14, 0.06, 0.25, "Radius (of shorter side)"),
        ParamSpec("gamma", "float", 1.75, 1.0, 3.0, "Spacing exponent"),
        ParamSpec("end_x", "float", 0.84, 0.60, 0.95, "End X"),
        ParamSpec("end_y", "float", 0.84, 0.60, 0.95, "End Y"),
        ParamSpec("manual_start", "bool", False, label="Manual start point"),
        ParamSpec("start_x", "float", -0.12, -0.30, 0.60, "Start X", gate=("manual_start", True)),
        ParamSpec("start_y", "float", 0.28, -0.30, 0.60, "Start Y", gate=("manual_start", True)),
        ParamSpec("trail_scale", "float", 0.9, 0.5, 1.4, "Trail length", gate=("manual_start", False)),
        ParamSpec("curvature", "float", 0.0, -0.3, 0.3, "Curvature"),
    ),
    "cornerSteps": (
        ParamSpec("steps", "int", 8, 3, 20, "Steps"),
        ParamSpec("step_x", "float", 0.11, 0.02, 0.30, "Horizontal inset"),
        ParamSpec("step_y", "float", 0.08, 0.02, 0.30, "Vertical inset"),
        ParamSpec("irregular", "bool", True, label="Irregular spacing"),
        ParamSpec("irregular_amt", "float", 0.30, 0.0, 0.6, "Irregularity", gate=("irregular", True)),
    ),
    "isoCubes": (
        ParamSpec("cols", "int", 6, 3, 14, "Columns"),
        ParamSpec("shade", "float", 0.22, 0.05, 0.5, "Shading"),
        ParamSpec("uniform", "bool", True, label="One colour family per cube"),
        ParamSpec("variety", "int", 3, 1, 8, "Base colours"),
    ),
}


def schema_for(style: str) -> Tuple[ParamSpec, ...]:
    return PARAM_SCHEMAS.get(getattr(style, "value", style), ())


def defaults(style: str) -> Dict[str, Value]:
    return {spec.name: spec.default for spec in schema_for(style)}


def clamp_params(style: str, supplied: Optional[Mapping[str, Any]] = None) -> Dict[str, Value]:
    """Return every declared parameter of style, clamped into range."""
    supplied = dict(supplied or {})
    out: Dict[str, Value] = {}
    for spec in schema_for(style):
        raw = supplied.pop(spec.name, None)
        if raw is None:
            out[spec.name] = spec.default
            continue
        try:
            out[spec.name] = spec.clamp(raw)
        except (TypeError, ValueError):
            log.warning("Parameter %s=%r for %s is not a valid %s; using default %r",
                        spec.name, raw, style, spec.kind, spec.default)
            out[spec.name] = spec.default
    for name in supplied:
        log.debug("Ignoring unknown parameter %r for style %s", name, style)
    return out


def active_params(style: str, values: Mapping[str, Value]) -> List[str]:
    """Names the generator will actually consult given the current flags."""
    names = []
    for spec in schema_for(style):
        if spec.gate is not None:
            flag, wanted = spec.gate
            if bool(values.get(flag)) != wanted:
                continue
        names.append(spec.name)
    return names
