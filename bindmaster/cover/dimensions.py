from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from bindmaster.config.presets import PRESETS, DEFAULT_PRESET
from bindmaster.config.units import Unit

NUMERIC_FIELDS = (
    "board_width",
    "board_height",
    "spine_width",
    "hinge_gap",
    "turn_in",
    "bleed",
)


@dataclass
class CoverDimensions:
    """
    Physical inputs of a hardcover case wrap, all in ``unit``.

    Front and back boards are identical; both hinge gaps are equal.
    Values are not range-checked: zero or negative sizes give a
    degenerate layout rather than an error.
    """
    board_width: float
    board_height: float
    spine_width: float
    hinge_gap: float  # space between each board and the spine
    turn_in: float  # wrap-around material on all four sides
    bleed: float = 0.0
    unit: Unit = Unit.MM

    def copy(self, **changes: Any) -> "CoverDimensions":
        return replace(self, **coerce_fields(changes))

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["unit"] = self.unit.value
        return data


def coerce_unit(value: Any) -> Unit:
    if isinstance(value, Unit):
        return value
    try:
        return Unit(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown unit '{value}'. Use one of {[u.value for u in Unit]}")


def coerce_fields(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize raw form values: numeric fields to float, unit to Unit."""
    out: Dict[str, Any] = {}
    for name, value in changes.items():
        if name == "unit":
            out[name] = coerce_unit(value)
        elif name in NUMERIC_FIELDS:
            try:
                out[name] = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"Field '{name}' must be numeric, got {value!r}")
        else:
            raise ValueError(f"Unknown dimension field '{name}'. Available: {list(NUMERIC_FIELDS) + ['unit']}")
    return out


def from_preset(name: str = DEFAULT_PRESET, **overrides: Any) -> CoverDimensions:
    if name not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {list(PRESETS.keys())}")
    values = dict(PRESETS[name])
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CoverDimensions(**coerce_fields(values))
