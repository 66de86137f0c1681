"""
Trim-space to device-space mapping.

Each renderer draws the shared annotations through exactly one of these:
a translation (template), translation plus uniform scale (blueprint), or
identity (SVG preview, where the viewBox does the fitting). ``flip_height``
turns y-down trim space into y-up PDF space.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from bindmaster.config.units import POINTS_PER_UNIT, Unit


@dataclass(frozen=True)
class Transform:
    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    flip_height: Optional[float] = None

    def x(self, value: float) -> float:
        return self.offset_x + value * self.scale

    def y(self, value: float) -> float:
        device = self.offset_y + value * self.scale
        if self.flip_height is None:
            return device
        return self.flip_height - device

    def point(self, p: Tuple[float, float]) -> Tuple[float, float]:
        return self.x(p[0]), self.y(p[1])

    def length(self, value: float) -> float:
        return value * self.scale

    def inverse_x(self, device_x: float) -> float:
        return (device_x - self.offset_x) / self.scale

    def inverse_y(self, device_y: float) -> float:
        if self.flip_height is not None:
            device_y = self.flip_height - device_y
        return (device_y - self.offset_y) / self.scale


def template_transform(unit: Unit, bleed: float, page_height_pt: float) -> Transform:
    """Trim (0,0) lands at (bleed, bleed) on the page, in points."""
    u = POINTS_PER_UNIT[unit]
    return Transform(scale=u, offset_x=bleed * u, offset_y=bleed * u, flip_height=page_height_pt)


def fit_transform(
    content_width: float,
    content_height: float,
    area_x: float,
    area_y: float,
    area_width: float,
    area_height: float,
    points_per_area_unit: float,
    page_height_pt: float,
) -> Transform:
    """
    Uniformly scale content into a drawing area and centre it.

    Area values are in the page's layout unit (e.g. mm on an A4 sheet).
    Non-positive content sizes fall back to scale 1 on that axis.
    """
    ratios = []
    if content_width > 0:
        ratios.append(area_width / content_width)
    if content_height > 0:
        ratios.append(area_height / content_height)
    scale = min(ratios) if ratios else 1.0

    offset_x = area_x + (area_width - content_width * scale) / 2.0
    offset_y = area_y + (area_height - content_height * scale) / 2.0
    k = points_per_area_unit
    return Transform(scale=scale * k, offset_x=offset_x * k, offset_y=offset_y * k, flip_height=page_height_pt)
