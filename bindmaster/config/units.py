# Measurement units for the cover model. Numbers are stored in whatever
# unit the model carries; the unit only picks labels, PDF scaling and
# the physical size of printer's marks.

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from reportlab.lib.units import mm, cm, inch


class Unit(str, Enum):
    """Display/export unit of a Dimension Model"""
    MM = "mm"
    CM = "cm"
    INCH = "in"


# PDF points per model unit (72pt = 1 inch)
POINTS_PER_UNIT: Dict[Unit, float] = {
    Unit.MM: mm,
    Unit.CM: cm,
    Unit.INCH: inch,
}


@dataclass(frozen=True)
class MarkSizes:
    line_width: float  # cut line, crop marks, bleed ticks
    hairline: float  # registration marks
    reg_radius: float
    reg_arm: float  # half-length of the registration crosshair
    crop_length: float
    crop_offset: float  # gap between trim corner and crop mark


# Physical sizes expressed in each unit
MARK_SIZES: Dict[Unit, MarkSizes] = {
    Unit.MM: MarkSizes(line_width=0.1, hairline=0.05, reg_radius=1.0, reg_arm=2.5, crop_length=3.0, crop_offset=1.0),
    Unit.CM: MarkSizes(line_width=0.01, hairline=0.005, reg_radius=0.1, reg_arm=0.25, crop_length=0.3, crop_offset=0.1),
    Unit.INCH: MarkSizes(line_width=0.005, hairline=0.002, reg_radius=0.04, reg_arm=0.1, crop_length=0.125, crop_offset=0.04),
}
