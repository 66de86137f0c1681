"""
Layout engine for the flat cover sheet.

Horizontal order, left to right:
    [turn-in] [back board] [hinge] [spine] [hinge] [front board] [turn-in]
Vertical order, top to bottom:
    [turn-in] [board height] [turn-in]
"""

from dataclasses import dataclass
from typing import Tuple

from bindmaster.cover.dimensions import CoverDimensions


@dataclass(frozen=True)
class CoverSpecs:
    """Derived boundary coordinates in trim space (origin top-left)."""
    total_width: float
    total_height: float
    spine_start: float
    spine_end: float
    front_board_start: float
    back_board_end: float


def compute_specs(dims: CoverDimensions) -> CoverSpecs:
    """Derive the trim-box layout. Pure and total: no input is rejected."""
    total_width = (
        dims.turn_in
        + dims.board_width
        + dims.hinge_gap
        + dims.spine_width
        + dims.hinge_gap
        + dims.board_width
        + dims.turn_in
    )
    total_height = dims.turn_in + dims.board_height + dims.turn_in

    spine_start = dims.turn_in + dims.board_width + dims.hinge_gap
    spine_end = spine_start + dims.spine_width

    return CoverSpecs(
        total_width=total_width,
        total_height=total_height,
        spine_start=spine_start,
        spine_end=spine_end,
        front_board_start=spine_end + dims.hinge_gap,
        # Right edge of the back board, not chained through spine/front
        back_board_end=dims.turn_in + dims.board_width,
    )


def page_size(dims: CoverDimensions, specs: CoverSpecs) -> Tuple[float, float]:
    """Template page size in model units: trim box plus bleed on every side."""
    return specs.total_width + 2 * dims.bleed, specs.total_height + 2 * dims.bleed
