"""
Text views of a layout: design-tool setup steps, the blueprint specs
table, and the context string handed to the print expert.
"""

from typing import List

from bindmaster.cover.annotations import board_edges, format_value, turn_in_guides
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs, page_size

_EDGE_NAMES = {
    "back-board-start": "Back Board Start",
    "back-board-end": "Back Board End",
    "spine-start": "Spine Start",
    "spine-end": "Spine End",
    "front-board-start": "Front Board Start",
    "front-board-end": "Front Board End",
    "top-turn-in": "Top Board Edge",
    "bottom-turn-in": "Bottom Board Edge",
}


def setup_instructions(dims: CoverDimensions, specs: CoverSpecs) -> str:
    unit = dims.unit.value
    lines = [
        f"Trim Width (Cut):  {specs.total_width:.2f} {unit}",
        f"Trim Height (Cut): {specs.total_height:.2f} {unit}",
    ]
    if dims.bleed > 0:
        pw, ph = page_size(dims, specs)
        lines.append(f"Size incl. Bleed:  {pw:.2f} x {ph:.2f} {unit}")

    lines += [
        "",
        "1. Document",
        f"  - W: {format_value(specs.total_width)} | H: {format_value(specs.total_height)}",
        f"  - Margins: {format_value(dims.turn_in)} (Top/Btm/Left/Right)",
        f"  - Bleed: {format_value(dims.bleed)} (Top/Btm/Left/Right)",
        "",
        "2. Vertical Guidelines (X)",
    ]
    lines += [f"  - {format_value(x)} ({_EDGE_NAMES[name]})" for name, x in board_edges(dims, specs)]
    lines += ["", "3. Horizontal Guidelines (Y)"]
    lines += [f"  - {format_value(y)} ({_EDGE_NAMES[name]})" for name, y in turn_in_guides(dims, specs)]
    return "\n".join(lines)


def spec_table_lines(dims: CoverDimensions, specs: CoverSpecs) -> List[str]:
    """Fixed-width rows for the blueprint specs table."""
    u = dims.unit.value
    return [
        f"Unit:        {u}",
        f"Trim Width:  {format_value(specs.total_width)} {u}",
        f"Trim Height: {format_value(specs.total_height)} {u}",
        f"Board Size:  {format_value(dims.board_width)} x {format_value(dims.board_height)} {u}",
        f"Spine Width: {format_value(dims.spine_width)} {u}",
        f"Hinge Gap:   {format_value(dims.hinge_gap)} {u}",
        f"Turn-in:     {format_value(dims.turn_in)} {u}",
        f"Bleed:       {format_value(dims.bleed)} {u}",
    ]


def context_string(dims: CoverDimensions, specs: CoverSpecs) -> str:
    """Free-text summary of the current layout for the print expert."""
    u = dims.unit.value
    return (
        f"Hardcover case wrap in {u}. "
        f"Boards {format_value(dims.board_width)} x {format_value(dims.board_height)}, "
        f"spine {format_value(dims.spine_width)}, hinge gap {format_value(dims.hinge_gap)}, "
        f"turn-in {format_value(dims.turn_in)}, bleed {format_value(dims.bleed)}. "
        f"Flat sheet (trim) {format_value(specs.total_width)} x {format_value(specs.total_height)}; "
        f"spine from {format_value(specs.spine_start)} to {format_value(specs.spine_end)}, "
        f"front board starts at {format_value(specs.front_board_start)}."
    )
