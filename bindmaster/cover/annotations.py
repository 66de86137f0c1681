"""
Guide and annotation generator

Turns a CoverSpecs into the ordered list of drawing primitives shared by
the SVG preview and both PDF exporters. Every boundary position a
renderer draws comes from here; renderers only apply a transform.

Coordinates are trim-space: origin at the top-left trim corner, x to the
right, y downward, in the model's unit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs

# Distance of dimension lines outside the trim box (fraction of W or H)
DIM_OFFSET_RATIO = 0.08
# Board labels sit this far down the board
LABEL_HEIGHT_RATIO = 0.2
# Bleed ticks stop this fraction of the bleed short of the trim edge
TICK_INSET_RATIO = 0.2

Point = Tuple[float, float]


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class RectKind(str, Enum):
    TRIM = "trim"
    BLEED = "bleed"
    BACK = "back"
    SPINE = "spine"
    FRONT = "front"


class GuideKind(str, Enum):
    BOARD_EDGE = "board_edge"
    TURN_IN = "turn_in"


class DimensionRole(str, Enum):
    CHAIN = "chain"
    OVERALL = "overall"


@dataclass(frozen=True)
class LabeledRect:
    x: float
    y: float
    width: float
    height: float
    label: str
    kind: RectKind
    rotate_label: bool = False

    @property
    def label_anchor(self) -> Point:
        return self.x + self.width / 2.0, self.y + self.height * LABEL_HEIGHT_RATIO


@dataclass(frozen=True)
class GuideLine:
    orientation: Orientation
    position: float  # x for vertical guides, y for horizontal ones
    start: float
    end: float
    label: str
    kind: GuideKind

    @property
    def endpoints(self) -> Tuple[Point, Point]:
        if self.orientation == Orientation.VERTICAL:
            return (self.position, self.start), (self.position, self.end)
        return (self.start, self.position), (self.end, self.position)


@dataclass(frozen=True)
class FoldLine:
    x: float
    y_start: float
    y_end: float
    label: str


@dataclass(frozen=True)
class DimensionLine:
    start: Point
    end: Point
    label: str
    orientation: Orientation
    role: DimensionRole
    label_above: bool = False
    rotate_label: bool = False
    # Object edge the witness lines run from: y for horizontal dims, x for vertical
    extension_to: Optional[float] = None

    @property
    def span(self) -> float:
        if self.orientation == Orientation.HORIZONTAL:
            return self.end[0] - self.start[0]
        return self.end[1] - self.start[1]

    @property
    def midpoint(self) -> Point:
        return (self.start[0] + self.end[0]) / 2.0, (self.start[1] + self.end[1]) / 2.0

    @property
    def extension_lines(self) -> List[Tuple[Point, Point]]:
        if self.extension_to is None:
            return []
        if self.orientation == Orientation.HORIZONTAL:
            return [
                ((self.start[0], self.extension_to), self.start),
                ((self.end[0], self.extension_to), self.end),
            ]
        return [
            ((self.extension_to, self.start[1]), self.start),
            ((self.extension_to, self.end[1]), self.end),
        ]


@dataclass(frozen=True)
class RegistrationMark:
    x: float
    y: float


@dataclass(frozen=True)
class BleedTick:
    x: float
    # (y_outer, y_inner) pairs: one at the top, one at the bottom
    segments: Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class CropMark:
    x: float
    y: float
    # Outward direction from the trim corner, each -1 or 1
    dir_x: int
    dir_y: int


Annotation = Union[LabeledRect, GuideLine, FoldLine, DimensionLine, RegistrationMark, BleedTick, CropMark]

BLEED_PRIMITIVES = (RegistrationMark, BleedTick, CropMark)


def format_value(value: float) -> str:
    """Print a measurement without trailing zeros (153, 7.5, 0.125)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def board_edges(dims: CoverDimensions, specs: CoverSpecs) -> List[Tuple[str, float]]:
    """The six vertical board/spine boundaries, left to right."""
    return [
        ("back-board-start", dims.turn_in),
        ("back-board-end", specs.back_board_end),
        ("spine-start", specs.spine_start),
        ("spine-end", specs.spine_end),
        ("front-board-start", specs.front_board_start),
        ("front-board-end", specs.front_board_start + dims.board_width),
    ]


def turn_in_guides(dims: CoverDimensions, specs: CoverSpecs) -> List[Tuple[str, float]]:
    return [
        ("top-turn-in", dims.turn_in),
        ("bottom-turn-in", specs.total_height - dims.turn_in),
    ]


def horizontal_chain_stops(dims: CoverDimensions, specs: CoverSpecs) -> List[float]:
    edges = [x for _, x in board_edges(dims, specs)]
    return [0.0] + edges + [specs.total_width]


def _board_rects(dims: CoverDimensions, specs: CoverSpecs) -> List[LabeledRect]:
    w, h = specs.total_width, specs.total_height
    return [
        LabeledRect(0.0, 0.0, w, h, "TRIM", RectKind.TRIM),
        LabeledRect(dims.turn_in, dims.turn_in, dims.board_width, dims.board_height, "BACK", RectKind.BACK),
        LabeledRect(specs.spine_start, dims.turn_in, dims.spine_width, dims.board_height, "SPINE", RectKind.SPINE,
                    rotate_label=True),
        LabeledRect(specs.front_board_start, dims.turn_in, dims.board_width, dims.board_height, "FRONT",
                    RectKind.FRONT),
    ]


def _guides(dims: CoverDimensions, specs: CoverSpecs) -> List[Union[GuideLine, FoldLine]]:
    top, bottom = dims.turn_in, specs.total_height - dims.turn_in
    items: List[Union[GuideLine, FoldLine]] = [
        GuideLine(Orientation.VERTICAL, x, top, bottom, label, GuideKind.BOARD_EDGE)
        for label, x in board_edges(dims, specs)
    ]
    items += [
        GuideLine(Orientation.HORIZONTAL, y, 0.0, specs.total_width, label, GuideKind.TURN_IN)
        for label, y in turn_in_guides(dims, specs)
    ]
    items += [
        FoldLine(specs.spine_start, 0.0, specs.total_height, "spine-start"),
        FoldLine(specs.spine_end, 0.0, specs.total_height, "spine-end"),
    ]
    return items


def _dimension_chains(dims: CoverDimensions, specs: CoverSpecs) -> List[DimensionLine]:
    w, h, b = specs.total_width, specs.total_height, dims.bleed

    chain_y = h + b + h * DIM_OFFSET_RATIO
    stops = horizontal_chain_stops(dims, specs)
    spans = [dims.turn_in, dims.board_width, dims.hinge_gap, dims.spine_width,
             dims.hinge_gap, dims.board_width, dims.turn_in]
    chain = [
        DimensionLine(
            start=(x0, chain_y),
            end=(x1, chain_y),
            label=format_value(span),
            orientation=Orientation.HORIZONTAL,
            role=DimensionRole.CHAIN,
            label_above=True,
            extension_to=h,
        )
        for x0, x1, span in zip(stops, stops[1:], spans)
    ]

    chain_x = w + b + w * DIM_OFFSET_RATIO
    v_stops = [0.0, dims.turn_in, h - dims.turn_in, h]
    v_spans = [dims.turn_in, dims.board_height, dims.turn_in]
    chain += [
        DimensionLine(
            start=(chain_x, y0),
            end=(chain_x, y1),
            label=format_value(span),
            orientation=Orientation.VERTICAL,
            role=DimensionRole.CHAIN,
            rotate_label=True,
            extension_to=w,
        )
        for y0, y1, span in zip(v_stops, v_stops[1:], v_spans)
    ]
    return chain


def _overall_dimensions(dims: CoverDimensions, specs: CoverSpecs) -> List[DimensionLine]:
    w, h, b = specs.total_width, specs.total_height, dims.bleed
    unit = dims.unit.value
    top_y = -b - h * DIM_OFFSET_RATIO
    left_x = -b - w * DIM_OFFSET_RATIO
    return [
        DimensionLine(
            start=(0.0, top_y),
            end=(w, top_y),
            label=f"Total Width: {w:.1f}{unit}",
            orientation=Orientation.HORIZONTAL,
            role=DimensionRole.OVERALL,
            label_above=True,
        ),
        DimensionLine(
            start=(left_x, 0.0),
            end=(left_x, h),
            label=f"Total Height: {h:.1f}{unit}",
            orientation=Orientation.VERTICAL,
            role=DimensionRole.OVERALL,
            rotate_label=True,
        ),
    ]


def _bleed_marks(dims: CoverDimensions, specs: CoverSpecs) -> List[Annotation]:
    w, h, b = specs.total_width, specs.total_height, dims.bleed
    marks: List[Annotation] = [
        LabeledRect(-b, -b, w + 2 * b, h + 2 * b, "BLEED", RectKind.BLEED),
        # Midpoints of the four outer edges, centred in the bleed margin
        RegistrationMark(w / 2.0, -b / 2.0),
        RegistrationMark(-b / 2.0, h / 2.0),
        RegistrationMark(w + b / 2.0, h / 2.0),
        RegistrationMark(w / 2.0, h + b / 2.0),
    ]
    marks += [
        CropMark(0.0, 0.0, -1, -1),
        CropMark(w, 0.0, 1, -1),
        CropMark(0.0, h, -1, 1),
        CropMark(w, h, 1, 1),
    ]
    inset = b * TICK_INSET_RATIO
    for x in (specs.back_board_end, specs.spine_start, specs.spine_end, specs.front_board_start):
        marks.append(BleedTick(x, ((-b, -inset), (h + b, h + inset))))
    return marks


def build_annotations(dims: CoverDimensions, specs: CoverSpecs) -> List[Annotation]:
    """
    Build the full, ordered annotation set for one render.

    Order: board rectangles, guides and folds, dimension chains, overall
    dimensions, then bleed marks (only when bleed > 0). Degenerate inputs
    produce zero-length segments; nothing is clamped.
    """
    annotations: List[Annotation] = []
    annotations += _board_rects(dims, specs)
    annotations += _guides(dims, specs)
    annotations += _dimension_chains(dims, specs)
    annotations += _overall_dimensions(dims, specs)
    if dims.bleed > 0:
        annotations += _bleed_marks(dims, specs)
    return annotations


def of_type(annotations: List[Annotation], kind: type) -> list:
    return [a for a in annotations if isinstance(a, kind)]


def is_bleed_related(annotation: Annotation) -> bool:
    if isinstance(annotation, BLEED_PRIMITIVES):
        return True
    return isinstance(annotation, LabeledRect) and annotation.kind == RectKind.BLEED
