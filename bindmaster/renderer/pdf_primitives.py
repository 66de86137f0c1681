"""
Reportlab drawing of annotation primitives.

Both PDF exporters call these with their own Transform and PdfStyle, so
boundary positions always come from the shared annotation list. Sizes in
PdfStyle are device points.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from reportlab.lib.colors import Color, black, HexColor
from reportlab.pdfgen.canvas import Canvas

from bindmaster.cover.annotations import (
    BleedTick,
    CropMark,
    DimensionLine,
    DimensionRole,
    FoldLine,
    GuideLine,
    LabeledRect,
    Orientation,
    RectKind,
    RegistrationMark,
)
from bindmaster.renderer.transform import Transform

CYAN = Color(0, 1, 1)
MAGENTA = Color(1, 0, 1)

BOARD_KINDS = (RectKind.BACK, RectKind.SPINE, RectKind.FRONT)


@dataclass
class PdfStyle:
    cut_width: float = 0.5
    guide_width: float = 0.5
    guide_color: Color = CYAN
    guide_dash: List[float] = field(default_factory=lambda: [3, 3])
    fold_width: float = 0.5
    fold_color: Color = MAGENTA
    fold_dash: List[float] = field(default_factory=lambda: [6, 3])
    mark_width: float = 0.3
    hairline: float = 0.15
    reg_radius: float = 3.0
    reg_arm: float = 7.0
    crop_length: float = 8.5
    crop_offset: float = 3.0
    dim_width: float = 0.5
    dim_color: Color = HexColor("#323232")
    dim_tick: float = 3.0
    dim_gap: float = 4.0
    extension_color: Color = HexColor("#969696")
    extension_dash: List[float] = field(default_factory=lambda: [3, 3])
    dim_font: str = "Helvetica"
    dim_font_size: float = 8.0
    overall_font: str = "Helvetica-Bold"
    overall_font_size: float = 10.0
    label_font: str = "Helvetica"
    label_font_size: float = 8.0
    label_color: Color = HexColor("#969696")


def _segment(c: Canvas, t: Transform, p0: Tuple[float, float], p1: Tuple[float, float]):
    x0, y0 = t.point(p0)
    x1, y1 = t.point(p1)
    c.line(x0, y0, x1, y1)


def _rect(c: Canvas, t: Transform, rect: LabeledRect, stroke: int = 1, fill: int = 0):
    x0, y0 = t.point((rect.x, rect.y))
    x1, y1 = t.point((rect.x + rect.width, rect.y + rect.height))
    c.rect(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0), stroke=stroke, fill=fill)


def draw_trim_outline(c: Canvas, t: Transform, rect: LabeledRect, style: PdfStyle):
    c.saveState()
    c.setStrokeColor(black)
    c.setLineWidth(style.cut_width)
    _rect(c, t, rect)
    c.restoreState()


def draw_guide(c: Canvas, t: Transform, guide: GuideLine, style: PdfStyle):
    c.saveState()
    c.setStrokeColor(style.guide_color)
    c.setLineWidth(style.guide_width)
    c.setDash(style.guide_dash, 0)
    p0, p1 = guide.endpoints
    _segment(c, t, p0, p1)
    c.restoreState()


def draw_fold(c: Canvas, t: Transform, fold: FoldLine, style: PdfStyle):
    c.saveState()
    c.setStrokeColor(style.fold_color)
    c.setLineWidth(style.fold_width)
    c.setDash(style.fold_dash, 0)
    _segment(c, t, (fold.x, fold.y_start), (fold.x, fold.y_end))
    c.restoreState()


def draw_registration_mark(c: Canvas, t: Transform, mark: RegistrationMark, style: PdfStyle):
    """Circle with crosshair, sized in device points."""
    cx, cy = t.point((mark.x, mark.y))
    r, arm = style.reg_radius, style.reg_arm
    c.saveState()
    c.setStrokeColor(black)
    c.setLineWidth(style.hairline)
    c.circle(cx, cy, r, stroke=1, fill=0)
    c.line(cx - arm, cy, cx + arm, cy)
    c.line(cx, cy - arm, cx, cy + arm)
    c.restoreState()


def draw_crop_mark(c: Canvas, t: Transform, mark: CropMark, style: PdfStyle):
    cx, cy = t.point((mark.x, mark.y))
    # Trim space is y-down; device y direction depends on the transform
    dx = mark.dir_x
    dy = -mark.dir_y if t.flip_height is not None else mark.dir_y
    near, far = style.crop_offset, style.crop_offset + style.crop_length
    c.saveState()
    c.setStrokeColor(black)
    c.setLineWidth(style.mark_width)
    c.line(cx + dx * near, cy, cx + dx * far, cy)
    c.line(cx, cy + dy * near, cx, cy + dy * far)
    c.restoreState()


def draw_bleed_tick(c: Canvas, t: Transform, tick: BleedTick, style: PdfStyle):
    c.saveState()
    c.setStrokeColor(black)
    c.setLineWidth(style.mark_width)
    for y_outer, y_inner in tick.segments:
        _segment(c, t, (tick.x, y_outer), (tick.x, y_inner))
    c.restoreState()


def draw_board_label(c: Canvas, t: Transform, rect: LabeledRect, style: PdfStyle):
    x, y = t.point(rect.label_anchor)
    c.saveState()
    c.setFillColor(style.label_color)
    c.setFont(style.label_font, style.label_font_size)
    if rect.rotate_label:
        c.translate(x, y)
        c.rotate(-90)
        c.drawCentredString(0, -style.label_font_size / 3.0, rect.label)
    else:
        c.drawCentredString(x, y, rect.label)
    c.restoreState()


def draw_dimension_line(c: Canvas, t: Transform, dim: DimensionLine, style: PdfStyle):
    """Dimension line with end ticks, optional witness lines, and its label."""
    c.saveState()

    if dim.extension_lines:
        c.saveState()
        c.setStrokeColor(style.extension_color)
        c.setLineWidth(style.dim_width / 2.0)
        c.setDash(style.extension_dash, 0)
        for p0, p1 in dim.extension_lines:
            _segment(c, t, p0, p1)
        c.restoreState()

    c.setStrokeColor(style.dim_color)
    c.setLineWidth(style.dim_width)
    x0, y0 = t.point(dim.start)
    x1, y1 = t.point(dim.end)
    c.line(x0, y0, x1, y1)

    k = style.dim_tick
    if dim.orientation == Orientation.HORIZONTAL:
        c.line(x0, y0 - k, x0, y0 + k)
        c.line(x1, y1 - k, x1, y1 + k)
    else:
        c.line(x0 - k, y0, x0 + k, y0)
        c.line(x1 - k, y1, x1 + k, y1)

    if dim.role == DimensionRole.OVERALL:
        font, size = style.overall_font, style.overall_font_size
    else:
        font, size = style.dim_font, style.dim_font_size
    c.setFont(font, size)
    c.setFillColor(style.dim_color)

    mx, my = t.point(dim.midpoint)
    if dim.orientation == Orientation.HORIZONTAL:
        flipped = t.flip_height is not None
        if dim.label_above:
            ty = my + style.dim_gap if flipped else my - style.dim_gap
        else:
            ty = my - style.dim_gap - size * 0.7 if flipped else my + style.dim_gap + size * 0.7
        c.drawCentredString(mx, ty, dim.label)
    elif dim.rotate_label:
        c.translate(mx - style.dim_gap, my)
        c.rotate(90)
        c.drawCentredString(0, 0, dim.label)
    else:
        c.drawRightString(mx - style.dim_gap - k, my, dim.label)

    c.restoreState()


def draw_annotations(
    c: Canvas,
    t: Transform,
    annotations: list,
    style: PdfStyle,
    include_dimensions: bool = True,
    include_labels: bool = True,
    include_bleed: bool = True,
    rect_label_kinds: tuple = BOARD_KINDS,
):
    """Dispatch every primitive to its drawer, in list order."""
    for item in annotations:
        if isinstance(item, LabeledRect):
            if item.kind == RectKind.TRIM:
                draw_trim_outline(c, t, item, style)
            elif include_labels and item.kind in rect_label_kinds:
                draw_board_label(c, t, item, style)
        elif isinstance(item, GuideLine):
            draw_guide(c, t, item, style)
        elif isinstance(item, FoldLine):
            draw_fold(c, t, item, style)
        elif isinstance(item, DimensionLine):
            if include_dimensions:
                draw_dimension_line(c, t, item, style)
        elif not include_bleed:
            continue
        elif isinstance(item, RegistrationMark):
            draw_registration_mark(c, t, item, style)
        elif isinstance(item, CropMark):
            draw_crop_mark(c, t, item, style)
        elif isinstance(item, BleedTick):
            draw_bleed_tick(c, t, item, style)
