"""
SVG preview of the cover wrap.

Draws in trim space directly; the viewBox is padded so the bleed margin
and every dimension callout stay in view, and ``preserveAspectRatio``
letterboxes it into any container.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import svgwrite

from bindmaster.cover.annotations import (
    Annotation,
    BleedTick,
    DimensionLine,
    FoldLine,
    GuideLine,
    LabeledRect,
    Orientation,
    RectKind,
    RegistrationMark,
)
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs

PAD_RATIO = 0.25
# Share of the horizontal padding placed left of the drawing; the rest
# goes right, where the vertical chain sits
PAD_LEFT_SHARE = 0.6
PAD_X_TOTAL_SHARE = 1.5

GUIDE_COLOR = "#06b6d4"
BOARD_COLOR = "#27272a"
FOLD_COLOR = "#d946ef"
DIM_COLOR = "#a1a1aa"
BLEED_COLOR = "#ef4444"
CUT_LINE_COLOR = "#52525b"
PAPER_COLOR = "#f4f4f5"
LABEL_COLOR = "#ffffff"


@dataclass(frozen=True)
class Viewport:
    x: float
    y: float
    width: float
    height: float

    def fit(self, container_width: float, container_height: float) -> Tuple[float, float, float]:
        """
        Letterbox this viewport into a container (xMidYMid meet).

        Returns:
            (scale, offset_x, offset_y) mapping viewport units to container pixels
        """
        ratios = []
        if self.width > 0:
            ratios.append(container_width / self.width)
        if self.height > 0:
            ratios.append(container_height / self.height)
        scale = min(ratios) if ratios else 1.0
        offset_x = (container_width - self.width * scale) / 2.0 - self.x * scale
        offset_y = (container_height - self.height * scale) / 2.0 - self.y * scale
        return scale, offset_x, offset_y


def compute_viewport(dims: CoverDimensions, specs: CoverSpecs) -> Viewport:
    w, h, b = specs.total_width, specs.total_height, dims.bleed
    pad_y = h * PAD_RATIO
    pad_x = w * PAD_RATIO
    return Viewport(
        x=-b - pad_x * PAD_LEFT_SHARE,
        y=-b - pad_y,
        width=w + 2 * b + pad_x * PAD_X_TOTAL_SHARE,
        height=h + 2 * b + 2 * pad_y,
    )


class _Painter:
    """Per-render sizes, all proportional to the total width."""

    def __init__(self, dwg: svgwrite.Drawing, specs: CoverSpecs):
        self.dwg = dwg
        w = specs.total_width
        self.thin = w * 0.0005
        self.stroke = w * 0.001
        self.heavy = w * 0.002
        self.font_size = w * 0.014
        self.tick = w * 0.005
        self.board_font = w * 0.02
        self.spine_font = w * 0.015
        self.reg_radius = w * 0.002
        self.reg_arm = w * 0.006

    def rect(self, r: LabeledRect, hatch=None):
        d = self.dwg
        if r.kind == RectKind.BLEED:
            return d.rect((r.x, r.y), (r.width, r.height), class_="bleed", fill=hatch.get_funciri(),
                          stroke=BLEED_COLOR, stroke_width=self.stroke, stroke_dasharray="4 2")
        if r.kind == RectKind.TRIM:
            return d.rect((r.x, r.y), (r.width, r.height), class_="trim", fill=PAPER_COLOR,
                          stroke=CUT_LINE_COLOR, stroke_width=self.heavy)
        group = d.g(class_=f"board {r.kind.value}")
        group.add(d.rect((r.x, r.y), (r.width, r.height), fill=BOARD_COLOR, opacity=0.8))
        lx, ly = r.label_anchor
        size = self.spine_font if r.rotate_label else self.board_font
        label = d.text(r.label, insert=(lx, ly), text_anchor="middle", fill=LABEL_COLOR,
                       font_size=size, font_family="monospace")
        if r.rotate_label:
            label.rotate(90, center=(lx, ly))
        group.add(label)
        return group

    def guide(self, g: GuideLine):
        p0, p1 = g.endpoints
        return self.dwg.line(p0, p1, class_=f"guide {g.kind.value}", data_edge=g.label,
                             stroke=GUIDE_COLOR, stroke_dasharray="4", stroke_width=self.stroke)

    def fold(self, f: FoldLine):
        return self.dwg.line((f.x, f.y_start), (f.x, f.y_end), class_="fold", data_edge=f.label,
                             stroke=FOLD_COLOR, stroke_dasharray="4", stroke_width=self.heavy)

    def dimension(self, dim: DimensionLine):
        d = self.dwg
        (x1, y1), (x2, y2) = dim.start, dim.end
        group = d.g(class_=f"dimension {dim.role.value}")

        for p0, p1 in dim.extension_lines:
            group.add(d.line(p0, p1, stroke=DIM_COLOR, stroke_width=self.thin,
                             stroke_dasharray="2 2", opacity=0.5))

        group.add(d.line((x1, y1), (x2, y2), stroke=DIM_COLOR, stroke_width=self.stroke))
        k = self.tick
        if dim.orientation == Orientation.VERTICAL:
            group.add(d.line((x1 - k, y1), (x1 + k, y1), stroke=DIM_COLOR, stroke_width=self.stroke))
            group.add(d.line((x2 - k, y2), (x2 + k, y2), stroke=DIM_COLOR, stroke_width=self.stroke))
        else:
            group.add(d.line((x1, y1 - k), (x1, y1 + k), stroke=DIM_COLOR, stroke_width=self.stroke))
            group.add(d.line((x2, y2 - k), (x2, y2 + k), stroke=DIM_COLOR, stroke_width=self.stroke))

        offset = self.font_size * 0.5
        tx, ty = dim.midpoint
        anchor, baseline = "middle", "middle"
        if dim.orientation == Orientation.VERTICAL:
            if dim.rotate_label:
                tx = tx - offset
                baseline = "auto"
            else:
                tx = x1 - k * 2
                anchor = "end"
        elif dim.label_above:
            ty = y1 - k - offset
            baseline = "auto"
        else:
            ty = y1 + k + self.font_size + offset
            baseline = "hanging"

        text = d.text(dim.label, insert=(tx, ty), fill=DIM_COLOR, text_anchor=anchor,
                      dominant_baseline=baseline, font_size=self.font_size)
        if dim.rotate_label:
            text.rotate(-90, center=(tx, ty))
        group.add(text)
        return group

    def registration_mark(self, m: RegistrationMark):
        d = self.dwg
        group = d.g(class_="reg-mark", transform=f"translate({m.x}, {m.y})")
        group.add(d.circle((0, 0), self.reg_radius, fill="none", stroke="black", stroke_width=self.thin))
        group.add(d.line((-self.reg_arm, 0), (self.reg_arm, 0), stroke="black", stroke_width=self.thin))
        group.add(d.line((0, -self.reg_arm), (0, self.reg_arm), stroke="black", stroke_width=self.thin))
        return group

    def bleed_tick(self, t: BleedTick):
        d = self.dwg
        group = d.g(class_="bleed-tick", data_x=t.x)
        for y_outer, y_inner in t.segments:
            group.add(d.line((t.x, y_outer), (t.x, y_inner), stroke="black", stroke_width=self.stroke))
        return group


def render_preview(
    dims: CoverDimensions,
    specs: CoverSpecs,
    annotations: List[Annotation],
    container: Optional[Tuple[float, float]] = None,
) -> svgwrite.Drawing:
    """
    Build the preview drawing.

    Args:
        dims: Dimension model
        specs: Layout computed from dims
        annotations: Annotation list built from dims/specs
        container: Optional (width, height) in px; defaults to 100% x 100%

    Returns:
        svgwrite.Drawing whose viewBox contains trim, bleed and all callouts
    """
    size = container if container else ("100%", "100%")
    dwg = svgwrite.Drawing(size=size, profile="full", debug=False)
    vp = compute_viewport(dims, specs)
    dwg.viewbox(vp.x, vp.y, vp.width, vp.height)
    dwg.fit("center", "middle", "meet")

    hatch = dwg.pattern(id="diagonalHatch", size=(10, 10), patternUnits="userSpaceOnUse")
    hatch.rotate(45)
    hatch.add(dwg.line((0, 0), (0, 10), stroke=BLEED_COLOR, stroke_width=1, opacity=0.1))
    dwg.defs.add(hatch)

    painter = _Painter(dwg, specs)
    rects = [a for a in annotations if isinstance(a, LabeledRect)]
    # Paint order: bleed area, paper, boards, then lines and marks on top
    rect_order = {RectKind.BLEED: 0, RectKind.TRIM: 1}
    for r in sorted(rects, key=lambda r: rect_order.get(r.kind, 2)):
        dwg.add(painter.rect(r, hatch))

    for item in annotations:
        if isinstance(item, RegistrationMark):
            dwg.add(painter.registration_mark(item))
        elif isinstance(item, BleedTick):
            dwg.add(painter.bleed_tick(item))
        elif isinstance(item, GuideLine):
            dwg.add(painter.guide(item))
        elif isinstance(item, FoldLine):
            dwg.add(painter.fold(item))
        elif isinstance(item, DimensionLine):
            dwg.add(painter.dimension(item))
    return dwg


def preview_svg(
    dims: CoverDimensions,
    specs: CoverSpecs,
    annotations: List[Annotation],
    container: Optional[Tuple[float, float]] = None,
) -> str:
    return render_preview(dims, specs, annotations, container=container).tostring()


class PreviewRenderer:
    """Session subscriber that keeps the latest preview up to date."""

    def __init__(self, container: Optional[Tuple[float, float]] = None):
        self.container = container
        self.svg: Optional[str] = None
        self.frames = 0

    def __call__(self, dims: CoverDimensions, specs: CoverSpecs, annotations: List[Annotation]):
        self.svg = preview_svg(dims, specs, annotations, container=self.container)
        self.frames += 1
