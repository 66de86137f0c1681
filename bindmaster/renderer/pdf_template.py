"""
Actual-size cover template PDF.

The page is the trim box plus bleed on every side, in the model's unit.
Trim (0,0) sits at (bleed, bleed) on the page, so the page always carries
a bleed margin, even a zero-width one.
"""

import io
import os
from pathlib import Path
from typing import List, Union

from pypdf import PdfReader, PdfWriter
from pypdf.generic import RectangleObject
from reportlab.lib.pagesizes import landscape, portrait
from reportlab.pdfgen import canvas

from bindmaster.config.logging_config import setup_logger
from bindmaster.config.units import MARK_SIZES, POINTS_PER_UNIT, Unit
from bindmaster.cover.annotations import Annotation
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs, page_size
from bindmaster.renderer.pdf_primitives import PdfStyle, draw_annotations
from bindmaster.renderer.transform import Transform, template_transform

logger = setup_logger(__name__)


def template_filename(dims: CoverDimensions, specs: CoverSpecs) -> str:
    return f"cover_template_{specs.total_width:.1f}x{specs.total_height:.1f}{dims.unit.value}.pdf"


def template_style(unit: Unit) -> PdfStyle:
    """Physical line weights and mark sizes converted to points."""
    u = POINTS_PER_UNIT[unit]
    sizes = MARK_SIZES[unit]
    dash = sizes.crop_offset * u  # 1mm / 0.04in
    return PdfStyle(
        cut_width=sizes.line_width * u,
        guide_width=sizes.line_width * u,
        guide_dash=[dash, dash],
        fold_width=sizes.line_width * u,
        fold_dash=[2 * dash, dash],
        mark_width=sizes.line_width * u,
        hairline=sizes.hairline * u,
        reg_radius=sizes.reg_radius * u,
        reg_arm=sizes.reg_arm * u,
        crop_length=sizes.crop_length * u,
        crop_offset=sizes.crop_offset * u,
    )


def template_page_points(dims: CoverDimensions, specs: CoverSpecs):
    u = POINTS_PER_UNIT[dims.unit]
    w, h = page_size(dims, specs)
    size = (w * u, h * u)
    return landscape(size) if w > h else portrait(size)


def template_page_transform(dims: CoverDimensions, specs: CoverSpecs) -> Transform:
    _, page_h_pt = template_page_points(dims, specs)
    return template_transform(dims.unit, dims.bleed, page_h_pt)


def render_template(dims: CoverDimensions, specs: CoverSpecs, annotations: List[Annotation]) -> bytes:
    """Draw the template and return the finished PDF bytes."""
    page_w_pt, page_h_pt = template_page_points(dims, specs)
    t = template_page_transform(dims, specs)

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(page_w_pt, page_h_pt))
    c.setTitle(template_filename(dims, specs))
    # Cut line, cyan guides, magenta folds; marks only exist when bleed > 0
    draw_annotations(c, t, annotations, template_style(dims.unit), include_dimensions=False, include_labels=False)
    c.showPage()
    c.save()

    return _set_print_boxes(buf.getvalue(), dims, specs, t)


def _set_print_boxes(pdf_bytes: bytes, dims: CoverDimensions, specs: CoverSpecs, t: Transform) -> bytes:
    """TrimBox = trim rectangle, BleedBox = whole page."""
    reader = PdfReader(io.BytesIO(pdf_bytes))
    writer = PdfWriter()
    for page in reader.pages:
        left, top = t.point((0.0, 0.0))
        right, bottom = t.point((specs.total_width, specs.total_height))
        page.trimbox = RectangleObject([left, bottom, right, top])
        page.bleedbox = RectangleObject([page.mediabox.left, page.mediabox.bottom,
                                         page.mediabox.right, page.mediabox.top])
        writer.add_page(page)
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def write_pdf(pdf_bytes: bytes, out_path: Union[str, Path]) -> str:
    """Write a finished document; nothing lands at out_path on failure."""
    out_path = Path(out_path)
    if out_path.parent:
        out_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = out_path.with_name(out_path.name + ".part")
    try:
        with open(tmp_path, "wb") as f:
            f.write(pdf_bytes)
        os.replace(tmp_path, out_path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return str(out_path)


def generate_template_pdf(
    dims: CoverDimensions,
    specs: CoverSpecs,
    annotations: List[Annotation],
    out_dir: Union[str, Path] = ".",
) -> str:
    """
    Export the actual-size template.

    Args:
        dims: Dimension model (unit and bleed drive page size)
        specs: Layout computed from dims
        annotations: Annotation list built from dims/specs
        out_dir: Directory for cover_template_<W>x<H><unit>.pdf

    Returns:
        Path of the written PDF
    """
    pdf_bytes = render_template(dims, specs, annotations)
    path = write_pdf(pdf_bytes, Path(out_dir) / template_filename(dims, specs))
    logger.info("Template written: %s", path)
    return path
