"""
Blueprint spec sheet

A4 landscape: specs table on the left, the schematic on the right scaled
uniformly into a fixed drawing rectangle. Layout positions are in mm on
the sheet, converted to points for reportlab.
"""

import io
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from reportlab.lib.colors import black
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from bindmaster.config.logging_config import setup_logger
from bindmaster.cover.annotations import Annotation
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.instructions import spec_table_lines
from bindmaster.cover.layout import CoverSpecs
from bindmaster.renderer.pdf_primitives import PdfStyle, draw_annotations
from bindmaster.renderer.pdf_template import write_pdf
from bindmaster.renderer.transform import Transform, fit_transform

logger = setup_logger(__name__)

BLUEPRINT_FILENAME = "blueprint_spec_sheet.pdf"
BLUEPRINT_TITLE = "TM BindMaster 3D - Prepress Blueprint"

PAGE_W_PT, PAGE_H_PT = landscape(A4)

# Sheet layout (mm from the top-left corner)
MARGIN_X = 10
TITLE_Y = 15
DATE_Y = 22
TABLE_Y = 40
TABLE_LINE_HEIGHT = 7
DRAW_AREA = (90, 40, 180, 130)  # x, y, width, height


def blueprint_transform(specs: CoverSpecs) -> Transform:
    x, y, w, h = DRAW_AREA
    return fit_transform(specs.total_width, specs.total_height, x, y, w, h, mm, PAGE_H_PT)


def blueprint_style() -> PdfStyle:
    return PdfStyle(
        cut_width=0.2 * mm,
        guide_width=0.2 * mm,
        guide_dash=[2 * mm, 2 * mm],
        fold_width=0.2 * mm,
        fold_dash=[2 * mm, 1 * mm],
        mark_width=0.1 * mm,
        hairline=0.05 * mm,
        reg_radius=1.0 * mm,
        reg_arm=2.5 * mm,
        crop_length=2.0 * mm,
        crop_offset=0.5 * mm,
        dim_width=0.2 * mm,
        dim_tick=1.0 * mm,
        dim_gap=2.0 * mm,
        extension_dash=[1 * mm, 1 * mm],
    )


def _sheet_text(c: canvas.Canvas, x_mm: float, y_mm: float, text: str):
    c.drawString(x_mm * mm, PAGE_H_PT - y_mm * mm, text)


def render_blueprint(
    dims: CoverDimensions,
    specs: CoverSpecs,
    annotations: List[Annotation],
    generated_on: Optional[date] = None,
) -> bytes:
    generated_on = generated_on or date.today()

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(PAGE_W_PT, PAGE_H_PT))
    c.setTitle(BLUEPRINT_TITLE)
    c.setFillColor(black)

    c.setFont("Helvetica-Bold", 16)
    _sheet_text(c, MARGIN_X, TITLE_Y, BLUEPRINT_TITLE)
    c.setFont("Helvetica", 10)
    _sheet_text(c, MARGIN_X, DATE_Y, f"Date: {generated_on.isoformat()}")

    # Specs table (left)
    c.setFont("Courier", 10)
    for i, line in enumerate(spec_table_lines(dims, specs)):
        _sheet_text(c, MARGIN_X, TABLE_Y + i * TABLE_LINE_HEIGHT, line)

    # Schematic (right), same annotations as the template and the preview
    draw_annotations(c, blueprint_transform(specs), annotations, blueprint_style())

    c.showPage()
    c.save()
    return buf.getvalue()


def generate_blueprint_pdf(
    dims: CoverDimensions,
    specs: CoverSpecs,
    annotations: List[Annotation],
    out_dir: Union[str, Path] = ".",
    generated_on: Optional[date] = None,
) -> str:
    pdf_bytes = render_blueprint(dims, specs, annotations, generated_on=generated_on)
    path = write_pdf(pdf_bytes, Path(out_dir) / BLUEPRINT_FILENAME)
    logger.info("Blueprint written: %s", path)
    return path
