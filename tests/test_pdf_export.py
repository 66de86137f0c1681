"""Template and blueprint PDF exports."""
import io
import os
from datetime import date

import pytest
from pypdf import PdfReader
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import inch, mm

from bindmaster.config.units import Unit
from bindmaster.cover.annotations import build_annotations
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import compute_specs
from bindmaster.cover.template_validator import validate_template
from bindmaster.renderer import pdf_template
from bindmaster.renderer.pdf_blueprint import (
    BLUEPRINT_FILENAME,
    BLUEPRINT_TITLE,
    generate_blueprint_pdf,
    render_blueprint,
)
from bindmaster.renderer.pdf_template import (
    generate_template_pdf,
    render_template,
    template_filename,
    write_pdf,
)


def _page(pdf_bytes):
    reader = PdfReader(io.BytesIO(pdf_bytes))
    assert len(reader.pages) == 1
    return reader.pages[0]


def test_template_filename(a5_bundle):
    dims, specs, _ = a5_bundle
    assert template_filename(dims, specs) == "cover_template_376.0x252.0mm.pdf"


def test_template_page_includes_bleed(a5_bundle):
    page = _page(render_template(*a5_bundle))
    assert float(page.mediabox.width) == pytest.approx(386 * mm, abs=0.01)
    assert float(page.mediabox.height) == pytest.approx(262 * mm, abs=0.01)


def test_template_print_boxes(a5_bundle):
    page = _page(render_template(*a5_bundle))
    trim = page.trimbox
    assert float(trim.left) == pytest.approx(5 * mm, abs=0.01)
    assert float(trim.bottom) == pytest.approx(5 * mm, abs=0.01)
    assert float(trim.width) == pytest.approx(376 * mm, abs=0.01)
    assert float(trim.height) == pytest.approx(252 * mm, abs=0.01)
    assert float(page.bleedbox.width) == pytest.approx(float(page.mediabox.width), abs=0.01)


def test_template_without_bleed_is_trim_size(a5_dims):
    specs = compute_specs(a5_dims)
    page = _page(render_template(a5_dims, specs, build_annotations(a5_dims, specs)))
    assert float(page.mediabox.width) == pytest.approx(376 * mm, abs=0.01)
    assert float(page.trimbox.left) == pytest.approx(0, abs=0.01)


def test_template_in_inches():
    dims = CoverDimensions(board_width=6, board_height=9, spine_width=1, hinge_gap=0.25, turn_in=0.75,
                           bleed=0.125, unit=Unit.INCH)
    specs = compute_specs(dims)
    page = _page(render_template(dims, specs, build_annotations(dims, specs)))
    assert float(page.mediabox.width) == pytest.approx(15.25 * inch, abs=0.01)
    assert float(page.mediabox.height) == pytest.approx(10.75 * inch, abs=0.01)
    assert template_filename(dims, specs) == "cover_template_15.0x10.5in.pdf"


def test_generate_template_writes_file(a5_bundle, tmp_path):
    path = generate_template_pdf(*a5_bundle, out_dir=tmp_path / "out")
    assert os.path.basename(path) == "cover_template_376.0x252.0mm.pdf"
    with open(path, "rb") as f:
        assert f.read(5) == b"%PDF-"
    assert not list((tmp_path / "out").glob("*.part"))


def test_failed_write_leaves_no_file(tmp_path, monkeypatch):
    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(pdf_template.os, "replace", boom)
    target = tmp_path / "cover.pdf"
    with pytest.raises(OSError):
        write_pdf(b"%PDF-1.4", target)
    assert list(tmp_path.iterdir()) == []


def test_validate_own_template(a5_bundle, tmp_path):
    dims = a5_bundle[0]
    path = generate_template_pdf(*a5_bundle, out_dir=tmp_path)
    report = validate_template(path, dims)
    assert report.ok
    assert report.issues == []
    assert report.width_pt == pytest.approx(report.expected_width_pt, abs=0.01)


def test_validate_detects_wrong_size(a5_bundle, tmp_path):
    dims = a5_bundle[0]
    path = generate_template_pdf(*a5_bundle, out_dir=tmp_path)
    report = validate_template(path, dims.copy(board_width=160))
    assert not report.ok
    assert report.issues[0].level == "error"


def test_blueprint_is_a4_landscape(a5_bundle):
    page = _page(render_blueprint(*a5_bundle, generated_on=date(2026, 1, 2)))
    width, height = landscape(A4)
    assert float(page.mediabox.width) == pytest.approx(width, abs=0.01)
    assert float(page.mediabox.height) == pytest.approx(height, abs=0.01)


def test_blueprint_text(a5_bundle):
    page = _page(render_blueprint(*a5_bundle, generated_on=date(2026, 1, 2)))
    text = page.extract_text()
    assert BLUEPRINT_TITLE in text
    assert "2026-01-02" in text
    assert "Total Width: 376.0mm" in text


def test_generate_blueprint(a5_bundle, tmp_path):
    path = generate_blueprint_pdf(*a5_bundle, out_dir=tmp_path)
    assert os.path.basename(path) == BLUEPRINT_FILENAME
    assert os.path.getsize(path) > 0


def test_degenerate_geometry_template(degenerate_bundle):
    assert render_template(*degenerate_bundle).startswith(b"%PDF-")


def test_degenerate_geometry_blueprint(degenerate_bundle):
    pdf_bytes = render_blueprint(*degenerate_bundle, generated_on=date(2026, 1, 2))
    assert BLUEPRINT_TITLE in _page(pdf_bytes).extract_text()
