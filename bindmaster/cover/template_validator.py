from dataclasses import dataclass
from typing import List

from pypdf import PdfReader

from bindmaster.config.units import POINTS_PER_UNIT
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import compute_specs, page_size


@dataclass
class TemplateIssue:
    level: str  # "error" | "warning" | "info"
    message: str


@dataclass
class TemplateReport:
    ok: bool
    width_pt: float
    height_pt: float
    expected_width_pt: float
    expected_height_pt: float
    issues: List[TemplateIssue]


def validate_template(pdf_path: str, dims: CoverDimensions, tol: float = 0.5) -> TemplateReport:
    """Check an exported template against the page size the model implies."""
    issues: List[TemplateIssue] = []
    specs = compute_specs(dims)
    u = POINTS_PER_UNIT[dims.unit]
    page_w, page_h = page_size(dims, specs)
    expected_w, expected_h = page_w * u, page_h * u

    reader = PdfReader(pdf_path)
    if len(reader.pages) != 1:
        issues.append(TemplateIssue("error", f"Template must be a single-page PDF. Found {len(reader.pages)} page(s)."))

    page = reader.pages[0]
    media = page.mediabox
    w = float(media.width)
    h = float(media.height)

    if abs(w - expected_w) > tol or abs(h - expected_h) > tol:
        issues.append(TemplateIssue(
            "error",
            f"Page size {w:.2f}x{h:.2f} pt does not match expected template {expected_w:.2f}x{expected_h:.2f} pt."
        ))

    trim = page.trimbox
    trim_w, trim_h = float(trim.width), float(trim.height)
    if abs(trim_w - specs.total_width * u) > tol or abs(trim_h - specs.total_height * u) > tol:
        issues.append(TemplateIssue(
            "warning",
            f"TrimBox {trim_w:.2f}x{trim_h:.2f} pt differs from trim size "
            f"{specs.total_width * u:.2f}x{specs.total_height * u:.2f} pt."
        ))

    if reader.is_encrypted:
        issues.append(TemplateIssue("error", "PDF is encrypted. Print templates must be unencrypted."))

    ok = not any(i.level == "error" for i in issues)
    return TemplateReport(
        ok=ok,
        width_pt=w,
        height_pt=h,
        expected_width_pt=expected_w,
        expected_height_pt=expected_h,
        issues=issues,
    )
