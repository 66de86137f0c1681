"""Screen preview and PDF exporters for the cover wrap"""

from bindmaster.renderer.svg_preview import PreviewRenderer, compute_viewport, preview_svg, render_preview
from bindmaster.renderer.pdf_template import generate_template_pdf, render_template, template_filename
from bindmaster.renderer.pdf_blueprint import BLUEPRINT_FILENAME, generate_blueprint_pdf, render_blueprint

__all__ = [
    "PreviewRenderer",
    "compute_viewport",
    "preview_svg",
    "render_preview",
    "generate_template_pdf",
    "render_template",
    "template_filename",
    "BLUEPRINT_FILENAME",
    "generate_blueprint_pdf",
    "render_blueprint",
]
