"""
Export API endpoints

Write the template and blueprint PDFs and serve them for download.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from pathlib import Path

from bindmaster.config.logging_config import setup_logger
from bindmaster.config.settings import load_settings
from bindmaster.cover.annotations import build_annotations
from bindmaster.cover.layout import compute_specs
from bindmaster.renderer.pdf_blueprint import generate_blueprint_pdf
from bindmaster.renderer.pdf_template import generate_template_pdf
from web.backend.models.cover import DimensionsIn, ExportResponse

logger = setup_logger(__name__)

router = APIRouter()

# Export directory
EXPORTS_DIR = load_settings().exports_dir


def _exports_dir() -> Path:
    EXPORTS_DIR.mkdir(parents=True, exist_ok=True)
    return EXPORTS_DIR


def _response(path: str, message: str) -> ExportResponse:
    filename = Path(path).name
    return ExportResponse(
        success=True,
        message=message,
        file_path=path,
        download_url=f"/api/export/download/{filename}",
    )


@router.post("/template", response_model=ExportResponse)
async def export_template(request: DimensionsIn):
    """
    Export the actual-size cover template.

    Page = trim + 2x bleed, in the model's unit.
    """
    dims = request.to_dimensions()
    specs = compute_specs(dims)
    try:
        path = generate_template_pdf(dims, specs, build_annotations(dims, specs), out_dir=_exports_dir())
    except Exception as e:
        logger.error("Template export failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return _response(path, "Template PDF exported successfully")


@router.post("/blueprint", response_model=ExportResponse)
async def export_blueprint(request: DimensionsIn):
    """Export the A4 landscape blueprint spec sheet"""
    dims = request.to_dimensions()
    specs = compute_specs(dims)
    try:
        path = generate_blueprint_pdf(dims, specs, build_annotations(dims, specs), out_dir=_exports_dir())
    except Exception as e:
        logger.error("Blueprint export failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return _response(path, "Blueprint PDF exported successfully")


@router.get("/download/{filename}")
async def download_pdf(filename: str):
    """
    Download exported PDF.

    Args:
        filename: PDF filename
    """
    if Path(filename).name != filename or not filename.endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Invalid filename")

    file_path = EXPORTS_DIR / filename
    if not file_path.exists():
        raise HTTPException(status_code=404, detail="File not found")

    return FileResponse(
        path=file_path,
        filename=filename,
        media_type="application/pdf"
    )
