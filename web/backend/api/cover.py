"""
Cover API endpoints

Layout numbers, setup instructions and the SVG preview.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from bindmaster.cover.annotations import build_annotations
from bindmaster.cover.instructions import setup_instructions
from bindmaster.cover.layout import compute_specs, page_size
from bindmaster.renderer.svg_preview import preview_svg
from web.backend.models.cover import (
    AnnotationOut,
    DimensionsIn,
    InstructionsResponse,
    LayoutResponse,
    PreviewRequest,
    SpecsOut,
)

router = APIRouter()


@router.post("/specs", response_model=LayoutResponse)
async def calculate_layout(request: DimensionsIn):
    """
    Compute the flat-sheet layout.

    Returns derived coordinates, the page size including bleed, and the
    annotation primitives every renderer draws from.
    """
    dims = request.to_dimensions()
    specs = compute_specs(dims)
    page_w, page_h = page_size(dims, specs)
    return LayoutResponse(
        success=True,
        unit=dims.unit,
        specs=SpecsOut.from_specs(specs),
        page_width=page_w,
        page_height=page_h,
        annotations=[AnnotationOut.from_annotation(a) for a in build_annotations(dims, specs)],
    )


@router.post("/instructions", response_model=InstructionsResponse)
async def get_instructions(request: DimensionsIn):
    """Document, margin and guide settings for manual InDesign setup"""
    dims = request.to_dimensions()
    return InstructionsResponse(success=True, instructions=setup_instructions(dims, compute_specs(dims)))


@router.post("/preview")
async def render_preview(request: PreviewRequest):
    """Render the blueprint preview as an SVG document"""
    dims = request.dimensions.to_dimensions()
    specs = compute_specs(dims)
    container = None
    if request.container_width and request.container_height:
        container = (request.container_width, request.container_height)
    svg = preview_svg(dims, specs, build_annotations(dims, specs), container=container)
    return Response(content=svg, media_type="image/svg+xml")
