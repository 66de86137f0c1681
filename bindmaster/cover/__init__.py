"""Cover model, layout engine and annotation generator"""

from bindmaster.cover.dimensions import CoverDimensions, from_preset
from bindmaster.cover.layout import CoverSpecs, compute_specs, page_size
from bindmaster.cover.annotations import build_annotations
from bindmaster.cover.session import CoverSession

__all__ = [
    "CoverDimensions",
    "from_preset",
    "CoverSpecs",
    "compute_specs",
    "page_size",
    "build_annotations",
    "CoverSession",
]
