"""
Pytest configuration and shared fixtures for BindMaster tests.
"""
import pytest

from bindmaster.config.units import Unit
from bindmaster.cover.annotations import build_annotations
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import compute_specs


@pytest.fixture
def a5_dims() -> CoverDimensions:
    """A5 case wrap without bleed."""
    return CoverDimensions(
        board_width=153,
        board_height=216,
        spine_width=20,
        hinge_gap=7,
        turn_in=18,
        bleed=0,
        unit=Unit.MM,
    )


@pytest.fixture
def a5_bleed_dims(a5_dims) -> CoverDimensions:
    """Same wrap with a 5mm bleed."""
    return a5_dims.copy(bleed=5)


@pytest.fixture
def a5_bundle(a5_bleed_dims):
    """(dims, specs, annotations) for the bleed case."""
    specs = compute_specs(a5_bleed_dims)
    return a5_bleed_dims, specs, build_annotations(a5_bleed_dims, specs)


DEGENERATE_INPUTS = [
    dict(board_width=0, board_height=0, spine_width=0, hinge_gap=0, turn_in=0),
    dict(board_width=0, board_height=-10, spine_width=-5, hinge_gap=7, turn_in=18),
    dict(board_width=0, board_height=0, spine_width=0, hinge_gap=0, turn_in=0, bleed=3),
]


@pytest.fixture(params=DEGENERATE_INPUTS, ids=["all-zero", "negative", "all-zero-bleed"])
def degenerate_bundle(request):
    """(dims, specs, annotations) for zero or negative spans."""
    dims = CoverDimensions(**request.param)
    specs = compute_specs(dims)
    return dims, specs, build_annotations(dims, specs)
