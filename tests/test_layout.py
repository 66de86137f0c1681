"""Layout engine: derived coordinates and their invariants."""
import pytest

from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import compute_specs, page_size


def test_a5_example(a5_dims):
    specs = compute_specs(a5_dims)
    assert specs.total_width == 376
    assert specs.total_height == 252
    assert specs.spine_start == 178
    assert specs.spine_end == 198
    assert specs.front_board_start == 205
    assert specs.back_board_end == 171


def test_back_board_end_is_literal_edge(a5_dims):
    """Back board end stays turn-in + board width, independent of spine and hinge."""
    wide = a5_dims.copy(spine_width=80, hinge_gap=15)
    assert compute_specs(wide).back_board_end == compute_specs(a5_dims).back_board_end == 171


@pytest.mark.parametrize("values", [
    dict(board_width=153, board_height=216, spine_width=20, hinge_gap=7, turn_in=18),
    dict(board_width=6.1, board_height=9.3, spine_width=0.73, hinge_gap=0.27, turn_in=0.7),
    dict(board_width=15.35, board_height=21.65, spine_width=2.15, hinge_gap=0.65, turn_in=1.8),
    dict(board_width=0.1, board_height=0.2, spine_width=0.3, hinge_gap=0.1, turn_in=0.7),
])
def test_total_width_two_derivations_agree(values):
    dims = CoverDimensions(**values)
    specs = compute_specs(dims)
    chained = specs.front_board_start + dims.board_width + dims.turn_in
    summed = (dims.turn_in + dims.board_width + dims.hinge_gap + dims.spine_width
              + dims.hinge_gap + dims.board_width + dims.turn_in)
    assert specs.total_width == chained
    assert specs.total_width == summed


def test_idempotent(a5_dims):
    assert compute_specs(a5_dims) == compute_specs(a5_dims)


@pytest.mark.parametrize("field", ["board_width", "spine_width", "hinge_gap", "turn_in"])
def test_width_grows_with_each_horizontal_field(a5_dims, field):
    base = compute_specs(a5_dims)
    bigger = compute_specs(a5_dims.copy(**{field: getattr(a5_dims, field) + 0.5}))
    assert bigger.total_width > base.total_width


@pytest.mark.parametrize("field", ["board_height", "turn_in"])
def test_height_grows_with_vertical_fields(a5_dims, field):
    base = compute_specs(a5_dims)
    bigger = compute_specs(a5_dims.copy(**{field: getattr(a5_dims, field) + 0.5}))
    assert bigger.total_height > base.total_height


@pytest.mark.parametrize("field", ["spine_width", "hinge_gap"])
def test_height_ignores_spine_and_hinge(a5_dims, field):
    base = compute_specs(a5_dims)
    changed = compute_specs(a5_dims.copy(**{field: getattr(a5_dims, field) * 3}))
    assert changed.total_height == base.total_height


def test_degenerate_inputs_are_not_rejected():
    dims = CoverDimensions(board_width=0, board_height=-10, spine_width=-5, hinge_gap=0, turn_in=0)
    specs = compute_specs(dims)
    assert specs.total_width == -5
    assert specs.total_height == -10
    assert specs.spine_end < specs.spine_start


def test_page_size_adds_bleed_on_both_sides(a5_bleed_dims):
    assert page_size(a5_bleed_dims, compute_specs(a5_bleed_dims)) == (386, 262)


def test_page_size_without_bleed(a5_dims):
    assert page_size(a5_dims, compute_specs(a5_dims)) == (376, 252)
