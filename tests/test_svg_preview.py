"""SVG preview: viewBox, letterboxing and drawn primitives."""
import re
import xml.etree.ElementTree as ET

import pytest

from bindmaster.renderer.svg_preview import Viewport, compute_viewport, preview_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(dims, specs, annotations, container=None):
    return ET.fromstring(preview_svg(dims, specs, annotations, container=container))


def _by_class(root, class_name):
    return [el for el in root.iter() if class_name in (el.get("class") or "").split()]


def test_viewport_with_bleed(a5_bundle):
    dims, specs, _ = a5_bundle
    vp = compute_viewport(dims, specs)
    assert vp.x == pytest.approx(-61.4)
    assert vp.y == pytest.approx(-68)
    assert vp.width == pytest.approx(527)
    assert vp.height == pytest.approx(388)


def test_viewport_contains_every_callout(a5_bundle):
    dims, specs, annotations = a5_bundle
    vp = compute_viewport(dims, specs)
    for dim in [a for a in annotations if hasattr(a, "extension_lines")]:
        for x, y in (dim.start, dim.end):
            assert vp.x <= x <= vp.x + vp.width
            assert vp.y <= y <= vp.y + vp.height


def test_root_attributes(a5_bundle):
    root = _parse(*a5_bundle)
    assert [float(v) for v in re.split(r"[ ,]+", root.get("viewBox").strip())] == pytest.approx([-61.4, -68, 527, 388])
    assert root.get("preserveAspectRatio") == "xMidYMid meet"
    assert root.get("width") == "100%"


def test_fixed_container(a5_bundle):
    root = _parse(*a5_bundle, container=(800, 600))
    assert float(root.get("width")) == 800
    assert float(root.get("height")) == 600


def test_letterbox_fit():
    vp = Viewport(0, 0, 200, 100)
    scale, off_x, off_y = vp.fit(400, 400)
    assert scale == 2
    assert (off_x, off_y) == (0, 100)


def test_letterbox_fit_offsets_negative_origin():
    vp = Viewport(-10, -10, 100, 100)
    scale, off_x, off_y = vp.fit(200, 100)
    assert scale == 1
    assert (off_x, off_y) == (60, 10)


def test_guides_and_folds_at_boundary_positions(a5_bundle):
    root = _parse(*a5_bundle)
    edges = {el.get("data-edge"): float(el.get("x1")) for el in _by_class(root, "board_edge")}
    assert edges == {
        "back-board-start": 18,
        "back-board-end": 171,
        "spine-start": 178,
        "spine-end": 198,
        "front-board-start": 205,
        "front-board-end": 358,
    }
    folds = sorted(float(el.get("x1")) for el in _by_class(root, "fold"))
    assert folds == [178, 198]
    assert len(_by_class(root, "turn_in")) == 2


def test_bleed_marks_present(a5_bundle):
    root = _parse(*a5_bundle)
    assert len(_by_class(root, "reg-mark")) == 4
    ticks = sorted(float(el.get("data-x")) for el in _by_class(root, "bleed-tick"))
    assert ticks == [171, 178, 198, 205]
    assert len(_by_class(root, "bleed")) == 1
    assert root.find(f"{SVG_NS}defs/{SVG_NS}pattern") is not None


def test_no_bleed_marks_without_bleed(a5_dims):
    from bindmaster.cover.annotations import build_annotations
    from bindmaster.cover.layout import compute_specs

    specs = compute_specs(a5_dims)
    root = _parse(a5_dims, specs, build_annotations(a5_dims, specs))
    assert _by_class(root, "reg-mark") == []
    assert _by_class(root, "bleed-tick") == []
    assert _by_class(root, "bleed") == []


def test_labels_rendered(a5_bundle):
    root = _parse(*a5_bundle)
    texts = [el.text for el in root.iter(f"{SVG_NS}text")]
    assert "Total Width: 376.0mm" in texts
    assert "Total Height: 252.0mm" in texts
    assert {"BACK", "SPINE", "FRONT"} <= set(texts)
    assert texts.count("153") == 2
    assert len(_by_class(root, "chain")) == 10
    assert len(_by_class(root, "overall")) == 2


def test_degenerate_geometry_still_renders(degenerate_bundle):
    dims = degenerate_bundle[0]
    root = _parse(*degenerate_bundle)
    assert len(_by_class(root, "board_edge")) == 6
    assert len(_by_class(root, "fold")) == 2
    assert len(_by_class(root, "reg-mark")) == (4 if dims.bleed > 0 else 0)
