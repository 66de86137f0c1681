"""Dimension model, presets, text views and settings."""
from pathlib import Path

import pytest

from bindmaster.config.settings import OPENROUTER_BASE_URL, load_settings
from bindmaster.config.units import Unit
from bindmaster.cover.dimensions import CoverDimensions, coerce_unit, from_preset
from bindmaster.cover.instructions import context_string, setup_instructions, spec_table_lines
from bindmaster.cover.layout import compute_specs


def test_default_preset_is_a5():
    dims = from_preset()
    assert dims == CoverDimensions(153, 216, 20, 7, 18, 0, Unit.MM)


def test_preset_overrides_and_none_passthrough():
    dims = from_preset("a5", spine_width="25", bleed=None, unit="IN")
    assert dims.spine_width == 25.0
    assert dims.bleed == 0
    assert dims.unit == Unit.INCH


def test_unknown_preset():
    with pytest.raises(ValueError, match="Unknown preset"):
        from_preset("folio")


def test_copy_coerces_and_leaves_original(a5_dims):
    changed = a5_dims.copy(board_width="160.5")
    assert changed.board_width == 160.5
    assert a5_dims.board_width == 153


@pytest.mark.parametrize("changes, message", [
    ({"board_width": "wide"}, "must be numeric"),
    ({"thickness": 3}, "Unknown dimension field"),
    ({"unit": "pt"}, "Unknown unit"),
])
def test_copy_rejects_bad_values(a5_dims, changes, message):
    with pytest.raises(ValueError, match=message):
        a5_dims.copy(**changes)


def test_coerce_unit():
    assert coerce_unit(" CM ") == Unit.CM
    assert coerce_unit(Unit.INCH) is Unit.INCH


def test_to_dict(a5_dims):
    data = a5_dims.to_dict()
    assert data["unit"] == "mm"
    assert data["turn_in"] == 18


def test_setup_instructions_without_bleed(a5_dims):
    text = setup_instructions(a5_dims, compute_specs(a5_dims))
    assert "Trim Width (Cut):  376.00 mm" in text
    assert "Trim Height (Cut): 252.00 mm" in text
    assert "Size incl. Bleed" not in text
    assert "  - 171 (Back Board End)" in text
    assert "  - 178 (Spine Start)" in text
    assert "  - 234 (Bottom Board Edge)" in text
    assert text.index("2. Vertical Guidelines (X)") < text.index("3. Horizontal Guidelines (Y)")


def test_setup_instructions_with_bleed(a5_bleed_dims):
    text = setup_instructions(a5_bleed_dims, compute_specs(a5_bleed_dims))
    assert "Size incl. Bleed:  386.00 x 262.00 mm" in text
    assert "  - Bleed: 5 (Top/Btm/Left/Right)" in text


def test_spec_table(a5_bleed_dims):
    lines = spec_table_lines(a5_bleed_dims, compute_specs(a5_bleed_dims))
    assert lines[0] == "Unit:        mm"
    assert "Board Size:  153 x 216 mm" in lines
    assert lines[-1] == "Bleed:       5 mm"


def test_context_string_mentions_layout(a5_dims):
    context = context_string(a5_dims, compute_specs(a5_dims))
    assert "376 x 252" in context
    assert "spine from 178 to 198" in context


def test_load_settings_from_mapping():
    settings = load_settings({
        "OPENROUTER_API_KEY": "sk-test",
        "BINDMASTER_MODEL": "some/model",
        "BINDMASTER_TIMEOUT_S": "12.5",
        "BINDMASTER_EXPORTS_DIR": "/tmp/bm",
        "BINDMASTER_LOG_LEVEL": "debug",
    })
    assert settings.api_key == "sk-test"
    assert settings.base_url == OPENROUTER_BASE_URL
    assert settings.model == "some/model"
    assert settings.timeout_s == 12.5
    assert settings.exports_dir == Path("/tmp/bm")
    assert settings.log_level == "DEBUG"


def test_bindmaster_key_wins():
    settings = load_settings({"BINDMASTER_API_KEY": "a", "OPENROUTER_API_KEY": "b"})
    assert settings.api_key == "a"


def test_inch_preset():
    dims = from_preset("6x9")
    assert dims.unit == Unit.INCH
    specs = compute_specs(dims)
    assert specs.total_width == pytest.approx(15.375)
    assert specs.total_height == pytest.approx(10.75)
