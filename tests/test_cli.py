"""Command line entry point."""
from click.testing import CliRunner

from main import main


def test_summary_and_instructions():
    result = CliRunner().invoke(main, ["--instructions"])
    assert result.exit_code == 0, result.output
    assert "Trim size: 376.00 x 252.00 mm" in result.output
    assert "2. Vertical Guidelines (X)" in result.output


def test_exports(tmp_path):
    out_dir = tmp_path / "out"
    preview = tmp_path / "preview" / "cover.svg"
    result = CliRunner().invoke(main, [
        "--bleed", "5", "--out-dir", str(out_dir), "--template", "--blueprint", "--preview-svg", str(preview),
    ])
    assert result.exit_code == 0, result.output
    assert "Size incl. bleed: 386.00 x 262.00 mm" in result.output
    assert (out_dir / "cover_template_376.0x252.0mm.pdf").exists()
    assert (out_dir / "blueprint_spec_sheet.pdf").exists()
    assert "reg-mark" in preview.read_text(encoding="utf-8")


def test_unit_and_overrides():
    result = CliRunner().invoke(main, [
        "--unit", "in", "--board-width", "6", "--board-height", "9", "--spine-width", "1",
        "--hinge-gap", "0.25", "--turn-in", "0.75",
    ])
    assert result.exit_code == 0, result.output
    assert "Trim size: 15.00 x 10.50 in" in result.output


def test_validate_template(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, ["--bleed", "5", "--out-dir", str(tmp_path), "--template"])
    assert result.exit_code == 0, result.output
    pdf = str(tmp_path / "cover_template_376.0x252.0mm.pdf")

    ok = runner.invoke(main, ["--bleed", "5", "--validate-path", pdf])
    assert ok.exit_code == 0, ok.output
    assert "No issues found." in ok.output

    mismatch = runner.invoke(main, ["--bleed", "0", "--validate-path", pdf])
    assert mismatch.exit_code == 1
    assert "ERROR:" in mismatch.output


def test_default_out_dir_follows_settings(tmp_path):
    exports = tmp_path / "exports"
    result = CliRunner().invoke(main, ["--template"], env={"BINDMASTER_EXPORTS_DIR": str(exports)})
    assert result.exit_code == 0, result.output
    assert (exports / "cover_template_376.0x252.0mm.pdf").exists()
