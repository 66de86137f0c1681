import asyncio
import os

import click

from bindmaster.ai.print_expert import ExpertConversation, PrintExpert
from bindmaster.config.presets import PRESETS, DEFAULT_PRESET
from bindmaster.config.settings import load_settings
from bindmaster.config.units import Unit
from bindmaster.cover.dimensions import from_preset
from bindmaster.cover.instructions import context_string, setup_instructions
from bindmaster.cover.layout import page_size
from bindmaster.cover.session import CoverSession
from bindmaster.cover.template_validator import validate_template
from bindmaster.renderer.pdf_blueprint import generate_blueprint_pdf
from bindmaster.renderer.pdf_template import generate_template_pdf
from bindmaster.renderer.svg_preview import PreviewRenderer


@click.command(help="Calculate a hardcover cover wrap (dieline) and export preview, template and blueprint files.")
@click.option("--preset", type=click.Choice(sorted(PRESETS.keys()), case_sensitive=False), default=DEFAULT_PRESET, show_default=True, help="Starting dimensions; individual options override it")
@click.option("--unit", type=click.Choice([u.value for u in Unit], case_sensitive=False), default=None, help="Unit label for all values (no conversion is performed)")
@click.option("--board-width", "board_width", type=float, default=None, help="Width of each board")
@click.option("--board-height", "board_height", type=float, default=None, help="Height of each board")
@click.option("--spine-width", "spine_width", type=float, default=None, help="Width of the spine panel")
@click.option("--hinge-gap", "hinge_gap", type=float, default=None, help="Gap between each board and the spine")
@click.option("--turn-in", "turn_in", type=float, default=None, help="Wrap-around margin on all four sides")
@click.option("--bleed", type=float, default=None, help="Print bleed outside the trim box (0 disables bleed marks)")
@click.option("--out-dir", "out_dir", type=str, default=None, help="Directory for exported files (default: BINDMASTER_EXPORTS_DIR or ./exports)")
@click.option("--template", "make_template", is_flag=True, default=False, help="Export the actual-size template PDF")
@click.option("--blueprint", "make_blueprint", is_flag=True, default=False, help="Export the A4 blueprint spec sheet PDF")
@click.option("--preview-svg", "preview_path", type=str, default=None, help="Write the SVG preview to this path")
@click.option("--instructions", "show_instructions", is_flag=True, default=False, help="Print InDesign setup instructions")
@click.option("--validate-path", "validate_path", type=str, default=None, help="Validate an exported template PDF against these dimensions and exit")
@click.option("--ask", "question", type=str, default=None, help="Ask the print expert a question about this cover")
@click.option("--script", "script_path", type=str, default=None, help="Generate an InDesign .jsx setup script and write it to this path")
def main(preset: str, unit: str | None, board_width: float | None, board_height: float | None, spine_width: float | None, hinge_gap: float | None, turn_in: float | None, bleed: float | None,
         out_dir: str | None, make_template: bool, make_blueprint: bool, preview_path: str | None, show_instructions: bool, validate_path: str | None, question: str | None, script_path: str | None):
    dims = from_preset(
        preset.lower(),
        unit=unit.lower() if unit else None,
        board_width=board_width,
        board_height=board_height,
        spine_width=spine_width,
        hinge_gap=hinge_gap,
        turn_in=turn_in,
        bleed=bleed,
    )
    session = CoverSession(dims)
    dims, specs, annotations = session.dimensions, session.specs, session.annotations
    u = dims.unit.value

    # Validation mode
    if validate_path:
        report = validate_template(validate_path, dims)
        click.echo(f"Template validation for {validate_path}")
        click.echo(f"Expected size: {report.expected_width_pt:.2f} x {report.expected_height_pt:.2f} pt")
        click.echo(f"Actual size:   {report.width_pt:.2f} x {report.height_pt:.2f} pt")
        if not report.issues:
            click.echo("✅ No issues found.")
        else:
            for iss in report.issues:
                click.echo(f"{iss.level.upper()}: {iss.message}")
        if not report.ok:
            raise SystemExit(1)
        return

    click.echo(f"📐 Trim size: {specs.total_width:.2f} x {specs.total_height:.2f} {u}")
    if dims.bleed > 0:
        pw, ph = page_size(dims, specs)
        click.echo(f"   Size incl. bleed: {pw:.2f} x {ph:.2f} {u}")

    if show_instructions:
        click.echo(setup_instructions(dims, specs))

    if preview_path:
        preview = PreviewRenderer()
        session.subscribe(preview)
        preview_dir = os.path.dirname(preview_path)
        if preview_dir:
            os.makedirs(preview_dir, exist_ok=True)
        with open(preview_path, "w", encoding="utf-8") as f:
            f.write(preview.svg)
        click.echo(f"✅ Wrote preview {preview_path}")

    out_dir = out_dir or str(load_settings().exports_dir)
    try:
        if make_template:
            path = generate_template_pdf(dims, specs, annotations, out_dir=out_dir)
            click.echo(f"✅ Generated template {path}")
        if make_blueprint:
            path = generate_blueprint_pdf(dims, specs, annotations, out_dir=out_dir)
            click.echo(f"✅ Generated blueprint {path}")
    except Exception as e:
        click.echo(f"❌ Export failed: {str(e)}")
        raise SystemExit(1)

    if question or script_path:
        expert = PrintExpert()
        if question:
            click.echo("🤖 Asking the print expert...")
            conversation = ExpertConversation(expert)
            answer = asyncio.run(conversation.send(question, context_string(dims, specs)))
            click.echo(answer)
        if script_path:
            click.echo("🤖 Generating InDesign script...")
            script = asyncio.run(expert.generate_script(dims, specs))
            script_dir = os.path.dirname(script_path)
            if script_dir:
                os.makedirs(script_dir, exist_ok=True)
            with open(script_path, "w", encoding="utf-8") as f:
                f.write(script)
            click.echo(f"✅ Wrote script {script_path}")


if __name__ == "__main__":
    main()
