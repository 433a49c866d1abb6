"""
Primitive palette CLI commands.

Commands:
- palette: generate, validate and write the primitive palette tokens
- swatch: generate a single brand scale from a hex
- doc-data: write consolidated swatch documentation JSON
- init: scaffold a palettes.yaml with the built-in presets
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from tintscale.cli.utils import (
    console,
    err_console,
    print_failures,
    print_report,
    print_scale,
    scale_table,
)
from tintscale.core.accessibility import validate_batch, validate_scale
from tintscale.core.doc_data import DOC_DATA_FILE, build_doc_entries
from tintscale.core.dtcg_export import (
    PALETTE_TOKENS_FILE,
    build_palette_tokens,
    write_tokens_file,
)
from tintscale.core.errors import TintscaleError
from tintscale.core.ir.palette import PaletteConfig
from tintscale.core.palette_loader import (
    PALETTE_CONFIG_FILE,
    load_palette_config,
    scaffold_palette_config,
)
from tintscale.core.scale import ScaleGenerator


def _load_config(config: Path) -> PaletteConfig:
    try:
        return load_palette_config(config)
    except TintscaleError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


def palette_command(
    config: Path = typer.Option(  # noqa: B008
        Path(PALETTE_CONFIG_FILE),
        "--config",
        "-c",
        help="Palette config file (built-in presets if missing)",
    ),
    output: Path = typer.Option(  # noqa: B008
        Path(PALETTE_TOKENS_FILE),
        "--output",
        "-o",
        help="Token file to write",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 when accessibility issues are found",
    ),
) -> None:
    """Generate the primitive color palette.

    Builds every explicit color scale, validates steps 5-9 against white,
    prints a preview, and writes the DTCG token file.

    Examples:
        tintscale palette                          # Presets -> palette.tokens.json
        tintscale palette -c palettes.yaml -o out/palette.tokens.json
        tintscale palette --strict                 # Fail CI on contrast issues
    """
    palette_config = _load_config(config)
    generator = ScaleGenerator(curve=palette_config.curve)

    batch = generator.generate_all(palette_config.colors)
    report = validate_batch(batch)

    console.print(scale_table("Color Preview (OKLCH -> Hex)", batch))
    print_report(report)
    print_failures(batch)

    write_tokens_file(build_palette_tokens(batch), output)
    console.print(f"\nWritten to: {output}")

    if not batch.ok:
        raise typer.Exit(code=1)
    if strict and not report.is_clean:
        console.print(
            "\nWarning: Some colors have accessibility issues. Review and adjust chroma values."
        )
        raise typer.Exit(code=1)


def swatch_command(
    hex_value: str = typer.Argument(..., metavar="HEX", help="Brand color, e.g. #FF7A52"),
    pin: int | None = typer.Option(
        None,
        "--pin",
        "-p",
        min=0,
        max=9,
        help="Step to pin the color at (default: closest by lightness)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Generate a single 10-step scale around a brand hex."""
    try:
        scale = ScaleGenerator().generate_from_brand(hex_value, pin, name=hex_value)
    except TintscaleError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    issues = validate_scale(scale)

    if as_json:
        data = {
            "pinnedStep": scale.pinned_step,
            "steps": [
                {"step": e.step, "hex": e.hex, "pinned": e.pinned, "oklch": e.oklch.describe()}
                for e in scale.entries
            ],
            "issues": [str(issue) for issue in issues],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    print_scale(scale)
    for issue in issues:
        console.print(f"  - {issue}")


def doc_data_command(
    config: Path = typer.Option(  # noqa: B008
        Path(PALETTE_CONFIG_FILE),
        "--config",
        "-c",
        help="Palette config file (built-in presets if missing)",
    ),
    output: Path = typer.Option(  # noqa: B008
        Path("dist/doc-data") / DOC_DATA_FILE,
        "--output",
        "-o",
        help="Doc-data file to write",
    ),
) -> None:
    """Write swatch documentation data for every primitive and brand color."""
    palette_config = _load_config(config)
    generator = ScaleGenerator(curve=palette_config.curve)

    primitives = generator.generate_all(palette_config.colors)
    brand = {
        theme_id: generator.generate_all(theme.colors)
        for theme_id, theme in palette_config.themes.items()
    }
    for batch in (primitives, *brand.values()):
        print_failures(batch)

    entries = build_doc_entries(primitives, brand)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")

    console.print(f"Doc-data written to {output}")
    console.print(f"  Total colors: {len(entries)}")


def init_command(
    config: Path = typer.Option(  # noqa: B008
        Path(PALETTE_CONFIG_FILE),
        "--config",
        "-c",
        help="Palette config file to create",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing file"),
) -> None:
    """Scaffold a palettes.yaml holding the built-in presets."""
    written = scaffold_palette_config(config, overwrite=overwrite)
    if written is None:
        console.print(f"{config} already exists (use --overwrite to replace it)")
        return
    console.print(f"Created {written}")
