"""
Brand palette CLI commands.

Derives 0-9 tint scales from official brand hexes and writes a
brand-palette.tokens.json into every output directory of each theme.
"""

from __future__ import annotations

from pathlib import Path

import typer

from tintscale.cli.utils import console, err_console, print_failures, scale_table
from tintscale.core.dtcg_export import export_brand_theme
from tintscale.core.errors import TintscaleError
from tintscale.core.palette_loader import PALETTE_CONFIG_FILE, load_palette_config
from tintscale.core.scale import ScaleGenerator


def brand_command(
    config: Path = typer.Option(  # noqa: B008
        Path(PALETTE_CONFIG_FILE),
        "--config",
        "-c",
        help="Palette config file (built-in presets if missing)",
    ),
    theme: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--theme",
        "-t",
        help="Theme id to generate (repeatable; default: all themes)",
    ),
    root: Path = typer.Option(  # noqa: B008
        Path("."),
        "--root",
        "-r",
        help="Directory the theme output_dirs are relative to",
    ),
) -> None:
    """Generate OKLCH-derived brand palettes for each theme.

    For each brand color: convert to OKLCH, pin the exact hex at the
    closest reference step (or its configured pin_step), derive the other
    steps along the lightness curve, and gamut-map them into sRGB.

    Examples:
        tintscale brand                            # All themes
        tintscale brand -t ccui-30 -r build/       # One theme under build/
    """
    try:
        palette_config = load_palette_config(config)
    except TintscaleError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    selected = theme or list(palette_config.themes)
    unknown = [t for t in selected if t not in palette_config.themes]
    if unknown:
        err_console.print(f"[red]Error:[/red] Unknown theme(s): {', '.join(unknown)}")
        raise typer.Exit(code=1)

    generator = ScaleGenerator(curve=palette_config.curve)
    failed = False

    for theme_id in selected:
        brand_theme = palette_config.themes[theme_id]
        batch = generator.generate_all(brand_theme.colors)

        for path in export_brand_theme(batch, brand_theme, root):
            console.print(f"Wrote {path}")

        label = brand_theme.label or theme_id
        console.print(scale_table(f"{label} palette summary", batch, show_pinned=True))
        print_failures(batch)
        failed = failed or not batch.ok

    if failed:
        raise typer.Exit(code=1)
