"""
tintscale CLI main module.

Provides the main CLI application and registers all commands.
Command implementations live in the sibling modules of tintscale/cli/.
"""

from __future__ import annotations

import typer

from tintscale.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""tintscale - perceptual OKLCH color scales

Commands:
  • palette: primitive palette tokens (explicit hue + chroma tables)
  • brand: brand palettes pinned to official brand hexes
  • swatch: one scale from a hex on the command line
  • doc-data: swatch documentation JSON
  • init: scaffold palettes.yaml
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default: $TINTSCALE_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """tintscale CLI main callback for global options."""
    configure_logging(log_level)


# =============================================================================
# Commands
# =============================================================================
from tintscale.cli.brand import brand_command  # noqa: E402
from tintscale.cli.palette import (  # noqa: E402
    doc_data_command,
    init_command,
    palette_command,
    swatch_command,
)

app.command(name="palette")(palette_command)
app.command(name="brand")(brand_command)
app.command(name="swatch")(swatch_command)
app.command(name="doc-data")(doc_data_command)
app.command(name="init")(init_command)


def main() -> None:
    """Console script entry point."""
    app()
