"""
tintscale CLI utilities.

Shared helpers used across CLI modules: version reporting, logging
setup, and rich rendering of generated scales.
"""

from __future__ import annotations

import logging
import os
import platform

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tintscale.core.accessibility import ValidationReport
from tintscale.core.ir.scale import BatchResult, GeneratedScale

LOG_LEVEL_ENV = "TINTSCALE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Get tintscale version from package metadata."""
    from tintscale import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tintscale version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from *level* or the TINTSCALE_LOG_LEVEL env var."""
    name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
    )


def _swatch(hex_value: str, pinned: bool) -> Text:
    label = f"[{hex_value}]" if pinned else hex_value
    return Text(label, style=f"on {hex_value.lower()}" if hex_value.startswith("#") else "")


def scale_table(title: str, batch: BatchResult, show_pinned: bool = False) -> Table:
    """Build a rich table with one row per scale and one column per step."""
    table = Table(title=title, show_lines=False)
    table.add_column("Color", style="bold")
    if show_pinned:
        table.add_column("Pinned", justify="right")
    for step in range(10):
        table.add_column(str(step), justify="center")

    for name, scale in batch.scales.items():
        row: list[str | Text] = [name]
        if show_pinned:
            row.append(str(scale.pinned_step))
        row.extend(_swatch(entry.hex, entry.pinned) for entry in scale.entries)
        table.add_row(*row)
    return table


def print_scale(scale: GeneratedScale) -> None:
    """Print a single scale, one line per step."""
    for entry in scale.entries:
        marker = " (pinned)" if entry.pinned else ""
        mapped = " gamut-mapped" if entry.gamut_mapped else ""
        console.print(
            _swatch(entry.hex, entry.pinned),
            f"step {entry.step}  {entry.oklch.describe()}{mapped}{marker}",
        )


def print_failures(batch: BatchResult) -> None:
    """Report definitions that failed to generate."""
    for failure in batch.failures:
        err_console.print(f"[red]Error:[/red] {failure}")


def print_report(report: ValidationReport) -> None:
    """Print accessibility findings, or a pass message."""
    console.print("\n=== Accessibility Validation ===\n")
    if report.is_clean:
        console.print("All colors pass accessibility validation!")
        return
    for line in report.format_lines():
        console.print(line)
