"""
W3C Design Token Community Group (DTCG) tokens.json export.

Wraps generated scales in ``$value`` / ``$type`` / ``$description``
metadata. Token naming beyond ``<color>.<step>`` and reference
resolution belong to the downstream build.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .ir.palette import BrandTheme
from .ir.scale import BatchResult, GeneratedScale
from .presets import SPECIAL_COLORS

logger = logging.getLogger(__name__)

BRAND_TOKENS_FILE = "brand-palette.tokens.json"
PALETTE_TOKENS_FILE = "palette.tokens.json"

# Steps that get a description in the primitive palette
_STEP_DESCRIPTIONS: dict[int, str] = {
    0: "lightest",
    6: "primary",
    9: "darkest",
}


def _primitive_scale_tokens(scale: GeneratedScale) -> dict[str, Any]:
    tokens: dict[str, Any] = {}
    for entry in scale.entries:
        token: dict[str, Any] = {"$value": entry.hex}
        if entry.step in _STEP_DESCRIPTIONS:
            token["$description"] = f"{scale.name} {entry.step} - {_STEP_DESCRIPTIONS[entry.step]}"
        tokens[str(entry.step)] = token
    return tokens


def build_palette_tokens(batch: BatchResult) -> dict[str, Any]:
    """Build the primitive palette token tree.

    Groups every scale under ``color`` and appends the white, black and
    transparent singletons.

    Args:
        batch: Generated primitive scales.

    Returns:
        DTCG-formatted dict suitable for writing as palette.tokens.json.
    """
    color_group: dict[str, Any] = {
        "$type": "color",
        "$description": (
            "Core color palette using OKLCH color space for perceptually uniform scales"
        ),
    }
    for name, scale in batch.scales.items():
        color_group[name] = _primitive_scale_tokens(scale)

    for name, (value, description) in SPECIAL_COLORS.items():
        color_group[name] = {"$value": value, "$description": description}

    return {"color": color_group}


def build_brand_tokens(batch: BatchResult, theme: BrandTheme) -> dict[str, Any]:
    """Build the brand palette token tree for one theme.

    Args:
        batch: Generated brand scales for the theme's colors.
        theme: Theme whose labels describe each color.

    Returns:
        DTCG-formatted dict suitable for writing as brand-palette.tokens.json.
    """
    palette: dict[str, Any] = {}
    for name, scale in batch.scales.items():
        definition = theme.colors.get(name)
        label = definition.label if definition and definition.label else name
        steps: dict[str, Any] = {}
        for entry in scale.entries:
            if entry.pinned:
                description = (
                    f"{label}. Base color (step {entry.step}, pinned to official brand hex)."
                )
            else:
                description = f"{label}. Tint step {entry.step}."
            steps[str(entry.step)] = {
                "$value": entry.hex,
                "$type": "color",
                "$description": description,
            }
        palette[name] = steps

    theme_label = theme.label or "Brand"
    return {
        "$description": (
            f"{theme_label} brand palette. OKLCH-derived 0-9 tint scales for each brand color."
        ),
        "brand": {"palette": palette},
    }


def write_tokens_file(tokens: dict[str, Any], output_path: Path) -> Path:
    """Write a token tree as JSON (4-space indent, trailing newline).

    Args:
        tokens: Token tree.
        output_path: Destination file; parent directories are created.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(tokens, indent=4) + "\n", encoding="utf-8")
    logger.info(f"Wrote {output_path}")
    return output_path


def export_brand_theme(batch: BatchResult, theme: BrandTheme, root: Path) -> list[Path]:
    """Write one theme's brand tokens into each of its output directories.

    Args:
        batch: Generated brand scales for the theme.
        theme: Theme configuration (label, output_dirs, colors).
        root: Directory the theme's output_dirs are relative to.

    Returns:
        Paths of the written files.
    """
    tokens = build_brand_tokens(batch, theme)
    return [
        write_tokens_file(tokens, root / output_dir / BRAND_TOKENS_FILE)
        for output_dir in theme.output_dirs
    ]
