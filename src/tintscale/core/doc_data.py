"""
Swatch documentation data.

Flattens generated scales into one list of entries for design-tool
documentation pages: token name, group label, description, hex and an
OKLCH readout.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .color_model import ColorModel, default_model
from .ir.scale import BatchResult, GeneratedScale
from .presets import SPECIAL_COLORS

DOC_DATA_FILE = "colors.json"


def group_label(*parts: str) -> str:
    """Build a group label like ``Base / Blue`` from path parts."""
    return " / ".join(part[:1].upper() + part[1:] for part in parts)


def _scale_entries(
    scale: GeneratedScale,
    token_prefix: str,
    group_name: str,
    model: ColorModel,
) -> list[dict[str, Any]]:
    entries = []
    for entry in scale.entries:
        # Read back from the hex so the readout matches the shipped swatch
        oklch = model.parse(entry.hex)
        if entry.pinned:
            description = f"{scale.name} {entry.step} - pinned brand color"
        else:
            description = f"{scale.name} {entry.step}"
        entries.append(
            {
                "tokenName": f"{token_prefix}.{entry.step}",
                "groupName": group_name,
                "description": description,
                "hex": entry.hex,
                "oklch": oklch.describe(),
            }
        )
    return entries


def _special_entry(name: str, value: str, description: str, model: ColorModel) -> dict[str, Any]:
    if value.lower() == "transparent":
        hex_value, readout = "TRANSPARENT", "N/A"
    else:
        oklch = model.parse(value)
        hex_value, readout = model.to_hex(oklch), oklch.describe()
    return {
        "tokenName": f"color.base.{name}",
        "groupName": group_label("base", name),
        "description": description,
        "hex": hex_value,
        "oklch": readout,
    }


def build_doc_entries(
    primitives: BatchResult,
    brand_themes: Mapping[str, BatchResult] | None = None,
    model: ColorModel | None = None,
) -> list[dict[str, Any]]:
    """Build doc-data entries: base scales, base singletons, then brand scales.

    Args:
        primitives: Generated primitive scales.
        brand_themes: Generated brand scales keyed by theme id.
        model: Color model used for the OKLCH readouts.

    Returns:
        List of ``{tokenName, groupName, description, hex, oklch}`` dicts.
    """
    model = model or default_model()
    entries: list[dict[str, Any]] = []

    for name in sorted(primitives.scales):
        scale = primitives.scales[name]
        entries.extend(
            _scale_entries(scale, f"color.base.{name}", group_label("base", name), model)
        )

    for name, (value, description) in SPECIAL_COLORS.items():
        entries.append(_special_entry(name, value, description, model))

    for theme_id, batch in (brand_themes or {}).items():
        for name, scale in batch.scales.items():
            entries.extend(
                _scale_entries(
                    scale,
                    f"color.brand.{theme_id}.{name}",
                    group_label("brand", theme_id, name),
                    model,
                )
            )

    return entries
