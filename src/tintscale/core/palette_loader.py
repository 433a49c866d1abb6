"""
Palette configuration persistence.

Handles reading and writing palette configurations to palettes.yaml.
The configuration holds the reference lightness curve, the primitive
color definitions, and the brand themes.

Default location: {project_root}/palettes.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import PaletteConfigError
from .ir.palette import PaletteConfig
from .presets import default_palette_config

logger = logging.getLogger(__name__)

PALETTE_CONFIG_FILE = "palettes.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the palettes.yaml file path."""
    return project_root / PALETTE_CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    """Check if a palettes.yaml exists in the project."""
    return get_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def parse_palette_config(data: dict[str, Any]) -> PaletteConfig:
    """Validate raw YAML data into a PaletteConfig.

    Raises:
        PaletteConfigError: If the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise PaletteConfigError(
            f"Palette config must be a mapping, got {type(data).__name__}"
        )
    try:
        return PaletteConfig.model_validate(data)
    except ValidationError as e:
        raise PaletteConfigError(f"Invalid palette config: {e}") from e


def load_palette_config(config_path: Path, *, use_defaults: bool = True) -> PaletteConfig:
    """Load a PaletteConfig from a YAML file.

    Args:
        config_path: Path to palettes.yaml.
        use_defaults: If True, return the built-in presets when the file
            doesn't exist or is empty.

    Returns:
        PaletteConfig instance.

    Raises:
        PaletteConfigError: If the file is missing (when use_defaults=False),
            not valid YAML, or does not match the schema.
    """
    if not config_path.exists():
        if use_defaults:
            logger.debug(f"No {config_path.name} found, using built-in presets")
            return default_palette_config()
        raise PaletteConfigError(f"Palette config not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise PaletteConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise PaletteConfigError(f"Cannot read {config_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty palette config at {config_path}, using built-in presets")
            return default_palette_config()
        raise PaletteConfigError(f"Empty or invalid YAML in {config_path}")

    try:
        return parse_palette_config(data)
    except PaletteConfigError as e:
        raise PaletteConfigError(f"{config_path}: {e.message}") from e


def save_palette_config(config_path: Path, config: PaletteConfig) -> Path:
    """Save a PaletteConfig to a YAML file.

    Args:
        config_path: Destination path.
        config: PaletteConfig to save.

    Returns:
        Path to the saved file.
    """
    data = config.model_dump(mode="json", exclude_none=True)
    # The curve is written as a plain list; pinned curves never reach config
    data["curve"] = list(config.curve.values)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved palette config to {config_path}")
    return config_path


# =============================================================================
# Scaffolding
# =============================================================================


def scaffold_palette_config(config_path: Path, *, overwrite: bool = False) -> Path | None:
    """Write the built-in presets as a starting palettes.yaml.

    Args:
        config_path: Destination path.
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    if config_path.exists() and not overwrite:
        logger.debug(f"Skipping existing palette config: {config_path}")
        return None

    return save_palette_config(config_path, default_palette_config())
