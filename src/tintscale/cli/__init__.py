"""
tintscale CLI package.

- main.py: application object and command registration
- palette.py: palette, swatch, doc-data and init commands
- brand.py: brand palette command
- utils.py: shared utilities (version, logging, rich output)
"""

from tintscale.cli.main import app, main
from tintscale.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
