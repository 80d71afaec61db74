"""
oasis-vimiumc - Vimium C stylesheets from paired Oasis palettes.

Combines a light "day" palette and a dark "night" palette into one
stylesheet for the Vimium C browser extension.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ConfigError, OasisError, RenderError, SelectionError

__version__ = get_version()

__all__ = [
    "__version__",
    "OasisError",
    "ConfigError",
    "SelectionError",
    "RenderError",
]
