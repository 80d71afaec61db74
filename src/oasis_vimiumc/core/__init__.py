"""Palette catalog, day/night selection, and stylesheet rendering."""

from .catalog import ThemeCatalog, load_index, load_palette
from .config import GeneratorConfig, load_config
from .errors import (
    ConfigError,
    ConfigErrorKind,
    OasisError,
    RenderError,
    RenderErrorKind,
    SelectionError,
    SelectionErrorKind,
)
from .models import (
    CatalogIndex,
    PaletteRecord,
    PaletteSummary,
    Role,
    SelectionResult,
    ThemeCategory,
)
from .renderer import CSSRenderer, RenderResult, build_binding, derive_output_path, short_name
from .selector import ThemeSelector, parse_choice

__all__ = [
    "CSSRenderer",
    "CatalogIndex",
    "ConfigError",
    "ConfigErrorKind",
    "GeneratorConfig",
    "OasisError",
    "PaletteRecord",
    "PaletteSummary",
    "RenderError",
    "RenderErrorKind",
    "RenderResult",
    "Role",
    "SelectionError",
    "SelectionErrorKind",
    "SelectionResult",
    "ThemeCatalog",
    "ThemeCategory",
    "ThemeSelector",
    "build_binding",
    "derive_output_path",
    "load_config",
    "load_index",
    "load_palette",
    "parse_choice",
    "short_name",
]
