"""
Palette catalog: the index of known palettes and per-palette lookups.

Layout of a mappings directory::

    mappings/
        index.json      {"light_themes": [...], "dark_themes": [...]}
        <id>.json       {"name": ..., "display_name": ..., "colors": {...}}

The index is read once per run. Palettes are read on demand and not cached.
A missing or malformed file is a configuration problem, so loaders raise
ConfigError and never retry.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError, ConfigErrorKind, not_found, parse_failure
from .models import CatalogIndex, PaletteRecord, PaletteSummary, ThemeCategory

logger = logging.getLogger(__name__)

INDEX_FILE = "index.json"


# =============================================================================
# Path helpers
# =============================================================================


def get_index_path(mappings_dir: Path) -> Path:
    return mappings_dir / INDEX_FILE


def get_palette_path(mappings_dir: Path, theme_id: str) -> Path:
    return mappings_dir / f"{theme_id}.json"


def _read_json(path: Path, what: str) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise not_found(what, path) from e
    except UnicodeDecodeError as e:
        raise parse_failure(what, path, e) from e
    except OSError as e:
        raise ConfigError(
            ConfigErrorKind.NOT_FOUND, f"Cannot read {what.lower()} {path}: {e}", path
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise parse_failure(what, path, e) from e


# =============================================================================
# Loading
# =============================================================================


def _parse_category(data: dict[str, Any], category: ThemeCategory) -> list[PaletteSummary]:
    entries = data[category.index_key]
    if not isinstance(entries, list):
        raise TypeError(f"'{category.index_key}' must be a list")

    summaries = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise TypeError(f"entries of '{category.index_key}' must be objects")
        # Category membership decides lightness unless the entry says otherwise
        fields = {"is_light": category is ThemeCategory.LIGHT, **entry}
        summaries.append(PaletteSummary.model_validate(fields))
    return summaries


def load_index(mappings_dir: Path) -> CatalogIndex:
    """Load the catalog index from ``<mappings_dir>/index.json``.

    Raises:
        ConfigError: NOT_FOUND if the file is absent, PARSE_ERROR if it is
            not valid JSON or not shaped like an index.
    """
    index_path = get_index_path(mappings_dir)
    data = _read_json(index_path, "Index file")

    try:
        if not isinstance(data, dict):
            raise TypeError("index must be a JSON object")
        index = CatalogIndex(
            light_themes=tuple(_parse_category(data, ThemeCategory.LIGHT)),
            dark_themes=tuple(_parse_category(data, ThemeCategory.DARK)),
        )
    except KeyError as e:
        raise parse_failure("index file", index_path, f"missing key {e}") from e
    except (TypeError, ValidationError) as e:
        raise parse_failure("index file", index_path, e) from e

    logger.debug(
        "Loaded index %s: %d light, %d dark",
        index_path,
        len(index.light_themes),
        len(index.dark_themes),
    )
    return index


def load_palette(mappings_dir: Path, theme_id: str) -> PaletteRecord:
    """Load a full palette by identifier.

    Raises:
        ConfigError: NOT_FOUND if ``<id>.json`` is absent, PARSE_ERROR if it
            is malformed.
    """
    palette_path = get_palette_path(mappings_dir, theme_id)
    data = _read_json(palette_path, "Theme file")

    try:
        palette = PaletteRecord.model_validate(data)
    except ValidationError as e:
        raise parse_failure("theme file", palette_path, e) from e

    logger.debug("Loaded palette %s (%d colors)", palette.name, len(palette.colors))
    return palette


# =============================================================================
# Catalog
# =============================================================================


@dataclass(frozen=True)
class ThemeCatalog:
    """The loaded index together with the directory palettes resolve from."""

    mappings_dir: Path
    index: CatalogIndex

    @classmethod
    def load(cls, mappings_dir: Path) -> ThemeCatalog:
        return cls(mappings_dir=mappings_dir, index=load_index(mappings_dir))

    @property
    def light_themes(self) -> tuple[PaletteSummary, ...]:
        return self.index.light_themes

    @property
    def dark_themes(self) -> tuple[PaletteSummary, ...]:
        return self.index.dark_themes

    def themes_for(self, category: ThemeCategory) -> tuple[PaletteSummary, ...]:
        return self.index.themes_for(category)

    def find(self, theme_id: str) -> PaletteSummary | None:
        """Return the index entry for ``theme_id``, if the index lists it."""
        for summary in self.index.all_themes():
            if summary.id == theme_id:
                return summary
        return None

    def resolve_palette(self, theme_id: str) -> PaletteRecord:
        return load_palette(self.mappings_dir, theme_id)
