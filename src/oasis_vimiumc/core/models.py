"""
Palette types shared by the catalog, selector, and renderer.

Two JSON shapes live on disk:

- ``index.json`` lists palette summaries in two ordered categories
  (``light_themes`` and ``dark_themes``).
- ``<id>.json`` holds a full palette: its name, display name, and a map of
  color roles to CSS color strings.

Color values are opaque strings. They are never checked for CSS validity.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ThemeCategory(StrEnum):
    """Lightness category a palette is listed under in the index."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def other(self) -> ThemeCategory:
        return ThemeCategory.DARK if self is ThemeCategory.LIGHT else ThemeCategory.LIGHT

    @property
    def index_key(self) -> str:
        return f"{self.value}_themes"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Role(StrEnum):
    """Slot a palette fills in the generated stylesheet."""

    DAY = "day"
    NIGHT = "night"

    @property
    def preferred_category(self) -> ThemeCategory:
        return ThemeCategory.LIGHT if self is Role.DAY else ThemeCategory.DARK


# =============================================================================
# Records
# =============================================================================


class PaletteSummary(BaseModel):
    """One entry of the catalog index."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(description="Identifier; also the palette file stem")
    name: str = Field(description="Palette name shown in listings")
    is_light: bool = Field(description="True for entries under light_themes")


class PaletteRecord(BaseModel):
    """A full palette loaded from ``<id>.json``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="Machine name, e.g. oasis_sand")
    display_name: str = Field(description="Human-readable name")
    colors: dict[str, str] = Field(description="Color role -> CSS color string, in file order")


class CatalogIndex(BaseModel):
    """Both categories of the index, in file order."""

    model_config = ConfigDict(frozen=True)

    light_themes: tuple[PaletteSummary, ...]
    dark_themes: tuple[PaletteSummary, ...]

    def themes_for(self, category: ThemeCategory) -> tuple[PaletteSummary, ...]:
        if category is ThemeCategory.LIGHT:
            return self.light_themes
        return self.dark_themes

    def all_themes(self) -> tuple[PaletteSummary, ...]:
        return self.light_themes + self.dark_themes


class SelectionResult(BaseModel):
    """The resolved (day, night) pair.

    Lightness is not checked: a dark palette may fill the day slot.
    """

    model_config = ConfigDict(frozen=True)

    day: PaletteRecord
    night: PaletteRecord
