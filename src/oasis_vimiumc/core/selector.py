"""
Day/night theme selection.

Two modes:

- Explicit: both identifiers are given and are resolved as-is. A dark
  palette may be used for day (and vice versa); no category check is made.
- Interactive: for each role the user first sees the recommended category
  (light for day, dark for night) plus one extra entry that switches to the
  other category. The first invalid entry aborts the run with a
  SelectionError; there is no re-prompt.

Input and display are supplied by the caller: ``prompt`` reads one line,
``show_menu`` displays a title and its entries numbered from 1.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from .catalog import ThemeCatalog
from .errors import SelectionError
from .models import Role, SelectionResult, ThemeCategory

logger = logging.getLogger(__name__)

BANNER = "=== Oasis Vimium-C Theme Generator ==="

Prompt = Callable[[str], str]
ShowMenu = Callable[[str, Sequence[str]], None]

# Optional sign and digits after leading whitespace; anything else reads as 0
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_choice(raw: str) -> int:
    """Parse a menu choice the lenient way: ``"2"`` -> 2, ``"2x"`` -> 2, ``"x"`` -> 0."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else 0


def _no_menu(title: str, entries: Sequence[str]) -> None:
    pass


class ThemeSelector:
    """Produces the (day, night) pair from a loaded catalog."""

    def __init__(self, catalog: ThemeCatalog, prompt: Prompt, show_menu: ShowMenu = _no_menu):
        self.catalog = catalog
        self.prompt = prompt
        self.show_menu = show_menu

    def select_pair(self, day: str | None = None, night: str | None = None) -> SelectionResult:
        """Resolve both palettes, prompting unless both identifiers are given.

        Raises:
            SelectionError: on invalid interactive input.
            ConfigError: if a chosen palette cannot be loaded.
        """
        if day is not None and night is not None:
            logger.debug("Explicit selection: day=%s night=%s", day, night)
            for theme_id in (day, night):
                if self.catalog.find(theme_id) is None:
                    logger.debug("Theme %s is not listed in the index", theme_id)
            day_id, night_id = day, night
        else:
            if day is not None or night is not None:
                logger.warning(
                    "Explicit mode needs both --day and --night; choosing interactively"
                )
            self.show_menu(BANNER, [])
            day_id = self.select_role(Role.DAY)
            night_id = self.select_role(Role.NIGHT)

        return SelectionResult(
            day=self.catalog.resolve_palette(day_id),
            night=self.catalog.resolve_palette(night_id),
        )

    def select_role(self, role: Role) -> str:
        """Run the two-step menu for ``role`` and return the chosen identifier."""
        preferred = role.preferred_category
        themes = self.catalog.themes_for(preferred)

        self.show_menu(
            f"{preferred.label} Themes (recommended for {role}):",
            [theme.name for theme in themes] + [f"Use a {preferred.other} theme instead"],
        )
        choice = self._read_choice(role, upper=len(themes) + 1)
        if choice <= len(themes):
            theme_id = themes[choice - 1].id
        else:
            theme_id = self._choose_alternate(role, preferred.other)

        logger.debug("Selected %s theme %s", role, theme_id)
        return theme_id

    def _choose_alternate(self, role: Role, category: ThemeCategory) -> str:
        themes = self.catalog.themes_for(category)
        self.show_menu(f"{category.label} Themes:", [theme.name for theme in themes])

        choice = self._read_choice(role, upper=len(themes))
        return themes[choice - 1].id

    def _read_choice(self, role: Role, upper: int) -> int:
        """Prompt once and return a choice in ``[1, upper]``."""
        try:
            raw = self.prompt(f"Select {role} theme (1-{upper}): ")
        except EOFError as e:
            raise SelectionError("Invalid selection: no input") from e

        choice = parse_choice(raw)
        if not 1 <= choice <= upper:
            raise SelectionError(f"Invalid selection '{raw.strip()}' (expected 1-{upper})")
        return choice
