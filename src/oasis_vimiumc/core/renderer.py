"""
Stylesheet rendering for a (day, night) palette pair.

Each color role becomes two template variables, ``day_<role>`` and
``night_<role>``, next to ``day_name`` and ``night_name`` (the display
names). The rendered text is written to
``<output_dir>/vimiumc-<night>-<day>.css``, night first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from .errors import RenderError, RenderErrorKind
from .models import PaletteRecord, Role, SelectionResult

logger = logging.getLogger(__name__)

NAME_PREFIX = "oasis_"
OUTPUT_PATTERN = "vimiumc-{night}-{day}.css"

# Bundled template used when no other template is configured
DEFAULT_TEMPLATE = Path(__file__).parent.parent / "templates" / "vimium-c.css.j2"


# =============================================================================
# Binding
# =============================================================================


def build_binding(day: PaletteRecord, night: PaletteRecord) -> dict[str, str]:
    """Build the template variables for one render.

    Raises:
        RenderError: BINDING_CONFLICT if a color role would overwrite
            ``day_name`` or ``night_name``.
    """
    binding = {
        f"{Role.DAY}_name": day.display_name,
        f"{Role.NIGHT}_name": night.display_name,
    }
    for role, palette in ((Role.DAY, day), (Role.NIGHT, night)):
        for key, value in palette.colors.items():
            var_name = f"{role}_{key}"
            if var_name in binding:
                raise RenderError(
                    RenderErrorKind.BINDING_CONFLICT,
                    f"Color '{key}' in {palette.name} clashes with template variable '{var_name}'",
                )
            binding[var_name] = value
    return binding


# =============================================================================
# Output naming
# =============================================================================


def short_name(name: str) -> str:
    """Drop the ``oasis_`` prefix: ``oasis_sand`` -> ``sand``."""
    return name.removeprefix(NAME_PREFIX)


def derive_output_path(output_dir: Path, day: PaletteRecord, night: PaletteRecord) -> Path:
    filename = OUTPUT_PATTERN.format(night=short_name(night.name), day=short_name(day.name))
    return output_dir / filename


# =============================================================================
# Renderer
# =============================================================================


@dataclass(frozen=True)
class RenderResult:
    path: Path
    day_name: str
    night_name: str


class CSSRenderer:
    """Renders a template with a palette pair and writes the stylesheet."""

    def __init__(self, template_file: Path = DEFAULT_TEMPLATE, output_dir: Path = Path("output")):
        self.template_file = template_file
        self.output_dir = output_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_file.parent)),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, selection: SelectionResult) -> str:
        """Render the template for ``selection``.

        Raises:
            RenderError: TEMPLATE_FAILURE for a missing or broken template or
                an undefined variable; BINDING_CONFLICT from the binding.
        """
        binding = build_binding(selection.day, selection.night)
        try:
            template = self.env.get_template(self.template_file.name)
            return template.render(binding)
        except TemplateNotFound as e:
            raise RenderError(
                RenderErrorKind.TEMPLATE_FAILURE,
                f"Template not found: {self.template_file}",
                self.template_file,
            ) from e
        except TemplateError as e:
            raise RenderError(
                RenderErrorKind.TEMPLATE_FAILURE,
                f"Failed to render {self.template_file}: {e}",
                self.template_file,
            ) from e

    def write(self, output_file: Path, content: str) -> None:
        """Write ``content``, creating the output directory and replacing any old file."""
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise RenderError(
                RenderErrorKind.IO_FAILURE,
                f"Cannot write {output_file}: {e}",
                output_file,
            ) from e
        logger.debug("Wrote %d bytes to %s", len(content), output_file)

    def generate(self, selection: SelectionResult) -> RenderResult:
        content = self.render(selection)
        output_file = derive_output_path(self.output_dir, selection.day, selection.night)
        self.write(output_file, content)
        return RenderResult(
            path=output_file.resolve(),
            day_name=selection.day.display_name,
            night_name=selection.night.display_name,
        )
