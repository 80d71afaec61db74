"""
Generator configuration.

Paths come from three layers, later ones winning:

1. Defaults relative to the project root (``mappings/``, ``output/``, and
   the bundled template).
2. An optional ``oasis.toml`` in the project root::

       [paths]
       mappings = "palettes"
       output = "dist"
       template = "templates/vimium-c.css.j2"

   Relative paths are resolved against the directory holding the file.
3. Explicit overrides (CLI options).
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError, ConfigErrorKind, not_found, parse_failure
from .renderer import DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

CONFIG_FILE = "oasis.toml"


@dataclass(frozen=True)
class GeneratorConfig:
    """Where palettes are read from and where the stylesheet goes."""

    mappings_dir: Path
    output_dir: Path
    template_file: Path


def _paths_table(config_path: Path) -> dict[str, str]:
    try:
        content = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise parse_failure("config file", config_path, e) from e
    except OSError as e:
        raise ConfigError(
            ConfigErrorKind.NOT_FOUND, f"Cannot read config file {config_path}: {e}", config_path
        ) from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise parse_failure("config file", config_path, e) from e

    paths = data.get("paths", {})
    if not isinstance(paths, dict) or not all(isinstance(v, str) for v in paths.values()):
        raise parse_failure("config file", config_path, "[paths] values must be strings")
    return paths


def load_config(
    project_root: Path,
    config_file: Path | None = None,
    mappings_dir: Path | None = None,
    output_dir: Path | None = None,
    template_file: Path | None = None,
) -> GeneratorConfig:
    """Build a GeneratorConfig for ``project_root``.

    An explicitly given ``config_file`` must exist; the default
    ``oasis.toml`` is optional.

    Raises:
        ConfigError: if the config file is missing (when explicit) or malformed.
    """
    paths: dict[str, str] = {}
    base = project_root

    config_path = config_file or project_root / CONFIG_FILE
    if config_path.exists():
        paths = _paths_table(config_path)
        base = config_path.parent
        logger.debug("Loaded config %s", config_path)
    elif config_file is not None:
        raise not_found("Config file", config_path)

    def pick(override: Path | None, key: str, default: Path) -> Path:
        if override is not None:
            return override
        if key in paths:
            return base / paths[key]
        return default

    return GeneratorConfig(
        mappings_dir=pick(mappings_dir, "mappings", project_root / "mappings"),
        output_dir=pick(output_dir, "output", project_root / "output"),
        template_file=pick(template_file, "template", DEFAULT_TEMPLATE),
    )
