"""Package version, preferring the checkout's pyproject.toml over installed metadata."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DIST_NAME = "oasis-vimiumc"

_PYPROJECT = Path(__file__).parents[2] / "pyproject.toml"


def get_version() -> str:
    # Editable checkouts report the version being worked on
    if _PYPROJECT.is_file():
        try:
            project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
            project = {}
        if project.get("name") == DIST_NAME and "version" in project:
            return str(project["version"])

    try:
        return _metadata_version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
