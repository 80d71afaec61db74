"""Shared pytest fixtures for oasis-vimiumc tests."""

import json
from pathlib import Path

import pytest

from oasis_vimiumc.core.catalog import ThemeCatalog

INDEX = {
    "light_themes": [
        {"id": "l1", "name": "oasis_sand", "description": "warm"},
        {"id": "l2", "name": "oasis_dune"},
    ],
    "dark_themes": [
        {"id": "d1", "name": "oasis_ink"},
    ],
}

PALETTES = {
    "l1": {
        "name": "oasis_sand",
        "display_name": "Oasis Sand",
        "colors": {"background": "#f5ecd9", "link": "#2f6f8f"},
    },
    "l2": {
        "name": "oasis_dune",
        "display_name": "Oasis Dune",
        "colors": {"background": "#f8f1e4", "link": "#356f7d"},
    },
    "d1": {
        "name": "oasis_ink",
        "display_name": "Oasis Ink",
        "colors": {"background": "#15171c", "link": "#7fb0e0"},
    },
}

TEMPLATE = """\
/* {{ day_name }} / {{ night_name }} */
.day { background: {{ day_background }}; color: {{ day_link }}; }
.night { background: {{ night_background }}; color: {{ night_link }}; }
"""


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def mappings_dir(tmp_path: Path) -> Path:
    """Return a mappings directory with two light palettes and one dark."""
    directory = tmp_path / "mappings"
    directory.mkdir()
    write_json(directory / "index.json", INDEX)
    for theme_id, palette in PALETTES.items():
        write_json(directory / f"{theme_id}.json", palette)
    return directory


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Return a small template using both display names and two roles."""
    path = tmp_path / "vimium-c.css.j2"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def catalog(mappings_dir: Path) -> ThemeCatalog:
    return ThemeCatalog.load(mappings_dir)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "output"
