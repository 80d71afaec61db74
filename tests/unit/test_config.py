"""Tests for generator configuration."""

from pathlib import Path

import pytest

from oasis_vimiumc.core.config import load_config
from oasis_vimiumc.core.errors import ConfigError, ConfigErrorKind
from oasis_vimiumc.core.renderer import DEFAULT_TEMPLATE


def test_defaults(tmp_path: Path):
    config = load_config(tmp_path)
    assert config.mappings_dir == tmp_path / "mappings"
    assert config.output_dir == tmp_path / "output"
    assert config.template_file == DEFAULT_TEMPLATE


def test_bundled_template_exists():
    assert DEFAULT_TEMPLATE.is_file()


def test_oasis_toml_paths_are_relative_to_file(tmp_path: Path):
    (tmp_path / "oasis.toml").write_text(
        '[paths]\nmappings = "palettes"\noutput = "dist/css"\ntemplate = "t/theme.css.j2"\n',
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.mappings_dir == tmp_path / "palettes"
    assert config.output_dir == tmp_path / "dist" / "css"
    assert config.template_file == tmp_path / "t" / "theme.css.j2"


def test_partial_oasis_toml(tmp_path: Path):
    (tmp_path / "oasis.toml").write_text('[paths]\noutput = "build"\n', encoding="utf-8")
    config = load_config(tmp_path)
    assert config.output_dir == tmp_path / "build"
    assert config.mappings_dir == tmp_path / "mappings"


def test_overrides_win(tmp_path: Path):
    (tmp_path / "oasis.toml").write_text('[paths]\noutput = "build"\n', encoding="utf-8")
    config = load_config(tmp_path, output_dir=tmp_path / "elsewhere")
    assert config.output_dir == tmp_path / "elsewhere"


def test_explicit_config_file(tmp_path: Path):
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    (conf_dir / "custom.toml").write_text('[paths]\nmappings = "m"\n', encoding="utf-8")
    config = load_config(tmp_path, config_file=conf_dir / "custom.toml")
    assert config.mappings_dir == conf_dir / "m"


def test_explicit_config_file_missing(tmp_path: Path):
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path, config_file=tmp_path / "absent.toml")
    assert exc_info.value.kind == ConfigErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "content",
    [
        "[paths\n",
        "[paths]\noutput = 3\n",
        'paths = "flat"\n',
    ],
)
def test_malformed_oasis_toml(tmp_path: Path, content: str):
    (tmp_path / "oasis.toml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path)
    assert exc_info.value.kind == ConfigErrorKind.PARSE_ERROR


def test_non_utf8_oasis_toml(tmp_path: Path):
    (tmp_path / "oasis.toml").write_bytes(b'[paths]\noutput = "\xff\xfe"\n')
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path)
    assert exc_info.value.kind == ConfigErrorKind.PARSE_ERROR
    assert exc_info.value.path == tmp_path / "oasis.toml"


def test_unreadable_oasis_toml(tmp_path: Path):
    # A directory where the config file is expected cannot be read
    (tmp_path / "oasis.toml").mkdir()
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path)
    assert exc_info.value.kind == ConfigErrorKind.NOT_FOUND
    assert "Cannot read config file" in exc_info.value.message
