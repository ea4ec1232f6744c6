# tests/50_core/test_config_loader.py
"""Tests for locating and loading the project config."""

import json
from pathlib import Path

import pytest

import docsbuild.config.config_loader as mod_loader


def test_find_config_none_without_files(tmp_path: Path) -> None:
    assert mod_loader.find_config(tmp_path) is None


def test_find_config_prefers_json_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / ".docsbuild.json").write_text("{}")
    (tmp_path / "pyproject.toml").write_text('[tool.docsbuild]\nout_dir = "x"\n')

    found = mod_loader.find_config(tmp_path)

    assert found == (tmp_path / ".docsbuild.json", "json")


def test_find_config_pyproject_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.docsbuild]\nout_dir = "x"\n')
    assert mod_loader.find_config(tmp_path) == (tmp_path / "pyproject.toml", "pyproject")


def test_find_config_ignores_pyproject_without_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "site"\n')
    assert mod_loader.find_config(tmp_path) is None


def test_find_config_explicit_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Specified config file not found"):
        mod_loader.find_config(tmp_path, tmp_path / "missing.json")


def test_find_config_explicit_directory(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="is a directory"):
        mod_loader.find_config(tmp_path, tmp_path)


def test_find_config_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text("{}")
    assert mod_loader.find_config(tmp_path, str(path)) == (path.resolve(), "json")


def test_load_config_json(tmp_path: Path) -> None:
    path = tmp_path / ".docsbuild.json"
    path.write_text(json.dumps({"out_dir": "build"}))
    assert mod_loader.load_config(path, "json") == {"out_dir": "build"}


def test_load_config_empty_json_file(tmp_path: Path) -> None:
    path = tmp_path / ".docsbuild.json"
    path.write_text("   \n")
    assert mod_loader.load_config(path, "json") == {}


def test_load_config_bad_json(tmp_path: Path) -> None:
    path = tmp_path / ".docsbuild.json"
    path.write_text("{oops")
    with pytest.raises(ValueError, match="Error while loading configuration file"):
        mod_loader.load_config(path, "json")


def test_load_config_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.docsbuild]\npostcss_plugins = ["autoprefixer", "cssnano"]\n')
    assert mod_loader.load_config(path, "pyproject") == {
        "postcss_plugins": ["autoprefixer", "cssnano"]
    }


def test_load_config_bad_toml(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.docsbuild\n")
    with pytest.raises(ValueError, match="pyproject.toml"):
        mod_loader.load_config(path, "pyproject")


def test_load_and_validate_defaults(tmp_path: Path) -> None:
    config_path, source, cfg = mod_loader.load_and_validate_config(tmp_path)
    assert config_path is None
    assert source == "default"
    assert cfg == {}


def test_load_and_validate_rejects_invalid(tmp_path: Path) -> None:
    (tmp_path / ".docsbuild.json").write_text(json.dumps({"bogus": 1}))
    with pytest.raises(ValueError, match="Invalid configuration in .docsbuild.json"):
        mod_loader.load_and_validate_config(tmp_path)
