# tests/50_core/test_validate_config.py
"""Tests for docsbuild.config.config_validate."""

import docsbuild.config.config_validate as mod_validate


def test_empty_config_is_valid() -> None:
    summary = mod_validate.validate_config({})
    assert summary.valid
    assert summary.errors == []


def test_full_config_is_valid() -> None:
    cfg = {
        "entry": {"docs": "./docs/src/index.js"},
        "out_dir": "build",
        "tokens_dir": "tokens",
        "routes_file": "routes.json",
        "redirects_file": "redirects.json",
        "readme": "docs/README.md",
        "readme_dest": "README.md",
        "postcss_plugins": ["autoprefixer"],
        "log_level": "debug",
        "strict_config": True,
    }
    assert mod_validate.validate_config(cfg).valid


def test_root_must_be_object() -> None:
    summary = mod_validate.validate_config(["not", "a", "dict"])
    assert not summary.valid
    assert "must be an object" in summary.errors[0]


def test_unknown_key_is_error_when_strict() -> None:
    summary = mod_validate.validate_config({"outdir": "dist"})
    assert not summary.valid
    assert "Unknown key `outdir`" in summary.errors[0]


def test_unknown_key_is_warning_when_not_strict() -> None:
    summary = mod_validate.validate_config({"outdir": "dist", "strict_config": False})
    assert summary.valid
    assert summary.warnings == ["Unknown key `outdir` in configuration"]


def test_strict_argument_overrides_config() -> None:
    summary = mod_validate.validate_config(
        {"outdir": "dist", "strict_config": True}, strict=False
    )
    assert summary.valid


def test_wrong_types_are_errors_even_when_lenient() -> None:
    summary = mod_validate.validate_config(
        {
            "strict_config": False,
            "out_dir": 3,
            "entry": {"docs": 1},
            "postcss_plugins": "autoprefixer",
        }
    )
    assert not summary.valid
    assert len(summary.errors) == 3
    assert any("`out_dir` must be str" in e for e in summary.errors)
    assert any('e.g. ["autoprefixer"]' in e for e in summary.errors)


def test_strict_config_must_be_bool() -> None:
    summary = mod_validate.validate_config({"strict_config": "yes"})
    assert not summary.valid


def test_empty_entry_rejected() -> None:
    summary = mod_validate.validate_config({"entry": {}})
    assert not summary.valid
    assert "at least one entry" in summary.errors[0]


def test_unknown_log_level_rejected() -> None:
    summary = mod_validate.validate_config({"log_level": "loud"})
    assert not summary.valid
