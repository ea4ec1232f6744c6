# tests/90_integration/test_cli.py
"""Integration tests for the docsbuild command line."""

import json
from pathlib import Path

import pytest

import docsbuild.cli as mod_cli
from tests.utils import make_environ, write_project


# Keep log output away from the JSON written to stdout
QUIET = ["--log-level", "silent"]


def test_prints_development_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    # --- execute ---
    code = mod_cli.main([str(tmp_path), *QUIET], environ=make_environ())

    # --- validate ---
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "development"
    assert data["output"]["filename"] == "[name].js"
    assert len(data["plugins"]) == 2


def test_writes_production_config_to_file(tmp_path: Path) -> None:
    # --- setup ---
    write_project(tmp_path)
    out = tmp_path / "build" / "webpack.json"

    # --- execute ---
    code = mod_cli.main(
        [str(tmp_path), "--out", str(out)],
        environ=make_environ(NODE_ENV="production"),
    )

    # --- validate ---
    assert code == 0
    data = json.loads(out.read_text())
    assert data["mode"] == "production"
    assert data["output"]["filename"] == "[name]_[chunkhash].js"
    assert len(data["plugins"]) == 5


def test_missing_token_file_exits_nonzero(tmp_path: Path) -> None:
    code = mod_cli.main([str(tmp_path)], environ=make_environ(BPK_TOKENS="nope"))

    assert code == 1


def test_explain(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = mod_cli.main(
        [str(tmp_path), *QUIET, "--explain", "src/base.scss", "src/App.jsx", "data.json"],
        environ=make_environ(),
    )

    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("src/base.scss: base-stylesheet [")
    assert "sass-loader" in lines[0]
    assert lines[1] == "src/App.jsx: scripts [babel-loader]"
    assert lines[2] == "data.json: no rule (bundler default)"


def test_explain_in_production_needs_no_route_registries(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    # --- setup ---
    # No routes.json / redirects.json under tmp_path

    # --- execute ---
    code = mod_cli.main(
        [str(tmp_path), *QUIET, "--explain", "src/App.jsx", "src/button.scss"],
        environ=make_environ(NODE_ENV="production"),
    )

    # --- validate ---
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "src/App.jsx: scripts [babel-loader]"
    assert lines[1].startswith("src/button.scss: stylesheets [")


def test_validate_config_writes_nothing(tmp_path: Path) -> None:
    write_project(tmp_path)
    code = mod_cli.main(
        [str(tmp_path), "--validate-config"],
        environ=make_environ(NODE_ENV="production"),
    )

    assert code == 0
    assert not (tmp_path / "dist").exists()


def test_invalid_config_file_exits_nonzero(tmp_path: Path) -> None:
    (tmp_path / ".docsbuild.json").write_text(json.dumps({"entry": []}))
    assert mod_cli.main([str(tmp_path)], environ=make_environ()) == 1


def test_config_file_overrides_layout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".docsbuild.json").write_text(
        json.dumps({"out_dir": "public", "entry": {"site": "./index.js"}})
    )

    code = mod_cli.main([str(tmp_path), *QUIET], environ=make_environ())

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["entry"] == {"site": "./index.js"}
    assert data["output"]["path"] == str(tmp_path.resolve() / "public")


def test_missing_root_exits_nonzero(tmp_path: Path) -> None:
    assert mod_cli.main([str(tmp_path / "nope")], environ=make_environ()) == 1


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert mod_cli.main(["--version", *QUIET], environ=make_environ()) == 0
    assert capsys.readouterr().out.startswith("Docsbuild ")


def test_unknown_flag_hints(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        mod_cli.main(["--explian", "a.js"], environ=make_environ())

    assert exc.value.code == 2
    assert "did you mean --explain?" in capsys.readouterr().err


def test_uses_process_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("ENABLE_CSS_MODULES", "false")

    code = mod_cli.main([str(tmp_path), *QUIET])

    assert code == 0
    rules = json.loads(capsys.readouterr().out)["module"]["rules"]
    css_loader = rules[2]["use"][1]
    assert css_loader["options"] == {"importLoaders": 1, "modules": None}
