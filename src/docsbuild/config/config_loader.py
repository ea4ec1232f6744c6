# src/docsbuild/config/config_loader.py


import json
import sys
from pathlib import Path
from typing import Any, cast

from docsbuild.logs import getAppLogger
from docsbuild.meta import PROGRAM_CONFIG

from .config_types import ConfigSource, ProjectConfig
from .config_validate import validate_config


if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python 3.10 only
    import tomli as tomllib


PYPROJECT_TABLE = ("tool", PROGRAM_CONFIG)


def find_config(
    root: Path,
    explicit: str | Path | None = None,
) -> tuple[Path, ConfigSource] | None:
    """Locate the project configuration.

    Search order:
      1. Explicit path (``--config``)
      2. ``.docsbuild.json`` in ``root``
      3. ``pyproject.toml`` in ``root`` with a ``[tool.docsbuild]`` table

    Returns the path and where it came from, or None to use defaults.
    """
    logger = getAppLogger()

    # --- 1. Explicit config path ---
    if explicit is not None:
        config = Path(explicit).expanduser().resolve()
        logger.trace(f"[find_config] Checking explicit path: {config}")
        if not config.exists():
            xmsg = f"Specified config file not found: {config}"
            raise FileNotFoundError(xmsg)
        if config.is_dir():
            xmsg = f"Specified config path is a directory, not a file: {config}"
            raise ValueError(xmsg)
        source: ConfigSource = "pyproject" if config.suffix == ".toml" else "json"
        return config, source

    # --- 2. Dedicated JSON file ---
    candidate = root / f".{PROGRAM_CONFIG}.json"
    if candidate.is_file():
        return candidate, "json"

    # --- 3. pyproject.toml table ---
    pyproject = root / "pyproject.toml"
    if pyproject.is_file() and _load_pyproject_table(pyproject) is not None:
        return pyproject, "pyproject"

    logger.trace(f"[find_config] No config found in {root}; using defaults")
    return None


def _load_pyproject_table(path: Path) -> dict[str, Any] | None:
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        xmsg = f"Error while loading '{path.name}': {e}"
        raise ValueError(xmsg) from e

    table: Any = data
    for key in PYPROJECT_TABLE:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    return cast("dict[str, Any]", table)


def load_config(config_path: Path, source: ConfigSource) -> Any:
    """Load raw configuration data from ``config_path``.

    Returns whatever the file holds; validation happens separately.
    """
    logger = getAppLogger()
    logger.trace(f"[load_config] Loading from {config_path} ({source})")

    if source == "pyproject":
        table = _load_pyproject_table(config_path)
        return {} if table is None else table

    text = config_path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        xmsg = f"Error while loading configuration file '{config_path.name}': {e}"
        raise ValueError(xmsg) from e


def load_and_validate_config(
    root: Path,
    explicit: str | Path | None = None,
) -> tuple[Path | None, ConfigSource, ProjectConfig]:
    """Find, load and validate the project configuration.

    Raises:
        FileNotFoundError: An explicit config path does not exist.
        ValueError: The config cannot be parsed or fails validation.
    """
    found = find_config(root, explicit)
    if found is None:
        return None, "default", ProjectConfig()

    config_path, source = found
    raw = load_config(config_path, source)
    summary = validate_config(raw)
    if not summary.valid:
        details = "\n".join(f"  - {err}" for err in summary.errors)
        xmsg = f"Invalid configuration in {config_path.name}:\n{details}"
        raise ValueError(xmsg)
    return config_path, source, cast("ProjectConfig", raw)
