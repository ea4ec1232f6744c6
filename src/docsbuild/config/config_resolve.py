# src/docsbuild/config/config_resolve.py


from pathlib import Path
from typing import Any

from docsbuild.constants import DEFAULT_PROJECT_CONFIG
from docsbuild.logs import getAppLogger

from .config_types import ConfigSource, ProjectConfig, ProjectLayout


def _pick(cfg: ProjectConfig, key: str) -> Any:
    """Return the configured value for ``key`` or its default."""
    if key in cfg:
        return cfg[key]  # type: ignore[literal-required]
    return DEFAULT_PROJECT_CONFIG[key]


def _resolve_path(root: Path, raw: str) -> Path:
    path = Path(raw).expanduser()
    return path if path.is_absolute() else (root / path)


def resolve_layout(
    cfg: ProjectConfig,
    root: Path,
    *,
    source: ConfigSource = "default",
) -> ProjectLayout:
    """Merge a validated project config with defaults into a ProjectLayout."""
    logger = getAppLogger()
    root = root.resolve()
    logger.trace(f"[resolve_layout] Resolving layout under {root} ({source})")

    layout = ProjectLayout(
        root=root,
        entry=dict(_pick(cfg, "entry")),
        out_dir=_resolve_path(root, _pick(cfg, "out_dir")),
        tokens_dir=_resolve_path(root, _pick(cfg, "tokens_dir")),
        routes_file=_resolve_path(root, _pick(cfg, "routes_file")),
        redirects_file=_resolve_path(root, _pick(cfg, "redirects_file")),
        # copied by the bundler relative to its own context; kept as written
        readme=_pick(cfg, "readme"),
        readme_dest=_pick(cfg, "readme_dest"),
        postcss_plugins=tuple(_pick(cfg, "postcss_plugins")),
        log_level=cfg.get("log_level"),
        source=source,
    )
    logger.trace(f"[resolve_layout] {layout}")
    return layout
