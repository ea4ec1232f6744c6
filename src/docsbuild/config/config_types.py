# src/docsbuild/config/config_types.py


from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypedDict


ConfigSource = Literal["cli", "json", "pyproject", "default"]


class ProjectConfig(TypedDict, total=False):
    # entry name → entry module, relative to the project root
    entry: dict[str, str]
    out_dir: str
    tokens_dir: str  # directory holding <token set>.scss files
    routes_file: str  # JSON registry: route key → path
    redirects_file: str  # JSON registry: old path → new path
    readme: str  # documentation file copied in production
    readme_dest: str  # name of the copy inside the output dir
    postcss_plugins: list[str]

    # runtime behavior
    log_level: str
    strict_config: bool


@dataclass(frozen=True)
class ProjectLayout:
    """Project paths with every field resolved against ``root``."""

    root: Path
    entry: dict[str, str]
    out_dir: Path
    tokens_dir: Path
    routes_file: Path
    redirects_file: Path
    readme: str
    readme_dest: str
    postcss_plugins: tuple[str, ...]
    log_level: str | None = None
    source: ConfigSource = "default"

    @property
    def prerender_entry(self) -> str:
        """The entry that renders pages: the first one declared."""
        return next(iter(self.entry))
