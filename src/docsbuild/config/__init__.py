# src/docsbuild/config/__init__.py

"""Project layout configuration for docsbuild.

Locates, loads, validates and resolves the optional project config file.
"""

from .config_loader import (
    find_config,
    load_and_validate_config,
    load_config,
)
from .config_resolve import resolve_layout
from .config_types import ConfigSource, ProjectConfig, ProjectLayout
from .config_validate import ValidationSummary, validate_config


__all__ = [  # noqa: RUF022
    # config_loader
    "find_config",
    "load_and_validate_config",
    "load_config",
    # config_resolve
    "resolve_layout",
    # config_types
    "ConfigSource",
    "ProjectConfig",
    "ProjectLayout",
    # config_validate
    "ValidationSummary",
    "validate_config",
]
