# src/docsbuild/__init__.py

"""Docsbuild — assemble the documentation site's asset pipeline configuration.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use or custom integrations.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                 → CLI entrypoint
    - assemble_config()      → Build the bundler configuration
    - resolve_environment()  → Derive the BuildEnvironment from env vars
    - build_rules()          → Transform rule set for an environment
    - build_plugins()        → Plugin pipeline for an environment
"""

from .assemble import assemble_config, dump_config
from .cli import main
from .config import (
    ProjectConfig,
    ProjectLayout,
    find_config,
    load_and_validate_config,
    load_config,
    resolve_layout,
    validate_config,
)
from .environment import BuildEnvironment, BuildMode, resolve_environment
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_PACKAGE, PROGRAM_SCRIPT, Metadata
from .plugins import build_define_values, build_plugins
from .policy import (
    build_dev_server_policy,
    build_optimization_policy,
    build_output_policy,
)
from .routes import build_route_list, load_route_list, load_route_registry
from .rules import build_rules, find_rule, find_rules
from .style import STYLE_FUNCTIONS, StyleOptions, build_style_options, read_token_prelude
from .types import (
    BuildConfig,
    DevServerPolicy,
    LoaderStep,
    OptimizationPolicy,
    OutputPolicy,
    Plugin,
    PluginKind,
    TransformRule,
)


__all__ = [  # noqa: RUF022
    # assemble
    "assemble_config",
    "dump_config",
    # cli
    "main",
    # config
    "find_config",
    "load_and_validate_config",
    "load_config",
    "ProjectConfig",
    "ProjectLayout",
    "resolve_layout",
    "validate_config",
    # environment
    "BuildEnvironment",
    "BuildMode",
    "resolve_environment",
    # logs
    "getAppLogger",
    # meta
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # plugins
    "build_define_values",
    "build_plugins",
    # policy
    "build_dev_server_policy",
    "build_optimization_policy",
    "build_output_policy",
    # routes
    "build_route_list",
    "load_route_list",
    "load_route_registry",
    # rules
    "build_rules",
    "find_rule",
    "find_rules",
    # style
    "STYLE_FUNCTIONS",
    "StyleOptions",
    "build_style_options",
    "read_token_prelude",
    # types
    "BuildConfig",
    "DevServerPolicy",
    "LoaderStep",
    "OptimizationPolicy",
    "OutputPolicy",
    "Plugin",
    "PluginKind",
    "TransformRule",
]
