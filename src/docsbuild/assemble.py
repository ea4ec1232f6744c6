# src/docsbuild/assemble.py

"""Compose every builder into the configuration handed to the bundler."""

import json
from collections.abc import Mapping
from pathlib import Path

from .config import ProjectLayout, resolve_layout
from .config.config_types import ProjectConfig
from .environment import BuildEnvironment, resolve_environment
from .logs import getAppLogger
from .plugins import build_plugins
from .policy import (
    build_dev_server_policy,
    build_optimization_policy,
    build_output_policy,
)
from .routes import load_route_list
from .rules import build_rules
from .style import build_style_options
from .types import BuildConfig, freeze_options


def assemble_config(
    environ: Mapping[str, str | None] | None = None,
    layout: ProjectLayout | None = None,
    *,
    env: BuildEnvironment | None = None,
) -> BuildConfig:
    """Build the complete bundler configuration.

    The environment is resolved first; style options and rules depend on it,
    the plugin list is built after the rules, and the optimization and
    dev-server policies are merged last. Errors from any step propagate.

    Args:
        environ: Process variables; defaults to ``os.environ``.
        layout: Project paths; defaults to the built-in layout under cwd.
        env: An already-resolved environment, used instead of ``environ``.

    Raises:
        FileNotFoundError: The selected token file or a route registry is
            missing.
    """
    logger = getAppLogger()
    if env is None:
        env = resolve_environment(environ)
    if layout is None:
        layout = resolve_layout(ProjectConfig(), Path.cwd())

    style = build_style_options(env, layout.tokens_dir)
    rules = build_rules(env, style, postcss_plugins=layout.postcss_plugins)
    output = build_output_policy(env, layout.out_dir)

    # Route registries only matter to the production pre-render step
    routes: tuple[str, ...] = ()
    if env.is_production:
        routes = load_route_list(layout.routes_file, layout.redirects_file)

    plugins = build_plugins(
        env,
        output,
        routes,
        prerender_entry=layout.prerender_entry,
        readme=layout.readme,
        readme_dest=layout.readme_dest,
    )

    config = BuildConfig(
        mode=env.mode,
        entry=freeze_options(layout.entry),
        output=output,
        rules=rules,
        plugins=plugins,
        optimization=build_optimization_policy(),
        dev_server=build_dev_server_policy(),
    )
    logger.debug(
        "Assembled %s config: %d rule(s), %d plugin(s)",
        env.mode.value,
        len(rules),
        len(plugins),
    )
    return config


def dump_config(config: BuildConfig) -> str:
    """Serialise ``config`` as deterministic, indented JSON."""
    return json.dumps(config.to_dict(), indent=2) + "\n"
