# src/docsbuild/plugins.py

"""Plugin pipeline: a stable base prefix plus the production-only tail."""

import json
from collections.abc import Sequence

from .constants import (
    DEFAULT_README,
    DEFAULT_README_DEST,
    ENV_BUILT_AT,
    ENV_MAPS_API_KEY,
    ENV_NODE_ENV,
    UNDEFINED_LITERAL,
)
from .environment import BuildEnvironment
from .logs import getAppLogger
from .types import OutputPolicy, Plugin, PluginKind, freeze_options


def _encode(value: str | None) -> str:
    return UNDEFINED_LITERAL if value is None else json.dumps(value)


def _verbatim(value: str | None) -> str:
    return UNDEFINED_LITERAL if value is None else value


def build_define_values(env: BuildEnvironment) -> dict[str, str]:
    """Return the client-visible process variables, and only those."""
    return {
        ENV_BUILT_AT: _verbatim(env.built_at),
        ENV_MAPS_API_KEY: _encode(env.external_api_key),
        ENV_NODE_ENV: _encode(env.node_env),
    }


def build_base_plugins(
    env: BuildEnvironment, output: OutputPolicy
) -> tuple[Plugin, ...]:
    """Style extraction then define injection; identical prefix in every mode."""
    return (
        Plugin(
            PluginKind.STYLE_EXTRACTION,
            freeze_options({"filename": output.style_filename}),
        ),
        Plugin(
            PluginKind.DEFINE_INJECTION,
            freeze_options({"process.env": build_define_values(env)}),
        ),
    )


def build_production_plugins(
    routes: Sequence[str],
    *,
    prerender_entry: str,
    readme: str = DEFAULT_README,
    readme_dest: str = DEFAULT_README_DEST,
) -> tuple[Plugin, ...]:
    paths = list(routes)
    return (
        Plugin(
            PluginKind.STATIC_PRERENDER,
            freeze_options(
                {
                    "entry": prerender_entry,
                    "paths": paths,
                    "locals": {"paths": list(paths)},
                }
            ),
        ),
        Plugin(PluginKind.MODULE_ORDER_OPTIMIZE),
        Plugin(
            PluginKind.COPY_FILES,
            freeze_options({"patterns": [{"from": readme, "to": readme_dest}]}),
        ),
    )


def build_plugins(
    env: BuildEnvironment,
    output: OutputPolicy,
    routes: Sequence[str] = (),
    *,
    prerender_entry: str,
    readme: str = DEFAULT_README,
    readme_dest: str = DEFAULT_README_DEST,
) -> tuple[Plugin, ...]:
    """Return a freshly built plugin list for ``env``.

    ``routes`` is only consulted for production builds.
    """
    logger = getAppLogger()
    plugins = build_base_plugins(env, output)
    if env.is_production:
        plugins += build_production_plugins(
            routes,
            prerender_entry=prerender_entry,
            readme=readme,
            readme_dest=readme_dest,
        )
    logger.trace(
        f"[build_plugins] {[p.kind.value for p in plugins]}"
    )
    return plugins
