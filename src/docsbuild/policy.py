# src/docsbuild/policy.py

"""Output naming, minification and dev-server policy."""

from pathlib import Path

from .constants import (
    DEV_SERVER_FALLBACK_INDEX,
    DEV_SERVER_HOST,
    GLOBAL_OBJECT,
    LIBRARY_TARGET,
    MINIMIZERS,
    SCRIPT_HASH_SUFFIX,
    STYLE_HASH_SUFFIX,
)
from .environment import BuildEnvironment
from .types import DevServerPolicy, OptimizationPolicy, OutputPolicy


def build_output_policy(env: BuildEnvironment, out_dir: Path) -> OutputPolicy:
    """Name bundles ``[name].js``/``[name].css``; production adds a hash."""
    script_suffix = SCRIPT_HASH_SUFFIX if env.is_production else ""
    style_suffix = STYLE_HASH_SUFFIX if env.is_production else ""
    return OutputPolicy(
        script_filename=f"[name]{script_suffix}.js",
        style_filename=f"[name]{style_suffix}.css",
        path=out_dir,
        library_target=LIBRARY_TARGET,
        global_object=GLOBAL_OBJECT,
    )


def build_optimization_policy() -> OptimizationPolicy:
    # Same in every mode: dev-server payloads are minified too.
    return OptimizationPolicy(
        minimize_enabled=True,
        minimizer_chain=tuple(MINIMIZERS),
    )


def build_dev_server_policy() -> DevServerPolicy:
    return DevServerPolicy(
        host=DEV_SERVER_HOST,
        disable_host_check=True,
        fallback_index=DEV_SERVER_FALLBACK_INDEX,
    )
