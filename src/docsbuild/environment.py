# src/docsbuild/environment.py

"""Resolve the process configuration into an immutable BuildEnvironment.

Every downstream builder branches on the BuildEnvironment returned here and
never reads the raw process configuration itself.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .constants import (
    CSS_MODULES_DISABLED_VALUE,
    ENV_BUILT_AT,
    ENV_CSS_MODULES,
    ENV_MAPS_API_KEY,
    ENV_NODE_ENV,
    ENV_TOKENS,
    PRODUCTION_NODE_ENV,
)
from .logs import getAppLogger


class BuildMode(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


@dataclass(frozen=True)
class BuildEnvironment:
    """Values derived once from the process configuration."""

    mode: BuildMode
    token_set_id: str | None = None
    css_modules_enabled: bool = True
    built_at: str | None = None
    external_api_key: str | None = None
    # raw NODE_ENV, forwarded verbatim to the client bundle
    node_env: str | None = None

    @property
    def is_production(self) -> bool:
        return self.mode is BuildMode.PRODUCTION


def resolve_environment(
    environ: Mapping[str, str | None] | None = None,
) -> BuildEnvironment:
    """Derive a BuildEnvironment from a mapping of process variables.

    Missing variables fall back to their defaults; this never raises.

    Args:
        environ: Variable name → value. Defaults to ``os.environ``.

    Returns:
        The resolved, immutable BuildEnvironment.
    """
    logger = getAppLogger()
    raw: Mapping[str, str | None] = os.environ if environ is None else environ

    node_env = raw.get(ENV_NODE_ENV)
    mode = (
        BuildMode.PRODUCTION
        if node_env == PRODUCTION_NODE_ENV
        else BuildMode.DEVELOPMENT
    )

    # Only the literal "false" disables CSS modules; absence keeps them on.
    css_modules_enabled = raw.get(ENV_CSS_MODULES) != CSS_MODULES_DISABLED_VALUE

    # An empty token id behaves like an unset one
    token_set_id = raw.get(ENV_TOKENS) or None

    env = BuildEnvironment(
        mode=mode,
        token_set_id=token_set_id,
        css_modules_enabled=css_modules_enabled,
        built_at=raw.get(ENV_BUILT_AT),
        external_api_key=raw.get(ENV_MAPS_API_KEY),
        node_env=node_env,
    )
    logger.trace(
        f"[resolve_environment] {ENV_NODE_ENV}={node_env!r} → mode={mode.value}"
    )
    logger.debug(
        "Environment: mode=%s, css_modules=%s, tokens=%s",
        env.mode.value,
        env.css_modules_enabled,
        env.token_set_id or "<none>",
    )
    return env
