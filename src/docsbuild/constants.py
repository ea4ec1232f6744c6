# src/docsbuild/constants.py
"""Central constants used across the project."""

from typing import Any


# --- env keys (process configuration consumed by the pipeline) ---
ENV_NODE_ENV: str = "NODE_ENV"
ENV_TOKENS: str = "BPK_TOKENS"
ENV_CSS_MODULES: str = "ENABLE_CSS_MODULES"
ENV_BUILT_AT: str = "BPK_BUILT_AT"
ENV_MAPS_API_KEY: str = "GOOGLE_MAPS_API_KEY"

# literal values the environment resolver compares against
PRODUCTION_NODE_ENV: str = "production"
CSS_MODULES_DISABLED_VALUE: str = "false"

# --- env keys (program behaviour) ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
LOG_LEVELS: list[str] = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",
]

# --- project layout defaults ---
DEFAULT_STRICT_CONFIG: bool = True
DEFAULT_ENTRY: dict[str, str] = {"docs": "./docs/src/index.js"}
DEFAULT_OUT_DIR: str = "dist"
DEFAULT_TOKENS_DIR: str = "packages/bpk-tokens/tokens"
DEFAULT_ROUTES_FILE: str = "docs/src/constants/routes.json"
DEFAULT_REDIRECTS_FILE: str = "docs/src/constants/redirect-routes.json"
DEFAULT_README: str = "docs/src/README.md"
DEFAULT_README_DEST: str = "README.md"
DEFAULT_POSTCSS_PLUGINS: list[str] = ["autoprefixer"]

# --- transform policy ---
TOKEN_FILE_SUFFIX: str = ".scss"
INLINE_LIMIT_BYTES: int = 10000
CSS_MODULE_LOCAL_IDENT: str = "[local]-[hash:base64:5]"
MEDIA_FILENAME: str = "[name]_[hash].[ext]"
FAVICON_FILENAME: str = "[name].[ext]"

# --- output policy ---
SCRIPT_HASH_SUFFIX: str = "_[chunkhash]"
STYLE_HASH_SUFFIX: str = "_[contenthash]"
LIBRARY_TARGET: str = "umd"
GLOBAL_OBJECT: str = "this"

# --- optimization & dev-server policy ---
MINIMIZERS: list[str] = ["optimize-css-assets", "terser"]
DEV_SERVER_HOST: str = "0.0.0.0"  # noqa: S104
DEV_SERVER_FALLBACK_INDEX: str = "index.html"

# Literal emitted by the define-injection plugin for an absent variable
UNDEFINED_LITERAL: str = "undefined"

# Raw structure of the defaults above, keyed like the project config file
DEFAULT_PROJECT_CONFIG: dict[str, Any] = {
    "entry": DEFAULT_ENTRY,
    "out_dir": DEFAULT_OUT_DIR,
    "tokens_dir": DEFAULT_TOKENS_DIR,
    "routes_file": DEFAULT_ROUTES_FILE,
    "redirects_file": DEFAULT_REDIRECTS_FILE,
    "readme": DEFAULT_README,
    "readme_dest": DEFAULT_README_DEST,
    "postcss_plugins": DEFAULT_POSTCSS_PLUGINS,
    "strict_config": DEFAULT_STRICT_CONFIG,
}
