# src/docsbuild/rules.py

"""Transform rule set: which loader chain handles which asset category."""

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .constants import (
    CSS_MODULE_LOCAL_IDENT,
    DEFAULT_POSTCSS_PLUGINS,
    FAVICON_FILENAME,
    INLINE_LIMIT_BYTES,
    MEDIA_FILENAME,
)
from .environment import BuildEnvironment
from .logs import getAppLogger
from .style import StyleOptions
from .types import LoaderStep, TransformRule, freeze_options


# --- loader names ---
SCRIPT_LOADER = "babel-loader"
EXTRACT_LOADER = "mini-css-extract-plugin/loader"
CSS_LOADER = "css-loader"
POSTCSS_LOADER = "postcss-loader"
STYLE_COMPILER_LOADER = "sass-loader"
FILE_LOADER = "file-loader"
RAW_LOADER = "raw-loader"

# --- match patterns ---
SCRIPT_TEST = re.compile(r"\.jsx?$")
# Sources under node_modules are skipped unless they belong to a bpk- package
SCRIPT_EXCLUDE = re.compile(r"node_modules/(?!bpk-).*")
BASE_STYLESHEET_TEST = re.compile(r"base\.scss$")
STYLESHEET_TEST = re.compile(r"\.scss$")
PLAIN_CSS_TEST = re.compile(r"\.css$")
MEDIA_TEST = re.compile(r"\.(jpg|png|svg|mp4)$")
MEDIA_EXCLUDE = re.compile(r"node_modules")
FAVICON_TEST = re.compile(r"favicon\.ico$")
MARKDOWN_TEST = re.compile(r"\.md$")


# --------------------------------------------------------------------------- #
# loader-step helpers
# --------------------------------------------------------------------------- #


def _step(name: str, options: dict[str, Any] | None = None) -> LoaderStep:
    return LoaderStep(name=name, options=freeze_options(options))


def _extract_step(env: BuildEnvironment) -> LoaderStep:
    return _step(EXTRACT_LOADER, {"hmr": not env.is_production})


def _postcss_step(postcss_plugins: Sequence[str]) -> LoaderStep:
    return _step(POSTCSS_LOADER, {"plugins": list(postcss_plugins)})


def _stylesheet_chain(
    env: BuildEnvironment,
    css_options: dict[str, Any] | None,
    postcss_plugins: Sequence[str],
    style: StyleOptions | None,
) -> tuple[LoaderStep, ...]:
    """Build extraction → css → postcss [→ style compiler].

    ``style`` is None for plain CSS, which skips the style compiler.
    """
    chain = [
        _extract_step(env),
        _step(CSS_LOADER, css_options),
        _postcss_step(postcss_plugins),
    ]
    if style is not None:
        chain.append(_step(STYLE_COMPILER_LOADER, style.loader_options()))
    return tuple(chain)


def _css_module_options(env: BuildEnvironment) -> dict[str, Any] | None:
    if not env.css_modules_enabled:
        return None
    return {"localIdentName": CSS_MODULE_LOCAL_IDENT}


# --------------------------------------------------------------------------- #
# rule builder
# --------------------------------------------------------------------------- #


def build_rules(
    env: BuildEnvironment,
    style: StyleOptions,
    *,
    postcss_plugins: Sequence[str] = DEFAULT_POSTCSS_PLUGINS,
) -> tuple[TransformRule, ...]:
    """Return the ordered transform rules for ``env``.

    The base stylesheet rule comes before the general stylesheet rule, and the
    general rule excludes base stylesheets, so a base stylesheet is only ever
    handled by the chain without CSS-module class-name hashing.
    """
    logger = getAppLogger()

    rules = (
        TransformRule(
            name="scripts",
            test=SCRIPT_TEST,
            exclude=SCRIPT_EXCLUDE,
            loaders=(_step(SCRIPT_LOADER),),
        ),
        TransformRule(
            name="base-stylesheet",
            test=BASE_STYLESHEET_TEST,
            loaders=_stylesheet_chain(env, None, postcss_plugins, style),
        ),
        TransformRule(
            name="stylesheets",
            test=STYLESHEET_TEST,
            exclude=BASE_STYLESHEET_TEST,
            loaders=_stylesheet_chain(
                env,
                {"importLoaders": 1, "modules": _css_module_options(env)},
                postcss_plugins,
                style,
            ),
        ),
        TransformRule(
            name="plain-css",
            test=PLAIN_CSS_TEST,
            loaders=_stylesheet_chain(
                env, {"importLoaders": 1}, postcss_plugins, None
            ),
        ),
        TransformRule(
            name="media",
            test=MEDIA_TEST,
            exclude=MEDIA_EXCLUDE,
            loaders=(
                _step(
                    FILE_LOADER,
                    {"limit": INLINE_LIMIT_BYTES, "name": MEDIA_FILENAME},
                ),
            ),
        ),
        TransformRule(
            name="favicon",
            test=FAVICON_TEST,
            loaders=(_step(FILE_LOADER, {"name": FAVICON_FILENAME}),),
        ),
        TransformRule(
            name="markdown",
            test=MARKDOWN_TEST,
            loaders=(_step(RAW_LOADER),),
        ),
    )
    logger.trace(
        f"[build_rules] {len(rules)} rules; css modules "
        f"{'on' if env.css_modules_enabled else 'off'}"
    )
    return rules


# --------------------------------------------------------------------------- #
# routing
# --------------------------------------------------------------------------- #


def find_rules(
    rules: Sequence[TransformRule], path: str | Path
) -> list[TransformRule]:
    """Return every rule matching ``path``, in declaration order."""
    return [rule for rule in rules if rule.matches(path)]


def find_rule(rules: Sequence[TransformRule], path: str | Path) -> TransformRule | None:
    """Return the first rule matching ``path``.

    None means no rule applies and the bundler's default handling is used.
    """
    for rule in rules:
        if rule.matches(path):
            return rule
    return None
