# src/docsbuild/routes.py

"""Build the ordered list of pages to pre-render from the route registries."""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .logs import getAppLogger


def load_route_registry(path: Path) -> dict[str, str]:
    """Load a JSON route registry (an object of string → string).

    Key order is preserved as declared in the file.

    Raises:
        FileNotFoundError: If the registry file does not exist.
        ValueError: If the file is not valid JSON or not an object.
        TypeError: If any key or value is not a string.
    """
    logger = getAppLogger()
    if not path.is_file():
        xmsg = f"Route registry not found: {path}"
        raise FileNotFoundError(xmsg)

    logger.trace(f"[load_route_registry] Loading {path}")
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        xmsg = f"Route registry '{path.name}' is not valid JSON: {e}"
        raise ValueError(xmsg) from e

    if not isinstance(data, dict):
        xmsg = (
            f"Route registry '{path.name}' must be a JSON object, "
            f"not {type(data).__name__}"
        )
        raise ValueError(xmsg)

    for key, value in data.items():
        if not isinstance(value, str):
            xmsg = (
                f"Route registry '{path.name}': value for {key!r} must be a "
                f"string, not {type(value).__name__}"
            )
            raise TypeError(xmsg)
    return data


def _unique(paths: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            ordered.append(path)
    return tuple(ordered)


def build_route_list(
    routes: Mapping[str, str],
    redirects: Mapping[str, str],
) -> tuple[str, ...]:
    """Union the page paths of both registries.

    Primary routes contribute their values (route key → path); redirects
    contribute their keys (old path → new path), since every old path still
    needs a page. Declaration order is kept and each path appears once, at its
    first occurrence.
    """
    paths = _unique([*routes.values(), *redirects.keys()])
    getAppLogger().debug(
        "Route list: %d path(s) from %d route(s) and %d redirect(s)",
        len(paths),
        len(routes),
        len(redirects),
    )
    return paths


def load_route_list(routes_file: Path, redirects_file: Path) -> tuple[str, ...]:
    return build_route_list(
        load_route_registry(routes_file),
        load_route_registry(redirects_file),
    )
