# src/docsbuild/types.py

"""Immutable configuration entities handed to the bundler engine."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypedDict

from typing_extensions import NotRequired

from .environment import BuildMode


def freeze_options(options: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Return a read-only view over a private copy of ``options``.

    Nested mappings are frozen the same way and lists become tuples, so no
    value reachable from the result can be mutated in place.
    """
    return MappingProxyType({k: _freeze(v) for k, v in (options or {}).items()})


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return freeze_options(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    """Convert read-only views and tuples back into plain JSON-ready values."""
    if isinstance(value, Mapping):
        return {str(k): _thaw(v) for k, v in value.items()}
    if isinstance(value, (tuple, list)):
        return [_thaw(v) for v in value]
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


# --- serialized shapes ---------------------------------------------------------


class LoaderDict(TypedDict):
    loader: str
    options: NotRequired[dict[str, Any]]


class RuleDict(TypedDict):
    test: str
    exclude: NotRequired[str]
    use: list[LoaderDict]


class PluginDict(TypedDict):
    kind: str
    options: dict[str, Any]


# --- entities --------------------------------------------------------------------


@dataclass(frozen=True)
class LoaderStep:
    name: str
    options: Mapping[str, Any] = field(default_factory=freeze_options)

    def to_dict(self) -> LoaderDict:
        data: LoaderDict = {"loader": self.name}
        if self.options:
            data["options"] = _thaw(self.options)
        return data


@dataclass(frozen=True)
class TransformRule:
    """A file-pattern → loader-chain rule.

    Loader chains are listed in declaration order; the bundler applies them
    right-to-left, so the last step sees the source file first.
    """

    name: str
    test: re.Pattern[str]
    loaders: tuple[LoaderStep, ...]
    exclude: re.Pattern[str] | None = None

    def matches(self, path: str | Path) -> bool:
        text = Path(path).as_posix()
        if not self.test.search(text):
            return False
        return not (self.exclude is not None and self.exclude.search(text))

    @property
    def loader_names(self) -> tuple[str, ...]:
        return tuple(step.name for step in self.loaders)

    def to_dict(self) -> RuleDict:
        data: RuleDict = {
            "test": self.test.pattern,
            "use": [step.to_dict() for step in self.loaders],
        }
        if self.exclude is not None:
            data["exclude"] = self.exclude.pattern
        return data


class PluginKind(str, Enum):
    STYLE_EXTRACTION = "style-extraction"
    DEFINE_INJECTION = "define-injection"
    STATIC_PRERENDER = "static-prerender"
    MODULE_ORDER_OPTIMIZE = "module-order-optimize"
    COPY_FILES = "copy-files"


@dataclass(frozen=True)
class Plugin:
    kind: PluginKind
    parameters: Mapping[str, Any] = field(default_factory=freeze_options)

    def to_dict(self) -> PluginDict:
        return {"kind": self.kind.value, "options": _thaw(self.parameters)}


@dataclass(frozen=True)
class OutputPolicy:
    script_filename: str
    style_filename: str
    path: Path
    library_target: str
    global_object: str

    @property
    def hashed(self) -> bool:
        return "hash]" in self.script_filename

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.script_filename,
            "path": str(self.path),
            "libraryTarget": self.library_target,
            "globalObject": self.global_object,
        }


@dataclass(frozen=True)
class OptimizationPolicy:
    minimize_enabled: bool
    minimizer_chain: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "minimize": self.minimize_enabled,
            "minimizer": list(self.minimizer_chain),
        }


@dataclass(frozen=True)
class DevServerPolicy:
    host: str
    disable_host_check: bool
    fallback_index: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "host": self.host,
            "disableHostCheck": self.disable_host_check,
            "historyApiFallback": {"index": self.fallback_index},
        }


@dataclass(frozen=True)
class BuildConfig:
    """The fully assembled configuration for one bundler run."""

    mode: BuildMode
    entry: Mapping[str, str]
    output: OutputPolicy
    rules: tuple[TransformRule, ...]
    plugins: tuple[Plugin, ...]
    optimization: OptimizationPolicy
    dev_server: DevServerPolicy

    def plugin_kinds(self) -> tuple[PluginKind, ...]:
        return tuple(plugin.kind for plugin in self.plugins)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entry": dict(self.entry),
            "mode": self.mode.value,
            "output": self.output.to_dict(),
            "module": {"rules": [rule.to_dict() for rule in self.rules]},
            "plugins": [plugin.to_dict() for plugin in self.plugins],
            "optimization": self.optimization.to_dict(),
            "devServer": self.dev_server.to_dict(),
        }
