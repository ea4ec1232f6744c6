# src/docsbuild/style.py

"""Style compiler parameters: the design-token prelude and custom functions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .constants import ENV_TOKENS, TOKEN_FILE_SUFFIX
from .environment import BuildEnvironment
from .logs import getAppLogger


# Custom functions registered with the style compiler on every invocation.
# Signature → handler provided by the component library's mixins package.
STYLE_FUNCTIONS: Mapping[str, str] = MappingProxyType(
    {
        "encodebase64($string)": "bpk-mixins/sass-functions#encodebase64",
    }
)


@dataclass(frozen=True)
class StyleOptions:
    prelude: str = ""
    functions: Mapping[str, str] = field(default_factory=lambda: STYLE_FUNCTIONS)

    def loader_options(self) -> dict[str, Any]:
        """Return a fresh style-compiler options mapping.

        Each call builds new dicts so no two loader steps share state.
        """
        return {
            "prependData": self.prelude,
            "sassOptions": {"functions": dict(self.functions)},
        }


def token_file_path(tokens_dir: Path, token_set_id: str) -> Path:
    return tokens_dir / f"{token_set_id}{TOKEN_FILE_SUFFIX}"


def read_token_prelude(tokens_dir: Path, token_set_id: str | None) -> str:
    """Read the token source named by ``token_set_id``.

    Returns an empty string when no token set is selected.

    Raises:
        FileNotFoundError: A token set was selected but its file is missing.
        ValueError: The token file is not valid UTF-8.
    """
    logger = getAppLogger()
    if not token_set_id:
        logger.trace("[read_token_prelude] No token set selected; empty prelude")
        return ""

    path = token_file_path(tokens_dir, token_set_id)
    if not path.is_file():
        xmsg = (
            f"Token file for {ENV_TOKENS}={token_set_id!r} not found: {path}"
        )
        raise FileNotFoundError(xmsg)

    # Bytes are decoded without newline translation so the prelude is exact.
    try:
        prelude = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        xmsg = (
            f"Token file for {ENV_TOKENS}={token_set_id!r} is not valid UTF-8: "
            f"{path} ({e})"
        )
        raise ValueError(xmsg) from e
    logger.debug("Using design tokens from %s (%d bytes)", path, len(prelude))
    return prelude


def build_style_options(env: BuildEnvironment, tokens_dir: Path) -> StyleOptions:
    return StyleOptions(prelude=read_token_prelude(tokens_dir, env.token_set_id))
