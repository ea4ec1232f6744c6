# src/docsbuild/cli.py

import argparse
import os
import platform
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path

from .assemble import assemble_config, dump_config
from .config import ProjectLayout, load_and_validate_config, resolve_layout
from .constants import LOG_LEVELS
from .environment import resolve_environment
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT, Metadata
from .rules import build_rules, find_rule
from .style import build_style_options
from .types import BuildConfig, TransformRule


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # Argparse message for bad flags is typically
        # "unrecognized arguments: --explian ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description=(
            "Assemble the documentation site's bundler configuration "
            "from the process environment."
        ),
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        metavar="ROOT",
        help="Project root (default: current directory).",
    )
    parser.add_argument("-c", "--config", help="Path to project config file.")
    parser.add_argument(
        "-o",
        "--out",
        help="Write the configuration JSON to this file instead of stdout.",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--explain",
        nargs="+",
        metavar="PATH",
        help="Show which transform rule and loader chain handle each PATH.",
    )
    action.add_argument(
        "--validate-config",
        action="store_true",
        help=(
            "Validate the project config and assemble the configuration "
            "without writing it."
        ),
    )
    action.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


# --------------------------------------------------------------------------- #
# Main entry helpers
# --------------------------------------------------------------------------- #


@dataclass
class _LoadedProject:
    """Container for the loaded project layout."""

    config_path: Path | None
    layout: ProjectLayout


def _initialize_logger(args: argparse.Namespace) -> None:
    logger = getAppLogger()
    # CLI flag, then DOCSBUILD_LOG_LEVEL / LOG_LEVEL, then the default
    logger.setLevel(logger.determineLogLevel(args=args))
    logger.trace("[BOOT] log-level initialized: %s", logger.levelName)
    logger.debug(
        "Runtime: Python %s (%s)",
        platform.python_version(),
        platform.python_implementation(),
    )


def _load_project(args: argparse.Namespace) -> _LoadedProject:
    logger = getAppLogger()
    root = Path(args.root).expanduser() if args.root else Path.cwd()
    if not root.is_dir():
        xmsg = f"Project root is not a directory: {root}"
        raise FileNotFoundError(xmsg)

    config_path, source, cfg = load_and_validate_config(root.resolve(), args.config)
    layout = resolve_layout(cfg, root, source=source)

    # The config file only outranks the built-in default
    if layout.log_level:
        logger.setLevel(
            logger.determineLogLevel(args=args, root_log_level=layout.log_level)
        )
        logger.trace("[CONFIG] log-level resolved: %s", logger.levelName)

    return _LoadedProject(config_path=config_path, layout=layout)


def _explain(rules: Sequence[TransformRule], paths: list[str]) -> None:
    for path in paths:
        rule = find_rule(rules, path)
        if rule is None:
            print(f"{path}: no rule (bundler default)")
            continue
        # Loaders run last-to-first
        chain = " ← ".join(rule.loader_names)
        print(f"{path}: {rule.name} [{chain}]")


def _emit(config: BuildConfig, out: str | None) -> None:
    logger = getAppLogger()
    text = dump_config(config)
    if out is None:
        sys.stdout.write(text)
        return
    out_path = Path(out).expanduser()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    logger.info("📦 Wrote %s configuration to %s", config.mode.value, out_path)


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(
    argv: list[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    logger = getAppLogger()

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        _initialize_logger(args)

        if args.version:
            print(f"{PROGRAM_DISPLAY} {Metadata().version}")
            return 0

        project = _load_project(args)
        if project.config_path:
            logger.info("🔧 Using config: %s", project.config_path.name)
        logger.debug("📁 Project root: %s", project.layout.root)

        env = resolve_environment(os.environ if environ is None else environ)
        if args.explain:
            # Routing needs the rules only; plugins and route registries are skipped
            style = build_style_options(env, project.layout.tokens_dir)
            rules = build_rules(
                env, style, postcss_plugins=project.layout.postcss_plugins
            )
            _explain(rules, args.explain)
        else:
            config = assemble_config(layout=project.layout, env=env)
            if args.validate_config:
                logger.info(
                    "✅ Configuration is valid (%s, %d plugin(s))",
                    env.mode.value,
                    len(config.plugins),
                )
            else:
                _emit(config, args.out)

    except (FileNotFoundError, ValueError, TypeError, RuntimeError) as e:
        # controlled termination
        logger.error(str(e))
        return 1

    except Exception as e:  # noqa: BLE001
        logger.critical("Unexpected internal error: %s", e)
        return 1

    else:
        return 0
