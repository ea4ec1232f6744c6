# src/docsbuild/config/config_validate.py


from dataclasses import dataclass, field
from typing import Any, get_type_hints

from docsbuild.constants import DEFAULT_STRICT_CONFIG, LOG_LEVELS
from docsbuild.logs import getAppLogger

from .config_types import ProjectConfig


# Field-specific examples for better error messages
FIELD_EXAMPLES: dict[str, str] = {
    "entry": '{"docs": "./docs/src/index.js"}',
    "out_dir": '"dist"',
    "tokens_dir": '"packages/bpk-tokens/tokens"',
    "postcss_plugins": '["autoprefixer"]',
    "log_level": '"debug"',
    "strict_config": "true",
}


@dataclass
class ValidationSummary:
    valid: bool = True
    strict: bool = DEFAULT_STRICT_CONFIG
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _type_label(expected: Any) -> str:
    origin = getattr(expected, "__origin__", None)
    if origin is dict:
        return "object of strings"
    if origin is list:
        return "list of strings"
    return getattr(expected, "__name__", str(expected))


def _conforms(value: Any, expected: Any) -> bool:
    origin = getattr(expected, "__origin__", None)
    if origin is dict:
        return isinstance(value, dict) and all(
            isinstance(k, str) and isinstance(v, str) for k, v in value.items()
        )
    if origin is list:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    if expected is bool:
        return isinstance(value, bool)
    return isinstance(value, expected)


def _check_value(key: str, value: Any, expected: Any, summary: ValidationSummary) -> None:
    if not _conforms(value, expected):
        example = FIELD_EXAMPLES.get(key)
        hint = f" (e.g. {example})" if example else ""
        summary.errors.append(
            f"`{key}` must be {_type_label(expected)}, "
            f"not {type(value).__name__}{hint}"
        )
        return

    if key == "entry" and not value:
        summary.errors.append("`entry` must declare at least one entry point")
    if key == "log_level" and value.lower() not in LOG_LEVELS:
        summary.errors.append(
            f"`log_level` must be one of {', '.join(LOG_LEVELS)}, not {value!r}"
        )


def validate_config(
    parsed_cfg: Any,
    *,
    strict: bool | None = None,
) -> ValidationSummary:
    """Validate a raw project config mapping.

    Unknown keys are warnings, promoted to errors under strict mode.
    Type errors are always errors.
    """
    logger = getAppLogger()
    summary = ValidationSummary()

    if not isinstance(parsed_cfg, dict):
        summary.errors.append(
            f"Configuration must be an object, not {type(parsed_cfg).__name__}"
        )
        summary.valid = False
        return summary

    logger.trace(f"[validate_config] Validating {len(parsed_cfg)} key(s)")

    strict_from_cfg = parsed_cfg.get("strict_config")
    if strict is not None:
        summary.strict = strict
    elif isinstance(strict_from_cfg, bool):
        summary.strict = strict_from_cfg

    schema = get_type_hints(ProjectConfig)
    for key, value in parsed_cfg.items():
        if key not in schema:
            msg = f"Unknown key `{key}` in configuration"
            if summary.strict:
                summary.errors.append(msg)
            else:
                summary.warnings.append(msg)
            continue
        _check_value(key, value, schema[key], summary)

    for warning in summary.warnings:
        logger.warning(warning)

    summary.valid = not summary.errors
    return summary
