"""Parser for the line-oriented ``key=value`` launcher config.

Format:
    # comment lines start with '#'
    target=<path, required>
    extraArgs=<string, optional>
    extraArgsOrder=before|after   (required when extraArgs is non-empty)
    hideTarget=true|false|yes|no|on|off   (optional, default false)

Keys are case-insensitive, values may be wrapped in double quotes, and a key
may only appear once.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config_model import LaunchConfig
from .errors import DuplicateKeyError, InvalidValueError, MissingOrderError, MissingTargetError

ORDER_BEFORE = "before"
ORDER_AFTER = "after"
ORDER_VALUES = (ORDER_BEFORE, ORDER_AFTER)

TRUE_VALUES = ("true", "yes", "on")
FALSE_VALUES = ("false", "no", "off")

COMMENT_PREFIX = "#"

DEFAULT_CONFIG_LINES = [
    "# Path to the target executable (absolute or relative to this config file's directory)",
    "target=",
    "",
    "# Additional arguments to pass to the target executable (can be empty)",
    "extraArgs=",
    "",
    "# Whether extra arguments come before or after the received command line arguments"
    " (valid values: before, after)",
    "extraArgsOrder=before",
    "",
    "# Whether to hide the target application's windows (valid values: true/yes/on, false/no/off)",
    "hideTarget=false",
]


def render_default_config() -> str:
    """Return the text written to a freshly created config file."""
    return "\n".join(DEFAULT_CONFIG_LINES) + "\n"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def _parse_order(value: str) -> str:
    lowered = value.lower()
    if lowered not in ORDER_VALUES:
        raise InvalidValueError("extraArgsOrder", value, "'before' or 'after'")
    return lowered


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidValueError("hideTarget", value, "'true/yes/on' or 'false/no/off'")


def parse_config(lines: Iterable[str]) -> LaunchConfig:
    """Parse config lines into a validated LaunchConfig.

    Raises:
        DuplicateKeyError: a key occurs more than once (compared case-insensitively).
        InvalidValueError: extraArgsOrder or hideTarget has an unknown spelling.
        MissingTargetError: no non-empty target was given.
        MissingOrderError: extraArgs is set without extraArgsOrder.
    """
    target = ""
    extra_args = ""
    extra_args_order: str | None = None
    hide_target = False

    seen_keys: set[str] = set()

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue

        key = key.strip()
        value = _unquote(value.strip())
        normalized = key.lower()

        if normalized in seen_keys:
            raise DuplicateKeyError(key)
        seen_keys.add(normalized)

        if normalized == "target":
            target = value
        elif normalized == "extraargs":
            extra_args = value
        elif normalized == "extraargsorder":
            extra_args_order = _parse_order(value)
        elif normalized == "hidetarget":
            hide_target = _parse_bool(value)

    if not target:
        raise MissingTargetError()

    if extra_args and extra_args_order is None:
        raise MissingOrderError()

    return LaunchConfig(
        target=target,
        extra_args=extra_args,
        extra_args_order=extra_args_order,
        hide_target=hide_target,
    )
