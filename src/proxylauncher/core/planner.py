"""Turn a validated LaunchConfig and the received arguments into a LaunchPlan."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .config_model import LaunchConfig, LaunchPlan
from .config_parser import ORDER_BEFORE
from .tokenizer import tokenize


def resolve_target(target: str, base_dir: str | os.PathLike[str]) -> str:
    """Return ``target`` unchanged if absolute, else joined onto ``base_dir``."""
    if os.path.isabs(target):
        return target
    return os.path.normpath(os.path.join(os.fspath(base_dir), target))


def compose_args(config: LaunchConfig, received_args: Sequence[str]) -> list[str]:
    extra = tokenize(config.extra_args) if config.extra_args else []
    if config.extra_args_order == ORDER_BEFORE:
        return [*extra, *received_args]
    return [*received_args, *extra]


def plan_launch(
    config: LaunchConfig,
    received_args: Sequence[str],
    base_dir: str | os.PathLike[str],
) -> LaunchPlan:
    """Build the launch plan.

    No filesystem access happens here: the caller is expected to have checked
    that the resolved target exists.
    """
    return LaunchPlan(
        target_path=resolve_target(config.target, base_dir),
        args=tuple(compose_args(config, received_args)),
        hide_window=config.hide_target,
    )
