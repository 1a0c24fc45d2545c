"""Core configuration and launch plan models (structured view)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    debug: bool
    dialogs_enabled: bool
    config_path: str | None = None


@dataclass(frozen=True)
class LaunchConfig:
    target: str
    extra_args: str = ""
    extra_args_order: str | None = None
    hide_target: bool = False


@dataclass(frozen=True)
class LaunchPlan:
    """Resolved target, final argument vector and window hint for one launch."""

    target_path: str
    args: tuple[str, ...]
    hide_window: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.target_path, *self.args]
