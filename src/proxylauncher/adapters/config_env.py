"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        debug=env_config.DEBUG,
        dialogs_enabled=env_config.DIALOGS_ENABLED,
        config_path=env_config.CONFIG_PATH or None,
    )
