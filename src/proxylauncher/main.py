#!/usr/bin/env python3
"""ProxyLauncher: start a configured target with extra arguments"""

import logging
import sys

from .adapters.config_env import load_app_config
from .adapters.config_file import ConfigFileStore, LocalFileChecker
from .adapters.editor import SystemEditorLauncher
from .adapters.process import SubprocessSpawner
from .adapters.ui_feedback import UIFeedbackAdapter
from .adapters.window_visibility import get_window_visibility
from .config import config
from .core.config_model import AppConfig
from .core.controller import LaunchController
from .platform_utils import get_platform_info, get_program_dir

logger = logging.getLogger(__name__)


def split_launcher_args(argv: list[str]) -> tuple[str | None, list[str]]:
    """Separate a leading config option from the arguments meant for the target.

    Only the first argument is inspected, everything else is forwarded as-is:
        --proxylauncher-config=PATH ARGS...
        --proxylauncher-config PATH ARGS...
    An option with an empty PATH is not consumed and goes to the target unchanged.
    """
    if not argv:
        return None, []

    first = argv[0]
    prefix = config.CONFIG_OPTION + "="
    if first.startswith(prefix) and len(first) > len(prefix):
        return first[len(prefix):], argv[1:]
    if first == config.CONFIG_OPTION and len(argv) > 1 and argv[1]:
        return argv[1], argv[2:]
    return None, list(argv)


def resolve_config_path(cli_path: str | None, app_config: AppConfig) -> str:
    if cli_path:
        return cli_path
    if app_config.config_path:
        return app_config.config_path
    return str(get_program_dir() / config.CONFIG_FILENAME)


def setup_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_controller(app_config: AppConfig) -> LaunchController:
    return LaunchController(
        config_store=ConfigFileStore(),
        file_checker=LocalFileChecker(),
        spawner=SubprocessSpawner(get_window_visibility()),
        ui=UIFeedbackAdapter(dialogs_enabled=app_config.dialogs_enabled),
        editor=SystemEditorLauncher(),
    )


def main(argv: list[str] | None = None) -> int:
    app_config = load_app_config()
    setup_logging(app_config.debug)

    received = sys.argv[1:] if argv is None else argv
    cli_path, target_args = split_launcher_args(received)
    config_path = resolve_config_path(cli_path, app_config)
    logger.debug("Platform: %s", get_platform_info())
    logger.debug("Using config %s", config_path)

    return build_controller(app_config).run(config_path, target_args)


if __name__ == "__main__":
    raise SystemExit(main())
