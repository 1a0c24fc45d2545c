"""Core orchestration for ProxyLauncher.

Keeps the load -> validate -> plan -> run flow in one place, decoupled from
filesystem, process and dialog implementations via ports.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from .config_model import LaunchConfig, LaunchPlan
from .config_parser import parse_config
from .errors import ConfigError, ProxyLauncherError, SourceUnreadableError, TargetNotFoundError
from .planner import plan_launch, resolve_target
from .ports import ConfigStore, EditorLauncher, FileChecker, ProcessSpawner, UIFeedback

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

DEFAULT_CONFIG_CREATED_MESSAGE = (
    "No configuration file found. A default configuration has been created. "
    "Please edit it to your needs and restart the application."
)


def describe_error(error: ProxyLauncherError) -> str:
    """User-facing text for a launcher error."""
    if isinstance(error, ConfigError) and not isinstance(error, SourceUnreadableError):
        return f"error parsing config file: {error}"
    return str(error)


class LaunchController:
    """Orchestrates a single launch attempt."""

    def __init__(
        self,
        config_store: ConfigStore,
        file_checker: FileChecker,
        spawner: ProcessSpawner,
        ui: UIFeedback,
        editor: EditorLauncher,
    ):
        self._config_store = config_store
        self._file_checker = file_checker
        self._spawner = spawner
        self._ui = ui
        self._editor = editor

    def load(self, config_path: str) -> LaunchConfig:
        """Read and validate the config file."""
        lines = self._config_store.read_lines(config_path)
        return parse_config(lines)

    def prepare(self, config: LaunchConfig, received_args: Sequence[str], base_dir: str) -> LaunchPlan:
        """Check that the target exists, then build the launch plan."""
        target_path = resolve_target(config.target, base_dir)
        if not self._file_checker.is_file(target_path):
            raise TargetNotFoundError(target_path)
        return plan_launch(config, received_args, base_dir)

    def run(self, config_path: str, received_args: Sequence[str]) -> int:
        """Run one launch attempt and return the process exit status.

        Args:
            config_path: Location of the config file.
            received_args: Arguments this program received, without argv[0].
        """
        if not self._file_checker.is_file(config_path):
            return self._create_default_config(config_path)

        try:
            config = self.load(config_path)
            logger.debug("Loaded config from %s: %s", config_path, config)

            base_dir = os.path.dirname(os.path.abspath(config_path))
            plan = self.prepare(config, received_args, base_dir)
            logger.debug("Launching %s with args %s (hidden=%s)", plan.target_path, plan.args, plan.hide_window)

            exit_code = self._spawner.spawn(plan)
        except ProxyLauncherError as e:
            return self._fail(describe_error(e))

        if exit_code != 0:
            logger.warning("Target exited with status %s", exit_code)
        return exit_code

    def _create_default_config(self, config_path: str) -> int:
        logger.info("Config file %s not found, creating default", config_path)
        try:
            self._config_store.create_default(config_path)
        except OSError as e:
            return self._fail(f"Failed to create default configuration file: {e}")

        try:
            self._editor.open(config_path)
        except OSError as e:
            return self._fail(f"Failed to open new default configuration file: {e}")

        self._ui.show_info(DEFAULT_CONFIG_CREATED_MESSAGE)
        return 0

    def _fail(self, message: str) -> int:
        logger.error(message)
        self._ui.show_error(message)
        return EXIT_FAILURE
