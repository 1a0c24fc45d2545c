"""Process adapter: runs the target with inherited standard streams."""

from __future__ import annotations

import logging
import subprocess
from typing import Any

from ..core.config_model import LaunchPlan
from ..core.errors import LaunchError
from ..core.ports import WindowVisibility

logger = logging.getLogger(__name__)


class SubprocessSpawner:
    def __init__(self, window_visibility: WindowVisibility, popen=subprocess.Popen):
        self._window_visibility = window_visibility
        self._popen = popen

    def build_popen_kwargs(self, plan: LaunchPlan) -> dict[str, Any]:
        # stdin/stdout/stderr left as None: the child inherits our streams
        popen_kwargs: dict[str, Any] = {}
        self._window_visibility.apply_window_visibility(popen_kwargs, plan.hide_window)
        return popen_kwargs

    def spawn(self, plan: LaunchPlan) -> int:
        try:
            process = self._popen(plan.argv, **self.build_popen_kwargs(plan))
        except (OSError, ValueError) as e:
            raise LaunchError(str(e)) from e

        logger.debug("Started %s (pid %s)", plan.target_path, process.pid)
        # Ctrl+C reaches the child too; keep waiting until it exits and report its status
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                logger.debug("Interrupted, waiting for %s to exit", plan.target_path)
