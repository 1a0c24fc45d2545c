"""Editor adapter for opening the freshly created config."""

from __future__ import annotations

import subprocess

from ..platform_utils import get_editor_command


class SystemEditorLauncher:
    def __init__(self, popen=subprocess.Popen):
        self._popen = popen

    def open(self, path: str) -> None:
        self._popen(get_editor_command(path))
