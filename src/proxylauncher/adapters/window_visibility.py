"""Window visibility strategies for the spawned target."""

from __future__ import annotations

import subprocess
from typing import Any

from ..platform_utils import IS_WINDOWS

# subprocess only exports these on Windows
SW_HIDE = 0
STARTF_USESHOWWINDOW = 0x00000001


class NoopWindowVisibility:
    """Platforms without a window concept for child processes."""

    def apply_window_visibility(self, popen_kwargs: dict[str, Any], hidden: bool) -> None:
        return None


class WindowsWindowVisibility:
    """Start the target with SW_HIDE so its main window is not shown."""

    def apply_window_visibility(self, popen_kwargs: dict[str, Any], hidden: bool) -> None:
        if not hidden:
            return
        startupinfo = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
        startupinfo.dwFlags |= STARTF_USESHOWWINDOW
        startupinfo.wShowWindow = SW_HIDE
        popen_kwargs["startupinfo"] = startupinfo


def get_window_visibility():
    """Pick the strategy for the current platform."""
    if IS_WINDOWS:
        return WindowsWindowVisibility()
    return NoopWindowVisibility()
