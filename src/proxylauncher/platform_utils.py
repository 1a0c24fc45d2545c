"""Platform detection and cross-platform utilities for ProxyLauncher"""

import platform
import sys
from pathlib import Path

# Platform detection
IS_WINDOWS = sys.platform == "win32"
IS_LINUX = sys.platform.startswith("linux")
IS_MACOS = sys.platform == "darwin"


def get_program_dir() -> Path:
    """Directory holding the running program.

    For a frozen build this is the directory of the executable, otherwise the
    directory of the script that was started.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


def get_editor_command(path: str) -> list[str]:
    """Command that opens ``path`` in the platform's default editor."""
    if IS_WINDOWS:
        return ["notepad.exe", path]
    if IS_MACOS:
        return ["open", path]
    return ["xdg-open", path]


def get_platform_info() -> dict:
    """Get detailed platform information."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "python_version": platform.python_version(),
        "is_windows": IS_WINDOWS,
        "is_linux": IS_LINUX,
        "is_macos": IS_MACOS,
    }
