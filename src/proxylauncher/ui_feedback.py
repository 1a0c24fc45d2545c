"""Blocking message dialogs for ProxyLauncher"""

import logging
import shutil
import subprocess

from .platform_utils import IS_MACOS, IS_WINDOWS

logger = logging.getLogger(__name__)

ERROR_TITLE = "ProxyLauncher Error"
INFO_TITLE = "ProxyLauncher Information"

# MessageBoxW flags
MB_ICONERROR = 0x10
MB_ICONINFORMATION = 0x40


def _windows_message_box(title: str, message: str, icon: int):
    import ctypes

    ctypes.windll.user32.MessageBoxW(None, message, title, icon)


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _macos_dialog(title: str, message: str, icon: str):
    script = (
        f"display dialog {_applescript_quote(message)} with title {_applescript_quote(title)} "
        f'with icon {icon} buttons {{"OK"}} default button "OK"'
    )
    subprocess.run(["osascript", "-e", script], capture_output=True)


def _linux_dialog(title: str, message: str, kind: str):
    if shutil.which("zenity"):
        subprocess.run(["zenity", f"--{kind}", "--title", title, "--text", message], capture_output=True)
    elif shutil.which("notify-send"):
        subprocess.run(["notify-send", title, message], timeout=2, capture_output=True)
    else:
        logger.warning("No dialog tool found (zenity, notify-send)")


def _show(title: str, message: str, is_error: bool):
    try:
        if IS_WINDOWS:
            _windows_message_box(title, message, MB_ICONERROR if is_error else MB_ICONINFORMATION)
        elif IS_MACOS:
            _macos_dialog(title, message, "stop" if is_error else "note")
        else:
            _linux_dialog(title, message, "error" if is_error else "info")
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Could not display dialog %r: %s", title, e)


def show_error(message: str):
    """Show an error dialog"""
    _show(ERROR_TITLE, message, is_error=True)


def show_info(message: str):
    """Show an information dialog"""
    _show(INFO_TITLE, message, is_error=False)
