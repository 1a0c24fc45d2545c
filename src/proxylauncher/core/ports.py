"""Core ports (interfaces) for ProxyLauncher.

These protocols define the boundaries between the launch orchestration and
the platform-specific adapters (filesystem, process spawning, dialogs). They
are intentionally small and capability-oriented so the core can be tested
without touching the filesystem or starting processes.
"""

from __future__ import annotations

from typing import Any, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .config_model import LaunchPlan


@runtime_checkable
class FileChecker(Protocol):
    """Answers whether a path names an existing regular file."""

    def is_file(self, path: str) -> bool:
        """Return True for an existing file, False for directories or missing paths."""


@runtime_checkable
class ConfigStore(Protocol):
    """Reads and creates the launcher config file."""

    def read_lines(self, path: str) -> list[str]:
        """Return the config lines; raises SourceUnreadableError on I/O failure."""

    def create_default(self, path: str) -> None:
        """Write the commented default config; raises OSError on failure."""


@runtime_checkable
class WindowVisibility(Protocol):
    """Platform strategy for hiding the target's window."""

    def apply_window_visibility(self, popen_kwargs: dict[str, Any], hidden: bool) -> None:
        """Adjust the keyword arguments passed to subprocess.Popen."""


@runtime_checkable
class ProcessSpawner(Protocol):
    """Runs the target and waits for it."""

    def spawn(self, plan: "LaunchPlan") -> int:
        """Run the plan with inherited stdio; return the exit code.

        Raises LaunchError when the process cannot be started.
        """


@runtime_checkable
class EditorLauncher(Protocol):
    """Opens a file in the platform's default editor."""

    def open(self, path: str) -> None:
        """Start the editor without waiting; raises OSError on failure."""


@runtime_checkable
class UIFeedback(Protocol):
    """User-visible dialogs."""

    def show_error(self, message: str) -> None:
        """Display an error message."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
