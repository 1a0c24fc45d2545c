"""Filesystem adapters for the config file and the target check."""

from __future__ import annotations

from pathlib import Path

from ..core.config_parser import render_default_config
from ..core.errors import SourceUnreadableError

# utf-8-sig drops the BOM some Windows editors prepend
READ_ENCODING = "utf-8-sig"
WRITE_ENCODING = "utf-8"


class LocalFileChecker:
    def is_file(self, path: str) -> bool:
        return Path(path).is_file()


class ConfigFileStore:
    def read_lines(self, path: str) -> list[str]:
        try:
            text = Path(path).read_text(encoding=READ_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadableError(path, str(e)) from e
        # Only newlines end a line; form feeds and other separators stay in the value
        if text.endswith("\n"):
            text = text[:-1]
        return text.split("\n") if text else []

    def create_default(self, path: str) -> None:
        Path(path).write_text(render_default_config(), encoding=WRITE_ENCODING)
