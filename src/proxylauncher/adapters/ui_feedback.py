"""UI feedback adapter."""

from __future__ import annotations

import logging

from ..ui_feedback import show_error, show_info

logger = logging.getLogger(__name__)


class UIFeedbackAdapter:
    def __init__(self, dialogs_enabled: bool = True):
        self._dialogs_enabled = dialogs_enabled

    def show_error(self, message: str) -> None:
        if self._dialogs_enabled:
            show_error(message)
        else:
            logger.info("Dialogs disabled, error not shown: %s", message)

    def show_info(self, message: str) -> None:
        if self._dialogs_enabled:
            show_info(message)
        else:
            logger.info("Dialogs disabled, info not shown: %s", message)
