from __future__ import annotations

import logging
import threading
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import FALLBACK_CONFIG

LOGGER_NAME = "fallback_value"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}

_configure_lock = threading.Lock()


class _RichConsoleHandler(logging.Handler):
    """Console handler rendering ``[LEVEL] message [file.py:line]``."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        level = record.levelname
        text = Text()
        text.append(f"[{level}]", style=_LEVEL_STYLES.get(level, ""))
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            self._console.print(text, soft_wrap=True, highlight=False)
            if record.exc_info:
                self._console.print_exception()
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the package logger.

    Repeated calls only update the level. Without ``level`` the value of
    ``FALLBACK_CONFIG.log_level`` is used.
    """

    logger = get_logger()
    resolved = FALLBACK_CONFIG.log_level_number if level is None else level
    with _configure_lock:
        if not any(isinstance(h, _RichConsoleHandler) for h in logger.handlers):
            logger.addHandler(_RichConsoleHandler())
        logger.setLevel(resolved)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
