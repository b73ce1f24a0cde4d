"""
Logging for wacloud: rich console output and per-send context prefixes.

Every module logs through ``get_logger``. Output goes wherever the host
application's logging is configured; ``setup_logging`` is an opt-in helper
that installs a rich console handler and, in DEV mode, a daily log file.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloud.core.config.settings import settings

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CompactFormatter(logging.Formatter):
    """Keeps only the last two segments of ``wacloud.*`` logger names."""

    def format(self, record):
        # wacloud.messaging.whatsapp.client.whatsapp_client -> client.whatsapp_client
        if record.name.startswith("wacloud."):
            record.name = ".".join(record.name.split(".")[-2:])
        return super().format(record)


_console = Console(
    theme=Theme(
        {
            "info": "cyan",
            "warning": "yellow",
            "error": "bold red",
            "debug": "dim white",
        }
    )
)


class ContextLogger:
    """
    Wraps a stdlib logger and prefixes each message with the send in progress.

    The prefix is ``[T:<phone_number_id>][U:<recipient>]``, either part left
    out when unset. It is part of the message text, so handler formats need
    no extra fields.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _format_message(self, message: str) -> str:
        from .context import get_current_tenant_context, get_current_user_context

        tenant = get_current_tenant_context()
        recipient = get_current_user_context()

        prefix = ""
        if tenant:
            prefix += f"[T:{tenant}]"
        if recipient:
            prefix += f"[U:{recipient}]"
        return f"{prefix} {message}" if prefix else message

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def log(self, level: int, message: str, *args, **kwargs) -> None:
        self.logger.log(level, self._format_message(message), *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> str | None:
    """
    Route the root logger through rich, replacing existing handlers.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR; anything else falls back to INFO
    mode : str
        "DEV" also writes ``wacloud_YYYYMMDD.log`` under ``log_dir``
    log_dir : str, optional
        Log file directory, created if missing
    console_fmt, file_fmt : str, optional
        Format strings for the console and file handlers

    Returns
    -------
    str or None
        Path of the log file, if one was opened
    """
    lvl = level.upper() if level.upper() in LEVELS else "INFO"

    console_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    # time and level come from RichHandler itself
    console_handler.setFormatter(CompactFormatter(console_fmt or "[%(name)s] %(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    logfile = None
    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wacloud_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(
            CompactFormatter(
                file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)
    logging.getLogger("wacloud.logging").info(
        f"Logging at {lvl}" + (f", writing {logfile}" if logfile else "")
    )
    return logfile


def setup_app_logging() -> str | None:
    """Call ``setup_logging`` with LOG_LEVEL, ENVIRONMENT and LOG_DIR."""
    return setup_logging(
        level=settings.log_level,
        mode=settings.environment,
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    """Return a context-prefixing logger for ``name`` (usually ``__name__``)."""
    return ContextLogger(logging.getLogger(name))
