"""Logging helpers for chipscan.

Modules create their own ``logging.getLogger(__name__)`` loggers; the CLI
calls ``setup_logging`` once to route them through rich.
"""

import logging
from enum import Enum
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "chipscan-rich"


class LogLevel(str, Enum):
    """Level names accepted by the CLI and CHIPSCAN_LOG_LEVEL."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None,
) -> None:
    """Configure the root logger with a RichHandler.

    Safe to call repeatedly: the handler is installed once and only the
    level is updated afterwards.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    root_logger.addHandler(handler)

    # Request lines from httpx are noise below DEBUG
    if root_logger.getEffectiveLevel() > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
