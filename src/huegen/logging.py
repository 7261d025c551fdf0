from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console()
# log records stay off stdout so piped output (e.g. --json) remains parseable
_log_console = Console(stderr=True)
_ROOT = "huegen"

def get_logger(name: str = _ROOT) -> logging.Logger:
    """Logger with a single rich handler; module loggers keep their own level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = RichHandler(console=_log_console, show_time=True, show_level=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

def set_level(level: int) -> None:
    """Apply ``level`` to every huegen logger created so far."""
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and name.split(".")[0] == _ROOT:
            logger.setLevel(level)

def console() -> Console:
    return _console
