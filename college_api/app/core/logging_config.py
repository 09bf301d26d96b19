"""
Logging setup for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger exactly once, using the format from
``Settings.log_format``.
"""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive; unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to append log lines to.  Empty or ``None`` disables it.
    fmt : str
        ``logging.Formatter`` format string.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by an earlier create_app().
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
