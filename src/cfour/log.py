from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

from cfour.config import LOG_COLOR, LOG_LEVEL

_LEVEL_COLORS = {
    logging.ERROR: "31",
    logging.WARNING: "33",
    logging.INFO: "32",
    logging.DEBUG: "36",
}


def _color_enabled() -> bool:
    return (
        LOG_COLOR
        and os.environ.get("NO_COLOR") is None
        and os.environ.get("TERM") not in (None, "", "dumb")
    )


class _LevelColorFormatter(logging.Formatter):
    def __init__(self, fmt: str, datefmt: str, color: bool) -> None:
        super().__init__(fmt, datefmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        code = _LEVEL_COLORS.get(record.levelno)
        if not self.color or code is None:
            return s
        return f"\x1b[{code}m{s}\x1b[0m"


def setup_logging(level: Optional[Union[int, str]] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the `cfour` logger: console handler, optional file handler.
    Safe to call more than once; handlers are replaced, not stacked.
    """
    logger = logging.getLogger("cfour")
    lvl = level if level is not None else LOG_LEVEL
    logger.setLevel(lvl.upper() if isinstance(lvl, str) else lvl)

    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        _LevelColorFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%H:%M:%S", _color_enabled())
    )
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)

    logger.propagate = False
    return logger
