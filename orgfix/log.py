"""Logger setup for the ``orgfix`` logger hierarchy.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached once, by the CLI, through :func:`setup_logger`.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = "orgfix"


class OrgfixFormatter(logging.Formatter):
    """``[ 2026-01-06 05:32:41 ] : INFO : orgfix.pages.tables : message``"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"[ {timestamp} ] : {record.levelname} : {record.name} : {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logger(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure the ``orgfix`` logger and return it.

    Calling this again only updates the level; handlers are never duplicated.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = OrgfixFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
