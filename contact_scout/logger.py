"""Project logger for **ContactScout**.

Progress lines go to *stderr* so that *stdout* stays free for the extracted
record; the CLI may add a rotating log file. Import the shared instance::

    from contact_scout.logger import logger
    logger.info("Scraping data for domain: %s", domain)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "ContactScout"
_LOG_FILE_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the ContactScout logger and return it.

    ``log_file`` adds a size-rotated file next to the stderr output;
    ``replace_handlers=False`` keeps handlers installed by an earlier call.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_LOG_FILE_BYTES,
                backupCount=_LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    # the CLI owns the console; do not duplicate lines through the root logger
    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure"]
