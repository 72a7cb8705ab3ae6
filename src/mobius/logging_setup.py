# SPDX-License-Identifier: MIT

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from types import TracebackType
from typing import Optional

from mobius import configuration

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"


class EnsureSessionFilter(logging.Filter):
    """Ensure record.session exists so Formatter never crashes."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def setup_logging(
    level: str = configuration.DEFAULT_LOG_LEVEL, log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configure logging for the `mobius` logger tree.

    Records go to a rotating file in the user log directory; warnings and
    errors are also echoed to stderr. Calling this again only updates the
    level.
    """
    logger = logging.getLogger(configuration.APP_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False

    # Prevent duplicate handlers on repeated initialization
    if logger.handlers:
        return logger

    log_dir = log_dir if log_dir is not None else configuration.LOG_PATH
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{configuration.APP_NAME}.log"

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(
        log_file,
        maxBytes=2 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    # stdout belongs to the command output
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.WARNING)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logger.debug("Logging initialized. log_file=%s", log_file)
    return logger


def install_global_exception_hook(logger: logging.Logger) -> None:
    def _excepthook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
    ) -> None:
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
