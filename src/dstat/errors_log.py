"""
Non-fatal error log.

With a log file configured, recoverable problems (an invalid or unreadable
directory) are appended there and the run continues. Without one, or for
a fatal problem, the error propagates and ends the run.
"""

import logging
import sys
from typing import Optional

from .exceptions import DStatError, ResourceError
from .logging_config import LOGGER_NAME, get_logger

logger = get_logger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
ERRORS_LOGGER_NAME = f"{LOGGER_NAME}.errors"


class StrictFileHandler(logging.FileHandler):
    """FileHandler whose write failures raise instead of printing a traceback."""

    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        raise ResourceError(self.baseFilename, exc if isinstance(exc, OSError) else None) from exc


class ErrorLog:
    """Funnel for every reportable error of a run.

    Each error produces exactly one message: a log file line when it is
    recoverable and a log file is open, otherwise the raised error itself,
    which the caller prints once on its way out.
    """

    def __init__(self, logfile: Optional[str] = None):
        self.logfile = logfile
        self.reported = 0
        self._handler: Optional[StrictFileHandler] = None
        self._logger = logging.getLogger(ERRORS_LOGGER_NAME)

        if logfile is not None:
            try:
                self._handler = StrictFileHandler(logfile, mode="a", encoding="utf-8")
            except OSError as e:
                raise ResourceError(logfile, e) from e
            self._handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
            logger.debug(f"logging non-fatal errors to {logfile}")

    @property
    def enabled(self) -> bool:
        return self._handler is not None

    def report(self, error: DStatError, fatal: bool = False) -> None:
        """Log ``error`` and continue, or re-raise it.

        Raises:
            DStatError: ``error`` itself when fatal or no log file is open
            ResourceError: If the log file cannot be written
        """
        if fatal or not self.enabled:
            raise error
        # Straight to this log's handler: stderr handlers and other open logs never see it
        record = self._logger.makeRecord(
            self._logger.name, logging.ERROR, __file__, 0, error.log_line(), None, None
        )
        self._handler.handle(record)
        self.reported += 1

    def close(self) -> None:
        if self._handler is None:
            return
        self._handler.close()
        self._handler = None
