"""Diagnostic log for the weather server.

The log is advisory: a timestamped line per lifecycle event, appended to a
file. Stdout is never used since it carries the stdio transport.
"""

import logging
import os
import sys

LOGGER_NAME = "nws_mcp_server"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class QuietFileHandler(logging.FileHandler):
    """Append-mode file handler that drops records it cannot write."""

    def __init__(self, filename: str):
        # delay=True so an unwritable path only surfaces on emit, where it is ignored
        super().__init__(filename, mode="a", encoding="utf-8", delay=True)

    def emit(self, record: logging.LogRecord) -> None:
        # FileHandler opens the stream outside its own error handling
        try:
            super().emit(record)
        except OSError:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        pass


def configure_logging(log_file: str | None, level: str | int = logging.INFO) -> logging.Logger:
    """Attach the diagnostic file handler and a stderr handler to the package logger.

    Calling this more than once with the same path does not duplicate handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Prevent propagation to the root logger to avoid duplicate console output
    logger.propagate = False

    if log_file:
        normalized = os.path.abspath(log_file)
        try:
            os.makedirs(os.path.dirname(normalized), exist_ok=True)
        except OSError:
            pass
        if not any(
            isinstance(h, QuietFileHandler) and h.baseFilename == normalized
            for h in logger.handlers
        ):
            handler = QuietFileHandler(normalized)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console)

    return logger
