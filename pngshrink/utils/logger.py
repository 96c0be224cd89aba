"""
Logging setup for pngshrink.

This module provides a singleton logger that writes diagnostics to stderr and,
optionally, to a log file with location details. Standard output is left to
the size statistics the tool prints.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional


# ============================================================================
# Custom Levels
# ============================================================================

# Between INFO and WARNING; stage commit/reject decisions are logged here
NOTICE = 25

logging.addLevelName(NOTICE, "NOTICE")


# ============================================================================
# Custom Formatter
# ============================================================================


class DetailedFormatter(logging.Formatter):
    """Formatter with location tracking (module:function:line)."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed location information."""
        record.location = f"{record.module}:{record.funcName}:{record.lineno}"
        return super().format(record)


class SimpleFormatter(logging.Formatter):
    """Console formatter prefixing messages with the program name."""

    def __init__(self, prog: str = "pngshrink"):
        super().__init__(fmt=f"{prog}: %(message)s")


# ============================================================================
# Singleton Logger
# ============================================================================


class PngShrinkLogger:
    """
    Thread-safe singleton logger for pngshrink.

    Features:
    - Console output on stderr at the configured level
    - Optional file output with location tracking and full tracebacks
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """Ensure only one instance exists (thread-safe singleton)."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize logger (only once)."""
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self._logger = logging.getLogger("pngshrink")
        self._logger.setLevel(logging.WARNING)
        self._logger.propagate = False

        self._console_handler: Optional[logging.Handler] = None
        self._file_handler: Optional[logging.Handler] = None

        self._cleanup_handlers()

    def configure(
        self,
        log_level: str = "WARNING",
        log_file: Optional[Path] = None,
        enable_console: bool = True,
    ) -> None:
        """
        Configure the logger with specified settings.

        Args:
            log_level: Logging level (DEBUG, INFO, NOTICE, WARNING, ERROR, CRITICAL)
            log_file: File receiving a detailed copy of every record at ``log_level``
            enable_console: Enable stderr output
        """
        self._cleanup_handlers()
        self._console_handler = None
        self._file_handler = None

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        self._logger.setLevel(level)

        if enable_console:
            self._console_handler = logging.StreamHandler(sys.stderr)
            self._console_handler.setLevel(level)
            self._console_handler.setFormatter(SimpleFormatter())
            self._logger.addHandler(self._console_handler)

        if log_file is not None:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
            self._file_handler.setLevel(level)
            self._file_handler.setFormatter(
                DetailedFormatter(
                    fmt="%(asctime)s [%(levelname)s] [%(location)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(self._file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance."""
        return self._logger

    def _cleanup_handlers(self) -> None:
        """Close and remove all handlers from the logger."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)

    def critical(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.critical(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.warning(msg, *args, **kwargs)

    def notice(self, msg: str, *args, **kwargs) -> None:
        """Log notice message (normal but significant condition)."""
        kwargs.setdefault("stacklevel", 2)
        self._logger.log(NOTICE, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.debug(msg, *args, **kwargs)


# ============================================================================
# Global Logger Instance
# ============================================================================


def get_logger() -> PngShrinkLogger:
    """
    Get the global PngShrinkLogger instance.

    Returns:
        Singleton PngShrinkLogger instance
    """
    return PngShrinkLogger()
