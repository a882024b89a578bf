# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Abstract logger interface used for the library's own diagnostics."""

from abc import ABC, abstractmethod
from typing import Any

# Numeric levels accepted in ConfigurationOptions.log_level
LOG_LEVEL_NAMES = {
    0: "SILENT",
    1: "ERROR",
    2: "WARNING",
    3: "INFO",
    4: "DEBUG",
    5: "DEBUG",
}

DEFAULT_LOG_LEVEL = 2


class Logger(ABC):
    """Abstract base class for loggers.

    Implementations only provide ``log``; the level helpers delegate to it.
    """

    @abstractmethod
    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Record a message at the given level.

        Args:
            level: One of DEBUG, INFO, WARNING, ERROR
            message: The log message
            **kwargs: Additional structured data to log
        """
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message from inside an exception handler."""
        kwargs.setdefault("exc_info", True)
        self.log("ERROR", message, **kwargs)
