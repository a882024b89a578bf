# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    # Above every level the library emits
    "SILENT": logging.CRITICAL + 10,
}


class StdoutLogger(Logger):
    """Logger that writes one JSON object per line to stdout.

    Records are also passed to a stdlib logger of the same name so that
    host applications and pytest's ``caplog`` can capture them.
    """

    def __init__(self, level: str = "WARNING", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Minimum level to output (DEBUG, INFO, WARNING, ERROR, SILENT)
            name: Logger name, defaults to "cloud_error_reporting"

        Raises:
            ValueError: If level is not recognized
        """
        self.level = level.upper()
        self.name = name or "cloud_error_reporting"

        if self.level not in _LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(_LEVELS.keys())}")

        self._stdlib_logger = logging.getLogger(self.name)
        self._stdlib_logger.setLevel(logging.NOTSET)

    def is_enabled_for(self, level: str) -> bool:
        return _LEVELS[level] >= _LEVELS[self.level]

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        if not self.is_enabled_for(level):
            return

        exc_info = kwargs.pop("exc_info", None)

        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            log_entry["extra"] = kwargs

        try:
            print(json.dumps(log_entry, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(_LEVELS[level], message, exc_info=exc_info, extra=extra)
