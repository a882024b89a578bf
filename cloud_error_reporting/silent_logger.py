# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Silent logger implementation for testing."""

from typing import Any

from .logger import Logger


class SilentLogger(Logger):
    """Logger that keeps records in memory instead of printing them.

    All levels are recorded regardless of ``level`` so tests can assert on
    any diagnostic.
    """

    def __init__(self, level: str = "WARNING", name: str | None = None):
        self.level = level.upper()
        self.name = name or "cloud_error_reporting"
        self.logs: list[dict[str, Any]] = []

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        log_entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            log_entry["extra"] = kwargs
        self.logs.append(log_entry)

    def clear_logs(self) -> None:
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored log messages, optionally filtered by level.

        Args:
            level: Optional log level to filter by

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether a message containing ``message`` was logged."""
        return any(message in log["message"] for log in self.get_logs(level))
