# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Exceptions for error reporting."""


class ErrorReportingError(Exception):
    """Base exception for error reporting errors."""
    pass


class ConfigurationError(ErrorReportingError, ValueError):
    """Raised when the runtime configuration is invalid or incomplete."""
    pass


class InvalidReportableError(ErrorReportingError, ValueError):
    """Raised when a value handed to ``report`` cannot be turned into a report."""
    pass


class ReportingDisabledError(ErrorReportingError):
    """Raised when the environment check prevents sending errors to the API."""
    pass


class ClientClosedError(ErrorReportingError):
    """Raised when a report is queued on a client that was already closed."""
    pass
