# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Google Cloud Error Reporting client.

Formats application errors into the payload accepted by the Cloud Error
Reporting API and submits them in the background, with integrations for
Flask, Starlette/FastAPI and plain WSGI applications.

Example:
    >>> from cloud_error_reporting import ConfigurationOptions, ErrorReporting
    >>>
    >>> errors = ErrorReporting(ConfigurationOptions(project_id="my-project", key="api-key"))
    >>> errors.report(ValueError("bad input"), "Failed to parse upload")
    >>>
    >>> # Hand-built report
    >>> errors.report(errors.event().set_message("Quota exceeded").set_user("root@nexus"))
"""

__version__ = "0.1.0"

from .client import ErrorReportingClient
from .configuration import Configuration, ConfigurationOptions
from .error_message import ErrorMessage
from .error_reporting import ErrorReporting
from .exceptions import (
    ClientClosedError,
    ConfigurationError,
    ErrorReportingError,
    InvalidReportableError,
    ReportingDisabledError,
)
from .logger import Logger
from .logger_factory import create_logger
from .manual import ReportArguments, make_manual_handler
from .request_information import RequestInformationContainer
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger
from .uncaught import UnhandledErrorSubscription

__all__ = [
    # Version
    "__version__",
    # Entry point
    "ErrorReporting",
    # Configuration
    "Configuration",
    "ConfigurationOptions",
    # Payload
    "ErrorMessage",
    "RequestInformationContainer",
    # Reporting
    "ErrorReportingClient",
    "ReportArguments",
    "make_manual_handler",
    "UnhandledErrorSubscription",
    # Logging
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
    # Exceptions
    "ErrorReportingError",
    "ConfigurationError",
    "InvalidReportableError",
    "ReportingDisabledError",
    "ClientClosedError",
]
