# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Shared report path for framework integrations."""

from ..client import ErrorReportingClient
from ..configuration import Configuration
from ..error_message import ErrorMessage
from ..populate_error_message import populate_error_message
from ..request_information import RequestInformationContainer


def report_request_error(
    client: ErrorReportingClient,
    config: Configuration,
    error: BaseException,
    request_information: RequestInformationContainer,
) -> ErrorMessage:
    """Build and send a report for an exception raised while serving a request.

    Args:
        client: Initialized API client
        config: Runtime configuration supplying the service context
        error: The exception raised by the application
        request_information: Extracted information about the request

    Returns:
        The ErrorMessage handed to the client
    """
    service_context = config.get_service_context()
    error_message = ErrorMessage().set_service_context(
        service_context["service"], service_context["version"]
    )
    populate_error_message(error, error_message)
    error_message.consume_request_information(request_information)
    client.send_error(error_message)
    return error_message
