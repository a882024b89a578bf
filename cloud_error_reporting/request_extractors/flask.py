# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Request information extractor for Flask requests."""

from typing import TYPE_CHECKING

from ..request_information import RequestInformationContainer
from .wsgi import remote_address_from_forwarded_for

if TYPE_CHECKING:
    from flask import Request


def extract_flask_request_information(
    request: "Request",
    status_code: int | None = None,
) -> RequestInformationContainer:
    """Extract request information from a Flask (werkzeug) request.

    Args:
        request: The current Flask request
        status_code: Response status code, when known

    Returns:
        Container with the extracted request information
    """
    remote_address = (
        remote_address_from_forwarded_for(request.headers.get("X-Forwarded-For"))
        or request.remote_addr
    )
    return (
        RequestInformationContainer()
        .set_method(request.method)
        .set_url(request.url)
        .set_user_agent(request.headers.get("User-Agent"))
        .set_referrer(request.headers.get("Referer"))
        .set_status_code(status_code)
        .set_remote_address(remote_address)
    )
