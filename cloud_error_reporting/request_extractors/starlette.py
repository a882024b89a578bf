# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Request information extractor for Starlette and FastAPI requests."""

from typing import TYPE_CHECKING

from ..request_information import RequestInformationContainer
from .wsgi import remote_address_from_forwarded_for

if TYPE_CHECKING:
    from starlette.requests import Request


def extract_starlette_request_information(
    request: "Request",
    status_code: int | None = None,
) -> RequestInformationContainer:
    """Extract request information from a Starlette request.

    Args:
        request: Incoming Starlette/FastAPI request
        status_code: Response status code, when known

    Returns:
        Container with the extracted request information
    """
    remote_address = remote_address_from_forwarded_for(request.headers.get("x-forwarded-for"))
    if remote_address is None and request.client is not None:
        remote_address = request.client.host

    return (
        RequestInformationContainer()
        .set_method(request.method)
        .set_url(str(request.url))
        .set_user_agent(request.headers.get("user-agent"))
        .set_referrer(request.headers.get("referer"))
        .set_status_code(status_code)
        .set_remote_address(remote_address)
    )
