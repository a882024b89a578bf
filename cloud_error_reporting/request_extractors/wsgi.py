# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Request information extractor for WSGI environ dictionaries."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..request_information import RequestInformationContainer


def _reconstruct_url(environ: Mapping[str, Any]) -> str:
    # PEP 3333 URL reconstruction
    scheme = environ.get("wsgi.url_scheme", "http")
    url = f"{scheme}://"
    if environ.get("HTTP_HOST"):
        url += environ["HTTP_HOST"]
    else:
        url += environ.get("SERVER_NAME", "")
        port = str(environ.get("SERVER_PORT", ""))
        if port and (scheme, port) not in (("https", "443"), ("http", "80")):
            url += f":{port}"

    url += quote(environ.get("SCRIPT_NAME", ""))
    url += quote(environ.get("PATH_INFO", ""))
    if environ.get("QUERY_STRING"):
        url += f"?{environ['QUERY_STRING']}"
    return url


def remote_address_from_forwarded_for(forwarded_for: str | None) -> str | None:
    """Return the originating client from an X-Forwarded-For header."""
    if not forwarded_for:
        return None
    return forwarded_for.split(",")[0].strip() or None


def extract_wsgi_request_information(
    environ: Mapping[str, Any],
    status_code: int | None = None,
) -> RequestInformationContainer:
    """Extract request information from a WSGI environ.

    Args:
        environ: WSGI environ dictionary
        status_code: Response status code, when known

    Returns:
        Container with the extracted request information
    """
    container = RequestInformationContainer()
    if not isinstance(environ, Mapping):
        return container

    remote_address = (
        remote_address_from_forwarded_for(environ.get("HTTP_X_FORWARDED_FOR"))
        or environ.get("REMOTE_ADDR")
    )

    return (
        container
        .set_method(environ.get("REQUEST_METHOD"))
        .set_url(_reconstruct_url(environ))
        .set_user_agent(environ.get("HTTP_USER_AGENT"))
        .set_referrer(environ.get("HTTP_REFERER"))
        .set_status_code(status_code)
        .set_remote_address(remote_address)
    )
