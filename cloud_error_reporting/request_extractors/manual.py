# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Request information extractor for manually reported errors."""

from collections.abc import Mapping
from typing import Any

from ..request_information import RequestInformationContainer

# Accepted spellings for each field, snake_case first
_FIELD_ALIASES = {
    "method": ("method",),
    "url": ("url",),
    "user_agent": ("user_agent", "userAgent"),
    "referrer": ("referrer",),
    "status_code": ("status_code", "statusCode"),
    "remote_address": ("remote_address", "remoteAddress"),
}


def _lookup(request: Any, names: tuple[str, ...]) -> Any:
    for name in names:
        if isinstance(request, Mapping):
            if name in request:
                return request[name]
        elif hasattr(request, name):
            return getattr(request, name)
    return None


def extract_manual_request_information(request: Any) -> RequestInformationContainer:
    """Extract request information from a mapping or a plain object.

    Args:
        request: Mapping or object with method, url, user_agent, referrer,
            status_code and remote_address entries. Strings, numbers and
            other scalars produce an empty container.

    Returns:
        Container holding the well-typed values that were found
    """
    container = RequestInformationContainer()
    if request is None or isinstance(request, (str, bytes, int, float, bool)):
        return container

    return (
        container
        .set_method(_lookup(request, _FIELD_ALIASES["method"]))
        .set_url(_lookup(request, _FIELD_ALIASES["url"]))
        .set_user_agent(_lookup(request, _FIELD_ALIASES["user_agent"]))
        .set_referrer(_lookup(request, _FIELD_ALIASES["referrer"]))
        .set_status_code(_lookup(request, _FIELD_ALIASES["status_code"]))
        .set_remote_address(_lookup(request, _FIELD_ALIASES["remote_address"]))
    )
