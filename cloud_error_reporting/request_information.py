# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Container for HTTP request information extracted from framework requests."""

from typing import Any


class RequestInformationContainer:
    """Normalized subset of an HTTP request.

    Every field starts as ``None``, meaning "not extracted". Setters ignore
    values of the wrong type so extractors can pass framework values through
    without checking them first.

    Attributes:
        method: HTTP method (e.g. "GET")
        url: Request URL
        user_agent: Value of the User-Agent header
        referrer: Value of the Referer header
        status_code: HTTP status code of the response
        remote_address: Address of the client that made the request
    """

    def __init__(self) -> None:
        self.method: str | None = None
        self.url: str | None = None
        self.user_agent: str | None = None
        self.referrer: str | None = None
        self.status_code: int | None = None
        self.remote_address: str | None = None

    def set_method(self, method: Any) -> "RequestInformationContainer":
        if isinstance(method, str):
            self.method = method
        return self

    def set_url(self, url: Any) -> "RequestInformationContainer":
        if isinstance(url, str):
            self.url = url
        return self

    def set_user_agent(self, user_agent: Any) -> "RequestInformationContainer":
        if isinstance(user_agent, str):
            self.user_agent = user_agent
        return self

    def set_referrer(self, referrer: Any) -> "RequestInformationContainer":
        if isinstance(referrer, str):
            self.referrer = referrer
        return self

    def set_status_code(self, status_code: Any) -> "RequestInformationContainer":
        # bool is an int subclass but never a status code
        if isinstance(status_code, int) and not isinstance(status_code, bool):
            self.status_code = status_code
        return self

    def set_remote_address(self, remote_address: Any) -> "RequestInformationContainer":
        if isinstance(remote_address, str):
            self.remote_address = remote_address
        return self

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were extracted.

        Returns:
            Dictionary of field name to value, without unset fields
        """
        fields = {
            "method": self.method,
            "url": self.url,
            "user_agent": self.user_agent,
            "referrer": self.referrer,
            "status_code": self.status_code,
            "remote_address": self.remote_address,
        }
        return {k: v for k, v in fields.items() if v is not None}

    def __repr__(self) -> str:
        return f"RequestInformationContainer({self.as_dict()!r})"
