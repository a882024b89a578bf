# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Error payload accepted by the Cloud Error Reporting API.

An ``ErrorMessage`` mirrors the ``ReportedErrorEvent`` resource of the
``v1beta1`` API. Setters are chainable so hand-built reports read well:

    >>> em = ErrorMessage().set_message("Disk full").set_user("root@nexus")
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .request_information import RequestInformationContainer

DEFAULT_SERVICE_NAME = "python"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class ServiceContext:
    """Service that produced the error.

    Attributes:
        service: Name of the service
        version: Version label of the service, if known
    """
    service: str = DEFAULT_SERVICE_NAME
    version: str | None = None


@dataclass
class HttpRequestContext:
    """HTTP request that was being handled when the error occurred."""
    method: str = ""
    url: str = ""
    user_agent: str = ""
    referrer: str = ""
    response_status_code: int = 0
    remote_ip: str = ""


@dataclass
class ReportLocation:
    """Source location where the error was reported."""
    file_path: str = ""
    line_number: int = 0
    function_name: str = ""


@dataclass
class ErrorContext:
    """Context attached to a reported error."""
    http_request: HttpRequestContext = field(default_factory=HttpRequestContext)
    user: str = ""
    report_location: ReportLocation = field(default_factory=ReportLocation)


class ErrorMessage:
    """A single error report.

    Attributes:
        event_time: ISO-8601 UTC time of the event
        service_context: Service name and version
        message: Error message, normally including a stack trace
        context: HTTP request, user and report location
    """

    def __init__(self) -> None:
        self.event_time: str = _utc_now()
        self.service_context = ServiceContext()
        self.message: str = ""
        self.context = ErrorContext()
        # Construction-site stack trace recorded by the message builder.
        # Never serialized; consumed once by the manual handler.
        self._auto_generated_stack_trace: str | None = None

    def set_event_time_to_now(self) -> "ErrorMessage":
        self.event_time = _utc_now()
        return self

    def set_service_context(self, service: Any, version: Any = None) -> "ErrorMessage":
        """Set the service name and version.

        Args:
            service: Service name; non-string values fall back to the default
            version: Version label; non-string values leave it unset

        Returns:
            self
        """
        self.service_context.service = service if isinstance(service, str) else DEFAULT_SERVICE_NAME
        self.service_context.version = version if isinstance(version, str) else None
        return self

    def set_message(self, message: Any) -> "ErrorMessage":
        self.message = message if isinstance(message, str) else ""
        return self

    def set_http_method(self, method: Any) -> "ErrorMessage":
        self.context.http_request.method = method if isinstance(method, str) else ""
        return self

    def set_url(self, url: Any) -> "ErrorMessage":
        self.context.http_request.url = url if isinstance(url, str) else ""
        return self

    def set_user_agent(self, user_agent: Any) -> "ErrorMessage":
        self.context.http_request.user_agent = user_agent if isinstance(user_agent, str) else ""
        return self

    def set_referrer(self, referrer: Any) -> "ErrorMessage":
        self.context.http_request.referrer = referrer if isinstance(referrer, str) else ""
        return self

    def set_response_status_code(self, status_code: Any) -> "ErrorMessage":
        valid = isinstance(status_code, int) and not isinstance(status_code, bool)
        self.context.http_request.response_status_code = status_code if valid else 0
        return self

    def set_remote_ip(self, remote_ip: Any) -> "ErrorMessage":
        self.context.http_request.remote_ip = remote_ip if isinstance(remote_ip, str) else ""
        return self

    def set_user(self, user: Any) -> "ErrorMessage":
        self.context.user = user if isinstance(user, str) else ""
        return self

    def set_file_path(self, file_path: Any) -> "ErrorMessage":
        self.context.report_location.file_path = file_path if isinstance(file_path, str) else ""
        return self

    def set_line_number(self, line_number: Any) -> "ErrorMessage":
        valid = isinstance(line_number, int) and not isinstance(line_number, bool)
        self.context.report_location.line_number = line_number if valid else 0
        return self

    def set_function_name(self, function_name: Any) -> "ErrorMessage":
        self.context.report_location.function_name = (
            function_name if isinstance(function_name, str) else ""
        )
        return self

    def consume_request_information(self, request_information: RequestInformationContainer) -> "ErrorMessage":
        """Merge extracted request information into the HTTP context.

        Only fields the extractor actually produced overwrite existing values.

        Args:
            request_information: Container returned by a request extractor

        Returns:
            self
        """
        if not isinstance(request_information, RequestInformationContainer):
            return self

        if request_information.method is not None:
            self.set_http_method(request_information.method)
        if request_information.url is not None:
            self.set_url(request_information.url)
        if request_information.user_agent is not None:
            self.set_user_agent(request_information.user_agent)
        if request_information.referrer is not None:
            self.set_referrer(request_information.referrer)
        if request_information.status_code is not None:
            self.set_response_status_code(request_information.status_code)
        if request_information.remote_address is not None:
            self.set_remote_ip(request_information.remote_address)
        return self

    def set_stack_trace_marker(self, stack_trace: str) -> "ErrorMessage":
        """Record where this report was constructed."""
        self._auto_generated_stack_trace = stack_trace
        return self

    @property
    def has_stack_trace_marker(self) -> bool:
        return self._auto_generated_stack_trace is not None

    def consume_stack_trace_marker(self) -> str | None:
        """Take the construction-site stack trace, leaving none behind.

        Returns:
            The recorded stack trace, or None if there is none (or it was
            already consumed)
        """
        marker = self._auto_generated_stack_trace
        self._auto_generated_stack_trace = None
        return marker

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON body for ``events:report``.

        Empty fields are left out.

        Returns:
            Dictionary in the API's camelCase shape
        """
        service_context: dict[str, Any] = {"service": self.service_context.service}
        if self.service_context.version is not None:
            service_context["version"] = self.service_context.version

        http = self.context.http_request
        http_request = _compact({
            "method": http.method,
            "url": http.url,
            "userAgent": http.user_agent,
            "referrer": http.referrer,
            "responseStatusCode": http.response_status_code,
            "remoteIp": http.remote_ip,
        })

        location = self.context.report_location
        report_location = _compact({
            "filePath": location.file_path,
            "lineNumber": location.line_number,
            "functionName": location.function_name,
        })

        context = _compact({
            "httpRequest": http_request,
            "user": self.context.user,
            "reportLocation": report_location,
        })

        body: dict[str, Any] = {
            "eventTime": self.event_time,
            "serviceContext": service_context,
            "message": self.message,
        }
        if context:
            body["context"] = context
        return body

    def __repr__(self) -> str:
        return (
            f"ErrorMessage(service={self.service_context.service!r}, "
            f"version={self.service_context.version!r}, message={self.message[:60]!r})"
        )


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v}
