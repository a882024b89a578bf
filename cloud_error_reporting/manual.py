# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Manual error reporting interface.

``report`` accepts its optional arguments in any of the shapes below and
resolves them once, up front, into a ``ReportArguments`` value:

    report(err)
    report(err, request)
    report(err, "additional message")
    report(err, callback)
    report(err, request, "additional message")
    report(err, request, callback)
    report(err, "additional message", callback)
    report(err, request, "additional message", callback)

Keyword arguments work too, e.g. ``report(err, callback=done)``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Union

from .client import Callback, ErrorReportingClient
from .configuration import Configuration
from .error_message import ErrorMessage
from .logger import Logger
from .populate_error_message import populate_error_message
from .request_extractors.manual import extract_manual_request_information


@dataclass(frozen=True)
class RawValue:
    """An exception or any other value that still has to be transcribed."""
    value: Any


@dataclass(frozen=True)
class PrebuiltPayload:
    """An ErrorMessage built by the caller, reported as is."""
    payload: ErrorMessage


Reportable = Union[RawValue, PrebuiltPayload]


def classify(value: Any) -> Reportable:
    """Tag a value handed to ``report`` as raw or pre-built."""
    if isinstance(value, ErrorMessage):
        return PrebuiltPayload(value)
    return RawValue(value)


@dataclass(frozen=True)
class ReportArguments:
    """Optional arguments of ``report`` after call-shape resolution.

    Attributes:
        request: Request object to extract HTTP context from, or None
        additional_message: Message replacing the generated one, or None
        callback: Completion callback, or None
    """
    request: Any = None
    additional_message: str | None = None
    callback: Callback | None = None

    @classmethod
    def resolve(
        cls,
        request: Any = None,
        additional_message: Any = None,
        callback: Any = None,
    ) -> "ReportArguments":
        """Place each positional argument in the slot its type says it fills.

        Arguments that fit no slot are dropped rather than rejected.

        Returns:
            Resolved arguments
        """
        if isinstance(request, str):
            # report(err, message[, callback])
            callback = additional_message
            additional_message = request
            request = None
        elif callable(request):
            # report(err, callback)
            callback = request
            request = None
            additional_message = None

        if callable(additional_message):
            callback = additional_message
            additional_message = None

        if isinstance(request, ErrorMessage) or isinstance(request, (bytes, int, float, bool)):
            request = None
        if not isinstance(additional_message, str):
            additional_message = None
        if not callable(callback):
            callback = None

        return cls(request=request, additional_message=additional_message, callback=callback)


class ManualErrorHandler:
    """Reports errors on behalf of application code.

    Each handler is bound to one client, configuration and logger; it keeps
    no state between calls.
    """

    def __init__(self, client: ErrorReportingClient, config: Configuration, logger: Logger):
        self.client = client
        self.config = config
        self.logger = logger

    def report(
        self,
        error: Any,
        request: Any = None,
        additional_message: Any = None,
        callback: Any = None,
    ) -> ErrorMessage:
        """Report an error to the Error Reporting API.

        Args:
            error: Exception, value of any type, or an ErrorMessage built with
                ``event()`` to control every field of the report
            request: Optional request information, a mapping or object with
                method, url, user_agent, referrer, status_code and
                remote_address
            additional_message: Optional message replacing the one derived
                from ``error``
            callback: Optional ``callback(error, response_body)`` invoked once
                delivery succeeds or finally fails

        Returns:
            The ErrorMessage handed to the client. Delivery continues in the
            background.

        Raises:
            InvalidReportableError: If error is None or an empty string
        """
        arguments = ReportArguments.resolve(request, additional_message, callback)
        error_message = self._prepare(classify(error))

        if arguments.request is not None:
            error_message.consume_request_information(
                extract_manual_request_information(arguments.request)
            )

        if arguments.additional_message is not None:
            error_message.set_message(arguments.additional_message)

        self.client.send_error(error_message, arguments.callback)
        return error_message

    __call__ = report

    def _prepare(self, reportable: Reportable) -> ErrorMessage:
        if isinstance(reportable, PrebuiltPayload):
            return self._prepare_prebuilt(reportable.payload)

        service_context = self.config.get_service_context()
        error_message = ErrorMessage().set_service_context(
            service_context["service"], service_context["version"]
        )
        populate_error_message(reportable.value, error_message)
        return error_message

    def _prepare_prebuilt(self, error_message: ErrorMessage) -> ErrorMessage:
        # The API rejects reports without a stack trace, so the place the
        # message was built stands in for one.
        stack_trace = error_message.consume_stack_trace_marker()
        if stack_trace is not None:
            error_message.set_message(f"{error_message.message}\n{stack_trace}")
        else:
            self.logger.warning(
                f"Encountered a manually constructed error with message \"{error_message.message}\" "
                "but without a construction site stack trace. This error might not be "
                "visible in the error reporting console."
            )
        return error_message


def make_manual_handler(
    client: ErrorReportingClient,
    config: Configuration,
    logger: Logger,
) -> Callable[..., ErrorMessage]:
    """Create a ``report`` function bound to a client, configuration and logger.

    Args:
        client: Initialized API client
        config: Runtime configuration
        logger: Logger for diagnostics

    Returns:
        Bound ``report`` function
    """
    return ManualErrorHandler(client, config, logger).report
